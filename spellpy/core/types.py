"""Type definitions for spellpy."""

from dataclasses import dataclass, field

# Sorted, deduplicated candidate corrections for one misspelled word
SuggestionSet = tuple[str, ...]


@dataclass(frozen=True)
class Misspelling:
    """An unknown word as it occurred in the input, with its suggestions."""

    word: str
    suggestions: SuggestionSet = ()

    @property
    def has_suggestions(self) -> bool:
        """Whether any correction was found."""
        return bool(self.suggestions)


@dataclass
class CheckResult:
    """Outcome of checking one input text."""

    misspellings: list[Misspelling] = field(default_factory=list)
    words_checked: int = 0
    unique_words: int = 0

    @property
    def misspelled_words(self) -> set[str]:
        """Distinct misspelled words."""
        return {m.word for m in self.misspellings}
