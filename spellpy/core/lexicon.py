"""Case-insensitive word lexicon."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Lexicon:
    """Immutable set of known words.

    Entries are lowercased on construction and probes are lowercased before
    lookup, so membership is case-insensitive. The frozen dataclass can be
    shared between threads and pickled into worker processes.
    """

    words: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Lexicon:
        """Build a lexicon from any iterable of words, lowercasing each."""
        return cls(frozenset(word.lower() for word in words))

    def contains(self, word: str) -> bool:
        """Return True if the lowercased word is a known word."""
        return word.lower() in self.words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)
