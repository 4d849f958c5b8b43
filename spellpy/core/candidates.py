"""Single-edit candidate generation.

Each pass applies exactly one edit to the misspelled word and keeps the
results that are known words. Passes are never composed.
"""

from spellpy.core.lexicon import Lexicon
from spellpy.utils.constants import Constants


def _check_word(word: str) -> None:
    if not isinstance(word, str):
        raise TypeError(f"word must be a string, got {type(word)}")


def generate_deletions(word: str, lexicon: Lexicon) -> set[str]:
    """Known words obtained by removing one character."""
    _check_word(word)

    candidates = set()
    for i in range(len(word)):
        deleted = word[:i] + word[i + 1 :]
        if deleted in lexicon:
            candidates.add(deleted)
    return candidates


def generate_substitutions(word: str, lexicon: Lexicon) -> set[str]:
    """Known words obtained by replacing one character with a letter a-z."""
    _check_word(word)

    candidates = set()
    for i, original in enumerate(word):
        for char in Constants.ALPHABET:
            if char == original:
                continue
            changed = word[:i] + char + word[i + 1 :]
            if changed in lexicon:
                candidates.add(changed)
    return candidates


def generate_insertions(word: str, lexicon: Lexicon) -> set[str]:
    """Known words obtained by inserting one letter a-z at any position.

    Positions run from before the first character to after the last one.
    """
    _check_word(word)

    candidates = set()
    for i in range(len(word) + 1):
        for char in Constants.ALPHABET:
            inserted = word[:i] + char + word[i:]
            if inserted in lexicon:
                candidates.add(inserted)
    return candidates


def generate_transpositions(word: str, lexicon: Lexicon) -> set[str]:
    """Known words obtained by swapping two neighbouring characters."""
    _check_word(word)

    candidates = set()
    for i in range(len(word) - 1):
        swapped = word[:i] + word[i + 1] + word[i] + word[i + 2 :]
        if swapped in lexicon:
            candidates.add(swapped)
    return candidates


def generate_splits(word: str, lexicon: Lexicon) -> set[str]:
    """Two known words obtained by inserting one space.

    Both halves must be non-empty and known. The candidate is the two
    halves joined by a single space.
    """
    _check_word(word)

    candidates = set()
    for i in range(len(word) + 1):
        left, right = word[:i], word[i:]
        if left and right and left in lexicon and right in lexicon:
            candidates.add(f"{left}{Constants.SPLIT_SEPARATOR}{right}")
    return candidates


def generate_candidates(word: str, lexicon: Lexicon) -> tuple[str, ...]:
    """Generate every single-edit correction of ``word`` found in ``lexicon``.

    All five passes run unconditionally. The merged result is deduplicated
    and sorted by plain string comparison, so split suggestions ("a cat")
    sort ahead of single words sharing their first piece ("acat...").

    Args:
        word: Lowercase alphabetic word that is not in the lexicon
        lexicon: Known words

    Returns:
        Sorted tuple of candidate corrections (empty if none)
    """
    _check_word(word)

    candidates = (
        generate_deletions(word, lexicon)
        | generate_substitutions(word, lexicon)
        | generate_insertions(word, lexicon)
        | generate_transpositions(word, lexicon)
        | generate_splits(word, lexicon)
    )
    # Swapping identical neighbours reproduces a known input word
    candidates.discard(word)
    return tuple(sorted(candidates))
