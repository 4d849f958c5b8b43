"""Exception types for spellpy.

All failures happen before candidate generation starts: either the lexicon
cannot be built or the text to check cannot be read. None of them are
retried.
"""


class SpellpyError(Exception):
    """Base class for all fatal spellpy errors."""


class LoadError(SpellpyError):
    """The lexicon source is missing or unreadable."""


class IntegrityError(SpellpyError):
    """The loaded lexicon does not have the expected number of words."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Dictionary size is not as expected: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class InputUnavailable(SpellpyError):
    """The input provider cannot produce text to check."""
