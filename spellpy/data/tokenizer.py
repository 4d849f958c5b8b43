"""Splitting input text into words."""

from collections.abc import Iterator
import re

from spellpy.utils import Constants

_TOKEN_RE = re.compile(Constants.TOKEN_PATTERN)


def tokenize(text: str) -> Iterator[str]:
    """Yield lowercased runs of ASCII letters in order of appearance.

    Any other character (digits, punctuation, accented letters, whitespace)
    is a delimiter. Repeated words are yielded every time they occur.
    """
    for match in _TOKEN_RE.finditer(text):
        yield match.group().lower()
