"""Plain text results, one misspelling block after another."""

from typing import TextIO

from spellpy.core.types import CheckResult, Misspelling
from spellpy.sinks.base import ResultSink
from spellpy.utils import Constants


def format_misspelling(misspelling: Misspelling) -> list[str]:
    """Format one misspelling as output lines.

    Format:
    word:
    suggestion one
    suggestion two

    or, when nothing was found:
    word:
    (no suggestions)
    """
    lines = [f"{misspelling.word}{Constants.MISSPELLING_SUFFIX}"]
    if misspelling.has_suggestions:
        lines.extend(misspelling.suggestions)
    else:
        lines.append(Constants.NO_SUGGESTIONS_MARKER)
    return lines


class TextSink(ResultSink):
    """Writes the line-oriented text format."""

    def render(self, result: CheckResult, stream: TextIO) -> None:
        for misspelling in result.misspellings:
            for line in format_misspelling(misspelling):
                stream.write(line + "\n")
