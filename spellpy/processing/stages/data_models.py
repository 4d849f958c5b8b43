"""Data models for passing information between pipeline stages."""

from dataclasses import dataclass, field

from spellpy.core import Lexicon, SuggestionSet
from spellpy.core.types import CheckResult


@dataclass
class StageResult:
    """Base class for stage results with timing."""

    elapsed_time: float = 0.0


@dataclass
class LexiconData(StageResult):
    """Output from lexicon loading stage."""

    lexicon: Lexicon = field(default_factory=Lexicon)


@dataclass
class WordCheckResult(StageResult):
    """Output from word checking stage."""

    check_result: CheckResult = field(default_factory=CheckResult)
    # Distinct misspelled word -> its suggestions
    suggestions: dict[str, SuggestionSet] = field(default_factory=dict)
    # Distinct misspelled word -> number of occurrences in the input
    occurrences: dict[str, int] = field(default_factory=dict)


@dataclass
class OutputResult(StageResult):
    """Output from result writing stage."""

    misspellings_written: int = 0
