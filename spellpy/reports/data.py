"""Report data models."""

from dataclasses import dataclass, field

from spellpy.core import SuggestionSet


@dataclass
class ReportData:
    """Collects data throughout the pipeline for reporting."""

    # Timing
    stage_times: dict[str, float] = field(default_factory=dict)
    start_time: float = 0.0

    # Sources
    input_name: str = ""
    lexicon_size: int = 0

    # Summary stats
    words_checked: int = 0
    unique_words: int = 0
    misspellings_reported: int = 0

    # Distinct misspelled word -> suggestions / occurrence count
    suggestions: dict[str, SuggestionSet] = field(default_factory=dict)
    occurrences: dict[str, int] = field(default_factory=dict)
