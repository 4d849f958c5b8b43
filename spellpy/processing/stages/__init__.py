"""Pipeline stages for spell checking."""

from .data_models import LexiconData, OutputResult, StageResult, WordCheckResult
from .lexicon_loading import load_lexicon_stage
from .word_checking import check_words, find_unknown_words

__all__ = [
    # Data models
    "LexiconData",
    "OutputResult",
    "StageResult",
    "WordCheckResult",
    # Stage functions
    "check_words",
    "find_unknown_words",
    "load_lexicon_stage",
]
