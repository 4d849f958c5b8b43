"""spellpy - single-edit spell checker.

Checks the words of a text against a lexicon and suggests every known word
reachable by one deletion, substitution, insertion, adjacent transposition
or word split.
"""

from spellpy.core import (
    CheckResult,
    Config,
    Lexicon,
    Misspelling,
    generate_candidates,
    load_config,
)
from spellpy.processing import run_pipeline
from spellpy.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "CheckResult",
    "Config",
    "Lexicon",
    "Misspelling",
    "generate_candidates",
    "load_config",
    "run_pipeline",
    "setup_logger",
]
