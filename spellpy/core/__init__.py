"""Core domain logic for spellpy."""

from .candidates import (
    generate_candidates,
    generate_deletions,
    generate_insertions,
    generate_splits,
    generate_substitutions,
    generate_transpositions,
)
from .config import Config, load_config
from .errors import InputUnavailable, IntegrityError, LoadError, SpellpyError
from .lexicon import Lexicon
from .types import CheckResult, Misspelling, SuggestionSet

__all__ = [
    "CheckResult",
    "Config",
    "InputUnavailable",
    "IntegrityError",
    "Lexicon",
    "LoadError",
    "Misspelling",
    "SpellpyError",
    "SuggestionSet",
    "generate_candidates",
    "generate_deletions",
    "generate_insertions",
    "generate_splits",
    "generate_substitutions",
    "generate_transpositions",
    "load_config",
]
