"""Stage 1: Lexicon loading."""

import time

from loguru import logger

from spellpy.core import Config
from spellpy.data import load_lexicon
from spellpy.processing.stages.data_models import LexiconData


def load_lexicon_stage(config: Config, verbose: bool = False) -> LexiconData:
    """Load the lexicon and time it.

    Args:
        config: Configuration object
        verbose: Whether to print verbose output

    Returns:
        LexiconData containing the loaded lexicon
    """
    start_time = time.time()

    lexicon = load_lexicon(config, verbose)

    elapsed_time = time.time() - start_time
    if verbose:
        logger.info(f"  Lexicon ready with {len(lexicon)} words")

    return LexiconData(lexicon=lexicon, elapsed_time=elapsed_time)
