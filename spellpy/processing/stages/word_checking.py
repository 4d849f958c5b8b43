"""Stage 2: Word checking with multiprocessing support."""

from collections import Counter
from collections.abc import Iterable
from multiprocessing import Pool
import time
from typing import Any

from loguru import logger
from tqdm import tqdm

from spellpy.core import (
    CheckResult,
    Config,
    Lexicon,
    Misspelling,
    SuggestionSet,
    generate_candidates,
)
from spellpy.processing.stages.data_models import LexiconData, WordCheckResult
from spellpy.processing.stages.worker_context import (
    WorkerContext,
    get_worker_context,
    init_worker,
)


def suggest_worker(word: str) -> tuple[str, SuggestionSet]:
    """Worker function for multiprocessing.

    Args:
        word: Misspelled word

    Returns:
        Tuple of (word, suggestions)
    """
    context = get_worker_context()
    return word, generate_candidates(word, context.lexicon)


def find_unknown_words(tokens: list[str], lexicon: Lexicon) -> list[str]:
    """Return distinct tokens missing from the lexicon, in order of first appearance."""
    unknown: dict[str, None] = {}
    for token in tokens:
        logger.debug(f"Checking: {token}")
        if token not in unknown and token not in lexicon:
            unknown[token] = None
    return list(unknown)


def _suggest_multiprocessing(
    words: list[str],
    lexicon_data: LexiconData,
    config: Config,
    verbose: bool,
) -> dict[str, SuggestionSet]:
    """Generate suggestions using a worker pool."""
    if verbose:
        logger.info(f"  Using {config.jobs} parallel workers")

    context = WorkerContext.from_lexicon_data(lexicon_data)
    suggestions: dict[str, SuggestionSet] = {}

    with Pool(
        processes=config.jobs,
        initializer=init_worker,
        initargs=(context,),
    ) as pool:
        results = pool.imap_unordered(suggest_worker, words)

        if verbose:
            results_wrapped_iter: Any = tqdm(
                results,
                total=len(words),
                desc="Suggesting corrections",
                unit="word",
            )
        else:
            results_wrapped_iter = results

        for word, word_suggestions in results_wrapped_iter:
            suggestions[word] = word_suggestions

    return suggestions


def _suggest_single_threaded(
    words: list[str], lexicon: Lexicon, verbose: bool
) -> dict[str, SuggestionSet]:
    """Generate suggestions in the current process."""
    if verbose:
        words_iter: Iterable[str] = tqdm(words, desc="Suggesting corrections", unit="word")
    else:
        words_iter = words

    return {word: generate_candidates(word, lexicon) for word in words_iter}


def check_words(
    lexicon_data: LexiconData,
    tokens: Iterable[str],
    config: Config,
    verbose: bool = False,
) -> WordCheckResult:
    """Check every token against the lexicon and suggest corrections.

    Suggestions are computed once per distinct unknown word. Misspellings are
    reported in input order, for every occurrence unless ``config.unique``
    is set.

    Args:
        lexicon_data: Output of the lexicon loading stage
        tokens: Lowercase words in input order
        config: Configuration object
        verbose: Whether to print verbose output

    Returns:
        WordCheckResult with the ordered misspellings
    """
    start_time = time.time()

    token_list = list(tokens)
    unknown_words = find_unknown_words(token_list, lexicon_data.lexicon)

    if verbose:
        logger.info(
            f"  Checked {len(token_list)} words, {len(unknown_words)} distinct unknown words"
        )

    if config.jobs > 1 and len(unknown_words) > 1:
        suggestions = _suggest_multiprocessing(unknown_words, lexicon_data, config, verbose)
    else:
        suggestions = _suggest_single_threaded(unknown_words, lexicon_data.lexicon, verbose)

    occurrences = Counter(token for token in token_list if token in suggestions)

    misspellings = []
    reported: set[str] = set()
    for token in token_list:
        if token not in suggestions:
            continue
        if config.unique and token in reported:
            continue
        reported.add(token)
        misspellings.append(Misspelling(word=token, suggestions=suggestions[token]))

    elapsed_time = time.time() - start_time

    return WordCheckResult(
        check_result=CheckResult(
            misspellings=misspellings,
            words_checked=len(token_list),
            unique_words=len(set(token_list)),
        ),
        suggestions={word: suggestions[word] for word in unknown_words},
        occurrences=dict(occurrences),
        elapsed_time=elapsed_time,
    )
