"""Dictionary and word list loading."""

from collections.abc import Iterator

from english_words import get_english_words_set  # type: ignore[import-untyped]
from loguru import logger

from spellpy.core import Config, IntegrityError, Lexicon, LoadError
from spellpy.utils import Constants, expand_file_path


def read_word_source(filepath: str) -> Iterator[str]:
    """Yield whitespace-delimited tokens from a word list file.

    Several words may share a line. Tokens are returned as found; lowercasing
    happens when the lexicon is built.

    Raises:
        LoadError: If the file is missing or cannot be read
    """
    filepath = expand_file_path(filepath) or filepath
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            for line in f:
                yield from line.split()
    except FileNotFoundError as e:
        logger.error(f"✗ Dictionary file not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise LoadError(f"Dictionary file not found: {filepath}") from e
    except PermissionError as e:
        logger.error(f"✗ Permission denied reading file: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise LoadError(f"Permission denied reading dictionary: {filepath}") from e
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {filepath}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise LoadError(f"Cannot decode dictionary file: {filepath}") from e
    except OSError as e:
        logger.error(f"✗ Error reading dictionary file {filepath}: {e}")
        raise LoadError(f"Error reading dictionary file: {filepath}") from e


def load_builtin_words(verbose: bool = False) -> set[str]:
    """Load the english-words package word lists."""
    if verbose:
        logger.info("  Loading English words dictionary...")

    try:
        words: set[str] = get_english_words_set(list(Constants.BUILTIN_WORD_LISTS), lower=True)
    except Exception as e:
        logger.error(f"✗ Failed to load English words dictionary: {e}")
        logger.error("  This may indicate a problem with the 'english-words' package")
        logger.error("  Try reinstalling: pip install english-words")
        raise LoadError("Failed to load built-in dictionary") from e
    return words


def load_word_list(filepath: str | None, verbose: bool = False) -> list[str]:
    """Load an extra word list, skipping comment lines.

    Like the main dictionary, a line may hold several whitespace-separated words.
    """
    if not filepath:
        return []

    filepath = expand_file_path(filepath) or filepath
    words = []
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip().lower()
                if line.startswith(Constants.COMMENT_PREFIX):
                    continue
                words.extend(line.split())
    except FileNotFoundError as e:
        logger.error(f"✗ Word list file not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise LoadError(f"Word list file not found: {filepath}") from e
    except PermissionError as e:
        logger.error(f"✗ Permission denied reading file: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise LoadError(f"Permission denied reading word list: {filepath}") from e
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {filepath}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise LoadError(f"Cannot decode word list file: {filepath}") from e
    except OSError as e:
        logger.error(f"✗ Error reading word list file {filepath}: {e}")
        raise LoadError(f"Error reading word list file: {filepath}") from e

    if verbose:
        logger.info(f"  Loaded {len(words)} words from include file")

    return words


def check_lexicon_size(lexicon: Lexicon, expected_size: int | None) -> None:
    """Raise IntegrityError if the lexicon does not have the expected size.

    Does nothing when no size is expected.
    """
    if expected_size is None:
        return
    if len(lexicon) != expected_size:
        logger.error("✗ Dictionary size is not as expected")
        logger.error(f"  Expected {expected_size} words, loaded {len(lexicon)}")
        raise IntegrityError(expected_size, len(lexicon))


def load_lexicon(config: Config, verbose: bool = False) -> Lexicon:
    """Build the lexicon described by the configuration.

    The primary snapshot (dictionary file or built-in word lists) is checked
    against ``expected_size`` before any include-file words are merged in.
    """
    if config.builtin_dictionary:
        lexicon = Lexicon.from_words(load_builtin_words(verbose))
    else:
        if verbose:
            logger.info(f"  Loading dictionary from {config.dictionary}...")
        lexicon = Lexicon.from_words(read_word_source(config.dictionary))

    logger.info(f"  Actual dictionary size: {len(lexicon)}")
    check_lexicon_size(lexicon, config.expected_size)

    extra_words = load_word_list(config.include, verbose)
    if extra_words:
        lexicon = Lexicon.from_words(lexicon.words.union(extra_words))
        if verbose:
            logger.info(f"  Lexicon size with include file: {len(lexicon)}")

    return lexicon
