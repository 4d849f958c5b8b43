"""Shared constants for spellpy."""

import string


class Constants:
    """Project-wide constant values."""

    # Candidate generation
    ALPHABET = string.ascii_lowercase
    SPLIT_SEPARATOR = " "

    # Tokenization: maximal runs of ASCII letters, everything else delimits
    TOKEN_PATTERN = r"[A-Za-z]+"

    # Lexicon sources
    DEFAULT_DICTIONARY = "words.txt"
    BUILTIN_WORD_LISTS = ("web2", "gcide")
    COMMENT_PREFIX = "#"

    # Text output contract
    MISSPELLING_SUFFIX = ":"
    NO_SUGGESTIONS_MARKER = "(no suggestions)"

    # Input
    STDIN_MARKER = "-"

    # Reports
    REPORT_FOLDER_SUFFIX = "spellcheck"
