"""Data loading: lexicon sources, input text and tokenization."""

from spellpy.data.dictionary import (
    check_lexicon_size,
    load_builtin_words,
    load_lexicon,
    load_word_list,
    read_word_source,
)
from spellpy.data.input_source import (
    FileInputProvider,
    InputProvider,
    StdinInputProvider,
    TextInputProvider,
    get_input_provider,
)
from spellpy.data.tokenizer import tokenize

__all__ = [
    "FileInputProvider",
    "InputProvider",
    "StdinInputProvider",
    "TextInputProvider",
    "check_lexicon_size",
    "get_input_provider",
    "load_builtin_words",
    "load_lexicon",
    "load_word_list",
    "read_word_source",
    "tokenize",
]
