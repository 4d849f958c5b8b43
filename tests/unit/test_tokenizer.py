"""Unit tests for input tokenization."""

from spellpy.data import tokenize


class TestTokenize:
    """Test tokenize behavior."""

    def test_splits_on_punctuation_and_whitespace(self) -> None:
        """Punctuation and spaces separate words."""
        assert list(tokenize("Hello, world!")) == ["hello", "world"]

    def test_splits_on_digits(self) -> None:
        """Digits are delimiters."""
        assert list(tokenize("abc123def")) == ["abc", "def"]

    def test_splits_on_apostrophes(self) -> None:
        """Apostrophes are delimiters."""
        assert list(tokenize("don't")) == ["don", "t"]

    def test_splits_on_accented_letters(self) -> None:
        """Only ASCII letters form words."""
        assert list(tokenize("café")) == ["caf"]

    def test_keeps_repeated_words(self) -> None:
        """Each occurrence is yielded."""
        assert list(tokenize("the The THE")) == ["the", "the", "the"]

    def test_returns_nothing_for_text_without_letters(self) -> None:
        """Text with no letters yields no words."""
        assert not list(tokenize("42 -- 7\n"))
