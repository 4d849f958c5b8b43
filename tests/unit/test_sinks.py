"""Unit tests for result sinks."""

import io

import pytest
import yaml

from spellpy.core import CheckResult, Config, Misspelling
from spellpy.sinks import TextSink, YamlSink, format_misspelling, get_result_sink


@pytest.fixture
def check_result() -> CheckResult:
    """Two misspellings, one without suggestions."""
    return CheckResult(
        misspellings=[
            Misspelling("acat", ("a cat", "cat")),
            Misspelling("xyz", ()),
        ],
        words_checked=3,
        unique_words=3,
    )


def render(sink, result: CheckResult) -> str:
    stream = io.StringIO()
    sink.render(result, stream)
    return stream.getvalue()


class TestFormatMisspelling:
    """Test the per-word text block."""

    def test_lists_word_then_suggestions(self) -> None:
        """Word line ends with a colon, then one suggestion per line."""
        assert format_misspelling(Misspelling("teh", ("the", "ten"))) == ["teh:", "the", "ten"]

    def test_marks_missing_suggestions(self) -> None:
        """Empty suggestion set prints the no-suggestions marker."""
        assert format_misspelling(Misspelling("xyz")) == ["xyz:", "(no suggestions)"]


class TestTextSink:
    """Test TextSink output."""

    def test_renders_all_misspellings_in_order(self, check_result) -> None:
        """Blocks follow input order."""
        assert render(TextSink(), check_result) == "acat:\na cat\ncat\nxyz:\n(no suggestions)\n"

    def test_renders_nothing_without_misspellings(self) -> None:
        """Clean input produces empty output."""
        assert render(TextSink(), CheckResult()) == ""

    def test_writes_to_output_file(self, check_result, tmp_path) -> None:
        """Output path receives the text."""
        output = tmp_path / "out" / "result.txt"
        TextSink().write(check_result, str(output), Config())
        assert output.read_text().startswith("acat:\n")

    def test_writes_to_stdout_without_output_path(self, check_result, capsys) -> None:
        """Without output path results go to stdout."""
        TextSink().write(check_result, None, Config())
        assert "(no suggestions)" in capsys.readouterr().out


class TestYamlSink:
    """Test YamlSink output."""

    def test_renders_misspellings_document(self, check_result) -> None:
        """YAML document lists words and suggestions."""
        document = yaml.safe_load(render(YamlSink(), check_result))
        assert document == {
            "misspellings": [
                {"word": "acat", "suggestions": ["a cat", "cat"]},
                {"word": "xyz", "suggestions": []},
            ]
        }


class TestGetResultSink:
    """Test sink registry."""

    def test_returns_text_sink(self) -> None:
        """'text' selects TextSink."""
        assert isinstance(get_result_sink("text"), TextSink)

    def test_is_case_insensitive(self) -> None:
        """Format names ignore case."""
        assert isinstance(get_result_sink("YAML"), YamlSink)

    def test_rejects_unknown_format(self) -> None:
        """Unknown formats raise ValueError."""
        with pytest.raises(ValueError, match="Unknown output format"):
            get_result_sink("xml")

    def test_names_sink_for_display(self) -> None:
        """Sink name is derived from its class."""
        assert YamlSink().get_name() == "yaml"
