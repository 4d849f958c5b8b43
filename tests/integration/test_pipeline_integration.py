"""Integration tests for the full spell-check pipeline."""

import sys

import pytest
import yaml

from spellpy.__main__ import main
from spellpy.core import Config, InputUnavailable, IntegrityError, LoadError
from spellpy.data import TextInputProvider
from spellpy.processing import run_pipeline

EXPECTED_TEXT = (
    "teh:\nthe\nacat:\na cat\ncat\nzzzz:\n(no suggestions)\ntimes:\n(no suggestions)\n"
)


@pytest.fixture
def dictionary(tmp_path):
    """Dictionary file with five words."""
    path = tmp_path / "words.txt"
    path.write_text("The cat\nsat on a\n")
    return path


@pytest.fixture
def essay(tmp_path):
    """Input text with four misspelled words."""
    path = tmp_path / "essay.txt"
    path.write_text("Teh cat sat on acat.\nZzzz, 42 times!\n")
    return path


class TestRunPipeline:
    """End-to-end pipeline behavior."""

    def test_writes_text_results(self, dictionary, essay, tmp_path) -> None:
        """Output file follows the word/suggestions text format."""
        output = tmp_path / "result.txt"
        config = Config(dictionary=str(dictionary), input=str(essay), output=str(output))
        run_pipeline(config)
        assert output.read_text() == EXPECTED_TEXT

    def test_returns_misspelled_words(self, dictionary, essay, tmp_path) -> None:
        """Returned result lists the misspelled words."""
        config = Config(
            dictionary=str(dictionary), input=str(essay), output=str(tmp_path / "out.txt")
        )
        assert run_pipeline(config).misspelled_words == {"teh", "acat", "zzzz", "times"}

    def test_writes_yaml_results(self, dictionary, essay, tmp_path) -> None:
        """YAML output carries the same misspellings."""
        output = tmp_path / "result.yml"
        config = Config(
            dictionary=str(dictionary), input=str(essay), output=str(output), format="yaml"
        )
        run_pipeline(config)
        words = [m["word"] for m in yaml.safe_load(output.read_text())["misspellings"]]
        assert words == ["teh", "acat", "zzzz", "times"]

    def test_accepts_injected_input_provider(self, dictionary, tmp_path) -> None:
        """An injected provider replaces the configured input."""
        config = Config(dictionary=str(dictionary), output=str(tmp_path / "out.txt"))
        result = run_pipeline(config, input_provider=TextInputProvider("teh"))
        assert result.misspellings[0].suggestions == ("the",)

    def test_parallel_run_matches_single_process(self, dictionary, essay, tmp_path) -> None:
        """Worker processes produce the same results in the same order."""
        single = run_pipeline(
            Config(dictionary=str(dictionary), input=str(essay), output=str(tmp_path / "1.txt"))
        )
        parallel = run_pipeline(
            Config(
                dictionary=str(dictionary),
                input=str(essay),
                output=str(tmp_path / "2.txt"),
                jobs=2,
            )
        )
        assert parallel.misspellings == single.misspellings

    def test_generates_reports(self, dictionary, essay, tmp_path) -> None:
        """Reports directory receives a summary."""
        reports = tmp_path / "reports"
        config = Config(
            dictionary=str(dictionary),
            input=str(essay),
            output=str(tmp_path / "out.txt"),
            reports=str(reports),
        )
        run_pipeline(config)
        assert len(list(reports.glob("*/summary.txt"))) == 1


class TestPipelineErrors:
    """Fatal errors surface to the caller."""

    def test_missing_dictionary_raises_load_error(self, essay, tmp_path) -> None:
        """Unreadable dictionary aborts the run."""
        config = Config(dictionary=str(tmp_path / "missing.txt"), input=str(essay))
        with pytest.raises(LoadError):
            run_pipeline(config)

    def test_unexpected_size_raises_integrity_error(self, dictionary, essay) -> None:
        """Dictionary size mismatch aborts the run."""
        config = Config(dictionary=str(dictionary), input=str(essay), expected_size=72875)
        with pytest.raises(IntegrityError):
            run_pipeline(config)

    def test_missing_input_raises_input_unavailable(self, dictionary, tmp_path) -> None:
        """Unreadable input aborts the run."""
        config = Config(dictionary=str(dictionary), input=str(tmp_path / "missing.txt"))
        with pytest.raises(InputUnavailable):
            run_pipeline(config)


class TestMain:
    """Command-line entry point behavior."""

    def test_prints_results_to_stdout(self, dictionary, essay, monkeypatch, capsys) -> None:
        """Results are printed when no output file is given."""
        monkeypatch.setattr(
            sys, "argv", ["spellpy", str(essay), "--dictionary", str(dictionary), "--unique"]
        )
        main()
        assert capsys.readouterr().out == EXPECTED_TEXT

    def test_exits_with_error_for_missing_dictionary(self, essay, tmp_path, monkeypatch) -> None:
        """Fatal errors exit with status 1."""
        monkeypatch.setattr(
            sys, "argv", ["spellpy", str(essay), "--dictionary", str(tmp_path / "missing.txt")]
        )
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1

    def test_exits_with_error_for_unreadable_include(
        self, dictionary, essay, tmp_path, monkeypatch
    ) -> None:
        """An include path that is a directory exits with status 1."""
        monkeypatch.setattr(
            sys,
            "argv",
            ["spellpy", str(essay), "--dictionary", str(dictionary), "--include", str(tmp_path)],
        )
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1

    def test_exits_with_error_for_invalid_config_file(
        self, essay, tmp_path, monkeypatch
    ) -> None:
        """A malformed JSON config exits with status 1."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")
        monkeypatch.setattr(sys, "argv", ["spellpy", str(essay), "-c", str(config_file)])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
