"""Unit tests for report generation."""

import pytest

from spellpy.reports import ReportData, format_time, generate_reports


@pytest.fixture
def report_data() -> ReportData:
    """Report data for a small run."""
    return ReportData(
        stage_times={"Loading lexicon": 0.5, "Checking words": 0.25},
        input_name="essay.txt",
        lexicon_size=4,
        words_checked=5,
        unique_words=4,
        misspellings_reported=4,
        suggestions={"teh": ("the",), "xyz": ()},
        occurrences={"teh": 2, "xyz": 1},
    )


class TestGenerateReports:
    """Test report directory contents."""

    def test_creates_timestamped_directory(self, report_data, tmp_path) -> None:
        """Reports go into a timestamped subdirectory."""
        report_dir = generate_reports(report_data, tmp_path)
        assert report_dir.name.endswith("_spellcheck")

    def test_writes_summary(self, report_data, tmp_path) -> None:
        """Summary lists the number of checked words."""
        report_dir = generate_reports(report_data, tmp_path)
        assert "Words checked:                      5" in (report_dir / "summary.txt").read_text()

    def test_lists_misspellings_by_frequency(self, report_data, tmp_path) -> None:
        """Most frequent misspelling is listed first."""
        report_dir = generate_reports(report_data, tmp_path)
        lines = (report_dir / "misspellings.txt").read_text().splitlines()
        assert lines[-2:] == ["teh (x2): the", "xyz (x1): (no suggestions)"]

    def test_uses_provided_directory(self, report_data, tmp_path) -> None:
        """An existing report directory is reused."""
        target = tmp_path / "fixed"
        target.mkdir()
        assert generate_reports(report_data, tmp_path, report_dir=target) == target


class TestFormatTime:
    """Test human-readable durations."""

    def test_formats_milliseconds(self) -> None:
        """Sub-second durations use milliseconds."""
        assert format_time(0.25) == "250.0ms"

    def test_formats_minutes(self) -> None:
        """Long durations use minutes."""
        assert format_time(125) == "2m 5.00s"
