"""Summary report generation."""

from pathlib import Path

from spellpy.reports.data import ReportData
from spellpy.reports.helpers import format_time, write_report_header, write_subsection_header
from spellpy.utils.helpers import write_file_safely


def generate_summary_report(data: ReportData, report_dir: Path) -> None:
    """Generate summary report."""
    filepath = report_dir / "summary.txt"
    total_time = sum(data.stage_times.values())
    without_suggestions = sum(1 for s in data.suggestions.values() if not s)

    def write_summary_content(f):
        write_report_header(f, "SPELL CHECK SUMMARY")

        write_subsection_header(f, "SOURCES", width=70)
        f.write(f"Input:                              {data.input_name}\n")
        f.write(f"Lexicon size:                       {data.lexicon_size:,}\n\n")

        write_subsection_header(f, "CHECK STATISTICS", width=70)
        f.write(f"Words checked:                      {data.words_checked:,}\n")
        f.write(f"Distinct words:                     {data.unique_words:,}\n")
        f.write(f"Distinct misspelled words:          {len(data.suggestions):,}\n")
        f.write(f"Misspellings reported:              {data.misspellings_reported:,}\n")
        f.write(f"Words without suggestions:          {without_suggestions:,}\n\n")

        if data.stage_times:
            write_subsection_header(f, "TIMING BREAKDOWN", width=70)
            for stage, duration in data.stage_times.items():
                pct = (duration / total_time * 100) if total_time > 0 else 0
                f.write(f"{stage:<35} {format_time(duration):>12} ({pct:>5.1f}%)\n")
            f.write("-" * 70 + "\n")
            f.write(f"{'Total':<35} {format_time(total_time):>12}\n")

    write_file_safely(filepath, write_summary_content, "writing summary report")
