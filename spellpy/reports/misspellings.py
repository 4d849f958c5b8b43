"""Misspelled words report."""

from pathlib import Path

from spellpy.reports.data import ReportData
from spellpy.reports.helpers import write_report_header
from spellpy.utils import Constants
from spellpy.utils.helpers import write_file_safely


def generate_misspellings_report(data: ReportData, report_dir: Path) -> None:
    """List each distinct misspelled word with its count and suggestions.

    Most frequent words first, ties broken alphabetically.
    """
    filepath = report_dir / "misspellings.txt"
    ordered = sorted(data.suggestions, key=lambda w: (-data.occurrences.get(w, 0), w))

    def write_content(f):
        write_report_header(f, "MISSPELLED WORDS")
        if not ordered:
            f.write("No misspelled words found.\n")
            return
        for word in ordered:
            count = data.occurrences.get(word, 0)
            suggestions = data.suggestions[word]
            rendered = ", ".join(suggestions) if suggestions else Constants.NO_SUGGESTIONS_MARKER
            f.write(f"{word} (x{count}): {rendered}\n")

    write_file_safely(filepath, write_content, "writing misspellings report")
