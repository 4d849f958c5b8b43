"""Report generation for spellpy."""

from spellpy.reports.core import create_report_directory, generate_reports
from spellpy.reports.data import ReportData
from spellpy.reports.helpers import format_time

__all__ = [
    "ReportData",
    "create_report_directory",
    "format_time",
    "generate_reports",
]
