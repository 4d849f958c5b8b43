"""Helper functions for report generation."""

from datetime import datetime
from typing import TextIO


def write_report_header(f: TextIO, title: str) -> None:
    """Write a standard report header.

    Args:
        f: File object to write to
        title: Report title
    """
    f.write("=" * 80 + "\n")
    f.write(f"{title}\n")
    f.write("=" * 80 + "\n")
    f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
    f.write("\n")


def write_subsection_header(f: TextIO, title: str, width: int = 80) -> None:
    """Write a section title underlined with dashes."""
    f.write(f"{title}\n")
    f.write("-" * width + "\n")


def format_time(seconds: float) -> str:
    """Format time in seconds to human-readable string.

    Args:
        seconds: Time in seconds

    Returns:
        Formatted time string
    """
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes = int(seconds // 60)
    secs = seconds % 60
    return f"{minutes}m {secs:.2f}s"
