"""Command-line interface for spellpy."""

import argparse
from multiprocessing import cpu_count

from spellpy.sinks import list_formats
from spellpy.utils import Constants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="spellpy",
        description="Check the spelling of a text file and suggest single-edit corrections",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check a file against words.txt in the current directory
  %(prog)s essay.txt

  # Use another dictionary and make sure it is the expected snapshot
  %(prog)s essay.txt --dictionary ~/dicts/words.txt --expected-size 72875

  # Check piped text with the bundled english-words lists, YAML output
  cat essay.txt | %(prog)s - --builtin-dictionary --format yaml

  # Report each misspelled word once, with reports and 4 workers
  %(prog)s essay.txt --unique --reports ./reports -j 4 -v

  # Using JSON config
  %(prog)s essay.txt --config config.json

Text output, for each misspelled word:
  word:
  suggestion
  ...
or "(no suggestions)" when no single edit gives a known word.

Example config.json:
{
  "dictionary": "words.txt",
  "expected_size": 72875,
  "include": "settings/include.txt",
  "format": "text",
  "unique": false,
  "reports": "./reports",
  "verbose": true,
  "jobs": 1
}
        """,
    )

    # Input
    parser.add_argument(
        "input",
        nargs="?",
        help=f"Text file to check ('{Constants.STDIN_MARKER}' or omitted: standard input)",
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Lexicon
    parser.add_argument(
        "--dictionary",
        type=str,
        default=Constants.DEFAULT_DICTIONARY,
        help="Whitespace-separated word list (default: %(default)s)",
    )
    parser.add_argument(
        "--builtin-dictionary",
        action="store_true",
        help="Use the english-words package word lists instead of --dictionary",
    )
    parser.add_argument("--include", type=str, help="File with additional known words")
    parser.add_argument(
        "--expected-size",
        type=int,
        help="Fail unless the dictionary holds exactly this many distinct words",
    )

    # Output
    parser.add_argument("-o", "--output", type=str, help="Output file (default: stdout)")
    parser.add_argument(
        "--format",
        type=str,
        choices=list_formats(),
        default="text",
        help="Output format (default: %(default)s)",
    )
    parser.add_argument(
        "--unique",
        action="store_true",
        help="Report each misspelled word only at its first occurrence",
    )
    parser.add_argument(
        "--reports",
        type=str,
        help="Directory to generate reports (creates timestamped subdirectories)",
    )
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=1,
        help=f"Number of parallel workers (default: 1, available CPUs: {cpu_count()})",
    )

    return parser
