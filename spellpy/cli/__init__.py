"""Command-line interface for spellpy."""

from spellpy.cli.parser import create_parser

__all__ = ["create_parser"]
