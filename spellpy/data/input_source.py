"""Providers for the text to be checked."""

from abc import ABC, abstractmethod
import sys
from typing import TextIO

from loguru import logger

from spellpy.core import InputUnavailable
from spellpy.utils import Constants, expand_file_path


class InputProvider(ABC):
    """Something that yields the text to spell-check."""

    @abstractmethod
    def read_text(self) -> str:
        """Return the full text to check.

        Raises:
            InputUnavailable: If no text can be produced
        """

    @abstractmethod
    def describe(self) -> str:
        """Return a short human-readable name for log messages."""


class FileInputProvider(InputProvider):
    """Reads a UTF-8 text file."""

    def __init__(self, path: str) -> None:
        self.path = expand_file_path(path) or path

    def read_text(self) -> str:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError as e:
            logger.error(f"✗ Input file not found: {self.path}")
            logger.error("  Please check the file path and try again")
            raise InputUnavailable(f"Input file not found: {self.path}") from e
        except PermissionError as e:
            logger.error(f"✗ Permission denied reading file: {self.path}")
            logger.error("  Please check file permissions and try again")
            raise InputUnavailable(f"Permission denied reading input: {self.path}") from e
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading {self.path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise InputUnavailable(f"Cannot decode input file: {self.path}") from e
        except OSError as e:
            logger.error(f"✗ Error reading input file {self.path}: {e}")
            raise InputUnavailable(f"Error reading input file: {self.path}") from e

    def describe(self) -> str:
        return self.path


class StdinInputProvider(InputProvider):
    """Reads piped standard input."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def read_text(self) -> str:
        stream = self.stream if self.stream is not None else sys.stdin
        if stream is None or stream.isatty():
            logger.error("✗ No input selected")
            logger.error("  Pass a file to check, or pipe text on standard input")
            raise InputUnavailable("No input selected")
        try:
            return stream.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"✗ Error reading standard input: {e}")
            raise InputUnavailable("Error reading standard input") from e

    def describe(self) -> str:
        return "<stdin>"


class TextInputProvider(InputProvider):
    """Serves text held in memory."""

    def __init__(self, text: str, name: str = "<text>") -> None:
        self.text = text
        self.name = name

    def read_text(self) -> str:
        return self.text

    def describe(self) -> str:
        return self.name


def get_input_provider(path: str | None) -> InputProvider:
    """Pick a provider for a path; None or '-' selects standard input."""
    if path is None or path == Constants.STDIN_MARKER:
        return StdinInputProvider()
    return FileInputProvider(path)
