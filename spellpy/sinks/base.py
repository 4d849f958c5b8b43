"""Base class for result sinks."""

from __future__ import annotations

from abc import ABC, abstractmethod
import sys
from typing import TYPE_CHECKING, TextIO

from loguru import logger

from spellpy.utils.helpers import write_file_safely

if TYPE_CHECKING:
    from spellpy.core.config import Config
    from spellpy.core.types import CheckResult


class ResultSink(ABC):
    """Abstract base class for writing spell-check results."""

    @abstractmethod
    def render(self, result: "CheckResult", stream: TextIO) -> None:
        """Write the formatted result to an open text stream."""

    def write(self, result: "CheckResult", output_path: str | None, config: "Config") -> None:
        """Write results to ``output_path``, or to stdout when it is None."""
        if output_path:
            write_file_safely(
                output_path,
                lambda f: self.render(result, f),
                f"writing {self.get_name()} output file",
            )
            if config.verbose:
                logger.info(f"  Wrote {len(result.misspellings)} misspellings to: {output_path}")
            return

        try:
            self.render(result, sys.stdout)
            sys.stdout.flush()
        except OSError as e:
            logger.error(f"✗ Error writing to stdout: {e}")
            raise

    def get_name(self) -> str:
        """Return sink name for display."""
        return self.__class__.__name__.replace("Sink", "").lower()
