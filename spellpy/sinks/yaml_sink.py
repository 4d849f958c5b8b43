"""YAML results for consumption by other tools."""

from typing import TextIO

from loguru import logger
import yaml

from spellpy.core.types import CheckResult
from spellpy.sinks.base import ResultSink


def build_yaml_document(result: CheckResult) -> dict:
    """Build the YAML structure for a check result."""
    return {
        "misspellings": [
            {"word": m.word, "suggestions": list(m.suggestions)} for m in result.misspellings
        ]
    }


class YamlSink(ResultSink):
    """Writes a ``misspellings:`` YAML document."""

    def render(self, result: CheckResult, stream: TextIO) -> None:
        try:
            yaml.safe_dump(
                build_yaml_document(result),
                stream,
                allow_unicode=True,
                default_flow_style=False,
                sort_keys=False,
                width=float("inf"),
            )
        except yaml.YAMLError as e:
            logger.error(f"✗ YAML serialization error: {e}")
            raise
