"""Result sinks for spellpy."""

from .base import ResultSink
from .text_sink import TextSink, format_misspelling
from .yaml_sink import YamlSink, build_yaml_document

# Sink registry
_SINKS = {
    "text": TextSink,
    "yaml": YamlSink,
}


def get_result_sink(name: str) -> ResultSink:
    """Factory function to get a result sink instance.

    Args:
        name: Name of output format ('text', 'yaml')

    Returns:
        Result sink instance

    Raises:
        ValueError: If the format name is unknown
    """
    name = name.lower()

    if name not in _SINKS:
        available = ", ".join(_SINKS.keys())
        raise ValueError(f"Unknown output format '{name}'. Available formats: {available}")

    return _SINKS[name]()


def list_formats() -> list[str]:
    """Return list of supported output format names."""
    return list(_SINKS.keys())


__all__ = [
    "ResultSink",
    "TextSink",
    "YamlSink",
    "build_yaml_document",
    "format_misspelling",
    "get_result_sink",
    "list_formats",
]
