"""Processing pipeline for spellpy."""

from spellpy.processing.pipeline import run_pipeline, write_results

__all__ = ["run_pipeline", "write_results"]
