"""Worker context for multiprocessing without global state."""

from dataclasses import dataclass
import threading

from spellpy.core import Lexicon


@dataclass(frozen=True)
class WorkerContext:
    """Immutable context for multiprocessing workers.

    Attributes:
        lexicon: Known words, shared read-only by every worker
    """

    lexicon: Lexicon

    @classmethod
    def from_lexicon_data(cls, lexicon_data) -> "WorkerContext":
        """Create WorkerContext from the lexicon loading stage output."""
        return cls(lexicon=lexicon_data.lexicon)


# Thread-local storage for worker context
_worker_context = threading.local()


def init_worker(context: WorkerContext) -> None:
    """Initialize worker process with context in thread-local storage.

    Args:
        context: WorkerContext to store in thread-local storage
    """
    _worker_context.value = context


def get_worker_context() -> WorkerContext:
    """Get the current worker's context from thread-local storage.

    Returns:
        WorkerContext for this worker

    Raises:
        RuntimeError: If called before init_worker
    """
    try:
        return _worker_context.value
    except AttributeError as e:
        raise RuntimeError("Worker context not initialized. Call init_worker first.") from e
