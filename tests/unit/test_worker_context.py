"""Tests for worker context without global state."""

from multiprocessing import Pool
import threading

import pytest

from spellpy.core import Lexicon
from spellpy.processing.stages.data_models import LexiconData
from spellpy.processing.stages.word_checking import suggest_worker
from spellpy.processing.stages.worker_context import (
    WorkerContext,
    get_worker_context,
    init_worker,
)


# Module-level worker functions (needed for multiprocessing)
def _lexicon_size(_):
    """Worker that returns the size of its lexicon."""
    return len(get_worker_context().lexicon)


class TestWorkerContextBehavior:
    """Tests for WorkerContext behavior."""

    def test_context_can_be_created_from_lexicon_data(self) -> None:
        """Workers need context created from pipeline data."""
        lexicon = Lexicon.from_words(["cat"])
        context = WorkerContext.from_lexicon_data(LexiconData(lexicon=lexicon))
        assert context.lexicon is lexicon

    def test_context_is_immutable(self) -> None:
        """Context cannot be reassigned after creation."""
        context = WorkerContext(lexicon=Lexicon())
        with pytest.raises(AttributeError):
            context.lexicon = Lexicon.from_words(["cat"])  # type: ignore[misc]

    def test_get_context_before_init_raises(self) -> None:
        """Reading context in a thread that never initialized it raises."""
        errors = []

        def read_context():
            try:
                get_worker_context()
            except RuntimeError as e:
                errors.append(e)

        thread = threading.Thread(target=read_context)
        thread.start()
        thread.join()
        assert len(errors) == 1

    def test_suggest_worker_uses_initialized_context(self) -> None:
        """Worker function reads the lexicon from its context."""
        init_worker(WorkerContext(lexicon=Lexicon.from_words(["the"])))
        assert suggest_worker("teh") == ("teh", ("the",))


class TestWorkerContextMultiprocessing:
    """Tests for context delivery to worker processes."""

    def test_workers_receive_lexicon(self) -> None:
        """Each worker sees the lexicon passed to the initializer."""
        context = WorkerContext(lexicon=Lexicon.from_words(["a", "b", "c"]))
        with Pool(processes=2, initializer=init_worker, initargs=(context,)) as pool:
            sizes = pool.map(_lexicon_size, range(4))
        assert sizes == [3, 3, 3, 3]
