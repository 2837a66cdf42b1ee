from __future__ import annotations

import logging
import queue
import threading
from typing import Any, Dict, Iterator

from .models.snapshot import ProgressSnapshot
from .solvers.genetic import solve
from .validate.checks import validate_params


class SolverWorker:
    """Runs :func:`solve` on a daemon thread and hands snapshots back.

    ``snapshots()`` yields each round's snapshot in order and stops after the
    one marked ``done``. An exception raised by the solver is re-raised in the
    consuming thread. There is no cancellation; a caller that loses interest
    simply stops reading.
    """

    def __init__(self, groups: int, of_size: int, for_rounds: int, leaders: bool = False, **kwargs: Any):
        validate_params(groups, of_size, for_rounds)
        self._args = (groups, of_size, for_rounds, leaders)
        self._kwargs: Dict[str, Any] = kwargs
        self._queue: "queue.Queue[ProgressSnapshot | BaseException]" = queue.Queue()
        self._thread = threading.Thread(target=self._run, name="mixer-solver", daemon=True)

    def start(self) -> "SolverWorker":
        self._thread.start()
        return self

    def _run(self) -> None:
        try:
            solve(*self._args, on_progress=self._queue.put, **self._kwargs)
        except Exception as e:
            logging.getLogger(__name__).exception("Solver thread failed")
            self._queue.put(e)

    def snapshots(self, timeout: float | None = None) -> Iterator[ProgressSnapshot]:
        while True:
            item = self._queue.get(timeout=timeout)
            if isinstance(item, BaseException):
                raise item
            yield item
            if item.done:
                return

    def join(self, timeout: float | None = None) -> None:
        self._thread.join(timeout)
