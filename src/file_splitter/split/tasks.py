"""Tracking of writer tasks dispatched during a split."""

import threading
from concurrent.futures import Executor, Future
from pathlib import Path

from file_splitter.runner.execution import ExecutorClass
from file_splitter.split.types import MAX_PENDING_GROUPS, RowGroup
from file_splitter.split.writer import write_group


class WriterGroup:
    """
    Writer tasks owned by one split call.

    Groups are submitted as they are flushed and joined once the scan is done.
    Without an executor class, writes run inline on dispatch. At most
    max_pending groups wait in memory; dispatch blocks until a slot frees up.
    """

    def __init__(
        self,
        executor_class: ExecutorClass,
        workers: int | None = None,
        max_pending: int = MAX_PENDING_GROUPS,
    ):
        self._executor: Executor | None = None
        if executor_class is not None:
            self._executor = executor_class(max_workers=workers)
        self._futures: list[Future[Path]] = []
        # Futures before this index finished without error.
        self._settled = 0
        self._slots = threading.BoundedSemaphore(max_pending)

    def __enter__(self) -> "WriterGroup":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True, cancel_futures=exc_type is not None)

    def __len__(self) -> int:
        return len(self._futures)

    def dispatch(self, input_path: str, lines: RowGroup, group_index: int) -> None:
        """Hand a group over to a writer task. The caller must not touch lines afterwards."""
        if self._executor is None:
            future: Future[Path] = Future()
            future.set_result(write_group(input_path, lines, group_index))
        else:
            self._slots.acquire()
            try:
                future = self._executor.submit(write_group, input_path, lines, group_index)
            except BaseException:
                self._slots.release()
                raise
            future.add_done_callback(lambda _: self._slots.release())
        self._futures.append(future)

    def raise_failures(self) -> None:
        """Re-raise the first error among the tasks that already finished."""
        pending = self._futures[self._settled :]
        for future in pending:
            if future.done() and not future.cancelled() and future.exception() is not None:
                raise future.exception()

        while self._settled < len(self._futures) and self._futures[self._settled].done():
            self._settled += 1

    def join(self) -> list[Path]:
        """Wait for every task and return output paths in group order."""
        return [future.result() for future in self._futures]
