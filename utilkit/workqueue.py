"""A pool of worker threads running cooperative work items."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from utilkit.utils import usec_now, usec_since

WORK_ERR = -1
WORK_DONE = 0
WORK_YIELD = 1


class WorkStatus(Enum):
    """Life cycle of a work item."""

    NEW = 0
    QUEUED = 1
    IN_PROGRESS = 2
    COMPLETE = 3


class _WorkerState(Enum):
    OFFLINE = 0
    IDLE = 1
    RUNNING = 2


@dataclass(eq=False)
class Work:
    """A unit of work.

    ``work_fn(arg)`` returns WORK_YIELD (positive) to be queued again, or
    WORK_DONE / WORK_ERR (zero or negative) to finish. ``complete_fn(work)``
    is called once the work is complete.
    """

    work_fn: Callable[[Any], int] | None = None
    arg: Any = None
    complete_fn: Callable[[Work], None] | None = None
    status: WorkStatus = field(default=WorkStatus.NEW, init=False)
    slice_usec: int = field(default=0, init=False)
    cancel_requested: bool = field(default=False, init=False)
    error: BaseException | None = field(default=None, init=False)


@dataclass(eq=False)
class _Worker:
    id: int
    event: threading.Event = field(default_factory=threading.Event)
    state: _WorkerState = _WorkerState.IDLE
    thread: threading.Thread | None = None


class WorkQueue:
    """Run queued :class:`Work` items on ``num_workers`` threads."""

    def __init__(self, num_workers: int) -> None:
        if num_workers < 1:
            raise ValueError("at least one worker is required")
        self._backlog: deque[Work] = deque()
        self._lock = threading.Lock()
        self._stopping = False
        self._workers = [_Worker(i) for i in range(num_workers)]
        for worker in self._workers:
            worker.thread = threading.Thread(
                target=self._run, args=(worker,), name=f"workqueue-{worker.id}",
                daemon=True,
            )
            worker.thread.start()

    @property
    def num_workers(self) -> int:
        return len(self._workers)

    def _wakeup_first_free_worker(self) -> None:
        for worker in self._workers:
            if worker.state is _WorkerState.IDLE:
                worker.event.set()
                break

    def _get_backlog(self, worker: _Worker) -> Work | None:
        with self._lock:
            if self._stopping or not self._backlog:
                worker.state = _WorkerState.IDLE
                return None
            return self._backlog.popleft()

    def _put_backlog(self, work: Work) -> None:
        with self._lock:
            self._backlog.append(work)
            self._wakeup_first_free_worker()

    def _flush_backlog(self) -> None:
        with self._lock:
            while self._backlog:
                self._backlog.popleft().status = WorkStatus.COMPLETE

    @staticmethod
    def _complete(work: Work) -> None:
        work.status = WorkStatus.COMPLETE
        if work.complete_fn is not None:
            work.complete_fn(work)

    def _process(self, work: Work) -> None:
        if work.cancel_requested:
            self._complete(work)
            return
        work.status = WorkStatus.IN_PROGRESS
        start = usec_now()
        try:
            rc = work.work_fn(work.arg)
        except Exception as exc:
            work.error = exc
            rc = WORK_ERR
        work.slice_usec += usec_since(start)
        if rc is None or rc <= 0 or work.cancel_requested:
            self._complete(work)
        else:
            self._put_backlog(work)

    def _run(self, worker: _Worker) -> None:
        while True:
            worker.event.wait()
            worker.event.clear()
            if self._stopping:
                break
            worker.state = _WorkerState.RUNNING
            while (work := self._get_backlog(worker)) is not None:
                self._process(work)
        worker.state = _WorkerState.OFFLINE

    def add_work(self, work: Work) -> None:
        """Queue ``work``; the next free worker picks it up."""
        if work is None or work.work_fn is None:
            raise ValueError("work with a work function is required")
        work.slice_usec = 0
        work.cancel_requested = False
        work.error = None
        work.status = WorkStatus.QUEUED
        with self._lock:
            if self._stopping:
                raise RuntimeError("work queue is destroyed")
            self._backlog.append(work)
            self._wakeup_first_free_worker()

    def backlog_count(self) -> int:
        """Return the number of work items waiting to run."""
        with self._lock:
            return len(self._backlog)

    def cancel_work(self, work: Work) -> None:
        """Ask for ``work`` to be completed without running it again."""
        if work is not None:
            work.cancel_requested = True

    def work_is_complete(self, work: Work) -> bool:
        """True once ``work`` is complete."""
        return work.status is WorkStatus.COMPLETE

    def destroy(self) -> None:
        """Mark queued work complete and stop the workers.

        Work already running is allowed to return first.
        """
        with self._lock:
            if self._stopping:
                return
            self._stopping = True
        self._flush_backlog()
        for worker in self._workers:
            worker.event.set()
        current = threading.current_thread()
        for worker in self._workers:
            if worker.thread is not None and worker.thread is not current:
                worker.thread.join()
        self._flush_backlog()

    def __enter__(self) -> WorkQueue:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()