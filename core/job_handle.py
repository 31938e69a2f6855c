"""
Background job wrapper for project creation.

The work runs on a QThread so template scaffolding never blocks the UI thread.
The handle is polled from the UI thread; nothing crosses the thread boundary
except the final JobResult value.
"""

import traceback
from dataclasses import dataclass
from typing import Callable, Optional, Union

from PyQt6.QtCore import QThread

from core.project_registry import ProjectDescriptor


@dataclass(frozen=True)
class ErrorDetail:
    """Describes why a job failed."""
    message: str
    error_type: str = "Error"
    traceback: Optional[str] = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Success:
    """Job finished and produced a project."""
    descriptor: ProjectDescriptor


@dataclass(frozen=True)
class Failure:
    """Job finished without producing a project."""
    error: ErrorDetail


JobResult = Union[Success, Failure]


class CreateProjectWorker(QThread):
    """Background worker thread that runs a single project creation."""

    def __init__(self, work: Callable[[], ProjectDescriptor]):
        """
        Initialize worker.

        Args:
            work: Callable that creates the project and returns its descriptor
        """
        super().__init__()
        self.work = work
        self.result: Optional[JobResult] = None

    def run(self):
        """Run the work in the background thread and capture its outcome."""
        try:
            self.result = Success(self.work())
        except Exception as e:
            self.result = Failure(ErrorDetail(
                message=str(e) or type(e).__name__,
                error_type=type(e).__name__,
                traceback=traceback.format_exc(),
            ))


class JobHandle:
    """Owns one running CreateProjectWorker and hands out its result once."""

    def __init__(self, work: Callable[[], ProjectDescriptor]):
        self._worker = CreateProjectWorker(work)
        self._consumed = False
        self._worker.start()

    @property
    def consumed(self) -> bool:
        return self._consumed

    def try_take_result(self) -> Optional[JobResult]:
        """
        Non-blocking check for the job outcome.

        Returns:
            None while the job is still running, otherwise the JobResult

        Raises:
            RuntimeError: If the result was already taken
        """
        if self._consumed:
            raise RuntimeError("Job result has already been consumed")

        if not self._worker.isFinished():
            return None

        # isFinished() is set after run() returned, so this does not block
        self._worker.wait()
        self._consumed = True
        result = self._worker.result
        if result is None:
            result = Failure(ErrorDetail("Worker exited without a result", "RuntimeError"))
        return result

    def wait(self, timeout_ms: Optional[int] = None) -> bool:
        """
        Block until the worker finishes. Only used on shutdown.

        Args:
            timeout_ms: Maximum time to wait, None waits forever

        Returns:
            True if the worker has finished
        """
        if timeout_ms is None:
            return self._worker.wait()
        return self._worker.wait(timeout_ms)
