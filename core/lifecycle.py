"""
Project Creation Lifecycle for ProjectLauncher

Drives a single background project creation from start to the automatic
dismissal of its log overlay:

    Idle --start()--> Running --job finished--> AwaitingDismiss --grace elapsed--> Idle

All state changes happen inside start() and tick(), both called from the UI
thread. The host calls tick() on a regular cadence with the elapsed time.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple, Union

from PyQt6.QtCore import QObject, pyqtSignal

from constants import DISMISS_DELAY_SECONDS
from core.dismiss_timer import DismissTimer
from core.errors import ProjectCreationInProgress
from core.job_handle import JobHandle, JobResult, Success
from core.log_buffer import LogBuffer
from core.poller import JobPoller
from core.project_registry import ProjectDescriptor, ProjectRegistry
from core.project_templates import ProjectTemplate

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Externally visible state of the creation lifecycle."""
    IDLE = "idle"
    RUNNING = "running"
    AWAITING_DISMISS = "awaiting_dismiss"


class ProjectCreationController(QObject):
    """Owns the job handle, log buffer, dismiss timer and project list."""

    # Signals
    phase_changed = pyqtSignal(object)  # Phase
    logs_changed = pyqtSignal()
    project_added = pyqtSignal(object)  # ProjectDescriptor
    notification_dismissed = pyqtSignal()

    def __init__(self, template_engine, projects: Optional[List[ProjectDescriptor]] = None,
                 registry: Optional[ProjectRegistry] = None,
                 dismiss_delay: float = DISMISS_DELAY_SECONDS,
                 max_log_lines: Optional[int] = None, parent=None):
        """
        Initialize controller.

        Args:
            template_engine: Object with create(template, target_path) -> ProjectDescriptor
            projects: In-memory project list shared with the caller
            registry: Registry used to persist the project list
            dismiss_delay: Seconds the log overlay stays up after the job finished
            max_log_lines: Optional cap on the log buffer
            parent: Parent QObject
        """
        super().__init__(parent)
        self.template_engine = template_engine
        self.projects = projects if projects is not None else []
        self.registry = registry
        self.dismiss_delay = dismiss_delay

        self._logs = LogBuffer(max_log_lines)
        self._poller = JobPoller(self._logs, self.projects, registry)
        self._job: Optional[JobHandle] = None
        self._timer: Optional[DismissTimer] = None
        self._phase = Phase.IDLE

    def phase(self) -> Phase:
        return self._phase

    def logs(self) -> Tuple[str, ...]:
        return self._logs.snapshot()

    def has_active_job(self) -> bool:
        return self._job is not None

    def start(self, template: ProjectTemplate, path: Union[str, Path]) -> None:
        """
        Start creating a project on a background thread.

        Args:
            template: Template to scaffold
            path: Target directory of the new project

        Raises:
            ProjectCreationInProgress: If the lifecycle is not idle. State is left untouched.
        """
        if self._phase is not Phase.IDLE or self._job is not None:
            raise ProjectCreationInProgress(
                f"Cannot start a new project while creation is {self._phase.value}"
            )

        target = Path(path)
        logger.info(f"Starting to create new project at: {target}")

        self._logs.clear()
        engine = self.template_engine
        self._job = JobHandle(lambda: engine.create(template, target))
        self._set_phase(Phase.RUNNING)
        self.logs_changed.emit()

    def tick(self, elapsed: float) -> None:
        """
        Advance the lifecycle by one scheduling step.

        Args:
            elapsed: Seconds since the previous tick
        """
        # A timer armed during this tick starts counting on the next one
        timer = self._timer

        job = self._job
        if job is not None:
            result = None
            try:
                result = self._poller.poll(job)
            finally:
                # A consumed handle never stays in the slot
                if job.consumed:
                    self._finish_job(result)

        if timer is not None and timer.tick(elapsed):
            self._dismiss()

    def wait_for_job(self, timeout_ms: Optional[int] = None) -> bool:
        """
        Block until the running job (if any) finishes. Used on shutdown.

        Returns:
            True if no job is running anymore
        """
        if self._job is None:
            return True
        return self._job.wait(timeout_ms)

    def _finish_job(self, result: Optional[JobResult]) -> None:
        self._job = None
        self.logs_changed.emit()

        if isinstance(result, Success):
            self.project_added.emit(result.descriptor)

        self._timer = DismissTimer(self.dismiss_delay)
        self._set_phase(Phase.AWAITING_DISMISS)

    def _dismiss(self) -> None:
        self._timer = None
        self._logs.clear()
        self.notification_dismissed.emit()
        self.logs_changed.emit()
        self._set_phase(Phase.IDLE)

    def _set_phase(self, phase: Phase) -> None:
        self._phase = phase
        self.phase_changed.emit(phase)
