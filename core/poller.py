"""
Consumes the outcome of a finished project creation job.
"""

import logging
from typing import List, Optional

from core.job_handle import Failure, JobHandle, JobResult, Success
from core.log_buffer import LogBuffer
from core.project_registry import ProjectDescriptor, ProjectRegistry

logger = logging.getLogger(__name__)


class JobPoller:
    """Checks the active job once per tick and records its outcome."""

    def __init__(self, logs: LogBuffer, projects: List[ProjectDescriptor],
                 registry: Optional[ProjectRegistry] = None):
        """
        Initialize poller.

        Args:
            logs: Log buffer receiving the outcome line
            projects: In-memory project list, appended to on success
            registry: Registry used to persist the project list (optional)
        """
        self.logs = logs
        self.projects = projects
        self.registry = registry

    def poll(self, handle: JobHandle) -> Optional[JobResult]:
        """
        Take the job result if it is ready and record it.

        Args:
            handle: Active job handle

        Returns:
            The consumed JobResult, or None if the job is still running
        """
        result = handle.try_take_result()
        if result is None:
            return None

        if isinstance(result, Success):
            self._record_success(result.descriptor)
        elif isinstance(result, Failure):
            self._record_failure(result)
        return result

    def _record_success(self, descriptor: ProjectDescriptor) -> None:
        self.logs.append(f"Successfully created new project at: {descriptor.path}")
        logger.info(f"Successfully created new project at: {descriptor.path}")

        self.projects.append(descriptor)
        if self.registry is not None:
            try:
                self.registry.save_projects(self.projects)
            except Exception as e:
                # Persistence is best effort; the job already succeeded
                logger.warning(f"Could not persist project list: {e}")

    def _record_failure(self, failure: Failure) -> None:
        error = failure.error
        self.logs.append(f"Failed to create new project: {error.message}")
        logger.error(f"Failed to create new project: {error.error_type}: {error.message}")
        if error.traceback:
            logger.debug(error.traceback)
