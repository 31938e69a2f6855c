"""
Exception types for ProjectLauncher core logic.
"""


class LauncherError(Exception):
    """Base class for launcher errors."""


class TemplateError(LauncherError):
    """Raised when a template cannot be applied to the target path."""


class ProjectCreationInProgress(LauncherError, RuntimeError):
    """Raised when a project creation is requested while another one is still active."""
