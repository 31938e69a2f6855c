"""
UI components for ProjectLauncher.

This package contains the launcher window and its widgets.
Each widget is implemented as a separate class to improve modularity.
"""

from .launcher_window import LauncherWindow
from .project_list_panel import ProjectListPanel, ProjectCard
from .loading_overlay import LoadingOverlay
from .new_project_dialog import NewProjectDialog

__all__ = [
    'LauncherWindow',
    'ProjectListPanel',
    'ProjectCard',
    'LoadingOverlay',
    'NewProjectDialog'
]
