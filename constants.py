"""
Constants for ProjectLauncher.

Centralized default values for the project creation lifecycle and the launcher window.
"""

# ============================================================================
# CONSTANTS
# ============================================================================

__VERSION__ = "0.3.0"

# Project creation lifecycle
DISMISS_DELAY_SECONDS = 5.0     # Seconds the creation log stays visible after the job ends
TICK_INTERVAL_MS = 50           # Scheduling tick cadence of the launcher window
MAX_LOG_LINES = 500             # Cap on creation log lines (None = unbounded)

# Registry / configuration
APP_NAME = "ProjectLauncher"
PROJECTS_FILENAME = "projects.json"
PROJECT_MANIFEST = "project.json"
DEFAULT_PROJECTS_DIRNAME = "LauncherProjects"
