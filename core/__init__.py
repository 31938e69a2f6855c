"""
Core business logic for ProjectLauncher.

This package contains the core logic separated from UI concerns:
- lifecycle: Background project creation state machine
- job_handle: QThread worker wrapper and job result types
- poller: Consumes finished job results
- log_buffer: Creation log lines
- dismiss_timer: Grace period before the creation log is dismissed
- project_templates: Pre-configured project templates
- template_engine: Scaffolds projects from templates
- project_registry: Persisted list of known projects
- config_manager: JSON-based settings
"""

from .errors import LauncherError, TemplateError, ProjectCreationInProgress
from .project_registry import ProjectDescriptor, ProjectRegistry
from .project_templates import (
    ProjectTemplate, TemplateFile, get_templates, get_template_by_name,
    BLANK_TEMPLATE, APPLICATION_TEMPLATE, LIBRARY_TEMPLATE
)
from .template_engine import TemplateEngine
from .log_buffer import LogBuffer
from .dismiss_timer import DismissTimer
from .job_handle import JobHandle, JobResult, Success, Failure, ErrorDetail
from .poller import JobPoller
from .lifecycle import Phase, ProjectCreationController
from .config_manager import ConfigManager

__all__ = [
    'LauncherError', 'TemplateError', 'ProjectCreationInProgress',
    'ProjectDescriptor', 'ProjectRegistry',
    'ProjectTemplate', 'TemplateFile', 'get_templates', 'get_template_by_name',
    'BLANK_TEMPLATE', 'APPLICATION_TEMPLATE', 'LIBRARY_TEMPLATE',
    'TemplateEngine', 'LogBuffer', 'DismissTimer',
    'JobHandle', 'JobResult', 'Success', 'Failure', 'ErrorDetail',
    'JobPoller', 'Phase', 'ProjectCreationController', 'ConfigManager'
]
