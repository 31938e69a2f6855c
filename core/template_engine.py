"""
Template Engine for ProjectLauncher

Scaffolds a new project directory from a ProjectTemplate. create() runs on the
background worker thread and must not touch launcher state.
"""

import json
import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Union

from constants import PROJECT_MANIFEST
from core.errors import TemplateError
from core.project_registry import ProjectDescriptor
from core.project_templates import ProjectTemplate, template_context

logger = logging.getLogger(__name__)


class TemplateEngine:
    """Creates projects on disk from templates."""

    def __init__(self, step_delay: float = 0.0):
        """
        Initialize TemplateEngine.

        Args:
            step_delay: Seconds to pause after each written file (0 disables)
        """
        self.step_delay = step_delay

    def create(self, template: ProjectTemplate, target_path: Union[str, Path]) -> ProjectDescriptor:
        """
        Create a new project from a template.

        Args:
            template: Template to apply
            target_path: Directory of the new project; its name becomes the project name

        Returns:
            ProjectDescriptor for the created project

        Raises:
            TemplateError: If the target is not usable
            OSError: If writing the files fails
        """
        target = Path(target_path).expanduser()
        if target.exists():
            if not target.is_dir():
                raise TemplateError(f"Target exists and is not a directory: {target}")
            if any(target.iterdir()):
                raise TemplateError(f"Target directory is not empty: {target}")

        project_name = target.name
        if not project_name:
            raise TemplateError(f"Invalid project location: {target_path}")

        context = template_context(project_name)
        target.mkdir(parents=True, exist_ok=True)

        for template_file in template.files:
            try:
                relative = template_file.relative_path.format(**context)
                content = template_file.content.format(**context)
            except (KeyError, IndexError, ValueError) as e:
                raise TemplateError(
                    f"Template '{template.name}' has an invalid file {template_file.relative_path}: {e}"
                ) from e

            file_path = target / relative
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding='utf-8')
            logger.debug(f"Wrote {file_path}")

            if self.step_delay:
                time.sleep(self.step_delay)

        created_at = datetime.now().isoformat(timespec='seconds')
        manifest = {
            'name': project_name,
            'template': template.name,
            'created_at': created_at,
        }
        with open(target / PROJECT_MANIFEST, 'w', encoding='utf-8') as f:
            json.dump(manifest, f, indent=2)

        return ProjectDescriptor(
            name=project_name,
            path=str(target),
            template=template.name,
            created_at=created_at,
            metadata={
                'package_name': context['package_name'],
                'files': len(template.files),
            },
        )
