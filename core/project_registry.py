"""
Project Registry for ProjectLauncher

Persists the list of known projects as a JSON file next to the launcher configuration.
"""

import json
import logging
import os
import tempfile
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from constants import PROJECTS_FILENAME

logger = logging.getLogger(__name__)


@dataclass
class ProjectDescriptor:
    """Represents a project known to the launcher."""
    name: str
    path: str
    template: str
    created_at: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'path': self.path,
            'template': self.template,
            'created_at': self.created_at,
            'metadata': dict(self.metadata),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProjectDescriptor':
        """
        Build a descriptor from its JSON representation.

        Raises:
            KeyError: If a required field is missing
        """
        return cls(
            name=data['name'],
            path=data['path'],
            template=data.get('template', ''),
            created_at=data.get('created_at'),
            metadata=dict(data.get('metadata') or {}),
        )


class ProjectRegistry:
    """Loads and saves the list of known projects."""

    def __init__(self, directory: Path, filename: str = PROJECTS_FILENAME):
        """
        Initialize ProjectRegistry.

        Args:
            directory: Directory holding the registry file (usually the config directory)
            filename: Name of the registry file
        """
        self.registry_file = Path(directory) / filename

    def load_projects(self) -> List[ProjectDescriptor]:
        """
        Load the persisted project list.

        Returns:
            List of ProjectDescriptor objects, empty if the file is missing or unreadable
        """
        if not self.registry_file.exists():
            return []

        try:
            with open(self.registry_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load project list from {self.registry_file}: {e}")
            return []

        projects = []
        for entry in data.get('projects', []) if isinstance(data, dict) else []:
            try:
                projects.append(ProjectDescriptor.from_dict(entry))
            except (KeyError, TypeError, AttributeError) as e:
                logger.warning(f"Skipping malformed project entry {entry!r}: {e}")
        return projects

    def save_projects(self, projects: List[ProjectDescriptor]) -> bool:
        """
        Persist the project list.

        The file is replaced atomically. A write or serialisation failure is logged
        and reported through the return value; it is never raised.

        Args:
            projects: Complete list of known projects

        Returns:
            True if the list was written, False otherwise
        """
        payload = {
            'saved_at': datetime.now().isoformat(timespec='seconds'),
            'projects': [project.to_dict() for project in projects],
        }

        try:
            self.registry_file.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self.registry_file.parent, prefix='.projects-', suffix='.tmp'
            )
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    json.dump(payload, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self.registry_file)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except (OSError, TypeError, ValueError) as e:
            logger.warning(f"Could not save project list to {self.registry_file}: {e}")
            return False

        logger.info(f"Saved {len(projects)} project(s) to {self.registry_file}")
        return True
