"""
Project Templates for ProjectLauncher

Provides pre-configured project templates for new projects.
"""

from dataclasses import dataclass
from typing import Dict, List


@dataclass
class TemplateFile:
    """A file rendered into a new project.

    Both the path and the content are str.format templates receiving
    ``project_name`` and ``package_name``.
    """
    relative_path: str
    content: str


@dataclass
class ProjectTemplate:
    """Represents a project template with the files it scaffolds."""
    name: str
    description: str
    files: List[TemplateFile]


_README = TemplateFile("README.md", "# {project_name}\n")

_GITIGNORE = TemplateFile(".gitignore", "__pycache__/\n*.pyc\n.venv/\nbuild/\ndist/\n")

_PYPROJECT = TemplateFile("pyproject.toml", """\
[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "{package_name}"
version = "0.1.0"
""")


# Pre-defined templates
BLANK_TEMPLATE = ProjectTemplate(
    name="Blank",
    description="Empty project with only a README",
    files=[_README]
)

APPLICATION_TEMPLATE = ProjectTemplate(
    name="Application",
    description="Runnable application with a main module and packaging metadata",
    files=[
        _README,
        _GITIGNORE,
        _PYPROJECT,
        TemplateFile("{package_name}/__init__.py", ""),
        TemplateFile("{package_name}/__main__.py", """\
def main():
    print("Hello from {project_name}!")


if __name__ == '__main__':
    main()
"""),
    ]
)

LIBRARY_TEMPLATE = ProjectTemplate(
    name="Library",
    description="Reusable library package with a tests folder",
    files=[
        _README,
        _GITIGNORE,
        _PYPROJECT,
        TemplateFile("{package_name}/__init__.py", '"""{project_name} library."""\n'),
        TemplateFile("tests/__init__.py", ""),
        TemplateFile("tests/test_{package_name}.py", """\
import {package_name}


def test_import():
    assert {package_name}.__doc__
"""),
    ]
)


def get_templates() -> List[ProjectTemplate]:
    """
    Get list of available project templates.

    Returns:
        List of ProjectTemplate objects
    """
    return [
        BLANK_TEMPLATE,
        APPLICATION_TEMPLATE,
        LIBRARY_TEMPLATE,
    ]


def get_template_by_name(name: str) -> ProjectTemplate:
    """
    Get a template by name.

    Args:
        name: Template name

    Returns:
        ProjectTemplate object

    Raises:
        ValueError: If template not found
    """
    for template in get_templates():
        if template.name == name:
            return template
    raise ValueError(f"Template not found: {name}")


def template_context(project_name: str) -> Dict[str, str]:
    """
    Build the substitution values for a project name.

    Args:
        project_name: Human-readable project name

    Returns:
        Dictionary with project_name and a Python-safe package_name
    """
    package_name = ''.join(c if c.isalnum() else '_' for c in project_name.strip().lower())
    package_name = package_name.strip('_') or 'project'
    if package_name[0].isdigit():
        package_name = f"p_{package_name}"
    return {'project_name': project_name, 'package_name': package_name}
