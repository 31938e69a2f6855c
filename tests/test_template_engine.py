import json

import pytest

from core.errors import TemplateError
from core.project_templates import (
    APPLICATION_TEMPLATE, BLANK_TEMPLATE, LIBRARY_TEMPLATE, ProjectTemplate, TemplateFile,
    get_template_by_name, get_templates, template_context
)
from core.template_engine import TemplateEngine


def test_application_template_scaffolds_package(tmp_path):
    target = tmp_path / "My Game"

    descriptor = TemplateEngine().create(APPLICATION_TEMPLATE, target)

    assert descriptor.name == "My Game"
    assert descriptor.path == str(target)
    assert descriptor.template == "Application"
    assert descriptor.metadata["package_name"] == "my_game"
    assert (target / "README.md").read_text(encoding="utf-8") == "# My Game\n"
    assert 'name = "my_game"' in (target / "pyproject.toml").read_text(encoding="utf-8")
    assert (target / "my_game" / "__main__.py").exists()

    manifest = json.loads((target / "project.json").read_text(encoding="utf-8"))
    assert manifest["template"] == "Application"
    assert manifest["created_at"] == descriptor.created_at


def test_library_template_includes_tests(tmp_path):
    TemplateEngine().create(LIBRARY_TEMPLATE, tmp_path / "lib")

    assert (tmp_path / "lib" / "tests" / "test_lib.py").exists()


def test_empty_existing_directory_is_accepted(tmp_path):
    target = tmp_path / "empty"
    target.mkdir()

    TemplateEngine().create(BLANK_TEMPLATE, target)

    assert (target / "README.md").exists()


def test_non_empty_target_rejected(tmp_path):
    target = tmp_path / "taken"
    target.mkdir()
    (target / "file.txt").write_text("x")

    with pytest.raises(TemplateError):
        TemplateEngine().create(BLANK_TEMPLATE, target)


def test_file_target_rejected(tmp_path):
    target = tmp_path / "file"
    target.write_text("x")

    with pytest.raises(TemplateError):
        TemplateEngine().create(BLANK_TEMPLATE, target)


def test_broken_template_reports_template_error(tmp_path):
    broken = ProjectTemplate("Broken", "", [TemplateFile("x.txt", "{unknown}")])

    with pytest.raises(TemplateError):
        TemplateEngine().create(broken, tmp_path / "p")


def test_template_lookup():
    assert [t.name for t in get_templates()] == ["Blank", "Application", "Library"]
    assert get_template_by_name("Library") is LIBRARY_TEMPLATE
    with pytest.raises(ValueError):
        get_template_by_name("Missing")


@pytest.mark.parametrize("name, package", [
    ("demo", "demo"),
    ("My Cool-App", "my_cool_app"),
    ("2048", "p_2048"),
    ("---", "project"),
])
def test_package_name_is_python_safe(name, package):
    assert template_context(name)["package_name"] == package
