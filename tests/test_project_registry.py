import json
from pathlib import Path

from core.project_registry import ProjectDescriptor, ProjectRegistry


def test_missing_file_loads_empty(tmp_path):
    assert ProjectRegistry(tmp_path).load_projects() == []


def test_save_then_load(tmp_path):
    registry = ProjectRegistry(tmp_path)
    projects = [
        ProjectDescriptor("a", "/tmp/a", "Blank", "2026-01-01T10:00:00", {"files": 1}),
        ProjectDescriptor("b", "/tmp/b", "Library"),
    ]

    assert registry.save_projects(projects) is True
    assert registry.load_projects() == projects
    assert not list(tmp_path.glob(".projects-*"))


def test_corrupt_file_loads_empty(tmp_path):
    (tmp_path / "projects.json").write_text("{not json", encoding="utf-8")

    assert ProjectRegistry(tmp_path).load_projects() == []


def test_malformed_entries_are_skipped(tmp_path):
    data = {"projects": [{"name": "ok", "path": "/tmp/ok"}, {"name": "no path"}, "junk"]}
    (tmp_path / "projects.json").write_text(json.dumps(data), encoding="utf-8")

    projects = ProjectRegistry(tmp_path).load_projects()

    assert [p.name for p in projects] == ["ok"]


def test_save_failure_is_reported_not_raised(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")

    assert ProjectRegistry(blocker).save_projects([]) is False


def test_unserialisable_metadata_is_reported_not_raised(tmp_path):
    registry = ProjectRegistry(tmp_path)
    saved = [ProjectDescriptor("a", "/tmp/a", "Blank")]
    registry.save_projects(saved)

    broken = ProjectDescriptor("b", "/tmp/b", "Blank", metadata={"root": Path("/tmp/b")})

    assert registry.save_projects(saved + [broken]) is False
    assert registry.load_projects() == saved
    assert not list(tmp_path.glob(".projects-*"))
