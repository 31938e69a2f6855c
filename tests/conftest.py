"""Pytest configuration for ProjectLauncher.

Puts the project root on sys.path so ``import core`` works from any location and
provides a Qt application object for QThread and widget tests.
"""

import os
import sys
import threading

import pytest

# Project root = parent directory of this tests/ folder
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """One application object for the whole session (QApplication when widgets are available)."""
    try:
        from PyQt6.QtWidgets import QApplication
    except ImportError:
        from PyQt6.QtCore import QCoreApplication as QApplication
    app = QApplication.instance() or QApplication([])
    yield app


class FakeTemplateEngine:
    """Template engine double that records calls and can be held until released."""

    def __init__(self, error=None, block=False, metadata=None):
        self.error = error
        self.metadata = metadata or {}
        self.calls = []
        self.release_event = threading.Event()
        if not block:
            self.release_event.set()

    def release(self):
        self.release_event.set()

    def create(self, template, target_path):
        from core.project_registry import ProjectDescriptor

        self.calls.append((template, str(target_path)))
        self.release_event.wait(10)
        if self.error is not None:
            raise self.error
        return ProjectDescriptor(
            name=os.path.basename(str(target_path)),
            path=str(target_path),
            template=getattr(template, 'name', str(template)),
            metadata=dict(self.metadata),
        )


@pytest.fixture
def make_engine():
    """Factory for FakeTemplateEngine instances."""
    engines = []

    def factory(**kwargs):
        engine = FakeTemplateEngine(**kwargs)
        engines.append(engine)
        return engine

    factory.engines = engines
    yield factory

    # Never leave a worker thread blocked after a test
    for engine in engines:
        engine.release()


@pytest.fixture
def make_controller(make_engine):
    """Factory for ProjectCreationController instances kept alive until their jobs finished."""
    from core.lifecycle import ProjectCreationController

    controllers = []

    def factory(engine=None, **kwargs):
        controller = ProjectCreationController(engine or make_engine(), **kwargs)
        controllers.append(controller)
        return controller

    yield factory

    for engine in make_engine.engines:
        engine.release()
    for controller in controllers:
        controller.wait_for_job(10000)
