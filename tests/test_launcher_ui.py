import pytest

pytest.importorskip("PyQt6.QtWidgets")

from core.config_manager import ConfigManager
from core.lifecycle import Phase
from core.project_registry import ProjectDescriptor, ProjectRegistry
from core.project_templates import BLANK_TEMPLATE
from ui.launcher_window import LauncherWindow
from ui.project_list_panel import ProjectCard, ProjectListPanel


def card_paths(panel):
    return [card.project.path for card in panel.project_cards()]


def test_new_project_inserted_before_add_button(tmp_path):
    panel = ProjectListPanel([ProjectDescriptor("a", str(tmp_path), "Blank")])

    panel.insert_project(ProjectDescriptor("b", "/tmp/b", "Blank"))

    layout = panel.cards_layout
    assert card_paths(panel) == [str(tmp_path), "/tmp/b"]
    assert layout.itemAt(layout.count() - 1).widget() is panel.add_button


def test_missing_project_card_is_disabled(tmp_path):
    card = ProjectCard(ProjectDescriptor("gone", str(tmp_path / "gone"), "Blank"))

    assert not card.isEnabled()


@pytest.fixture
def window(tmp_path, make_engine):
    settings = ConfigManager(config_dir=tmp_path / "config")
    settings.setValue("dismiss_delay_seconds", 1.0)
    ProjectRegistry(settings.config_dir).save_projects(
        [ProjectDescriptor("existing", "/tmp/existing", "Blank")]
    )
    engine = make_engine()
    window = LauncherWindow(settings, template_engine=engine)
    window.tick_timer.stop()
    yield window
    engine.release()
    window.controller.wait_for_job(10000)


def test_window_loads_registry(window):
    assert card_paths(window.project_list) == ["/tmp/existing"]


def test_creation_shows_overlay_then_dismisses(window):
    window.controller.start(BLANK_TEMPLATE, "/tmp/new")

    assert window.overlay is not None
    assert not window.project_list.add_button.isEnabled()

    assert window.controller.wait_for_job(10000)
    window.controller.tick(0.0)

    assert window.controller.phase() is Phase.AWAITING_DISMISS
    assert window.overlay.line_count() == 1
    assert card_paths(window.project_list) == ["/tmp/existing", "/tmp/new"]

    window.controller.tick(1.0)

    assert window.overlay is None
    assert window.project_list.add_button.isEnabled()
