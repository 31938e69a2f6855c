"""
Launcher window for ProjectLauncher

Hosts the project list and drives the project creation lifecycle from a
QTimer on the UI thread.
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QMessageBox, QDialog
from PyQt6.QtCore import QTimer, QElapsedTimer

from constants import TICK_INTERVAL_MS
from core.config_manager import ConfigManager
from core.errors import ProjectCreationInProgress
from core.lifecycle import Phase, ProjectCreationController
from core.project_registry import ProjectRegistry
from core.template_engine import TemplateEngine
from ui.loading_overlay import LoadingOverlay
from ui.new_project_dialog import NewProjectDialog
from ui.project_list_panel import ProjectListPanel

logger = logging.getLogger(__name__)


class LauncherWindow(QMainWindow):
    def __init__(self, settings: ConfigManager, template_engine: Optional[TemplateEngine] = None) -> None:
        super().__init__()
        self.settings = settings
        self.registry = ProjectRegistry(settings.config_dir)
        self.projects = self.registry.load_projects()
        logger.info(f"Loaded {len(self.projects)} project(s) from {self.registry.registry_file}")

        self.controller = ProjectCreationController(
            template_engine or TemplateEngine(),
            projects=self.projects,
            registry=self.registry,
            dismiss_delay=settings.get_dismiss_delay(),
            max_log_lines=settings.get_max_log_lines(),
            parent=self
        )
        self.overlay: Optional[LoadingOverlay] = None

        self.init_ui()
        self.connect_signals()
        self.restore_settings()

        # Scheduling loop
        self.elapsed_clock = QElapsedTimer()
        self.elapsed_clock.start()
        self.tick_timer = QTimer(self)
        self.tick_timer.timeout.connect(self.on_tick)
        self.tick_timer.start(TICK_INTERVAL_MS)

    def init_ui(self) -> None:
        """Initialize the user interface"""
        self.setWindowTitle('Project Launcher')
        self.setGeometry(100, 100, 800, 600)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout(central_widget)

        self.project_list = ProjectListPanel(self.projects)
        layout.addWidget(self.project_list)

    def connect_signals(self) -> None:
        self.project_list.new_project_requested.connect(self.create_new_project)
        self.controller.project_added.connect(self.project_list.insert_project)
        self.controller.logs_changed.connect(self.refresh_overlay)
        self.controller.phase_changed.connect(self.on_phase_changed)
        self.controller.notification_dismissed.connect(self.close_overlay)

    def on_tick(self) -> None:
        """Advance the creation lifecycle with the time since the last tick."""
        elapsed = self.elapsed_clock.restart() / 1000.0
        self.controller.tick(elapsed)

    def create_new_project(self) -> None:
        """Ask for template and location, then start the background creation."""
        dialog = NewProjectDialog(self.settings.get_projects_directory(), self)
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return

        target = dialog.target_path()
        self.settings.setValue('projects_directory', str(target.parent))

        try:
            self.controller.start(dialog.selected_template(), target)
        except ProjectCreationInProgress as e:
            QMessageBox.information(self, "Project Creation", str(e))

    def on_phase_changed(self, phase: Phase) -> None:
        self.project_list.set_add_enabled(phase is Phase.IDLE)

        if phase is Phase.RUNNING:
            self.show_overlay()
        elif phase is Phase.AWAITING_DISMISS and self.overlay is not None:
            self.overlay.set_title("Project creation finished")

    def show_overlay(self) -> None:
        if self.overlay is None:
            self.overlay = LoadingOverlay(self.centralWidget())
            self.overlay.show()
            self.overlay.raise_()
        self.refresh_overlay()

    def refresh_overlay(self) -> None:
        if self.overlay is not None:
            self.overlay.set_lines(self.controller.logs())

    def close_overlay(self) -> None:
        if self.overlay is not None:
            self.overlay.dismiss()
            self.overlay = None

    def save_settings(self) -> None:
        """Save window geometry"""
        self.settings.setValue('geometry', self.saveGeometry())

    def restore_settings(self) -> None:
        """Restore window geometry"""
        geometry = self.settings.value('geometry')
        if geometry:
            self.restoreGeometry(geometry)

    def closeEvent(self, event) -> None:
        """Save settings and let a running creation finish before closing"""
        self.tick_timer.stop()
        if self.controller.has_active_job():
            logger.info("Waiting for project creation to finish before exiting")
            self.controller.wait_for_job()
            self.controller.tick(0.0)
        self.save_settings()
        event.accept()
