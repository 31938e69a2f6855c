#!/usr/bin/env python3
"""
ProjectLauncher - Project launcher with template-based project creation
A PyQt6-based application for listing projects and creating new ones in the background.
"""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from constants import APP_NAME, __VERSION__
from core.config_manager import ConfigManager
from ui.launcher_window import LauncherWindow
from ui.styles import get_dark_theme_stylesheet, get_standard_theme_stylesheet


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def apply_theme(app: QApplication, theme: str) -> None:
    """Apply the dark or standard theme to the application"""
    app.setStyle('Fusion')
    if theme == 'dark':
        app.setStyleSheet(get_dark_theme_stylesheet())
    else:
        app.setPalette(app.style().standardPalette())
        app.setStyleSheet(get_standard_theme_stylesheet())


def main() -> None:
    configure_logging()
    logger = logging.getLogger(APP_NAME)
    logger.info(f"Starting {APP_NAME} {__VERSION__}")

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)

    settings = ConfigManager()
    apply_theme(app, settings.value('theme', 'standard'))

    window = LauncherWindow(settings)
    window.show()
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
