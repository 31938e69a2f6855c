"""
Styling for ProjectLauncher application.

Provides QSS stylesheets for both dark and standard themes.
"""


def get_dark_theme_stylesheet() -> str:
    """Return dark theme stylesheet."""
    return """
        QMainWindow, QDialog {
            background-color: #1e1e1e;
        }

        QLabel {
            color: #e0e0e0;
        }

        /* Buttons - flat design with hover effects */
        QPushButton {
            background-color: #0078d4;
            color: white;
            border: none;
            border-radius: 4px;
            padding: 8px 16px;
            font-weight: 500;
            min-height: 24px;
        }

        QPushButton:hover {
            background-color: #106ebe;
        }

        QPushButton:pressed {
            background-color: #005a9e;
        }

        QPushButton:disabled {
            background-color: #3d3d3d;
            color: #888888;
        }

        QPushButton[class="secondary"] {
            background-color: #404040;
            border: 1px solid #555555;
        }

        QPushButton[class="secondary"]:hover {
            background-color: #505050;
        }

        QPushButton#addProjectButton {
            background-color: transparent;
            border: 2px dashed #555555;
            color: #cccccc;
            font-size: 14pt;
        }

        QPushButton#addProjectButton:hover {
            border-color: #0078d4;
            color: #ffffff;
        }

        /* Project cards */
        QFrame#projectCard {
            background-color: #2a2a2a;
            border: 1px solid #3d3d3d;
            border-radius: 6px;
        }

        QFrame#projectCard:hover {
            border-color: #0078d4;
        }

        QLabel#projectName, QLabel#panelTitle {
            font-size: 13pt;
            font-weight: bold;
            color: #ffffff;
        }

        QLabel#projectTemplate, QLabel#projectPath {
            color: #999999;
        }

        /* Loading overlay */
        QFrame#overlayPanel {
            background-color: #2d2d2d;
            border-radius: 10px;
        }

        QLabel#overlayTitle {
            font-size: 18pt;
            color: #ffffff;
        }

        QScrollArea#overlayLog {
            background-color: rgba(0, 0, 0, 50);
            border: none;
            border-radius: 5px;
        }

        QLineEdit, QComboBox {
            background-color: #2a2a2a;
            color: #e0e0e0;
            border: 1px solid #555555;
            border-radius: 3px;
            padding: 4px;
        }

        QGroupBox {
            color: #e0e0e0;
            border: 1px solid #555555;
            margin-top: 0.5em;
            padding-top: 0.5em;
        }

        QGroupBox::title {
            subcontrol-origin: margin;
            left: 10px;
            padding: 0 3px 0 3px;
        }
    """


def get_standard_theme_stylesheet() -> str:
    """Return standard theme stylesheet."""
    return """
        QPushButton {
            padding: 5px;
        }

        QPushButton#addProjectButton {
            border: 2px dashed #aaaaaa;
            border-radius: 6px;
            font-size: 14pt;
        }

        QFrame#projectCard {
            background-color: #ffffff;
            border: 1px solid #cccccc;
            border-radius: 6px;
        }

        QFrame#projectCard:hover {
            border-color: #0078d4;
        }

        QLabel#projectName, QLabel#panelTitle {
            font-size: 13pt;
            font-weight: bold;
        }

        QLabel#projectTemplate, QLabel#projectPath {
            color: #666666;
        }

        QFrame#overlayPanel {
            background-color: #f3f3f3;
            border-radius: 10px;
        }

        QLabel#overlayTitle {
            font-size: 18pt;
        }

        QScrollArea#overlayLog {
            border: 1px solid #cccccc;
            border-radius: 5px;
        }

        QGroupBox {
            font-weight: bold;
            border: 1px solid #cccccc;
            margin-top: 0.5em;
            padding-top: 0.5em;
        }

        QGroupBox::title {
            subcontrol-origin: margin;
            left: 10px;
            padding: 0 3px 0 3px;
        }
    """
