"""
Project list panel for ProjectLauncher

Displays known projects as cards followed by a trailing "+" card that opens
the New Project dialog.
"""

from pathlib import Path
from typing import List

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel, QFrame, QScrollArea
)
from PyQt6.QtCore import Qt, QUrl, pyqtSignal
from PyQt6.QtGui import QDesktopServices

from core.project_registry import ProjectDescriptor


class ProjectCard(QFrame):
    """Card showing a single project."""

    def __init__(self, project: ProjectDescriptor, parent=None):
        super().__init__(parent)
        self.project = project
        self.setObjectName("projectCard")
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        layout = QVBoxLayout(self)

        name_label = QLabel(project.name)
        name_label.setObjectName("projectName")
        layout.addWidget(name_label)

        template_label = QLabel(project.template or "Unknown template")
        template_label.setObjectName("projectTemplate")
        layout.addWidget(template_label)

        path_label = QLabel(project.path)
        path_label.setObjectName("projectPath")
        path_label.setWordWrap(True)
        layout.addWidget(path_label)

        if not Path(project.path).exists():
            path_label.setText(f"{project.path} (missing)")
            self.setEnabled(False)

        self.setToolTip(project.path)

    def mouseReleaseEvent(self, event):
        """Open the project folder in the system file browser."""
        if event.button() == Qt.MouseButton.LeftButton and self.isEnabled():
            QDesktopServices.openUrl(QUrl.fromLocalFile(self.project.path))
        super().mouseReleaseEvent(event)


class ProjectListPanel(QWidget):
    """Scrollable list of project cards with a trailing add button."""

    # Signals
    new_project_requested = pyqtSignal()

    def __init__(self, projects: List[ProjectDescriptor], parent=None):
        """
        Initialize project list panel.

        Args:
            projects: Projects to show initially, in display order
            parent: Parent widget
        """
        super().__init__(parent)
        self.init_ui()
        for project in projects:
            self.insert_project(project)

    def init_ui(self):
        """Initialize the user interface."""
        layout = QVBoxLayout(self)

        header = QHBoxLayout()
        title = QLabel("Projects")
        title.setObjectName("panelTitle")
        header.addWidget(title)
        header.addStretch()
        layout.addLayout(header)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        container = QWidget()
        self.cards_layout = QVBoxLayout(container)
        self.cards_layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        # The add button always stays the last item of the list
        self.add_button = QPushButton("➕ New Project")
        self.add_button.setObjectName("addProjectButton")
        self.add_button.setMinimumHeight(60)
        self.add_button.clicked.connect(self.new_project_requested.emit)
        self.cards_layout.addWidget(self.add_button)

        scroll.setWidget(container)
        layout.addWidget(scroll)

    def insert_project(self, project: ProjectDescriptor) -> ProjectCard:
        """
        Add a project card immediately before the add button.

        Args:
            project: Project to show

        Returns:
            The created card
        """
        card = ProjectCard(project)
        self.cards_layout.insertWidget(self.cards_layout.indexOf(self.add_button), card)
        return card

    def project_cards(self) -> List[ProjectCard]:
        cards = []
        for i in range(self.cards_layout.count()):
            widget = self.cards_layout.itemAt(i).widget()
            if isinstance(widget, ProjectCard):
                cards.append(widget)
        return cards

    def set_add_enabled(self, enabled: bool):
        self.add_button.setEnabled(enabled)
