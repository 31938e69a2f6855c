"""
New Project Dialog for ProjectLauncher

Dialog for choosing a template and a location for a new project.
"""

from pathlib import Path
from typing import Optional, Tuple

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLabel, QLineEdit, QComboBox, QPushButton,
    QMessageBox, QGroupBox, QFileDialog
)

from core.project_templates import ProjectTemplate, get_templates


class NewProjectDialog(QDialog):
    """Dialog for creating a new project."""

    def __init__(self, default_location: str, parent=None):
        """
        Initialize New Project dialog.

        Args:
            default_location: Parent directory suggested for the new project
            parent: Parent widget
        """
        super().__init__(parent)
        self.templates = get_templates()
        self.default_location = default_location

        self.setWindowTitle("Create New Project")
        self.setMinimumWidth(500)

        self.init_ui()

    def init_ui(self):
        """Initialize the user interface."""
        layout = QVBoxLayout(self)

        # Project Details Section
        details_group = QGroupBox("Project Details")
        details_layout = QFormLayout()

        # Template selection
        self.template_combo = QComboBox()
        for template in self.templates:
            self.template_combo.addItem(template.name)
        self.template_combo.currentIndexChanged.connect(self.on_template_changed)
        details_layout.addRow("Template:", self.template_combo)

        # Template description
        self.template_desc = QLabel()
        self.template_desc.setWordWrap(True)
        self.template_desc.setStyleSheet("color: #666; font-style: italic;")
        details_layout.addRow("", self.template_desc)

        # Project name
        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("e.g., my_game")
        self.name_edit.textChanged.connect(self.update_target_preview)
        details_layout.addRow("Project Name*:", self.name_edit)

        # Location
        location_layout = QHBoxLayout()
        self.location_edit = QLineEdit(self.default_location)
        self.location_edit.textChanged.connect(self.update_target_preview)
        location_layout.addWidget(self.location_edit)
        browse_btn = QPushButton("Browse...")
        browse_btn.setProperty("class", "secondary")
        browse_btn.clicked.connect(self.browse_location)
        location_layout.addWidget(browse_btn)
        details_layout.addRow("Location*:", location_layout)

        self.target_preview = QLabel()
        self.target_preview.setStyleSheet("color: #666;")
        details_layout.addRow("Creates:", self.target_preview)

        details_group.setLayout(details_layout)
        layout.addWidget(details_group)

        # Dialog buttons
        buttons_layout = QHBoxLayout()
        buttons_layout.addStretch()

        cancel_btn = QPushButton("Cancel")
        cancel_btn.setProperty("class", "secondary")
        cancel_btn.clicked.connect(self.reject)
        buttons_layout.addWidget(cancel_btn)

        create_btn = QPushButton("Create Project")
        create_btn.setDefault(True)
        create_btn.clicked.connect(self.accept_if_valid)
        buttons_layout.addWidget(create_btn)

        layout.addLayout(buttons_layout)

        # Initialize with first template
        self.on_template_changed(0)

    def on_template_changed(self, index: int):
        """Show the description of the selected template."""
        self.template_desc.setText(self.templates[index].description)

    def browse_location(self):
        """Pick the parent directory for the project."""
        directory = QFileDialog.getExistingDirectory(
            self, "Select Project Location", self.location_edit.text()
        )
        if directory:
            self.location_edit.setText(directory)

    def update_target_preview(self):
        target = self.target_path()
        self.target_preview.setText(str(target) if target else "")

    def selected_template(self) -> ProjectTemplate:
        return self.templates[self.template_combo.currentIndex()]

    def target_path(self) -> Optional[Path]:
        """Directory that will be created, or None if name or location is empty."""
        name = self.name_edit.text().strip()
        location = self.location_edit.text().strip()
        if not name or not location:
            return None
        return Path(location).expanduser() / name

    def validate_inputs(self) -> Tuple[bool, str]:
        """
        Validate user inputs.

        Returns:
            Tuple of (is_valid, error_message)
        """
        name = self.name_edit.text().strip()
        if not name:
            return False, "Project name is required"

        if any(sep in name for sep in ('/', '\\')):
            return False, "Project name must not contain path separators"

        if not self.location_edit.text().strip():
            return False, "Location is required"

        target = self.target_path()
        if target.exists() and (not target.is_dir() or any(target.iterdir())):
            return False, f"'{target}' already exists and is not an empty folder"

        return True, ""

    def accept_if_valid(self):
        """Close the dialog if the inputs are valid."""
        is_valid, error_msg = self.validate_inputs()
        if not is_valid:
            QMessageBox.warning(self, "Validation Error", error_msg)
            return
        self.accept()
