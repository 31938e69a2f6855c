"""
Loading overlay for ProjectLauncher.

Covers the launcher window while a project is being created and shows the
creation log. The overlay is created and torn down by the launcher window.
"""

from typing import Sequence

from PyQt6.QtWidgets import QWidget, QLabel, QVBoxLayout, QFrame, QScrollArea
from PyQt6.QtCore import Qt, QEvent


class LoadingOverlay(QWidget):
    """A semi-transparent overlay with a title and the creation log."""

    def __init__(self, parent: QWidget, title: str = "Creating new project..."):
        """
        Initialize loading overlay.

        Args:
            parent: Widget to cover (usually the main window's central widget)
            title: Text shown above the log
        """
        super().__init__(parent)
        self.setObjectName("loadingOverlay")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground)
        self.setStyleSheet("#loadingOverlay { background-color: rgba(0, 0, 0, 128); }")

        outer = QVBoxLayout(self)
        outer.setAlignment(Qt.AlignmentFlag.AlignCenter)

        # Content container
        self.panel = QFrame()
        self.panel.setObjectName("overlayPanel")
        self.panel.setFixedSize(500, 400)
        panel_layout = QVBoxLayout(self.panel)
        panel_layout.setContentsMargins(20, 20, 20, 20)

        self.title_label = QLabel(title)
        self.title_label.setObjectName("overlayTitle")
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        panel_layout.addWidget(self.title_label)

        # Log area
        self.log_scroll = QScrollArea()
        self.log_scroll.setObjectName("overlayLog")
        self.log_scroll.setWidgetResizable(True)
        self.log_scroll.setFixedHeight(300)
        log_container = QWidget()
        self.log_layout = QVBoxLayout(log_container)
        self.log_layout.setAlignment(Qt.AlignmentFlag.AlignTop)
        self.log_layout.setContentsMargins(10, 10, 10, 10)
        self.log_scroll.setWidget(log_container)
        panel_layout.addWidget(self.log_scroll)

        outer.addWidget(self.panel)

        parent.installEventFilter(self)
        self.setGeometry(parent.rect())

    def set_lines(self, lines: Sequence[str]):
        """Replace the log area content with the given lines."""
        while self.log_layout.count():
            item = self.log_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        for line in lines:
            label = QLabel(line)
            label.setWordWrap(True)
            label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
            self.log_layout.addWidget(label)

        bar = self.log_scroll.verticalScrollBar()
        bar.setValue(bar.maximum())

    def line_count(self) -> int:
        return self.log_layout.count()

    def set_title(self, title: str):
        self.title_label.setText(title)

    def eventFilter(self, watched, event):
        """Keep the overlay sized to its parent."""
        if watched is self.parent() and event.type() == QEvent.Type.Resize:
            self.setGeometry(self.parent().rect())
        return super().eventFilter(watched, event)

    def dismiss(self):
        """Remove the overlay."""
        self.parent().removeEventFilter(self)
        self.hide()
        self.deleteLater()
