# components/code_preview.py
from PyQt6.QtGui import QFontDatabase
from PyQt6.QtWidgets import QApplication, QPlainTextEdit, QPushButton, QVBoxLayout, QWidget

from services.code_snippet import render_snippet
from services.data_context import DataContext
from utils.icon_manager import IconManager


class CodePreview(QWidget):
    """Read-only view of the usage snippet; follows the data context bus."""

    def __init__(self, bus: DataContext, configuration: dict, parent=None):
        super().__init__(parent)
        self.setObjectName("CodePreview")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.editor = QPlainTextEdit()
        self.editor.setReadOnly(True)
        self.editor.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        layout.addWidget(self.editor, 1)

        self.copy_button = QPushButton(IconManager.create_icon("fa5s.copy"), "Copy")
        self.copy_button.clicked.connect(lambda: self.copy_to_clipboard())
        layout.addWidget(self.copy_button)

        bus.configuration_changed.connect(self.update_from_configuration)
        self.update_from_configuration(configuration)

    def update_from_configuration(self, configuration: dict) -> None:
        self.editor.setPlainText(
            render_snippet(configuration["props"], configuration["color"], configuration["maxWidth"])
        )

    def text(self) -> str:
        return self.editor.toPlainText()

    def copy_to_clipboard(self) -> None:
        QApplication.clipboard().setText(self.text())
