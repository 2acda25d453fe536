# components/controls_sidebar.py
"""Control panel for every configurable property.

The panel is generated from the property schema: one collapsible page per
group and one control per key, picked by the key's semantic type.  Controls
only ever call into :class:`ConfiguratorService`; they are refreshed from the
service's signals with their own signals blocked, so a refresh never turns
into another edit.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from PyQt6.QtCore import QSignalBlocker, pyqtSignal
from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QScrollArea,
    QSpinBox,
    QToolBox,
    QVBoxLayout,
    QWidget,
)

from services import property_schema
from services.configurator_service import ConfiguratorService
from services.presets import get_presets
from utils.constants import COLOR_FORMATS, MAX_WIDTH_LIMIT, PropertyType
from utils.icon_manager import IconManager


def _display_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


class ControlsSidebar(QWidget):
    """Presets, preview width, grouped property controls and config actions."""

    import_requested = pyqtSignal()
    export_requested = pyqtSignal()

    def __init__(self, service: ConfiguratorService, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("ControlsSidebar")
        self.service = service
        self._controls: Dict[str, QWidget] = {}

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        layout.addWidget(self._build_general_box())

        self.toolbox = QToolBox()
        self.toolbox.setObjectName("PropertyGroups")
        for group, keys in property_schema.groups().items():
            self.toolbox.addItem(self._build_group_page(keys), group)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.toolbox)
        layout.addWidget(scroll, 1)

        layout.addWidget(self._build_config_box())

        service.props_changed.connect(self.update_fields)
        service.max_width_changed.connect(self._update_max_width)
        service.preset_changed.connect(self._update_preset)
        service.history.history_changed.connect(self._update_history_buttons)

        self.refresh()

    # ------------------------------------------------------------------ build
    def _build_general_box(self) -> QWidget:
        box = QGroupBox("Presets")
        form = QFormLayout(box)
        form.setContentsMargins(5, 5, 5, 5)
        form.setSpacing(5)

        self.preset_combo = QComboBox()
        self.preset_combo.setObjectName("PresetCombo")
        for name, preset in get_presets().items():
            self.preset_combo.addItem(preset.display_name, name)
        self.preset_combo.activated.connect(self._on_preset_activated)
        form.addRow("Preset", self.preset_combo)

        self.max_width_spin = QSpinBox()
        self.max_width_spin.setObjectName("MaxWidthSpin")
        self.max_width_spin.setRange(0, MAX_WIDTH_LIMIT)
        self.max_width_spin.setSuffix(" px")
        self.max_width_spin.valueChanged.connect(self.service.set_max_width)
        form.addRow("Max Width", self.max_width_spin)
        return box

    def _build_group_page(self, keys) -> QWidget:
        page = QWidget()
        form = QFormLayout(page)
        form.setContentsMargins(5, 5, 5, 5)
        form.setSpacing(5)
        for key in keys:
            spec = property_schema.spec_for(key)
            control = self._build_control(spec)
            control.setToolTip(key)
            self._controls[key] = control
            form.addRow(spec.label, control)
        return page

    def _build_control(self, spec: property_schema.PropertySpec) -> QWidget:
        key = spec.key
        if spec.type is PropertyType.BOOL:
            check = QCheckBox()
            check.setObjectName(key)
            check.toggled.connect(lambda checked, k=key: self.service.set_property(k, checked))
            return check

        if spec.type is PropertyType.CHOICE:
            combo = QComboBox()
            combo.setObjectName(key)
            combo.addItems(spec.choices)
            combo.currentTextChanged.connect(lambda text, k=key: self.service.set_property(k, text))
            return combo

        if spec.type is PropertyType.MODES:
            container = QWidget()
            container.setObjectName(key)
            row = QHBoxLayout(container)
            row.setContentsMargins(0, 0, 0, 0)
            for mode in COLOR_FORMATS:
                check = QCheckBox(mode)
                check.setObjectName(f"{key}.{mode}")
                check.toggled.connect(lambda _checked, k=key: self._on_modes_toggled(k))
                row.addWidget(check)
            return container

        edit = QLineEdit()
        edit.setObjectName(key)
        edit.editingFinished.connect(lambda k=key, w=edit: self._on_text_edited(k, w))
        return edit

    def _build_config_box(self) -> QWidget:
        box = QGroupBox("Config")
        row = QHBoxLayout(box)
        row.setContentsMargins(5, 5, 5, 5)

        self.import_button = QPushButton(IconManager.create_icon("fa5s.file-import"), "Import")
        self.import_button.clicked.connect(lambda: self.import_requested.emit())
        self.export_button = QPushButton(IconManager.create_icon("fa5s.file-export"), "Export")
        self.export_button.clicked.connect(lambda: self.export_requested.emit())
        self.undo_button = QPushButton(IconManager.create_icon("fa5s.undo"), "")
        self.undo_button.setToolTip("Undo")
        self.undo_button.clicked.connect(lambda: self.service.undo())
        self.redo_button = QPushButton(IconManager.create_icon("fa5s.redo"), "")
        self.redo_button.setToolTip("Redo")
        self.redo_button.clicked.connect(lambda: self.service.redo())

        for button in (self.import_button, self.export_button, self.undo_button, self.redo_button):
            row.addWidget(button)
        return box

    # ------------------------------------------------------------------ edits
    def _on_text_edited(self, key: str, edit: QLineEdit) -> None:
        value = property_schema.coerce_input(key, edit.text())
        if not self.service.set_property(key, value):
            # Re-display the canonical value (e.g. "abc" -> 0 for numbers).
            self._set_control_value(key, self.service.resolved()[key])

    def _on_modes_toggled(self, key: str) -> None:
        container = self._controls[key]
        modes = tuple(
            mode for mode in COLOR_FORMATS
            if container.findChild(QCheckBox, f"{key}.{mode}").isChecked()
        )
        self.service.set_property(key, modes)

    def _on_preset_activated(self, index: int) -> None:
        name = self.preset_combo.itemData(index)
        if name:
            self.service.apply_preset(name)

    # --------------------------------------------------------------- refresh
    def refresh(self) -> None:
        self.update_fields(self.service.resolved())
        self._update_max_width(self.service.max_width())
        self._update_preset(self.service.current_preset())
        self._update_history_buttons()

    def update_fields(self, resolved: Mapping[str, Any]) -> None:
        """Show ``resolved`` values without triggering edits."""
        for key in self._controls:
            self._set_control_value(key, resolved.get(key))

    def _set_control_value(self, key: str, value: Any) -> None:
        control = self._controls[key]
        if isinstance(control, QCheckBox):
            blocker = QSignalBlocker(control)
            try:
                control.setChecked(bool(value))
            finally:
                del blocker
        elif isinstance(control, QComboBox):
            blocker = QSignalBlocker(control)
            try:
                text = _display_text(value)
                if control.findText(text) < 0:
                    control.addItem(text)
                control.setCurrentText(text)
            finally:
                del blocker
        elif isinstance(control, QLineEdit):
            blocker = QSignalBlocker(control)
            try:
                control.setText(_display_text(value))
            finally:
                del blocker
        else:
            selected = set(value) if isinstance(value, (list, tuple)) else set()
            for mode in COLOR_FORMATS:
                check = control.findChild(QCheckBox, f"{key}.{mode}")
                blocker = QSignalBlocker(check)
                try:
                    check.setChecked(mode in selected)
                finally:
                    del blocker

    def _update_max_width(self, width: Any) -> None:
        blocker = QSignalBlocker(self.max_width_spin)
        try:
            # The service accepts any finite width; the spin box shows it clamped.
            self.max_width_spin.setValue(int(min(max(width, 0), MAX_WIDTH_LIMIT)))
        finally:
            del blocker

    def _update_preset(self, name: str) -> None:
        index = self.preset_combo.findData(name)
        if index >= 0:
            blocker = QSignalBlocker(self.preset_combo)
            try:
                self.preset_combo.setCurrentIndex(index)
            finally:
                del blocker

    def _update_history_buttons(self) -> None:
        history = self.service.history
        self.undo_button.setEnabled(history.can_undo())
        self.redo_button.setEnabled(history.can_redo())
        self.undo_button.setToolTip(f"Undo {history.undo_text()}".strip())
        self.redo_button.setToolTip(f"Redo {history.redo_text()}".strip())
