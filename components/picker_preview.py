# components/picker_preview.py
"""Live preview of the configured color picker.

This is a light stand-in for the embedded picker widget: it paints the
container and the color swatch from the resolved properties and lets the
user change the color directly (hex field or system color dialog).  Direct
changes go through :meth:`ConfiguratorService.set_color`, exactly like the
real widget's value-change callback.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

from PyQt6.QtCore import QRectF, QSignalBlocker, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPainter, QPainterPath, QPen
from PyQt6.QtWidgets import (
    QColorDialog,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from services.configurator_service import ConfiguratorService
from utils.icon_manager import IconManager

_LENGTH_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*(px)?\s*$")


def css_px(value: Any, fallback: float = 0.0) -> float:
    """Return a pixel size for a number or a ``"12px"`` style string."""
    if isinstance(value, bool):
        return fallback
    if isinstance(value, (int, float)):
        return float(value)
    match = _LENGTH_RE.match(str(value))
    return float(match.group(1)) if match else fallback


def qcolor(value: Any, fallback: str = "#000000") -> QColor:
    color = QColor(str(value)) if isinstance(value, str) else QColor()
    return color if color.isValid() else QColor(fallback)


def font_weight(value: float) -> QFont.Weight:
    """Return the QFont weight closest to a CSS font-weight."""
    return min(QFont.Weight, key=lambda w: abs(w.value - value))


class _Canvas(QWidget):
    """Paints the picker container and its preview swatch."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.props: Mapping[str, Any] = {}
        self.color: Any = ""
        self.max_width = 0
        self.setMinimumHeight(220)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

    def set_state(self, props: Mapping[str, Any], color: Any, max_width: Any) -> None:
        self.props = props
        self.color = color
        self.max_width = css_px(max_width)
        self.update()

    def paintEvent(self, event):  # noqa: N802 - Qt override
        if not self.props:
            return
        p = self.props
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        width = min(float(self.width()) - 2, self.max_width or float(self.width()))
        padding = css_px(p.get("containerPadding"), 16)
        gap = css_px(p.get("containerElementGap"), 16)
        sat_height = css_px(p.get("saturationHeight"), 140)
        preview_h = css_px(p.get("previewHeight"), 44)
        height = padding * 2 + sat_height + gap + preview_h
        x = (self.width() - width) / 2
        container = QRectF(x, 1, width, height)

        border_w = css_px(p.get("containerBorderWidth"), 1)
        radius = css_px(p.get("containerRadius"), 12)
        painter.setPen(QPen(qcolor(p.get("containerBorderColor")), border_w) if border_w > 0 else Qt.PenStyle.NoPen)
        painter.setBrush(qcolor(p.get("containerBg")))
        painter.drawRoundedRect(container, radius, radius)

        # Saturation area filled with the current color
        sat = QRectF(container.left() + padding, container.top() + padding,
                     container.width() - padding * 2, sat_height)
        sat_radius = css_px(p.get("saturationRadius"), 8)
        path = QPainterPath()
        path.addRoundedRect(sat, sat_radius, sat_radius)
        painter.fillPath(path, QBrush(qcolor(self.color, str(p.get("previewBgFallback", "#111111")))))

        # Preview swatch with the preview text
        if p.get("colorPreviewPosition") != "none":
            preview_w = css_px(p.get("previewWidth"), 44)
            swatch = QRectF(sat.left(), sat.bottom() + gap, preview_w, preview_h)
            preview_radius = css_px(p.get("previewRadius"), 8)
            preview_border = css_px(p.get("previewBorderWidth"), 1)
            painter.setPen(QPen(qcolor(p.get("previewBorderColor"), "#333333"), preview_border)
                           if preview_border > 0 else Qt.PenStyle.NoPen)
            painter.setBrush(qcolor(self.color, str(p.get("previewBgFallback", "#111111"))))
            painter.drawRoundedRect(swatch, preview_radius, preview_radius)

            font = QFont(self.font())
            font.setPixelSize(max(1, int(css_px(p.get("previewFontSize"), 18))))
            font.setWeight(font_weight(css_px(p.get("previewFontWeight"), 600)))
            painter.setFont(font)
            painter.setPen(qcolor(p.get("previewTextColor"), "#ffffff"))
            painter.drawText(swatch, Qt.AlignmentFlag.AlignCenter, str(p.get("colorPreviewAreaText", "")))
        painter.end()


class PickerPreview(QWidget):
    """Preview canvas plus the direct color controls."""

    def __init__(self, service: ConfiguratorService, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("PickerPreview")
        self.service = service

        layout = QVBoxLayout(self)
        self.canvas = _Canvas(self)
        layout.addWidget(self.canvas, 1)

        row = QHBoxLayout()
        self.color_edit = QLineEdit()
        self.color_edit.setObjectName("ColorEdit")
        self.color_edit.editingFinished.connect(self._on_color_edited)
        self.pick_button = QPushButton(IconManager.create_icon("fa5s.eye-dropper"), "")
        self.pick_button.setToolTip("Pick Color")
        self.pick_button.clicked.connect(lambda: self._pick_color())
        row.addWidget(self.color_edit, 1)
        row.addWidget(self.pick_button)
        layout.addLayout(row)

        service.props_changed.connect(lambda _resolved: self.refresh())
        service.color_changed.connect(lambda _color: self.refresh())
        service.max_width_changed.connect(lambda _width: self.refresh())
        self.refresh()

    def refresh(self) -> None:
        self.canvas.set_state(self.service.resolved(), self.service.color(), self.service.max_width())
        blocker = QSignalBlocker(self.color_edit)
        try:
            self.color_edit.setText(str(self.service.color()))
        finally:
            del blocker

    def _on_color_edited(self) -> None:
        self.service.set_color(self.color_edit.text().strip())

    def _pick_color(self) -> None:
        chosen = QColorDialog.getColor(qcolor(self.service.color()), self, "Pick Color")
        if chosen.isValid():
            self.service.set_color(chosen.name().upper())
