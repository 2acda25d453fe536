# main_window/ui_setup.py
from PyQt6.QtWidgets import QStatusBar, QLabel, QWidget, QHBoxLayout, QFrame
from PyQt6.QtCore import QByteArray
from utils.icon_manager import IconManager
from utils.constants import SETTING_WINDOW_GEOMETRY, SETTING_WINDOW_STATE

from services.settings_service import settings_service

import qtawesome as qta

def setup_window(win):
    app_icon = qta.icon('fa5s.palette')
    win.setWindowIcon(app_icon)
    win.resize(1280, 820)

def setup_status_bar(win):
    win.status_bar = QStatusBar()
    win.setStatusBar(win.status_bar)
    container = QWidget()
    layout = QHBoxLayout(container)
    layout.setContentsMargins(0, 0, 0, 0)
    layout.setSpacing(0)

    def add_status_widget(icon_name, initial_text):
        layout.addWidget(_create_separator())
        icon_label = QLabel()
        icon_label.setPixmap(IconManager.create_pixmap(icon_name, 14))
        layout.addWidget(icon_label)
        text_label = QLabel(initial_text)
        layout.addWidget(text_label)
        return text_label

    win.preset_label = add_status_widget('fa5s.swatchbook', "")
    win.color_label = add_status_widget('fa5s.tint', "")
    win.width_label = add_status_widget('fa5s.arrows-alt-h', "")
    layout.addWidget(_create_separator())
    win.status_bar.addPermanentWidget(container)

    win.service.preset_changed.connect(lambda _name: update_status_labels(win))
    win.service.color_changed.connect(lambda _color: update_status_labels(win))
    win.service.max_width_changed.connect(lambda _width: update_status_labels(win))
    update_status_labels(win)

def update_status_labels(win):
    win.preset_label.setText(win.service.current_preset())
    win.color_label.setText(str(win.service.color()))
    win.width_label.setText(f"{win.service.max_width()} px")

def _create_separator():
    separator = QFrame()
    separator.setFrameShape(QFrame.Shape.VLine)
    return separator

def save_window_state(win):
    settings_service.set_value(SETTING_WINDOW_GEOMETRY, win.saveGeometry().toHex().data().decode())
    settings_service.set_value(SETTING_WINDOW_STATE, win.saveState().toHex().data().decode())
    settings_service.save()

def restore_window_state(win):
    geometry_hex = settings_service.get_value(SETTING_WINDOW_GEOMETRY)
    if geometry_hex:
        win.restoreGeometry(QByteArray.fromHex(geometry_hex.encode()))
    state_hex = settings_service.get_value(SETTING_WINDOW_STATE)
    if state_hex:
        win.restoreState(QByteArray.fromHex(state_hex.encode()))
