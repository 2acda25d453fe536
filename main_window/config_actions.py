# main_window/config_actions.py
import logging
import os

from PyQt6.QtWidgets import QFileDialog, QMessageBox, QApplication
from PyQt6.QtCore import QThreadPool, Qt

from services.configurator_service import IMPORT_SUCCESS_MESSAGE
from services.settings_service import settings_service
from utils.constants import CONFIG_FILE_FILTER, DEFAULT_EXPORT_FILE_NAME, SETTING_LAST_CONFIG_DIR

logger = logging.getLogger(__name__)

STATUS_TIMEOUT_MS = 4000


def import_config(win):
    """Handles the 'Import Config' action."""
    last_dir = settings_service.get_value(SETTING_LAST_CONFIG_DIR, "")
    file_path, _ = QFileDialog.getOpenFileName(win, "Import Configuration", last_dir, CONFIG_FILE_FILTER)

    if file_path:
        _remember_dir(file_path)
        _load_config_async_ui(win, file_path)


def load_config(win, path):
    """Loads a specific configuration file, used for command-line loading."""
    _load_config_async_ui(win, path)


def export_config(win):
    """Handles the 'Export Config' action."""
    last_dir = settings_service.get_value(SETTING_LAST_CONFIG_DIR, "")
    suggested = os.path.join(last_dir, DEFAULT_EXPORT_FILE_NAME) if last_dir else DEFAULT_EXPORT_FILE_NAME
    file_path, _ = QFileDialog.getSaveFileName(win, "Export Configuration", suggested, CONFIG_FILE_FILTER)

    if not file_path:
        return False
    try:
        win.service.export_file(file_path)
    except OSError as e:
        logger.error("Could not export configuration to %s: %s", file_path, e)
        _show_error(win, "Error Exporting Configuration", f"Could not write configuration file:\n{e}")
        return False
    _remember_dir(file_path)
    if hasattr(win, 'status_bar'):
        win.status_bar.showMessage(f"Exported to {os.path.basename(file_path)}", STATUS_TIMEOUT_MS)
    return True


def reset_config(win):
    reply = QMessageBox.question(
        win,
        "Reset Configuration",
        "Discard all changes and return to the default preset?",
    )
    if reply == QMessageBox.StandardButton.Yes:
        win.service.reset()


def on_import_succeeded(win):
    if hasattr(win, 'status_bar'):
        win.status_bar.showMessage(IMPORT_SUCCESS_MESSAGE, STATUS_TIMEOUT_MS)


def on_import_failed(win, message):
    QMessageBox.warning(win, "Import Failed", message)


def update_window_title(win):
    title = "Color Picker Builder"
    win.setWindowTitle(f"{title} - {win.service.current_preset()}")


def _remember_dir(file_path):
    settings_service.set_value(SETTING_LAST_CONFIG_DIR, os.path.dirname(file_path))
    settings_service.save()


# ------------------------ Async helpers ------------------------

def _set_busy(win, text: str):
    QApplication.setOverrideCursor(Qt.CursorShape.WaitCursor)
    if hasattr(win, 'status_bar'):
        win.status_bar.showMessage(text)


def _clear_busy(win):
    QApplication.restoreOverrideCursor()


def _load_config_async_ui(win, file_path: str):
    signals, runnable = win.service.import_file_async(file_path)
    # The runnable is deleted by the pool once it finishes; keep its signals alive.
    win._pending_import = signals

    def on_started():
        _set_busy(win, "Importing configuration...")

    def on_finished():
        _clear_busy(win)
        win._pending_import = None

    signals.started.connect(on_started)
    signals.finished.connect(on_finished)

    QThreadPool.globalInstance().start(runnable)


def _show_error(win, title: str, text: str):
    msg_box = QMessageBox(win)
    msg_box.setWindowTitle(title)
    msg_box.setText(text)
    msg_box.setIcon(QMessageBox.Icon.Critical)
    msg_box.exec()
