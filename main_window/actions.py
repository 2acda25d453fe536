# main_window/actions.py
from PyQt6.QtGui import QAction, QKeySequence
from utils.icon_manager import IconManager


def create_actions(win):
    """Creates the global QAction objects and the menu bar for the main window."""
    def _action(icon_name: str, text: str, shortcut=None):
        action = QAction(IconManager.create_icon(icon_name), text, win)
        if shortcut is not None:
            action.setShortcut(shortcut)
        return action

    win.import_action = _action('fa5s.file-import', "Import Config...", QKeySequence.StandardKey.Open)
    win.export_action = _action('fa5s.file-export', "Export Config...", QKeySequence.StandardKey.Save)
    win.copy_code_action = _action('fa5s.code', "Copy Code", QKeySequence("Ctrl+Shift+C"))
    win.reset_action = _action('fa5s.sync-alt', "Reset to Defaults")
    win.exit_action = _action('fa5s.sign-out-alt', "Exit", QKeySequence.StandardKey.Quit)
    win.undo_action = _action('fa5s.undo', "Undo", QKeySequence.StandardKey.Undo)
    win.redo_action = _action('fa5s.redo', "Redo", QKeySequence.StandardKey.Redo)

    win.addActions([
        win.import_action,
        win.export_action,
        win.copy_code_action,
        win.reset_action,
        win.exit_action,
        win.undo_action,
        win.redo_action,
    ])

    menu_bar = win.menuBar()
    file_menu = menu_bar.addMenu("&File")
    file_menu.addAction(win.import_action)
    file_menu.addAction(win.export_action)
    file_menu.addSeparator()
    file_menu.addAction(win.copy_code_action)
    file_menu.addAction(win.reset_action)
    file_menu.addSeparator()
    file_menu.addAction(win.exit_action)

    edit_menu = menu_bar.addMenu("&Edit")
    edit_menu.addAction(win.undo_action)
    edit_menu.addAction(win.redo_action)


def update_undo_redo_actions(win):
    history = win.service.history
    win.undo_action.setEnabled(history.can_undo())
    win.redo_action.setEnabled(history.can_redo())
    undo_text = history.undo_text()
    redo_text = history.redo_text()
    win.undo_action.setText(f"Undo {undo_text}" if undo_text else "Undo")
    win.redo_action.setText(f"Redo {redo_text}" if redo_text else "Redo")
