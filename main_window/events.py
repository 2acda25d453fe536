# main_window/events.py

def closeEvent(win, event):
    """Persists window geometry and the last used directory before closing."""
    from . import ui_setup
    ui_setup.save_window_state(win)
    event.accept()
