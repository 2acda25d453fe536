from PyQt6.QtCore import QObject, pyqtSignal

class DataContext(QObject):
    """Application-wide pub/sub bus for data events."""
    configuration_changed = pyqtSignal(dict)


data_context = DataContext()
