# main_window/window.py
# The core MainWindow class, which wires the configurator views to the services.

from functools import partial

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QMainWindow, QSplitter

from components.code_preview import CodePreview
from components.controls_sidebar import ControlsSidebar
from components.picker_preview import PickerPreview
from services.configurator_service import configurator_service
from services.data_context import data_context

from . import actions, config_actions, events, ui_setup


class MainWindow(QMainWindow):
    """
    The main application window: controls on the left, the live picker and
    the generated usage snippet on the right.
    """

    def __init__(self, initial_config_path=None, service=None, bus=None):
        super().__init__()
        self.service = service if service is not None else configurator_service
        self.bus = bus if bus is not None else data_context

        ui_setup.setup_window(self)

        self.sidebar = ControlsSidebar(self.service)
        self.picker_preview = PickerPreview(self.service)
        self.code_preview = CodePreview(self.bus, self.service.configuration())

        right = QSplitter(Qt.Orientation.Vertical)
        right.addWidget(self.picker_preview)
        right.addWidget(self.code_preview)
        right.setStretchFactor(0, 3)
        right.setStretchFactor(1, 2)

        self.splitter = QSplitter(Qt.Orientation.Horizontal)
        self.splitter.setObjectName("MainSplitter")
        self.splitter.addWidget(self.sidebar)
        self.splitter.addWidget(right)
        self.splitter.setStretchFactor(1, 1)
        self.splitter.setSizes([380, 900])
        self.setCentralWidget(self.splitter)

        actions.create_actions(self)
        ui_setup.setup_status_bar(self)
        ui_setup.restore_window_state(self)

        self._connect_signals()

        if initial_config_path:
            config_actions.load_config(self, initial_config_path)

        self.update_window_title()
        actions.update_undo_redo_actions(self)

    def _connect_signals(self):
        """Connect UI signals, grouped by functional area."""

        def bulk_connect(pairs):
            for sig, handler in pairs:
                sig.connect(handler)

        # Service notifications
        bulk_connect([
            (self.service.history.history_changed, partial(actions.update_undo_redo_actions, self)),
            (self.service.preset_changed, lambda _name: self.update_window_title()),
            (self.service.import_succeeded, partial(config_actions.on_import_succeeded, self)),
            (self.service.import_failed, partial(config_actions.on_import_failed, self)),
        ])

        # Sidebar requests and global actions
        bulk_connect([
            (self.sidebar.import_requested, partial(config_actions.import_config, self)),
            (self.sidebar.export_requested, partial(config_actions.export_config, self)),
            (self.import_action.triggered, lambda: config_actions.import_config(self)),
            (self.export_action.triggered, lambda: config_actions.export_config(self)),
            (self.copy_code_action.triggered, lambda: self.code_preview.copy_to_clipboard()),
            (self.reset_action.triggered, lambda: config_actions.reset_config(self)),
            (self.undo_action.triggered, lambda: self.service.undo()),
            (self.redo_action.triggered, lambda: self.service.redo()),
            (self.exit_action.triggered, lambda: self.close()),
        ])

    def update_window_title(self): config_actions.update_window_title(self)
    def closeEvent(self, event): events.closeEvent(self, event)
