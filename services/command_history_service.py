# services/command_history_service.py
# Manages the undo/redo stacks for configuration changes.

from PyQt6.QtCore import QObject, pyqtSignal
from collections import deque
import logging

from utils.constants import HISTORY_LIMIT
from .commands import Command

logger = logging.getLogger(__name__)
# Avoid emitting logs unless the app configures handlers.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class CommandHistoryService(QObject):
    """
    A service that manages the undo and redo stacks for the configurator,
    allowing edits, preset switches and imports to be reversed and re-applied.
    """
    history_changed = pyqtSignal()

    def __init__(self, limit: int = HISTORY_LIMIT):
        super().__init__()
        self._undo_stack = deque(maxlen=limit)
        self._redo_stack = deque(maxlen=limit)

    def _execute(self, command: Command, action: str) -> bool:
        """
        Executes the given action ("undo"/"redo") on the command and then
        calls its notify().

        - Returns True if the action executes successfully.
        - Returns False if action execution raises; notify is skipped then.
        - Any exceptions from notify are logged but do not fail the action.
        """
        try:
            getattr(command, action)()
        except Exception as e:
            logger.exception("Command %s failed: %s", action, e)
            return False

        try:
            command.notify()
        except Exception as e:
            logger.exception("Command notify failed after %s: %s", action, e)
        return True

    def add_command(self, command: Command) -> bool:
        """
        Executes a new command and records it, clearing the redo stack.

        If the command on top of the undo stack absorbs the new one (see
        :meth:`Command.merge_with`) no new undo step is created.
        """
        if not self._execute(command, "redo"):
            return False

        top = self._undo_stack[-1] if self._undo_stack else None
        if top is None or not top.merge_with(command):
            self._undo_stack.append(command)
        self._redo_stack.clear()

        self.history_changed.emit()
        return True

    def undo(self) -> bool:
        """
        Pops a command from the undo stack, executes its undo method,
        and pushes it to the redo stack.
        """
        if not self.can_undo():
            return False
        command = self._undo_stack[-1]
        if not self._execute(command, "undo"):
            return False

        self._undo_stack.pop()
        self._redo_stack.append(command)
        self.history_changed.emit()
        return True

    def redo(self) -> bool:
        """
        Pops a command from the redo stack, executes its redo method,
        and pushes it back to the undo stack.
        """
        if not self.can_redo():
            return False
        command = self._redo_stack[-1]
        if not self._execute(command, "redo"):
            return False

        self._redo_stack.pop()
        self._undo_stack.append(command)
        self.history_changed.emit()
        return True

    def can_undo(self):
        """Returns True if there are commands on the undo stack."""
        return bool(self._undo_stack)

    def can_redo(self):
        """Returns True if there are commands on the redo stack."""
        return bool(self._redo_stack)

    def undo_text(self) -> str:
        return self._undo_stack[-1].text if self._undo_stack else ""

    def redo_text(self) -> str:
        return self._redo_stack[-1].text if self._redo_stack else ""

    def clear(self):
        """Clears both the undo and redo stacks."""
        self._undo_stack.clear()
        self._redo_stack.clear()
        self.history_changed.emit()
