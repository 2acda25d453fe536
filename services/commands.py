"""
services/commands.py

Command classes implementing undo/redo for configuration changes. Every
command captures a full before/after :class:`ConfigState` snapshot, so undo
and redo go through the same commit path as the first execution and the
color value is re-derived from the restored bag each time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

if TYPE_CHECKING:  # pragma: no cover
    from .configurator_service import ConfiguratorService


@dataclass(frozen=True)
class ConfigState:
    """Immutable snapshot of everything a command can change."""

    props: Mapping[str, Any]
    max_width: Union[int, float]
    preset: str


class Command(ABC):
    """Abstract base for all undo/redo commands."""

    text = ""

    def __init__(self) -> None:
        pass

    @abstractmethod
    def redo(self) -> None:
        """Apply the command's effect."""
        raise NotImplementedError

    @abstractmethod
    def undo(self) -> None:
        """Revert the command's effect."""
        raise NotImplementedError

    def notify(self) -> None:
        """
        Emit any relevant notifications/signals after redo/undo.
        Subclasses override to notify the appropriate services/UI.
        """
        # Default: no notification
        return

    def merge_with(self, other: "Command") -> bool:
        """Absorb ``other`` (already executed) into this command.

        Return ``True`` when merged so the history records a single step.
        """
        return False


class StateChangeCommand(Command):
    """Replaces the configurator state; undo restores the previous snapshot."""

    text = "Change Configuration"

    def __init__(
        self,
        service: "ConfiguratorService",
        new_state: ConfigState,
        old_state: Optional[ConfigState] = None,
    ):
        super().__init__()
        self.service = service
        self.new_state = new_state
        self.old_state = old_state if old_state is not None else service.state()
        self._transition = (self.old_state, self.new_state)

    def redo(self) -> None:
        self._transition = (self.service.state(), self.new_state)
        self.service._perform_set_state(self.new_state)

    def undo(self) -> None:
        self._transition = (self.service.state(), self.old_state)
        self.service._perform_set_state(self.old_state)

    def notify(self) -> None:
        before, after = self._transition
        self.service._notify_state_change(before, after)


class EditPropertiesCommand(StateChangeCommand):
    """Merges a partial bag of edits onto the current bag."""

    def __init__(self, service, new_state, old_state=None, keys=()):
        super().__init__(service, new_state, old_state)
        self.keys = tuple(keys)
        if len(self.keys) == 1:
            self.text = f"Edit {self.keys[0]}"
        else:
            self.text = "Edit Properties"


class ApplyPresetCommand(StateChangeCommand):
    """Replaces the bag with a preset resolved against the defaults."""

    def __init__(self, service, new_state, old_state=None):
        super().__init__(service, new_state, old_state)
        self.text = f"Apply Preset '{new_state.preset}'"


class ImportConfigurationCommand(StateChangeCommand):
    text = "Import Configuration"


class SetMaxWidthCommand(StateChangeCommand):
    text = "Change Preview Width"


class SetColorCommand(StateChangeCommand):
    """Color change coming straight from the picker widget.

    Consecutive color changes (a drag produces many) collapse into one
    undo step.
    """

    text = "Change Color"

    def merge_with(self, other: Command) -> bool:
        if not isinstance(other, SetColorCommand):
            return False
        self.new_state = other.new_state
        return True
