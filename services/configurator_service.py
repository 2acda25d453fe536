# services/configurator_service.py
"""Single source of truth for the picker configuration.

The service owns the current property bag, the live color value, the
preview max-width and the name of the last applied preset.  Every change
goes through one commit path (:meth:`_perform_set_state`) driven by the
command history, which gives three guarantees:

* the color value is re-derived from the resolved bag in the same step the
  bag is replaced, so ``resolved()["value"] == color()`` holds whenever a
  signal fires;
* a color change equal to the current color is a no-op, so views that echo
  the value back converge after at most one extra call;
* a failed import leaves the state untouched.

Views subscribe to the fine-grained signals below; other collaborators can
listen on :data:`DataContext.configuration_changed` instead.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from PyQt6.QtCore import QObject, pyqtSignal

from utils.constants import (
    COLOR_KEY,
    DEFAULT_MAX_WIDTH,
    DEFAULT_PRESET,
    DOC_FIELD_MAX_WIDTH,
    DOC_FIELD_PROPS,
    SETTING_STRICT_IMPORT,
)

from . import config_io
from .command_history_service import CommandHistoryService
from .commands import (
    ApplyPresetCommand,
    ConfigState,
    EditPropertiesCommand,
    ImportConfigurationCommand,
    SetColorCommand,
    SetMaxWidthCommand,
)
from .data_context import DataContext, data_context
from .presets import get_preset
from .property_bag import PropertyBag, make_bag, merge, resolve
from .property_schema import is_number
from .settings_service import settings_service

logger = logging.getLogger(__name__)
# Avoid emitting logs unless the app configures handlers.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

Number = Union[int, float]

IMPORT_SUCCESS_MESSAGE = "Configuration imported successfully."
IMPORT_FAILURE_MESSAGE = "Failed to import configuration. Please check the file format."


class ConfiguratorService(QObject):
    """Holds and mutates the picker configuration."""

    # Emitted with the resolved bag (complete, read-only mapping).
    props_changed = pyqtSignal(object)
    color_changed = pyqtSignal(object)
    max_width_changed = pyqtSignal(object)
    preset_changed = pyqtSignal(str)
    import_succeeded = pyqtSignal()
    # Emitted with a user-facing message; the detailed error goes to the log.
    import_failed = pyqtSignal(str)

    def __init__(
        self,
        bus: Optional[DataContext] = None,
        history: Optional[CommandHistoryService] = None,
        strict_import: bool = False,
    ):
        super().__init__()
        self._bus = bus
        self.history = history if history is not None else CommandHistoryService()
        self.strict_import = strict_import

        preset = get_preset(DEFAULT_PRESET)
        self._props: PropertyBag = make_bag(preset.props)
        self._resolved: PropertyBag = resolve(self._props)
        self._color: Any = self._resolved[COLOR_KEY]
        self._max_width: Number = DEFAULT_MAX_WIDTH
        self._preset: str = preset.name

        if self._bus is not None:
            self.props_changed.connect(self._publish)
            self.max_width_changed.connect(self._publish)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    def props(self) -> PropertyBag:
        """The bag of explicitly set keys."""
        return self._props

    def resolved(self) -> PropertyBag:
        """The bag resolved over the Default Table; always complete."""
        return self._resolved

    def color(self) -> Any:
        return self._color

    def max_width(self) -> Number:
        return self._max_width

    def current_preset(self) -> str:
        return self._preset

    def state(self) -> ConfigState:
        return ConfigState(props=self._props, max_width=self._max_width, preset=self._preset)

    def configuration(self) -> Dict[str, Any]:
        """What the picker and code preview consume."""
        return {
            DOC_FIELD_PROPS: dict(self._resolved),
            "color": self._color,
            DOC_FIELD_MAX_WIDTH: self._max_width,
        }

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def set_property(self, key: str, value: Any) -> bool:
        return self.set_properties({key: value})

    def set_properties(self, changes: Mapping[str, Any]) -> bool:
        """Merge ``changes`` onto the current bag.

        A ``None`` value unsets the key so it falls back to its default.
        Returns ``False`` when nothing changed.
        """
        updates = {k: v for k, v in changes.items() if v is not None}
        cleared = [k for k, v in changes.items() if v is None]
        new_props = merge(self._props, updates)
        if cleared:
            new_props = make_bag({k: v for k, v in new_props.items() if k not in cleared})
        if new_props == self._props:
            return False
        command = EditPropertiesCommand(
            self,
            self._replace(props=new_props),
            keys=list(changes.keys()),
        )
        return self.history.add_command(command)

    def reset_property(self, key: str) -> bool:
        return self.set_properties({key: None})

    def apply_preset(self, name: str) -> bool:
        """Replace the bag with a preset.

        The preset is resolved against the Default Table only, so the result
        does not depend on the bag in effect before the switch.  Unknown
        names fall back to the default preset.
        """
        preset = get_preset(name)
        if preset.name != name:
            logger.warning("Unknown preset %r, using %r", name, preset.name)
        new_props = make_bag(preset.props)
        if new_props == self._props and preset.name == self._preset:
            return False
        command = ApplyPresetCommand(self, self._replace(props=new_props, preset=preset.name))
        return self.history.add_command(command)

    def set_color(self, color: Any) -> bool:
        """Handle a color change coming from the picker widget itself."""
        if color is None or color == self._color:
            return False
        new_props = merge(self._props, {COLOR_KEY: color})
        return self.history.add_command(SetColorCommand(self, self._replace(props=new_props)))

    def set_max_width(self, width: Any) -> bool:
        if not is_number(width):
            logger.warning("Ignoring non-numeric max width: %r", width)
            return False
        if width == self._max_width:
            return False
        return self.history.add_command(SetMaxWidthCommand(self, self._replace(max_width=width)))

    def reset(self) -> None:
        """Return to the default preset and width, forgetting history."""
        preset = get_preset(DEFAULT_PRESET)
        before = self.state()
        after = ConfigState(props=make_bag(preset.props), max_width=DEFAULT_MAX_WIDTH, preset=preset.name)
        self._perform_set_state(after)
        self._notify_state_change(before, after)
        self.history.clear()

    def undo(self) -> bool:
        return self.history.undo()

    def redo(self) -> bool:
        return self.history.redo()

    # ------------------------------------------------------------------
    # Import / export
    # ------------------------------------------------------------------
    def export_document(self) -> Dict[str, Any]:
        return config_io.serialize(self._props, self._max_width)

    def export_text(self) -> str:
        return config_io.dumps(self.export_document())

    def export_file(self, file_path: str) -> None:
        """Write the current configuration; raises ``OSError`` on failure."""
        config_io.write_text(file_path, self.export_text())
        logger.info("Exported configuration to %s", file_path)

    def import_text(self, text: Union[str, bytes]) -> bool:
        """Parse ``text`` and merge it onto the current configuration.

        Failures are reported through :attr:`import_failed` and leave the
        state untouched.
        """
        try:
            parsed = config_io.parse_document(text, strict=self.strict_import)
        except config_io.ConfigImportError as e:
            logger.warning("Failed to import configuration: %s", e)
            self.import_failed.emit(IMPORT_FAILURE_MESSAGE)
            return False

        new_props = merge(self._props, parsed.props)
        new_width = parsed.max_width if parsed.max_width is not None else self._max_width
        new_state = self._replace(props=new_props, max_width=new_width)
        if new_state != self.state():
            if not self.history.add_command(ImportConfigurationCommand(self, new_state)):
                self.import_failed.emit(IMPORT_FAILURE_MESSAGE)
                return False
        self.import_succeeded.emit()
        return True

    def import_file(self, file_path: str) -> bool:
        try:
            text = config_io.read_text(file_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read configuration file %s: %s", file_path, e)
            self.import_failed.emit(IMPORT_FAILURE_MESSAGE)
            return False
        return self.import_text(text)

    def import_file_async(self, file_path: str) -> Tuple[Any, config_io.ReadConfigRunnable]:
        """
        Prepare an async import.

        Returns a tuple of (signals, runnable). The caller starts the runnable
        on a QThreadPool; the file text is applied on this object's thread
        once it arrives, and read errors are reported via ``import_failed``.
        """
        runnable = config_io.ReadConfigRunnable(file_path)
        runnable.signals.result.connect(lambda payload: self.import_text(payload['text']))
        runnable.signals.error.connect(self._on_async_read_error)
        return runnable.signals, runnable

    def _on_async_read_error(self, message: str) -> None:
        logger.warning("Could not read configuration file: %s", message)
        self.import_failed.emit(IMPORT_FAILURE_MESSAGE)

    # ------------------------------------------------------------------
    # Commit path (used by commands)
    # ------------------------------------------------------------------
    def _replace(self, props=None, max_width=None, preset=None) -> ConfigState:
        return ConfigState(
            props=self._props if props is None else props,
            max_width=self._max_width if max_width is None else max_width,
            preset=self._preset if preset is None else preset,
        )

    def _perform_set_state(self, state: ConfigState) -> None:
        # Bag and color are replaced together; nothing is emitted here.
        resolved = resolve(state.props)
        self._props = state.props
        self._resolved = resolved
        self._color = resolved[COLOR_KEY]
        self._max_width = state.max_width
        self._preset = state.preset

    def _notify_state_change(self, before: ConfigState, after: ConfigState) -> None:
        before_resolved = resolve(before.props)
        if before_resolved != self._resolved:
            self.props_changed.emit(self._resolved)
        if before_resolved[COLOR_KEY] != self._color:
            self.color_changed.emit(self._color)
        if before.max_width != after.max_width:
            self.max_width_changed.emit(self._max_width)
        if before.preset != after.preset:
            self.preset_changed.emit(self._preset)

    def _publish(self, *_args) -> None:
        if self._bus is not None:
            self._bus.configuration_changed.emit(self.configuration())


def _make_default_service() -> ConfiguratorService:
    strict = bool(settings_service.get_value(SETTING_STRICT_IMPORT, False))
    return ConfiguratorService(data_context, strict_import=strict)


configurator_service = _make_default_service()
