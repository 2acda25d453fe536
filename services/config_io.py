# services/config_io.py
"""Serialization and validation of exported picker configurations.

An export document has the shape::

    {
        "props": {"value": "#06B5EF", "containerBorderWidth": 3, ...},
        "maxWidth": 364
    }

``props`` only carries keys that are set; unset keys resolve through the
Default Table after import, never through ``null``.  Parsing is
all-or-nothing: :func:`parse_document` either returns a complete
:class:`ParsedConfiguration` or raises, and never touches engine state.
"""

from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from PyQt6.QtCore import QObject, QRunnable, pyqtSignal

from utils.constants import DOC_FIELD_MAX_WIDTH, DOC_FIELD_PROPS

from .property_bag import to_plain_dict
from .property_schema import check_value, is_known, is_number

logger = logging.getLogger(__name__)
# Avoid emitting logs unless the app configures handlers.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

Number = Union[int, float]


class ConfigImportError(ValueError):
    """Base class for recoverable import failures."""


class ParseError(ConfigImportError):
    """The document is not well-formed JSON."""


class ShapeError(ConfigImportError):
    """The document parsed but ``props`` is missing or not an object."""


@dataclass
class ParsedConfiguration:
    props: Dict[str, Any]
    max_width: Optional[Number] = None
    ignored_keys: List[str] = field(default_factory=list)
    rejected_keys: List[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------
def serialize(props: Mapping[str, Any], max_width: Number) -> Dict[str, Any]:
    """Return the export document for a configuration."""
    return {
        DOC_FIELD_PROPS: to_plain_dict(props),
        DOC_FIELD_MAX_WIDTH: max_width,
    }


def dumps(document: Mapping[str, Any]) -> str:
    """Return the document as JSON text; raises ``ValueError`` on NaN or infinity."""
    return json.dumps(document, indent=2, ensure_ascii=False, allow_nan=False)


# ---------------------------------------------------------------------------
# Import
# ---------------------------------------------------------------------------
def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _has_non_finite(value: Any) -> bool:
    # Literals such as 1e400 parse to inf, which cannot be exported again.
    if isinstance(value, float):
        return not math.isfinite(value)
    if isinstance(value, list):
        return any(_has_non_finite(v) for v in value)
    if isinstance(value, dict):
        return any(_has_non_finite(v) for v in value.values())
    return False


def parse_document(text: Union[str, bytes], strict: bool = False) -> ParsedConfiguration:
    """Parse and validate an export document.

    Raises :class:`ParseError` for malformed JSON and :class:`ShapeError`
    when ``props`` is absent or not an object.  Unknown keys are ignored,
    ``null`` values are treated as unset, out-of-range numbers such as
    ``1e400`` are dropped and a non-numeric ``maxWidth`` is ignored.
    Values of the wrong type are kept as-is unless ``strict`` is set, in
    which case they are dropped.
    """
    try:
        document = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, TypeError) as e:
        raise ParseError(f"Configuration is not valid JSON: {e}") from e

    if not isinstance(document, dict):
        raise ShapeError("Configuration must be a JSON object.")
    props = document.get(DOC_FIELD_PROPS)
    if not isinstance(props, dict):
        raise ShapeError(f"Configuration has no '{DOC_FIELD_PROPS}' object.")

    parsed = ParsedConfiguration(props={})
    for key, value in props.items():
        if not is_known(key):
            parsed.ignored_keys.append(key)
            continue
        if value is None:
            continue
        if _has_non_finite(value):
            parsed.rejected_keys.append(key)
            continue
        if strict and not check_value(key, value):
            parsed.rejected_keys.append(key)
            continue
        parsed.props[key] = value

    max_width = document.get(DOC_FIELD_MAX_WIDTH)
    if is_number(max_width):
        parsed.max_width = max_width
    elif max_width is not None:
        logger.info("Ignoring non-numeric %s: %r", DOC_FIELD_MAX_WIDTH, max_width)

    if parsed.ignored_keys:
        logger.info("Ignoring unknown keys in configuration: %s", ", ".join(parsed.ignored_keys))
    if parsed.rejected_keys:
        logger.warning("Dropping invalid values for: %s", ", ".join(parsed.rejected_keys))
    return parsed


# ---------------------------------------------------------------------------
# File helpers
# ---------------------------------------------------------------------------
def read_text(file_path: str) -> str:
    with open(file_path, 'r', encoding='utf-8') as f:
        return f.read()


def write_text(file_path: str, text: str) -> None:
    target_dir = os.path.dirname(file_path)
    if target_dir and not os.path.exists(target_dir):
        os.makedirs(target_dir, exist_ok=True)
    with open(file_path, 'w', encoding='utf-8') as f:
        f.write(text)


class _WorkerSignals(QObject):
    """Signals used by background runnables."""
    started = pyqtSignal()
    error = pyqtSignal(str)
    result = pyqtSignal(object)
    finished = pyqtSignal()


class ReadConfigRunnable(QRunnable):
    """Reads a configuration file off the GUI thread.

    Only the raw text travels back through ``signals.result``; parsing and
    merging happen on the GUI thread so an import is applied in one step.
    """

    def __init__(self, file_path: str):
        super().__init__()
        self.file_path = file_path
        self.signals = _WorkerSignals()

    def run(self):
        self.signals.started.emit()
        try:
            text = read_text(self.file_path)
            self.signals.result.emit({
                'file_path': self.file_path,
                'text': text,
            })
        except (OSError, UnicodeDecodeError) as e:
            self.signals.error.emit(str(e))
        finally:
            self.signals.finished.emit()
