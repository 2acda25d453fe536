"""
Central constants and enums used across the application.

- Introduces `PropertyType` enum for the semantic type of every property.
"""

from enum import Enum

# --- File Types ---
CONFIG_FILE_FILTER = 'JSON Files (*.json);;All Files (*)'
DEFAULT_EXPORT_FILE_NAME = 'color-picker-config.json'

# --- Export document fields ---
DOC_FIELD_PROPS = 'props'
DOC_FIELD_MAX_WIDTH = 'maxWidth'

# --- Engine ---
COLOR_KEY = 'value'
DEFAULT_PRESET = 'default'
DEFAULT_MAX_WIDTH = 364
MAX_WIDTH_LIMIT = 10000
HISTORY_LIMIT = 100

# --- Settings keys ---
SETTING_LAST_CONFIG_DIR = 'paths/last_config_dir'
SETTING_STRICT_IMPORT = 'import/strict'
SETTING_WINDOW_GEOMETRY = 'main_window/geometry'
SETTING_WINDOW_STATE = 'main_window/state'


class PropertyType(str, Enum):
    """Enumeration of the semantic type of a configurable property.

    Subclasses ``str`` so values behave like strings for Qt/JSON,
    while giving type-safety and autocomplete throughout the codebase.
    """
    COLOR = 'color'
    BOOL = 'bool'
    NUMBER = 'number'
    LENGTH = 'length'
    CHOICE = 'choice'
    TEXT = 'text'
    MODES = 'modes'


# --- Enumerated choices ---
COLOR_FORMATS = ('hex', 'rgb', 'hsl')
THUMB_BORDER_STYLES = ('solid', 'dashed', 'none')
CONTRAST_FORMATS = ('value:1', '1:value', 'value')
PREVIEW_POSITIONS = ('top', 'contrast', 'none')
