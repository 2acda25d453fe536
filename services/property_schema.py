# services/property_schema.py
"""Canonical schema of every configurable color-picker property.

Each property has exactly one semantic :class:`~utils.constants.PropertyType`
and one default value.  The table below is the only place a property needs
to be declared: the merge engine, the importer, the control panel and the
code preview all read from it.

The order of :data:`SCHEMA` is the order in which the control panel lists
groups and fields, and the order in which the code preview emits props.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
from types import MappingProxyType
import math
from typing import Any, List, Mapping, Optional, Tuple

from utils.constants import (
    COLOR_FORMATS,
    CONTRAST_FORMATS,
    PREVIEW_POSITIONS,
    THUMB_BORDER_STYLES,
    PropertyType,
)


class SchemaError(KeyError):
    """Raised when a caller asks the schema about a key it does not define."""

    def __init__(self, key: Any):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Unknown property key: {self.key!r}"


@dataclass(frozen=True, slots=True)
class PropertySpec:
    """Static description of one property."""

    key: str
    type: PropertyType
    default: Any
    group: str
    label: str
    choices: Tuple[str, ...] = ()
    step: Optional[float] = None


_C = PropertyType.COLOR
_B = PropertyType.BOOL
_N = PropertyType.NUMBER
_L = PropertyType.LENGTH
_E = PropertyType.CHOICE
_T = PropertyType.TEXT
_M = PropertyType.MODES

# (group, [(key, type, default, label, extras...)])
_TABLE: List[Tuple[str, List[tuple]]] = [
    ("General", [
        ("value", _C, "#06B5EF", "Default Color"),
        ("isRTL", _B, False, "Right-to-Left (RTL)"),
        ("showContrast", _B, True, "Show Contrast"),
        ("colorPreviewAreaText", _T, "A", "Preview Area Text"),
    ]),
    ("Modes & Formats", [
        ("enabledModes", _M, ("hex", "rgb", "hsl"), "Enabled Modes"),
        ("defaultFormat", _E, "hex", "Default Format", {"choices": COLOR_FORMATS}),
        ("modeDropdownFullWidth", _B, False, "Full-Width Mode Dropdown"),
    ]),
    ("Labels", [
        ("hexLabel", _T, "HEX", "HEX Label"),
        ("rgbLabel", _T, "RGB", "RGB Label"),
        ("hslLabel", _T, "HSL", "HSL Label"),
        ("modeLabel", _T, "Mode", "Mode Label"),
        ("rLabel", _T, "R", "Red Channel Label"),
        ("gLabel", _T, "G", "Green Channel Label"),
        ("bLabel", _T, "B", "Blue Channel Label"),
        ("hLabel", _T, "H", "Hue Channel Label"),
        ("sLabel", _T, "S", "Saturation Channel Label"),
        ("lLabel", _T, "L", "Lightness Channel Label"),
    ]),
    ("Container", [
        ("containerBg", _C, "#000", "Background"),
        ("containerBorderColor", _C, "#242424", "Border Color"),
        ("containerBorderWidth", _N, 1, "Border Width (px)", {"step": 1}),
        ("containerRadius", _L, "12px", "Radius"),
        ("containerPadding", _L, "16px", "Padding"),
        ("containerElementGap", _L, "16px", "Element Gap"),
    ]),
    ("Saturation Area", [
        ("saturationHeight", _N, 140, "Height (px)"),
        ("saturationRadius", _N, 8, "Radius"),
        ("saturationBorderColor", _C, "#242424", "Border Color"),
        ("saturationBorderWidth", _N, 1, "Border Width (px)"),
        ("saturationThumbWidth", _N, 14, "Thumb Width"),
        ("saturationThumbHeight", _N, 14, "Thumb Height"),
        ("saturationThumbRadius", _N, 50, "Thumb Radius"),
        ("saturationThumbBorderStyle", _E, "solid", "Thumb Border Style",
         {"choices": THUMB_BORDER_STYLES}),
        ("saturationThumbBorderWidth", _N, 2, "Thumb Border Width (px)"),
        ("saturationThumbBorderColor", _C, "#ffffff", "Thumb Border Color"),
        ("saturationThumbBgColor", _C, "transparent", "Thumb Background Color"),
    ]),
    ("Hue Slider", [
        ("hueTrackHeight", _N, 10, "Track Height"),
        ("hueTrackRadius", _L, "8px", "Track Radius"),
        ("hueTrackBorderWidth", _N, 1, "Track Border Width (px)"),
        ("hueTrackBorderColor", _C, "transparent", "Track Border Color"),
        ("hueThumbSize", _N, 16, "Thumb Size"),
        ("hueThumbRadius", _L, "50%", "Thumb Radius"),
        ("hueThumbBorderWidth", _N, 3, "Thumb Border Width (px)"),
        ("hueThumbBgDefault", _C, "#f0f0f0", "Thumb Background"),
        ("hueThumbBgHover", _C, "#e5e5e5", "Thumb Background (Hover)"),
        ("hueThumbBgActive", _C, "#f0f0f0", "Thumb Background (Active)"),
        ("hueThumbBorderDefault", _C, "#e5e5e5", "Thumb Border"),
        ("hueThumbBorderHover", _C, "#f0f0f0", "Thumb Border (Hover)"),
        ("hueThumbBorderActive", _C, "#fff", "Thumb Border (Active)"),
    ]),
    ("Contrast Area", [
        ("contrastBgLuminance", _N, 0, "Bg Luminance", {"step": 0.1}),
        ("contrastLabel", _T, "Contrast", "Label"),
        ("contrastLabelSize", _L, "12px", "Label Font Size"),
        ("contrastLabelColor", _C, "#737373", "Label Color"),
        ("contrastLabelWeight", _N, 700, "Label Font Weight"),
        ("contrastValueSize", _L, "14px", "Value Font Size"),
        ("contrastValueColor", _C, "#ffffff", "Value Color"),
        ("contrastValueWeight", _N, 400, "Value Font Weight"),
        ("contrastFormat", _E, "value:1", "Format", {"choices": CONTRAST_FORMATS}),
        ("contrastLabelGap", _L, "0.125rem", "Label Gap"),
        ("contrastItemGap", _L, "16px", "Item Gap"),
        ("contrastBadgeGap", _L, "8px", "Badge Gap"),
        ("showContrastAALabel", _B, True, "Show AA Label"),
        ("showContrastAAALabel", _B, True, "Show AAA Label"),
        ("contrastAreaTopMargin", _L, "0px", "Top Margin"),
    ]),
    ("Inputs", [
        ("inputHeight", _N, 44, "Height (px)"),
        ("inputBg", _C, "#000", "Background"),
        ("inputBorderColor", _C, "#242424", "Border Color"),
        ("inputBorderWidth", _N, 1, "Border Width (px)"),
        ("inputRadius", _N, 8, "Radius"),
        ("inputTextColor", _C, "#ffffff", "Text Color"),
        ("inputErrorOutlineColor", _C, "#EF0641", "Error Outline Color"),
    ]),
    # Floating label and dropdown fields that the widget inherits from the
    # input styling carry the input defaults so the table stays complete.
    ("Floating Labels", [
        ("floatingLabelFocusBorderColor", _C, "#06B5EF", "Focus Border Color"),
        ("floatingLabelBg", _C, "#000", "Background"),
        ("floatingLabelTextColor", _C, "#777777", "Text Color"),
        ("floatingLabelActiveTextColor", _C, "#ffffff", "Active Text Color"),
        ("floatingLabelRadius", _N, 4, "Radius"),
        ("floatingLabelBorderColor", _C, "transparent", "Border Color"),
        ("floatingLabelBorderWidth", _N, 0, "Border Width (px)"),
        ("floatingLabelMainTextSize", _N, 14, "Text Size (px)"),
    ]),
    ("Dropdown", [
        ("dropdownHeight", _N, 44, "Height (px)"),
        ("dropdownBg", _C, "#000", "Background"),
        ("dropdownBorderColor", _C, "#242424", "Border Color"),
        ("dropdownBorderWidth", _N, 1, "Border Width (px)"),
        ("dropdownRadius", _N, 8, "Radius"),
        ("dropdownTextColor", _C, "#ffffff", "Text Color"),
        ("dropdownFocusBorderColor", _C, "#06B5EF", "Focus Border Color"),
        ("dropdownChevronColor", _C, "#6b7280", "Chevron Color"),
        ("modeDropdownWidth", _L, "128px", "Width"),
        ("dropdownMenuBg", _C, "#111111", "Menu Background"),
        ("dropdownMenuBorderColor", _C, "#242424", "Menu Border Color"),
        ("dropdownMenuBorderWidth", _N, 1, "Menu Border Width (px)"),
        ("dropdownMenuRadius", _N, 10, "Menu Radius"),
        ("dropdownMenuTextColor", _C, "#d1d5db", "Menu Text Color"),
        ("dropdownMenuActiveTextColor", _C, "#ffffff", "Menu Active Text Color"),
        ("dropdownMenuHoverBg", _C, "rgba(255,255,255,0.05)", "Menu Hover Background"),
        ("dropdownMenuActiveBg", _C, "rgba(255,255,255,0.10)", "Menu Active Background"),
    ]),
    ("Color Preview", [
        ("colorPreviewPosition", _E, "contrast", "Position", {"choices": PREVIEW_POSITIONS}),
        ("previewWidth", _N, 44, "Width"),
        ("previewHeight", _N, 44, "Height (px)"),
        ("previewBgFallback", _C, "#111111", "Fallback BG"),
        ("previewBorderColor", _C, "rgba(255,255,255,0.14)", "Border Color"),
        ("previewBorderWidth", _N, 1, "Border Width (px)"),
        ("previewRadius", _N, 8, "Radius (px)"),
        ("previewFontSize", _N, 18, "Font Size (px)"),
        ("previewFontWeight", _N, 600, "Font Weight"),
        ("previewTextColor", _C, "#ffffff", "Text Color"),
    ]),
    ("Badges", [
        ("badgeBorderWidth", _N, 1, "Border Width"),
        ("badgeBorderRadius", _L, "50px", "Radius"),
        ("badgeFontSize", _L, "10px", "Font Size"),
        ("badgeFontWeight", _N, 600, "Font Weight"),
        ("badgeIconSize", _N, 10, "Icon Size"),
        ("badgeIconStrokeWidth", _N, 2.25, "Icon Stroke"),
        ("badgePadding", _L, "0.25rem 0.5rem", "Padding"),
        ("badgeBgPass", _C, "rgba(65, 239, 6, 0.1)", "Pass BG"),
        ("badgeBgFail", _C, "rgba(239, 6, 65, 0.1)", "Fail BG"),
        ("badgeBorderPass", _C, "rgba(65, 239, 6, 0.5)", "Pass Border"),
        ("badgeBorderFail", _C, "rgba(239, 6, 65, 0.5)", "Fail Border"),
        ("badgeTextPass", _C, "#41EF06", "Pass Text"),
        ("badgeTextFail", _C, "#EF0641", "Fail Text"),
    ]),
]


def _build_schema() -> "OrderedDict[str, PropertySpec]":
    schema: "OrderedDict[str, PropertySpec]" = OrderedDict()
    for group, rows in _TABLE:
        for row in rows:
            key, ptype, default, label = row[:4]
            extras = row[4] if len(row) > 4 else {}
            if key in schema:
                raise ValueError(f"Duplicate property key in schema: {key}")
            schema[key] = PropertySpec(
                key=key,
                type=ptype,
                default=default,
                group=group,
                label=label,
                choices=tuple(extras.get("choices", ())),
                step=extras.get("step"),
            )
    return schema


SCHEMA: Mapping[str, PropertySpec] = MappingProxyType(_build_schema())

DEFAULT_PROPERTIES: Mapping[str, Any] = MappingProxyType(
    {key: spec.default for key, spec in SCHEMA.items()}
)
"""The Default Table: complete and read-only for the whole session."""


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------
def is_known(key: Any) -> bool:
    return key in SCHEMA


def spec_for(key: str) -> PropertySpec:
    try:
        return SCHEMA[key]
    except (KeyError, TypeError):
        raise SchemaError(key) from None


def default_for(key: str) -> Any:
    """Return the default value for ``key``.

    Raises :class:`SchemaError` for keys outside the schema.
    """
    return spec_for(key).default


def type_of(key: str) -> PropertyType:
    """Return the semantic type for ``key``.

    Raises :class:`SchemaError` for keys outside the schema.
    """
    return spec_for(key).type


def keys() -> List[str]:
    """All property keys in schema order."""
    return list(SCHEMA.keys())


def groups() -> "OrderedDict[str, List[str]]":
    """Return ``group name -> [keys]`` in display order."""
    result: "OrderedDict[str, List[str]]" = OrderedDict()
    for key, spec in SCHEMA.items():
        result.setdefault(spec.group, []).append(key)
    return result


# ---------------------------------------------------------------------------
# Value helpers
# ---------------------------------------------------------------------------
def is_number(value: Any) -> bool:
    """Return ``True`` for a finite int or float that is not a bool."""
    # bool is an int subclass but never a valid numeric property value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def coerce_input(key: str, text: Any) -> Any:
    """Convert raw control input into a value of the key's type.

    Numeric fields parse the text as a float, keep integral results as
    ``int`` and fall back to ``0`` when the text does not parse.  Every other
    type is returned unchanged.
    """
    if type_of(key) is not PropertyType.NUMBER:
        return text
    if is_number(text):
        return text
    try:
        number = float(str(text).strip())
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number):
        return 0
    if number.is_integer():
        return int(number)
    return number


def check_value(key: str, value: Any) -> bool:
    """Return ``True`` if ``value`` matches the semantic type of ``key``."""
    spec = spec_for(key)
    ptype = spec.type
    if ptype is PropertyType.BOOL:
        return isinstance(value, bool)
    if ptype is PropertyType.NUMBER:
        return is_number(value)
    if ptype is PropertyType.CHOICE:
        return isinstance(value, str) and value in spec.choices
    if ptype is PropertyType.MODES:
        return (
            isinstance(value, (list, tuple))
            and all(isinstance(v, str) and v in COLOR_FORMATS for v in value)
        )
    # COLOR, LENGTH and TEXT are free-form strings; color syntax is not checked
    return isinstance(value, str)

