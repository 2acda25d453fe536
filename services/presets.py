# services/presets.py
"""Bundled presets for the color picker.

Every preset is a *partial* property bag.  Keys a preset leaves out fall
through to the Default Table, never to whatever preset was active before,
which is what makes switching presets order-independent.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Mapping, OrderedDict as _OrderedDictType

from utils.constants import DEFAULT_PRESET

from .property_bag import EMPTY_BAG, PropertyBag, make_bag


@dataclass(frozen=True)
class Preset:
    name: str
    display_name: str
    props: PropertyBag = field(default_factory=lambda: EMPTY_BAG)


def _preset(name: str, display_name: str, props: Mapping[str, Any]) -> Preset:
    return Preset(name=name, display_name=display_name, props=make_bag(props))


PRESETS: "_OrderedDictType[str, Preset]" = OrderedDict(
    (p.name, p)
    for p in (
        _preset(DEFAULT_PRESET, "Default", {}),
        _preset(
            "light",
            "Light",
            {
                "value": "#2563EB",
                "containerBg": "#ffffff",
                "containerBorderColor": "#e5e7eb",
                "saturationBorderColor": "#e5e7eb",
                "saturationThumbBorderColor": "#ffffff",
                "hueThumbBgDefault": "#ffffff",
                "hueThumbBorderDefault": "#d1d5db",
                "contrastBgLuminance": 1,
                "contrastLabelColor": "#6b7280",
                "contrastValueColor": "#111827",
                "inputBg": "#ffffff",
                "inputBorderColor": "#d1d5db",
                "inputTextColor": "#111827",
                "floatingLabelFocusBorderColor": "#2563EB",
                "floatingLabelBg": "#ffffff",
                "floatingLabelTextColor": "#6b7280",
                "floatingLabelActiveTextColor": "#111827",
                "dropdownBg": "#ffffff",
                "dropdownBorderColor": "#d1d5db",
                "dropdownTextColor": "#111827",
                "dropdownFocusBorderColor": "#2563EB",
                "dropdownMenuBg": "#ffffff",
                "dropdownMenuBorderColor": "#e5e7eb",
                "dropdownMenuTextColor": "#374151",
                "dropdownMenuActiveTextColor": "#111827",
                "dropdownMenuHoverBg": "rgba(0,0,0,0.04)",
                "dropdownMenuActiveBg": "rgba(0,0,0,0.08)",
                "previewBgFallback": "#f3f4f6",
                "previewBorderColor": "rgba(0,0,0,0.12)",
                "previewTextColor": "#111827",
            },
        ),
        _preset(
            "minimal",
            "Minimal",
            {
                "showContrast": False,
                "colorPreviewPosition": "top",
                "containerBorderWidth": 1,
                "containerRadius": "4px",
                "containerPadding": "12px",
                "containerElementGap": "12px",
                "saturationHeight": 120,
                "saturationRadius": 2,
                "saturationThumbRadius": 0,
                "saturationThumbBorderStyle": "dashed",
                "hueTrackHeight": 6,
                "hueTrackRadius": "2px",
                "hueThumbRadius": "2px",
                "inputRadius": 2,
                "dropdownRadius": 2,
                "dropdownMenuRadius": 2,
                "previewRadius": 2,
                "modeDropdownFullWidth": True,
            },
        ),
        _preset(
            "ember",
            "Ember",
            {
                "value": "#F97316",
                "containerBg": "#1c0f08",
                "containerBorderColor": "#7c2d12",
                "containerBorderWidth": 2,
                "containerRadius": "18px",
                "saturationBorderColor": "#7c2d12",
                "saturationThumbBorderColor": "#fed7aa",
                "hueThumbBgDefault": "#fed7aa",
                "hueThumbBorderDefault": "#fb923c",
                "hueThumbBorderActive": "#fdba74",
                "contrastLabelColor": "#fb923c",
                "contrastValueColor": "#ffedd5",
                "contrastFormat": "1:value",
                "inputBg": "#1c0f08",
                "inputBorderColor": "#7c2d12",
                "floatingLabelFocusBorderColor": "#F97316",
                "floatingLabelBg": "#1c0f08",
                "dropdownBg": "#1c0f08",
                "dropdownBorderColor": "#7c2d12",
                "dropdownFocusBorderColor": "#F97316",
                "dropdownChevronColor": "#fb923c",
                "dropdownMenuBg": "#2a160b",
                "dropdownMenuBorderColor": "#7c2d12",
                "previewBgFallback": "#2a160b",
                "badgeBorderRadius": "6px",
            },
        ),
        _preset(
            "rtl",
            "Right-to-Left",
            {
                "isRTL": True,
                "defaultFormat": "rgb",
                "hexLabel": "سداسي",
                "rgbLabel": "RGB",
                "hslLabel": "HSL",
                "modeLabel": "الوضع",
                "contrastLabel": "التباين",
                "rLabel": "أ",
                "gLabel": "خ",
                "bLabel": "ز",
                "colorPreviewAreaText": "أ",
            },
        ),
    )
)


def get_presets() -> "_OrderedDictType[str, Preset]":
    """Return all bundled presets in display order."""
    return PRESETS


def get_preset(name: str) -> Preset:
    """Lookup a preset by name.

    Falls back to the default preset when an unknown name is supplied.
    """
    return PRESETS.get(name) or PRESETS[DEFAULT_PRESET]
