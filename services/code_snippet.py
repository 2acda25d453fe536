# services/code_snippet.py
"""Render a usage snippet for the configured color picker.

Only the color value and the properties that differ from their defaults are
emitted, in schema order, so the snippet stays short and stable.
"""

from __future__ import annotations

import json
from typing import Any, List, Mapping

from utils.constants import COLOR_KEY

from .property_bag import diff_from_defaults

INDENT = "  "


def format_prop(key: str, value: Any) -> str:
    """Format one prop as a JSX attribute."""
    if isinstance(value, str):
        return f"{key}={json.dumps(value, ensure_ascii=False)}"
    if isinstance(value, bool):
        return f"{key}={{{'true' if value else 'false'}}}"
    if isinstance(value, tuple):
        value = list(value)
    return f"{key}={{{json.dumps(value, ensure_ascii=False)}}}"


def _format_width(max_width: Any) -> str:
    if isinstance(max_width, float) and max_width.is_integer():
        max_width = int(max_width)
    return f"{max_width}px"


def render_snippet(props: Mapping[str, Any], color: Any, max_width: Any) -> str:
    """Return the snippet text.

    ``props`` may be partial or resolved; it is compared to the Default Table
    either way.  ``color`` always appears as the initial state value.
    """
    changed = diff_from_defaults(props)
    changed.pop(COLOR_KEY, None)

    lines: List[str] = [
        'import { useState } from "react";',
        'import ColorPicker from "@/components/ColorPicker";',
        "",
        "export default function ColorPickerDemo() {",
        f"{INDENT}const [color, setColor] = useState({json.dumps(color, ensure_ascii=False)});",
        "",
        f"{INDENT}return (",
        f'{INDENT * 2}<div style={{{{ maxWidth: "{_format_width(max_width)}", width: "100%" }}}}>',
        f"{INDENT * 3}<ColorPicker",
        f"{INDENT * 4}value={{color}}",
        f"{INDENT * 4}onValueChange={{setColor}}",
    ]
    lines.extend(f"{INDENT * 4}{format_prop(key, value)}" for key, value in changed.items())
    lines.extend([
        f"{INDENT * 3}/>",
        f"{INDENT * 2}</div>",
        f"{INDENT});",
        "}",
    ])
    return "\n".join(lines) + "\n"
