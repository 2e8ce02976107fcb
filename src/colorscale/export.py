from __future__ import annotations

"""Helper utilities for handing generated palettes to external consumers.

This module exposes label/enum pairs for lightness methods, hue-shift modes
and export formats, and provides :func:`export_palette` to render a
:class:`GeneratedPalette` as a CSS custom-property block, JSON text or a
plain dict.
"""

import json
from enum import Enum
from typing import Dict, List, Union

from .color_types import HueShiftMode, LightnessMethod
from .palette import GeneratedPalette


class ExportFormat(Enum):
    """Supported output formats for exported palettes."""

    CSS = "css"
    JSON = "json"
    DICT = "dict"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


# Label/Enum pairs for UI choices
LIGHTNESS_METHOD_OPTIONS: List[tuple[str, LightnessMethod]] = [
    ("Hybrid", LightnessMethod.HYBRID),
    ("HSL", LightnessMethod.HSL),
    ("Perceptual", LightnessMethod.PERCEPTUAL),
    ("Average", LightnessMethod.AVERAGE),
]
HUE_SHIFT_MODE_OPTIONS: List[tuple[str, HueShiftMode]] = [
    ("Natural", HueShiftMode.NATURAL),
    ("Fixed", HueShiftMode.FIXED),
    ("Unnatural", HueShiftMode.UNNATURAL),
]
EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("CSS", ExportFormat.CSS),
    ("JSON", ExportFormat.JSON),
    ("dict", ExportFormat.DICT),
]


def export_palette(
    palette: GeneratedPalette,
    fmt: Union[ExportFormat, str] = ExportFormat.CSS,
    selector: str = ":root",
) -> Union[str, Dict[str, str]]:
    """Convert a GeneratedPalette to the desired format.

    CSS output is a single rule for ``selector`` with one declaration per
    token, in palette order; references are rendered as ``var(--…)``.
    """
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    props = palette.as_css_properties()
    if export_fmt == ExportFormat.DICT:
        return props
    if export_fmt == ExportFormat.JSON:
        return json.dumps(props, indent=2)
    if export_fmt == ExportFormat.CSS:
        lines = [f"{selector} {{"]
        lines.extend(f"  {name}: {value};" for name, value in props.items())
        lines.append("}")
        return "\n".join(lines) + "\n"
    raise ValueError(f"Unsupported export format: {fmt}")


__all__ = [
    "ExportFormat",
    "LIGHTNESS_METHOD_OPTIONS",
    "HUE_SHIFT_MODE_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
    "export_palette",
]
