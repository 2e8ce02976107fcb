"""Public entrypoint for the colorscale library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``colorscale`` instead of individual
submodules.
"""

import logging

from .color_types import HSL, Color, HueShiftMode, LightnessMethod, TokenRef
from .constants import (
    MAX_LEVEL,
    MAX_LIGHTNESS,
    MIN_LEVEL,
    MIN_LIGHTNESS,
    SCALE_LEVELS,
    STANDARD_LIGHTNESS_SCALE,
)
from .engine import ColorEngine, DefaultColorEngine
from .lightness import invert, measure, measure_many
from .scale import LightnessScale, calculate_even_scale, find_closest_level
from .hue_shift import (
    HueShiftExplanation,
    calculate_hue_shift,
    get_hue_shift_explanation,
    normalize_hue,
)
from .transparency import calculate_transparent_color, get_alpha_for_level
from .palette import GeneratedPalette, PaletteConfig
from .api import generate_color_palette, generate_multiple_color_palette
from .combination import BaseColorStrategy, CombinationType, generate_combination
from .random_color import RandomColorConfig, generate_random_primary_color
from .export import (
    EXPORT_FORMAT_OPTIONS,
    HUE_SHIFT_MODE_OPTIONS,
    LIGHTNESS_METHOD_OPTIONS,
    ExportFormat,
    export_palette,
)

# Silent unless the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Color",
    "HSL",
    "LightnessMethod",
    "HueShiftMode",
    "TokenRef",
    "SCALE_LEVELS",
    "STANDARD_LIGHTNESS_SCALE",
    "MIN_LEVEL",
    "MAX_LEVEL",
    "MIN_LIGHTNESS",
    "MAX_LIGHTNESS",
    "ColorEngine",
    "DefaultColorEngine",
    "measure",
    "measure_many",
    "invert",
    "LightnessScale",
    "find_closest_level",
    "calculate_even_scale",
    "HueShiftExplanation",
    "normalize_hue",
    "calculate_hue_shift",
    "get_hue_shift_explanation",
    "get_alpha_for_level",
    "calculate_transparent_color",
    "PaletteConfig",
    "GeneratedPalette",
    "generate_color_palette",
    "generate_multiple_color_palette",
    "CombinationType",
    "BaseColorStrategy",
    "generate_combination",
    "RandomColorConfig",
    "generate_random_primary_color",
    "ExportFormat",
    "export_palette",
    "LIGHTNESS_METHOD_OPTIONS",
    "HUE_SHIFT_MODE_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
]
