"""Fixed numeric tables shared by the scale, hue and transparency models."""

from __future__ import annotations

from typing import Dict, Tuple

SCALE_LEVELS: Tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)
MIN_LEVEL = 50
MAX_LEVEL = 950
LEVEL_STEP = 50

# Canonical perceptual lightness per level.
STANDARD_LIGHTNESS_SCALE: Dict[int, float] = {
    50: 96.0,
    100: 92.0,
    200: 83.0,
    300: 74.0,
    400: 65.0,
    500: 56.0,
    600: 47.0,
    700: 38.0,
    800: 29.0,
    900: 20.0,
    950: 16.0,
}

MAX_LIGHTNESS = 96.0
MIN_LIGHTNESS = 16.0

MIN_ALPHA = 0.1
MAX_ALPHA = 1.0

MAX_HUE_SHIFT = 30.0

# Hybrid lightness blend weights.
HYBRID_PERCEPTUAL_WEIGHT = 0.3
HYBRID_HSL_WEIGHT = 0.7

# Perceptual-lightness bounds used when picking text colors.
TEXT_ON_LIGHT_MAX_LIGHTNESS = 70.0
TEXT_ON_DARK_MIN_LIGHTNESS = 40.0

DEFAULT_TRANSPARENT_ORIGIN_LEVEL = 500
DEFAULT_BG_COLOR_LIGHT = "#ffffff"
DEFAULT_BG_COLOR_DARK = "#000000"


__all__ = [
    "SCALE_LEVELS",
    "MIN_LEVEL",
    "MAX_LEVEL",
    "LEVEL_STEP",
    "STANDARD_LIGHTNESS_SCALE",
    "MAX_LIGHTNESS",
    "MIN_LIGHTNESS",
    "MIN_ALPHA",
    "MAX_ALPHA",
    "MAX_HUE_SHIFT",
    "HYBRID_PERCEPTUAL_WEIGHT",
    "HYBRID_HSL_WEIGHT",
    "TEXT_ON_LIGHT_MAX_LIGHTNESS",
    "TEXT_ON_DARK_MIN_LIGHTNESS",
    "DEFAULT_TRANSPARENT_ORIGIN_LEVEL",
    "DEFAULT_BG_COLOR_LIGHT",
    "DEFAULT_BG_COLOR_DARK",
]
