from __future__ import annotations

"""Per-level hue drift across a lightness scale.

Real pigments and lights do not keep a constant hue as they get lighter or
darker: warm hues drift toward yellow when lightened, cool hues toward cyan
or green. :func:`calculate_hue_shift` approximates this with a perceptual
sensitivity curve (strongest near red and blue, weakest near yellow-green)
multiplied by a warm/cool direction term, scaled by how far the target
lightness lies from the anchor.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict

from .color_types import HueShiftMode
from .constants import MAX_HUE_SHIFT
from .engine import ColorEngine, default_engine
from .scale import LightnessScale


def normalize_hue(hue: float) -> float:
    """Wrap ``hue`` into [0, 360); non-finite input yields 0."""
    return default_engine().normalize_hue(hue)


def calculate_hue_intensity_by_hue(hue: float) -> float:
    """Signed hue-based shift intensity in [-0.8, 0.8].

    The sign follows ``cos(hue)`` (positive within 90° of red), the
    magnitude a sensitivity bump in [0.3, 0.8] peaking at 60°.
    """
    radians = math.radians(normalize_hue(hue))
    sensitivity = 0.3 + 0.5 * (1.0 + math.cos(radians - math.pi / 3.0)) / 2.0
    direction = math.cos(radians)
    return sensitivity * direction


def calculate_hue_intensity_by_lightness(
    lightness_diff: float, scale: LightnessScale
) -> float:
    """Lightness difference normalized by the scale's range, clamped to [-1, 1]."""
    span = scale.span()
    if span <= 0.0 or not math.isfinite(lightness_diff):
        return 0.0
    return max(-1.0, min(1.0, lightness_diff / span))


def calculate_hue_shift(
    base_hue: float,
    base_lightness: float,
    target_lightness: float,
    scale: LightnessScale,
    mode: HueShiftMode | str = HueShiftMode.NATURAL,
) -> float:
    """Return the hue to use at ``target_lightness`` for a seed at ``base_lightness``.

    Parameters
    ----------
    base_hue:
        Seed hue in degrees.
    base_lightness, target_lightness:
        Anchor lightness and the lightness of the level being generated.
    scale:
        The scale both lightness values come from; its range normalizes the
        difference.
    mode:
        FIXED returns ``base_hue`` unchanged, UNNATURAL negates the shift.
    """
    m = HueShiftMode.coerce(mode)
    if m is HueShiftMode.FIXED:
        return base_hue

    shift = (
        calculate_hue_intensity_by_hue(base_hue)
        * calculate_hue_intensity_by_lightness(target_lightness - base_lightness, scale)
        * MAX_HUE_SHIFT
    )
    if m is HueShiftMode.UNNATURAL:
        shift = -shift
    return normalize_hue(base_hue + shift)


# --- explanation -----------------------------------------------------------

_HUE_DIRECTIONS: Dict[str, tuple[str, str]] = {
    "red": ("toward orange/yellow", "toward deep red/magenta"),
    "orange": ("toward yellow", "toward red"),
    "yellow": ("toward green", "toward orange"),
    "green": ("toward yellow-green", "toward blue-green"),
    "cyan": ("toward green", "toward blue"),
    "blue": ("toward cyan", "toward purple"),
    "purple": ("toward pink/magenta", "toward deep purple/blue"),
}

_CATEGORY_LABELS: Dict[str, str] = {
    "red": "Red",
    "orange": "Orange",
    "yellow": "Yellow",
    "green": "Green",
    "cyan": "Cyan",
    "blue": "Blue",
    "purple": "Purple",
}

NO_CHANGE = "no change"


@dataclass(frozen=True)
class HueShiftExplanation:
    """Human-readable summary of how hue drifts across a palette."""

    category: str
    lighter_direction: str
    darker_direction: str
    lighter_sign: str
    darker_sign: str


def get_hue_category(hue: float) -> str:
    h = normalize_hue(hue)
    if h < 30.0 or h >= 330.0:
        return "red"
    if h < 60.0:
        return "orange"
    if h < 90.0:
        return "yellow"
    if h < 150.0:
        return "green"
    if h < 210.0:
        return "cyan"
    if h < 270.0:
        return "blue"
    return "purple"


def get_hue_category_label(hue: float) -> str:
    return _CATEGORY_LABELS[get_hue_category(hue)]


def get_hue_shift_explanation(
    color: object,
    mode: HueShiftMode | str = HueShiftMode.NATURAL,
    engine: ColorEngine | None = None,
    log: logging.Logger | None = None,
) -> HueShiftExplanation:
    """Describe the direction of hue drift for a seed ``color`` under ``mode``.

    ``color`` is a hex string (malformed input is treated as black).
    """
    engine = engine or default_engine()
    hue = engine.hex_to_hsl(color, log)[0]
    label = get_hue_category_label(hue)
    m = HueShiftMode.coerce(mode)

    if m is HueShiftMode.FIXED:
        return HueShiftExplanation(label, NO_CHANGE, NO_CHANGE, "", "")

    lighter, darker = _HUE_DIRECTIONS[get_hue_category(hue)]
    positive = calculate_hue_intensity_by_hue(hue) > 0.0
    lighter_sign = "+" if positive else "-"
    darker_sign = "-" if positive else "+"

    if m is HueShiftMode.UNNATURAL:
        return HueShiftExplanation(
            category=label,
            lighter_direction=darker,
            darker_direction=lighter,
            lighter_sign=darker_sign,
            darker_sign=lighter_sign,
        )
    return HueShiftExplanation(label, lighter, darker, lighter_sign, darker_sign)


__all__ = [
    "HueShiftExplanation",
    "NO_CHANGE",
    "normalize_hue",
    "calculate_hue_intensity_by_hue",
    "calculate_hue_intensity_by_lightness",
    "calculate_hue_shift",
    "get_hue_category",
    "get_hue_category_label",
    "get_hue_shift_explanation",
]
