from __future__ import annotations

"""Color-harmony combinations built around a primary color.

This module defines :class:`CombinationType` and :class:`BaseColorStrategy`
and the logic that turns a primary color into a list of
:class:`PaletteConfig` objects: a low-saturation "base" (background/neutral)
scale, the primary scale, and up to three secondary scales at fixed hue
offsets from the primary.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .color_types import HueShiftMode, LightnessMethod
from .constants import STANDARD_LIGHTNESS_SCALE
from .engine import ColorEngine, default_engine
from .lightness import invert, measure
from .palette import PaletteConfig


logger = logging.getLogger(__name__)

HSLTuple = Tuple[float, float, float]


class CombinationType(Enum):
    """Geometric hue relationships between primary and secondary colors."""

    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    SPLIT_COMPLEMENTARY = "splitComplementary"
    DOUBLE_COMPLEMENTARY = "doubleComplementary"
    DOUBLE_COMPLEMENTARY_REVERSE = "doubleComplementaryReverse"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"

    @classmethod
    def coerce(cls, value: "CombinationType | str | None") -> "CombinationType":
        """Resolve a member, its value or a snake/kebab-case name; unknown -> COMPLEMENTARY."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.COMPLEMENTARY
        key = str(value).strip().replace("-", "").replace("_", "").lower()
        for member in cls:
            if member.value.lower() == key:
                return member
        logger.warning("Unknown CombinationType %r, falling back to complementary", value)
        return cls.COMPLEMENTARY


class BaseColorStrategy(Enum):
    """How the neutral base color relates to the primary hue."""

    HARMONIC = "harmonic"
    CONTRASTING = "contrasting"
    NEUTRAL = "neutral"

    @classmethod
    def coerce(cls, value: "BaseColorStrategy | str | None") -> "BaseColorStrategy":
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.HARMONIC
        key = str(value).strip().lower()
        for member in cls:
            if member.value == key:
                return member
        logger.warning("Unknown BaseColorStrategy %r, falling back to harmonic", value)
        return cls.HARMONIC


# Hue offsets (degrees) of secondary, secondary2, secondary3 from the primary.
_HUE_OFFSETS: Dict[CombinationType, Tuple[float, ...]] = {
    CombinationType.MONOCHROMATIC: (),
    CombinationType.ANALOGOUS: (30.0, -30.0),
    CombinationType.COMPLEMENTARY: (180.0,),
    CombinationType.SPLIT_COMPLEMENTARY: (150.0, 210.0),
    CombinationType.DOUBLE_COMPLEMENTARY: (30.0, 180.0, 210.0),
    CombinationType.DOUBLE_COMPLEMENTARY_REVERSE: (-30.0, 180.0, 150.0),
    CombinationType.TRIADIC: (120.0, 240.0),
    CombinationType.TETRADIC: (90.0, 180.0, 270.0),
}

SECONDARY_PREFIXES = ("secondary", "secondary2", "secondary3")

# Level 500 of the standard table.
BASE_TARGET_LIGHTNESS = STANDARD_LIGHTNESS_SCALE[500]


def compute_hue_offsets(combination_type: CombinationType | str) -> Tuple[float, ...]:
    """Hue offsets of the secondary colors relative to the primary hue."""
    return _HUE_OFFSETS[CombinationType.coerce(combination_type)]


def generate_combination(
    primary_color: str,
    combination_type: CombinationType | str = CombinationType.COMPLEMENTARY,
    lightness_method: LightnessMethod | str = LightnessMethod.HYBRID,
    base_color_strategy: BaseColorStrategy | str = BaseColorStrategy.HARMONIC,
    engine: Optional[ColorEngine] = None,
) -> List[PaletteConfig]:
    """Generate harmonious palette configs from a primary color.

    Parameters
    ----------
    primary_color:
        Primary seed color as ``#rrggbb`` (malformed input is treated as black).
    combination_type:
        Geometric hue relationship of the secondary colors.
    lightness_method:
        Lightness method shared by all generated configs.
    base_color_strategy:
        Hue of the base color: the primary hue, its complement, or pure grey.

    Returns
    -------
    list of PaletteConfig
        ``[base, primary, *secondaries]``. Secondaries keep the primary's
        saturation and measured lightness.
    """
    engine = engine or default_engine()
    method = LightnessMethod.coerce(lightness_method)
    ctype = CombinationType.coerce(combination_type)
    strategy = BaseColorStrategy.coerce(base_color_strategy)
    primary_hsl = engine.hex_to_hsl(primary_color)

    configs = [
        PaletteConfig(
            id="base",
            prefix="base",
            color=_base_color(primary_hsl, method, strategy, engine),
            lightness_method=method,
            hue_shift_mode=HueShiftMode.FIXED,
            include_transparent=True,
            transparent_origin_level=950,
        ),
        PaletteConfig(
            id="primary",
            prefix="primary",
            color=primary_color,
            lightness_method=method,
            include_transparent=True,
        ),
    ]

    target_lightness = measure(primary_color, method, engine)
    h, s, _ = primary_hsl
    for prefix, offset in zip(SECONDARY_PREFIXES, _HUE_OFFSETS[ctype]):
        color = invert(engine.normalize_hue(h + offset), s, target_lightness, method, engine)
        configs.append(
            PaletteConfig(
                id=prefix,
                prefix=prefix,
                color=color.hex,
                lightness_method=method,
                include_transparent=True,
            )
        )
    return configs


def _base_color(
    primary_hsl: HSLTuple,
    method: LightnessMethod,
    strategy: BaseColorStrategy,
    engine: ColorEngine,
) -> str:
    h, s, _ = primary_hsl
    saturation = max(5.0, min(15.0, s * 0.1))

    if strategy is BaseColorStrategy.HARMONIC:
        hue = h
    elif strategy is BaseColorStrategy.CONTRASTING:
        hue = engine.normalize_hue(h + 180.0)
    elif strategy is BaseColorStrategy.NEUTRAL:
        hue, saturation = 0.0, 0.0
    else:
        raise ValueError(f"Unsupported BaseColorStrategy: {strategy}")

    return invert(hue, saturation, BASE_TARGET_LIGHTNESS, method, engine).hex


__all__ = [
    "CombinationType",
    "BaseColorStrategy",
    "SECONDARY_PREFIXES",
    "BASE_TARGET_LIGHTNESS",
    "compute_hue_offsets",
    "generate_combination",
]
