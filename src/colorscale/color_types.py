from __future__ import annotations

"""Core color types used by the colorscale library.

This module defines small, explicit data structures for 8-bit sRGB colors
and HSL triples, the closed enumerations that select a lightness method and
a hue-shift mode, and the symbolic reference type stored in palettes.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .engine import ColorEngine, default_engine


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Color:
    """8-bit sRGB color.

    Attributes
    ----------
    r, g, b:
        Channel values, integers in [0, 255].
    """

    r: int
    g: int
    b: int

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> "Color":
        """Create a Color, clamping and rounding each channel.

        Non-finite channel values resolve to 0.
        """
        return cls(_channel(r), _channel(g), _channel(b))

    @classmethod
    def from_hex(
        cls,
        value: object,
        engine: ColorEngine | None = None,
        log: logging.Logger | None = None,
    ) -> "Color":
        """Create a Color from ``#rrggbb``/``rrggbb``; malformed input yields black."""
        engine = engine or default_engine()
        return cls(*engine.hex_to_rgb(value, log))

    @classmethod
    def from_hsl(
        cls, h: float, s: float, l: float, engine: ColorEngine | None = None
    ) -> "Color":
        """Create a Color from HSL (h in degrees, s and l in percent)."""
        engine = engine or default_engine()
        return cls(*engine.hsl_to_rgb(h, s, l))

    @property
    def hex(self) -> str:
        """Canonical lowercase ``#rrggbb``."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hsl(self, engine: ColorEngine | None = None) -> "HSL":
        engine = engine or default_engine()
        return HSL(*engine.rgb_to_hsl(self.r, self.g, self.b))

    def __str__(self) -> str:
        return self.hex


@dataclass(frozen=True)
class HSL:
    """HSL triple with hue in degrees and saturation/lightness in percent.

    Use :meth:`normalized` to obtain a sanitized copy (hue wrapped into
    [0, 360), saturation and lightness clamped into [0, 100]).
    """

    h: float
    s: float
    l: float

    def normalized(self, engine: ColorEngine | None = None) -> "HSL":
        engine = engine or default_engine()
        return HSL(
            engine.normalize_hue(self.h),
            _clamp_percent(self.s),
            _clamp_percent(self.l),
        )


class LightnessMethod(Enum):
    """Scalar definitions of perceived lightness."""

    HSL = "hsl"
    PERCEPTUAL = "perceptual"
    AVERAGE = "average"
    HYBRID = "hybrid"

    @classmethod
    def coerce(cls, value: "LightnessMethod | str | None") -> "LightnessMethod":
        """Resolve an enum member or its string value; unknown input yields HYBRID."""
        return _coerce_enum(cls, value, cls.HYBRID)


class HueShiftMode(Enum):
    """How hue drifts across the lightness scale."""

    FIXED = "fixed"
    NATURAL = "natural"
    UNNATURAL = "unnatural"

    @classmethod
    def coerce(cls, value: "HueShiftMode | str | None") -> "HueShiftMode":
        """Resolve an enum member or its string value; unknown input yields NATURAL."""
        return _coerce_enum(cls, value, cls.NATURAL)


@dataclass(frozen=True)
class TokenRef:
    """Symbolic reference from one palette token to another.

    ``key`` is the full token name of the target, e.g. ``"--primary-500"``.
    """

    key: str

    def css(self) -> str:
        return f"var({self.key})"

    def __str__(self) -> str:
        return self.css()


def _coerce_enum(cls, value, default):
    if isinstance(value, cls):
        return value
    if value is None:
        return default
    key = str(value).strip().lower()
    for member in cls:
        if member.value == key:
            return member
    logger.warning("Unknown %s %r, falling back to %s", cls.__name__, value, default.value)
    return default


def _channel(x: float) -> int:
    try:
        v = float(x)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(v):
        return 0
    return max(0, min(255, int(math.floor(v + 0.5))))


def _clamp_percent(v: float) -> float:
    if not math.isfinite(v):
        return 0.0
    return max(0.0, min(100.0, v))
