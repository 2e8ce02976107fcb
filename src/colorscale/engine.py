from __future__ import annotations

"""Color conversion engine for 8-bit sRGB, HSL and hex.

This module defines the :class:`ColorEngine` protocol and a default
implementation. Every conversion sanitizes its inputs instead of raising:
non-finite numbers become 0, channels are clamped to [0, 255], hue is
wrapped into [0, 360) and saturation/lightness are clamped to [0, 100].
"""

import logging
import math
from typing import Protocol, Tuple

from util.color import hex_to_rgb, rgb_to_hex  # type: ignore[import]


RGB = Tuple[int, int, int]
HSL = Tuple[float, float, float]


class ColorEngine(Protocol):
    """Protocol abstracting color space conversions."""

    def normalize_hue(self, h: float) -> float: ...

    def rgb_to_hsl(self, r: float, g: float, b: float) -> HSL: ...

    def hsl_to_rgb(self, h: float, s: float, l: float) -> RGB: ...

    def hex_to_rgb(self, value: object, log: logging.Logger | None = None) -> RGB: ...

    def rgb_to_hex(self, r: float, g: float, b: float) -> str: ...

    def hex_to_hsl(self, value: object, log: logging.Logger | None = None) -> HSL: ...

    def hsl_to_hex(self, h: float, s: float, l: float) -> str: ...


class DefaultColorEngine:
    """Default implementation for the sRGB cube and its HSL cylinder."""

    def normalize_hue(self, h: float) -> float:
        """Normalize hue angle into [0, 360); non-finite input yields 0."""
        if not math.isfinite(h):
            return 0.0
        hue = h % 360.0
        # -1e-20 % 360.0 == 360.0 in floating point.
        if hue >= 360.0:
            hue -= 360.0
        return hue

    def rgb_to_hsl(self, r: float, g: float, b: float) -> HSL:
        """Convert 8-bit RGB to HSL (h in degrees, s and l in percent)."""
        rn = _clamp_unit_channel(r)
        gn = _clamp_unit_channel(g)
        bn = _clamp_unit_channel(b)

        mx = max(rn, gn, bn)
        mn = min(rn, gn, bn)
        l = (mx + mn) / 2.0
        h = 0.0
        s = 0.0

        if mx != mn:
            d = mx - mn
            s = d / (2.0 - mx - mn) if l > 0.5 else d / (mx + mn)
            if mx == rn:
                h = (gn - bn) / d + (6.0 if gn < bn else 0.0)
            elif mx == gn:
                h = (bn - rn) / d + 2.0
            else:
                h = (rn - gn) / d + 4.0
            h /= 6.0

        return (h * 360.0, s * 100.0, l * 100.0)

    def hsl_to_rgb(self, h: float, s: float, l: float) -> RGB:
        """Convert HSL (h in degrees, s and l in percent) to rounded 8-bit RGB."""
        h = self.normalize_hue(h)
        s = _clamp_percent(s) / 100.0
        l = _clamp_percent(l) / 100.0

        c = (1.0 - abs(2.0 * l - 1.0)) * s
        x = c * (1.0 - abs((h / 60.0) % 2.0 - 1.0))
        m = l - c / 2.0

        if h < 60.0:
            r1, g1, b1 = c, x, 0.0
        elif h < 120.0:
            r1, g1, b1 = x, c, 0.0
        elif h < 180.0:
            r1, g1, b1 = 0.0, c, x
        elif h < 240.0:
            r1, g1, b1 = 0.0, x, c
        elif h < 300.0:
            r1, g1, b1 = x, 0.0, c
        else:
            r1, g1, b1 = c, 0.0, x

        return (
            _round_channel((r1 + m) * 255.0),
            _round_channel((g1 + m) * 255.0),
            _round_channel((b1 + m) * 255.0),
        )

    def hex_to_rgb(self, value: object, log: logging.Logger | None = None) -> RGB:
        """Parse a hex color; malformed input yields black."""
        return hex_to_rgb(value, log)

    def rgb_to_hex(self, r: float, g: float, b: float) -> str:
        """Format 8-bit RGB as lowercase ``#rrggbb``."""
        return rgb_to_hex(r, g, b)

    def hex_to_hsl(self, value: object, log: logging.Logger | None = None) -> HSL:
        return self.rgb_to_hsl(*self.hex_to_rgb(value, log))

    def hsl_to_hex(self, h: float, s: float, l: float) -> str:
        return self.rgb_to_hex(*self.hsl_to_rgb(h, s, l))


def _clamp_unit_channel(c: float) -> float:
    if not math.isfinite(c):
        return 0.0
    return max(0.0, min(255.0, c)) / 255.0


def _clamp_percent(v: float) -> float:
    if not math.isfinite(v):
        return 0.0
    return max(0.0, min(100.0, v))


def _round_channel(v: float) -> int:
    # Half-up rounding; round() would round half to even.
    return max(0, min(255, int(math.floor(v + 0.5))))


_DEFAULT_ENGINE = DefaultColorEngine()


def default_engine() -> DefaultColorEngine:
    """Return the shared stateless :class:`DefaultColorEngine`."""
    return _DEFAULT_ENGINE
