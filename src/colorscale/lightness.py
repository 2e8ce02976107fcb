from __future__ import annotations

"""Lightness measurement and inversion under four lightness methods.

:func:`measure` maps a color to a scalar lightness in [0, 100] and
:func:`invert` finds a color of a given hue/saturation whose measured
lightness matches a target. HSL lightness inverts by direct substitution;
the other methods have no closed-form inverse and are solved by bisection
over the HSL lightness parameter, which is monotonic in measured lightness
for fixed hue and saturation.
"""

import math
from typing import Union

import numpy as np

from common import settings  # type: ignore[import]

from .color_types import Color, LightnessMethod
from .constants import HYBRID_HSL_WEIGHT, HYBRID_PERCEPTUAL_WEIGHT
from .engine import ColorEngine, default_engine


ColorLike = Union[Color, str]

# CIE L* constants (CIE 1976, exact rational forms of 0.008856 / 903.3).
_LSTAR_EPSILON = 216.0 / 24389.0
_LSTAR_KAPPA = 24389.0 / 27.0

_LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)


def measure(
    color: ColorLike,
    method: LightnessMethod | str = LightnessMethod.HYBRID,
    engine: ColorEngine | None = None,
) -> float:
    """Return the lightness of ``color`` in [0, 100] under ``method``.

    Parameters
    ----------
    color:
        A :class:`Color` or a hex string (malformed strings measure as black).
    method:
        Lightness method; unknown strings fall back to HYBRID.
    """
    engine = engine or default_engine()
    c = color if isinstance(color, Color) else Color.from_hex(color, engine)
    m = LightnessMethod.coerce(method)

    if m is LightnessMethod.HSL:
        return _hsl_lightness(c, engine)
    if m is LightnessMethod.PERCEPTUAL:
        return _perceptual_lightness(c.r, c.g, c.b)
    if m is LightnessMethod.AVERAGE:
        return _average_lightness(c.r, c.g, c.b)
    if m is LightnessMethod.HYBRID:
        return _hybrid_lightness(c, engine)

    raise ValueError(f"Unsupported LightnessMethod: {m}")


def measure_many(
    rgb: np.ndarray,
    method: LightnessMethod | str = LightnessMethod.HYBRID,
) -> np.ndarray:
    """Vectorized :func:`measure` over an ``(N, 3)`` array of 8-bit channels.

    Returns a float64 array of shape ``(N,)``. Non-finite channels count as 0.
    """
    arr = np.asarray(rgb, dtype=np.float64).reshape(-1, 3)
    arr = np.clip(np.nan_to_num(arr, nan=0.0, posinf=0.0, neginf=0.0), 0.0, 255.0)
    m = LightnessMethod.coerce(method)

    if m is LightnessMethod.HSL:
        return _hsl_lightness_array(arr)
    if m is LightnessMethod.PERCEPTUAL:
        return _perceptual_lightness_array(arr)
    if m is LightnessMethod.AVERAGE:
        return arr.mean(axis=1) / 255.0 * 100.0
    if m is LightnessMethod.HYBRID:
        perceptual = _perceptual_lightness_array(arr)
        hsl = _hsl_lightness_array(arr)
        return perceptual * HYBRID_PERCEPTUAL_WEIGHT + hsl * HYBRID_HSL_WEIGHT

    raise ValueError(f"Unsupported LightnessMethod: {m}")


def invert(
    hue: float,
    saturation: float,
    target_lightness: float,
    method: LightnessMethod | str = LightnessMethod.HYBRID,
    engine: ColorEngine | None = None,
) -> Color:
    """Return a color with the given hue/saturation whose lightness is ``target_lightness``.

    Inputs are sanitized first: hue is wrapped into [0, 360) (non-finite -> 0),
    saturation is clamped to [0, 100] (non-finite -> 0) and the target is
    clamped to [0, 100] (non-finite -> 50).
    """
    engine = engine or default_engine()
    h = engine.normalize_hue(hue)
    s = _clamp_percent(saturation, 0.0)
    target = _clamp_percent(target_lightness, 50.0)
    m = LightnessMethod.coerce(method)

    if m is LightnessMethod.HSL:
        return Color.from_hsl(h, s, target, engine)
    return _invert_by_bisection(h, s, target, m, engine)


def _invert_by_bisection(
    h: float,
    s: float,
    target: float,
    method: LightnessMethod,
    engine: ColorEngine,
) -> Color:
    cfg = settings.get()
    max_iterations = cfg.INVERT_MAX_ITERATIONS
    precision = cfg.INVERT_PRECISION

    low = 0.0
    high = 100.0
    best_l = 50.0
    best_diff = math.inf

    for _ in range(max_iterations):
        mid = (low + high) / 2.0
        current = measure(Color.from_hsl(h, s, mid, engine), method, engine)
        diff = abs(current - target)

        # Keep the closest midpoint seen, not the last one.
        if diff < best_diff:
            best_diff = diff
            best_l = mid

        if diff < precision or high - low < precision:
            break

        if current < target:
            low = mid
        else:
            high = mid

    return Color.from_hsl(h, s, best_l, engine)


def _clamp_percent(v: float, default: float) -> float:
    if not math.isfinite(v):
        return default
    return max(0.0, min(100.0, v))


def _hsl_lightness(c: Color, engine: ColorEngine) -> float:
    return engine.rgb_to_hsl(c.r, c.g, c.b)[2]


def _average_lightness(r: float, g: float, b: float) -> float:
    return (r + g + b) / 3.0 / 255.0 * 100.0


def _to_linear(c: float) -> float:
    if not math.isfinite(c):
        c = 0.0
    n = max(0.0, min(255.0, c)) / 255.0
    if n <= 0.04045:
        return n / 12.92
    return ((n + 0.055) / 1.055) ** 2.4


def _perceptual_lightness(r: float, g: float, b: float) -> float:
    wr, wg, wb = _LUMA_WEIGHTS
    y = wr * _to_linear(r) + wg * _to_linear(g) + wb * _to_linear(b)
    if y > _LSTAR_EPSILON:
        result = y ** (1.0 / 3.0) * 116.0 - 16.0
    else:
        result = y * _LSTAR_KAPPA
    return result if math.isfinite(result) else 0.0


def _hybrid_lightness(c: Color, engine: ColorEngine) -> float:
    perceptual = _perceptual_lightness(c.r, c.g, c.b)
    hsl = _hsl_lightness(c, engine)
    return perceptual * HYBRID_PERCEPTUAL_WEIGHT + hsl * HYBRID_HSL_WEIGHT


def _hsl_lightness_array(arr: np.ndarray) -> np.ndarray:
    return (arr.max(axis=1) + arr.min(axis=1)) / 2.0 / 255.0 * 100.0


def _perceptual_lightness_array(arr: np.ndarray) -> np.ndarray:
    n = arr / 255.0
    linear = np.where(n <= 0.04045, n / 12.92, ((n + 0.055) / 1.055) ** 2.4)
    y = linear @ np.asarray(_LUMA_WEIGHTS)
    out = np.where(y > _LSTAR_EPSILON, np.cbrt(y) * 116.0 - 16.0, y * _LSTAR_KAPPA)
    return np.nan_to_num(out, nan=0.0, posinf=0.0, neginf=0.0)


__all__ = ["ColorLike", "measure", "measure_many", "invert"]
