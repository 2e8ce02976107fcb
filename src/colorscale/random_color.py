from __future__ import annotations

"""Random seed colors with controlled saturation and lightness."""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .color_types import LightnessMethod
from .constants import STANDARD_LIGHTNESS_SCALE
from .lightness import invert


Range = Tuple[float, float]


@dataclass
class RandomColorConfig:
    """Sampling ranges for :func:`generate_random_primary_color`.

    Ranges are ``(a, b)`` pairs in either order; values are drawn uniformly.
    """

    saturation_range: Range = (35.0, 75.0)
    lightness_range: Range = (STANDARD_LIGHTNESS_SCALE[300], STANDARD_LIGHTNESS_SCALE[700])
    lightness_method: LightnessMethod = LightnessMethod.HYBRID
    hue_range: Range = (0.0, 360.0)

    def __post_init__(self) -> None:
        self.lightness_method = LightnessMethod.coerce(self.lightness_method)


def generate_random_primary_color(
    config: Optional[RandomColorConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> str:
    """Return a random ``#rrggbb`` whose lightness lies in the configured range.

    Pass a seeded ``numpy.random.Generator`` for reproducible output.
    """
    cfg = config or RandomColorConfig()
    rng = rng if rng is not None else np.random.default_rng()

    hue = _uniform(rng, cfg.hue_range, (0.0, 360.0))
    lightness = _uniform(rng, cfg.lightness_range, (38.0, 74.0))
    saturation = _uniform(rng, cfg.saturation_range, (35.0, 75.0))
    return invert(hue, saturation, lightness, cfg.lightness_method).hex


def _uniform(rng: np.random.Generator, bounds: Range, fallback: Range) -> float:
    lo, hi = bounds
    if not (math.isfinite(lo) and math.isfinite(hi)):
        lo, hi = fallback
    lo, hi = min(lo, hi), max(lo, hi)
    if lo == hi:
        return float(lo)
    return float(rng.uniform(lo, hi))


__all__ = ["RandomColorConfig", "generate_random_primary_color"]
