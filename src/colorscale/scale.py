from __future__ import annotations

"""Ordinal lightness scale anchored at a seed color.

This module defines :class:`LightnessScale`, a fixed-size array of 11
lightness values indexed by level rank, together with the helpers that pick
the anchor level for a measured lightness (:func:`find_closest_level`) and
build an evenly spaced scale around it (:func:`calculate_even_scale`).
"""

import math
from typing import Iterator, Tuple

import numpy as np

from .color_types import LightnessMethod
from .constants import (
    HYBRID_HSL_WEIGHT,
    HYBRID_PERCEPTUAL_WEIGHT,
    LEVEL_STEP,
    MAX_LEVEL,
    MAX_LIGHTNESS,
    MIN_LEVEL,
    MIN_LIGHTNESS,
    SCALE_LEVELS,
    STANDARD_LIGHTNESS_SCALE,
)


DEFAULT_ANCHOR_LEVEL = 500

_LEVELS = np.asarray(SCALE_LEVELS, dtype=np.float64)
_STANDARD = np.asarray([STANDARD_LIGHTNESS_SCALE[lv] for lv in SCALE_LEVELS], dtype=np.float64)
_LINEAR = MAX_LIGHTNESS - (_LEVELS - MIN_LEVEL) / (MAX_LEVEL - MIN_LEVEL) * (
    MAX_LIGHTNESS - MIN_LIGHTNESS
)


def is_level(level: object) -> bool:
    return isinstance(level, int) and not isinstance(level, bool) and level in SCALE_LEVELS


def level_to_rank(level: int) -> int:
    """Return the 0-based rank of ``level``; raises ``KeyError`` for unknown levels."""
    if not is_level(level):
        raise KeyError(f"not a scale level: {level!r}")
    return SCALE_LEVELS.index(level)


def rank_to_level(rank: int) -> int:
    """Return the level at ``rank``, clamping the rank into the valid range."""
    return SCALE_LEVELS[max(0, min(len(SCALE_LEVELS) - 1, rank))]


class LightnessScale:
    """Lightness values for all 11 levels, stored by rank.

    The values are non-increasing as the level increases, and the value at
    :attr:`anchor_level` is the (clamped) seed lightness.
    """

    __slots__ = ("_values", "anchor_level")

    def __init__(self, values: np.ndarray, anchor_level: int) -> None:
        arr = np.array(values, dtype=np.float64)
        if arr.shape != (len(SCALE_LEVELS),):
            raise ValueError(f"expected {len(SCALE_LEVELS)} values, got shape {arr.shape}")
        arr.setflags(write=False)
        self._values = arr
        self.anchor_level = anchor_level

    def __getitem__(self, level: int) -> float:
        return float(self._values[level_to_rank(level)])

    def __len__(self) -> int:
        return len(SCALE_LEVELS)

    def __iter__(self) -> Iterator[int]:
        return iter(SCALE_LEVELS)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{lv}: {v:.2f}" for lv, v in self.items())
        return f"LightnessScale(anchor={self.anchor_level}, {{{pairs}}})"

    @property
    def values(self) -> np.ndarray:
        """Read-only array of lightness values ordered by rank."""
        return self._values

    @property
    def anchor_lightness(self) -> float:
        return self[self.anchor_level]

    def items(self) -> Iterator[Tuple[int, float]]:
        for lv, v in zip(SCALE_LEVELS, self._values):
            yield lv, float(v)

    def min(self) -> float:
        return float(self._values.min())

    def max(self) -> float:
        return float(self._values.max())

    def span(self) -> float:
        return self.max() - self.min()

    def is_monotonic(self) -> bool:
        """True when lightness never increases with level."""
        return bool(np.all(np.diff(self._values) <= 0.0))


def reference_lightness(level: int, method: LightnessMethod | str) -> float:
    """Canonical lightness expected at ``level`` under ``method``."""
    return float(_reference_table(LightnessMethod.coerce(method))[level_to_rank(level)])


def _reference_table(method: LightnessMethod) -> np.ndarray:
    if method is LightnessMethod.PERCEPTUAL:
        return _STANDARD
    if method is LightnessMethod.HSL or method is LightnessMethod.AVERAGE:
        return _LINEAR
    if method is LightnessMethod.HYBRID:
        return _STANDARD * HYBRID_PERCEPTUAL_WEIGHT + _LINEAR * HYBRID_HSL_WEIGHT

    raise ValueError(f"Unsupported LightnessMethod: {method}")


def find_closest_level(
    input_lightness: float,
    method: LightnessMethod | str = LightnessMethod.HYBRID,
) -> int:
    """Return the level whose reference lightness is nearest to ``input_lightness``.

    Exact ties resolve to the lower (lighter) level. Non-finite input counts as 50.
    """
    if not math.isfinite(input_lightness):
        input_lightness = 50.0
    refs = _reference_table(LightnessMethod.coerce(method))
    # argmin returns the first minimum, i.e. the lowest level on ties.
    return SCALE_LEVELS[int(np.argmin(np.abs(input_lightness - refs)))]


def calculate_even_scale(
    input_lightness: float,
    anchor_level: int = DEFAULT_ANCHOR_LEVEL,
) -> LightnessScale:
    """Build a scale placing ``input_lightness`` at ``anchor_level``.

    The lightness headroom above the anchor (up to 96) and below it (down to
    16) is spread evenly per 50 ordinal units on each side, so the lightest
    and darkest levels land on the global bounds.

    Parameters
    ----------
    input_lightness:
        Seed lightness; clamped into [16, 96], non-finite counts as 50.
    anchor_level:
        Level holding the seed; anything but one of the 11 levels becomes 500.
    """
    if not math.isfinite(input_lightness):
        input_lightness = 50.0
    clamped = max(MIN_LIGHTNESS, min(MAX_LIGHTNESS, input_lightness))
    if not is_level(anchor_level):
        anchor_level = DEFAULT_ANCHOR_LEVEL

    upward_steps = (anchor_level - MIN_LEVEL) // LEVEL_STEP
    downward_steps = (MAX_LEVEL - anchor_level) // LEVEL_STEP
    upward_interval = (MAX_LIGHTNESS - clamped) / upward_steps if upward_steps > 0 else 0.0
    downward_interval = (clamped - MIN_LIGHTNESS) / downward_steps if downward_steps > 0 else 0.0

    values = np.empty(len(SCALE_LEVELS), dtype=np.float64)
    for rank, level in enumerate(SCALE_LEVELS):
        steps = (level - anchor_level) // LEVEL_STEP
        if steps == 0:
            value = clamped
        elif steps < 0:
            value = min(clamped + upward_interval * -steps, MAX_LIGHTNESS)
        else:
            value = max(clamped - downward_interval * steps, MIN_LIGHTNESS)
        values[rank] = max(MIN_LIGHTNESS, min(MAX_LIGHTNESS, value))

    return LightnessScale(values, anchor_level)


__all__ = [
    "DEFAULT_ANCHOR_LEVEL",
    "LightnessScale",
    "is_level",
    "level_to_rank",
    "rank_to_level",
    "reference_lightness",
    "find_closest_level",
    "calculate_even_scale",
]
