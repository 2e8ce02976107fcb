from __future__ import annotations

"""Faux-transparent variants of solid palette colors.

For each level a fixed alpha is chosen (:func:`get_alpha_for_level`) and the
"over" compositing equation ``target = alpha * fg + (1 - alpha) * bg`` is
solved for ``fg`` (:func:`calculate_transparent_color`), so that the
transparent color drawn over the given background reproduces the solid one.
Levels up to and including the origin use the light background, darker
levels the dark background.
"""

import logging
import math
from typing import MutableMapping

from util.color import format_alpha, parse_hex_color_str, rgba_str  # type: ignore[import]

from .constants import (
    DEFAULT_TRANSPARENT_ORIGIN_LEVEL,
    LEVEL_STEP,
    MAX_ALPHA,
    MAX_LEVEL,
    MIN_ALPHA,
    MIN_LEVEL,
    SCALE_LEVELS,
)
from .scale import is_level


logger = logging.getLogger(__name__)


def get_alpha_for_level(
    level: int,
    origin_level: int,
    min_alpha: float = MIN_ALPHA,
    max_alpha: float = MAX_ALPHA,
) -> float:
    """Alpha for ``level`` when ``origin_level`` is fully opaque.

    Alpha rises linearly from ``min_alpha`` at level 50 to ``max_alpha`` at
    the origin, then falls linearly back to ``min_alpha`` at level 950. The
    two sides use independent step sizes; a side with zero steps yields
    ``min_alpha``.

    An origin that is not a scale level is treated as 500. A non-finite
    ``level`` yields ``min_alpha``; other levels are clamped into 50…950 and
    the result always lies in [``min_alpha``, ``max_alpha``].
    """
    if not is_level(origin_level):
        origin_level = DEFAULT_TRANSPARENT_ORIGIN_LEVEL
    if not isinstance(level, (int, float)) or not math.isfinite(level):
        return min_alpha
    level = max(MIN_LEVEL, min(MAX_LEVEL, level))
    return max(min_alpha, min(max_alpha, _ramp(level, origin_level, min_alpha, max_alpha)))


def _ramp(level: float, origin_level: int, min_alpha: float, max_alpha: float) -> float:
    if level == origin_level:
        return max_alpha

    difference = max_alpha - min_alpha
    if level < origin_level:
        total_steps = (origin_level - MIN_LEVEL) / LEVEL_STEP
        if total_steps == 0:
            return min_alpha
        current_step = (level - MIN_LEVEL) / LEVEL_STEP
        return min_alpha + difference / total_steps * current_step

    total_steps = (MAX_LEVEL - origin_level) / LEVEL_STEP
    if total_steps == 0:
        return min_alpha
    current_step = (level - origin_level) / LEVEL_STEP
    return max_alpha - difference / total_steps * current_step


def calculate_transparent_color(
    target_solid: str,
    background: str,
    alpha: float,
    log: logging.Logger | None = None,
) -> str:
    """Return ``rgba(r, g, b, a.aaa)`` that composites over ``background`` to ``target_solid``.

    Unparseable colors are logged and yield ``rgba(0, 0, 0, a)``; zero alpha
    yields the background itself at alpha 0. Channels are clamped to
    [0, 255] after inversion, so targets outside the reachable range are
    approximated.
    """
    log = log or logger
    if not math.isfinite(alpha):
        alpha = MAX_ALPHA
    alpha = max(0.0, min(1.0, alpha))

    try:
        target = parse_hex_color_str(target_solid)
    except ValueError:
        log.error("Invalid target color %r", target_solid)
        return rgba_str(0, 0, 0, alpha)
    try:
        bg = parse_hex_color_str(background)
    except ValueError:
        log.error("Invalid background color %r", background)
        return rgba_str(0, 0, 0, alpha)

    if alpha == 0.0:
        log.warning("Alpha is 0, returning background color")
        return rgba_str(bg[0], bg[1], bg[2], 0.0)

    keep = 1.0 - alpha
    r, g, b = (_clamp_rgb((t - c * keep) / alpha) for t, c in zip(target, bg))
    return f"rgba({r}, {g}, {b}, {format_alpha(alpha)})"


def set_transparent_palette(
    tokens: MutableMapping[str, object],
    prefix: str,
    origin_level: int,
    bg_color_light: str,
    bg_color_dark: str,
    log: logging.Logger | None = None,
) -> None:
    """Add ``--{prefix}-{level}-transparent`` entries for every solid level in ``tokens``."""
    log = log or logger
    if not is_level(origin_level):
        log.warning("Invalid transparent origin level %r, skipping transparency", origin_level)
        return

    for level in SCALE_LEVELS:
        solid = tokens.get(f"--{prefix}-{level}")
        if not isinstance(solid, str) or not solid.strip():
            continue
        alpha = get_alpha_for_level(level, origin_level)
        background = bg_color_light if level <= origin_level else bg_color_dark
        tokens[f"--{prefix}-{level}-transparent"] = calculate_transparent_color(
            solid.strip(), background, alpha, log
        )


def _clamp_rgb(value: float) -> int:
    return max(0, min(255, int(math.floor(value + 0.5))))


__all__ = [
    "get_alpha_for_level",
    "calculate_transparent_color",
    "set_transparent_palette",
]
