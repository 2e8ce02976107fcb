from __future__ import annotations

"""High-level public API for generating design-token palettes.

This module provides :func:`generate_color_palette`, which coordinates
lightness measurement, scale construction, hue drift, lightness inversion
and transparency to turn one :class:`PaletteConfig` into a
:class:`GeneratedPalette`, and :func:`generate_multiple_color_palette`,
which merges several of them.
"""

import logging
from typing import Dict, Iterable, Mapping, Optional, Union

import numpy as np

from .color_types import Color, LightnessMethod, TokenRef
from .constants import SCALE_LEVELS, TEXT_ON_DARK_MIN_LIGHTNESS, TEXT_ON_LIGHT_MAX_LIGHTNESS
from .engine import ColorEngine, default_engine
from .hue_shift import calculate_hue_shift
from .lightness import invert, measure, measure_many
from .palette import GeneratedPalette, PaletteConfig, TokenValue
from .scale import LightnessScale, calculate_even_scale, find_closest_level, level_to_rank
from .transparency import set_transparent_palette


_log = logging.getLogger(__name__)

ConfigLike = Union[PaletteConfig, Mapping[str, object]]

# (name, rank offset from the anchor)
VARIATIONS = (("lighter", -2), ("light", -1), ("dark", 1), ("darker", 2))


def generate_color_palette(
    config: ConfigLike,
    engine: Optional[ColorEngine] = None,
    logger: Optional[logging.Logger] = None,
) -> GeneratedPalette:
    """Generate the token palette for a single seed color.

    Parameters
    ----------
    config:
        PaletteConfig, or a mapping accepted by :meth:`PaletteConfig.from_mapping`.
    engine:
        Optional ColorEngine for color space conversions. If None,
        DefaultColorEngine is used.
    logger:
        Sink for diagnostics (malformed colors, fallbacks). If None, the
        module logger is used, which is silent unless the application
        configures logging.

    Returns
    -------
    GeneratedPalette
        ``--{prefix}-{level}`` hex colors for all 11 levels, the ``color``,
        ``lighter``, ``light``, ``dark`` and ``darker`` references, and
        optional text-color references and transparent variants.
    """
    log = logger or _log
    engine = engine or default_engine()
    cfg = config if isinstance(config, PaletteConfig) else PaletteConfig.from_mapping(config)

    seed = Color.from_hex(cfg.color, engine, log)
    input_lightness = measure(seed, cfg.lightness_method, engine)
    anchor_level = find_closest_level(input_lightness, cfg.lightness_method)
    scale = calculate_even_scale(input_lightness, anchor_level)

    tokens: Dict[str, TokenValue] = {}
    _set_scale_colors(tokens, cfg, seed, scale, engine)
    _set_variation_colors(tokens, cfg.prefix, anchor_level)
    if cfg.include_text_colors:
        _set_text_colors(tokens, cfg.prefix, anchor_level)
    if cfg.include_transparent:
        set_transparent_palette(
            tokens,
            cfg.prefix,
            cfg.transparent_origin_level,
            cfg.bg_color_light,
            cfg.bg_color_dark,
            log,
        )

    log.debug(
        "generated %d tokens for %s (seed=%s, anchor=%d, method=%s, mode=%s)",
        len(tokens),
        cfg.prefix,
        seed.hex,
        anchor_level,
        cfg.lightness_method.value,
        cfg.hue_shift_mode.value,
    )
    return GeneratedPalette(tokens)


def generate_multiple_color_palette(
    configs: Union[ConfigLike, Iterable[ConfigLike]],
    engine: Optional[ColorEngine] = None,
    logger: Optional[logging.Logger] = None,
) -> GeneratedPalette:
    """Generate and merge palettes for several configs.

    Later configs overwrite earlier keys on collision; an empty list yields
    an empty palette. A single config is accepted as well.
    """
    if isinstance(configs, (PaletteConfig, Mapping)):
        configs = [configs]
    return GeneratedPalette.merge(
        generate_color_palette(c, engine=engine, logger=logger) for c in configs
    )


def _token(prefix: str, suffix: object) -> str:
    return f"--{prefix}-{suffix}"


def _set_scale_colors(
    tokens: Dict[str, TokenValue],
    cfg: PaletteConfig,
    seed: Color,
    scale: LightnessScale,
    engine: ColorEngine,
) -> None:
    seed_h, seed_s, _ = engine.rgb_to_hsl(seed.r, seed.g, seed.b)
    base_lightness = scale.anchor_lightness

    for level, target in scale.items():
        if level == scale.anchor_level:
            # The seed itself, never recomputed.
            tokens[_token(cfg.prefix, level)] = seed.hex
            continue
        hue = calculate_hue_shift(seed_h, base_lightness, target, scale, cfg.hue_shift_mode)
        color = invert(hue, seed_s, target, cfg.lightness_method, engine)
        tokens[_token(cfg.prefix, level)] = color.hex


def _set_variation_colors(tokens: Dict[str, TokenValue], prefix: str, anchor_level: int) -> None:
    tokens[_token(prefix, "color")] = TokenRef(_token(prefix, anchor_level))
    rank = level_to_rank(anchor_level)
    for name, offset in VARIATIONS:
        target = SCALE_LEVELS[max(0, min(len(SCALE_LEVELS) - 1, rank + offset))]
        tokens[_token(prefix, name)] = TokenRef(_token(prefix, target))


def _set_text_colors(tokens: Dict[str, TokenValue], prefix: str, anchor_level: int) -> None:
    """Pick readable text colors among the solid levels by perceptual lightness.

    On light backgrounds the anchor is used when dark enough, otherwise the
    first sufficiently dark level walking toward 950 (950 if none is). On
    dark backgrounds the walk is mirrored toward 50.
    """
    rgb = np.asarray(
        [Color.from_hex(tokens[_token(prefix, lv)]).to_rgb() for lv in SCALE_LEVELS],
        dtype=np.float64,
    )
    lightness = measure_many(rgb, LightnessMethod.PERCEPTUAL)
    anchor = level_to_rank(anchor_level)

    on_light = len(SCALE_LEVELS) - 1
    for rank in range(anchor, len(SCALE_LEVELS)):
        if lightness[rank] <= TEXT_ON_LIGHT_MAX_LIGHTNESS:
            on_light = rank
            break

    on_dark = 0
    for rank in range(anchor, -1, -1):
        if lightness[rank] >= TEXT_ON_DARK_MIN_LIGHTNESS:
            on_dark = rank
            break

    on_light_ref = TokenRef(_token(prefix, SCALE_LEVELS[on_light]))
    tokens[_token(prefix, "text-color")] = on_light_ref
    tokens[_token(prefix, "text-color-on-light")] = on_light_ref
    tokens[_token(prefix, "text-color-on-dark")] = TokenRef(_token(prefix, SCALE_LEVELS[on_dark]))


__all__ = ["ConfigLike", "VARIATIONS", "generate_color_palette", "generate_multiple_color_palette"]
