"""
Command line entry point: print design tokens for one or more seed colors.

Usage:
    colorscale "#3b82f6"
    colorscale "#3b82f6" "#f97316" --prefix primary --prefix accent --format json
    colorscale "#3b82f6" --combination triadic --text-colors
    colorscale --random --seed 7 --explain

Defaults for prefix/method/mode/transparency come from `configs/default.yaml`
(overridden by a root `config.yaml`).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from common.logging import setup_default_logging  # type: ignore[import]
from util.color import parse_hex_color_str  # type: ignore[import]
from util.utils import config_section, load_config  # type: ignore[import]

from .api import generate_multiple_color_palette
from .color_types import HueShiftMode, LightnessMethod
from .combination import BaseColorStrategy, CombinationType, generate_combination
from .export import ExportFormat, export_palette
from .hue_shift import get_hue_shift_explanation
from .palette import PaletteConfig
from .random_color import RandomColorConfig, generate_random_primary_color

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2


def build_parser(defaults: Optional[Dict[str, Any]] = None) -> argparse.ArgumentParser:
    palette_defaults = config_section(defaults, "palette")
    export_defaults = config_section(defaults, "export")

    p = argparse.ArgumentParser(
        prog="colorscale",
        description="Derive an 11-level design-token color scale from seed colors.",
    )
    p.add_argument("colors", nargs="*", help="seed colors (#rrggbb)")
    p.add_argument(
        "--prefix",
        action="append",
        default=None,
        help="token prefix per seed color (repeatable; default from config)",
    )
    p.add_argument(
        "--method",
        choices=[m.value for m in LightnessMethod],
        default=str(palette_defaults.get("lightness_method", LightnessMethod.HYBRID.value)),
    )
    p.add_argument(
        "--mode",
        choices=[m.value for m in HueShiftMode],
        default=str(palette_defaults.get("hue_shift_mode", HueShiftMode.NATURAL.value)),
    )
    p.add_argument(
        "--transparent",
        action=argparse.BooleanOptionalAction,
        default=bool(palette_defaults.get("include_transparent", False)),
        help="emit -transparent variants",
    )
    p.add_argument(
        "--text-colors",
        action=argparse.BooleanOptionalAction,
        default=bool(palette_defaults.get("include_text_colors", False)),
        help="emit text-color references",
    )
    p.add_argument("--bg-light", default=str(palette_defaults.get("bg_color_light", "#ffffff")))
    p.add_argument("--bg-dark", default=str(palette_defaults.get("bg_color_dark", "#000000")))
    p.add_argument(
        "--origin-level",
        type=int,
        default=None,
        help="level whose transparent variant is opaque (default from config; with --combination only when given)",
    )
    p.add_argument(
        "--combination",
        choices=[c.value for c in CombinationType],
        default=None,
        help="derive base/secondary scales from the first color",
    )
    p.add_argument(
        "--base-strategy",
        choices=[s.value for s in BaseColorStrategy],
        default=BaseColorStrategy.HARMONIC.value,
    )
    p.add_argument("--random", action="store_true", help="use a random seed color")
    p.add_argument("--seed", type=int, default=None, help="RNG seed for --random")
    p.add_argument(
        "--format",
        choices=[f.value for f in ExportFormat if f is not ExportFormat.DICT],
        default=str(export_defaults.get("format", ExportFormat.CSS.value)),
    )
    p.add_argument("--selector", default=str(export_defaults.get("selector", ":root")))
    p.add_argument("--explain", action="store_true", help="print the hue-shift direction")
    p.add_argument("--log-level", default=None)
    return p


def _build_configs(args: argparse.Namespace, colors: List[str], defaults: Dict[str, Any]) -> List[PaletteConfig]:
    base = config_section(defaults, "palette")
    origin_level = args.origin_level
    if origin_level is None:
        origin_level = int(base.get("transparent_origin_level", 500))
    common = dict(
        lightness_method=args.method,
        hue_shift_mode=args.mode,
        include_transparent=args.transparent,
        include_text_colors=args.text_colors,
        bg_color_light=args.bg_light,
        bg_color_dark=args.bg_dark,
        transparent_origin_level=origin_level,
    )

    if args.combination is not None:
        configs = generate_combination(
            colors[0],
            combination_type=args.combination,
            lightness_method=args.method,
            base_color_strategy=args.base_strategy,
        )
        for cfg in configs:
            cfg.include_text_colors = args.text_colors
            cfg.include_transparent = args.transparent
            cfg.bg_color_light = args.bg_light
            cfg.bg_color_dark = args.bg_dark
            # base keeps its 950 origin unless --origin-level is given
            if args.origin_level is not None:
                cfg.transparent_origin_level = args.origin_level
        return configs

    prefixes = list(args.prefix or [])
    default_prefix = str(base.get("prefix", "primary"))
    configs = []
    for i, color in enumerate(colors):
        if i < len(prefixes):
            prefix = prefixes[i]
        elif i == 0:
            prefix = default_prefix
        else:
            prefix = f"{default_prefix}{i + 1}"
        configs.append(PaletteConfig.from_mapping(base, prefix=prefix, color=color, **common))
    return configs


def main(argv: Optional[Sequence[str]] = None) -> int:
    defaults = load_config()
    parser = build_parser(defaults)
    args = parser.parse_args(argv)

    level = args.log_level or config_section(defaults, "logging").get("level")
    setup_default_logging(level)

    colors = list(args.colors)
    if args.random:
        rng = np.random.default_rng(args.seed)
        colors.insert(0, generate_random_primary_color(RandomColorConfig(lightness_method=args.method), rng))
    if not colors:
        parser.print_usage(sys.stderr)
        print("colorscale: error: at least one color (or --random) is required", file=sys.stderr)
        return EXIT_USAGE

    for c in colors:
        try:
            parse_hex_color_str(c)
        except ValueError as e:
            print(f"colorscale: error: {e}", file=sys.stderr)
            return EXIT_USAGE

    configs = _build_configs(args, colors, defaults)
    logger.info("generating %d palette(s)", len(configs))
    palette = generate_multiple_color_palette(configs)
    sys.stdout.write(export_palette(palette, args.format, selector=args.selector))
    if args.format == ExportFormat.JSON.value:
        sys.stdout.write("\n")

    if args.explain:
        for cfg in configs:
            ex = get_hue_shift_explanation(cfg.color, cfg.hue_shift_mode)
            print(
                f"/* {cfg.prefix}: {ex.category}; lighter {ex.lighter_sign}{ex.lighter_direction}, "
                f"darker {ex.darker_sign}{ex.darker_direction} */"
            )
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
