"""
どこで: `util.color`。
何を: 色文字列（Hex / rgba()）と 8bit RGB の相互変換を一元化。
なぜ: パレット生成・透過色・エクスポートで同一の受理仕様とフォールバックを共有するため。

方針:
- `parse_hex_color_str` は厳格版（不正値で ValueError）。CLI の入力検証で使う。
- `hex_to_rgb` などフェイルソフト版は例外を投げず、黒 (0, 0, 0) へフォールバックする。
"""

from __future__ import annotations

import logging
import math
import re

logger = logging.getLogger(__name__)

_HEX6 = re.compile(r"^#?[0-9a-fA-F]{6}$")
_RGBA = re.compile(r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*[\d.]+\s*)?\)")

BLACK: tuple[int, int, int] = (0, 0, 0)


def _clamp_channel(x: float) -> int:
    if not math.isfinite(x):
        return 0
    return max(0, min(255, int(math.floor(x + 0.5))))


def parse_hex_color_str(s: str) -> tuple[int, int, int]:
    """Hex 文字列から RGB(0–255) を返す。

    受理形式: "#RRGGBB", "RRGGBB"（前後空白可、大文字/小文字は不問）。
    文字列以外（bytes など）も `ValueError` とする。
    """
    if not isinstance(s, str):
        raise ValueError(f"invalid hex color: {s!r} (expected str #RRGGBB)")
    t = s.strip()
    if not _HEX6.match(t):
        raise ValueError(f"invalid hex color: '{s}' (expected #RRGGBB)")
    if t.startswith("#"):
        t = t[1:]
    return (int(t[0:2], 16), int(t[2:4], 16), int(t[4:6], 16))


def hex_to_rgb(value: object, log: logging.Logger | None = None) -> tuple[int, int, int]:
    """Hex 文字列を RGB(0–255) へ変換する（失敗時は黒）。

    - 空文字/長さ不正/非 Hex 文字/非文字列はすべて (0, 0, 0)。
    - 非文字列・非 Hex 文字の場合のみ警告を出す（空文字は黙って黒）。
    """
    log = log or logger
    if not isinstance(value, str):
        log.warning("Non-string color value, using black fallback: %r", value)
        return BLACK
    t = value.strip()
    if not t:
        return BLACK
    try:
        return parse_hex_color_str(t)
    except ValueError:
        log.warning("Invalid hex color, using black fallback: %r", value)
        return BLACK


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """RGB(0–255) を小文字 `#rrggbb` に整形する（丸め/クランプ込み）。"""
    return "#" + "".join(f"{_clamp_channel(c):02x}" for c in (r, g, b))


def format_alpha(alpha: float) -> str:
    """アルファ値を小数点以下 3 桁で整形する。"""
    return f"{alpha:.3f}"


def rgba_str(r: int, g: int, b: int, alpha: float) -> str:
    """`rgba(r, g, b, a.aaa)` 形式の文字列を返す。"""
    return f"rgba({r}, {g}, {b}, {format_alpha(alpha)})"


def hex_to_rgba_str(value: object, alpha: float) -> str:
    """Hex と不透明度から `rgba()` 文字列を返す。

    alpha が非有限値なら 1、範囲外なら [0, 1] へクランプする。
    """
    r, g, b = hex_to_rgb(value)
    a = float(alpha) if math.isfinite(alpha) else 1.0
    a = max(0.0, min(1.0, a))
    return rgba_str(r, g, b, a)


def rgba_str_to_hex(value: str, log: logging.Logger | None = None) -> str:
    """`rgb()/rgba()` 文字列を Hex に変換する（不一致時は入力をそのまま返す）。"""
    m = _RGBA.search(value)
    if m is None:
        (log or logger).warning("Invalid rgba format, returning original: %r", value)
        return value
    return rgb_to_hex(int(m.group(1)), int(m.group(2)), int(m.group(3)))


__all__ = [
    "BLACK",
    "parse_hex_color_str",
    "hex_to_rgb",
    "rgb_to_hex",
    "format_alpha",
    "rgba_str",
    "hex_to_rgba_str",
    "rgba_str_to_hex",
]
