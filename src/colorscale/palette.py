from __future__ import annotations

"""Input configuration and output container for generated palettes.

This module defines :class:`PaletteConfig`, which describes one seed color
and how to derive its scale, and :class:`GeneratedPalette`, the read-only
ordered token map produced from one or more configs.
"""

from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Mapping, Union

from .color_types import HueShiftMode, LightnessMethod, TokenRef
from .constants import (
    DEFAULT_BG_COLOR_DARK,
    DEFAULT_BG_COLOR_LIGHT,
    DEFAULT_TRANSPARENT_ORIGIN_LEVEL,
)


TokenValue = Union[str, TokenRef]


@dataclass
class PaletteConfig:
    """Configuration for one color scale.

    Attributes
    ----------
    prefix:
        Token prefix; tokens are named ``--{prefix}-{suffix}``.
    color:
        Seed color as ``#rrggbb``. Malformed values are treated as black.
    lightness_method:
        Lightness definition used for measuring the seed and inverting levels.
    hue_shift_mode:
        Hue drift across levels.
    include_transparent:
        Emit ``--{prefix}-{level}-transparent`` tokens.
    bg_color_light, bg_color_dark:
        Backgrounds the transparent colors are composited over (light for
        levels up to ``transparent_origin_level``, dark beyond).
    transparent_origin_level:
        Level whose transparent variant is fully opaque.
    include_text_colors:
        Emit ``--{prefix}-text-color[-on-light|-on-dark]`` references.
    id:
        Free-form identifier (combinations use it to label roles).
    """

    prefix: str
    color: str
    lightness_method: LightnessMethod = LightnessMethod.HYBRID
    hue_shift_mode: HueShiftMode = HueShiftMode.NATURAL
    include_transparent: bool = False
    bg_color_light: str = DEFAULT_BG_COLOR_LIGHT
    bg_color_dark: str = DEFAULT_BG_COLOR_DARK
    transparent_origin_level: int = DEFAULT_TRANSPARENT_ORIGIN_LEVEL
    include_text_colors: bool = False
    id: str = ""

    def __post_init__(self) -> None:
        self.lightness_method = LightnessMethod.coerce(self.lightness_method)
        self.hue_shift_mode = HueShiftMode.coerce(self.hue_shift_mode)
        self.prefix = str(self.prefix)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], **overrides: Any) -> "PaletteConfig":
        """Build a config from a plain mapping (e.g. parsed YAML).

        Unknown keys are ignored; ``overrides`` take precedence over ``data``.
        """
        names = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in dict(data).items() if k in names}
        kwargs.update({k: v for k, v in overrides.items() if k in names})
        kwargs.setdefault("prefix", "color")
        kwargs.setdefault("color", "#000000")
        return cls(**kwargs)


class GeneratedPalette(Mapping[str, TokenValue]):
    """Read-only ordered mapping from token name to value.

    Values are literal color strings (``#rrggbb`` or ``rgba(...)``) or
    :class:`TokenRef` references to another token of the same palette.
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Mapping[str, TokenValue] | None = None) -> None:
        self._tokens: Mapping[str, TokenValue] = MappingProxyType(dict(tokens or {}))

    def __getitem__(self, key: str) -> TokenValue:
        return self._tokens[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"GeneratedPalette({len(self)} tokens)"

    @classmethod
    def merge(cls, palettes: Iterable[Mapping[str, TokenValue]]) -> "GeneratedPalette":
        """Combine palettes in order; later keys overwrite earlier ones."""
        merged: Dict[str, TokenValue] = {}
        for p in palettes:
            merged.update(p)
        return cls(merged)

    def resolve(self, key: str) -> str:
        """Return the literal value behind ``key``, following references.

        Raises ``KeyError`` for unknown keys, dangling references or cycles.
        """
        seen: set[str] = set()
        value = self._tokens[key]
        while isinstance(value, TokenRef):
            if value.key in seen:
                raise KeyError(f"reference cycle at {value.key!r}")
            seen.add(value.key)
            value = self._tokens[value.key]
        return value

    def as_css_properties(self) -> Dict[str, str]:
        """Plain ``{name: css value}`` dict, references rendered as ``var(--…)``."""
        return {k: v.css() if isinstance(v, TokenRef) else v for k, v in self._tokens.items()}


__all__ = ["TokenValue", "PaletteConfig", "GeneratedPalette"]
