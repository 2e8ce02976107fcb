from __future__ import annotations

"""色空間変換エンジンと Color/HSL/列挙型の基本挙動。"""

import math

import pytest

from colorscale import HSL, Color, HueShiftMode, LightnessMethod, TokenRef
from colorscale.combination import CombinationType, generate_combination
from colorscale.engine import ColorEngine, DefaultColorEngine, default_engine
from colorscale.hue_shift import get_hue_shift_explanation


@pytest.fixture()
def engine() -> DefaultColorEngine:
    return default_engine()


def test_default_engine_is_shared() -> None:
    assert default_engine() is default_engine()


@pytest.mark.parametrize(
    "raw, expected",
    [(0.0, 0.0), (-30.0, 330.0), (720.0, 0.0), (365.5, 5.5), (-1e-20, 0.0)],
)
def test_normalize_hue(engine: DefaultColorEngine, raw: float, expected: float) -> None:
    got = engine.normalize_hue(raw)
    assert 0.0 <= got < 360.0
    assert got == pytest.approx(expected)


def test_normalize_hue_non_finite(engine: DefaultColorEngine) -> None:
    assert engine.normalize_hue(math.nan) == 0.0
    assert engine.normalize_hue(math.inf) == 0.0


def test_rgb_hsl_primaries(engine: DefaultColorEngine) -> None:
    assert engine.rgb_to_hsl(255, 0, 0) == pytest.approx((0.0, 100.0, 50.0))
    assert engine.rgb_to_hsl(0, 255, 0) == pytest.approx((120.0, 100.0, 50.0))
    assert engine.rgb_to_hsl(0, 0, 255) == pytest.approx((240.0, 100.0, 50.0))
    assert engine.rgb_to_hsl(128, 128, 128)[:2] == (0.0, 0.0)
    assert engine.hsl_to_rgb(0, 100, 50) == (255, 0, 0)
    assert engine.hsl_to_rgb(240, 100, 50) == (0, 0, 255)


def test_hsl_to_rgb_rounds_half_up(engine: DefaultColorEngine) -> None:
    # 127.5 -> 128
    assert engine.hsl_to_rgb(120, 100, 25) == (0, 128, 0)


def test_hsl_to_rgb_sanitizes(engine: DefaultColorEngine) -> None:
    assert engine.hsl_to_rgb(math.nan, 100, 50) == (255, 0, 0)
    assert engine.hsl_to_rgb(0, 150, 50) == (255, 0, 0)
    assert engine.hsl_to_rgb(0, 0, -10) == (0, 0, 0)
    assert engine.hsl_to_rgb(0, 0, 200) == (255, 255, 255)


def test_hex_round_trip_for_known_color(engine: DefaultColorEngine) -> None:
    h, s, l = engine.hex_to_hsl("#3b82f6")
    assert h == pytest.approx(217.2, abs=0.1)
    assert engine.hsl_to_hex(h, s, l) == "#3b82f6"


def test_color_constructors(engine: DefaultColorEngine) -> None:
    assert Color.from_hex("3B82F6").hex == "#3b82f6"
    assert Color.from_hex("bogus").to_rgb() == (0, 0, 0)
    assert Color.from_rgb(-5, 127.5, float("inf")).to_rgb() == (0, 128, 0)
    assert str(Color.from_hsl(0, 100, 50)) == "#ff0000"
    hsl = Color(255, 0, 0).to_hsl()
    assert (hsl.h, hsl.s, hsl.l) == pytest.approx((0.0, 100.0, 50.0))


def test_hsl_normalized() -> None:
    got = HSL(-90.0, 120.0, float("nan")).normalized()
    assert got == HSL(270.0, 100.0, 0.0)


def test_enum_coercion() -> None:
    assert LightnessMethod.coerce("Perceptual") is LightnessMethod.PERCEPTUAL
    assert LightnessMethod.coerce(None) is LightnessMethod.HYBRID
    assert LightnessMethod.coerce("luma") is LightnessMethod.HYBRID
    assert HueShiftMode.coerce(HueShiftMode.FIXED) is HueShiftMode.FIXED
    assert HueShiftMode.coerce("sideways") is HueShiftMode.NATURAL


def test_token_ref_css() -> None:
    ref = TokenRef("--primary-500")
    assert ref.css() == "var(--primary-500)"
    assert str(ref) == "var(--primary-500)"
    assert ref == TokenRef("--primary-500")


class _DelegatingEngine:
    """`ColorEngine` の宣言メソッドだけを持つ差し替えエンジン。"""

    def __init__(self) -> None:
        self._inner = default_engine()
        self.calls: list[str] = []

    def _call(self, name: str, *args):
        self.calls.append(name)
        return getattr(self._inner, name)(*args)

    def normalize_hue(self, h):
        return self._call("normalize_hue", h)

    def rgb_to_hsl(self, r, g, b):
        return self._call("rgb_to_hsl", r, g, b)

    def hsl_to_rgb(self, h, s, l):
        return self._call("hsl_to_rgb", h, s, l)

    def hex_to_rgb(self, value, log=None):
        return self._call("hex_to_rgb", value, log)

    def rgb_to_hex(self, r, g, b):
        return self._call("rgb_to_hex", r, g, b)

    def hex_to_hsl(self, value, log=None):
        return self._call("hex_to_hsl", value, log)

    def hsl_to_hex(self, h, s, l):
        return self._call("hsl_to_hex", h, s, l)


def test_protocol_declares_every_engine_method() -> None:
    declared = {name for name in vars(ColorEngine) if not name.startswith("_")}
    assert declared == {
        "normalize_hue",
        "rgb_to_hsl",
        "hsl_to_rgb",
        "hex_to_rgb",
        "rgb_to_hex",
        "hex_to_hsl",
        "hsl_to_hex",
    }
    implemented = {name for name in vars(DefaultColorEngine) if not name.startswith("_")}
    assert declared <= implemented


def test_injected_engine_drives_explanation_and_combination() -> None:
    eng = _DelegatingEngine()
    ex = get_hue_shift_explanation("#3b82f6", HueShiftMode.NATURAL, engine=eng)
    assert ex == get_hue_shift_explanation("#3b82f6", HueShiftMode.NATURAL)
    configs = generate_combination("#3b82f6", CombinationType.TRIADIC, engine=eng)
    assert [c.color for c in configs] == [
        c.color for c in generate_combination("#3b82f6", CombinationType.TRIADIC)
    ]
    assert "hex_to_hsl" in eng.calls
