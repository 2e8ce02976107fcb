from __future__ import annotations

import re

import numpy as np
import pytest

from colorscale import LightnessMethod, RandomColorConfig, generate_random_primary_color, measure
from colorscale.engine import default_engine


def test_random_color_is_reproducible() -> None:
    a = generate_random_primary_color(rng=np.random.default_rng(7))
    b = generate_random_primary_color(rng=np.random.default_rng(7))
    assert a == b
    assert re.match(r"^#[0-9a-f]{6}$", a)


def test_random_color_respects_lightness_range(rng: np.random.Generator) -> None:
    for _ in range(20):
        c = generate_random_primary_color(rng=rng)
        assert 38.0 - 1.0 <= measure(c, LightnessMethod.HYBRID) <= 74.0 + 1.0


def test_random_color_degenerate_ranges(rng: np.random.Generator) -> None:
    cfg = RandomColorConfig(
        saturation_range=(100.0, 100.0),
        lightness_range=(50.0, 50.0),
        lightness_method="hsl",
        hue_range=(120.0, 120.0),
    )
    assert generate_random_primary_color(cfg, rng) == "#00ff00"


def test_random_color_reversed_and_non_finite_ranges(rng: np.random.Generator) -> None:
    cfg = RandomColorConfig(
        saturation_range=(float("nan"), 10.0),
        lightness_range=(60.0, 40.0),
        lightness_method=LightnessMethod.HSL,
        hue_range=(200.0, 180.0),
    )
    for _ in range(10):
        h, s, l = default_engine().hex_to_hsl(generate_random_primary_color(cfg, rng))
        assert 39.0 <= l <= 61.0
        assert 33.0 <= s <= 77.0
        assert 178.0 <= h <= 202.0


def test_config_coerces_method() -> None:
    assert RandomColorConfig(lightness_method="average").lightness_method is LightnessMethod.AVERAGE
    assert RandomColorConfig(lightness_method="?").lightness_method is LightnessMethod.HYBRID


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_random_color_with_default_generator_shape(seed: int) -> None:
    out = generate_random_primary_color(RandomColorConfig(), np.random.default_rng(seed))
    assert len(out) == 7
