from __future__ import annotations

"""環境変数ヘルパと settings の再読込テスト。"""

import logging

import pytest

from common import settings
from common.env import env_float, env_int, env_str
from common.logging import resolve_level


def test_env_int(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CSG_TEST_INT", raising=False)
    assert env_int("CSG_TEST_INT", 7) == 7
    monkeypatch.setenv("CSG_TEST_INT", "12")
    assert env_int("CSG_TEST_INT", 7) == 12
    monkeypatch.setenv("CSG_TEST_INT", "abc")
    assert env_int("CSG_TEST_INT", 7) == 7
    monkeypatch.setenv("CSG_TEST_INT", "-3")
    assert env_int("CSG_TEST_INT", 7, min_value=1) == 1


def test_env_float(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CSG_TEST_FLOAT", "0.25")
    assert env_float("CSG_TEST_FLOAT", 1.0) == pytest.approx(0.25)
    monkeypatch.setenv("CSG_TEST_FLOAT", "nan")
    assert env_float("CSG_TEST_FLOAT", 1.0) == 1.0
    monkeypatch.setenv("CSG_TEST_FLOAT", "x")
    assert env_float("CSG_TEST_FLOAT", 1.0) == 1.0
    monkeypatch.setenv("CSG_TEST_FLOAT", "-2")
    assert env_float("CSG_TEST_FLOAT", 1.0, min_value=0.0) == 0.0


def test_env_str(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CSG_TEST_STR", "   ")
    assert env_str("CSG_TEST_STR", "dflt") == "dflt"
    monkeypatch.setenv("CSG_TEST_STR", " debug ")
    assert env_str("CSG_TEST_STR", "dflt") == "debug"


def test_settings_defaults() -> None:
    cfg = settings.get()
    assert cfg.LOG_LEVEL == "INFO"
    assert cfg.INVERT_MAX_ITERATIONS == 100
    assert cfg.INVERT_PRECISION == pytest.approx(0.001)


def test_settings_reload_clamps_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CSG_LOG_LEVEL", "debug")
    monkeypatch.setenv("CSG_INVERT_MAX_ITERATIONS", "0")
    monkeypatch.setenv("CSG_INVERT_PRECISION", "-1")
    settings.reload_from_env()
    cfg = settings.get()
    assert cfg.LOG_LEVEL == "DEBUG"
    assert cfg.INVERT_MAX_ITERATIONS == 1
    assert cfg.INVERT_PRECISION == pytest.approx(0.001)


def test_resolve_level(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_level("warning") == logging.WARNING
    assert resolve_level(logging.ERROR) == logging.ERROR
    assert resolve_level("no-such-level") == logging.INFO
    monkeypatch.setenv("CSG_LOG_LEVEL", "ERROR")
    settings.reload_from_env()
    assert resolve_level(None) == logging.ERROR
