"""共通フィクスチャ。

- 乱数シード固定
- 環境変数由来の設定（settings）をテストごとに初期状態へ戻す
- 代表的なシード色
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from common import settings


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """CSG_* 環境変数を除去した状態で settings を再読込する。"""
    for name in ("CSG_LOG_LEVEL", "CSG_INVERT_MAX_ITERATIONS", "CSG_INVERT_PRECISION"):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()


@pytest.fixture()
def blue() -> str:
    return "#3b82f6"


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(12345)
