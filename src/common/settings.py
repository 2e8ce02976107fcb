"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float, env_int, env_str


@dataclass
class _Settings:
    # ロギング
    LOG_LEVEL: str = "INFO"

    # 明度逆算（二分探索）
    INVERT_MAX_ITERATIONS: int = 100
    INVERT_PRECISION: float = 0.001


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 反復回数は 1 以上、精度は 0 より大きい値へ丸める。
    """
    _settings.LOG_LEVEL = env_str("CSG_LOG_LEVEL", "INFO").upper()

    _settings.INVERT_MAX_ITERATIONS = (
        env_int("CSG_INVERT_MAX_ITERATIONS", 100, min_value=1) or 100
    )
    _settings.INVERT_PRECISION = env_float("CSG_INVERT_PRECISION", 0.001)
    if _settings.INVERT_PRECISION <= 0.0:
        _settings.INVERT_PRECISION = 0.001


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
