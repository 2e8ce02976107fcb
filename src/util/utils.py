"""
どこで: `util.utils`。
何を: YAML 設定（`configs/default.yaml` + ルート `config.yaml`）の読込とセクション取得。
なぜ: CLI の既定値（prefix/明度方式/透過色など）をコード外で差し替えられるようにするため。
"""

from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

DEFAULT_CONFIG = Path("configs") / "default.yaml"
ROOT_CONFIG = Path("config.yaml")


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """プロジェクトルートを推定して返す。

    - `src/util/` から上位へ辿り、`pyproject.toml` か `configs/default.yaml` を持つ
      もっとも近いディレクトリを返す。
    - 見つからない場合は `start.parent.parent` をフォールバックとして返す。
    """
    cur = start.resolve()
    for parent in [cur] + list(cur.parents):
        if (parent / "pyproject.toml").exists() or (parent / DEFAULT_CONFIG).exists():
            return parent
    return cur.parent.parent


def load_config(root: Path | None = None) -> Dict[str, Any]:
    """構成を読み込んで辞書で返す（フェイルソフト）。

    優先順:
    1) `configs/default.yaml`（ベース）
    2) ルート `config.yaml`（ベースに上書き）

    - いずれも存在しない/不正な場合は空辞書を返す。
    - トップレベルのキー単位で上書きする（`palette:` を書くと既定の `palette:` 全体が置き換わる）。
    - `root` を渡すとプロジェクトルート探索を省略する（テスト用）。
    """
    project_root = root if root is not None else _find_project_root(Path(__file__).parent)
    merged: Dict[str, Any] = {}
    for rel in (DEFAULT_CONFIG, ROOT_CONFIG):
        path = project_root / rel
        if path.exists():
            merged.update(_safe_load_yaml(path))
    return merged


def config_section(cfg: Mapping[str, Any] | None, name: str) -> Dict[str, Any]:
    """`cfg[name]` を辞書として返す（欠落や辞書以外は空辞書）。"""
    section = (cfg or {}).get(name)
    return dict(section) if isinstance(section, Mapping) else {}
