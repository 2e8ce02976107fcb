"""
アーキテクチャテスト

目的:
- 数値レイヤ（外側→内側のみ許可、同層は許可）
- 個別禁止エッジ（ライブラリ本体から CLI への依存を禁止）
- モジュール間の循環 import を検出
"""

from __future__ import annotations

import ast
import pathlib
from typing import Dict, Iterator, List, Optional, Set, Tuple

import pytest

REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"

# レイヤ定義（数値が小さいほど内側）
# L0: 共通ユーティリティ, L1: パレット生成, L2: エントリ
LAYER_MAP = {
    ("common",): 0,
    ("util",): 0,
    ("colorscale",): 1,
    ("colorscale", "cli"): 2,
    ("colorscale", "__main__"): 2,
}

CHECK_ROOTS = {"colorscale", "common", "util"}


def iter_py_files(root: pathlib.Path) -> Iterator[pathlib.Path]:
    for p in root.rglob("*.py"):
        if any(part in {"tests", "__pycache__"} for part in p.parts):
            continue
        yield p


def module_name_from_path(path: pathlib.Path) -> str:
    rel = path.relative_to(SRC_DIR).with_suffix("")
    return ".".join(rel.parts)


def layer_of(module: str) -> Optional[int]:
    parts = module.split(".") if module else []
    if not parts:
        return None
    if len(parts) > 1 and (parts[0], parts[1]) in LAYER_MAP:
        return LAYER_MAP[(parts[0], parts[1])]
    return LAYER_MAP.get((parts[0],))


def iter_import_edges(py_path: pathlib.Path) -> Iterator[Tuple[str, str]]:
    src_mod = module_name_from_path(py_path)
    tree = ast.parse(py_path.read_text(encoding="utf-8"), filename=str(py_path))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield src_mod, alias.name
        elif isinstance(node, ast.ImportFrom):
            if node.level > 0:  # 相対 import
                src_parts = src_mod.split(".")
                base = ".".join(src_parts[: -node.level])
                mod = node.module or ""
                yield src_mod, f"{base}.{mod}" if mod else base
            else:
                yield src_mod, node.module or ""


def is_forbidden_edge(src: str, tgt: str) -> bool:
    # 1) common/util -> colorscale を禁止
    if src.split(".")[0] in {"common", "util"} and tgt.split(".")[0] == "colorscale":
        return True
    # 2) パッケージ公開面（__init__）から CLI を禁止
    if src == "colorscale.__init__" and tgt in {"colorscale.cli", "colorscale.__main__"}:
        return True
    return False


def collect_graph_and_violations() -> tuple[Dict[str, Set[str]], list[str], list[str]]:
    layering: list[str] = []
    forbidden: list[str] = []
    graph: Dict[str, Set[str]] = {}

    py_files: List[pathlib.Path] = [
        p for p in iter_py_files(SRC_DIR) if module_name_from_path(p).split(".")[0] in CHECK_ROOTS
    ]
    for py in py_files:
        graph.setdefault(module_name_from_path(py), set())

    for py in py_files:
        for src, tgt in iter_import_edges(py):
            if tgt.split(".")[0] not in CHECK_ROOTS:
                continue
            s_layer = layer_of(src)
            t_layer = layer_of(tgt)
            if s_layer is not None and t_layer is not None and s_layer < t_layer:
                layering.append(f"[{py}] {src} (L{s_layer}) -> {tgt} (L{t_layer})")
            if is_forbidden_edge(src, tgt):
                forbidden.append(f"[{py}] {src} -> {tgt}")
            if tgt in graph:
                graph[src].add(tgt)

    return graph, layering, forbidden


def find_cycles(graph: Dict[str, Set[str]]) -> List[List[str]]:
    cycles: List[List[str]] = []
    WHITE, GRAY, BLACK = 0, 1, 2
    color: Dict[str, int] = {u: WHITE for u in graph}
    stack: List[str] = []

    def dfs(u: str) -> None:
        color[u] = GRAY
        stack.append(u)
        for v in graph.get(u, ()):
            if color[v] == WHITE:
                dfs(v)
            elif color[v] == GRAY:
                cycle = stack[stack.index(v):] + [v]
                if cycle not in cycles:
                    cycles.append(cycle)
        stack.pop()
        color[u] = BLACK

    for node in list(graph):
        if color[node] == WHITE:
            dfs(node)
    return cycles


@pytest.mark.smoke
def test_architecture_import_rules():
    graph, layering, forbidden = collect_graph_and_violations()
    cycles = find_cycles(graph)
    msgs: list[str] = []
    if layering:
        msgs.append("Layer violations:\n" + "\n".join(layering))
    if forbidden:
        msgs.append("Forbidden-edge violations:\n" + "\n".join(forbidden))
    if cycles:
        msgs.append("Import cycles detected (module-level):\n" + "\n".join(" -> ".join(c) for c in cycles[:10]))
    if msgs:
        raise AssertionError("\n\n".join(msgs))
