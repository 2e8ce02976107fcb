from __future__ import annotations

from pathlib import Path

import pytest

from util.utils import load_config


@pytest.mark.integration
# - load_config merges configs/default.yaml (base) with root config.yaml (override).
def test_load_config_merges_default_and_root():
    cfg = load_config()
    # configs/default.yaml provides `test_marker: true` which should appear
    assert cfg.get("test_marker") is True
    assert cfg["palette"]["prefix"] == "primary"
    assert cfg["palette"]["lightness_method"] == "hybrid"


@pytest.mark.integration
def test_root_config_overrides_top_level_keys(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "palette:\n  prefix: primary\n  hue_shift_mode: natural\nexport:\n  format: css\n",
        encoding="utf-8",
    )
    (tmp_path / "config.yaml").write_text("palette:\n  prefix: brand\n", encoding="utf-8")

    cfg = load_config(tmp_path)
    # トップレベルのみ上書き（ネストはマージしない）
    assert cfg["palette"] == {"prefix": "brand"}
    assert cfg["export"] == {"format": "css"}


@pytest.mark.integration
def test_broken_yaml_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("palette: [unclosed\n", encoding="utf-8")
    (tmp_path / "config.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    assert load_config(tmp_path) == {}
