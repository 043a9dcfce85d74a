from __future__ import annotations

from pathlib import Path

import pytest

from util.utils import config_section, load_config


@pytest.mark.integration
def test_load_config_reads_repository_defaults() -> None:
    cfg = load_config()
    assert config_section(cfg, "canvas_controller").get("fps") == 60
    assert config_section(cfg, "clock", "layout").get("hour_radius") == 4.0
    assets = config_section(cfg, "clock", "assets")
    assert assets.get("seconds_hand") == "seconds_hand"


@pytest.mark.integration
@pytest.mark.io
def test_load_config_root_override_is_top_level(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "canvas:\n  window_size: [600, 600]\n  background_color: '#FFFFFF'\nclock:\n  layout:\n    hour_radius: 4.0\n",
        encoding="utf-8",
    )
    (tmp_path / "config.yaml").write_text("canvas:\n  window_size: 300\n", encoding="utf-8")
    cfg = load_config(tmp_path)
    # トップレベル単位の上書き（canvas は丸ごと置き換わる）
    assert cfg["canvas"] == {"window_size": 300}
    assert cfg["clock"]["layout"]["hour_radius"] == 4.0


@pytest.mark.integration
@pytest.mark.io
def test_load_config_fail_soft(tmp_path: Path) -> None:
    assert load_config(tmp_path) == {}
    (tmp_path / "config.yaml").write_text("canvas: [unclosed\n", encoding="utf-8")
    assert load_config(tmp_path) == {}


def test_config_section_missing_paths() -> None:
    assert config_section(None, "clock") == {}
    assert config_section({"clock": 3}, "clock", "layout") == {}
    assert config_section({"clock": {"layout": {"a": 1}}}, "clock", "layout") == {"a": 1}
