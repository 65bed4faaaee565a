from __future__ import annotations

import os
from pathlib import Path

import pytest

from simple_unicode_normalization_forms.config import SunfConfig, load_optional_config


def test_load_optional_config_none_when_missing(tmp_path: Path) -> None:
    cwd = Path.cwd()
    try:
        # simulate a project dir with no config.toml
        os.chdir(tmp_path)
        assert load_optional_config(None) is None
    finally:
        os.chdir(cwd)


def test_load_optional_config_loads_when_present(tmp_path: Path) -> None:
    p = tmp_path / "config.toml"
    p.write_text("[x]\ny=1\n", encoding="utf-8")

    cfg = load_optional_config(p)
    assert isinstance(cfg, SunfConfig)
    assert cfg.get("x", "y") == 1
    assert cfg.get("x", "missing", default="d") == "d"


def test_load_optional_config_picks_up_cwd_file(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text("[clean]\nallow_tab = true\n", encoding="utf-8")
    cwd = Path.cwd()
    try:
        os.chdir(tmp_path)
        cfg = load_optional_config(None)
    finally:
        os.chdir(cwd)
    assert cfg is not None
    assert cfg.get("clean", "allow_tab") is True


def test_config_load_missing_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        SunfConfig.load(tmp_path / "nope.toml")
