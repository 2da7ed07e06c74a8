"""Tests for config loading and saving."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from mdtoc import config as config_module


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_file(self, isolated_config: Path) -> None:
        data = config_module.load_config()
        assert data["_no_file"] is True
        assert data["_config_file"] == str(isolated_config.resolve())
        assert data["dir"] == "."
        assert data["sort_asc"] is True
        assert data["indent"] == "  "
        assert data["out"] is None
        assert data["title"] is None

    def test_reads_known_keys_only(self, isolated_config: Path) -> None:
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text(json.dumps({"title": "Docs", "bogus": 1}), encoding="utf-8")
        data = config_module.load_config()
        assert data["_no_file"] is False
        assert data["title"] == "Docs"
        assert "bogus" not in data

    def test_invalid_json_falls_back_to_defaults(self, isolated_config: Path) -> None:
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text("{not json", encoding="utf-8")
        data = config_module.load_config()
        assert data.get("_load_error") is True
        assert data["dir"] == "."

    def test_found_in_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("MDTOC_CONFIG")
        work = tmp_path / "work"
        (work / "nested").mkdir(parents=True)
        (work / config_module.CONFIG_FILENAME).write_text(json.dumps({"indent": "\t"}), encoding="utf-8")
        monkeypatch.chdir(work / "nested")
        assert config_module.load_config()["indent"] == "\t"
        assert config_module.get_config_path() == (work / config_module.CONFIG_FILENAME).resolve()


class TestSetOption:
    """Tests for set_option and save_config."""

    def test_set_and_reload(self, isolated_config: Path) -> None:
        result = config_module.set_option("sort_asc", "false")
        assert result["ok"]
        assert result["config"]["sort_asc"] is False
        saved = json.loads(isolated_config.read_text(encoding="utf-8"))
        assert saved == {"dir": ".", "out": None, "title": None, "sort_asc": False, "indent": "  "}

    def test_clear_title(self, isolated_config: Path) -> None:
        config_module.set_option("title", "Handbook")
        assert config_module.load_config()["title"] == "Handbook"
        config_module.set_option("title", "none")
        assert config_module.load_config()["title"] is None

    def test_unknown_key(self) -> None:
        result = config_module.set_option("colour", "blue")
        assert not result["ok"]
        assert "Unknown config key" in result["error"]

    @pytest.mark.parametrize(("key", "value"), [("sort_asc", "maybe"), ("dir", " "), ("indent", "")])
    def test_invalid_values(self, key: str, value: str, isolated_config: Path) -> None:
        result = config_module.set_option(key, value)
        assert not result["ok"]
        assert not isolated_config.exists()


class TestGetOptions:
    """Tests for get_options."""

    def test_overrides_win_over_config(self, isolated_config: Path) -> None:
        config_module.set_option("title", "From Config")
        config_module.set_option("sort_asc", "false")
        options = config_module.get_options(title="From CLI", sort_asc=None)
        assert options.title == "From CLI"
        assert options.sort_asc is False
        assert options.directory == Path(".")

    def test_invalid_config_value(self, isolated_config: Path) -> None:
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text(json.dumps({"sort_asc": "sometimes"}), encoding="utf-8")
        with pytest.raises(ValueError):
            config_module.get_options()
