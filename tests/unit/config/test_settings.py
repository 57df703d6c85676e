"""Unit tests for vnscript settings."""

import json

import pytest
from pydantic import ValidationError as PydanticValidationError

from vnscript.config import (
    VNScriptSettings,
    clear_settings_cache,
    get_settings,
    get_settings_for_cli,
)
from vnscript.exceptions import ConfigurationError


class TestVNScriptSettings:
    """Test cases for VNScriptSettings."""

    def test_defaults(self):
        settings = VNScriptSettings(_env_file=None)
        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"
        assert settings.bgm_track == "bgm_main"
        assert settings.bgm_volume == 0.6
        assert settings.se_volume == 0.8
        assert (settings.stage_width, settings.stage_height) == (1280, 720)
        assert settings.character_keys == {
            "主人公": "protagonist",
            "ななたう": "nanatau",
        }

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("VNSCRIPT_BGM_TRACK", "bgm_night")
        monkeypatch.setenv("VNSCRIPT_LOG_LEVEL", "debug")
        settings = VNScriptSettings(_env_file=None)
        assert settings.bgm_track == "bgm_night"
        assert settings.log_level == "DEBUG"

    def test_log_format_normalized(self):
        assert VNScriptSettings(_env_file=None, log_format="JSON").log_format == "json"

    def test_invalid_log_level(self):
        with pytest.raises(PydanticValidationError):
            VNScriptSettings(_env_file=None, log_level="LOUD")

    def test_volume_bounds(self):
        with pytest.raises(PydanticValidationError):
            VNScriptSettings(_env_file=None, se_volume=1.5)

    def test_from_yaml_file(self, tmp_path):
        config = tmp_path / "vnscript.yaml"
        config.write_text(
            "se_track: se_bell\ncharacter_keys:\n  先生: sensei\n",
            encoding="utf-8",
        )
        settings = VNScriptSettings.from_file(config)
        assert settings.se_track == "se_bell"
        assert settings.character_keys == {"先生": "sensei"}

    def test_from_toml_file(self, tmp_path):
        config = tmp_path / "vnscript.toml"
        config.write_text('bgm_volume = 0.25\n', encoding="utf-8")
        assert VNScriptSettings.from_file(config).bgm_volume == 0.25

    def test_from_json_file(self, tmp_path):
        config = tmp_path / "vnscript.json"
        config.write_text(json.dumps({"stage_width": 1920}), encoding="utf-8")
        assert VNScriptSettings.from_file(config).stage_width == 1920

    def test_unsupported_format(self, tmp_path):
        config = tmp_path / "vnscript.ini"
        config.write_text("[x]", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Unsupported configuration"):
            VNScriptSettings.from_file(config)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            VNScriptSettings.from_file(tmp_path / "missing.yaml")

    def test_common_key_mistake(self, tmp_path):
        config = tmp_path / "vnscript.yaml"
        config.write_text("encoding: shift_jis\n", encoding="utf-8")
        with pytest.raises(ConfigurationError) as exc_info:
            VNScriptSettings.from_file(config)
        assert exc_info.value.hint == "Use 'script_encoding' instead of 'encoding'"

    def test_cli_args_take_precedence(self, tmp_path):
        config = tmp_path / "vnscript.yaml"
        config.write_text("bgm_track: from_file\nse_track: se_file\n", encoding="utf-8")
        settings = VNScriptSettings.from_multiple_sources(
            config_files=[config], cli_args={"bgm_track": "from_cli", "se_track": None}
        )
        assert settings.bgm_track == "from_cli"
        assert settings.se_track == "se_file"

    def test_later_files_override_earlier(self, tmp_path):
        first = tmp_path / "first.yaml"
        second = tmp_path / "second.json"
        first.write_text("bgm_track: first\nse_track: se_first\n", encoding="utf-8")
        second.write_text(json.dumps({"bgm_track": "second"}), encoding="utf-8")
        settings = VNScriptSettings.from_multiple_sources(config_files=[first, second])
        assert settings.bgm_track == "second"
        assert settings.se_track == "se_first"


class TestGlobalSettings:
    """Test cases for the global settings helpers."""

    def test_get_settings_reads_project_config(self, tmp_path):
        (tmp_path / "vnscript.yaml").write_text("se_track: se_project\n")
        clear_settings_cache()
        assert get_settings().se_track == "se_project"

    def test_get_settings_is_cached(self):
        clear_settings_cache()
        assert get_settings() is get_settings()

    def test_settings_for_cli_with_config(self, tmp_path):
        config = tmp_path / "custom.toml"
        config.write_text('script_encoding = "shift_jis"\n', encoding="utf-8")
        settings = get_settings_for_cli(config_file=config)
        assert settings.script_encoding == "shift_jis"

    def test_settings_for_cli_missing_config(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            get_settings_for_cli(config_file=tmp_path / "nope.yaml")
