"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from skilldex.utils.config import ApiConfig, Config


class TestConfigDefaults:
    def test_defaults_resolve_against_workspace(self, tmp_path: Path):
        config = Config(workspace=tmp_path)

        assert config.skills_path == tmp_path / "skills"
        assert config.logging_path == tmp_path / ".logs"
        assert config.skill_filename == "SKILL.md"
        assert config.suffixes == [".md", ".markdown"]
        assert "README.md" in config.ignore
        assert config.api == ApiConfig()

    def test_absolute_skills_path_kept(self, tmp_path: Path):
        elsewhere = tmp_path / "elsewhere"
        config = Config(workspace=tmp_path / "ws", skills_path=elsewhere)

        assert config.skills_path == elsewhere

    def test_absolute_logging_path_rejected(self, tmp_path: Path):
        with pytest.raises(ValidationError, match="logging_path must be relative"):
            Config(workspace=tmp_path, logging_path=tmp_path / "logs")

    def test_suffix_without_dot_rejected(self, tmp_path: Path):
        with pytest.raises(ValidationError, match="must start with"):
            Config(workspace=tmp_path, suffixes=["md"])

    def test_invalid_port_rejected(self):
        with pytest.raises(ValidationError):
            ApiConfig(port=70000)


class TestConfigLoad:
    def test_load_without_files_uses_defaults(self, tmp_path: Path):
        config = Config.load(tmp_path)

        assert config.workspace == tmp_path
        assert config.skills_path == tmp_path / "skills"

    def test_load_user_config(self, tmp_path: Path):
        (tmp_path / "config.user.yaml").write_text(
            yaml.dump({"skills_path": "docs/skills", "api": {"port": 9000}})
        )

        config = Config.load(tmp_path)

        assert config.skills_path == tmp_path / "docs" / "skills"
        assert config.api.port == 9000
        assert config.api.host == "127.0.0.1"

    def test_runtime_config_overrides_user(self, tmp_path: Path):
        (tmp_path / "config.user.yaml").write_text(
            yaml.dump({"api": {"host": "0.0.0.0", "port": 9000}})
        )
        (tmp_path / "config.runtime.yaml").write_text(yaml.dump({"api": {"port": 9001}}))

        config = Config.load(tmp_path)

        assert config.api.host == "0.0.0.0"
        assert config.api.port == 9001

    def test_empty_config_file(self, tmp_path: Path):
        (tmp_path / "config.user.yaml").write_text("")

        config = Config.load(tmp_path)

        assert config.skills_path == tmp_path / "skills"


def test_deep_merge_nested():
    base = {"a": {"b": 1, "c": 2}, "d": 3}
    override = {"a": {"b": 10}, "e": 5}

    result = Config._deep_merge(base, override)

    assert result == {"a": {"b": 10, "c": 2}, "d": 3, "e": 5}
    assert base == {"a": {"b": 1, "c": 2}, "d": 3}


def test_log_level_normalized(tmp_path: Path):
    assert Config(workspace=tmp_path, log_level="debug").log_level == "DEBUG"


def test_unknown_log_level_rejected(tmp_path: Path):
    with pytest.raises(ValidationError, match="unknown log_level"):
        Config(workspace=tmp_path, log_level="loud")
