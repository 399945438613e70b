"""Configuration management for skilldex."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from skilldex.constants import (
    DEFAULT_IGNORE,
    DEFAULT_SKILL_FILENAME,
    DEFAULT_SUFFIXES,
)


# ============================================================================
# Configuration Models
# ============================================================================


class ApiConfig(BaseModel):
    """HTTP API configuration."""

    host: str = "127.0.0.1"
    port: int = Field(default=8000, gt=0, lt=65536)


# ============================================================================
# Main Configuration Class
# ============================================================================


class Config(BaseModel):
    """
    Main configuration for skilldex.

    Configuration is loaded from the workspace directory (~/.skilldex/ by default):
    1. config.user.yaml - User configuration (optional)
    2. config.runtime.yaml - Runtime overrides (optional, overrides user)

    Pydantic defaults are used for fields not specified in config files.
    """

    workspace: Path
    skills_path: Path = Field(default=Path("skills"))
    logging_path: Path = Field(default=Path(".logs"))
    skill_filename: str = DEFAULT_SKILL_FILENAME
    suffixes: list[str] = Field(default_factory=lambda: list(DEFAULT_SUFFIXES))
    ignore: list[str] = Field(default_factory=lambda: list(DEFAULT_IGNORE))
    log_level: str = "INFO"
    log_max_bytes: int = Field(default=100_000, gt=0)
    log_backup_count: int = Field(default=3, ge=0)
    api: ApiConfig = Field(default_factory=ApiConfig)

    @field_validator("suffixes")
    @classmethod
    def suffixes_must_start_with_dot(cls, v: list[str]) -> list[str]:
        for suffix in v:
            if not suffix.startswith("."):
                raise ValueError(f"suffix must start with '.': {suffix}")
        return v

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log_level: {v}")
        return level

    @model_validator(mode="after")
    def resolve_paths(self) -> "Config":
        """Resolve relative paths against the workspace."""
        if not self.skills_path.is_absolute():
            self.skills_path = self.workspace / self.skills_path

        if self.logging_path.is_absolute():
            raise ValueError(f"logging_path must be relative, got: {self.logging_path}")
        self.logging_path = self.workspace / self.logging_path
        return self

    @classmethod
    def load(cls, workspace_dir: Path) -> "Config":
        """
        Load configuration from a workspace directory.

        Args:
            workspace_dir: Path to workspace directory

        Returns:
            Config instance with all settings loaded and validated

        Raises:
            ValidationError: If configuration is invalid
        """
        config_data: dict = {"workspace": workspace_dir}

        user_config = workspace_dir / "config.user.yaml"
        runtime_config = workspace_dir / "config.runtime.yaml"

        if user_config.exists():
            with open(user_config) as f:
                user_data = yaml.safe_load(f) or {}
            config_data = cls._deep_merge(config_data, user_data)

        # Deep merge runtime config (overrides user)
        if runtime_config.exists():
            with open(runtime_config) as f:
                runtime_data = yaml.safe_load(f) or {}
            config_data = cls._deep_merge(config_data, runtime_data)

        return cls.model_validate(config_data)

    @staticmethod
    def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """
        Deep merge override dict into base dict.

        Args:
            base: Base dictionary
            override: Override dictionary (takes precedence)

        Returns:
            Merged dictionary
        """
        result = base.copy()

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = Config._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
