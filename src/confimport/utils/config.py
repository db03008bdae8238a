"""Configuration management for confimport."""

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from confimport.core.connection_importer import DEFAULT_SERVER_NAME


class Config(BaseModel):
    """
    Configuration for the confimport command line.

    Configuration is loaded from the workspace directory:
    1. config.user.yaml - User configuration (optional)
    2. config.runtime.yaml - Runtime state (optional, overrides user)

    Pydantic defaults are used for fields not specified in config files.
    """

    workspace: Path
    default_server_name: str = Field(default=DEFAULT_SERVER_NAME, min_length=1)
    logging_path: Path = Field(default=Path(".logs"))
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @model_validator(mode="after")
    def resolve_paths(self) -> "Config":
        """Resolve relative paths to absolute using workspace."""
        if self.logging_path.is_absolute():
            raise ValueError(f"logging_path must be relative, got: {self.logging_path}")
        self.logging_path = self.workspace / self.logging_path
        return self

    @classmethod
    def load(cls, workspace_dir: Path) -> "Config":
        """
        Load configuration from a workspace directory.

        Args:
            workspace_dir: Path to the workspace directory

        Returns:
            Config instance with all settings loaded and validated

        Raises:
            ValidationError: If configuration is invalid
        """
        config_data: dict[str, Any] = {"workspace": workspace_dir}

        for filename in ("config.user.yaml", "config.runtime.yaml"):
            config_file = workspace_dir / filename
            if config_file.exists():
                with open(config_file) as f:
                    file_data = yaml.safe_load(f) or {}
                config_data = cls._deep_merge(config_data, file_data)

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
