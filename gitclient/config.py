"""gitclient configuration management using Pydantic."""

from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, Field, ValidationError, field_validator

from gitclient.constants import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_GIT_BINARY,
    DEFAULT_LOG_DIR,
    GIT_ENVIRONMENT_VARIABLES,
)
from gitclient.exceptions import ConfigurationError


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="info", pattern="^(debug|info|warn|warning|error)$")
    directory: str | None = None
    json_output: bool = False
    console_output: bool = True
    max_log_size_mb: int = Field(default=10, ge=1, le=1000)
    backup_count: int = Field(default=5, ge=0, le=100)

    def log_dir(self) -> str:
        return self.directory or DEFAULT_LOG_DIR


class GitClientConfig(BaseModel):
    """Complete gitclient configuration."""

    binary: str = DEFAULT_GIT_BINARY
    hidden: list[str] = Field(default_factory=list)
    environment: dict[str, str] = Field(default_factory=dict)
    inherit_environment: bool = True
    timeout: float | None = Field(default=None, gt=0)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("environment")
    @classmethod
    def _check_environment(cls, value: dict[str, str]) -> dict[str, str]:
        illegal = sorted(set(value) - GIT_ENVIRONMENT_VARIABLES)
        if illegal:
            raise ValueError(f"not legal git environment variables: {', '.join(illegal)}")
        return value

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> "GitClientConfig":
        """Load configuration from YAML file.

        Args:
            config_path: Path to config file. Defaults to .gitclient/config.yaml

        Returns:
            GitClientConfig instance

        Raises:
            ConfigurationError: If the file is not valid YAML or fails validation
        """
        config_path = DEFAULT_CONFIG_PATH if config_path is None else Path(config_path)

        if not config_path.exists():
            return cls()

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in {config_path}", details={"error": str(e)}
            ) from e

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GitClientConfig":
        """Create configuration from dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            GitClientConfig instance

        Raises:
            ConfigurationError: If validation fails
        """
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Invalid gitclient configuration: expected a mapping",
                details={"type": type(data).__name__},
            )

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError("Invalid gitclient configuration", details={"errors": e.errors()}) from e

    def save(self, config_path: str | Path | None = None) -> None:
        """Save configuration to YAML file.

        Args:
            config_path: Path to save config. Defaults to .gitclient/config.yaml
        """
        config_path = DEFAULT_CONFIG_PATH if config_path is None else Path(config_path)

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()
