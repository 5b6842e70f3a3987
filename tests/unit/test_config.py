"""Tests for gitclient.config module."""

from pathlib import Path

import pytest
import yaml

from gitclient.config import GitClientConfig, LoggingConfig
from gitclient.constants import DEFAULT_LOG_DIR
from gitclient.exceptions import ConfigurationError


class TestGitClientConfig:
    """Tests for GitClientConfig."""

    def test_defaults(self) -> None:
        """Test default configuration values."""
        config = GitClientConfig()

        assert config.binary == "git"
        assert config.hidden == []
        assert config.environment == {}
        assert config.inherit_environment is True
        assert config.timeout is None
        assert config.logging.level == "info"

    def test_load_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        """Test loading from a nonexistent path."""
        config = GitClientConfig.load(tmp_path / "missing.yaml")

        assert config == GitClientConfig()

    def test_load_yaml(self, tmp_path: Path) -> None:
        """Test loading values from YAML."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            yaml.dump(
                {
                    "binary": "/usr/bin/git",
                    "hidden": ["/srv/git/private.git"],
                    "environment": {"GIT_PAGER": "cat"},
                    "timeout": 120,
                    "logging": {"level": "debug"},
                }
            )
        )

        config = GitClientConfig.load(config_file)

        assert config.binary == "/usr/bin/git"
        assert config.hidden == ["/srv/git/private.git"]
        assert config.environment == {"GIT_PAGER": "cat"}
        assert config.timeout == 120
        assert config.logging.level == "debug"

    def test_load_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file yields defaults."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert GitClientConfig.load(config_file) == GitClientConfig()

    def test_save_and_load(self, tmp_path: Path) -> None:
        """Test a saved configuration loads back identically."""
        config_file = tmp_path / "nested" / "config.yaml"
        config = GitClientConfig(hidden=["/srv/a"], environment={"GIT_TRACE": "1"}, timeout=5.5)

        config.save(config_file)

        assert config_file.exists()
        assert GitClientConfig.load(config_file) == config

    def test_illegal_environment_variable(self) -> None:
        """Test non-git variables are rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            GitClientConfig.from_dict({"environment": {"LD_PRELOAD": "x.so"}})

        assert "errors" in exc_info.value.details

    def test_invalid_timeout(self) -> None:
        """Test a non-positive timeout is rejected."""
        with pytest.raises(ConfigurationError):
            GitClientConfig.from_dict({"timeout": 0})

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test malformed YAML raises ConfigurationError."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("hidden: [unclosed\n")

        with pytest.raises(ConfigurationError):
            GitClientConfig.load(config_file)

    @pytest.mark.parametrize("content", ["- git\n- svn\n", "just a string\n", "42\n"])
    def test_load_non_mapping(self, tmp_path: Path, content: str) -> None:
        """Test a YAML document that is not a mapping raises ConfigurationError."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(content)

        with pytest.raises(ConfigurationError) as exc_info:
            GitClientConfig.load(config_file)

        assert "expected a mapping" in exc_info.value.message

    def test_to_dict(self) -> None:
        """Test conversion to a plain dictionary."""
        data = GitClientConfig().to_dict()

        assert data["binary"] == "git"
        assert data["logging"]["level"] == "info"


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_invalid_level(self) -> None:
        """Test unknown log levels are rejected."""
        with pytest.raises(ConfigurationError):
            GitClientConfig.from_dict({"logging": {"level": "verbose"}})

    def test_log_dir_default(self) -> None:
        assert LoggingConfig().log_dir() == DEFAULT_LOG_DIR
        assert LoggingConfig(directory="/var/log/gitclient").log_dir() == "/var/log/gitclient"
