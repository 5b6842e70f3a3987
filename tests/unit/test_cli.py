"""Unit tests for gitclient CLI module."""

import json
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from gitclient.cli import cli
from tests.helpers.repos import make_fake_repo


@pytest.fixture
def config_args(tmp_path: Path) -> list[str]:
    """Point the CLI at a config file that does not exist."""
    return ["--config", str(tmp_path / "gitclient.yaml")]


class TestCliGroup:
    """Tests for main CLI group."""

    def test_cli_help(self) -> None:
        """Test CLI shows help with all commands."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        for command in ["list", "find", "init", "clone", "exec"]:
            assert command in result.output

    def test_cli_version(self) -> None:
        """Test CLI shows version."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "gitclient" in result.output.lower()

    def test_illegal_env_option(self, config_args: list[str], repos_dir: Path) -> None:
        """Test --env rejects variables outside the git whitelist."""
        runner = CliRunner()
        result = runner.invoke(cli, [*config_args, "--env", "LD_PRELOAD=x.so", "list", str(repos_dir)])

        assert result.exit_code == 2

    def test_malformed_env_option(self, config_args: list[str], repos_dir: Path) -> None:
        """Test --env requires KEY=VALUE."""
        runner = CliRunner()
        result = runner.invoke(cli, [*config_args, "--env", "GIT_PAGER", "list", str(repos_dir)])

        assert result.exit_code == 2

    def test_invalid_config_file(self, tmp_path: Path, repos_dir: Path) -> None:
        """Test a bad config file exits with status 1."""
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("environment:\n  HOME: /root\n")

        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(config_file), "list", str(repos_dir)])

        assert result.exit_code == 1
        assert "Configuration error" in result.output


class TestListCommand:
    """Tests for the list command."""

    def test_list_json(self, config_args: list[str], repos_dir: Path) -> None:
        """Test JSON listing of a directory of repositories."""
        runner = CliRunner()
        result = runner.invoke(cli, [*config_args, "list", str(repos_dir), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [repo["name"] for repo in data] == ["api.git", "website"]
        assert data[1]["description"] == "Company website\n"

    def test_list_table(self, config_args: list[str], repos_dir: Path) -> None:
        """Test the default table view renders."""
        runner = CliRunner()
        result = runner.invoke(cli, [*config_args, "list", str(repos_dir)])

        assert result.exit_code == 0
        assert "Repositories" in result.output

    def test_list_hidden(self, config_args: list[str], repos_dir: Path) -> None:
        """Test --hidden leaves repositories out."""
        runner = CliRunner()
        result = runner.invoke(
            cli, [*config_args, "list", str(repos_dir), "--json", "--hidden", str(repos_dir / "website")]
        )

        assert result.exit_code == 0
        assert [repo["name"] for repo in json.loads(result.output)] == ["api.git"]

    def test_list_empty(self, config_args: list[str], tmp_path: Path) -> None:
        """Test an empty directory exits with status 1."""
        empty = tmp_path / "empty"
        empty.mkdir()

        runner = CliRunner()
        result = runner.invoke(cli, [*config_args, "list", str(empty)])

        assert result.exit_code == 1
        assert "There are no GIT" in " ".join(result.output.split())


class TestFindCommand:
    """Tests for the find command."""

    def test_find(self, config_args: list[str], tmp_path: Path) -> None:
        """Test the enclosing repository root is printed."""
        repo = make_fake_repo(tmp_path / "project")
        (repo / "src").mkdir()

        runner = CliRunner()
        result = runner.invoke(cli, [*config_args, "find", str(repo / "src")])

        assert result.exit_code == 0
        assert result.output.strip() == str(repo)

    def test_find_missing_path(self, config_args: list[str], tmp_path: Path) -> None:
        """Test a missing path exits with status 1."""
        runner = CliRunner()
        result = runner.invoke(cli, [*config_args, "find", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "does not exist" in " ".join(result.output.split())


class TestExecCommand:
    """Tests for the exec command, using Python as the git binary."""

    def test_exec_prints_stdout(self, config_args: list[str], tmp_path: Path) -> None:
        """Test output of the subcommand is echoed verbatim."""
        repo = make_fake_repo(tmp_path / "project")
        script = tmp_path / "echo_args.py"
        script.write_text("import sys\nprint(' '.join(sys.argv[1:]))\n")

        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["--git", sys.executable, *config_args, "exec", "-C", str(repo), str(script), "--oneline", "-n", "3"],
        )

        assert result.exit_code == 0
        assert result.output == "--oneline -n 3\n"

    def test_exec_failure_uses_exit_code(self, config_args: list[str], tmp_path: Path) -> None:
        """Test a failing subcommand exits with its status and shows stderr."""
        repo = make_fake_repo(tmp_path / "project")
        script = tmp_path / "fail.py"
        script.write_text("import sys\nsys.stderr.write('fatal: bad revision\\n')\nsys.exit(128)\n")

        runner = CliRunner()
        result = runner.invoke(cli, ["--git", sys.executable, *config_args, "exec", "-C", str(repo), str(script)])

        assert result.exit_code == 128
        assert "fatal: bad revision" in result.output

    def test_exec_outside_repository(self, config_args: list[str], tmp_path: Path) -> None:
        """Test exec outside any repository exits with status 1."""
        runner = CliRunner()
        result = runner.invoke(cli, [*config_args, "exec", "-C", str(tmp_path / "missing"), "status"])

        assert result.exit_code == 1
