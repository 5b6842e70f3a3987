"""gitclient command-line interface."""

from pathlib import Path

import click
from rich.console import Console

from gitclient import __version__
from gitclient.client import Client
from gitclient.commands import clone, exec_cmd, find, init, list_cmd
from gitclient.config import GitClientConfig
from gitclient.exceptions import ConfigurationError, IllegalVariableError
from gitclient.logging import setup_logging

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="gitclient")
@click.option("--git", "git_path", help="Path to the git binary")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file (default: .gitclient/config.yaml)",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default=None,
    help="Override the configured log level",
)
@click.option(
    "--env",
    "env_vars",
    multiple=True,
    metavar="KEY=VALUE",
    help="Git environment variable, e.g. GIT_AUTHOR_NAME=Ada (repeatable)",
)
@click.pass_context
def cli(
    ctx: click.Context,
    git_path: str | None,
    config_path: Path | None,
    log_level: str | None,
    env_vars: tuple[str, ...],
) -> None:
    """gitclient - run git and discover repositories."""
    ctx.ensure_object(dict)

    try:
        config = GitClientConfig.load(config_path)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise SystemExit(1) from e

    if git_path:
        config.binary = git_path

    setup_logging(
        level=log_level or config.logging.level,
        log_dir=config.logging.log_dir() if config.logging.json_output else None,
        json_output=config.logging.json_output,
        console_output=config.logging.console_output,
        max_bytes=config.logging.max_log_size_mb * 1024 * 1024,
        backup_count=config.logging.backup_count,
    )

    client = Client.from_config(config)
    for item in env_vars:
        key, sep, value = item.partition("=")
        if not sep:
            raise click.BadParameter(f"expected KEY=VALUE, got '{item}'", param_hint="--env")
        try:
            client.git_environment.set(key, value)
        except IllegalVariableError as e:
            raise click.BadParameter(str(e), param_hint="--env") from e

    ctx.obj["config"] = config
    ctx.obj["client"] = client


cli.add_command(list_cmd)
cli.add_command(find)
cli.add_command(init)
cli.add_command(clone)
cli.add_command(exec_cmd)


if __name__ == "__main__":
    cli()
