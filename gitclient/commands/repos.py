"""gitclient repository commands - list, find, init and clone."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from gitclient.commands._utils import get_client
from gitclient.exceptions import GitClientError
from gitclient.logging import get_logger

console = Console()
logger = get_logger("commands.repos")


@click.command("list")
@click.argument("path", type=click.Path(file_okay=False, path_type=Path), default=".")
@click.option("--hidden", multiple=True, help="Repository path to leave out (repeatable)")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.pass_context
def list_cmd(ctx: click.Context, path: Path, hidden: tuple[str, ...], json_output: bool) -> None:
    """List the repositories directly inside PATH."""
    client = get_client(ctx)
    try:
        repositories = client.get_repositories(path, hidden=[*client.hidden, *hidden])
    except GitClientError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    if json_output:
        click.echo(json.dumps([repo.to_dict() for repo in repositories], indent=2))
        return

    table = Table(title=f"Repositories in {path}")
    table.add_column("Name", style="cyan")
    table.add_column("Path")
    table.add_column("Description", style="dim")
    for repo in repositories:
        table.add_row(repo.name, repo.path, repo.description.strip())
    console.print(table)


@click.command()
@click.argument("path", type=click.Path(path_type=Path), default=".")
@click.pass_context
def find(ctx: click.Context, path: Path) -> None:
    """Print the root of the repository enclosing PATH."""
    client = get_client(ctx)
    try:
        repository = client.get_repository(path)
    except GitClientError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    click.echo(str(repository.path))


@click.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--bare", is_flag=True, help="Create a bare repository")
@click.option("--description", help="Text for the repository description file")
@click.pass_context
def init(ctx: click.Context, path: Path, bare: bool, description: str | None) -> None:
    """Create a new repository at PATH."""
    client = get_client(ctx)
    try:
        repository = client.create_repository(path, bare=bare)
        if description:
            repository.set_description(description + "\n")
    except GitClientError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    console.print(f"[green]✓[/green] Initialized {'bare ' if bare else ''}repository at {repository.path}")


@click.command()
@click.argument("url")
@click.argument("directory", type=click.Path(path_type=Path))
@click.option("--branch", "-b", help="Branch to check out")
@click.option("--depth", type=int, help="Create a shallow clone with this many commits")
@click.option("--bare", is_flag=True, help="Make a bare clone")
@click.option("--ssh-password", envvar="GITCLIENT_SSH_PASSWORD", help="Password for the SSH private key")
@click.pass_context
def clone(
    ctx: click.Context,
    url: str,
    directory: Path,
    branch: str | None,
    depth: int | None,
    bare: bool,
    ssh_password: str | None,
) -> None:
    """Clone URL into DIRECTORY."""
    client = get_client(ctx)
    options: dict[str, str | None] = {}
    if branch:
        options["--branch"] = branch
    if depth:
        options["--depth"] = str(depth)
    if bare:
        options["--bare"] = None

    client.set_ssh_password(ssh_password)
    try:
        repository = client.clone_repository(url, directory, options)
    except GitClientError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    console.print(f"[green]✓[/green] Cloned into {repository.path}")
