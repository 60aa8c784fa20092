"""
Command-line interface for bottles-core.

Usage:
    bottles-core list
    bottles-core create Steam ~/Bottles/steam --kind Gaming --runner GE-Proton9-1
    bottles-core runners
    bottles-core init Steam
    bottles-core run --runner ~/.local/share/bottles/runners/GE-Proton8-32 Steam steam.exe -silent
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from bottles_core import __version__
from bottles_core.bottle import Bottle, BottleType
from bottles_core.config import CoreConfig
from bottles_core.errors import BottlesError
from bottles_core.persistence import Persistence
from bottles_core.runner import Runner


console = Console()


@click.group()
@click.version_option(__version__)
@click.option("--data-dir", type=click.Path(file_okay=False, path_type=Path),
              help="Data directory (default: $BOTTLES_DATA_DIR or $XDG_DATA_HOME/bottles)")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log what is being run")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool):
    """bottles-core - manage Wine bottles and runners."""
    if verbose:
        from bottles_core.logger import setup_logger
        setup_logger("DEBUG")

    ctx.obj = CoreConfig(data_dir=data_dir) if data_dir else CoreConfig.from_env()


@cli.command(name="list")
@click.pass_obj
def list_bottles(config: CoreConfig):
    """List catalogued bottles."""
    bottles = _load(config)

    if not bottles:
        console.print("No bottles yet.")
        return

    table = Table()
    table.add_column("Name", style="bold")
    table.add_column("Kind")
    table.add_column("Runner")
    table.add_column("Path")

    for bottle in bottles:
        table.add_row(
            bottle.name,
            bottle.kind.value,
            bottle.config.runner or "-",
            str(bottle.path),
        )

    console.print(table)


@cli.command()
@click.argument("name")
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--kind", type=click.Choice([k.value for k in BottleType]),
              default=BottleType.CUSTOM.value, help="Bottle kind")
@click.option("--runner", help="Runner identifier to record in the bottle config")
@click.option("--env", "-e", "environment", multiple=True,
              help="Environment variable: 'NAME=value' (can specify multiple)")
@click.pass_obj
def create(config: CoreConfig, name: str, path: Path, kind: str, runner: str | None,
           environment: tuple[str, ...]):
    """Add a bottle to the catalog."""
    bottles = _load(config)

    if any(b.name == name for b in bottles):
        console.print(f"[red]Error:[/red] A bottle named '{name}' already exists")
        sys.exit(1)

    bottle = Bottle(name=name, path=path.expanduser().absolute(), kind=BottleType(kind))
    bottle.config.runner = runner

    for env_spec in environment:
        if "=" not in env_spec:
            console.print(f"[red]Error:[/red] Invalid environment format: {env_spec}")
            console.print("Expected format: 'NAME=value'")
            sys.exit(1)
        key, value = env_spec.split("=", 1)
        bottle.config.environment[key.strip()] = value

    bottles.append(bottle)
    _save(config, bottles)

    console.print(f"[green]✓[/green] Created bottle [bold]{name}[/bold] at {bottle.path}")


@cli.command()
@click.argument("name")
@click.pass_obj
def remove(config: CoreConfig, name: str):
    """Remove a bottle from the catalog (the prefix is left on disk)."""
    bottles = _load(config)
    remaining = [b for b in bottles if b.name != name]

    if len(remaining) == len(bottles):
        console.print(f"[red]Error:[/red] No bottle named '{name}'")
        sys.exit(1)

    _save(config, remaining)
    console.print(f"[green]✓[/green] Removed bottle [bold]{name}[/bold]")


@cli.command()
@click.argument("directory", required=False, type=click.Path(file_okay=False, path_type=Path))
@click.pass_obj
def runners(config: CoreConfig, directory: Path | None):
    """Show runners installed under DIRECTORY (default: the runners data directory)."""
    from bottles_core.discovery import discover_runners

    directory = directory or config.runners_dir

    try:
        with console.status("Probing runners..."):
            found = discover_runners(directory)
    except BottlesError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if not found:
        console.print(f"No runners found in {directory}")
        return

    table = Table()
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Version")
    table.add_column("Available")

    for runner in found:
        table.add_row(
            runner.info.name,
            type(runner).__name__,
            runner.info.version.strip(),
            "✓" if runner.is_available() else "✗",
        )

    console.print(table)


@cli.command()
@click.option("--runner", "runner_path", type=click.Path(exists=True, file_okay=False, path_type=Path),
              help="Runner directory (default: the bottle's runner under the runners data directory)")
@click.argument("name")
@click.pass_obj
def init(config: CoreConfig, name: str, runner_path: Path | None):
    """Initialize the prefix of bottle NAME."""
    bottle = _find(config, name)

    try:
        runner = _resolve_runner(config, bottle, runner_path)
        with console.status(f"Initializing {bottle.path} with {runner.info.name}..."):
            runner.initialize(bottle.path)
    except BottlesError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    console.print(f"[green]✓[/green] Prefix ready: {bottle.path}")


@cli.command(context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False})
@click.option("--runner", "runner_path", type=click.Path(exists=True, file_okay=False, path_type=Path),
              help="Runner directory (default: the bottle's runner under the runners data directory)")
@click.argument("name")
@click.argument("executable")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def run(config: CoreConfig, name: str, executable: str, args: tuple[str, ...], runner_path: Path | None):
    """Run EXECUTABLE inside bottle NAME and wait for it to exit."""
    bottle = _find(config, name)

    try:
        runner = _resolve_runner(config, bottle, runner_path)
        child = runner.launch(executable, list(args), bottle.path, bottle.launch_environment())
    except BottlesError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    status = child.wait()
    # Killed by a signal: report it the way a shell would
    sys.exit(128 - status if status < 0 else status)


def _resolve_runner(config: CoreConfig, bottle: Bottle, runner_path: Path | None) -> Runner:
    from bottles_core.discovery import detect_runner

    if runner_path is None:
        if not bottle.config.runner:
            console.print(f"[red]Error:[/red] Bottle '{bottle.name}' has no runner set, use --runner")
            sys.exit(1)
        runner_path = config.runners_dir / bottle.config.runner

    return detect_runner(runner_path)


def _load(config: CoreConfig) -> list[Bottle]:
    try:
        return Persistence(config.bottles_dir).load_bottles()
    except BottlesError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


def _save(config: CoreConfig, bottles: list[Bottle]) -> None:
    try:
        Persistence(config.bottles_dir).save_bottles(bottles)
    except BottlesError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)


def _find(config: CoreConfig, name: str) -> Bottle:
    for bottle in _load(config):
        if bottle.name == name:
            return bottle
    console.print(f"[red]Error:[/red] No bottle named '{name}'")
    sys.exit(1)


def main():
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
