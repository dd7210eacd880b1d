"""CLI entry point for podsite."""

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from podsite.config.logging import setup_logging
from podsite.config.manager import ConfigManager
from podsite.config.schema import SiteConfig
from podsite.episodes import Episode, load_episodes
from podsite.output import OutputManager
from podsite.utils.errors import ConfigError, PodsiteError

app = typer.Typer(
    name="podsite",
    help="Build a static website from podcast episode markdown files",
    no_args_is_help=True,
)
console = Console()

logger = logging.getLogger(__name__)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """podsite - build a podcast website from markdown episodes."""
    ctx.obj = {"verbose": verbose, "log_file": log_file}
    setup_logging(verbose=verbose, log_file=log_file)


def _load_config(ctx: typer.Context, project: Path) -> SiteConfig:
    config = ConfigManager(project).load_config()

    # The config file may ask for a different level than the default
    options = ctx.obj or {}
    setup_logging(
        verbose=options.get("verbose", False),
        log_file=options.get("log_file"),
        level=config.log_level,
    )
    return config.resolve(project)


def _print_episodes(episodes: list[Episode]) -> None:
    table = Table(title="[bold]Episodes[/bold]")
    table.add_column("Series", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Date", style="green")

    for episode in sorted(episodes, key=lambda e: e.date):
        table.add_row(
            episode.series or "—",
            escape(episode.title),
            episode.date.strftime("%Y-%m-%d"),
        )

    console.print(table)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from podsite import __version__

    console.print(f"[bold cyan]podsite[/bold cyan] v{__version__}")


@app.command("init")
def init_project(
    project: Path = typer.Option(
        Path("."), "--project", "-p", help="Site project directory", file_okay=False
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing podsite.yaml"
    ),
) -> None:
    """Write a podsite.yaml with default settings.

    Examples:
        podsite init

        podsite init --project ./my-podcast
    """
    manager = ConfigManager(project)

    if manager.config_file.exists() and not force:
        console.print(
            f"[yellow]Config already exists:[/yellow] {manager.config_file}"
        )
        console.print("[dim]  Use --force to overwrite it[/dim]")
        sys.exit(1)

    manager.save_config(SiteConfig())
    console.print(f"[green]✓[/green] Wrote {manager.config_file}")


@app.command("config")
def show_config(
    ctx: typer.Context,
    project: Path = typer.Option(
        Path("."), "--project", "-p", help="Site project directory", file_okay=False
    ),
) -> None:
    """Show the effective configuration."""
    try:
        manager = ConfigManager(project)
        config = _load_config(ctx, project)
    except ConfigError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        sys.exit(1)

    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Config file", str(manager.config_file))
    table.add_row("Episodes directory", str(config.episodes_dir))
    table.add_row("Output directory", str(config.output_dir))
    table.add_row("Static files", ", ".join(config.static_files) or "—")
    table.add_row("Image directory", str(config.image_dir or "—"))
    table.add_row("Log level", config.log_level)

    console.print(table)


@app.command("check")
def check_episodes(
    ctx: typer.Context,
    project: Path = typer.Option(
        Path("."), "--project", "-p", help="Site project directory", file_okay=False
    ),
) -> None:
    """Load and validate all episodes without writing any output.

    Examples:
        podsite check

        podsite -v check --project ./my-podcast
    """
    try:
        config = _load_config(ctx, project)
        episodes = load_episodes(config.episodes_dir)
    except PodsiteError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        sys.exit(1)

    console.print(f"[green]✓[/green] {len(episodes)} episodes are valid")


@app.command("build")
def build_site(
    ctx: typer.Context,
    project: Path = typer.Option(
        Path("."), "--project", "-p", help="Site project directory", file_okay=False
    ),
    show: bool = typer.Option(
        False, "--list", "-l", help="List the loaded episodes"
    ),
) -> None:
    """Stage the output directory and load all episodes.

    Examples:
        podsite build

        podsite build --project ./my-podcast --list
    """
    try:
        config = _load_config(ctx, project)

        output = OutputManager(config.output_dir)
        output.clear()
        output.stage_static(project, config.static_files, config.image_dir)

        episodes = load_episodes(config.episodes_dir)
    except PodsiteError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        sys.exit(1)

    logger.debug(f"Build finished in {config.output_dir}")
    console.print(f"[green]✓[/green] {len(episodes)} episodes loaded")

    if show:
        _print_episodes(episodes)
