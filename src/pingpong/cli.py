"""CLI interface for pingpong."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel

from pingpong import __version__
from pingpong.config import CONFIG_FILE, PingpongConfig
from pingpong.display import ConsoleDisplay
from pingpong.logging_setup import setup_logging_from_config
from pingpong.outcomes import OutcomeType
from pingpong.session import Session
from pingpong.storage import Storage

console = Console()

data_file_option = click.option(
    "--data-file",
    "-d",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Task file to use instead of the configured one",
)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="pingpong")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Config file (default: {CONFIG_FILE})",
)
@click.pass_context
def main(ctx: click.Context, config_path: Path | None) -> None:
    """pingpong - a task tracker you talk to.

    \b
    Usage:
      pingpong                       # Start chatting
      pingpong do todo Buy milk      # Run one command and exit
      pingpong do list
      pingpong init                  # Write a default config
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path or CONFIG_FILE
    ctx.obj["config"] = PingpongConfig.load(ctx.obj["config_path"])

    # If no subcommand, start chatting
    if ctx.invoked_subcommand is None:
        ctx.invoke(chat)


def _build_session(ctx: click.Context, data_file: Path | None) -> Session:
    config: PingpongConfig = ctx.obj["config"]
    setup_logging_from_config(config.logging)

    storage = Storage(data_file or Path(config.storage.data_file))
    display = ConsoleDisplay(
        console=console,
        bot_name=config.display.bot_name,
        show_dividers=config.display.show_dividers,
    )
    return Session(config=config, storage=storage, display=display)


@main.command()
@data_file_option
@click.pass_context
def chat(ctx: click.Context, data_file: Path | None) -> None:
    """Chat with pingpong until you type 'bye'."""
    session = _build_session(ctx, data_file)
    session.run()


@main.command("do", context_settings={"ignore_unknown_options": True})
@click.argument("words", nargs=-1, required=True, type=click.UNPROCESSED)
@data_file_option
@click.pass_context
def do_command(ctx: click.Context, words: tuple[str, ...], data_file: Path | None) -> None:
    """Run a single command and exit.

    \b
    Examples:
      pingpong do deadline Return book /by 2025-09-15
      pingpong do mark 1 3
      pingpong do find 2025-09-15
    """
    session = _build_session(ctx, data_file)
    session.start()

    outcome = session.execute(" ".join(words))
    session.display.show(outcome)

    if outcome.outcome_type is OutcomeType.ERROR:
        ctx.exit(1)


@main.command()
@click.option("--force", "-f", is_flag=True, help="Overwrite existing config")
@click.pass_context
def init(ctx: click.Context, force: bool) -> None:
    """Write a default configuration file."""
    config_path: Path = ctx.obj["config_path"]

    if config_path.exists() and not force:
        console.print(
            f"[yellow]pingpong already initialized at {config_path}.[/yellow] "
            "Use --force to overwrite."
        )
        return

    config = PingpongConfig()
    config.save(config_path)

    console.print(
        Panel.fit(
            "[green]Configuration saved![/green]\n\n"
            f"Config: [cyan]{config_path}[/cyan]\n"
            f"Tasks:  [cyan]{config.storage.data_file}[/cyan]\n\n"
            "Next steps:\n"
            "  1. Start chatting: [cyan]pingpong[/cyan]\n"
            "  2. See commands: [cyan]pingpong do help[/cyan]",
            title="pingpong",
        )
    )


if __name__ == "__main__":
    main()
