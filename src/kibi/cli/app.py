"""Typer CLI application."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from kibi import __version__
from kibi.cli.core.terminal import TerminalError
from kibi.config import MESSAGE_TIMEOUT, QUIT_TIMES, EditorConfig
from kibi.core.row import DEFAULT_TAB_STOP
from kibi.log import setup_logging


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"kibi {__version__}")
        raise typer.Exit()


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="kibi",
        help="A small terminal text editor with syntax highlighting and search.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.command()
    def edit(
        path: Annotated[Optional[Path], typer.Argument(help="File to open (new buffer if omitted)")] = None,
        tab_stop: Annotated[int, typer.Option("--tab-stop", min=1, envvar="KIBI_TAB_STOP", help="Columns per tab stop")] = DEFAULT_TAB_STOP,
        quit_times: Annotated[int, typer.Option("--quit-times", min=0, envvar="KIBI_QUIT_TIMES", help="Extra Ctrl-Q presses needed to drop unsaved changes")] = QUIT_TIMES,
        message_timeout: Annotated[float, typer.Option("--message-timeout", min=0.0, help="Seconds a status message stays visible")] = MESSAGE_TIMEOUT,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", envvar="KIBI_LOG_FILE", help="Write a debug log to this file")] = None,
        log_level: Annotated[str, typer.Option("--log-level", envvar="KIBI_LOG_LEVEL", help="Log level for --log-file")] = "WARNING",
        version: Annotated[Optional[bool], typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit")] = None,
    ) -> None:
        """Open FILE in the editor."""
        from kibi.cli.editor import run_editor

        config = EditorConfig(
            tab_stop=tab_stop,
            quit_times=quit_times,
            message_timeout=message_timeout,
            log_file=log_file,
            log_level=log_level,
        )
        logger = setup_logging(config)

        if path is not None and path.is_dir():
            console.print(f"[red]{path} is a directory[/]")
            raise typer.Exit(1)

        try:
            run_editor(path, config)
        except TerminalError as e:
            logger.error("%s", e)
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

    return app
