"""explain-error CLI: the main entry point."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from jsexplain import __version__
from jsexplain.config.constants import (
    DEFAULT_LOG_LEVEL,
    FORMAT_JSON,
    FORMAT_TEXT,
    HELP_FLAGS,
    PROGRAM_NAME,
    TAGLINE,
)
from jsexplain.explainer import explain

app = typer.Typer(
    name=PROGRAM_NAME,
    help=TAGLINE,
    add_completion=False,
    rich_markup_mode="rich",
)

logger = logging.getLogger("jsexplain.cli")


def _make_console(color: bool) -> Console:
    return Console(color_system="auto" if color else None, highlight=False)


def _configure_logging(level: str) -> None:
    """Send jsexplain log records to stderr so they never mix with the report."""
    package_logger = logging.getLogger("jsexplain")
    package_logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
        )


@app.command(
    add_help_option=False,
    # Options are only read before the first message word; everything after it
    # belongs to the message, so "TypeError: -v" is explained, not a version query.
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
def main(
    message: Optional[list[str]] = typer.Argument(
        None, help="The error message to explain (quotes optional)", show_default=False,
    ),
    show_help: bool = typer.Option(False, "--help", "-h", help="Show this help message"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    verbose: bool = typer.Option(False, "--verbose", help="Log which rule matched"),
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
):
    """Explain a JavaScript error message in plain language."""
    from jsexplain.cli.report import print_help, print_json, print_report
    from jsexplain.config.settings import Settings

    settings = Settings(
        color=not no_color,
        output_format=FORMAT_JSON if as_json else FORMAT_TEXT,
        log_level="DEBUG" if verbose else DEFAULT_LOG_LEVEL,
    )
    console = _make_console(settings.color)
    _configure_logging(settings.log_level)

    if show_help or any(token in HELP_FLAGS for token in message or ()):
        print_help(console)
        raise typer.Exit()

    if version:
        console.print(f"{PROGRAM_NAME} [dim]v{__version__}[/dim]")
        raise typer.Exit()

    if not message:
        print_help(console)
        raise typer.Exit(1)

    text = " ".join(message)
    logger.debug("Explaining %r", text)
    result = explain(text)

    if result is None:
        console.print("[bold red]Please provide an error message to explain.[/bold red]")
        raise typer.Exit(1)

    if settings.output_format == FORMAT_JSON:
        print_json(console, text, result)
    else:
        print_report(console, text, result)


def run() -> None:
    """Console-script entry point."""
    app()
