"""Command line interface."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn

import typer

from jsonencoder.codec import parse_command, run_command
from jsonencoder.config import EncoderConfig, load_config
from jsonencoder.constants import PROG_NAME, Command, usage_text
from jsonencoder.errors import (
    ConfigError,
    InputReadError,
    JsonEncoderError,
    UnknownCommandError,
    UsageError,
)
from jsonencoder.io.input_source import resolve_input

logger = logging.getLogger(__name__)

app = typer.Typer(help="Encode and decode JSON strings", add_completion=False)


def _print_usage() -> None:
    typer.echo(usage_text(PROG_NAME), err=True, nl=False)


def _fail(message: str, show_usage: bool = False) -> NoReturn:
    if message:
        typer.echo(message, err=True)
    if show_usage:
        _print_usage()
    raise typer.Exit(code=1)


def _show_help(value: bool) -> None:
    if value:
        _print_usage()
        raise typer.Exit()


def _configure_logging(config: EncoderConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.log_level)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("jsonencoder").setLevel(level)


@app.command(
    add_help_option=False,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def run(
    ctx: typer.Context,
    command: str | None = typer.Argument(None, metavar="<command>", help="encode or decode"),
    input_value: str | None = typer.Argument(
        None,
        metavar="<input>",
        help="Inline JSON text, or a file path with --file",
    ),
    from_file: bool = typer.Option(
        False,
        "--file",
        "-f",
        help="Read input from file instead of command line argument",
    ),
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to YAML config"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each step to standard error"),
    show_help: bool = typer.Option(
        False,
        "--help",
        "-h",
        is_eager=True,
        callback=_show_help,
        help="Show this help message",
    ),
) -> None:
    if command is None or ctx.args or (input_value is None and not from_file):
        _fail("", show_usage=True)

    try:
        settings = load_config(config.resolve() if config else None)
    except ConfigError as exc:
        _fail(f"Error loading config: {exc}")
    _configure_logging(settings, verbose)

    try:
        resolved = parse_command(command)
    except UnknownCommandError as exc:
        _fail(str(exc), show_usage=True)

    try:
        text = resolve_input(input_value, from_file=from_file)
    except UsageError as exc:
        _fail(f"Error: {exc}")
    except InputReadError as exc:
        _fail(f"Error reading file: {exc}")

    try:
        result = run_command(resolved, text, settings)
    except JsonEncoderError as exc:
        action = "encoding" if resolved is Command.ENCODE else "decoding"
        _fail(f"Error {action} JSON: {exc}")
    logger.debug(f"{resolved.value} produced {len(result)} characters")
    typer.echo(result)


def main() -> None:
    app(prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
