"""Resolve the text a command operates on."""

from __future__ import annotations

import logging
from pathlib import Path

from jsonencoder.errors import InputReadError, UsageError

logger = logging.getLogger(__name__)


def read_input_file(path: Path) -> str:
    """Read the whole file and trim surrounding whitespace.

    Raises:
        InputReadError: If the file cannot be opened, read or decoded as UTF-8.
    """
    try:
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(str(exc)) from exc
    logger.debug(f"Read {len(content)} characters from {path}")
    return content.strip()


def resolve_input(argument: str | None, *, from_file: bool) -> str:
    if from_file:
        if not argument:
            raise UsageError("file name required when using -f flag")
        return read_input_file(Path(argument))
    if not argument:
        raise UsageError("JSON input required")
    return argument
