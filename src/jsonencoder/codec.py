"""Encode JSON into an embeddable string literal and back."""

from __future__ import annotations

import json
import logging

from jsonencoder.config import EncoderConfig
from jsonencoder.constants import Command
from jsonencoder.errors import (
    DecodedNotJSONError,
    DecodeFormatError,
    InvalidJSONInputError,
    UnknownCommandError,
)
from jsonencoder.io.json_io import dump_minified_json, parse_json_text

logger = logging.getLogger(__name__)


def quote_literal(text: str, *, ensure_ascii: bool = False) -> str:
    """Wrap ``text`` in double quotes with JSON escaping applied."""
    return json.dumps(text, ensure_ascii=ensure_ascii)


def minify_json(text: str, config: EncoderConfig | None = None) -> str:
    config = config or EncoderConfig()
    try:
        data = parse_json_text(text)
        minified = dump_minified_json(data, sort_keys=config.sort_keys, ensure_ascii=config.ensure_ascii)
    except ValueError as exc:
        raise InvalidJSONInputError(f"invalid JSON input: {exc}") from exc
    logger.debug(f"Minified {len(text)} characters to {len(minified)}")
    return minified


def encode_json(text: str, config: EncoderConfig | None = None) -> str:
    """Validate ``text`` as JSON and return it minified as a quoted literal.

    Object keys come out sorted unless ``config.sort_keys`` is off.

    Raises:
        InvalidJSONInputError: If ``text`` is not a single valid JSON value.
    """
    config = config or EncoderConfig()
    return quote_literal(minify_json(text, config), ensure_ascii=config.ensure_ascii)


def decode_json(text: str) -> str:
    """Unescape a quoted literal and return its content unchanged.

    The content must itself be valid JSON; it is not re-minified.

    Raises:
        DecodeFormatError: If ``text`` is not a JSON string literal.
        DecodedNotJSONError: If the literal's content is not valid JSON.
    """
    try:
        decoded = parse_json_text(text)
    except ValueError as exc:
        raise DecodeFormatError(f"failed to decode JSON: {exc}") from exc
    if not isinstance(decoded, str):
        raise DecodeFormatError(
            f"failed to decode JSON: expected a string literal, got {type(decoded).__name__}"
        )
    logger.debug(f"Unescaped literal to {len(decoded)} characters")

    try:
        parse_json_text(decoded)
    except ValueError as exc:
        raise DecodedNotJSONError(f"decoded result is not valid JSON: {exc}") from exc
    return decoded


def parse_command(name: str) -> Command:
    try:
        return Command(name.lower())
    except ValueError:
        raise UnknownCommandError(name) from None


def run_command(command: str | Command, text: str, config: EncoderConfig | None = None) -> str:
    resolved = parse_command(command)
    logger.debug(f"Running {resolved.value} on {len(text)} characters")
    if resolved is Command.ENCODE:
        return encode_json(text, config)
    return decode_json(text)
