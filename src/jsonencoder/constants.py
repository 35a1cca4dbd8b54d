"""Project constants."""

from __future__ import annotations

from enum import StrEnum


PROG_NAME = "jsonencoder"


class Command(StrEnum):
    ENCODE = "encode"
    DECODE = "decode"


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


_USAGE = """{prog} - A CLI tool to encode and decode JSON strings

Usage:
  {prog} [options] <command> <input>

Commands:
  encode    Encode JSON (escape for embedding)
  decode    Decode JSON (unescape)

Options:
  -f, --file       Read input from file instead of command line argument
  -c, --config     Path to YAML config
  -v, --verbose    Log each step to standard error
  -h, --help       Show this help message

Examples:
  {prog} encode '{{"key": "value"}}'
  {prog} decode '"{{\\"key\\": \\"value\\"}}"'
  {prog} encode -f input.json
  {prog} decode -f encoded.json
"""


def usage_text(prog_name: str = PROG_NAME) -> str:
    return _USAGE.format(prog=prog_name)
