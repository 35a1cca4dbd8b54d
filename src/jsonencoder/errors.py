"""Error kinds reported by the encoder CLI."""

from __future__ import annotations


class JsonEncoderError(ValueError):
    """Base class for every failure the tool reports to the user."""


class UsageError(JsonEncoderError):
    pass


class InputReadError(JsonEncoderError):
    pass


class InvalidJSONInputError(JsonEncoderError):
    pass


class DecodeFormatError(JsonEncoderError):
    pass


class DecodedNotJSONError(JsonEncoderError):
    pass


class UnknownCommandError(JsonEncoderError):
    def __init__(self, command: str) -> None:
        super().__init__(f"Unknown command: {command}")
        self.command = command


class ConfigError(JsonEncoderError):
    pass
