"""Strict JSON read/write helpers."""

from __future__ import annotations

import json
import math
import re
from typing import Any

# A \uD800-\uDFFF escape or a raw surrogate code point.
_SURROGATE_HINT = re.compile(r"\\u[dD][89a-fA-F]|[\ud800-\udfff]")
_LONE_SURROGATE = re.compile(r"[\ud800-\udfff]")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def _parse_finite_float(literal: str) -> float:
    value = float(literal)
    if math.isinf(value):
        raise ValueError(f"number out of range: {literal}")
    return value


def _replace_surrogates(value: Any) -> Any:
    if isinstance(value, str):
        return _LONE_SURROGATE.sub("\ufffd", value)
    if isinstance(value, list):
        return [_replace_surrogates(item) for item in value]
    if isinstance(value, dict):
        return {_replace_surrogates(key): _replace_surrogates(item) for key, item in value.items()}
    return value


def parse_json_text(text: str) -> Any:
    """Parse RFC 8259 JSON.

    ``json.loads`` alone accepts ``NaN``/``Infinity`` and turns ``1e400`` into
    ``inf``; neither can be serialized back as valid JSON, so both are refused.
    Unpaired surrogates (``"\\ud800"``) cannot be written as UTF-8 and are
    replaced with U+FFFD. Escaped pairs are joined by the parser and kept.

    Raises:
        ValueError: ``json.JSONDecodeError`` for syntax errors, empty input and
            trailing data; plain ``ValueError`` for the refused values above
            and for nesting deeper than the interpreter can recurse.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant, parse_float=_parse_finite_float)
        if _SURROGATE_HINT.search(text):
            data = _replace_surrogates(data)
    except RecursionError as exc:
        raise ValueError("maximum nesting depth exceeded") from exc
    return data


def dump_minified_json(data: Any, *, sort_keys: bool = True, ensure_ascii: bool = False) -> str:
    try:
        return json.dumps(data, separators=(",", ":"), sort_keys=sort_keys, ensure_ascii=ensure_ascii)
    except RecursionError as exc:
        raise ValueError("maximum nesting depth exceeded") from exc
