"""Decoders turning raw model output into structured values."""

from __future__ import annotations

import json
import re
from typing import Any

__all__ = ["DEFAULT_OUTPUT_KEY", "DecodingError", "JSONDecoder", "RegExDecoder"]

DEFAULT_OUTPUT_KEY = "output"


class DecodingError(ValueError):
    """Raised when output cannot be decoded."""


class JSONDecoder:
    """Decodes a JSON object."""

    def decode(self, text: str) -> dict[str, Any]:
        try:
            value = json.loads(text)
        except json.JSONDecodeError as err:
            raise DecodingError(f"decoding output error: {err}") from err
        if value is not None and not isinstance(value, dict):
            raise DecodingError(
                f"decoding output error: expected a JSON object, got {type(value).__name__}"
            )
        return {DEFAULT_OUTPUT_KEY: value}


class RegExDecoder:
    """Decodes the capture groups of the first match of a regular expression."""

    def __init__(self, regex: str) -> None:
        self.regex = regex

    def decode(self, text: str) -> dict[str, Any]:
        try:
            pattern = re.compile(self.regex)
        except re.error as err:
            raise DecodingError(f"decoding output error: {err}") from err
        match = pattern.search(text)
        groups = [] if match is None else [g or "" for g in match.groups()]
        return {DEFAULT_OUTPUT_KEY: groups}