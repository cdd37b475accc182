"""Value kinds and their token parsers.

The closed set of primitive kinds a validated read can target.  Every
parser takes one whitespace-free token and either returns a value of
the kind or raises :class:`~repval.domain.errors.TypeMismatch`.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from enum import StrEnum
from typing import Any

from repval.domain.errors import TypeMismatch


class ValueKind(StrEnum):
    """Primitive kinds a read request can target."""

    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    CHARACTER = "character"
    BOOLEAN = "boolean"
    STRING = "string"

    @property
    def label(self) -> str:
        """Human name used in prompts, e.g. ``"whole number"``."""
        return _LABELS[self]

    @property
    def expected(self) -> str:
        """Label with its indefinite article, e.g. ``"a whole number"``."""
        return f"{_article(self.label)} {self.label}"

    @property
    def example_bounds(self) -> tuple[Any, Any]:
        """Default ``(low, high)`` pair for an element of this kind."""
        return _EXAMPLE_BOUNDS[self]

    def parse(self, token: str) -> Any:
        """Parse *token* as this kind, raising ``TypeMismatch`` on failure."""
        return _PARSERS[self](self, token)


INT32_RANGE = (-(2**31), 2**31 - 1)
INT64_RANGE = (-(2**63), 2**63 - 1)
FLT_MAX = 3.4028234663852886e38

_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

_TRUE_TOKENS = frozenset({"true", "1"})
_FALSE_TOKENS = frozenset({"false", "0"})


def _article(word: str) -> str:
    return "an" if word[:1].lower() in "aeiou" else "a"


def _parse_whole(kind: ValueKind, token: str, bounds: tuple[int, int]) -> int:
    if not _INTEGER_RE.fullmatch(token):
        raise TypeMismatch(kind, token)
    try:
        value = int(token)
    except ValueError:
        # past the interpreter's digit-count limit
        raise TypeMismatch(kind, token) from None
    if not bounds[0] <= value <= bounds[1]:
        raise TypeMismatch(kind, token)
    return value


def _parse_fractional(kind: ValueKind, token: str, limit: float) -> float:
    if not _DECIMAL_RE.fullmatch(token):
        raise TypeMismatch(kind, token)
    value = float(token)
    if not math.isfinite(value) or abs(value) > limit:
        raise TypeMismatch(kind, token)
    return value


def _parse_integer(kind: ValueKind, token: str) -> int:
    return _parse_whole(kind, token, INT32_RANGE)


def _parse_long(kind: ValueKind, token: str) -> int:
    return _parse_whole(kind, token, INT64_RANGE)


def _parse_float(kind: ValueKind, token: str) -> float:
    return _parse_fractional(kind, token, FLT_MAX)


def _parse_double(kind: ValueKind, token: str) -> float:
    return _parse_fractional(kind, token, math.inf)


def _parse_character(kind: ValueKind, token: str) -> str:
    if len(token) != 1:
        raise TypeMismatch(kind, token)
    return token


def _parse_boolean(kind: ValueKind, token: str) -> bool:
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    raise TypeMismatch(kind, token)


def _parse_string(kind: ValueKind, token: str) -> str:
    if not token:
        raise TypeMismatch(kind, token)
    return token


_LABELS: dict[ValueKind, str] = {
    ValueKind.INTEGER: "whole number",
    ValueKind.LONG: "big whole number",
    ValueKind.FLOAT: "fractional number",
    ValueKind.DOUBLE: "big fractional number",
    ValueKind.CHARACTER: "character",
    ValueKind.BOOLEAN: "boolean",
    ValueKind.STRING: "string",
}

_EXAMPLE_BOUNDS: dict[ValueKind, tuple[Any, Any]] = {
    ValueKind.INTEGER: (17, 52),
    ValueKind.LONG: (17, 52),
    ValueKind.FLOAT: (28.6, 73.2),
    ValueKind.DOUBLE: (28.6, 73.2),
    ValueKind.CHARACTER: ("a", "z"),
    ValueKind.BOOLEAN: (False, True),
    ValueKind.STRING: ("Alpha", "Omega"),
}

_PARSERS: dict[ValueKind, Callable[[ValueKind, str], Any]] = {
    ValueKind.INTEGER: _parse_integer,
    ValueKind.LONG: _parse_long,
    ValueKind.FLOAT: _parse_float,
    ValueKind.DOUBLE: _parse_double,
    ValueKind.CHARACTER: _parse_character,
    ValueKind.BOOLEAN: _parse_boolean,
    ValueKind.STRING: _parse_string,
}


def coerce(kind: ValueKind, raw: Any) -> Any:
    """Coerce a configured bound (TOML scalar or CLI text) to *kind*.

    Text goes through the kind's token parser.  Native values are
    accepted when they already have the kind's Python type; ints are
    widened for the fractional kinds.

    Raises:
        TypeMismatch: If *raw* cannot represent a value of *kind*.
    """
    if isinstance(raw, str) and kind not in (ValueKind.CHARACTER, ValueKind.STRING):
        return kind.parse(raw.strip())
    if isinstance(raw, bool):
        if kind is ValueKind.BOOLEAN:
            return raw
        raise TypeMismatch(kind, str(raw))
    if isinstance(raw, int) and kind in (ValueKind.FLOAT, ValueKind.DOUBLE):
        raw = float(raw)
    return kind.parse(_token_for(raw))


def _token_for(raw: Any) -> str:
    if isinstance(raw, float):
        return repr(raw)
    return str(raw)
