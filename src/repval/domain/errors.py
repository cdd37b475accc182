"""Fault taxonomy for validated reads.

``TypeMismatch`` and ``RangeViolation`` are recoverable: the reader
handles them inside its retry loop and never lets them escape.
``InputExhausted`` and ``StreamFaultedError`` are the only errors a
caller can see.
"""

from __future__ import annotations

from typing import Any


class ValidationFault(Exception):
    """Base class for the two recoverable fault kinds."""


class TypeMismatch(ValidationFault):
    """A token did not parse as the requested kind."""

    def __init__(self, kind: str, token: str) -> None:
        super().__init__(f"{token!r} is not a valid {kind}")
        self.kind = kind
        self.token = token


class RangeViolation(ValidationFault):
    """A well-typed value fell outside the closed interval [low, high]."""

    def __init__(self, value: Any, low: Any, high: Any) -> None:
        super().__init__(f"{value!r} is outside [{low!r}, {high!r}]")
        self.value = value
        self.low = low
        self.high = high


class InputExhausted(EOFError):
    """The input stream ended before a valid value was read."""


class StreamFaultedError(RuntimeError):
    """Extraction was attempted while the stream's fault flag was set."""
