"""TypedReader — repetition type-checking and range-checking reads.

Two layered loops over an :class:`~repval.infrastructure.stream.InputStream`:

* :meth:`TypedReader.read_typed` re-prompts until a token parses as the
  requested kind.  Every failed attempt clears the stream's fault flag
  and discards the rest of the line before retrying.
* :meth:`TypedReader.read_in_range` wraps ``read_typed`` and re-prompts
  until the value also lies in the closed interval [low, high].

Both loops handle their faults internally.  A read ends only with an
accepted value, or with ``InputExhausted`` when the source runs dry.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from repval.domain.errors import InputExhausted, RangeViolation, TypeMismatch, ValidationFault
from repval.domain.states import ReadState
from repval.infrastructure.stream import DEFAULT_DISCARD_LIMIT
from repval.output.console import say
from repval.output.formatters import format_value
from repval.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from rich.console import Console

    from repval.domain.element import ElementBinding
    from repval.domain.kinds import ValueKind
    from repval.infrastructure.stream import InputStream

logger = logging.getLogger(__name__)


class TypedReader:
    """Validated reads against one input stream and one output console.

    Attributes:
        state: Current :class:`ReadState` of the read in progress (or of
            the last completed read).
        last_faults: Faults handled during the most recent read call,
            in the order they occurred.
    """

    def __init__(
        self,
        stream: InputStream,
        console: Console,
        *,
        discard_limit: int = DEFAULT_DISCARD_LIMIT,
    ) -> None:
        self.stream = stream
        self.console = console
        self.discard_limit = discard_limit
        self.state = ReadState.AWAITING_INPUT
        self.last_faults: list[ValidationFault] = []

    # --- Public API ---

    def read_typed(self, kind: ValueKind, *, expected: str | None = None) -> Any:
        """Read until a token parses as *kind*; return the parsed value.

        Args:
            kind: Target value kind.
            expected: Text naming the kind in rejection messages.
                Defaults to ``kind.expected`` (e.g. ``"a whole number"``).
        """
        self._begin()
        value = self._read_token(kind, expected or kind.expected)
        self.state = ReadState.ACCEPTED
        return value

    def read_in_range(
        self,
        kind: ValueKind,
        low: Any,
        high: Any,
        *,
        expected: str | None = None,
    ) -> Any:
        """Read until a token parses as *kind* and lies in [low, high].

        Range checking is applied only to values that already passed
        type checking, and each range failure re-runs the full typed
        read.

        Raises:
            ValueError: If ``low > high``.
        """
        if low > high:
            msg = f"invalid bounds: low {low!r} is greater than high {high!r}"
            raise ValueError(msg)
        expected = expected or kind.expected
        self._begin()
        value = self._read_token(kind, expected)
        self.state = ReadState.TYPE_OK_RANGE_PENDING
        while value < low or value > high:
            fault = RangeViolation(value, low, high)
            self.last_faults.append(fault)
            logger.debug(
                "Range violation for %s: %r not in [%r, %r]", kind, value, low, high
            )
            say(
                self.console,
                f"Invalid range, should be between {format_value(low)} and "
                f"{format_value(high)}, try again: ",
                style="rv.error",
            )
            self.state = ReadState.AWAITING_INPUT
            value = self._read_token(kind, expected)
            self.state = ReadState.TYPE_OK_RANGE_PENDING
        self.state = ReadState.ACCEPTED
        return value

    def read_element(self, binding: ElementBinding) -> Any:
        """Type-checked read of the bound element kind."""
        return self.read_typed(binding.kind, expected=binding.expected)

    def read_element_in_range(self, binding: ElementBinding) -> Any:
        """Type- and range-checked read of the bound element kind."""
        return self.read_in_range(
            binding.kind, binding.low, binding.high, expected=binding.expected
        )

    # --- Internals ---

    def _begin(self) -> None:
        self.state = ReadState.AWAITING_INPUT
        self.last_faults = []

    def _read_token(self, kind: ValueKind, expected: str) -> Any:
        """The type-checking loop shared by both public reads."""
        while True:
            try:
                return self.stream.extract(kind.parse)
            except TypeMismatch as fault:
                self.state = ReadState.FAULTED
                self.last_faults.append(fault)
                self.stream.clear()
                self.stream.ignore(self.discard_limit, "\n")
                logger.debug("Type mismatch for %s: rejected %r", kind, fault.token)
                say(
                    self.console,
                    f"Invalid data type, should be {expected}, try again: ",
                    style="rv.error",
                )
                self.state = ReadState.AWAITING_INPUT


def validated_read(
    reader: TypedReader,
    kind: ValueKind,
    *,
    low: Any = None,
    high: Any = None,
    expected: str | None = None,
) -> ServiceResult:
    """Run one validated read and wrap the outcome in a ServiceResult.

    Range checking applies when both *low* and *high* are given.  The
    result data carries the accepted value and how many type and range
    faults were handled on the way.
    """
    ranged = low is not None and high is not None
    try:
        if ranged:
            value = reader.read_in_range(kind, low, high, expected=expected)
        else:
            value = reader.read_typed(kind, expected=expected)
    except InputExhausted as exc:
        return ServiceResult(
            ok=False,
            op="read",
            error=ServiceError(
                code="INPUT_EXHAUSTED",
                message=str(exc),
                detail={"kind": kind.value, "faults": len(reader.last_faults)},
            ),
        )

    data: dict[str, Any] = {"kind": kind.value, "value": value}
    if ranged:
        data["low"] = low
        data["high"] = high
    data["type_faults"] = sum(isinstance(f, TypeMismatch) for f in reader.last_faults)
    data["range_faults"] = sum(isinstance(f, RangeViolation) for f in reader.last_faults)
    return ServiceResult(ok=True, op="read", data=data)
