"""DemoService — the type-checking and range-checking demonstration.

Shows an instruction banner, then runs six validated reads in a fixed
order: type-checked integer, float and element, followed by type- and
range-checked integer, float and element.  Each accepted value is echoed
back before the next prompt.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from repval.config.logging import read_context
from repval.domain.errors import InputExhausted
from repval.domain.kinds import ValueKind
from repval.output.console import say
from repval.output.formatters import format_value
from repval.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from repval.config.models import DemoConfig
    from repval.domain.element import ElementBinding
    from repval.services.reader import TypedReader

logger = logging.getLogger(__name__)

INSTRUCTIONS = """
Demonstration of repetition type-checking
data validation and repetition range checking
data validation.

For the prompts that follow, try typing inputs
outside of the given range, or even using a
wrong data type.

"""


class DemoService:
    """Runs the demonstration sequence through one :class:`TypedReader`."""

    def __init__(
        self,
        reader: TypedReader,
        element: ElementBinding,
        demo: DemoConfig,
    ) -> None:
        self.reader = reader
        self.element = element
        self.demo = demo

    def steps(self) -> list[tuple[str, str, Callable[[], Any]]]:
        """Return ``(step, prompt, read)`` triples in demonstration order."""
        reader, element, demo = self.reader, self.element, self.demo
        fmt = format_value
        return [
            (
                "int_type",
                "Enter a whole number: ",
                lambda: reader.read_typed(ValueKind.INTEGER),
            ),
            (
                "float_type",
                "Enter a fractional number: ",
                lambda: reader.read_typed(ValueKind.FLOAT),
            ),
            (
                "element_type",
                f"Enter an element ({element.name}): ",
                lambda: reader.read_element(element),
            ),
            (
                "int_range",
                f"Enter a whole number between {demo.int_low} and {demo.int_high}: ",
                lambda: reader.read_in_range(ValueKind.INTEGER, demo.int_low, demo.int_high),
            ),
            (
                "float_range",
                f"Enter a fractional number between {fmt(demo.float_low)} "
                f"and {fmt(demo.float_high)}: ",
                lambda: reader.read_in_range(ValueKind.FLOAT, demo.float_low, demo.float_high),
            ),
            (
                "element_range",
                f"Enter an element ({element.name}) between {fmt(element.low)} "
                f"and {fmt(element.high)}: ",
                lambda: reader.read_element_in_range(element),
            ),
        ]

    def instruct(self) -> None:
        say(self.reader.console, INSTRUCTIONS, style="rv.banner")

    def run(self) -> ServiceResult:
        """Show the instructions and run every step.

        Returns a result whose data maps each step name to its accepted
        value.  If input runs out first, the result is an
        ``INPUT_EXHAUSTED`` error listing the steps already completed.
        """
        console = self.reader.console
        self.instruct()
        values: dict[str, Any] = {}
        for step, prompt, read in self.steps():
            with read_context(step, kind=self._kind_for(step)):
                say(console, prompt, style="rv.prompt")
                try:
                    value = read()
                except InputExhausted as exc:
                    say(console, "\n")
                    return ServiceResult(
                        ok=False,
                        op="demo",
                        error=ServiceError(
                            code="INPUT_EXHAUSTED",
                            message=str(exc),
                            detail={"step": step, "completed": values},
                        ),
                    )
                logger.debug("Accepted %r after %d fault(s)", value, len(self.reader.last_faults))
            say(console, f"You entered {format_value(value)}\n\n", style="rv.ok")
            values[step] = value
        return ServiceResult(
            ok=True,
            op="demo",
            data={"element": self.element.kind.value, "values": values},
        )

    def _kind_for(self, step: str) -> str:
        if step.startswith("int"):
            return ValueKind.INTEGER.value
        if step.startswith("float"):
            return ValueKind.FLOAT.value
        return self.element.kind.value
