"""Command: a single validated read."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from repval.commands._base import RvCommand
from repval.domain.errors import TypeMismatch
from repval.domain.kinds import ValueKind, coerce

if TYPE_CHECKING:
    from repval.commands._context import AppContext


def _bound(kind: ValueKind, raw: str | None, name: str) -> Any:
    """Coerce a ``--low``/``--high`` option to *kind*."""
    if raw is None:
        return None
    try:
        return coerce(kind, raw)
    except TypeMismatch as exc:
        msg = f"{raw!r} is not a valid {kind.label}."
        raise click.BadParameter(msg, param_hint=f"--{name}") from exc


@click.command(
    cls=RvCommand,
    examples="""\
  repval read
  repval read --kind float --low 5.5 --high 42.8
  repval read --kind character --low a --high z --prompt "Pick a letter: "
  repval read --element
  repval --json read --kind boolean""",
)
@click.option(
    "--kind",
    "kind_name",
    type=click.Choice([k.value for k in ValueKind]),
    default=ValueKind.INTEGER.value,
    show_default=True,
    help="Kind of value to read.",
)
@click.option("--element", "use_element", is_flag=True, help="Read the configured element.")
@click.option("--low", default=None, help="Inclusive lower bound (requires --high).")
@click.option("--high", default=None, help="Inclusive upper bound (requires --low).")
@click.option("--prompt", "prompt_text", default=None, help="Prompt shown before reading.")
@click.pass_obj
def read(
    app: AppContext,
    kind_name: str,
    use_element: bool,
    low: str | None,
    high: str | None,
    prompt_text: str | None,
) -> None:
    """Read one value, re-prompting until it is valid."""
    from repval.config.logging import read_context
    from repval.output.console import say
    from repval.output.formatters import format_value
    from repval.services.reader import validated_read

    if (low is None) != (high is None):
        raise click.UsageError("--low and --high must be given together.")

    expected: str | None = None
    if use_element:
        binding = app.settings.element.binding()
        kind = binding.kind
        expected = label = binding.expected
    else:
        kind = ValueKind(kind_name)
        label = kind.expected
    low_value, high_value = _bound(kind, low, "low"), _bound(kind, high, "high")

    if low_value is not None and low_value > high_value:
        raise click.UsageError(f"--low {low} is greater than --high {high}.")

    if prompt_text is None:
        prompt_text = f"Enter {label}: "
        if low_value is not None:
            prompt_text = (
                f"Enter {label} between {format_value(low_value)} and "
                f"{format_value(high_value)}: "
            )

    with read_context("read", kind=kind.value):
        say(app.console, prompt_text, style="rv.prompt")
        result = validated_read(app.reader, kind, low=low_value, high=high_value, expected=expected)
    say(app.console, "\n")
    app.emit(result)
