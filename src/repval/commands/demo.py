"""Command: the full type-checking and range-checking demonstration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from repval.commands._base import RvCommand

if TYPE_CHECKING:
    from repval.commands._context import AppContext


@click.command(
    cls=RvCommand,
    examples="""\
  repval demo
  repval --element-kind boolean demo
  repval -c ./repval.toml demo
  printf 'pizza\\n7\\n3.5\\n' | repval demo""",
)
@click.pass_obj
def demo(app: AppContext) -> None:
    """Run the six-step validation demonstration.

    Reads a whole number, a fractional number and an element with type
    checking, then the same three again with range checking.
    """
    from repval.services.demo import DemoService

    svc = DemoService(app.reader, app.settings.element.binding(), app.settings.demo)
    result = svc.run()
    if not result.ok or app.settings.json_output:
        app.emit(result)
