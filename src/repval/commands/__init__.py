"""Subcommand modules for repval.

Provides register_commands() which uses deferred imports to keep
``repval --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from repval.commands.demo import demo
    from repval.commands.read import read

    cli.add_command(demo)
    cli.add_command(read)
