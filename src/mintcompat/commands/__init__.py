"""Subcommand modules for mintcompat.

Provides register_commands(), which imports command modules lazily to
keep ``mintcompat --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from mintcompat.commands.elements import elements
    from mintcompat.commands.transform import transform

    cli.add_command(transform)
    cli.add_command(elements)
