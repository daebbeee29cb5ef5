"""Command: print the custom-element allow-list."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mintcompat.commands._options import examples_option

if TYPE_CHECKING:
    from mintcompat.commands._context import AppContext


@click.command()
@examples_option(
    """
      mintcompat elements
      mintcompat --json elements
    """
)
@click.pass_obj
def elements(app: AppContext) -> None:
    """List tags the template compiler should treat as custom elements."""
    from mintcompat.services.elements import ElementsService

    app.emit(ElementsService(app.settings, app.plugins).list_elements())
