"""Pluggy hook specifications for mintcompat.

Two setup-time hooks let plugins extend the transform without patching it:
extra rewrite rules (run after the built-ins) and extra custom-element
names. One event hook reports each transformed document.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from mintcompat.domain.rules import RewriteRule

hookspec = pluggy.HookspecMarker("mintcompat")
hookimpl = pluggy.HookimplMarker("mintcompat")


class MintcompatHookSpec:
    """Hook specifications for the mintcompat plugin system."""

    @hookspec
    def register_rewrite_rules(self) -> list[RewriteRule] | None:
        """Return rules to append after the built-in rule list."""

    @hookspec
    def register_custom_elements(self) -> list[str] | None:
        """Return extra tag names to treat as opaque custom elements."""

    @hookspec
    def post_transform(self, identifier: str, changed: bool) -> None:
        """Called after a document has been run through the transform."""
