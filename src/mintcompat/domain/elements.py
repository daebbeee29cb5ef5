"""Custom-element allow-list.

Mintlify components the Vue template compiler must treat as opaque
custom elements. Tags listed here are not rewritten; the host renderer
registers them (``compilerOptions.isCustomElement``) so they compile
without "failed to resolve component" warnings.
"""

from __future__ import annotations

from collections.abc import Iterable

CUSTOM_ELEMENTS: frozenset[str] = frozenset(
    {
        "Card",
        "CardGroup",
        "Columns",
        "Steps",
        "Step",
        "Note",
        "Info",
        "Warning",
        "Tip",
        "Tabs",
        "Tab",
        "Accordion",
        "AccordionGroup",
        "Developer",
    }
)


def allowed_elements(extra: Iterable[str] = ()) -> list[str]:
    """Return the built-in allow-list merged with *extra*, sorted."""
    return sorted(CUSTOM_ELEMENTS.union(extra))


def is_custom_element(tag: str, extra: Iterable[str] = ()) -> bool:
    """Whether *tag* is registered as an opaque custom element.

    Matching is case-sensitive, as in the Vue compiler.
    """
    return tag in CUSTOM_ELEMENTS or tag in set(extra)
