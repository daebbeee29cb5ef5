"""Rewrite rules — ordered regex substitutions applied to prose.

Each rule is a total ``str -> str`` function: unmatched text passes
through unchanged and nothing here ever raises. Rules run in a fixed
order because later rules see the output of earlier ones (attribute
casing runs after brace normalization so ``frameBorder={0}`` ends up as
``frameborder="0"``).

Default order:

1. ``brace-attributes``  — ``cols={2}`` -> ``cols="2"``,
   ``items={list}`` -> ``:items="list"``
2. ``self-closing-tags`` — ``<iframe ... />`` -> ``<iframe ...></iframe>``
3. ``attribute-casing``  — ``allowFullScreen`` -> ``allowfullscreen``
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass

Replacement = str | Callable[[re.Match[str]], str]

DEFAULT_SELF_CLOSING_TAGS: tuple[str, ...] = ("iframe",)

# React-style camelCase attributes that Vue lowercases internally.
DEFAULT_ATTRIBUTE_RENAMES: dict[str, str] = {
    "allowFullScreen": "allowfullscreen",
    "frameBorder": "frameborder",
}

# name={value}, preceded by whitespace (attribute position). The value may
# hold one level of nested braces, e.g. style={{color: 'red'}}.
_BRACE_ATTRIBUTE = re.compile(r"(\s)(\w+)=\{((?:[^{}]|\{[^{}]*\})+)\}")
# An attribute inside the expression itself (render={(p) => f(p, size={2})}).
_INNER_ATTRIBUTE = re.compile(r"\w=[{\"']")
_DIGITS = re.compile(r"[0-9]+")
# Attribute text up to the end of a tag; quoted values may contain ``/>``.
_TAG_ATTRIBUTES = r"""((?:"[^"]*"|'[^']*'|[^>"'])*?)"""


@dataclass(frozen=True)
class RewriteRule:
    """A named pattern-and-replace step."""

    name: str
    pattern: re.Pattern[str]
    replacement: Replacement

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


# ---------------------------------------------------------------------------
# Rule builders
# ---------------------------------------------------------------------------


def _rewrite_brace_attribute(match: re.Match[str]) -> str:
    space, name, raw = match.groups()
    value = raw.strip()
    # Vue rejects an empty binding, and rewriting a nested attribute would
    # put quotes inside the quoted outer binding on the next pass.
    if not value or _INNER_ATTRIBUTE.search(value):
        return match.group(0)
    if _DIGITS.fullmatch(value):
        return f'{space}{name}="{value}"'
    if '"' not in value:
        return f'{space}:{name}="{value}"'
    if "'" not in value:
        return f"{space}:{name}='{value}'"
    # Both quote styles inside the expression: no safe attribute form.
    return match.group(0)


def brace_attribute_rule() -> RewriteRule:
    """Turn JSX ``name={value}`` into a quoted or bound attribute.

    Pure digits become a plain string attribute; anything else becomes a
    ``:name`` binding with the expression kept verbatim. Empty values and
    expressions that carry attributes of their own are left alone.
    """
    return RewriteRule("brace-attributes", _BRACE_ATTRIBUTE, _rewrite_brace_attribute)


def self_closing_rule(tags: Sequence[str] = DEFAULT_SELF_CLOSING_TAGS) -> RewriteRule:
    """Expand ``<tag ... />`` into ``<tag ...></tag>`` for the given tags."""
    alternatives = "|".join(re.escape(tag) for tag in tags)
    pattern = re.compile(rf"<({alternatives})\b{_TAG_ATTRIBUTES}\s*/>")
    return RewriteRule("self-closing-tags", pattern, r"<\1\2></\1>")


def attribute_casing_rule(renames: Mapping[str, str] = DEFAULT_ATTRIBUTE_RENAMES) -> RewriteRule:
    """Rename camelCase attribute names to their lowercase HTML form."""
    table = dict(renames)
    # Longest first so a name never shadows one it prefixes.
    names = sorted(table, key=len, reverse=True)
    pattern = re.compile(r"\b(" + "|".join(re.escape(n) for n in names) + r")\b")
    return RewriteRule("attribute-casing", pattern, lambda m: table[m.group(1)])


def default_rules(
    *,
    self_closing_tags: Sequence[str] = DEFAULT_SELF_CLOSING_TAGS,
    attribute_renames: Mapping[str, str] | None = None,
) -> tuple[RewriteRule, ...]:
    """Build the built-in rule list in its required order.

    Rules whose configuration is empty are omitted.
    """
    renames = DEFAULT_ATTRIBUTE_RENAMES if attribute_renames is None else attribute_renames
    rules: list[RewriteRule] = [brace_attribute_rule()]
    if self_closing_tags:
        rules.append(self_closing_rule(self_closing_tags))
    if renames:
        rules.append(attribute_casing_rule(renames))
    return tuple(rules)


def apply_rules(text: str, rules: Iterable[RewriteRule]) -> str:
    """Run *rules* over *text* in order, each on the previous output."""
    for rule in rules:
        text = rule.apply(text)
    return text
