"""The markdown compatibility transform.

Pipeline per document::

    text -> split_segments -> apply_rules on prose only -> join -> text

``transform()`` follows the build-pipeline contract: it returns the new
text, or ``None`` when the document is not eligible or nothing changed so
the caller can skip recompiling.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from mintcompat.domain.rules import RewriteRule, apply_rules, default_rules
from mintcompat.domain.segments import (
    Segment,
    UnterminatedPolicy,
    join_segments,
    split_segments,
)

DEFAULT_SUFFIXES: tuple[str, ...] = (".md",)


def rewrite_prose(text: str, rules: Iterable[RewriteRule]) -> str:
    """Apply *rules* to a single prose segment."""
    return apply_rules(text, rules)


def rewrite_document(
    text: str,
    rules: Sequence[RewriteRule],
    *,
    unterminated: UnterminatedPolicy = "verbatim",
) -> str:
    """Rewrite every prose segment of *text*; verbatim segments pass through."""
    segments = split_segments(text, unterminated=unterminated)
    rewritten = (
        Segment(seg.kind, rewrite_prose(seg.text, rules)) if seg.is_prose else seg
        for seg in segments
    )
    return join_segments(rewritten)


@dataclass(frozen=True)
class MarkdownCompat:
    """A transformer bound to one rule list and eligibility policy.

    Attributes:
        rules: Ordered rewrite rules, built-ins first.
        suffixes: Identifier suffixes that make a document eligible.
        unterminated: Policy for a trailing fence that is never closed.
    """

    rules: tuple[RewriteRule, ...] = field(default_factory=default_rules)
    suffixes: tuple[str, ...] = DEFAULT_SUFFIXES
    unterminated: UnterminatedPolicy = "verbatim"

    def is_eligible(self, identifier: str) -> bool:
        return identifier.endswith(self.suffixes)

    def rewrite(self, text: str) -> str:
        """Rewrite *text* unconditionally (no eligibility check)."""
        return rewrite_document(text, self.rules, unterminated=self.unterminated)

    def transform(self, code: str, identifier: str) -> str | None:
        """Return rewritten *code*, or None if ineligible or unchanged."""
        if not self.is_eligible(identifier):
            return None
        result = self.rewrite(code)
        if result == code:
            return None
        return result


def transform(
    source: str,
    identifier: str,
    *,
    rules: Sequence[RewriteRule] | None = None,
    suffixes: tuple[str, ...] = DEFAULT_SUFFIXES,
    unterminated: UnterminatedPolicy = "verbatim",
) -> str | None:
    """Transform one document for the build pipeline.

    Args:
        source: Raw markdown text.
        identifier: Document id (usually a path); only its suffix matters.
        rules: Rule list to apply. Defaults to :func:`default_rules`.
        suffixes: Eligible identifier suffixes.
        unterminated: Policy for an unclosed trailing fence.

    Returns:
        The rewritten text, or None when *identifier* is not eligible or
        no rule changed anything.
    """
    compat = MarkdownCompat(
        rules=tuple(rules) if rules is not None else default_rules(),
        suffixes=suffixes,
        unterminated=unterminated,
    )
    return compat.transform(source, identifier)
