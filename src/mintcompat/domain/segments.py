"""Segmenter — split a markdown document into prose and verbatim segments.

Verbatim segments are fenced code blocks. Everything else is prose.
Rewrite rules only ever see prose.

INVARIANT: ``join_segments(split_segments(text)) == text`` for every string.

Fence markers are matched textually:

- A run of three or more backticks opens a block, which closes at the
  next run of exactly the same length. A four-backtick fence can
  therefore wrap a triple-backtick sample without exposing it.
- Any such run counts, including one inside an inline code span. Such
  spans end up verbatim, which only ever means *less* rewriting.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

UnterminatedPolicy = Literal["verbatim", "prose"]

# Leftmost match always starts a maximal run, so the run length is exact.
_FENCE_RUN = re.compile(r"`{3,}")


def _closing_fence(run: str) -> re.Pattern[str]:
    return re.compile(rf"(?<!`){run}(?!`)")


class SegmentKind(StrEnum):
    """Whether a segment may be rewritten."""

    PROSE = "prose"
    VERBATIM = "verbatim"


@dataclass(frozen=True)
class Segment:
    """A contiguous slice of a document."""

    kind: SegmentKind
    text: str

    @property
    def is_prose(self) -> bool:
        return self.kind is SegmentKind.PROSE


def split_segments(
    text: str,
    *,
    unterminated: UnterminatedPolicy = "verbatim",
) -> list[Segment]:
    """Split *text* into ordered prose/verbatim segments.

    Args:
        text: Full document source.
        unterminated: What to do with a fence that is never closed.
            ``"verbatim"`` (default) protects everything from the dangling
            fence to the end of the document; ``"prose"`` leaves it open to
            rewriting.

    Returns:
        Segments in document order. Empty segments are omitted, so a
        document that starts with a fence begins with a verbatim segment.
    """
    segments: list[Segment] = []
    pos = 0
    opener = _FENCE_RUN.search(text)
    while opener is not None:
        closer = _closing_fence(opener.group(0)).search(text, opener.end())
        if closer is None:
            break
        if opener.start() > pos:
            segments.append(Segment(SegmentKind.PROSE, text[pos : opener.start()]))
        segments.append(Segment(SegmentKind.VERBATIM, text[opener.start() : closer.end()]))
        pos = closer.end()
        opener = _FENCE_RUN.search(text, pos)

    if opener is not None and unterminated == "verbatim":
        if opener.start() > pos:
            segments.append(Segment(SegmentKind.PROSE, text[pos : opener.start()]))
        segments.append(Segment(SegmentKind.VERBATIM, text[opener.start() :]))
    elif pos < len(text):
        segments.append(Segment(SegmentKind.PROSE, text[pos:]))
    return segments


def join_segments(segments: Iterable[Segment]) -> str:
    """Concatenate segments back into a document."""
    return "".join(seg.text for seg in segments)
