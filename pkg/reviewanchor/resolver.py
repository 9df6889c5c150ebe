"""Project a review comment's recorded lines onto the live document.

The recorded position refers to the reviewed revision; the document being
edited may have drifted since. The hunk's current-side text is looked up in
the document and, when found, the comment is moved there, keeping its span.
Anything uncertain falls back to the recorded position.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .comments import ReviewComment, SubjectType
from .errors import HunkError
from .hunk import parse_hunk

Trace = Callable[[str], None]


@dataclass(frozen=True)
class LineRange:
    """Zero-based, end-exclusive line interval in the live document."""

    beg: int
    end: int


def _noop(_message: str) -> None:
    return None


def recorded_range(comment: ReviewComment) -> LineRange:
    """The comment's own position, converted to zero-based lines."""
    end = comment.original_line
    start = comment.original_start_line if comment.original_start_line is not None else end
    return LineRange(start - 1, end)


def resolve_line_range(
    comment: ReviewComment,
    text: str,
    *,
    trace: Trace | None = None,
) -> LineRange:
    """Best-effort location of `comment` in `text`. Never raises."""
    log = trace or _noop
    recorded = recorded_range(comment)

    if comment.subject() is SubjectType.FILE:
        return recorded

    span = recorded.end - recorded.beg
    try:
        diff = parse_hunk(comment.diff_hunk, comment.path)
    except HunkError as exc:
        log(f"comment {comment.id}: unusable hunk ({exc.kind}): {exc}")
        return recorded

    commented_on = diff.text()
    if not commented_on:
        log(f"comment {comment.id}: hunk has no current-side text")
        return recorded

    index = text.find(commented_on)
    if index < 0:
        log(f"comment {comment.id}: hunk text not found in document")
        return recorded

    beg = text.count("\n", 0, index)
    log(f"comment {comment.id}: hunk text found at line {beg} (recorded {recorded.beg})")
    return LineRange(beg, beg + span)
