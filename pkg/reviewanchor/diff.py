"""Structured view of a single unified-diff hunk.

A `Diff` tracks both coordinate spaces of the hunk: the left (original) side
and the right (current) side. Line numbers are 1-based, ranges are half-open.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidError

NO_CONTEXT = "no context"


class SidePair(Enum):
    """Which side a line range is given in and which side's text is wanted."""

    LEFT_LEFT = "left-left"
    LEFT_RIGHT = "left-right"
    RIGHT_LEFT = "right-left"
    RIGHT_RIGHT = "right-right"


@dataclass(frozen=True)
class LinePair:
    """Left and right line cursors at one row of the hunk."""

    left: int
    right: int

    def value_for(self, side: SidePair) -> int:
        if side is SidePair.LEFT_LEFT:
            return self.left
        if side is SidePair.RIGHT_RIGHT:
            return self.right
        raise InvalidError(f"cross-side lookup not implemented: {side.value}")


def render_lines(lines: tuple[str, ...] | list[str], trailing_newline: bool) -> str:
    """Join lines with newlines, keeping the final one only if the hunk had it."""
    out = "".join(f"{line}\n" for line in lines)
    if not trailing_newline and out.endswith("\n"):
        out = out[:-1]
    return out


@dataclass(frozen=True)
class Diff:
    """Immutable result of parsing one hunk."""

    path: str
    original_range: range
    range: range
    left_lines: tuple[str, ...]
    right_lines: tuple[str, ...]
    context: tuple[range, ...]
    associated_line_pairs: tuple[LinePair, ...]
    trailing_newline: bool

    def text(self) -> str:
        """Right-side (current) text recorded in the hunk."""
        return render_lines(self.right_lines, self.trailing_newline)

    def original_text(self) -> str:
        """Left-side (original) text recorded in the hunk."""
        return render_lines(self.left_lines, self.trailing_newline)

    def _lines_for(self, side: SidePair) -> tuple[str, ...]:
        if side is SidePair.LEFT_LEFT:
            return self.left_lines
        return self.right_lines

    def text_part(self, comment_range: range, side: SidePair) -> str:
        """Render the lines of `comment_range` on one side of the hunk.

        Only same-side requests are supported. The range has to lie within the
        first and last cursor values recorded for that side.
        """
        if side not in (SidePair.LEFT_LEFT, SidePair.RIGHT_RIGHT):
            raise InvalidError(f"text_part not implemented for {side.value}")

        text_start = self.associated_line_pairs[0].value_for(side)
        text_stop = self.associated_line_pairs[-1].value_for(side)
        if comment_range.start < text_start or comment_range.stop > text_stop:
            raise InvalidError(
                f"range {comment_range.start}..{comment_range.stop} outside of "
                f"{text_start}..{text_stop} in {self.path}"
            )

        offset = comment_range.start - text_start
        count = comment_range.stop - comment_range.start
        lines = self._lines_for(side)[offset : offset + count]
        return render_lines(lines, self.trailing_newline)

    def context_texts(self, ignore_starting: int | None = None) -> list[str]:
        """One string per recorded context run, in hunk order."""
        # TODO: skip runs ending before `ignore_starting` once callers anchor on partial context.
        texts: list[str] = []
        for run in self.context:
            offset = run.start - self.range.start
            texts.append("\n".join(self.right_lines[offset : offset + len(run)]))
        return texts

    def get_context(self, ignore_starting: int | None = None) -> str:
        texts = self.context_texts(ignore_starting)
        if not texts:
            return NO_CONTEXT
        return "\n".join(texts)
