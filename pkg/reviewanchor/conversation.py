"""Group review comments into threads.

Threads are kept as integer ids over a single id -> comment table, so the
starter list and the reply groups never hold the comments themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .comments import ReviewComment

NCOL = 80


@dataclass(frozen=True)
class Conversation:
    comments: dict[int, ReviewComment]
    starters: tuple[int, ...]
    replies: dict[int, tuple[int, ...]] = field(default_factory=dict)

    @classmethod
    def from_comments(cls, comments: Iterable[ReviewComment]) -> "Conversation":
        ordered = list(comments)
        table = {comment.id: comment for comment in ordered}
        starters = tuple(c.id for c in ordered if c.in_reply_to_id is None)

        grouped: dict[int, list[int]] = {sid: [] for sid in starters}
        for comment in ordered:
            parent = comment.in_reply_to_id
            if parent is not None and parent in grouped:
                grouped[parent].append(comment.id)

        return cls(
            comments=table,
            starters=starters,
            replies={sid: tuple(ids) for sid, ids in grouped.items()},
        )

    def starter_comments(self) -> list[ReviewComment]:
        return [self.comments[sid] for sid in self.starters]

    def replies_to(self, starter_id: int) -> list[ReviewComment]:
        return [self.comments[rid] for rid in self.replies.get(starter_id, ())]

    def serialize(self, starter_id: int) -> str:
        """Thread text shown next to the commented lines."""
        start = self.comments[starter_id]
        parts = [f"{start.user}: {start.body}"]
        for reply in self.replies_to(starter_id):
            parts.append(f"{reply.user}: {reply.body}")
        return "\n".join(parts)

    def render(self) -> str:
        """Human-readable listing of every thread with its hunk."""
        out: list[str] = []
        for comment in self.starter_comments():
            out.append(f"|{'+' * NCOL}|")
            out.append(comment.path)
            out.append(comment.diff_hunk)
            out.append(f"[{comment.id}]{comment.user}: {comment.body}")
            for reply in self.replies_to(comment.id):
                out.append(f"[{reply.id}]{reply.user}: {reply.body}")
            out.append(f"|{'-' * NCOL}|")
        return "\n".join(out)
