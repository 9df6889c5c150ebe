"""Turn review threads into editor diagnostics for one open document."""

from __future__ import annotations

from dataclasses import dataclass

from .conversation import Conversation
from .resolver import LineRange, Trace, resolve_line_range

SOURCE = "review"
# Editor-protocol DiagnosticSeverity.Information
SEVERITY_INFORMATION = 3


@dataclass(frozen=True)
class Diagnostic:
    range: LineRange
    message: str
    comment_id: int

    def to_dict(self) -> dict[str, object]:
        return {
            "range": {
                "start": {"line": self.range.beg, "character": 0},
                "end": {"line": self.range.end, "character": 0},
            },
            "severity": SEVERITY_INFORMATION,
            "source": SOURCE,
            "message": self.message,
        }


def build_diagnostics(
    conversation: Conversation,
    uri: str,
    text: str,
    *,
    trace: Trace | None = None,
) -> list[Diagnostic]:
    """One diagnostic per thread whose path belongs to `uri`."""
    diagnostics: list[Diagnostic] = []
    for comment in conversation.starter_comments():
        if comment.path not in uri:
            continue
        diagnostics.append(
            Diagnostic(
                range=resolve_line_range(comment, text, trace=trace),
                message=conversation.serialize(comment.id),
                comment_id=comment.id,
            )
        )
    return diagnostics
