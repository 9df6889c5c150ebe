"""Typed review comments as delivered by the review platform.

Field names follow GitHub's pull-request review comment payload
(`GET /repos/{owner}/{repo}/pulls/{number}/comments`).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import yaml


class CommentError(ValueError):
    """A review comment payload is missing fields or has the wrong types."""


class SubjectType(Enum):
    LINE = "line"
    FILE = "file"


def _require_int(value: Any, ctx: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise CommentError(f"{ctx}: expected integer")
    return value


def _optional_int(value: Any, ctx: str) -> int | None:
    if value is None:
        return None
    return _require_int(value, ctx)


def _require_line(value: Any, ctx: str) -> int:
    line = _require_int(value, ctx)
    if line < 1:
        raise CommentError(f"{ctx}: must be >= 1")
    return line


def _optional_line(value: Any, ctx: str) -> int | None:
    if value is None:
        return None
    return _require_line(value, ctx)


def _require_str(value: Any, ctx: str) -> str:
    if not isinstance(value, str):
        raise CommentError(f"{ctx}: expected string")
    return value


def _optional_str(value: Any, ctx: str) -> str | None:
    if value is None:
        return None
    return _require_str(value, ctx)


@dataclass(frozen=True)
class ReviewComment:
    """One review comment, either a thread starter or a reply."""

    id: int
    body: str
    user: str
    path: str
    diff_hunk: str
    original_line: int
    original_start_line: int | None = None
    in_reply_to_id: int | None = None
    line: int | None = None
    start_line: int | None = None
    commit_id: str | None = None
    original_commit_id: str | None = None
    subject_type: str | None = None
    start_side: str | None = None

    def subject(self) -> SubjectType:
        """Whether the comment targets lines or the whole file."""
        raw = (self.subject_type or "").lower()
        if "line" in raw:
            return SubjectType.LINE
        if "file" in raw:
            return SubjectType.FILE
        return SubjectType.LINE

    @classmethod
    def from_dict(cls, raw: Any, ctx: str = "comment") -> "ReviewComment":
        if not isinstance(raw, dict):
            raise CommentError(f"{ctx}: expected mapping")

        user = raw.get("user")
        if isinstance(user, dict):
            login = _require_str(user.get("login"), f"{ctx}.user.login")
        else:
            login = _require_str(user, f"{ctx}.user")

        original_line = raw.get("original_line")
        if original_line is None:
            # File-level comments may only carry `line`.
            original_line = raw.get("line")

        return cls(
            id=_require_int(raw.get("id"), f"{ctx}.id"),
            body=_require_str(raw.get("body", ""), f"{ctx}.body"),
            user=login,
            path=_require_str(raw.get("path"), f"{ctx}.path"),
            diff_hunk=_require_str(raw.get("diff_hunk", ""), f"{ctx}.diff_hunk"),
            original_line=_require_line(original_line, f"{ctx}.original_line"),
            original_start_line=_optional_line(
                raw.get("original_start_line"), f"{ctx}.original_start_line"
            ),
            in_reply_to_id=_optional_int(raw.get("in_reply_to_id"), f"{ctx}.in_reply_to_id"),
            line=_optional_line(raw.get("line"), f"{ctx}.line"),
            start_line=_optional_line(raw.get("start_line"), f"{ctx}.start_line"),
            commit_id=_optional_str(raw.get("commit_id"), f"{ctx}.commit_id"),
            original_commit_id=_optional_str(
                raw.get("original_commit_id"), f"{ctx}.original_commit_id"
            ),
            subject_type=_optional_str(raw.get("subject_type"), f"{ctx}.subject_type"),
            start_side=_optional_str(raw.get("start_side"), f"{ctx}.start_side"),
        )


def parse_comments(raw: Any) -> list[ReviewComment]:
    """Validate a list of raw comment payloads."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise CommentError("comments: expected list")
    return [ReviewComment.from_dict(item, f"comments[{idx}]") for idx, item in enumerate(raw)]


def load_comments(path: Path) -> list[ReviewComment]:
    """Load comments saved as YAML or JSON (the API response as-is works)."""
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise CommentError(f"missing comments file: {path}") from None
    except yaml.YAMLError as e:
        raise CommentError(f"invalid YAML in {path}: {e}") from e
    return parse_comments(raw)
