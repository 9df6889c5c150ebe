"""Anchor code-review comments to the live text of the file being edited."""

from .comments import CommentError, ReviewComment, SubjectType, load_comments, parse_comments
from .config import ConfigError, ReviewConfig, load_review_config
from .conversation import Conversation
from .diagnostics import Diagnostic, build_diagnostics
from .diff import NO_CONTEXT, Diff, LinePair, SidePair
from .errors import HunkError, InvalidError, ParseError
from .hunk import parse_hunk
from .resolver import LineRange, recorded_range, resolve_line_range

__all__ = [
    "CommentError",
    "ConfigError",
    "Conversation",
    "Diagnostic",
    "Diff",
    "HunkError",
    "InvalidError",
    "LineRange",
    "LinePair",
    "NO_CONTEXT",
    "ParseError",
    "ReviewComment",
    "ReviewConfig",
    "SidePair",
    "SubjectType",
    "build_diagnostics",
    "load_comments",
    "load_review_config",
    "parse_comments",
    "parse_hunk",
    "recorded_range",
    "resolve_line_range",
]
