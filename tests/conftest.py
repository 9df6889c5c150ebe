"""Shared helpers: script imports and review comment factories."""
import importlib.util
from pathlib import Path

import pytest

from pkg.reviewanchor import ReviewComment

SCRIPTS_DIR = Path(__file__).parent.parent / "scripts"


def _import_script(name: str, filename: str):
    """Import a script file as a module using importlib."""
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / filename)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


anchor_comments = _import_script("anchor_comments", "anchor-comments.py")


def comment_payload(**overrides) -> dict:
    """GitHub-shaped review comment payload."""
    payload = {
        "id": 1,
        "in_reply_to_id": None,
        "body": "please rename",
        "user": {"login": "alice"},
        "path": "src/app.py",
        "diff_hunk": "@@ -1,2 +1,2 @@\n a\n-b\n+B",
        "commit_id": "abc123",
        "original_commit_id": "abc000",
        "line": 2,
        "original_line": 2,
        "start_line": None,
        "original_start_line": None,
        "subject_type": "line",
        "start_side": None,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_comment():
    def _make(**overrides) -> ReviewComment:
        return ReviewComment.from_dict(comment_payload(**overrides))

    return _make
