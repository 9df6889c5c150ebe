#!/usr/bin/env python3
"""Place saved review comments on the current text of a file.

Commands:
  diagnostics  Print a JSON list of editor diagnostics for one document
  print        Print every review thread with its hunk

Comments come from a YAML/JSON file holding the review platform's comment
payloads (for GitHub: the `pulls/{number}/comments` response).
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from pkg.reviewanchor import (
    CommentError,
    ConfigError,
    Conversation,
    build_diagnostics,
    load_comments,
    load_review_config,
)


def eprint(msg: str) -> None:
    print(f"anchor-comments: {msg}", file=sys.stderr)


def resolve_sources(comments: str | None, config: str | None) -> tuple[Path, bool]:
    """Return (comments file, trace enabled by config)."""
    if config is None:
        if not comments:
            raise ConfigError("--comments or --config is required")
        return Path(comments), False

    config_path = Path(config)
    cfg = load_review_config(config_path)
    if comments:
        return Path(comments), cfg.trace
    return cfg.comments_path(config_path.parent), cfg.trace


def main(argv: list[str]) -> int:
    """Main."""
    parser = argparse.ArgumentParser(prog="anchor-comments.py")
    sub = parser.add_subparsers(dest="cmd", required=True)

    diagnostics = sub.add_parser("diagnostics")
    diagnostics.add_argument("--comments")
    diagnostics.add_argument("--config")
    diagnostics.add_argument("--document", required=True)
    diagnostics.add_argument("--uri")
    diagnostics.add_argument("--trace", action="store_true")

    print_cmd = sub.add_parser("print")
    print_cmd.add_argument("--comments")
    print_cmd.add_argument("--config")

    args = parser.parse_args(argv)

    try:
        comments_file, config_trace = resolve_sources(args.comments, args.config)
        comments = load_comments(comments_file)
    except (ConfigError, CommentError) as e:
        eprint(str(e))
        return 2

    conversation = Conversation.from_comments(comments)

    if args.cmd == "print":
        print(conversation.render())
        return 0

    document = Path(args.document)
    try:
        text = document.read_text(encoding="utf-8")
    except OSError as e:
        eprint(f"cannot read document {document}: {e}")
        return 2

    trace = eprint if (args.trace or config_trace) else None
    uri = args.uri or document.resolve().as_uri()
    result = build_diagnostics(conversation, uri, text, trace=trace)
    print(json.dumps([d.to_dict() for d in result], indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
