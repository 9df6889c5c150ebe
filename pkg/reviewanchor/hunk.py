"""Parse a single unified-diff hunk as attached to a review comment.

Review platforms hand out the hunk a comment belongs to (GitHub's `diff_hunk`),
which looks like:

    @@ -10,4 +10,5 @@ def handler(request):
     context
    -removed
    +added

Only one hunk for one file is supported.
"""

from __future__ import annotations

from .diff import Diff, LinePair
from .errors import InvalidError, ParseError

HUNK_MARKER = "@@"

CONTEXT = " "
DELETION = "-"
ADDITION = "+"


def _parse_bound(token: str, sign: str) -> tuple[int, int | None]:
    """Parse `-12,3` / `+12` into (start, count)."""
    if not token.startswith(sign):
        raise ParseError(f"hunk header: expected '{sign}start[,count]', got {token!r}")
    start_text, _, count_text = token[1:].partition(",")
    try:
        start = int(start_text)
        count = int(count_text) if count_text else None
    except ValueError as exc:
        raise ParseError(f"hunk header: bad line number in {token!r}", cause=exc) from exc
    if start < 0 or (count is not None and count < 0):
        raise ParseError(f"hunk header: negative line number in {token!r}")
    return start, count


def parse_header(line: str) -> tuple[int, int]:
    """Return (left_start, right_start) from a `@@ -l[,n] +r[,n] @@` line.

    Counts are accepted but not trusted; extents come from the body.
    """
    if not line.startswith(HUNK_MARKER):
        raise ParseError("hunk does not start with '@@'")
    ranges = line[len(HUNK_MARKER) :]
    closing = ranges.find(HUNK_MARKER)
    if closing >= 0:
        ranges = ranges[:closing]
    tokens = ranges.split()
    if len(tokens) < 2:
        raise ParseError(f"hunk header: missing line ranges in {line!r}")
    left_start, _ = _parse_bound(tokens[0], DELETION)
    right_start, _ = _parse_bound(tokens[1], ADDITION)
    return left_start, right_start


def parse_hunk(hunk: str, path: str) -> Diff:
    """Build a `Diff` from raw hunk text.

    Raises `ParseError` for a missing/malformed header and `InvalidError` for
    a body line that is not context, deletion or addition.
    """
    if not hunk.startswith(HUNK_MARKER):
        raise ParseError("hunk does not start with '@@'")

    trailing_newline = hunk.endswith("\n")
    rows = hunk.split("\n")
    if trailing_newline:
        rows.pop()

    left_start, right_start = parse_header(rows[0])
    left_cursor = left_start
    right_cursor = right_start

    left_lines: list[str] = []
    right_lines: list[str] = []
    context: list[range] = []
    pairs = [LinePair(left_cursor, right_cursor)]

    previous: str | None = None
    run_start: int | None = None

    for number, row in enumerate(rows[1:], start=2):
        kind = row[:1]
        if kind not in (CONTEXT, DELETION, ADDITION):
            raise InvalidError(f"{path}: hunk row {number} has no ' ', '-' or '+' prefix: {row!r}")
        content = row[1:]

        if kind == CONTEXT:
            left_lines.append(content)
            right_lines.append(content)
            left_cursor += 1
            right_cursor += 1
            if previous in (DELETION, ADDITION):
                run_start = right_cursor - 1
        else:
            if previous == CONTEXT and run_start is not None:
                context.append(range(run_start, right_cursor))
                run_start = None
            if kind == DELETION:
                left_lines.append(content)
                left_cursor += 1
            else:
                right_lines.append(content)
                right_cursor += 1

        previous = kind
        pairs.append(LinePair(left_cursor, right_cursor))

    # A run still open here is trailing context and is not recorded.
    return Diff(
        path=path,
        original_range=range(left_start, left_cursor),
        range=range(right_start, right_cursor),
        left_lines=tuple(left_lines),
        right_lines=tuple(right_lines),
        context=tuple(context),
        associated_line_pairs=tuple(pairs),
        trailing_newline=trailing_newline,
    )
