from __future__ import annotations

import pytest

from pkg.reviewanchor import HunkError, InvalidError, LinePair, ParseError, parse_hunk
from pkg.reviewanchor.hunk import parse_header


def _hunk(*rows: str, trailing_newline: bool = False) -> str:
    text = "\n".join(rows)
    return text + "\n" if trailing_newline else text


def test_replacement_hunk_routes_lines_to_both_sides() -> None:
    diff = parse_hunk(
        _hunk("@@ -1,4 +1,4 @@", " a", "-b", "+B", " c", " d", trailing_newline=True),
        "src/app.py",
    )

    assert diff.path == "src/app.py"
    assert diff.left_lines == ("a", "b", "c", "d")
    assert diff.right_lines == ("a", "B", "c", "d")
    assert diff.original_range == range(1, 5)
    assert diff.range == range(1, 5)
    assert diff.trailing_newline is True


def test_trailing_context_run_is_not_recorded() -> None:
    diff = parse_hunk(_hunk("@@ -1,4 +1,4 @@", " a", "-b", "+B", " c", " d"), "f")
    assert diff.context == ()


def test_context_between_changes_is_recorded_in_right_coordinates() -> None:
    diff = parse_hunk(
        _hunk("@@ -1,5 +1,5 @@", " a", "-b", "+B", " c", " d", "-e", "+E"),
        "f",
    )

    assert diff.context == (range(3, 5),)
    assert diff.right_lines[2:4] == ("c", "d")


def test_multiple_context_runs_are_ascending_and_disjoint() -> None:
    diff = parse_hunk(
        _hunk(
            "@@ -10,6 +10,7 @@ def handler():",
            "-x",
            "+X",
            " k1",
            "-y",
            "+Y",
            " k2",
            " k3",
            "+Z",
            " k4",
        ),
        "f",
    )

    assert diff.context == (range(11, 12), range(13, 15))
    for first, second in zip(diff.context, diff.context[1:]):
        assert first.stop <= second.start
    assert diff.range == range(10, 17)
    assert diff.original_range == range(10, 16)


def test_leading_context_run_is_not_recorded() -> None:
    diff = parse_hunk(_hunk("@@ -1,3 +1,3 @@", " a", " b", "-c", "+C"), "f")
    assert diff.context == ()


def test_pure_addition_hunk() -> None:
    diff = parse_hunk(_hunk("@@ -5,0 +5,2 @@", "+one", "+two"), "f")

    assert diff.left_lines == ()
    assert diff.right_lines == ("one", "two")
    assert diff.original_range == range(5, 5)
    assert diff.range == range(5, 7)


def test_pure_deletion_hunk() -> None:
    diff = parse_hunk(_hunk("@@ -3,2 +2,0 @@", "-gone", "-also gone"), "f")

    assert diff.left_lines == ("gone", "also gone")
    assert diff.right_lines == ()
    assert diff.original_range == range(3, 5)
    assert diff.range == range(2, 2)


def test_side_lengths_match_ranges() -> None:
    diff = parse_hunk(
        _hunk("@@ -7,4 +9,5 @@", " a", "+b", "+c", "-d", " e", "-f", "+g"),
        "f",
    )

    assert len(diff.left_lines) == diff.original_range.stop - diff.original_range.start
    assert len(diff.right_lines) == diff.range.stop - diff.range.start


def test_header_counts_are_not_trusted() -> None:
    diff = parse_hunk(_hunk("@@ -1,99 +1,99 @@", " only"), "f")
    assert diff.original_range == range(1, 2)
    assert diff.range == range(1, 2)


def test_header_without_counts() -> None:
    diff = parse_hunk(_hunk("@@ -4 +6 @@", "-old", "+new"), "f")
    assert diff.original_range == range(4, 5)
    assert diff.range == range(6, 7)


def test_header_only_hunk_has_empty_sides() -> None:
    diff = parse_hunk("@@ -3,0 +3,0 @@", "f")
    assert diff.left_lines == ()
    assert diff.right_lines == ()
    assert diff.associated_line_pairs == (LinePair(3, 3),)


def test_associated_line_pairs_follow_every_row() -> None:
    diff = parse_hunk(_hunk("@@ -1,4 +1,4 @@", " a", "-b", "+B", " c", " d"), "f")

    assert diff.associated_line_pairs == (
        LinePair(1, 1),
        LinePair(2, 2),
        LinePair(3, 2),
        LinePair(3, 3),
        LinePair(4, 4),
        LinePair(5, 5),
    )


def test_associated_line_pairs_never_decrease() -> None:
    diff = parse_hunk(
        _hunk("@@ -20,5 +30,4 @@", "-a", "-b", " c", "+d", " e", "-f", " g"),
        "f",
    )
    pairs = diff.associated_line_pairs
    for before, after in zip(pairs, pairs[1:]):
        assert after.left >= before.left
        assert after.right >= before.right


def test_marker_character_is_stripped_but_whitespace_kept() -> None:
    diff = parse_hunk(_hunk("@@ -1 +1 @@", "-    indented", "+\tindented"), "f")
    assert diff.left_lines == ("    indented",)
    assert diff.right_lines == ("\tindented",)


def test_blank_context_line_keeps_empty_content() -> None:
    diff = parse_hunk(_hunk("@@ -1,2 +1,2 @@", " ", "-x", "+y"), "f")
    assert diff.left_lines == ("", "x")


class TestParseErrors:
    def test_missing_hunk_marker(self) -> None:
        with pytest.raises(ParseError):
            parse_hunk("-1,2 +1,2\n a", "f")

    def test_empty_text(self) -> None:
        with pytest.raises(ParseError):
            parse_hunk("", "f")

    def test_missing_plus_token(self) -> None:
        with pytest.raises(ParseError):
            parse_hunk(_hunk("@@ -1,2 1,2 @@", " a"), "f")

    def test_missing_ranges(self) -> None:
        with pytest.raises(ParseError):
            parse_hunk(_hunk("@@ @@", " a"), "f")

    def test_non_numeric_bound_keeps_cause(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse_hunk(_hunk("@@ -a,2 +1,2 @@", " a"), "f")

        err = excinfo.value
        assert err.kind == "parse"
        assert isinstance(err.cause, ValueError)
        assert err.__cause__ is err.cause

    def test_non_numeric_count(self) -> None:
        with pytest.raises(ParseError):
            parse_header("@@ -1,x +1,2 @@")

    def test_parse_error_is_a_hunk_error(self) -> None:
        with pytest.raises(HunkError):
            parse_hunk("nope", "f")


class TestInvalidBody:
    def test_unknown_prefix(self) -> None:
        with pytest.raises(InvalidError) as excinfo:
            parse_hunk(_hunk("@@ -1,2 +1,2 @@", " a", "*b"), "src/app.py")
        assert excinfo.value.kind == "invalid"
        assert "src/app.py" in str(excinfo.value)

    def test_no_newline_marker_is_rejected(self) -> None:
        with pytest.raises(InvalidError):
            parse_hunk(_hunk("@@ -1 +1 @@", "-a", "+b", "\\ No newline at end of file"), "f")

    def test_empty_body_line_is_rejected(self) -> None:
        with pytest.raises(InvalidError):
            parse_hunk(_hunk("@@ -1,3 +1,3 @@", " a", "", " b"), "f")


def test_parse_header_returns_starts() -> None:
    assert parse_header("@@ -12,3 +15,4 @@ class Foo:") == (12, 15)
