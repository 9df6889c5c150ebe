"""Error types raised while turning a diff hunk into a `Diff`."""

from __future__ import annotations

PARSE = "parse"
INVALID = "invalid"


class HunkError(ValueError):
    """A hunk could not be turned into a `Diff`.

    `kind` tells the two failure families apart; `cause` keeps the lower-level
    exception (for example the `ValueError` from a bad line number), if any.
    """

    kind: str = ""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message} ({self.cause})"


class ParseError(HunkError):
    """Missing or malformed `@@ -l[,n] +r[,n] @@` header."""

    kind = PARSE


class InvalidError(HunkError):
    """Structurally invalid hunk body or an unsupported/out-of-bounds request."""

    kind = INVALID
