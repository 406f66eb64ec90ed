"""
Path expressions: ``user.items[2].name``.

Grammar: ``identifier ( "." identifier | "[" digits "]" )*``. Parsing is
strict and raises :class:`PathSyntaxError`; resolution never raises and
returns a ``returns`` Result whose failure side is :class:`PathNotFound`.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from returns.result import Failure, Result, Success

# Characters that terminate an identifier
_DELIMITERS = frozenset(".[]{}")


class PathSyntaxError(Exception):
    """Malformed path expression."""

    def __init__(self, expression: str, position: int, reason: str) -> None:
        super().__init__(f"Invalid path {expression!r} at position {position}: {reason}")
        self.expression = expression
        self.position = position
        self.reason = reason


@dataclass(frozen=True)
class PropertySegment:
    name: str

    def __str__(self) -> str:
        return f".{self.name}"


@dataclass(frozen=True)
class IndexSegment:
    index: int

    def __str__(self) -> str:
        return f"[{self.index}]"


PathSegment = PropertySegment | IndexSegment


@dataclass(frozen=True)
class PathNotFound:
    """Resolution miss: which segment failed and why."""

    path: str
    segment: int
    reason: str


def format_path(segments: Sequence[PathSegment]) -> str:
    """Render segments back to expression form (inverse of parse_path)."""
    return "".join(str(segment) for segment in segments).removeprefix(".")


@lru_cache(maxsize=1024)
def parse_path(expression: str) -> tuple[PathSegment, ...]:
    """
    Parse a path expression into segments.

    Args:
        expression: Path such as ``a.b[0].c``; surrounding whitespace is ignored

    Returns:
        Ordered tuple of property and index segments

    Raises:
        PathSyntaxError: Empty path, empty segment, leading/trailing dot,
            leading index, unmatched or non-numeric brackets
    """
    text = expression.strip()
    if not text:
        raise PathSyntaxError(expression, 0, "empty path")

    segments: list[PathSegment] = []
    i = 0
    length = len(text)
    expect_identifier = True  # at start and after "."

    while i < length:
        char = text[i]

        if char == ".":
            if expect_identifier:
                raise PathSyntaxError(expression, i, "empty segment")
            expect_identifier = True
            i += 1
        elif char == "[":
            if expect_identifier:
                reason = "index without container" if not segments else "empty segment"
                raise PathSyntaxError(expression, i, reason)
            close = text.find("]", i + 1)
            if close == -1:
                raise PathSyntaxError(expression, i, "unmatched '['")
            digits = text[i + 1 : close]
            if not digits.isascii() or not digits.isdigit():
                raise PathSyntaxError(expression, i + 1, f"index must be a non-negative integer, got {digits!r}")
            segments.append(IndexSegment(int(digits)))
            i = close + 1
        elif char == "]":
            raise PathSyntaxError(expression, i, "unmatched ']'")
        else:
            if not expect_identifier:
                raise PathSyntaxError(expression, i, "expected '.' or '['")
            start = i
            while i < length and text[i] not in _DELIMITERS and not text[i].isspace():
                i += 1
            if i == start:
                raise PathSyntaxError(expression, i, f"unexpected character {text[i]!r}")
            segments.append(PropertySegment(text[start:i]))
            expect_identifier = False

    if expect_identifier:
        raise PathSyntaxError(expression, length, "trailing '.'")

    return tuple(segments)


def resolve_segments(segments: Sequence[PathSegment], root: Any) -> Result[Any, PathNotFound]:
    """
    Walk segments against a root value.

    Property segments need a mapping holding the key; index segments need a
    list/tuple with the index in range. Strings are not indexable containers.
    """
    current = root
    path = format_path(segments)

    for position, segment in enumerate(segments):
        if isinstance(segment, PropertySegment):
            if not isinstance(current, Mapping):
                return Failure(PathNotFound(path, position, f"cannot read {segment.name!r} of non-object"))
            if segment.name not in current:
                return Failure(PathNotFound(path, position, f"missing key {segment.name!r}"))
            current = current[segment.name]
        else:
            if not isinstance(current, (list, tuple)):
                return Failure(PathNotFound(path, position, f"cannot index non-array with [{segment.index}]"))
            if segment.index >= len(current):
                return Failure(
                    PathNotFound(path, position, f"index {segment.index} out of range (length {len(current)})")
                )
            current = current[segment.index]

    return Success(current)


def resolve_path(expression: str, root: Any) -> Result[Any, PathNotFound]:
    """
    Parse and resolve in one step.

    Raises:
        PathSyntaxError: Only for malformed expressions; misses are Failures
    """
    return resolve_segments(parse_path(expression), root)
