"""Error types raised at the program boundary of the evaluator."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ulc.common.span import Span

if TYPE_CHECKING:
    from ulc.core.ast import Expression


class UlcError(Exception):
    """Base class for every error reported by ``ulc``."""


def describe(message: str, span: Span | None, source: str | None) -> str:
    """Render ``message`` with the line, column and text of ``span``.

    Without ``source`` only the raw offsets of the span can be shown.
    """
    if span is None:
        return message
    if source is None:
        return f"{message} @ offset {span.start}-{span.end}"
    line, col = span.line_col(source)
    return f"{message} @ {line}:{col}: {span.extract(source)!r}"


@dataclass
class MalformedProgram(UlcError):
    """The statement sequence or an application node breaks the syntax contract.

    Raised for an empty application, an empty program, a program whose last
    statement is a binding, and an expression statement that is not the last.
    """

    message: str
    span: Span | None = None
    source: str | None = None

    def __str__(self) -> str:
        return describe(self.message, self.span, self.source)


@dataclass
class ResourceExhausted(UlcError):
    """The interpreter stack overflowed while walking a term."""

    operation: str

    def __str__(self) -> str:
        return (
            f"maximum recursion depth exceeded during {self.operation}; "
            "the term is nested too deeply"
        )


@dataclass
class StepLimitExceeded(UlcError):
    """A reduction budget ran out before a normal form was reached."""

    limit: int
    last: Expression

    def __str__(self) -> str:
        return f"no normal form reached within {self.limit} reduction steps"


@contextmanager
def recursion_guard(operation: str) -> Iterator[None]:
    """Report ``RecursionError`` inside the block as ``ResourceExhausted``."""
    try:
        yield
    except RecursionError as exc:
        raise ResourceExhausted(operation) from exc


__all__ = [
    "UlcError",
    "describe",
    "MalformedProgram",
    "ResourceExhausted",
    "StepLimitExceeded",
    "recursion_guard",
]
