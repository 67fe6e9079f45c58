"""Surface syntax AST and error helpers."""

from __future__ import annotations

from dataclasses import dataclass

from ulc.common.span import Span
from ulc.errors import UlcError, describe


@dataclass
class SurfaceError(UlcError):
    message: str
    span: Span
    source: str | None = None

    def __str__(self) -> str:
        return describe(self.message, self.span, self.source)


@dataclass(frozen=True)
class SurfaceTerm:
    span: Span


@dataclass(frozen=True)
class SVariable(SurfaceTerm):
    name: str


@dataclass(frozen=True)
class SAbstraction(SurfaceTerm):
    """``λp1 p2 ... pn. body``; parameter names may repeat."""

    parameters: tuple[str, ...]
    body: SurfaceTerm


@dataclass(frozen=True)
class SApplication(SurfaceTerm):
    """Juxtaposition ``e1 e2 ... en``, left-associative once desugared."""

    items: tuple[SurfaceTerm, ...]


@dataclass(frozen=True)
class SNumber(SurfaceTerm):
    value: int


@dataclass(frozen=True)
class SCharacter(SurfaceTerm):
    value: str


@dataclass(frozen=True)
class SStatement:
    span: Span


@dataclass(frozen=True)
class SLet(SStatement):
    """``let name = value``."""

    name: str
    value: SurfaceTerm


@dataclass(frozen=True)
class SExpression(SStatement):
    expression: SurfaceTerm


@dataclass(frozen=True)
class SProgram:
    statements: tuple[SStatement, ...]


__all__ = [
    "Span",
    "SurfaceError",
    "SurfaceTerm",
    "SVariable",
    "SAbstraction",
    "SApplication",
    "SNumber",
    "SCharacter",
    "SStatement",
    "SLet",
    "SExpression",
    "SProgram",
]
