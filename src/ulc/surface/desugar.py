"""Surface syntax desugaring.

Multi-parameter abstractions, n-ary applications, literals and ``let``
sequences are rewritten into the three-node core language. Every variable in
the output still carries only its name; ``resolve`` assigns the indices.
"""

from __future__ import annotations

from ulc.core.ast import (
    Abstraction,
    Application,
    Expression,
    Variable,
    mk_app,
    mk_lams,
)
from ulc.core.literals import church_character, church_numeral
from ulc.errors import MalformedProgram, recursion_guard
from ulc.surface.syntax import (
    SAbstraction,
    SApplication,
    SCharacter,
    SExpression,
    SLet,
    SNumber,
    SProgram,
    SurfaceTerm,
    SVariable,
)


def desugar(term: SurfaceTerm) -> Expression:
    """Translate one surface term into a named core expression."""
    with recursion_guard("desugaring"):
        return _desugar_term(term)


def _desugar_term(term: SurfaceTerm) -> Expression:
    match term:
        case SVariable(name=name):
            return Variable(None, name)
        case SAbstraction(parameters=parameters, body=body):
            if not parameters:
                raise MalformedProgram("Abstraction without parameters", term.span)
            return mk_lams(*parameters, body=_desugar_term(body))
        case SApplication(items=items):
            if not items:
                raise MalformedProgram("Application without expressions", term.span)
            head, *rest = items
            return mk_app(_desugar_term(head), *(_desugar_term(item) for item in rest))
        case SNumber(value=value):
            return church_numeral(value)
        case SCharacter(value=value):
            return church_character(value)

    raise TypeError(f"Unexpected surface term in desugar: {term!r}")


def desugar_program(program: SProgram) -> Expression:
    """Fold a statement sequence into a single expression.

    ``let v1 = e1; let v2 = e2; body`` becomes ``(λv1. (λv2. body) e2) e1``:
    every binding scopes over the statements after it, and ``e_i`` only sees
    the bindings before it.
    """
    if not program.statements:
        raise MalformedProgram("Program has no statements")
    *bindings, last = program.statements
    if not isinstance(last, SExpression):
        raise MalformedProgram(
            "Program must end with an expression, not a binding", last.span
        )
    with recursion_guard("desugaring"):
        result = _desugar_term(last.expression)
        for statement in reversed(bindings):
            match statement:
                case SLet(name=name, value=value):
                    result = Application(
                        Abstraction(name, result), _desugar_term(value)
                    )
                case SExpression():
                    raise MalformedProgram(
                        "Only the final statement may be an expression",
                        statement.span,
                    )
                case _:
                    raise TypeError(f"Unexpected statement: {statement!r}")
    return result


__all__ = ["desugar", "desugar_program"]
