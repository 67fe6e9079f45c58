"""Pretty-printing utilities for lambda calculus terms."""

from __future__ import annotations

from .ast import Abstraction, Application, Expression, Variable

LAMBDA = "λ"
ASCII_LAMBDA = "\\"


def _maybe_paren(text: str, term: Expression) -> str:
    if isinstance(term, Abstraction):
        return f"({text})"
    return text


def pretty(term: Expression, *, ascii: bool = False) -> str:
    """Return the surface rendering of ``term``.

    Applications are always parenthesised as ``(f x)``. Abstractions print
    their retained parameter name and are wrapped in parentheses only in
    callee position, where the body would otherwise swallow the argument.
    Variables print by name; indices are never shown.
    """
    lam = ASCII_LAMBDA if ascii else LAMBDA

    def fmt(t: Expression) -> str:
        match t:
            case Variable(_, name):
                return name
            case Abstraction(parameter, body):
                return f"{lam}{parameter}. {fmt(body)}"
            case Application(callee, argument):
                return f"({_maybe_paren(fmt(callee), callee)} {fmt(argument)})"

        raise TypeError(f"Cannot pretty-print unknown term: {t!r}")

    return fmt(term)


def debug(term: Expression) -> str:
    """Render ``term`` with bound variables replaced by ``#index``."""

    match term:
        case Variable(None, name):
            return name
        case Variable(index, _):
            return f"#{index}"
        case Abstraction(_, body):
            return f"{LAMBDA}. {debug(body)}"
        case Application(callee, argument):
            callee_text = debug(callee)
            if isinstance(callee, Abstraction):
                callee_text = f"({callee_text})"
            return f"({callee_text} {debug(argument)})"

    raise TypeError(f"Cannot pretty-print unknown term: {term!r}")


__all__ = ["pretty", "debug"]
