"""Church encodings for numeric and character literals."""

from __future__ import annotations

from .ast import Abstraction, Application, Expression, Variable
from .reduce import evaluate


def church_numeral(n: int) -> Expression:
    """Return ``λf. λx. f (f (... x))`` with ``n`` applications of ``f``.

    The result is closed and already indexed: ``f`` is ``#1`` and ``x`` is
    ``#0`` throughout the body.
    """
    if n < 0:
        raise ValueError("Church numerals must be non-negative")
    body: Expression = Variable(0, "x")
    for _ in range(n):
        body = Application(Variable(1, "f"), body)
    return Abstraction("f", Abstraction("x", body))


def church_character(char: str) -> Expression:
    """Encode a single character as the Church numeral of its code point."""
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")
    return church_numeral(ord(char))


# Not valid identifiers in the surface language, so user terms cannot capture them.
_SUCC = Variable(None, "#succ")
_ZERO = Variable(None, "#zero")


def church_to_int(term: Expression) -> int | None:
    """Decode ``term`` as a Church numeral, or return ``None`` if it is not one.

    Reduction stops at abstractions and never touches arguments, so results
    such as ``add 2 3`` are not syntactically numerals yet. Instead the term is
    applied to two opaque free variables and the resulting spine is counted,
    evaluating each argument in turn. A term that diverges when applied this
    way makes this call diverge as well.
    """
    probe = evaluate(Application(Application(term, _SUCC), _ZERO))
    count = 0
    while True:
        match probe:
            case Variable(None, "#zero"):
                return count
            case Application(Variable(None, "#succ"), inner):
                count += 1
                probe = evaluate(inner)
            case _:
                return None


__all__ = ["church_numeral", "church_character", "church_to_int"]
