"""Normal-order (leftmost-outermost) small-step reduction."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ulc.errors import recursion_guard

from .ast import Abstraction, Application, Expression, Variable

logger = logging.getLogger(__name__)


def beta(abstraction: Abstraction, argument: Expression) -> Expression:
    """Contract the redex ``(abstraction argument)``.

    The argument is lifted over the consumed binder before substitution, and
    the result is lowered again to close the gap that binder leaves behind.
    """
    substituted = abstraction.body.substituted(0, argument.shifted(1, 0))
    return substituted.shifted(-1, 0)


def is_reducible(term: Expression) -> bool:
    """Return ``True`` if ``evaluate1`` would rewrite ``term``.

    Only the callee spine is inspected: arguments and abstraction bodies are
    never reduced by this strategy.
    """
    match term:
        case Application(Abstraction(), _):
            return True
        case Application(Application() as callee, _):
            return is_reducible(callee)
        case Application() | Abstraction() | Variable():
            return False

    raise TypeError(f"Unexpected term in is_reducible: {term!r}")


def _step(term: Expression) -> Expression:
    match term:
        case Application(Abstraction() as fn, argument):
            return beta(fn, argument)
        case Application(Application() as callee, argument):
            reduced = _step(callee)
            return term if reduced is callee else Application(reduced, argument)
        case Application() | Abstraction() | Variable():
            return term

    raise TypeError(f"Unexpected term in evaluate1: {term!r}")


def evaluate1(term: Expression) -> Expression:
    """Perform a single reduction step, or return ``term`` if none applies."""
    with recursion_guard("reduction"):
        return _step(term)


def reduction_steps(term: Expression) -> Iterator[Expression]:
    """Yield every intermediate term on the way to the normal form.

    The starting term is not included. On a divergent term the iterator never
    ends, so callers wanting a budget should slice it.
    """
    step = 0
    with recursion_guard("reduction"):
        while is_reducible(term):
            term = _step(term)
            step += 1
            logger.debug("step %d: %s", step, term)
            yield term


def evaluate(term: Expression) -> Expression:
    """Reduce ``term`` until it is irreducible.

    There is no step bound: a term without a normal form keeps this call
    running forever.
    """
    for term in reduction_steps(term):
        pass
    return term


__all__ = ["beta", "is_reducible", "evaluate1", "reduction_steps", "evaluate"]
