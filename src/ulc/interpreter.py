"""End-to-end pipeline: source text to normal form.

    1. ``parse_program`` turns text into a surface statement sequence.
    2. ``desugar_program`` folds it into one named core expression.
    3. ``resolve`` replaces names with de Bruijn indices.
    4. ``evaluate`` reduces the result in normal order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from itertools import islice

from ulc.core.ast import Expression
from ulc.core.reduce import evaluate, reduction_steps
from ulc.errors import MalformedProgram, StepLimitExceeded
from ulc.surface.desugar import desugar_program
from ulc.surface.parse import parse_program
from ulc.surface.prelude import with_prelude
from ulc.surface.resolve import resolve

logger = logging.getLogger(__name__)


def load(source: str, *, prelude: bool = False) -> Expression:
    """Parse, desugar and resolve ``source`` without reducing it."""
    program = parse_program(source)
    logger.debug("parsed %d statement(s)", len(program.statements))
    if prelude:
        program = with_prelude(program)
    try:
        named = desugar_program(program)
    except MalformedProgram as exc:
        if exc.source is None and exc.span is not None:
            exc.source = source
        raise
    term = resolve(named)
    logger.debug("resolved: %s", term)
    return term


def bounded_steps(
    term: Expression, max_steps: int | None = None
) -> Iterator[Expression]:
    """Yield the reduction steps of ``term``, at most ``max_steps`` of them.

    Raises ``StepLimitExceeded`` once the budget is spent and the last term is
    still reducible. ``None`` means no budget.
    """
    if max_steps is None:
        yield from reduction_steps(term)
        return
    if max_steps < 0:
        raise ValueError(f"Step budget must be non-negative, got {max_steps}")
    last = term
    for last in islice(reduction_steps(term), max_steps):
        yield last
    if last.is_reducible():
        raise StepLimitExceeded(max_steps, last)


def evaluate_bounded(term: Expression, max_steps: int) -> Expression:
    """Like ``evaluate`` but give up after ``max_steps`` reductions."""
    last = term
    for last in bounded_steps(term, max_steps):
        pass
    return last


def run(
    source: str, *, prelude: bool = False, max_steps: int | None = None
) -> Expression:
    """Evaluate the program in ``source`` and return its normal form."""
    term = load(source, prelude=prelude)
    if max_steps is None:
        result = evaluate(term)
    else:
        result = evaluate_bounded(term, max_steps)
    logger.info("result: %s", result)
    return result


__all__ = ["load", "bounded_steps", "evaluate_bounded", "run"]
