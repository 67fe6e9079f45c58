"""Object-oriented abstract syntax tree nodes for the untyped lambda calculus."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Expression:
    """Base class for all lambda calculus terms.

    Terms are immutable: ``shifted`` and ``substituted`` (and every reduction
    helper) return a new root instead of rewriting the receiver.
    """

    # --- De Bruijn -------------------------------------------------------------
    def shifted(self, by: int, cutoff: int = 0) -> Expression:
        """Add ``by`` to every bound index ``>= cutoff``."""
        raise TypeError(f"Unexpected term in shifted: {self!r}")

    def substituted(self, j: int, term: Expression) -> Expression:
        """Replace every occurrence of index ``j`` with ``term``."""
        raise TypeError(f"Unexpected term in substituted: {self!r}")

    # --- Reduction ------------------------------------------------------------
    # Deferred imports keep the reduction engine in its own module.
    def is_reducible(self) -> bool:
        from .reduce import is_reducible

        return is_reducible(self)

    def evaluate1(self) -> Expression:
        from .reduce import evaluate1

        return evaluate1(self)

    def evaluate(self) -> Expression:
        from .reduce import evaluate

        return evaluate(self)

    # --- Display --------------------------------------------------------------
    def __str__(self) -> str:
        from .pretty import pretty

        return pretty(self)


@dataclass(frozen=True)
class Variable(Expression):
    """Variable occurrence.

    Args:
        index: De Bruijn index counting binders outward from the occurrence
            (``0`` is the innermost one), or ``None`` for a free variable.
        name: Source name. The only identity of a free variable.
    """

    index: int | None
    name: str

    def __post_init__(self) -> None:
        if self.index is not None and self.index < 0:
            raise ValueError("De Bruijn indices must be non-negative")

    @property
    def is_free(self) -> bool:
        return self.index is None

    def shifted(self, by: int, cutoff: int = 0) -> Expression:
        if self.index is None or self.index < cutoff:
            return self
        return Variable(self.index + by, self.name)

    def substituted(self, j: int, term: Expression) -> Expression:
        if self.index == j:
            return term
        return self


@dataclass(frozen=True)
class Abstraction(Expression):
    """Single-parameter lambda.

    Args:
        parameter: Binder name, kept for display only.
        body: Term evaluated with the bound argument in scope (index 0).
    """

    parameter: str
    body: Expression

    def shifted(self, by: int, cutoff: int = 0) -> Expression:
        return Abstraction(self.parameter, self.body.shifted(by, cutoff + 1))

    def substituted(self, j: int, term: Expression) -> Expression:
        return Abstraction(
            self.parameter, self.body.substituted(j + 1, term.shifted(1, 0))
        )


@dataclass(frozen=True)
class Application(Expression):
    """Function application.

    Args:
        callee: Term in function position.
        argument: Term supplied to ``callee``.
    """

    callee: Expression
    argument: Expression

    def shifted(self, by: int, cutoff: int = 0) -> Expression:
        return Application(
            self.callee.shifted(by, cutoff), self.argument.shifted(by, cutoff)
        )

    def substituted(self, j: int, term: Expression) -> Expression:
        return Application(
            self.callee.substituted(j, term), self.argument.substituted(j, term)
        )


def mk_app(fn: Expression, *args: Expression) -> Expression:
    """Apply ``args`` to ``fn`` left-associatively.

    Returns:
        ``(((fn arg0) arg1) ...)``, or ``fn`` itself when ``args`` is empty.
    """
    result = fn
    for arg in args:
        result = Application(result, arg)
    return result


def mk_lams(*parameters: str, body: Expression) -> Expression:
    """Build a right-nested lambda chain, first parameter outermost."""
    fn = body
    for parameter in reversed(parameters):
        fn = Abstraction(parameter, fn)
    return fn


__all__ = [
    "Expression",
    "Variable",
    "Abstraction",
    "Application",
    "mk_app",
    "mk_lams",
]
