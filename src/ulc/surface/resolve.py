"""Name resolution: binder names to de Bruijn indices."""

from __future__ import annotations

from dataclasses import dataclass

from ulc.core.ast import Abstraction, Application, Expression, Variable
from ulc.errors import recursion_guard


@dataclass
class NameEnv:
    """Visible binder names, innermost first."""

    locals: list[str]

    @staticmethod
    def empty() -> NameEnv:
        return NameEnv([])

    def push(self, name: str) -> None:
        self.locals.insert(0, name)

    def pop(self) -> None:
        self.locals.pop(0)

    def lookup(self, name: str) -> int | None:
        try:
            return self.locals.index(name)
        except ValueError:
            return None


def resolve(term: Expression, names: NameEnv | None = None) -> Expression:
    """Assign a de Bruijn index to every named variable in ``term``.

    A name bound by several enclosing abstractions refers to the nearest one.
    Names with no binder stay free (``index=None``). Variables that already
    carry an index are left alone, so resolution is idempotent and encoded
    literals pass through untouched.
    """
    with recursion_guard("name resolution"):
        return resolve_term(names if names is not None else NameEnv.empty(), term)


def resolve_term(names: NameEnv, term: Expression) -> Expression:
    match term:
        case Variable(None, name):
            return Variable(names.lookup(name), name)
        case Variable():
            return term
        case Abstraction(parameter, body):
            names.push(parameter)
            try:
                resolved = resolve_term(names, body)
            finally:
                names.pop()
            return Abstraction(parameter, resolved)
        case Application(callee, argument):
            return Application(
                resolve_term(names, callee), resolve_term(names, argument)
            )

    raise TypeError(f"Unexpected term in resolve: {term!r}")


__all__ = ["NameEnv", "resolve", "resolve_term"]
