"""Standard Church-encoded definitions available with ``--prelude``."""

from __future__ import annotations

from functools import cache

from ulc.surface.parse import parse_program
from ulc.surface.syntax import SLet, SProgram

PRELUDE_SOURCE = r"""
let id = \x. x;
let const = \x y. x;
let true = \t f. t;
let false = \t f. f;
let if = \p a b. p a b;
let and = \p q. p q p;
let or = \p q. p p q;
let not = \p. p false true;
let succ = \n f x. f (n f x);
let add = \m n f x. m f (n f x);
let mul = \m n f. m (n f);
let pred = \n f x. n (\g h. h (g f)) (\u. x) (\u. u);
let sub = \m n. n pred m;
let is_zero = \n. n (\x. false) true;
let pair = \a b s. s a b;
let fst = \p. p true;
let snd = \p. p false;
"""


@cache
def prelude_statements() -> tuple[SLet, ...]:
    """Parse the prelude once and return its bindings in order."""
    program = parse_program(PRELUDE_SOURCE)
    return tuple(s for s in program.statements if isinstance(s, SLet))


def with_prelude(program: SProgram) -> SProgram:
    """Prepend the prelude bindings to ``program``."""
    return SProgram(statements=prelude_statements() + program.statements)


__all__ = ["PRELUDE_SOURCE", "prelude_statements", "with_prelude"]
