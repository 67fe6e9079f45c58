"""Untyped lambda calculus: de Bruijn resolution and normal-order evaluation."""

from ulc.core.ast import Abstraction, Application, Expression, Variable
from ulc.core.reduce import evaluate, evaluate1, is_reducible
from ulc.errors import MalformedProgram, ResourceExhausted, UlcError
from ulc.interpreter import load, run
from ulc.surface.desugar import desugar, desugar_program
from ulc.surface.resolve import resolve

__all__ = [
    "Expression",
    "Variable",
    "Abstraction",
    "Application",
    "resolve",
    "evaluate",
    "evaluate1",
    "is_reducible",
    "desugar",
    "desugar_program",
    "load",
    "run",
    "UlcError",
    "MalformedProgram",
    "ResourceExhausted",
]
