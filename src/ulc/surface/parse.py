"""Parser for the surface language."""

from __future__ import annotations

from typing import cast

import ply.lex as lex  # type: ignore[import-untyped]
import ply.yacc as yacc  # type: ignore[import-untyped]

from ulc.surface.syntax import (
    Span,
    SurfaceError,
    SurfaceTerm,
    SVariable,
    SAbstraction,
    SApplication,
    SNumber,
    SCharacter,
    SStatement,
    SLet,
    SExpression,
    SProgram,
)

_SOURCE: str = ""

reserved = {
    "let": "LET",
}

tokens = (
    "IDENT",
    "INT",
    "CHAR",
    "LAMBDA",
    "DOT",
    "EQUALS",
    "SEMI",
    "LPAREN",
    "RPAREN",
    *tuple(reserved.values()),
)

t_LAMBDA = r"\\|λ"
t_DOT = r"\."
t_EQUALS = r"="
t_SEMI = r";"
t_LPAREN = r"\("
t_RPAREN = r"\)"

t_ignore = " \t\r"
t_ignore_COMMENT = r"\#[^\n]*"

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "0": "\0", "\\": "\\", "'": "'"}


def t_newline(t: lex.LexToken) -> None:
    r"\n+"
    t.lexer.lineno += len(t.value)


def t_CHAR(t: lex.LexToken) -> lex.LexToken:
    r"'(?:\\.|[^\\'\n])'"
    t.end = t.lexpos + len(t.value)
    body = t.value[1:-1]
    if body.startswith("\\"):
        if body[1] not in _ESCAPES:
            span = Span(t.lexpos, t.end)
            raise SurfaceError(f"Unknown escape sequence {body!r}", span, _SOURCE)
        body = _ESCAPES[body[1]]
    t.value = body
    return t


def t_INT(t: lex.LexToken) -> lex.LexToken:
    r"\d+"
    t.end = t.lexpos + len(t.value)
    t.value = int(t.value)
    return t


def t_IDENT(t: lex.LexToken) -> lex.LexToken:
    r"[A-Za-z_][A-Za-z0-9_']*"
    t.type = reserved.get(t.value, "IDENT")
    t.end = t.lexpos + len(t.value)
    return t


def t_error(t: lex.LexToken) -> None:
    span = Span(t.lexpos, t.lexpos + 1)
    raise SurfaceError(f"Unexpected character {t.value[0]!r}", span, _SOURCE)


def _tok_span(tok: lex.LexToken) -> Span:
    end = getattr(tok, "end", tok.lexpos + len(str(tok.value)))
    return Span(tok.lexpos, end)


def _item_span(p: yacc.YaccProduction, index: int) -> Span:
    value = p[index]
    if isinstance(value, (SurfaceTerm, SStatement)):
        return value.span
    if isinstance(value, tuple) and value and isinstance(value[0], SurfaceTerm):
        return value[0].span + value[-1].span
    tok = cast(lex.LexToken, p.slice[index])
    return _tok_span(tok)


def _span(p: yacc.YaccProduction, start: int, end: int) -> Span:
    start_span = _item_span(p, start)
    end_span = _item_span(p, end)
    return Span(start_span.start, end_span.end)


def p_program(p: yacc.YaccProduction) -> None:
    "program : statements"
    p[0] = SProgram(statements=p[1])


def p_program_trailing_semi(p: yacc.YaccProduction) -> None:
    "program : statements SEMI"
    p[0] = SProgram(statements=p[1])


def p_statements_multi(p: yacc.YaccProduction) -> None:
    "statements : statements SEMI statement"
    p[0] = p[1] + (p[3],)


def p_statements_single(p: yacc.YaccProduction) -> None:
    "statements : statement"
    p[0] = (p[1],)


def p_statement_let(p: yacc.YaccProduction) -> None:
    "statement : LET IDENT EQUALS term"
    span = _span(p, 1, 4)
    p[0] = SLet(span=span, name=p[2], value=p[4])


def p_statement_expression(p: yacc.YaccProduction) -> None:
    "statement : term"
    p[0] = SExpression(span=p[1].span, expression=p[1])


def p_term_lambda(p: yacc.YaccProduction) -> None:
    "term : LAMBDA params DOT term"
    span = _span(p, 1, 4)
    p[0] = SAbstraction(span=span, parameters=p[2], body=p[4])


def p_term_app_lambda(p: yacc.YaccProduction) -> None:
    "term : app LAMBDA params DOT term"
    lam_span = _span(p, 2, 5)
    lam = SAbstraction(span=lam_span, parameters=p[3], body=p[5])
    items = p[1] + (lam,)
    p[0] = SApplication(span=items[0].span + lam_span, items=items)


def p_term_app(p: yacc.YaccProduction) -> None:
    "term : app"
    p[0] = SApplication(span=_item_span(p, 1), items=p[1])


def p_params_multi(p: yacc.YaccProduction) -> None:
    "params : params IDENT"
    p[0] = p[1] + (p[2],)


def p_params_single(p: yacc.YaccProduction) -> None:
    "params : IDENT"
    p[0] = (p[1],)


def p_app_chain(p: yacc.YaccProduction) -> None:
    "app : app atom"
    p[0] = p[1] + (p[2],)


def p_app_atom(p: yacc.YaccProduction) -> None:
    "app : atom"
    p[0] = (p[1],)


def p_atom_ident(p: yacc.YaccProduction) -> None:
    "atom : IDENT"
    p[0] = SVariable(span=_span(p, 1, 1), name=p[1])


def p_atom_int(p: yacc.YaccProduction) -> None:
    "atom : INT"
    p[0] = SNumber(span=_span(p, 1, 1), value=p[1])


def p_atom_char(p: yacc.YaccProduction) -> None:
    "atom : CHAR"
    p[0] = SCharacter(span=_span(p, 1, 1), value=p[1])


def p_atom_paren(p: yacc.YaccProduction) -> None:
    "atom : LPAREN term RPAREN"
    p[0] = p[2]


def p_error(p: lex.LexToken | None) -> None:
    if p is None:
        span = Span(len(_SOURCE), len(_SOURCE))
        raise SurfaceError("Unexpected end of input", span, _SOURCE)
    span = _tok_span(cast(lex.LexToken, p))
    raise SurfaceError("Unexpected token", span, _SOURCE)


_PARSER = None


def parse_program(source: str) -> SProgram:
    """Parse ``source`` as a ``;``-separated sequence of statements."""
    global _SOURCE, _PARSER
    _SOURCE = source
    lexer = lex.lex()
    if _PARSER is None:
        _PARSER = yacc.yacc(start="program", debug=False, write_tables=False)
    program = cast(SProgram, _PARSER.parse(source, lexer=lexer))
    if program is None:
        span = Span(len(source), len(source))
        raise SurfaceError("Unexpected end of input", span, source)
    return program


def parse_term(source: str) -> SurfaceTerm:
    """Parse ``source`` as a single expression without bindings."""
    program = parse_program(source)
    match program.statements:
        case (SExpression(expression=expression),):
            return expression
        case (statement, *_):
            raise SurfaceError("Expected a single expression", statement.span, source)
    span = Span(0, len(source))
    raise SurfaceError("Expected a single expression", span, source)


__all__ = ["parse_program", "parse_term"]
