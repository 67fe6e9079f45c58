from dataclasses import fields, is_dataclass

import pytest

from ulc.common.span import Span
from ulc.surface.parse import parse_program, parse_term
from ulc.surface.syntax import (
    SAbstraction,
    SApplication,
    SCharacter,
    SExpression,
    SLet,
    SNumber,
    SurfaceError,
    SurfaceTerm,
    SVariable,
)

_NO_SPAN = Span(0, 0)


def _strip_spans(node: object) -> object:
    if is_dataclass(node):
        data: dict[str, object] = {}
        for field in fields(node):
            if field.name != "span":
                data[field.name] = _strip_spans(getattr(node, field.name))
        return (type(node).__name__, data)
    if isinstance(node, tuple):
        return tuple(_strip_spans(item) for item in node)
    return node


def v(name: str) -> SVariable:
    return SVariable(_NO_SPAN, name)


def app(*items: SurfaceTerm) -> SApplication:
    return SApplication(_NO_SPAN, items)


def lam(*params: str, body: SurfaceTerm) -> SAbstraction:
    return SAbstraction(_NO_SPAN, params, body)


def _assert_parses(src: str, expected: SurfaceTerm) -> None:
    assert _strip_spans(parse_term(src)) == _strip_spans(expected)


def test_single_variable_is_one_item_application() -> None:
    _assert_parses("x", app(v("x")))


def test_juxtaposition_collects_items() -> None:
    _assert_parses("a b c", app(v("a"), v("b"), v("c")))


def test_parentheses_group() -> None:
    _assert_parses("a (b c)", app(v("a"), app(v("b"), v("c"))))


def test_multi_parameter_lambda() -> None:
    _assert_parses("λx y. x", lam("x", "y", body=app(v("x"))))


def test_backslash_lambda() -> None:
    _assert_parses("\\x. x", lam("x", body=app(v("x"))))


def test_primed_identifiers() -> None:
    _assert_parses("\\x'. x'", lam("x'", body=app(v("x'"))))
    _assert_parses("f x'' 'a'", app(v("f"), v("x''"), SCharacter(_NO_SPAN, "a")))


def test_lambda_body_extends_right() -> None:
    _assert_parses("\\x. x y", lam("x", body=app(v("x"), v("y"))))


def test_trailing_lambda_argument() -> None:
    _assert_parses("f \\x. x", app(v("f"), lam("x", body=app(v("x")))))


def test_literals() -> None:
    _assert_parses(
        "f 12 'a' '\\n'",
        app(
            v("f"),
            SNumber(_NO_SPAN, 12),
            SCharacter(_NO_SPAN, "a"),
            SCharacter(_NO_SPAN, "\n"),
        ),
    )


def test_comments_are_ignored() -> None:
    _assert_parses("# identity\nx # trailing", app(v("x")))


def test_program_statements() -> None:
    program = parse_program("let id = \\x. x;\nid y;")
    assert _strip_spans(program.statements) == _strip_spans(
        (
            SLet(_NO_SPAN, "id", lam("x", body=app(v("x")))),
            SExpression(_NO_SPAN, app(v("id"), v("y"))),
        )
    )


def test_program_may_end_with_binding() -> None:
    # rejected later by the desugarer, not by the parser
    program = parse_program("let a = b")
    assert isinstance(program.statements[-1], SLet)


def test_spans_cover_source() -> None:
    src = "let k = \\x y. x; k a b"
    program = parse_program(src)
    let, expr = program.statements
    assert let.span.extract(src) == "let k = \\x y. x"
    assert expr.span.extract(src) == "k a b"


def test_unexpected_character() -> None:
    with pytest.raises(SurfaceError, match="Unexpected character"):
        parse_term("x $ y")


def test_unexpected_token() -> None:
    with pytest.raises(SurfaceError, match="Unexpected token"):
        parse_term("\\. x")


def test_unexpected_end_of_input() -> None:
    with pytest.raises(SurfaceError, match="Unexpected end of input"):
        parse_term("(a b")


def test_empty_source() -> None:
    with pytest.raises(SurfaceError):
        parse_program("")


def test_parse_term_rejects_bindings() -> None:
    with pytest.raises(SurfaceError, match="single expression"):
        parse_term("let a = b; a")


def test_surface_error_shows_snippet() -> None:
    with pytest.raises(SurfaceError) as info:
        parse_term("a )")
    assert str(info.value) == "Unexpected token @ 1:3: ')'"


def test_surface_error_reports_line_and_column() -> None:
    with pytest.raises(SurfaceError) as info:
        parse_term("a\n  )")
    assert str(info.value) == "Unexpected token @ 2:3: ')'"


def test_surface_error_without_source_shows_offsets() -> None:
    assert str(SurfaceError("Oops", Span(3, 5))) == "Oops @ offset 3-5"
