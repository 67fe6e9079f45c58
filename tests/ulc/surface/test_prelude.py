from ulc.surface.parse import parse_program
from ulc.surface.prelude import prelude_statements, with_prelude
from ulc.surface.syntax import SLet


def test_prelude_is_all_bindings() -> None:
    statements = prelude_statements()
    assert statements
    assert all(isinstance(s, SLet) for s in statements)


def test_prelude_names() -> None:
    names = [s.name for s in prelude_statements()]
    for name in ("id", "true", "false", "succ", "add", "pred", "pair", "fst"):
        assert name in names
    assert len(names) == len(set(names))


def test_prelude_is_parsed_once() -> None:
    assert prelude_statements() is prelude_statements()


def test_with_prelude_prepends() -> None:
    program = parse_program("id a")
    combined = with_prelude(program)
    assert combined.statements[: len(prelude_statements())] == prelude_statements()
    assert combined.statements[-1] == program.statements[-1]
