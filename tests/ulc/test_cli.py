import io
import sys
from pathlib import Path

import pytest

from ulc.cli import main


def _run(argv: list[str], capsys: pytest.CaptureFixture[str]) -> tuple[int, str, str]:
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_expr_option(capsys: pytest.CaptureFixture[str]) -> None:
    code, out, _ = _run(["-e", "(\\x. x) y"], capsys)
    assert code == 0
    assert out == "y\n"


def test_file_argument(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    program = tmp_path / "prog.lc"
    program.write_text("let id = \\x. x;\nid (\\a b. a)\n", encoding="utf-8")
    code, out, _ = _run([str(program)], capsys)
    assert code == 0
    assert out == "λa. λb. a\n"


def test_stdin(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("a b"))
    code, out, _ = _run([], capsys)
    assert code == 0
    assert out == "(a b)\n"


def test_ascii_output(capsys: pytest.CaptureFixture[str]) -> None:
    _, out, _ = _run(["--ascii", "-e", "\\x. x"], capsys)
    assert out == "\\x. x\n"


def test_indices_output(capsys: pytest.CaptureFixture[str]) -> None:
    _, out, _ = _run(["--indices", "-e", "\\x y. x free"], capsys)
    assert out == "λ. λ. (#1 free)\n"


def test_numeral_output(capsys: pytest.CaptureFixture[str]) -> None:
    _, out, _ = _run(["--prelude", "--numeral", "-e", "add 2 2"], capsys)
    assert out == "4\n"


def test_numeral_falls_back_to_term(capsys: pytest.CaptureFixture[str]) -> None:
    _, out, _ = _run(["--numeral", "-e", "a b"], capsys)
    assert out == "(a b)\n"


def test_trace_prints_each_step(capsys: pytest.CaptureFixture[str]) -> None:
    code, out, _ = _run(["--trace", "-e", "(\\x y. x) a b"], capsys)
    assert code == 0
    lines = out.splitlines()
    assert len(lines) == 3
    assert lines[0] == "(((λx. λy. x) a) b)"
    assert lines[1].endswith("((λy. a) b)")
    assert lines[2].endswith("a")


def test_step_limit(capsys: pytest.CaptureFixture[str]) -> None:
    code, out, err = _run(["--max-steps", "10", "-e", "(\\x. x x) (\\x. x x)"], capsys)
    assert code == 1
    assert out == ""
    assert "no normal form reached within 10 reduction steps" in err


def test_negative_step_limit_rejected(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as info:
        main(["-e", "a", "--max-steps", "-1"])
    assert info.value.code == 2
    assert "must be at least 0, got -1" in capsys.readouterr().err


def test_zero_recursion_limit_rejected(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as info:
        main(["-e", "a", "--recursion-limit", "0"])
    assert info.value.code == 2
    assert "must be at least 1" in capsys.readouterr().err


def test_trace_stops_at_step_limit(capsys: pytest.CaptureFixture[str]) -> None:
    code, out, err = _run(
        ["--trace", "--max-steps", "2", "-e", "(\\x. x x) (\\x. x x)"], capsys
    )
    assert code == 1
    assert len(out.splitlines()) == 3
    assert "within 2 reduction steps" in err


def test_syntax_error(capsys: pytest.CaptureFixture[str]) -> None:
    code, _, err = _run(["-e", "(a"], capsys)
    assert code == 1
    assert "<expr>" in err
    assert "Unexpected end of input" in err


def test_malformed_program(capsys: pytest.CaptureFixture[str]) -> None:
    code, _, err = _run(["-e", "let a = b"], capsys)
    assert code == 1
    assert "must end with an expression" in err


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as info:
        main([str(tmp_path / "missing.lc")])
    assert "cannot read" in str(info.value.code)
