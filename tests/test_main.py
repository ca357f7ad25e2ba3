import io

from lox.__main__ import EX_DATAERR, EX_USAGE, main
from tests.test_util import ROOT


def data(filename: str) -> str:
    return f"{ROOT}/data/{filename}"


def test_run_file(capsys):
    assert main([data("valid/grouping.lox")]) == 0
    out, err = capsys.readouterr()
    assert out == "(* (- 123.0) (group 45.67))\n"
    assert err == ""


def test_run_file_tokens(capsys):
    assert main([data("valid/arithmetic.lox"), "--tokens"]) == 0
    out, _ = capsys.readouterr()
    assert out.splitlines() == [
        "NUMBER 1 1.0",
        "PLUS + None",
        "NUMBER 2 2.0",
        "STAR * None",
        "NUMBER 3 3.0",
        "EOF  None",
    ]


def test_run_file_scanner_error(capsys):
    assert main([data("scannerError/UnexpectedCharacterError.lox")]) == EX_DATAERR
    out, err = capsys.readouterr()
    assert out == ""
    assert err == "[line 3] Error: Unexpected character: '@'\n"


def test_run_file_parser_error(capsys):
    assert main([data("parserError/ParseError_unclosed.lox")]) == EX_DATAERR
    out, err = capsys.readouterr()
    assert out == ""
    assert err == "[line 2] Error at end: Expect ')' after expression.\n"


def test_usage(capsys):
    assert main(["a.lox", "b.lox"]) == EX_USAGE
    out, _ = capsys.readouterr()
    assert out == "Usage: lox [script]\n"


def test_prompt(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 + 2\n(\n!true\n"))
    assert main([]) == 0
    out, err = capsys.readouterr()
    assert out == "> (+ 1.0 2.0)\n> > (! true)\n> \n"
    assert err == "[line 2] Error at end: Expect expression.\n"


def test_run_file_too_deep_to_print(capsys, tmp_path):
    script = tmp_path / "deep.lox"
    script.write_text("-" * 3000 + "1\n", encoding="utf8")
    assert main([str(script)]) == EX_DATAERR
    out, err = capsys.readouterr()
    assert out == ""
    assert err == "Error: Expression too deeply nested to print.\n"


def test_prompt_too_deep(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("(" * 600 + "1" + ")" * 600 + "\n" + "-" * 3000 + "1\n2\n"))
    assert main([]) == 0
    out, err = capsys.readouterr()
    assert out == "> > > 2.0\n> \n"
    assert err == (
        "[line 1] Error at '(': Expression too deeply nested.\n"
        "Error: Expression too deeply nested to print.\n"
    )
