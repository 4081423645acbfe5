"""
Tests for the monkey-lex command line tool.
"""

import io
import logging
import sys
import os

import pytest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from monkey import __version__
from monkey.cli import main, build_parser, config_from_args, EXIT_OK, EXIT_ILLEGAL, EXIT_UNREADABLE
from monkey.lexer.config import WhitespaceMode, OverflowPolicy


@pytest.fixture(autouse=True)
def reset_monkey_logger():
    """Drop the handler main() attaches so it never outlives a captured stream."""
    yield
    logger = logging.getLogger("monkey")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def source_file(tmp_path):
    def write(text):
        path = tmp_path / "program.mk"
        path.write_text(text, encoding="utf-8")
        return str(path)
    return write


def test_prints_one_token_per_line(source_file, capsys):
    status = main([source_file("let x = 10 == 10;")])

    assert status == EXIT_OK
    assert capsys.readouterr().out.splitlines() == [
        "LET('let')",
        "IDENTIFIER('x')",
        "ASSIGN('=')",
        "INT('10' -> 10)",
        "EQUAL('==')",
        "INT('10' -> 10)",
        "SEMICOLON(';')",
        "EOF",
    ]


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("!x"))

    assert main(["-"]) == EXIT_OK
    assert capsys.readouterr().out.splitlines() == ["BANG('!')", "IDENTIFIER('x')", "EOF"]


def test_illegal_characters_reported_but_not_fatal(source_file, capsys, caplog):
    status = main([source_file("let # = 1;")])

    assert status == EXIT_OK
    assert "ILLEGAL('#')" in capsys.readouterr().out.splitlines()
    assert any("L001" in record.getMessage() for record in caplog.records)


def test_strict_stops_at_first_illegal(source_file, capsys, caplog):
    status = main(["--strict", source_file("let # = 1;")])

    assert status == EXIT_ILLEGAL
    assert capsys.readouterr().out.splitlines() == ["LET('let')"]
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "Comments are not supported" in errors[0].getMessage()


def test_missing_file(tmp_path, caplog):
    assert main([str(tmp_path / "nope.mk")]) == EXIT_UNREADABLE
    assert any("Cannot read" in record.getMessage() for record in caplog.records)


def test_lint_warns_on_keyword_typos(source_file, caplog):
    main(["--lint", source_file("let x = 1; retrun x;")])

    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "W001" in warnings[0]
    assert "return" in warnings[0]


def test_overflow_option(source_file, capsys):
    digits = "18446744073709551616"

    main(["--overflow", "saturate", source_file(digits)])
    assert capsys.readouterr().out.splitlines()[0] == f"INT('{digits}' -> {2 ** 64 - 1})"

    main(["--overflow", "illegal", source_file(digits)])
    assert capsys.readouterr().out.splitlines()[0] == f"ILLEGAL('{digits}')"


def test_ascii_whitespace_option(source_file, capsys):
    main(["--ascii-whitespace", source_file("x\N{NO-BREAK SPACE}y")])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "IDENTIFIER('x')"
    assert lines[1].startswith("ILLEGAL(")
    assert lines[2] == "IDENTIFIER('y')"


def test_config_from_args():
    args = build_parser().parse_args(["--ascii-whitespace", "--overflow", "illegal", "f.mk"])
    config = config_from_args(args)
    assert config.whitespace is WhitespaceMode.ASCII
    assert config.integer_overflow is OverflowPolicy.ILLEGAL

    config = config_from_args(build_parser().parse_args(["f.mk"]))
    assert config.whitespace is WhitespaceMode.UNICODE
    assert config.integer_overflow is OverflowPolicy.WIDEN


def test_verbose_and_quiet_are_exclusive():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-v", "-q", "f.mk"])


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out
