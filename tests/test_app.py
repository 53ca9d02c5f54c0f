"""Tests for the CLI."""
from calcapi.app import main


def test_main_prints_result(capsys):
    """Test a one-shot evaluation."""
    assert main(["2", "+", "2"]) == 0
    assert capsys.readouterr().out.strip() == "4.0"


def test_main_reports_error(capsys):
    """Test that failures exit with status 1."""
    assert main(["10 / 0"]) == 1
    assert "Error: Division by zero" in capsys.readouterr().err


def test_main_lenient_flag(capsys):
    """Test that --lenient tolerates unbalanced parentheses."""
    assert main(["--lenient", "(2 + 3"]) == 0
    assert capsys.readouterr().out.strip() == "5.0"


def test_main_trace_flag(capsys):
    """Test that --trace prints the evaluation trace."""
    assert main(["--trace", "1 + 1"]) == 0
    out = capsys.readouterr().out
    assert "=== Evaluation Trace ===" in out
    assert "postfix: 1.0 1.0 +" in out


def test_repl(monkeypatch, capsys):
    """Test the interactive prompt."""
    answers = iter(["3 * 3", "1 /", "q"])
    monkeypatch.setattr("builtins.input", lambda _prompt: next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "= 9.0" in out
    assert "Error: Missing operand for '/'" in out
