import io

from toycc.repl import main, run
from toycc.syntax import Function, Prototype, VariableExpr


def test_log_of_successful_session():
    log = io.StringIO()
    run(io.StringIO("def f(x) x; extern g(); a"), log)
    assert log.getvalue() == (
        "ready> ready> Parsed a function definition.\n"
        "ready> ready> Parsed an extern\n"
        "ready> ready> Parsed a top-level expr\n"
        "ready> "
    )


def test_results_are_returned_in_order():
    results = run(io.StringIO("def f(x) x; extern g(); a"), io.StringIO())
    assert results == [
        Function(Prototype("f", ["x"]), VariableExpr("x")),
        Prototype("g"),
        Function(Prototype("__anon_expr"), VariableExpr("a")),
    ]


def test_error_recovery_skips_a_token():
    log = io.StringIO()
    results = run(io.StringIO("def 1 x"), log)
    assert "Error: Expected function name in prototype\n" in log.getvalue()
    assert results == [Function(Prototype("__anon_expr"), VariableExpr("x"))]


def test_empty_input_only_prompts():
    log = io.StringIO()
    assert run(io.StringIO(""), log) == []
    assert log.getvalue() == "ready> ready> "


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("extern sin(a)"))
    assert main([]) == 0
    assert "Parsed an extern\n" in capsys.readouterr().err