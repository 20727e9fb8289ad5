"""
Tests for 'while' and 'for' loops in KLang.
"""
import pytest

from klang.exceptions import UndefinedVariableException
from klang.interpreter import Interpreter

from klang.tests.utils import parse_source, run_source


def test_while_runtime(capsys):
    """
    Test that a while loop re-checks its condition before every iteration.
    """
    source = (
        "n = 1\n"
        "while n <= 3 then print(n) n = n + 1 end\n"
    )
    interpreter = run_source(source)
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['1', '2', '3']
    assert interpreter.lookup('n') == 4


def test_while_false_from_start(capsys):
    """
    Test that a while loop whose condition starts false never runs.
    """
    run_source("n = 5\nwhile n < 5 then print(n) end")
    assert capsys.readouterr().out == ""


def test_for_inclusive_range(capsys):
    """
    Test that 'for' runs once per value in the inclusive range.
    """
    interpreter = run_source("for i = 1 to 3 print(i) end")
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['1', '2', '3']
    assert interpreter.lookup('i') == 4


def test_for_empty_range(capsys):
    """
    Test that a start above the end runs zero iterations but still binds the variable.
    """
    interpreter = run_source("for i = 5 to 1 print(i) end")
    assert capsys.readouterr().out == ""
    assert interpreter.lookup('i') == 5


def test_for_single_iteration(capsys):
    """
    Test that equal bounds run exactly once.
    """
    interpreter = run_source("for i = 2 to 2 print(i) end")
    assert capsys.readouterr().out == "2\n"
    assert interpreter.lookup('i') == 3


def test_for_bounds_evaluated_once(capsys):
    """
    Test that changing the bound variables inside the body does not change the range.
    """
    source = (
        "lo = 1\n"
        "hi = 3\n"
        "for i = lo to hi\n"
        "    hi = hi + 10\n"
        "    lo = 100\n"
        "    print(i)\n"
        "end\n"
    )
    interpreter = run_source(source)
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['1', '2', '3']
    assert interpreter.lookup('hi') == 33


def test_for_bound_errors_raised_before_binding():
    """
    Test that both bounds are evaluated before the loop variable is bound.
    """
    ast = parse_source("for i = 1 to missing print(i) end")
    interpreter = Interpreter('<test>')
    with pytest.raises(UndefinedVariableException):
        interpreter.execute(ast)
    assert interpreter.symbols.get('i') is None


def test_for_body_can_advance_loop_variable(capsys):
    """
    Test that the loop variable is read back from the table each iteration.
    """
    interpreter = run_source("for i = 1 to 6 print(i) i = i + 1 end")
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['1', '3', '5']
    assert interpreter.lookup('i') == 7


def test_loop_variable_reuses_existing_binding(capsys):
    """
    Test that 'for' overwrites an existing variable in the shared scope.
    """
    interpreter = run_source("i = 100\nfor i = 1 to 2 end\nprint(i)")
    assert capsys.readouterr().out == "3\n"
    assert len(interpreter.symbols) == 1


def test_nested_loops(capsys):
    """
    Test nested for and while loops with a conditional inside.
    """
    source = (
        "total = 0\n"
        "for i = 1 to 3\n"
        "    j = 0\n"
        "    while j < i then\n"
        "        j = j + 1\n"
        "        if j == 2 or i == 1 then total = total + j end\n"
        "    end\n"
        "end\n"
        "print(total, i, j)\n"
    )
    run_source(source)
    assert capsys.readouterr().out == "5 4 3\n"


def test_loop_ast_is_reused_not_reparsed(capsys):
    """
    Test that executing the same AST twice gives the same output.
    """
    ast = parse_source("for k = 1 to 2 print(k) end")
    interpreter = Interpreter('<test>')
    interpreter.execute(ast)
    interpreter.execute(ast)
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['1', '2', '1', '2']
