"""
Tests for the KLang parser: AST shape, precedence and syntax errors.
"""
import pytest

from klang.exceptions import UnexpectedTokenException
from klang.operations import Op

from klang.tests.utils import parse_source


def test_precedence_and_left_associativity():
    """
    Test that '*' binds tighter than '+' and operators fold to the left.
    """
    ast = parse_source("x = 1 + 2 * 3 - 4")
    assert ast == [
        ('assign', 'x',
         ('binop', Op.SUB,
          ('binop', Op.ADD,
           ('number', 1),
           ('binop', Op.MUL, ('number', 2), ('number', 3))),
          ('number', 4))),
    ]


def test_parentheses_group():
    """
    Test that parentheses override precedence without adding a node.
    """
    ast = parse_source("x = (a + b) / c")
    assert ast[0][2] == (
        'binop', Op.DIV,
        ('binop', Op.ADD, ('ident', 'a'), ('ident', 'b')),
        ('ident', 'c'),
    )


def test_logical_operators_fold_left_to_right():
    """
    Test that 'and' and 'or' share one precedence level.
    """
    ast = parse_source("if a > 1 or b < 2 and c == 3 then end")
    cond = ast[0][1]
    assert cond[0] == 'logical'
    assert cond[1] == Op.AND
    assert cond[2][0] == 'logical'
    assert cond[2][1] == Op.OR
    assert cond[3] == ('compare', Op.EQ, ('ident', 'c'), ('number', 3))


def test_statement_forms():
    """
    Test the AST produced for each statement form.
    """
    ast = parse_source(
        "n = 1\n"
        "while n <= 3 then\n"
        "    print(n, n * 2)\n"
        "    n = n + 1\n"
        "end\n"
        "for i = 1 to n end\n"
        "if n != 0 then print(n) end\n"
    )
    assert [stmt[0] for stmt in ast] == ['assign', 'while', 'for', 'if']

    loop = ast[1]
    assert loop[1] == ('compare', Op.LE, ('ident', 'n'), ('number', 3))
    assert [stmt[0] for stmt in loop[2]] == ['print', 'assign']
    assert loop[2][0][1] == [('ident', 'n'), ('binop', Op.MUL, ('ident', 'n'), ('number', 2))]

    assert ast[2] == ('for', 'i', ('number', 1), ('ident', 'n'), [])
    assert ast[3][2] == [('print', [('ident', 'n')])]


def test_nested_blocks():
    """
    Test that 'end' closes the innermost block.
    """
    ast = parse_source(
        "for i = 1 to 2\n"
        "    if i == 2 then\n"
        "        print(i)\n"
        "    end\n"
        "    print(0)\n"
        "end\n"
    )
    body = ast[0][4]
    assert [stmt[0] for stmt in body] == ['if', 'print']


@pytest.mark.parametrize("source, expected, actual", [
    ("x = ", "an integer, identifier or (", "EOF"),
    ("x = 1 +", "an integer, identifier or (", "EOF"),
    ("print(1", "RPAREN", "EOF"),
    ("print 1", "LPAREN", "INTEGER"),
    ("if 1 then end", "a comparison operator", "THEN"),
    ("if 1 < 2 < 3 then end", "THEN", "LESS"),
    ("if 1 < 2 print(1) end", "THEN", "PRINT"),
    ("while x > 0 then", "END", "EOF"),
    ("for i = 1 3 end", "TO", "INTEGER"),
    ("for 1 = 1 to 3 end", "ID", "INTEGER"),
    ("end", "a statement", "END"),
    ("1 = x", "a statement", "INTEGER"),
    ("x == 1", "ASSIGN", "EQUAL_TO"),
    ("x = (1 + 2", "RPAREN", "EOF"),
])
def test_syntax_errors(source, expected, actual):
    """
    Test that malformed programs fail on the first unexpected token.
    """
    with pytest.raises(UnexpectedTokenException) as excinfo:
        parse_source(source)
    assert excinfo.value.expected == expected
    assert excinfo.value.actual.type == actual


def test_syntax_error_is_a_syntax_error():
    """
    Test that parse failures can be caught as the builtin SyntaxError.
    """
    with pytest.raises(SyntaxError, match="Expected token '\\)' of type RPAREN"):
        parse_source("print(1 2)")


def test_incomplete_input_reports_eof():
    """
    Test that running out of input is distinguishable from a bad token.
    """
    with pytest.raises(UnexpectedTokenException) as excinfo:
        parse_source("if x > 1 then print(x)")
    assert excinfo.value.at_eof

    with pytest.raises(UnexpectedTokenException) as excinfo:
        parse_source("if x > 1 then print(x) ) end")
    assert not excinfo.value.at_eof


def test_integer_literal_text_converted():
    """
    Test that integer tokens keep their text and the parser makes the number.
    """
    ast = parse_source("x = 007 + 10")
    assert ast[0][2] == ('binop', Op.ADD, ('number', 7), ('number', 10))
