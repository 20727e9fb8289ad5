"""
Expression parsing utilities for KLang.

These functions operate on a `klang.parser.parser.Parser` instance and
implement the recursive descent logic for arithmetic expressions and
conditions, maintaining operator precedence and left associativity.

Conditions sit above expressions: a simple condition is exactly one
comparison between two expressions, and a condition joins simple conditions
with 'and' / 'or'. Both logical operators share one precedence level and
fold strictly left to right.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from klang.operations import ARITHMETIC_OPS, COMPARISON_OPS, LOGICAL_OPS

if TYPE_CHECKING:
    from klang.parser import Parser


# ---- Highest precedence ----

def parse_factor(parser: 'Parser') -> tuple:
    """Parse a factor such as a literal, variable, or parenthesized expression."""
    tok = parser.curr_token

    if tok.type == 'INTEGER':
        parser.eat('INTEGER')
        return ('number', int(tok.value))

    if tok.type == 'ID':
        parser.eat('ID')
        return ('ident', tok.value)

    if tok.type == 'LPAREN':
        parser.eat('LPAREN')
        node = parser.expr()
        parser.eat('RPAREN')
        return node

    raise parser.unexpected('an integer, identifier or (')


def parse_term(parser: 'Parser') -> tuple:
    """Parse multiplication and division expressions."""
    result = parser.factor()
    while parser.curr_token.type in ('MUL', 'DIV'):
        op_tok = parser.curr_token
        parser.eat(op_tok.type)
        result = ('binop', ARITHMETIC_OPS[op_tok.type], result, parser.factor())
    return result


def parse_expr(parser: 'Parser') -> tuple:
    """Parse addition and subtraction expressions."""
    result = parser.term()
    while parser.curr_token.type in ('PLUS', 'MINUS'):
        op_tok = parser.curr_token
        parser.eat(op_tok.type)
        result = ('binop', ARITHMETIC_OPS[op_tok.type], result, parser.term())
    return result


# ---- Conditions ----

def parse_simple_condition(parser: 'Parser') -> tuple:
    """Parse exactly one comparison (==, !=, <, >, <=, >=)."""
    left = parser.expr()
    op_tok = parser.curr_token
    if op_tok.type not in COMPARISON_OPS:
        raise parser.unexpected('a comparison operator')
    parser.eat(op_tok.type)
    return ('compare', COMPARISON_OPS[op_tok.type], left, parser.expr())


def parse_condition(parser: 'Parser') -> tuple:
    """Parse comparisons joined by the 'and' / 'or' keywords."""
    result = parser.simple_condition()
    while parser.curr_token.type in ('AND', 'OR'):
        op_tok = parser.curr_token
        parser.eat(op_tok.type)
        result = ('logical', LOGICAL_OPS[op_tok.type], result, parser.simple_condition())
    return result
