"""Statement parsing utilities for KLang.

These functions operate on a `klang.parser.parser.Parser` instance and
handle the statement forms of the language: conditionals, loops,
assignments and print statements. Block bodies are a run of statements
closed by 'end'.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from klang.parser import Parser


def parse_body(parser: 'Parser') -> list:
    """
    Parse a block body terminated by 'end'.

    Syntax:
        <statement>* end

    Args:
        parser: The parser instance.

    Returns:
        list: The statements of the block, in source order.
    """
    statements = []
    while parser.curr_token.type not in ('END', 'EOF'):
        statements.append(parser.statement())
    parser.eat('END')
    return statements


def parse_statement(parser: 'Parser') -> tuple:
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        tuple: representing the AST node.
    """
    tok = parser.curr_token
    if tok.type == 'IF':
        return parser.parse_if()
    elif tok.type == 'WHILE':
        return parser.parse_while()
    elif tok.type == 'FOR':
        return parser.parse_for()
    elif tok.type == 'PRINT':
        return parser.parse_print()
    elif tok.type == 'ID':
        return parser.parse_assignment()
    else:
        raise parser.unexpected('a statement')


def parse_if(parser: 'Parser') -> tuple:
    """
    Parse a conditional 'if' statement. There is no else branch.

    Syntax:
        if <condition> then <statement>* end

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('if', condition, body)
    """
    parser.eat('IF')
    condition = parser.condition()
    parser.eat('THEN')
    return ('if', condition, parser.body())


def parse_while(parser: 'Parser') -> tuple:
    """
    Parse a 'while' loop.

    Syntax:
        while <condition> then <statement>* end

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('while', condition, body)
    """
    parser.eat('WHILE')
    condition = parser.condition()
    parser.eat('THEN')
    return ('while', condition, parser.body())


def parse_for(parser: 'Parser') -> tuple:
    """
    Parse a counting 'for' loop over an inclusive range.

    Syntax:
        for <identifier> = <expression> to <expression> <statement>* end

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('for', name, start, end, body)
    """
    parser.eat('FOR')
    id_tok = parser.curr_token
    parser.eat('ID')
    parser.eat('ASSIGN')
    start = parser.expr()
    parser.eat('TO')
    end = parser.expr()
    return ('for', id_tok.value, start, end, parser.body())


def parse_assignment(parser: 'Parser') -> tuple:
    """
    Parse an assignment. Binding a new name and rebinding an existing one
    share the same syntax.

    Syntax:
        <identifier> = <expression>

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('assign', name, expression)
    """
    id_tok = parser.curr_token
    parser.eat('ID')
    parser.eat('ASSIGN')
    return ('assign', id_tok.value, parser.expr())


def parse_print(parser: 'Parser') -> tuple:
    """
    Parse a 'print' statement.

    Syntax:
        print ( <expression> (, <expression>)* )

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('print', expressions)
    """
    parser.eat('PRINT')
    parser.eat('LPAREN')
    expressions = [parser.expr()]
    while parser.curr_token.type == 'COMMA':
        parser.eat('COMMA')
        expressions.append(parser.expr())
    parser.eat('RPAREN')
    return ('print', expressions)
