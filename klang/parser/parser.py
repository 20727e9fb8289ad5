"""
Main parser entry point for KLang.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`klang.parser.expressions` and `klang.parser.statements`.

The parser pulls tokens from a `klang.lexer.Lexer` one at a time and looks
exactly one token ahead. It builds the whole program AST before anything is
evaluated and stops at the first error.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from klang.exceptions import UnexpectedTokenException
from klang.lexer import Lexer, TOKEN_LITERALS

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """KLang parser."""

    def __init__(self, lexer: Lexer, file: str | None = None):
        """
        Initialize the parser and read the first token.

        Parameters:
            lexer (Lexer): The token source.
            file (str): The name of the script.
        """
        self.lexer = lexer
        self.source_file = file if file is not None else lexer.file
        self.curr_token = self.lexer.next_token()

    def eat(self, token_type: str) -> None:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.

        Raises:
            UnexpectedTokenException: If the token does not match the expected type.
        """
        if self.curr_token.type == token_type:
            self.curr_token = self.lexer.next_token()
        else:
            raise UnexpectedTokenException(
                token_type,
                self.curr_token,
                self.source_file,
                literal=TOKEN_LITERALS.get(token_type),
            )

    def unexpected(self, expected: str) -> UnexpectedTokenException:
        """
        Build a syntax error for the current token.
        """
        return UnexpectedTokenException(expected, self.curr_token, self.source_file)


    # Expression wrappers
    def factor(self) -> tuple:
        """
        Parse a factor: an integer, a variable, or a parenthesized expression.
        """
        return _expr.parse_factor(self)

    def term(self) -> tuple:
        """
        Parse a term, a chain of multiplications and divisions.
        """
        return _expr.parse_term(self)

    def expr(self) -> tuple:
        """
        Parse an arithmetic expression, a chain of additions and subtractions.
        """
        return _expr.parse_expr(self)

    def simple_condition(self) -> tuple:
        """
        Parse a single comparison between two expressions.
        """
        return _expr.parse_simple_condition(self)

    def condition(self) -> tuple:
        """
        Parse comparisons joined by 'and' / 'or'.
        """
        return _expr.parse_condition(self)


    # Statement wrappers
    def body(self) -> list:
        """
        Parse the statements of a block up to and including 'end'.
        """
        return _stmt.parse_body(self)

    def statement(self) -> tuple:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_if(self) -> tuple:
        """
        Parse an 'if' conditional statement.
        """
        return _stmt.parse_if(self)

    def parse_while(self) -> tuple:
        """
        Parse a 'while' loop.
        """
        return _stmt.parse_while(self)

    def parse_for(self) -> tuple:
        """
        Parse a counting 'for' loop.
        """
        return _stmt.parse_for(self)

    def parse_assignment(self) -> tuple:
        """
        Parse a variable assignment.
        """
        return _stmt.parse_assignment(self)

    def parse_print(self) -> tuple:
        """
        Parse a 'print' statement.
        """
        return _stmt.parse_print(self)


    def parse(self) -> list:
        """
        Parse the full input into a list of statements.
        """
        statements = []
        while self.curr_token.type != 'EOF':
            statements.append(self.statement())
        return statements
