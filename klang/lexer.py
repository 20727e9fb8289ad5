"""Lexer for KLang.

The lexer is pull-based: each call to :meth:`Lexer.next_token` matches a
combined regular expression of named groups at the current position and
returns exactly one :class:`Token`. Consumption is destructive, the position
only ever advances, and once the text is exhausted every further call
returns an ``EOF`` token.

Whitespace (newlines included) is skipped. There is no comment syntax.
Identifiers are matched first and then checked against the keyword table,
so ``print`` is a keyword while ``printer`` and ``Print`` are identifiers.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re

from klang.exceptions import InvalidCharacterException


class Token:
    """
    Represents a lexical token with a type and value.
    """
    def __init__(self, type_, value):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            value (Any): The token value.
        """
        self.type = type_
        self.value = value

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value})"


token_specification: list[tuple[str, str]] = [
    # Literals
    ('INTEGER',          r'[0-9]+'),

    # Identifiers (keywords are split out after matching)
    ('ID',               r'[A-Za-z][A-Za-z0-9_]*'),

    # Comparison operators
    ('EQUAL_TO',         r'=='),
    ('NOT_EQUAL_TO',     r'!='),
    ('GREATER_OR_EQUAL', r'>='),
    ('LESS_OR_EQUAL',    r'<='),
    ('GREATER',          r'>'),
    ('LESS',             r'<'),

    # Assignment
    ('ASSIGN',           r'='),

    # Arithmetic operators
    ('PLUS',             r'\+'),
    ('MINUS',            r'-'),
    ('MUL',              r'\*'),
    ('DIV',              r'/'),

    # Delimiters
    ('LPAREN',           r'\('),
    ('RPAREN',           r'\)'),
    ('COMMA',            r','),

    # Miscellaneous
    ('SKIP',             r'\s+'),
    ('MISMATCH',         r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification),
    re.DOTALL,
)

KEYWORDS: dict[str, str] = {
    'print': 'PRINT',
    'if':    'IF',
    'then':  'THEN',
    'end':   'END',
    'and':   'AND',
    'or':    'OR',
    'for':   'FOR',
    'to':    'TO',
    'while': 'WHILE',
}

# Literal spelling of each fixed token type, used for error hints.
TOKEN_LITERALS: dict[str, str] = {
    name: re.sub(r'\\', '', pattern)
    for name, pattern in token_specification
    if name not in ('INTEGER', 'ID', 'SKIP', 'MISMATCH')
}
TOKEN_LITERALS.update({kind: word for word, kind in KEYWORDS.items()})


class Lexer:
    """
    Pull-based tokenizer over a single source string.
    """
    def __init__(self, text: str, file: str | None = None):
        """
        Initialize the lexer.

        Parameters:
            text (str): The source code to tokenize.
            file (str): The name of the script, used in error messages.
        """
        self.text = text
        self.position = 0
        self.file = file

    def next_token(self) -> Token:
        """
        Consume and return the next token.

        Returns:
            Token: The next token, or an ``EOF`` token once the text is exhausted.

        Raises:
            InvalidCharacterException: If an unexpected character is encountered,
                including a ``!`` that is not followed by ``=``.
        """
        while self.position < len(self.text):
            match_obj = TOKEN_REGEX.match(self.text, self.position)
            kind = match_obj.lastgroup
            value = match_obj.group()
            self.position = match_obj.end()

            if kind == 'SKIP':
                continue
            if kind == 'MISMATCH':
                raise InvalidCharacterException(value, self.file)

            if kind == 'ID':
                return Token(KEYWORDS.get(value, 'ID'), value)
            return Token(kind, value)

        return Token('EOF', None)

    def __iter__(self):
        """
        Yield tokens up to and including ``EOF``.
        """
        while True:
            token = self.next_token()
            yield token
            if token.type == 'EOF':
                return


def tokenize(code: str, file: str | None = None) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        file (str): The name of the script, used in error messages.

    Returns:
        list[Token]: A list of Token instances, terminated by ``EOF``.

    Raises:
        InvalidCharacterException: If an unexpected character is encountered.
    """
    return list(Lexer(code, file))
