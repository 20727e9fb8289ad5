"""Errors.

Every error raised by the lexer, parser and interpreter is fatal: it
propagates straight to the caller, which aborts the run and reports a single
message. Errors carry the offending character, token or name, never a
source position.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class InvalidCharacterException(Exception):
    """
    Error for characters the lexer cannot turn into a token.
    """
    def __init__(self, char, file=None):
        self.char = char
        message = f"Invalid character '{char}'"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class UnexpectedTokenException(SyntaxError):
    """
    Error for a token the parser did not expect.

    ``expected`` is the token type the parser wanted, or a short description
    when several types were acceptable. ``actual`` is the offending token.
    """
    def __init__(self, expected, actual, file=None, literal=None):
        self.expected = expected
        self.actual = actual
        wanted = f"token '{literal}' of type {expected}" if literal else expected
        message = (
            f"Expected {wanted}, but got value '{actual.value}' "
            f"of type {actual.type}"
        )
        if file is not None:
            message += f" in {file}"
        super().__init__(message)

    @property
    def at_eof(self) -> bool:
        """
        True when parsing ran out of input, i.e. the source is incomplete.
        """
        return self.actual.type == 'EOF'


class UndefinedVariableException(Exception):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, file=None):
        self.varname = varname
        message = f"Undefined variable '{varname}'"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class TypeMismatchException(TypeError):
    """
    Error for rebinding a variable with a value of a different type.
    """
    def __init__(self, varname, expected, actual, file=None):
        self.varname = varname
        self.expected = expected
        self.actual = actual
        message = (
            f"Cannot rebind '{varname}' of type {expected} "
            f"to a value of type {actual}"
        )
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class DivisionByZeroException(ZeroDivisionError):
    """
    Error for integer division by zero.
    """
    def __init__(self, expr=None, file=None):
        self.expr = expr
        message = "Division by zero"
        if expr is not None:
            message += f" in expression {expr}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)
