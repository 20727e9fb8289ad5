"""KLang: a tree-walking interpreter for a small imperative scripting language.

The pipeline is lexer -> parser -> interpreter. :func:`run` is the
one-call entry point for executing source text.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from klang.interpreter import Interpreter
from klang.lexer import Lexer, Token, tokenize
from klang.parser import Parser
from klang.symbols import SymbolTable, TypeTag

__version__ = "0.1.0"


def run(source: str, file: str = "<string>", stream=None) -> Interpreter:
    """
    Execute KLang source and return the interpreter it ran on.
    """
    interpreter = Interpreter(file, stream)
    interpreter.run(source)
    return interpreter


__all__ = [
    "Interpreter",
    "Lexer",
    "Parser",
    "SymbolTable",
    "Token",
    "TypeTag",
    "run",
    "tokenize",
]
