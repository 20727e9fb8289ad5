"""
Utility functions shared across KLang tests.
"""
from klang.interpreter import Interpreter
from klang.lexer import Lexer
from klang.parser import Parser


def parse_source(source: str) -> list:
    """
    Parse source code and return the AST.
    """
    parser = Parser(Lexer(source, "<test>"), "<test>")
    return parser.parse()


def run_source(source: str) -> Interpreter:
    """
    Parse and execute source code, returning the interpreter after execution.
    """
    interpreter = Interpreter("<test>")
    interpreter.execute(parse_source(source))
    return interpreter


def kinds(tokens) -> list[str]:
    """
    Return just the token types of a token list.
    """
    return [tok.type for tok in tokens]
