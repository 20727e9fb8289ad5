"""
KLang Interpreter

This is the command line entry point for the KLang interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer turns the source text into tokens on demand.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.

Any error aborts the run: the error is reported on stderr as a single
``ErrorName: message`` line and the process exits with status 1.

Set ``KLANG_DEBUG`` to print the token stream and the parsed program before
execution.


File: cli.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
import os
import sys

from klang.exceptions import UnexpectedTokenException
from klang.interpreter import Interpreter
from klang.lexer import Lexer, tokenize
from klang.nodes import format_program
from klang.parser import Parser


def print_usage():
    """
    Print usage.
    """
    print()
    print("KLang Interpreter")
    print()
    print("Usage:")
    print("    klang <script.kl>")
    print()
    print("Arguments:")
    print("    <script.kl>")
    print("        Path to a KLang source file to execute.")
    print()
    print("Example:")
    print("    klang countdown.kl")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    KLANG_DEBUG")
    print("        When set, print the tokens and the parsed program before running.")


def report_error(error: Exception):
    """
    Report a fatal error on stderr.
    """
    print(f"{type(error).__name__}: {error}", file=sys.stderr)


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n", file=sys.stderr)
    print(tokens, file=sys.stderr)
    print("\nAST:\n", file=sys.stderr)
    print(format_program(ast), file=sys.stderr)


def run_source(code: str, script_name: str) -> int:
    """
    Run KLang source text and return the exit status.
    """
    try:
        interpreter = Interpreter(script_name)
        ast = Parser(Lexer(code, script_name), script_name).parse()

        if os.environ.get('KLANG_DEBUG'):
            debug_print_tokens_ast(tokenize(code, script_name), ast)

        interpreter.execute(ast)
    except Exception as e:
        report_error(e)
        return 1
    return 0


def run_script(script_name: str) -> int:
    """
    Run a KLang script and return the exit status.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError:
        print(f"Error: could not open file at {script_name}", file=sys.stderr)
        return 1
    return run_source(code, script_name)


def run_repl():
    """
    Run the interactive REPL.

    All inputs share one interpreter, so variables persist between lines.
    Input that stops in the middle of a statement (an open ``if ... then``
    block, for example) is buffered until the statement is complete.
    With ``KLANG_DEBUG`` set, each complete input is dumped before it runs.
    """
    print("KLang Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>")
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if not buffer and line.strip() in {"exit", "quit"}:
                break
            buffer.append(line)
            source = "\n".join(buffer)
            try:
                ast = Parser(Lexer(source, "<stdin>"), "<stdin>").parse()
                if os.environ.get('KLANG_DEBUG'):
                    debug_print_tokens_ast(tokenize(source, "<stdin>"), ast)
                interpreter.execute(ast)
                buffer.clear()
            except UnexpectedTokenException as e:
                if e.at_eof:
                    continue
                report_error(e)
                buffer.clear()
            except Exception as e:
                report_error(e)
                buffer.clear()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    if argv is None:
        argv = sys.argv
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1 and not args[0].startswith('-'):
        return run_script(args[0])
    print_usage()
    return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))
