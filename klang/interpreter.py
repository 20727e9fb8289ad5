"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
integer arithmetic, variables, comparisons, short-circuit boolean logic, conditionals, loops,
and print statements.

1. Execution Model
The interpreter evaluates an abstract syntax tree (AST) in a top-down, recursive manner.
Statements are executed via the `execute()` method, and expressions are evaluated using
`eval_expr()`. Both dispatch with a single `match` over the node tag, and every evaluation
returns its value directly to the caller. The walk is synchronous and depth-first.

2. Environment
The interpreter owns one flat `SymbolTable`. Assignments store values tagged `INTEGER`;
conditional and loop bodies write to the same table as the top level, and a `for` loop
variable stays bound after the loop with the value one past its last iteration.

3. Expression Evaluation
Arithmetic operands are evaluated left to right and both are always evaluated. Division
truncates toward zero. Comparisons and logical operators yield booleans, which are only
consumed by conditions and never stored in the symbol table. `and` / `or` short-circuit.

4. Control Flow
Control constructs include:
- `if`: runs its body once when the condition holds. There is no else branch.
- `while`: re-evaluates its condition before every iteration.
- `for`: evaluates both bounds once, then counts the loop variable up to the end bound inclusive.

5. Output
`print` evaluates its arguments left to right and writes them space-separated as one line
to the output stream (stdout unless another stream is supplied).

6. Error Handling
Runtime errors (undefined variables, type mismatches, division by zero) are raised as typed
exceptions and abort the run.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import sys
from typing import TextIO

from klang.exceptions import DivisionByZeroException, UndefinedVariableException
from klang.lexer import Lexer
from klang.nodes import format_node
from klang.operations import Op
from klang.parser import Parser
from klang.symbols import SymbolTable, TypeTag


class Interpreter:
    """Tree-walk interpreter for KLang."""

    def __init__(
        self,
        file: str = "<stdin>",
        stream: TextIO | None = None,
        symbols: SymbolTable | None = None,
    ):
        """
        Initialize the interpreter.

        Parameters:
            file (str): The name of the script, used in error messages.
            stream (TextIO): Where print output goes. Defaults to the current ``sys.stdout``.
            symbols (SymbolTable): An existing table to run against, e.g. across REPL inputs.
        """
        self.file = file
        self.stream = stream
        self.symbols = symbols if symbols is not None else SymbolTable(file)

    def run(self, source: str) -> list:
        """
        Lex, parse and execute a complete program.

        The whole program is parsed before anything runs, so a syntax error
        anywhere means no statement executes.

        Returns:
            list: The parsed program.
        """
        parser = Parser(Lexer(source, self.file), self.file)
        ast = parser.parse()
        self.execute(ast)
        return ast

    def lookup(self, name: str) -> int:
        """
        Return the value bound to ``name``.

        Raises:
            UndefinedVariableException: If ``name`` has never been assigned.
        """
        symbol = self.symbols.get(name)
        if symbol is None:
            raise UndefinedVariableException(name, self.file)
        return symbol.value

    def _divide(self, node: tuple, left: int, right: int) -> int:
        if right == 0:
            raise DivisionByZeroException(format_node(node), self.file)
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient

    def eval_expr(self, node: tuple):
        """
        Recursively evaluate an expression node and return its computed value.

        Parameters:
            node (tuple): An expression node. The first element is the node
                        tag (e.g. 'binop', 'ident'), followed by its operands.

        Returns:
            int for arithmetic nodes, bool for 'compare' and 'logical' nodes.

        Raises:
            UndefinedVariableException: If a variable is referenced that has not been defined.
            DivisionByZeroException: If the right operand of a division is zero.
            RuntimeError: If the node is not an expression node.
        """
        match node[0]:
            case 'number':
                return node[1]

            case 'ident':
                return self.lookup(node[1])

            case 'binop':
                _, op, left_node, right_node = node
                left = self.eval_expr(left_node)
                right = self.eval_expr(right_node)
                match op:
                    case Op.ADD:
                        return left + right
                    case Op.SUB:
                        return left - right
                    case Op.MUL:
                        return left * right
                    case Op.DIV:
                        return self._divide(node, left, right)

            case 'compare':
                _, op, left_node, right_node = node
                left = self.eval_expr(left_node)
                right = self.eval_expr(right_node)
                match op:
                    case Op.EQ:
                        return left == right
                    case Op.NE:
                        return left != right
                    case Op.GT:
                        return left > right
                    case Op.LT:
                        return left < right
                    case Op.GE:
                        return left >= right
                    case Op.LE:
                        return left <= right

            case 'logical':
                _, op, left_node, right_node = node
                left = self.eval_expr(left_node)
                if op == Op.AND and not left:
                    return False
                if op == Op.OR and left:
                    return True
                return bool(self.eval_expr(right_node))

        raise RuntimeError(f"Invalid expression node: {node}")

    def execute(self, statements: list):
        """
        Executes a list of statements in order.

        Parameters:
            statements (list):
                A list of ('assign' | 'print' | 'if' | 'while' | 'for', ...) tuples.

        Raises:
            RuntimeError: For nodes that are not statements.
        """
        for stmt in statements:
            match stmt[0]:
                case 'assign':
                    _, var_name, expr_node = stmt
                    value = self.eval_expr(expr_node)
                    self.symbols.add_or_update(var_name, TypeTag.INTEGER, value)

                case 'print':
                    _, expressions = stmt
                    values = [self.eval_expr(expr_node) for expr_node in expressions]
                    stream = self.stream if self.stream is not None else sys.stdout
                    stream.write(" ".join(str(value) for value in values) + "\n")

                case 'if':
                    _, cond_node, body = stmt
                    if self.eval_expr(cond_node):
                        self.execute(body)

                case 'while':
                    _, cond_node, body = stmt
                    while self.eval_expr(cond_node):
                        self.execute(body)

                case 'for':
                    _, var_name, start_node, end_node, body = stmt
                    start = self.eval_expr(start_node)
                    end = self.eval_expr(end_node)
                    self.symbols.add_or_update(var_name, TypeTag.INTEGER, start)
                    # The body may reassign the loop variable; always read it back.
                    while self.lookup(var_name) <= end:
                        self.execute(body)
                        self.symbols.add_or_update(
                            var_name, TypeTag.INTEGER, self.lookup(var_name) + 1
                        )

                case _:
                    raise RuntimeError(f"Invalid statement node: {stmt}")
