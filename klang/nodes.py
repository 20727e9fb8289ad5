"""AST node set for KLang.

The parser produces a closed set of ten node variants, each a tuple whose
first element is the variant tag. Every node exclusively owns its children,
so the tree never contains cycles or shared subtrees and the interpreter can
revisit it in place as many times as a loop requires.

Expressions:
    ('number', value)
    ('ident', name)
    ('binop', Op, left, right)          # Op.ADD | Op.SUB | Op.MUL | Op.DIV
    ('compare', Op, left, right)        # Op.EQ | Op.NE | Op.GT | Op.LT | Op.GE | Op.LE
    ('logical', Op, left, right)        # Op.AND | Op.OR

Statements:
    ('assign', name, expr)
    ('print', [expr, ...])
    ('if', condition, [stmt, ...])
    ('while', condition, [stmt, ...])
    ('for', name, start_expr, end_expr, [stmt, ...])

Consumers dispatch with one exhaustive ``match`` on the tag. This module also
holds the pretty-printer, which turns a tree back into canonical source that
parses to an equal tree.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from klang.operations import Op, OP_SYMBOLS


_PRECEDENCE = {
    Op.ADD: 1,
    Op.SUB: 1,
    Op.MUL: 2,
    Op.DIV: 2,
}

INDENT = "    "


def _format_operand(node: tuple, parent: Op, right: bool) -> str:
    """
    Format a child of an arithmetic node, parenthesized when precedence requires it.
    """
    text = format_node(node)
    if node[0] != 'binop':
        return text
    child = _PRECEDENCE[node[1]]
    outer = _PRECEDENCE[parent]
    # Operators are left-associative, so an equal-precedence right child needs parens.
    if child < outer or (right and child == outer):
        return f"({text})"
    return text


def format_node(node: tuple) -> str:
    """
    Convert an expression or condition node back to source text.

    Args:
        node (tuple): An expression node.

    Returns:
        str: The source representation of the node.

    Raises:
        RuntimeError: If the node is not an expression node.
    """
    match node[0]:
        case 'number':
            return str(node[1])
        case 'ident':
            return node[1]
        case 'binop':
            _, op, left, right = node
            return (
                f"{_format_operand(left, op, False)} {OP_SYMBOLS[op]} "
                f"{_format_operand(right, op, True)}"
            )
        case 'compare' | 'logical':
            _, op, left, right = node
            return f"{format_node(left)} {OP_SYMBOLS[op]} {format_node(right)}"
        case _:
            raise RuntimeError(f"Invalid expression node: {node}")


def format_statement(stmt: tuple, depth: int = 0) -> list[str]:
    """
    Convert a statement node back to indented source lines.
    """
    pad = INDENT * depth
    match stmt[0]:
        case 'assign':
            _, name, expr_node = stmt
            return [f"{pad}{name} = {format_node(expr_node)}"]
        case 'print':
            _, expressions = stmt
            return [f"{pad}print({', '.join(format_node(e) for e in expressions)})"]
        case 'if' | 'while':
            kind, cond_node, body = stmt
            header = f"{pad}{kind} {format_node(cond_node)} then"
            return [header, *_format_body(body, depth), f"{pad}end"]
        case 'for':
            _, name, start_node, end_node, body = stmt
            header = f"{pad}for {name} = {format_node(start_node)} to {format_node(end_node)}"
            return [header, *_format_body(body, depth), f"{pad}end"]
        case _:
            raise RuntimeError(f"Invalid statement node: {stmt}")


def _format_body(body: list, depth: int) -> list[str]:
    lines = []
    for stmt in body:
        lines.extend(format_statement(stmt, depth + 1))
    return lines


def format_program(statements: list) -> str:
    """
    Convert a whole program back to source text, one statement per line.
    """
    lines = []
    for stmt in statements:
        lines.extend(format_statement(stmt))
    return "\n".join(lines) + ("\n" if lines else "")
