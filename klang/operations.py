"""Shared definitions for AST operation identifiers.

This module centralizes the operator constants used by the parser, the
interpreter and the formatter to label operator nodes in the abstract syntax
tree. Keeping them in one place prevents the components from drifting apart.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported AST operation names.
    """

    # Arithmetic
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"

    # Comparison
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    LT = "lt"
    GE = "ge"
    LE = "le"

    # Boolean
    AND = "and"
    OR = "or"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


# Token type -> operation, per operator family.
ARITHMETIC_OPS: dict[str, Op] = {
    'PLUS': Op.ADD,
    'MINUS': Op.SUB,
    'MUL': Op.MUL,
    'DIV': Op.DIV,
}

COMPARISON_OPS: dict[str, Op] = {
    'EQUAL_TO': Op.EQ,
    'NOT_EQUAL_TO': Op.NE,
    'GREATER': Op.GT,
    'LESS': Op.LT,
    'GREATER_OR_EQUAL': Op.GE,
    'LESS_OR_EQUAL': Op.LE,
}

LOGICAL_OPS: dict[str, Op] = {
    'AND': Op.AND,
    'OR': Op.OR,
}

# Source spelling of each operation, used by the formatter.
OP_SYMBOLS: dict[Op, str] = {
    Op.ADD: '+',
    Op.SUB: '-',
    Op.MUL: '*',
    Op.DIV: '/',
    Op.EQ: '==',
    Op.NE: '!=',
    Op.GT: '>',
    Op.LT: '<',
    Op.GE: '>=',
    Op.LE: '<=',
    Op.AND: 'and',
    Op.OR: 'or',
}


__all__ = ["Op", "ARITHMETIC_OPS", "COMPARISON_OPS", "LOGICAL_OPS", "OP_SYMBOLS"]
