"""
Parenthesized prefix rendering of expression trees.

    -1 - (2 * 3)  ->  (- (- 1) (group (* 2 3)))
"""

from __future__ import annotations

from loxpy.core.ir.expressions import BinaryExpr, Expr, Grouping, Literal, UnaryExpr


def print_ast(expr: Expr) -> str:
    """Render an expression tree with every node's structure made explicit."""
    match expr:
        case Literal():
            return str(expr)
        case Grouping(expression=inner):
            return _parenthesize("group", inner)
        case UnaryExpr(op=op, operand=operand):
            return _parenthesize(op.symbol, operand)
        case BinaryExpr(left=left, op=op, right=right):
            return _parenthesize(op.symbol, left, right)
    raise TypeError(f"Unknown expression type: {type(expr).__name__}")


def _parenthesize(name: str, *exprs: Expr) -> str:
    parts = " ".join(print_ast(e) for e in exprs)
    return f"({name} {parts})"
