"""
Expression evaluator for Lox.

A tree-walking interpreter over the closed set of expression nodes. There
are no implicit conversions: every operator checks its operand types and
raises LoxRuntimeError on a mismatch, carrying the operator's source line.
Numbers are computed in 32-bit floating point.
"""

from __future__ import annotations

import logging
import math
import operator
from collections.abc import Callable

from loxpy.core.errors import LoxRuntimeError
from loxpy.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Grouping,
    Literal,
    UnaryExpr,
    UnaryOp,
)
from loxpy.core.ir.values import Value, format_value, is_number, to_f32, type_name

logger = logging.getLogger(__name__)


def evaluate(expr: Expr) -> Value:
    """Evaluate an expression tree to a runtime value.

    Args:
        expr: Parsed expression tree.

    Returns:
        A float, str, bool or None (nil).

    Raises:
        LoxRuntimeError: If an operator is applied to unsupported operand types.
    """
    value = _interpret(expr)
    logger.debug("Evaluated to %s %r", type_name(value), value)
    return value


def _interpret(expr: Expr) -> Value:
    match expr:
        case Literal(value=value):
            return value
        case Grouping(expression=inner):
            return _interpret(inner)
        case UnaryExpr():
            return _interpret_unary(expr)
        case BinaryExpr():
            return _interpret_binary(expr)
    raise TypeError(f"Unknown expression type: {type(expr).__name__}")


def _interpret_unary(expr: UnaryExpr) -> Value:
    operand = _interpret(expr.operand)

    if expr.op == UnaryOp.NOT and isinstance(operand, bool):
        return not operand
    if expr.op == UnaryOp.NEGATE and is_number(operand):
        return -operand

    raise LoxRuntimeError(
        f"Cannot perform '{expr.op}' on operand '{format_value(operand)}'",
        expr.line,
    )


def _divide(a: float, b: float) -> float:
    """IEEE-754 division: x/0 is +/-inf, 0/0 is NaN."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


# -- Binary operator dispatch tables, keyed by operator --

_ARITHMETIC: dict[BinaryOp, Callable[[float, float], float]] = {
    BinaryOp.PLUS: operator.add,
    BinaryOp.MINUS: operator.sub,
    BinaryOp.MULTIPLY: operator.mul,
    BinaryOp.DIVIDE: _divide,
}

_ORDERING: dict[BinaryOp, Callable[[float, float], bool]] = {
    BinaryOp.LESS_THAN: operator.lt,
    BinaryOp.LESS_THAN_OR_EQUAL: operator.le,
    BinaryOp.GREATER_THAN: operator.gt,
    BinaryOp.GREATER_THAN_OR_EQUAL: operator.ge,
}

_EQUALITY: dict[BinaryOp, Callable[[Value, Value], bool]] = {
    BinaryOp.EQUAL: operator.eq,
    BinaryOp.NOT_EQUAL: operator.ne,
}


def _same_type(left: Value, right: Value, *types: type) -> bool:
    # exact type match; mixed-type pairs are never comparable
    return type(left) is type(right) and type(left) in types


def _interpret_binary(expr: BinaryExpr) -> Value:
    """Evaluate left then right, then dispatch on (operand types, operator)."""
    left = _interpret(expr.left)
    right = _interpret(expr.right)
    op = expr.op

    if op in _ARITHMETIC and is_number(left) and is_number(right):
        return to_f32(_ARITHMETIC[op](left, right))

    if op == BinaryOp.PLUS and _same_type(left, right, str):
        return left + right

    if op in _ORDERING and is_number(left) and is_number(right):
        return _ORDERING[op](left, right)

    if op in _EQUALITY and _same_type(left, right, bool, float, str):
        return _EQUALITY[op](left, right)

    raise LoxRuntimeError(
        f"Cannot perform '{op}' on operands "
        f"'{format_value(left)}' and '{format_value(right)}'",
        expr.line,
    )
