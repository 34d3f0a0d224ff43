"""
loxpy intermediate representation: tokens, expression trees and runtime values.

All types are re-exported from this package.
"""

from .expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Grouping,
    Literal,
    UnaryExpr,
    UnaryOp,
)
from .tokens import KEYWORDS, Token, TokenKind
from .values import Value, format_value, to_f32, type_name

__all__ = [
    # Tokens
    "KEYWORDS",
    "Token",
    "TokenKind",
    # Expressions
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "Grouping",
    "Literal",
    "UnaryExpr",
    "UnaryOp",
    # Values
    "Value",
    "format_value",
    "to_f32",
    "type_name",
]
