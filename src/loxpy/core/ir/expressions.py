"""
Expression tree for the Lox expression language.

The node set is closed: literals, unary and binary operators, and explicit
parenthesized grouping. Nodes are immutable and exclusively own their
children.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from loxpy.core.ir.values import format_value

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class UnaryOp(StrEnum):
    """Prefix operators. Values are the names used in runtime errors."""

    NEGATE = "Negate"
    NOT = "Not"

    @property
    def symbol(self) -> str:
        return _UNARY_SYMBOLS[self]


class BinaryOp(StrEnum):
    """Infix operators. Values are the names used in runtime errors."""

    # Equality
    EQUAL = "Equal"
    NOT_EQUAL = "NotEqual"
    # Comparison
    LESS_THAN = "LessThan"
    LESS_THAN_OR_EQUAL = "LessThanOrEqual"
    GREATER_THAN = "GreaterThan"
    GREATER_THAN_OR_EQUAL = "GreaterThanOrEqual"
    # Arithmetic
    PLUS = "Plus"
    MINUS = "Minus"
    MULTIPLY = "Multiply"
    DIVIDE = "Divide"

    @property
    def symbol(self) -> str:
        return _BINARY_SYMBOLS[self]


_UNARY_SYMBOLS: dict[UnaryOp, str] = {
    UnaryOp.NEGATE: "-",
    UnaryOp.NOT: "!",
}

_BINARY_SYMBOLS: dict[BinaryOp, str] = {
    BinaryOp.EQUAL: "==",
    BinaryOp.NOT_EQUAL: "!=",
    BinaryOp.LESS_THAN: "<",
    BinaryOp.LESS_THAN_OR_EQUAL: "<=",
    BinaryOp.GREATER_THAN: ">",
    BinaryOp.GREATER_THAN_OR_EQUAL: ">=",
    BinaryOp.PLUS: "+",
    BinaryOp.MINUS: "-",
    BinaryOp.MULTIPLY: "*",
    BinaryOp.DIVIDE: "/",
}


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A literal value: Number (float), String (str), Boolean (bool) or Nil (None)."""

    value: bool | float | str | None = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        if isinstance(self.value, str):
            return f'"{self.value}"'
        return format_value(self.value)


class UnaryExpr(BaseModel):
    """Unary operation: op operand."""

    op: UnaryOp
    operand: Expr
    line: int = Field(default=1, description="Source line of the operator")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.op.symbol}{self.operand}"


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    left: Expr
    op: BinaryOp
    right: Expr
    line: int = Field(default=1, description="Source line of the operator")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.left} {self.op.symbol} {self.right}"


class Grouping(BaseModel):
    """
    A parenthesized expression.

    Evaluates exactly like its inner expression; kept so that printers can
    reproduce the source's explicit parentheses.
    """

    expression: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.expression})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | UnaryExpr | BinaryExpr | Grouping

# Rebuild models for recursive forward references
UnaryExpr.model_rebuild()
BinaryExpr.model_rebuild()
Grouping.model_rebuild()
