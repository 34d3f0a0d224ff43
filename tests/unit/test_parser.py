"""Tests for the Lox expression parser.

Covers:
- Literals and grouping
- Precedence and associativity
- Operator line tracking
- Error reporting ("at end" / "at 'lexeme'")
- Statement-boundary synchronization
"""

from __future__ import annotations

from loxpy.core.errors import ErrorKind, ErrorReporter
from loxpy.core.expression_lang.parser import Parser, parse
from loxpy.core.expression_lang.scanner import scan
from loxpy.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Grouping,
    Literal,
    UnaryExpr,
    UnaryOp,
)
from loxpy.core.ir.tokens import TokenKind


def parse_source(source: str, reporter: ErrorReporter | None = None):
    reporter = reporter if reporter is not None else ErrorReporter()
    return parse(scan(source, reporter), reporter)


def num(value: float) -> Literal:
    return Literal(value=value)


class TestParserLiterals:
    """Parser handles all literal types."""

    def test_number(self) -> None:
        assert parse_source("42") == num(42.0)

    def test_string(self) -> None:
        assert parse_source('"hello"') == Literal(value="hello")

    def test_true(self) -> None:
        expr = parse_source("true")
        assert isinstance(expr, Literal)
        assert expr.value is True

    def test_false(self) -> None:
        expr = parse_source("false")
        assert isinstance(expr, Literal)
        assert expr.value is False

    def test_nil(self) -> None:
        expr = parse_source("nil")
        assert isinstance(expr, Literal)
        assert expr.value is None

    def test_grouping(self) -> None:
        assert parse_source("(1)") == Grouping(expression=num(1.0))

    def test_nested_grouping(self) -> None:
        assert parse_source("((nil))") == Grouping(expression=Grouping(expression=Literal(value=None)))


class TestParserPrecedence:
    """Binding strength and associativity."""

    def test_multiplication_binds_tighter(self) -> None:
        assert parse_source("1 + 2 * 3") == BinaryExpr(
            left=num(1.0),
            op=BinaryOp.PLUS,
            right=BinaryExpr(left=num(2.0), op=BinaryOp.MULTIPLY, right=num(3.0)),
        )

    def test_unary_binds_tighter_than_binary(self) -> None:
        assert parse_source("-1 - 2") == BinaryExpr(
            left=UnaryExpr(op=UnaryOp.NEGATE, operand=num(1.0)),
            op=BinaryOp.MINUS,
            right=num(2.0),
        )

    def test_left_associative(self) -> None:
        assert parse_source("8 - 4 - 2") == BinaryExpr(
            left=BinaryExpr(left=num(8.0), op=BinaryOp.MINUS, right=num(4.0)),
            op=BinaryOp.MINUS,
            right=num(2.0),
        )

    def test_division_left_associative(self) -> None:
        expr = parse_source("8 / 4 * 2")
        assert isinstance(expr, BinaryExpr)
        assert expr.op == BinaryOp.MULTIPLY
        assert isinstance(expr.left, BinaryExpr)
        assert expr.left.op == BinaryOp.DIVIDE

    def test_prefix_operators_nest(self) -> None:
        assert parse_source("--1") == UnaryExpr(
            op=UnaryOp.NEGATE,
            operand=UnaryExpr(op=UnaryOp.NEGATE, operand=num(1.0)),
        )

    def test_not(self) -> None:
        assert parse_source("!!true") == UnaryExpr(
            op=UnaryOp.NOT,
            operand=UnaryExpr(op=UnaryOp.NOT, operand=Literal(value=True)),
        )

    def test_comparison_below_term(self) -> None:
        expr = parse_source("1 + 2 < 4")
        assert isinstance(expr, BinaryExpr)
        assert expr.op == BinaryOp.LESS_THAN
        assert isinstance(expr.left, BinaryExpr)
        assert expr.left.op == BinaryOp.PLUS

    def test_equality_lowest(self) -> None:
        assert parse_source("1 < 2 == true") == BinaryExpr(
            left=BinaryExpr(left=num(1.0), op=BinaryOp.LESS_THAN, right=num(2.0)),
            op=BinaryOp.EQUAL,
            right=Literal(value=True),
        )

    def test_all_binary_operators(self) -> None:
        cases = {
            "==": BinaryOp.EQUAL,
            "!=": BinaryOp.NOT_EQUAL,
            "<": BinaryOp.LESS_THAN,
            "<=": BinaryOp.LESS_THAN_OR_EQUAL,
            ">": BinaryOp.GREATER_THAN,
            ">=": BinaryOp.GREATER_THAN_OR_EQUAL,
            "+": BinaryOp.PLUS,
            "-": BinaryOp.MINUS,
            "*": BinaryOp.MULTIPLY,
            "/": BinaryOp.DIVIDE,
        }
        for symbol, op in cases.items():
            expr = parse_source(f"1 {symbol} 2")
            assert isinstance(expr, BinaryExpr)
            assert expr.op == op
            assert op.symbol == symbol

    def test_grouping_overrides_precedence(self) -> None:
        assert parse_source("(1 + 2) * 3") == BinaryExpr(
            left=Grouping(expression=BinaryExpr(left=num(1.0), op=BinaryOp.PLUS, right=num(2.0))),
            op=BinaryOp.MULTIPLY,
            right=num(3.0),
        )

    def test_trailing_tokens_are_not_consumed(self, reporter: ErrorReporter) -> None:
        tokens = scan("1 2", reporter)
        parser = Parser(tokens, reporter)
        assert parser.parse() == num(1.0)
        assert parser.current.lexeme == "2"
        assert not reporter.had_error


class TestParserLines:
    """Operator nodes remember their source line."""

    def test_binary_line(self) -> None:
        expr = parse_source("1\n\n+ 2")
        assert isinstance(expr, BinaryExpr)
        assert expr.line == 3

    def test_unary_line(self) -> None:
        expr = parse_source("\n!true")
        assert isinstance(expr, UnaryExpr)
        assert expr.line == 2


class TestParserErrors:
    """Invalid token streams produce one diagnostic and no tree."""

    def test_empty_input(self, reporter: ErrorReporter) -> None:
        assert parse_source("", reporter) is None
        assert [d.format() for d in reporter.diagnostics] == [
            "[line 1] Error at end: Expected a literal or '('."
        ]

    def test_trailing_operator(self, reporter: ErrorReporter) -> None:
        assert parse_source("1 +", reporter) is None
        assert reporter.diagnostics[0].where == " at end"
        assert reporter.diagnostics[0].message == "Expected a literal or '('."

    def test_missing_right_paren(self, reporter: ErrorReporter) -> None:
        assert parse_source("(1 + 2", reporter) is None
        assert [d.format() for d in reporter.diagnostics] == ["[line 1] Error at end: Expected ')'."]

    def test_wrong_token_instead_of_right_paren(self, reporter: ErrorReporter) -> None:
        assert parse_source("(1 2)", reporter) is None
        assert reporter.diagnostics[0].format() == "[line 1] Error at '2': Expected ')'."

    def test_unexpected_token(self, reporter: ErrorReporter) -> None:
        assert parse_source("\n)", reporter) is None
        assert reporter.diagnostics[0].format() == "[line 2] Error at ')': Expected a literal or '('."

    def test_identifier_is_not_an_expression(self, reporter: ErrorReporter) -> None:
        assert parse_source("foo", reporter) is None
        assert reporter.diagnostics[0].where == " at 'foo'"

    def test_error_inside_nested_expression_aborts_parse(self, reporter: ErrorReporter) -> None:
        assert parse_source("1 + (2 * )", reporter) is None
        assert len(reporter.diagnostics) == 1
        assert reporter.diagnostics[0].kind == ErrorKind.PARSE

    def test_no_error_on_success(self, reporter: ErrorReporter) -> None:
        parse_source("1", reporter)
        assert not reporter.had_error


class TestSynchronize:
    """Recovery skips to the next statement boundary."""

    def test_stops_after_semicolon(self) -> None:
        parser = Parser(scan("a b ; c"))
        parser.synchronize()
        assert parser.current.lexeme == "c"

    def test_stops_before_statement_keyword(self) -> None:
        parser = Parser(scan("a b var x"))
        parser.synchronize()
        assert parser.current.kind == TokenKind.VAR

    def test_stops_at_end(self) -> None:
        parser = Parser(scan("a b c"))
        parser.synchronize()
        assert parser.is_at_end()
