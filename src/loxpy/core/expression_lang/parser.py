"""
Recursive descent parser for Lox expressions.

Grammar (precedence low to high):
    expression → equality
    equality   → comparison ( ( "!=" | "==" ) comparison )*
    comparison → term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term       → factor ( ( "-" | "+" ) factor )*
    factor     → unary ( ( "/" | "*" ) unary )*
    unary      → ( "!" | "-" ) unary | primary
    primary    → NUMBER | STRING | "true" | "false" | "nil" | "(" expression ")"

Only a single expression is parsed; tokens after it are left unconsumed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from loxpy.core.errors import ErrorReporter, ParseError, location_of
from loxpy.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Grouping,
    Literal,
    UnaryExpr,
    UnaryOp,
)
from loxpy.core.ir.tokens import STATEMENT_KEYWORDS, Token, TokenKind

logger = logging.getLogger(__name__)

_EQUALITY_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.BANG_EQUAL: BinaryOp.NOT_EQUAL,
    TokenKind.EQUAL_EQUAL: BinaryOp.EQUAL,
}

_COMPARISON_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.GREATER: BinaryOp.GREATER_THAN,
    TokenKind.GREATER_EQUAL: BinaryOp.GREATER_THAN_OR_EQUAL,
    TokenKind.LESS: BinaryOp.LESS_THAN,
    TokenKind.LESS_EQUAL: BinaryOp.LESS_THAN_OR_EQUAL,
}

_TERM_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.MINUS: BinaryOp.MINUS,
    TokenKind.PLUS: BinaryOp.PLUS,
}

_FACTOR_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.SLASH: BinaryOp.DIVIDE,
    TokenKind.STAR: BinaryOp.MULTIPLY,
}

_UNARY_OPS: dict[TokenKind, UnaryOp] = {
    TokenKind.BANG: UnaryOp.NOT,
    TokenKind.MINUS: UnaryOp.NEGATE,
}

_LITERAL_KEYWORDS: dict[TokenKind, bool | None] = {
    TokenKind.TRUE: True,
    TokenKind.FALSE: False,
    TokenKind.NIL: None,
}


class Parser:
    """Parses one expression from a token list ending in EOF."""

    def __init__(self, tokens: list[Token], reporter: ErrorReporter | None = None) -> None:
        self.tokens = tokens
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.pos = 0

    def parse(self) -> Expr | None:
        """Parse an expression, or report the first error and return None."""
        try:
            expr = self.parse_expression()
        except ParseError as e:
            self.reporter.parse_error(e)
            logger.debug("Parse failed: %s", e)
            return None
        logger.debug("Parsed expression: %s", expr)
        return expr

    # -- Token access --

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    @property
    def previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def is_at_end(self) -> bool:
        return self.current.kind == TokenKind.EOF

    def advance(self) -> Token:
        tok = self.current
        if not self.is_at_end():
            self.pos += 1
        return tok

    def match(self, *kinds: TokenKind) -> Token | None:
        if self.current.kind in kinds:
            return self.advance()
        return None

    def expect(self, kind: TokenKind, message: str) -> Token:
        if self.current.kind != kind:
            raise self.error(self.current, message)
        return self.advance()

    def error(self, token: Token, message: str) -> ParseError:
        return ParseError(message, token.line, location_of(token))

    def synchronize(self) -> None:
        """Discard tokens up to the next statement boundary.

        Stops just after a ';' or just before a keyword that starts a
        statement. Only expressions are parsed today, so ``parse()`` never
        calls this; statement parsing will use it to report several errors
        in one pass.
        """
        self.advance()
        while not self.is_at_end():
            if self.previous.kind == TokenKind.SEMICOLON:
                return
            if self.current.kind in STATEMENT_KEYWORDS:
                return
            self.advance()

    # -- Grammar rules --

    def parse_expression(self) -> Expr:
        return self.parse_equality()

    def parse_equality(self) -> Expr:
        """comparison (('!=' | '==') comparison)*"""
        return self._parse_binary(self.parse_comparison, _EQUALITY_OPS)

    def parse_comparison(self) -> Expr:
        """term (('>' | '>=' | '<' | '<=') term)*"""
        return self._parse_binary(self.parse_term, _COMPARISON_OPS)

    def parse_term(self) -> Expr:
        """factor (('-' | '+') factor)*"""
        return self._parse_binary(self.parse_factor, _TERM_OPS)

    def parse_factor(self) -> Expr:
        """unary (('/' | '*') unary)*"""
        return self._parse_binary(self.parse_unary, _FACTOR_OPS)

    def _parse_binary(
        self,
        parse_operand: Callable[[], Expr],
        ops: dict[TokenKind, BinaryOp],
    ) -> Expr:
        """Fold ``operand (op operand)*`` into left-associative BinaryExprs."""
        left = parse_operand()
        while (tok := self.match(*ops)) is not None:
            right = parse_operand()
            left = BinaryExpr(left=left, op=ops[tok.kind], right=right, line=tok.line)
        return left

    def parse_unary(self) -> Expr:
        """('!' | '-') unary | primary"""
        if (tok := self.match(*_UNARY_OPS)) is not None:
            operand = self.parse_unary()
            return UnaryExpr(op=_UNARY_OPS[tok.kind], operand=operand, line=tok.line)
        return self.parse_primary()

    def parse_primary(self) -> Expr:
        """NUMBER | STRING | 'true' | 'false' | 'nil' | '(' expression ')'"""
        tok = self.current

        if tok.kind in (TokenKind.NUMBER, TokenKind.STRING):
            self.advance()
            return Literal(value=tok.literal)

        if tok.kind in _LITERAL_KEYWORDS:
            self.advance()
            return Literal(value=_LITERAL_KEYWORDS[tok.kind])

        if tok.kind == TokenKind.LEFT_PAREN:
            self.advance()
            expr = self.parse_expression()
            self.expect(TokenKind.RIGHT_PAREN, "Expected ')'.")
            return Grouping(expression=expr)

        raise self.error(tok, "Expected a literal or '('.")


def parse(tokens: list[Token], reporter: ErrorReporter | None = None) -> Expr | None:
    """Parse a token list into an expression tree.

    Args:
        tokens: Scanner output, ending with an EOF token.
        reporter: Collects the parse error, if any.

    Returns:
        The expression tree, or None if the tokens are not a valid expression.
    """
    return Parser(tokens, reporter).parse()
