"""
Scanner for the Lox language.

Converts source text into a sequence of tokens terminated by a single EOF
token. Lexical errors are reported and scanning carries on, so one pass
surfaces every bad character in the input.
"""

from __future__ import annotations

import logging
import re

from loxpy.core.errors import ErrorReporter, ScanError
from loxpy.core.ir.tokens import KEYWORDS, Token, TokenKind
from loxpy.core.ir.values import to_f32

logger = logging.getLogger(__name__)

# Integer part, then a fractional part only if a digit follows the dot
_NUMBER_RE = re.compile(r"[0-9]+(\.[0-9]+)?")
_IDENT_RE = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")

_SINGLE_CHAR: dict[str, TokenKind] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
}

# first char -> (kind without '=', kind with '=')
_ONE_OR_TWO_CHAR: dict[str, tuple[TokenKind, TokenKind]] = {
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
}


class Scanner:
    """Single left-to-right pass over one source text."""

    def __init__(self, source: str, reporter: ErrorReporter | None = None) -> None:
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.tokens: list[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source. Always ends with exactly one EOF token."""
        while not self.is_at_end():
            self.start = self.current
            try:
                self.scan_token()
            except ScanError as e:
                self.reporter.scan_error(e)

        self.tokens.append(Token(TokenKind.EOF, "", self.line))
        logger.debug("Scanned %d tokens over %d line(s)", len(self.tokens), self.line)
        return self.tokens

    def scan_token(self) -> None:
        c = self.advance()

        if c in _SINGLE_CHAR:
            self.add_token(_SINGLE_CHAR[c])
        elif c in _ONE_OR_TWO_CHAR:
            single, double = _ONE_OR_TWO_CHAR[c]
            self.add_token(double if self.match("=") else single)
        elif c == "/":
            if self.match("/"):
                self._skip_line_comment()
            elif self.match("*"):
                self._skip_block_comment()
            else:
                self.add_token(TokenKind.SLASH)
        elif c == '"':
            self._string()
        elif c in " \t\r":
            pass
        elif c == "\n":
            self.line += 1
        elif m := _IDENT_RE.match(self.source, self.start):
            self._identifier(m)
        elif m := _NUMBER_RE.match(self.source, self.start):
            self._number(m)
        else:
            raise ScanError(f"Unrecognized character: {c}", self.line)

    # -- Sub-scanners --

    def _skip_line_comment(self) -> None:
        while self.peek() != "\n" and not self.is_at_end():
            self.advance()

    def _skip_block_comment(self) -> None:
        """Skip to the first '*/'. Block comments do not nest."""
        start_line = self.line
        while not self.is_at_end():
            if self.peek() == "*" and self.peek_next() == "/":
                self.current += 2
                return
            if self.advance() == "\n":
                self.line += 1

        raise ScanError("Unterminated block comment.", start_line)

    def _string(self) -> None:
        """Scan a string literal. No escape sequences; newlines are allowed."""
        start_line = self.line
        while self.peek() != '"' and not self.is_at_end():
            if self.advance() == "\n":
                self.line += 1

        if self.is_at_end():
            raise ScanError("Unterminated string.", start_line)

        # The closing quote
        self.advance()
        value = self.source[self.start + 1 : self.current - 1]
        self.add_token(TokenKind.STRING, value)

    def _identifier(self, m: re.Match[str]) -> None:
        self.current = m.end()

        text = m.group(0)
        kind = KEYWORDS.get(text)
        if kind is None:
            self.add_token(TokenKind.IDENTIFIER, text)
        else:
            self.add_token(kind)

    def _number(self, m: re.Match[str]) -> None:
        self.current = m.end()
        self.add_token(TokenKind.NUMBER, to_f32(float(m.group(0))))

    # -- Helpers --

    def add_token(self, kind: TokenKind, literal: float | str | None = None) -> None:
        lexeme = self.source[self.start : self.current]
        self.tokens.append(Token(kind, lexeme, self.line, literal))

    def advance(self) -> str:
        c = self.source[self.current]
        self.current += 1
        return c

    def match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self.peek() != expected:
            return False
        self.current += 1
        return True

    def peek(self) -> str:
        if self.is_at_end():
            return "\0"
        return self.source[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)


def scan(source: str, reporter: ErrorReporter | None = None) -> list[Token]:
    """Scan a source string into a list of tokens.

    Args:
        source: Lox source text (e.g., "1 + 2 * 3")
        reporter: Collects scan errors; a fresh one is used if omitted.

    Returns:
        Tokens in source order, ending with one EOF token.
    """
    return Scanner(source, reporter).scan_tokens()
