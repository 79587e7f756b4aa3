"""
Tokenizer for the fns language.

Converts source text into a list of tokens that always ends with exactly one
EOF token. The first invalid character or unterminated string aborts the scan.
"""

from __future__ import annotations

import logging

from fns.core.errors import FnsError, Span
from fns.core.ir.tokens import KEYWORDS, Token, TokenKind

logger = logging.getLogger(__name__)

# Sentinel appended to the source so every scan ends on a real character
_EOF_CHAR = "\0"

_SINGLE_CHAR: dict[str, TokenKind] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
}

# first char -> (second char, two-char kind, one-char kind or None if invalid alone)
_TWO_CHAR: dict[str, tuple[str, TokenKind, TokenKind | None]] = {
    "&": ("&", TokenKind.DOUBLE_AMPERSAND, None),
    "|": ("|", TokenKind.DOUBLE_PIPE, None),
    "=": ("=", TokenKind.DOUBLE_EQUAL, TokenKind.EQUAL),
    "!": ("=", TokenKind.BANG_EQUAL, TokenKind.BANG),
    ">": ("=", TokenKind.GREATER_EQUAL, TokenKind.GREATER),
    "<": ("=", TokenKind.LESS_EQUAL, TokenKind.LESS),
}

_WHITESPACE = " \t\n\r"


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


class _Scanner:
    """Single pass over the source with a one-character lookahead."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.text = source + _EOF_CHAR
        self.pos = 0
        self.tokens: list[Token] = []

    def peek(self, offset: int = 0) -> str:
        idx = self.pos + offset
        if idx < len(self.text):
            return self.text[idx]
        return _EOF_CHAR

    def emit(self, kind: TokenKind, start: int, end: int) -> None:
        self.tokens.append(
            Token(kind=kind, lexeme=self.source[start:end], span=Span(start=start, end=end))
        )

    def scan(self) -> list[Token]:
        end_of_source = len(self.source)

        while True:
            c = self.peek()
            start = self.pos

            if self.pos >= end_of_source:
                self.tokens.append(
                    Token(
                        kind=TokenKind.EOF,
                        lexeme="",
                        span=Span(start=end_of_source, end=end_of_source),
                    )
                )
                return self.tokens

            # Skip whitespace
            if c in _WHITESPACE:
                self.pos += 1
                continue

            # Line comments
            if c == "/" and self.peek(1) == "/":
                while self.pos < end_of_source and self.peek() != "\n":
                    self.pos += 1
                continue

            if c in _SINGLE_CHAR:
                self.pos += 1
                self.emit(_SINGLE_CHAR[c], start, self.pos)
                continue

            if c in _TWO_CHAR:
                second, double_kind, single_kind = _TWO_CHAR[c]
                if self.peek(1) == second:
                    self.pos += 2
                    self.emit(double_kind, start, self.pos)
                    continue
                if single_kind is not None:
                    self.pos += 1
                    self.emit(single_kind, start, self.pos)
                    continue
                raise FnsError(f"Invalid character '{c}'", Span(start=start, end=start + 1))

            if c == '"':
                self._read_string()
                continue

            if c.isalpha() or c == "_":
                self._read_word()
                continue

            if _is_digit(c):
                self._read_number()
                continue

            raise FnsError(f"Invalid character '{c}'", Span(start=start, end=start + 1))

    def _read_string(self) -> None:
        """Read a double-quoted string; the lexeme and span exclude the quotes."""
        quote = self.pos
        self.pos += 1
        content_start = self.pos
        end_of_source = len(self.source)

        while self.pos < end_of_source:
            c = self.peek()
            if c == "\\":
                self.pos += 2
                continue
            if c == '"':
                self.emit(TokenKind.STRING, content_start, self.pos)
                self.pos += 1
                return
            self.pos += 1

        raise FnsError("Unterminated string", Span(start=quote, end=end_of_source))

    def _read_word(self) -> None:
        start = self.pos
        while self.peek().isalnum() or self.peek() == "_":
            self.pos += 1
        word = self.source[start : self.pos]
        self.emit(KEYWORDS.get(word, TokenKind.IDENTIFIER), start, self.pos)

    def _read_number(self) -> None:
        start = self.pos
        while _is_digit(self.peek()) or self.peek() == ".":
            self.pos += 1
        lexeme = self.source[start : self.pos]
        if lexeme.count(".") > 1:
            raise FnsError(f"Invalid number '{lexeme}'", Span(start=start, end=self.pos))
        self.emit(TokenKind.NUMBER, start, self.pos)


def tokenize(source: str) -> list[Token]:
    """Tokenize fns source text.

    Args:
        source: Program text

    Returns:
        Tokens in source order, terminated by a single EOF token.

    Raises:
        FnsError: On an invalid character, malformed number or unterminated string.
    """
    tokens = _Scanner(source).scan()
    logger.debug("Tokenized %d characters into %d tokens", len(source), len(tokens))
    return tokens
