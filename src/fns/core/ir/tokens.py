"""
Token types for the fns language.

``TokenKind`` values double as the display text used in parser diagnostics
(``expected '='``, ``expected 'identifier'``).
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from fns.core.errors import Span


class TokenCategory(StrEnum):
    """Coarse classification of token kinds."""

    EOF = "eof"
    NUMBER = "number"
    STRING = "string"
    IDENTIFIER = "identifier"
    KEYWORD = "keyword"
    OPERATOR = "operator"
    PUNCTUATION = "punctuation"


class TokenKind(StrEnum):
    """Token types produced by the tokenizer."""

    EOF = "end of input"

    # Literals
    NUMBER = "number"
    STRING = "string"

    # Identifiers and keywords
    IDENTIFIER = "identifier"
    LET = "let"
    CONST = "const"
    TRUE = "true"
    FALSE = "false"
    NONE = "none"

    # Operators
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    BANG = "!"
    EQUAL = "="
    DOUBLE_EQUAL = "=="
    BANG_EQUAL = "!="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="
    DOUBLE_AMPERSAND = "&&"
    DOUBLE_PIPE = "||"

    # Punctuation
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    COLON = ":"
    COMMA = ","
    DOT = "."

    @property
    def category(self) -> TokenCategory:
        return _CATEGORIES[self]


KEYWORDS: dict[str, TokenKind] = {
    "let": TokenKind.LET,
    "const": TokenKind.CONST,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "none": TokenKind.NONE,
}

_PUNCTUATION = {
    TokenKind.LPAREN,
    TokenKind.RPAREN,
    TokenKind.LBRACE,
    TokenKind.RBRACE,
    TokenKind.COLON,
    TokenKind.COMMA,
    TokenKind.DOT,
}

_CATEGORIES: dict[TokenKind, TokenCategory] = {}
for _kind in TokenKind:
    if _kind == TokenKind.EOF:
        _CATEGORIES[_kind] = TokenCategory.EOF
    elif _kind == TokenKind.NUMBER:
        _CATEGORIES[_kind] = TokenCategory.NUMBER
    elif _kind == TokenKind.STRING:
        _CATEGORIES[_kind] = TokenCategory.STRING
    elif _kind == TokenKind.IDENTIFIER:
        _CATEGORIES[_kind] = TokenCategory.IDENTIFIER
    elif _kind in KEYWORDS.values():
        _CATEGORIES[_kind] = TokenCategory.KEYWORD
    elif _kind in _PUNCTUATION:
        _CATEGORIES[_kind] = TokenCategory.PUNCTUATION
    else:
        _CATEGORIES[_kind] = TokenCategory.OPERATOR


class Token(BaseModel):
    """A single token: its kind, the exact source text and where it came from."""

    kind: TokenKind
    lexeme: str = Field(description="Source text of the token (without quotes for strings)")
    span: Span

    model_config = ConfigDict(frozen=True)

    @property
    def display(self) -> str:
        """Text used to name this token in diagnostics."""
        if self.kind == TokenKind.EOF:
            return str(TokenKind.EOF)
        return self.lexeme

    def __str__(self) -> str:
        return f"{self.kind.name}({self.lexeme!r}) at {self.span}"
