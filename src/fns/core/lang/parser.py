"""
Recursive descent parser for the fns language.

Grammar (precedence low to high):
    program         → statement* EOF
    statement       → const_stmt | let_stmt | expression
    const_stmt      → "const" IDENT "=" expression
    let_stmt        → "let" IDENT "=" expression
    expression      → assignment
    assignment      → IDENT "=" assignment | logical
    logical         → equality (("&&" | "||") logical)?
    equality        → relational (("==" | "!=") equality)?
    relational      → additive ((">" | "<" | ">=" | "<=") relational)?
    additive        → multiplicative (("+" | "-") additive)?
    multiplicative  → unary (("*" | "/") multiplicative)?
    unary           → ("!" | "+" | "-") unary | primary
    primary         → "(" expression ")" | "none" | "true" | "false"
                    | NUMBER | STRING | object access? | IDENT access?
    object          → "{" (pair ("," pair)*)? "}"
    pair            → IDENT ":" expression
    access          → "." IDENT

Each binary level recurses into itself for its right operand, so operators
of the same level group to the right: ``5 - 3 - 1`` is ``5 - (3 - 1)``.
"""

from __future__ import annotations

import logging

from fns.core.errors import FnsError
from fns.core.ir.nodes import (
    AccessExpr,
    AssignmentExpr,
    BinaryExpr,
    BooleanLiteral,
    ConstStatement,
    Expr,
    ExpressionStatement,
    IdentifierExpr,
    KeyValuePair,
    LetStatement,
    NoneLiteral,
    NumericLiteral,
    ObjectLiteral,
    Program,
    Statement,
    StringLiteral,
    UnaryExpr,
)
from fns.core.ir.tokens import Token, TokenKind
from fns.core.lang.tokenizer import tokenize

logger = logging.getLogger(__name__)

_LOGICAL = (TokenKind.DOUBLE_AMPERSAND, TokenKind.DOUBLE_PIPE)
_EQUALITY = (TokenKind.DOUBLE_EQUAL, TokenKind.BANG_EQUAL)
_RELATIONAL = (
    TokenKind.GREATER,
    TokenKind.LESS,
    TokenKind.GREATER_EQUAL,
    TokenKind.LESS_EQUAL,
)
_ADDITIVE = (TokenKind.PLUS, TokenKind.MINUS)
_MULTIPLICATIVE = (TokenKind.STAR, TokenKind.SLASH)
_UNARY = (TokenKind.BANG, TokenKind.PLUS, TokenKind.MINUS)


class _Parser:
    """Recursive descent parser over a token list."""

    def __init__(self, tokens: list[Token]) -> None:
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise ValueError("token list must end with an EOF token")
        self.tokens = tokens
        self.pos = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def peek(self, offset: int = 0) -> Token:
        idx = self.pos + offset
        if idx < len(self.tokens):
            return self.tokens[idx]
        return self.tokens[-1]  # EOF

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return tok

    def expect(self, kind: TokenKind) -> Token:
        tok = self.current
        if tok.kind != kind:
            raise FnsError(f"Unexpected token '{tok.display}', expected '{kind}'", tok.span)
        return self.advance()

    # -- Statements --

    def parse_program(self) -> Program:
        statements: list[Statement] = []
        while self.current.kind != TokenKind.EOF:
            statements.append(self.parse_statement())
        return Program(statements=statements)

    def parse_statement(self) -> Statement:
        if self.current.kind == TokenKind.CONST:
            keyword, identifier, expression = self._parse_binding(TokenKind.CONST)
            return ConstStatement(keyword=keyword, identifier=identifier, expression=expression)
        if self.current.kind == TokenKind.LET:
            keyword, identifier, expression = self._parse_binding(TokenKind.LET)
            return LetStatement(keyword=keyword, identifier=identifier, expression=expression)
        return ExpressionStatement(expression=self.parse_expression())

    def _parse_binding(self, keyword_kind: TokenKind) -> tuple[Token, Token, Expr]:
        """keyword IDENT '=' expression"""
        keyword = self.expect(keyword_kind)
        identifier = self.expect(TokenKind.IDENTIFIER)
        self.expect(TokenKind.EQUAL)
        return keyword, identifier, self.parse_expression()

    # -- Expressions --

    def parse_expression(self) -> Expr:
        return self.parse_assignment()

    def parse_assignment(self) -> Expr:
        """IDENT '=' assignment | logical"""
        if self.current.kind == TokenKind.IDENTIFIER and self.peek(1).kind == TokenKind.EQUAL:
            identifier = self.advance()
            self.advance()  # =
            value = self.parse_assignment()
            return AssignmentExpr(identifier=identifier, value=value)
        return self.parse_logical()

    def parse_logical(self) -> Expr:
        """equality (('&&' | '||') logical)?"""
        left = self.parse_equality()
        if self.current.kind in _LOGICAL:
            operator = self.advance()
            right = self.parse_logical()
            return BinaryExpr(left=left, operator=operator, right=right)
        return left

    def parse_equality(self) -> Expr:
        """relational (('==' | '!=') equality)?"""
        left = self.parse_relational()
        if self.current.kind in _EQUALITY:
            operator = self.advance()
            right = self.parse_equality()
            return BinaryExpr(left=left, operator=operator, right=right)
        return left

    def parse_relational(self) -> Expr:
        """additive (('>' | '<' | '>=' | '<=') relational)?"""
        left = self.parse_additive()
        if self.current.kind in _RELATIONAL:
            operator = self.advance()
            right = self.parse_relational()
            return BinaryExpr(left=left, operator=operator, right=right)
        return left

    def parse_additive(self) -> Expr:
        """multiplicative (('+' | '-') additive)?"""
        left = self.parse_multiplicative()
        if self.current.kind in _ADDITIVE:
            operator = self.advance()
            right = self.parse_additive()
            return BinaryExpr(left=left, operator=operator, right=right)
        return left

    def parse_multiplicative(self) -> Expr:
        """unary (('*' | '/') multiplicative)?"""
        left = self.parse_unary()
        if self.current.kind in _MULTIPLICATIVE:
            operator = self.advance()
            right = self.parse_multiplicative()
            return BinaryExpr(left=left, operator=operator, right=right)
        return left

    def parse_unary(self) -> Expr:
        """('!' | '+' | '-') unary | primary"""
        if self.current.kind in _UNARY:
            operator = self.advance()
            operand = self.parse_unary()
            return UnaryExpr(operator=operator, operand=operand)
        return self.parse_primary()

    def parse_primary(self) -> Expr:
        tok = self.current

        # Parenthesized expression
        if tok.kind == TokenKind.LPAREN:
            self.advance()
            expr = self.parse_expression()
            self.expect(TokenKind.RPAREN)
            return expr

        # Literals
        if tok.kind == TokenKind.NONE:
            return NoneLiteral(token=self.advance())
        if tok.kind == TokenKind.TRUE:
            return BooleanLiteral(token=self.advance(), value=True)
        if tok.kind == TokenKind.FALSE:
            return BooleanLiteral(token=self.advance(), value=False)
        if tok.kind == TokenKind.NUMBER:
            return NumericLiteral(token=self.advance(), value=float(tok.lexeme))
        if tok.kind == TokenKind.STRING:
            return StringLiteral(token=self.advance(), value=tok.lexeme)

        if tok.kind == TokenKind.LBRACE:
            return self._parse_access_suffix(self._parse_object())

        if tok.kind == TokenKind.IDENTIFIER:
            return self._parse_access_suffix(IdentifierExpr(identifier=self.advance()))

        raise FnsError(f"Unexpected token '{tok.display}'", tok.span)

    def _parse_object(self) -> ObjectLiteral:
        """'{' (pair (',' pair)*)? '}'"""
        open_brace = self.expect(TokenKind.LBRACE)
        pairs: list[KeyValuePair] = []
        if self.current.kind != TokenKind.RBRACE:
            pairs.append(self._parse_pair())
            while self.current.kind != TokenKind.RBRACE:
                self.expect(TokenKind.COMMA)
                pairs.append(self._parse_pair())
        close_brace = self.expect(TokenKind.RBRACE)
        return ObjectLiteral(open_brace=open_brace, pairs=pairs, close_brace=close_brace)

    def _parse_pair(self) -> KeyValuePair:
        """IDENT ':' expression"""
        key = self.expect(TokenKind.IDENTIFIER)
        self.expect(TokenKind.COLON)
        return KeyValuePair(key=key, value=self.parse_expression())

    def _parse_access_suffix(self, target: Expr) -> Expr:
        """('.' IDENT)? -- a single level only"""
        if self.current.kind != TokenKind.DOT:
            return target
        self.advance()
        name = self.expect(TokenKind.IDENTIFIER)
        return AccessExpr(object=target, name=name)


def parse(tokens: list[Token]) -> Program:
    """Parse a token list into a program.

    Args:
        tokens: Output of ``tokenize``; must end with an EOF token.

    Returns:
        The parsed program.

    Raises:
        FnsError: On the first token that does not fit the grammar.
    """
    parser = _Parser(tokens)
    try:
        program = parser.parse_program()
    except RecursionError:
        raise FnsError("Expression is nested too deeply", parser.current.span) from None

    logger.debug("Parsed %d statements", len(program))
    return program


def parse_source(source: str) -> Program:
    """Tokenize and parse source text in one step."""
    return parse(tokenize(source))
