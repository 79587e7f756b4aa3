"""
AST node types for the fns language.

Statements:
- LetStatement / ConstStatement: ``let x = expr`` / ``const x = expr``
- ExpressionStatement: a bare expression

Expressions:
- Literals: none, true/false, numbers, strings, object literals ``{k: v}``
- Identifier references and single-level property access ``obj.name``
- Unary ``! + -``, binary ``+ - * / > < >= <= == != && ||``
- Assignment ``x = expr``

Every node keeps the tokens it was built from and reports the span of source
text it covers; a node's span always covers the spans of its children.
"""

from __future__ import annotations

from typing import Literal as Tag

from pydantic import BaseModel, ConfigDict, Field

from fns.core.errors import Span
from fns.core.ir.tokens import Token

# ---------------------------------------------------------------------------
# Literals
# ---------------------------------------------------------------------------


class NoneLiteral(BaseModel):
    """The ``none`` literal."""

    node: Tag["none"] = "none"
    token: Token

    model_config = ConfigDict(frozen=True)

    @property
    def span(self) -> Span:
        return self.token.span

    def __str__(self) -> str:
        return "none"


class BooleanLiteral(BaseModel):
    """``true`` or ``false``."""

    node: Tag["boolean"] = "boolean"
    token: Token
    value: bool

    model_config = ConfigDict(frozen=True)

    @property
    def span(self) -> Span:
        return self.token.span

    def __str__(self) -> str:
        return "true" if self.value else "false"


class NumericLiteral(BaseModel):
    """A number literal; the value is the lexeme read as a float."""

    node: Tag["number"] = "number"
    token: Token
    value: float

    model_config = ConfigDict(frozen=True)

    @property
    def span(self) -> Span:
        return self.token.span

    def __str__(self) -> str:
        return self.token.lexeme


class StringLiteral(BaseModel):
    """A string literal; the value is the lexeme between the quotes."""

    node: Tag["string"] = "string"
    token: Token
    value: str

    model_config = ConfigDict(frozen=True)

    @property
    def span(self) -> Span:
        return self.token.span

    def __str__(self) -> str:
        return f'"{self.value}"'


class KeyValuePair(BaseModel):
    """One ``key: value`` entry of an object literal."""

    key: Token
    value: Expr

    model_config = ConfigDict(frozen=True)

    @property
    def span(self) -> Span:
        return self.key.span + self.value.span


class ObjectLiteral(BaseModel):
    """
    Object literal: ``{key: expr, ...}``.

    Duplicate keys are kept in the tree; the last one wins at evaluation time.
    """

    node: Tag["object"] = "object"
    open_brace: Token
    pairs: list[KeyValuePair] = Field(default_factory=list)
    close_brace: Token

    model_config = ConfigDict(frozen=True)

    @property
    def span(self) -> Span:
        return self.open_brace.span + self.close_brace.span

    def __str__(self) -> str:
        body = ", ".join(f"{p.key.lexeme}: {p.value}" for p in self.pairs)
        return "{" + body + "}"


# ---------------------------------------------------------------------------
# References
# ---------------------------------------------------------------------------


class IdentifierExpr(BaseModel):
    """Reference to a binding by name."""

    node: Tag["identifier"] = "identifier"
    identifier: Token

    model_config = ConfigDict(frozen=True)

    @property
    def span(self) -> Span:
        return self.identifier.span

    def __str__(self) -> str:
        return self.identifier.lexeme


class AccessExpr(BaseModel):
    """Property access: ``object.name``."""

    node: Tag["access"] = "access"
    object: Expr
    name: Token

    model_config = ConfigDict(frozen=True)

    @property
    def span(self) -> Span:
        return self.object.span + self.name.span

    def __str__(self) -> str:
        return f"{self.object}.{self.name.lexeme}"


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------


class UnaryExpr(BaseModel):
    """Prefix operation: ``op operand``."""

    node: Tag["unary"] = "unary"
    operator: Token
    operand: Expr

    model_config = ConfigDict(frozen=True)

    @property
    def span(self) -> Span:
        return self.operator.span + self.operand.span

    def __str__(self) -> str:
        return f"({self.operator.lexeme}{self.operand})"


class BinaryExpr(BaseModel):
    """Binary operation: ``left op right``."""

    node: Tag["binary"] = "binary"
    left: Expr
    operator: Token
    right: Expr

    model_config = ConfigDict(frozen=True)

    @property
    def span(self) -> Span:
        return self.left.span + self.right.span

    def __str__(self) -> str:
        return f"({self.left} {self.operator.lexeme} {self.right})"


class AssignmentExpr(BaseModel):
    """Assignment to an existing mutable binding: ``name = expr``."""

    node: Tag["assignment"] = "assignment"
    identifier: Token
    value: Expr

    model_config = ConfigDict(frozen=True)

    @property
    def span(self) -> Span:
        return self.identifier.span + self.value.span

    def __str__(self) -> str:
        return f"({self.identifier.lexeme} = {self.value})"


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


class LetStatement(BaseModel):
    """Mutable binding: ``let name = expr``."""

    node: Tag["let"] = "let"
    keyword: Token
    identifier: Token
    expression: Expr

    model_config = ConfigDict(frozen=True)

    @property
    def span(self) -> Span:
        return self.keyword.span + self.expression.span

    def __str__(self) -> str:
        return f"let {self.identifier.lexeme} = {self.expression}"


class ConstStatement(BaseModel):
    """Constant binding: ``const name = expr``."""

    node: Tag["const"] = "const"
    keyword: Token
    identifier: Token
    expression: Expr

    model_config = ConfigDict(frozen=True)

    @property
    def span(self) -> Span:
        return self.keyword.span + self.expression.span

    def __str__(self) -> str:
        return f"const {self.identifier.lexeme} = {self.expression}"


class ExpressionStatement(BaseModel):
    """A bare expression used as a statement."""

    node: Tag["expression"] = "expression"
    expression: Expr

    model_config = ConfigDict(frozen=True)

    @property
    def span(self) -> Span:
        return self.expression.span

    def __str__(self) -> str:
        return str(self.expression)


# ---------------------------------------------------------------------------
# Union types
# ---------------------------------------------------------------------------

Expr = (
    NoneLiteral
    | BooleanLiteral
    | NumericLiteral
    | StringLiteral
    | ObjectLiteral
    | IdentifierExpr
    | AccessExpr
    | UnaryExpr
    | BinaryExpr
    | AssignmentExpr
)

Statement = LetStatement | ConstStatement | ExpressionStatement


class Program(BaseModel):
    """An ordered sequence of statements."""

    statements: list[Statement] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def __iter__(self):  # type: ignore[override]
        return iter(self.statements)

    def __len__(self) -> int:
        return len(self.statements)

    def __getitem__(self, index: int) -> Statement:
        return self.statements[index]

    def __str__(self) -> str:
        return "\n".join(str(s) for s in self.statements)


# Rebuild models for recursive forward references
KeyValuePair.model_rebuild()
ObjectLiteral.model_rebuild()
AccessExpr.model_rebuild()
UnaryExpr.model_rebuild()
BinaryExpr.model_rebuild()
AssignmentExpr.model_rebuild()
LetStatement.model_rebuild()
ConstStatement.model_rebuild()
ExpressionStatement.model_rebuild()
Program.model_rebuild()
