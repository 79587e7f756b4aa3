"""
Intermediate representation for fns: tokens, AST nodes and runtime values.
"""

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
from fns.core.ir.tokens import Token, TokenCategory, TokenKind
from fns.core.ir.values import Value, display_value, values_equal

__all__ = [
    "AccessExpr",
    "AssignmentExpr",
    "BinaryExpr",
    "BooleanLiteral",
    "ConstStatement",
    "Expr",
    "ExpressionStatement",
    "IdentifierExpr",
    "KeyValuePair",
    "LetStatement",
    "NoneLiteral",
    "NumericLiteral",
    "ObjectLiteral",
    "Program",
    "Statement",
    "StringLiteral",
    "Token",
    "TokenCategory",
    "TokenKind",
    "UnaryExpr",
    "Value",
    "display_value",
    "values_equal",
]
