"""Tests for the fns parser.

Covers:
- Statements: let, const, bare expressions
- Precedence and same-level right grouping
- Primaries: literals, objects, identifiers, property access
- Node spans
- Syntax errors
"""

from __future__ import annotations

import pytest

from fns.core.errors import FnsError, Span
from fns.core.ir.nodes import (
    AccessExpr,
    AssignmentExpr,
    BinaryExpr,
    BooleanLiteral,
    ConstStatement,
    ExpressionStatement,
    IdentifierExpr,
    LetStatement,
    NoneLiteral,
    NumericLiteral,
    ObjectLiteral,
    StringLiteral,
    UnaryExpr,
)
from fns.core.ir.tokens import TokenKind
from fns.core.lang.parser import parse, parse_source
from fns.core.lang.tokenizer import tokenize


def parse_expr(source: str):
    """Parse a single expression statement and return its expression."""
    program = parse_source(source)
    assert len(program) == 1
    statement = program[0]
    assert isinstance(statement, ExpressionStatement)
    return statement.expression


class TestParserStatements:
    """Parser handles bindings and expression statements."""

    def test_let_statement(self) -> None:
        program = parse_source("let a = 2.5")
        statement = program[0]
        assert isinstance(statement, LetStatement)
        assert statement.keyword.kind == TokenKind.LET
        assert statement.identifier.lexeme == "a"
        assert statement.identifier.span == Span(start=4, end=5)
        assert isinstance(statement.expression, NumericLiteral)
        assert statement.expression.value == 2.5
        assert statement.expression.span == Span(start=8, end=11)

    def test_const_statement(self) -> None:
        statement = parse_source("const E = 2.71")[0]
        assert isinstance(statement, ConstStatement)
        assert statement.identifier.lexeme == "E"
        assert statement.span == Span(start=0, end=14)

    def test_expression_statement(self) -> None:
        statement = parse_source("1 + 2")[0]
        assert isinstance(statement, ExpressionStatement)
        assert isinstance(statement.expression, BinaryExpr)

    def test_multiple_statements(self) -> None:
        program = parse_source("let a = 1\nconst b = 2\na + b")
        assert [type(s) for s in program] == [LetStatement, ConstStatement, ExpressionStatement]

    def test_empty_program(self) -> None:
        assert len(parse_source("")) == 0
        assert len(parse_source("// nothing here")) == 0

    def test_parse_accepts_token_list(self) -> None:
        program = parse(tokenize("true"))
        assert isinstance(program[0], ExpressionStatement)

    def test_parse_requires_eof(self) -> None:
        tokens = tokenize("1")[:-1]
        with pytest.raises(ValueError):
            parse(tokens)


class TestParserPrecedence:
    """Operators bind according to their level."""

    def test_multiplication_binds_tighter(self) -> None:
        assert str(parse_expr("1 + 2 * 3")) == "(1 + (2 * 3))"

    def test_relational_over_additive(self) -> None:
        assert str(parse_expr("1 + 2 > 3")) == "((1 + 2) > 3)"

    def test_equality_over_relational(self) -> None:
        assert str(parse_expr("1 < 2 == true")) == "((1 < 2) == true)"

    def test_logical_lowest(self) -> None:
        assert str(parse_expr("a == b && c != d")) == "((a == b) && (c != d))"

    def test_parentheses(self) -> None:
        assert str(parse_expr("(1 + 2) * 3")) == "((1 + 2) * 3)"

    def test_unary_binds_tightest(self) -> None:
        assert str(parse_expr("-a * b")) == "((-a) * b)"

    def test_nested_unary(self) -> None:
        expr = parse_expr("--+-5")
        assert str(expr) == "(-(-(+(-5))))"
        assert isinstance(expr, UnaryExpr)

    def test_assignment_lowest(self) -> None:
        expr = parse_expr("a = 1 + 2")
        assert isinstance(expr, AssignmentExpr)
        assert str(expr) == "(a = (1 + 2))"


class TestParserAssociativity:
    """Operators of one level group to the right."""

    def test_subtraction(self) -> None:
        assert str(parse_expr("5 - 3 - 1")) == "(5 - (3 - 1))"

    def test_division(self) -> None:
        assert str(parse_expr("8 / 4 / 2")) == "(8 / (4 / 2))"

    def test_mixed_additive(self) -> None:
        assert str(parse_expr("5 + 5 * 2 / 5 - 2")) == "(5 + ((5 * (2 / 5)) - 2))"

    def test_logical(self) -> None:
        expr = parse_expr("a&&b||c")
        assert isinstance(expr, BinaryExpr)
        assert expr.operator.kind == TokenKind.DOUBLE_AMPERSAND
        assert isinstance(expr.right, BinaryExpr)
        assert expr.right.operator.kind == TokenKind.DOUBLE_PIPE

    def test_equality(self) -> None:
        assert str(parse_expr("5 == 5 != 5")) == "(5 == (5 != 5))"

    def test_relational(self) -> None:
        assert str(parse_expr("1 < 2 < 3")) == "(1 < (2 < 3))"

    def test_assignment_chain(self) -> None:
        expr = parse_expr("a = b = 3")
        assert isinstance(expr, AssignmentExpr)
        assert isinstance(expr.value, AssignmentExpr)
        assert expr.value.identifier.lexeme == "b"


class TestParserPrimaries:
    """Parser handles all primary forms."""

    def test_none(self) -> None:
        assert isinstance(parse_expr("none"), NoneLiteral)

    def test_booleans(self) -> None:
        true = parse_expr("true")
        false = parse_expr("false")
        assert isinstance(true, BooleanLiteral) and true.value is True
        assert isinstance(false, BooleanLiteral) and false.value is False

    def test_number(self) -> None:
        expr = parse_expr("3.14")
        assert isinstance(expr, NumericLiteral)
        assert expr.value == 3.14

    def test_string_value_is_lexeme(self) -> None:
        expr = parse_expr('"fns"')
        assert isinstance(expr, StringLiteral)
        assert expr.value == "fns"

    def test_object(self) -> None:
        expr = parse_expr('{name: "fns", works: true}')
        assert isinstance(expr, ObjectLiteral)
        assert [p.key.lexeme for p in expr.pairs] == ["name", "works"]
        assert isinstance(expr.pairs[0].value, StringLiteral)
        assert isinstance(expr.pairs[1].value, BooleanLiteral)
        assert expr.span == Span(start=0, end=26)

    def test_empty_object(self) -> None:
        expr = parse_expr("{}")
        assert isinstance(expr, ObjectLiteral)
        assert expr.pairs == []

    def test_object_duplicate_keys_kept(self) -> None:
        expr = parse_expr("{a: 1, a: 2}")
        assert isinstance(expr, ObjectLiteral)
        assert len(expr.pairs) == 2

    def test_nested_object(self) -> None:
        assert str(parse_expr("{a: {b: 1 + 2}}")) == "{a: {b: (1 + 2)}}"

    def test_identifier(self) -> None:
        expr = parse_expr("a")
        assert isinstance(expr, IdentifierExpr)
        assert expr.identifier.lexeme == "a"

    def test_property_access(self) -> None:
        expr = parse_expr("lang.name")
        assert isinstance(expr, AccessExpr)
        assert isinstance(expr.object, IdentifierExpr)
        assert expr.object.identifier.lexeme == "lang"
        assert expr.name.lexeme == "name"
        assert expr.span == Span(start=0, end=9)

    def test_object_literal_access(self) -> None:
        expr = parse_expr("{wip: true}.wip")
        assert isinstance(expr, AccessExpr)
        assert isinstance(expr.object, ObjectLiteral)

    def test_access_in_arithmetic(self) -> None:
        assert str(parse_expr("2 * math.pi")) == "(2 * math.pi)"

    def test_identifier_then_equal_equal_is_not_assignment(self) -> None:
        expr = parse_expr("a == 1")
        assert isinstance(expr, BinaryExpr)


class TestParserSpans:
    """Each node's span covers its children."""

    def test_binary_span(self) -> None:
        expr = parse_expr("1 + 22 * 3")
        assert expr.span == Span(start=0, end=10)
        assert isinstance(expr, BinaryExpr)
        assert expr.right.span == Span(start=4, end=10)

    def test_unary_span(self) -> None:
        assert parse_expr("  -x").span == Span(start=2, end=4)

    def test_assignment_span(self) -> None:
        assert parse_expr("abc = 12").span == Span(start=0, end=8)

    def test_spans_cover_children(self) -> None:
        expr = parse_expr("a = -(b + {c: 1}.c) * 2 == d")

        def walk(node) -> None:
            children = []
            if isinstance(node, BinaryExpr):
                children = [node.left, node.right]
            elif isinstance(node, UnaryExpr):
                children = [node.operand]
            elif isinstance(node, AssignmentExpr):
                children = [node.value]
            elif isinstance(node, AccessExpr):
                children = [node.object]
            elif isinstance(node, ObjectLiteral):
                children = [p.value for p in node.pairs]
            for child in children:
                assert node.span.start <= child.span.start
                assert child.span.end <= node.span.end
                walk(child)

        walk(expr)


class TestParserErrors:
    """Syntax errors name the offending token and its span."""

    def test_let_missing_identifier(self) -> None:
        with pytest.raises(FnsError, match="Unexpected token '5', expected 'identifier'") as exc_info:
            parse_source("let 5 = 1")
        assert exc_info.value.span == Span(start=4, end=5)

    def test_let_missing_equal(self) -> None:
        with pytest.raises(FnsError, match="Unexpected token '1', expected '='"):
            parse_source("let a 1")

    def test_const_missing_expression(self) -> None:
        with pytest.raises(FnsError, match="Unexpected token 'end of input'"):
            parse_source("const a =")

    def test_unclosed_paren(self) -> None:
        with pytest.raises(FnsError, match="expected '\\)'"):
            parse_source("(1 + 2")

    def test_unexpected_primary(self) -> None:
        with pytest.raises(FnsError, match="Unexpected token '\\*'") as exc_info:
            parse_source("* 2")
        assert exc_info.value.span == Span(start=0, end=1)

    def test_object_trailing_comma(self) -> None:
        with pytest.raises(FnsError, match="Unexpected token '}', expected 'identifier'"):
            parse_source("{a: 1,}")

    def test_object_missing_comma(self) -> None:
        with pytest.raises(FnsError, match="Unexpected token 'b', expected ','"):
            parse_source("{a: 1 b: 2}")

    def test_object_missing_colon(self) -> None:
        with pytest.raises(FnsError, match="expected ':'"):
            parse_source("{a 1}")

    def test_object_non_identifier_key(self) -> None:
        with pytest.raises(FnsError, match="Unexpected token 'a', expected 'identifier'"):
            parse_source('{"a": 1}')

    def test_unclosed_object(self) -> None:
        with pytest.raises(FnsError, match="Unexpected token 'end of input', expected ','"):
            parse_source("{a: 1")

    def test_access_requires_identifier(self) -> None:
        with pytest.raises(FnsError, match="expected 'identifier'"):
            parse_source("a.1")

    def test_access_is_not_chainable(self) -> None:
        with pytest.raises(FnsError, match="Unexpected token '\\.'") as exc_info:
            parse_source("a.b.c")
        assert exc_info.value.span == Span(start=3, end=4)

    def test_deep_nesting(self) -> None:
        with pytest.raises(FnsError, match="nested too deeply"):
            parse_source("(" * 5000 + "1" + ")" * 5000)
