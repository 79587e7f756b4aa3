"""
Tree-walking evaluator for the fns language.

Runs a parsed program against a fresh scope frame and returns the value of
the last statement together with that frame. Operators are checked against
the runtime kinds of their operands; any combination without a rule is an
error rather than a coercion.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

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
    LetStatement,
    NoneLiteral,
    NumericLiteral,
    ObjectLiteral,
    Program,
    Statement,
    StringLiteral,
    UnaryExpr,
)
from fns.core.ir.tokens import TokenKind
from fns.core.ir.values import Value, display_value, values_equal
from fns.core.lang.environment import Environment

logger = logging.getLogger(__name__)


def evaluate(program: Program, parent: Environment | None = None) -> tuple[Value, Environment]:
    """Evaluate a program.

    Args:
        program: Parsed program.
        parent: Scope to chain the new frame to. A fresh root frame with the
            built-in bindings is used when omitted.

    Returns:
        ``(value, environment)`` -- the value of the last statement (``none``
        for an empty program or a trailing binding) and the frame holding
        this program's bindings.

    Raises:
        FnsError: On the first runtime error; later statements are not run.
    """
    environment = Environment(parent) if parent is not None else Environment()
    value: Value = None

    for statement in program:
        try:
            value = _execute(statement, environment)
        except RecursionError:
            raise FnsError("Expression is nested too deeply", statement.span) from None

    logger.debug("Evaluated %d statements", len(program))
    return value, environment


def _execute(statement: Statement, env: Environment) -> Value:
    """Run one statement; bindings evaluate to ``none``."""
    if isinstance(statement, LetStatement):
        env.define(statement.identifier.lexeme, _interpret(statement.expression, env), False)
        return None

    if isinstance(statement, ConstStatement):
        env.define(statement.identifier.lexeme, _interpret(statement.expression, env), True)
        return None

    if isinstance(statement, ExpressionStatement):
        return _interpret(statement.expression, env)

    raise TypeError(f"Unknown statement type: {type(statement).__name__}")


def _interpret(expr: Expr, env: Environment) -> Value:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(expr, NoneLiteral):
        return None

    if isinstance(expr, (BooleanLiteral, NumericLiteral, StringLiteral)):
        return expr.value

    if isinstance(expr, ObjectLiteral):
        return {pair.key.lexeme: _interpret(pair.value, env) for pair in expr.pairs}

    if isinstance(expr, IdentifierExpr):
        return _interpret_identifier(expr, env)

    if isinstance(expr, AccessExpr):
        return _interpret_access(expr, env)

    if isinstance(expr, UnaryExpr):
        return _interpret_unary(expr, env)

    if isinstance(expr, BinaryExpr):
        return _interpret_binary(expr, env)

    if isinstance(expr, AssignmentExpr):
        return _interpret_assignment(expr, env)

    raise TypeError(f"Unknown expression type: {type(expr).__name__}")


def _interpret_identifier(expr: IdentifierExpr, env: Environment) -> Value:
    name = expr.identifier.lexeme
    if not env.is_defined(name):
        raise FnsError(f"Can't access the variable '{name}' as it's not defined", expr.span)
    return env.access(name)


def _interpret_access(expr: AccessExpr, env: Environment) -> Value:
    target = _interpret(expr.object, env)
    if not isinstance(target, dict):
        raise FnsError(
            f"Can't access property of '{display_value(target)}' as it's not accessible",
            expr.span,
        )
    name = expr.name.lexeme
    if name not in target:
        raise FnsError(f"Can't access the property '{name}' as it's not defined", expr.span)
    return target[name]


def _interpret_unary(expr: UnaryExpr, env: Environment) -> Value:
    operand = _interpret(expr.operand, env)
    op = expr.operator.kind

    if op == TokenKind.BANG and isinstance(operand, bool):
        return not operand
    if _is_number(operand):
        if op == TokenKind.PLUS:
            return operand
        if op == TokenKind.MINUS:
            return -operand

    raise FnsError(f"Can't use '{op}' with '{display_value(operand)}'", expr.span)


def _divide(left: float, right: float, expr: BinaryExpr) -> float:
    if right == 0:
        raise FnsError("Can't divide by 0", expr.span)
    return left / right


_ARITHMETIC: dict[TokenKind, Callable[[float, float, BinaryExpr], Value]] = {
    TokenKind.PLUS: lambda a, b, _: a + b,
    TokenKind.MINUS: lambda a, b, _: a - b,
    TokenKind.STAR: lambda a, b, _: a * b,
    TokenKind.SLASH: _divide,
    TokenKind.GREATER: lambda a, b, _: a > b,
    TokenKind.LESS: lambda a, b, _: a < b,
    TokenKind.GREATER_EQUAL: lambda a, b, _: a >= b,
    TokenKind.LESS_EQUAL: lambda a, b, _: a <= b,
}

_LOGICAL: dict[TokenKind, Callable[[bool, bool], bool]] = {
    TokenKind.DOUBLE_AMPERSAND: lambda a, b: a and b,
    TokenKind.DOUBLE_PIPE: lambda a, b: a or b,
}


def _interpret_binary(expr: BinaryExpr, env: Environment) -> Value:
    """Evaluate both operands, left first, then apply the operator by operand kinds.

    ``&&`` and ``||`` do not short-circuit.
    """
    left = _interpret(expr.left, env)
    right = _interpret(expr.right, env)
    op = expr.operator.kind

    if op == TokenKind.PLUS and isinstance(left, str) and isinstance(right, str):
        return left + right

    if op in _ARITHMETIC and _is_number(left) and _is_number(right):
        return _ARITHMETIC[op](left, right, expr)

    if op == TokenKind.DOUBLE_EQUAL:
        return values_equal(left, right)
    if op == TokenKind.BANG_EQUAL:
        return not values_equal(left, right)

    if op in _LOGICAL and isinstance(left, bool) and isinstance(right, bool):
        return _LOGICAL[op](left, right)

    raise FnsError(
        f"Can't use '{op}' with '{display_value(left)}' and '{display_value(right)}'",
        expr.span,
    )


def _interpret_assignment(expr: AssignmentExpr, env: Environment) -> Value:
    """Rebind a mutable name in the current frame, shadowing any parent binding."""
    name = expr.identifier.lexeme
    is_constant = env.is_constant(name)
    if is_constant is None:
        raise FnsError(f"Can't assign to the variable '{name}' as it's not defined", expr.span)
    if is_constant:
        raise FnsError(f"Can't assign the variable '{name}' as it's a constant", expr.span)

    value = _interpret(expr.value, env)
    env.define(name, value, False)
    return value


def _is_number(value: Value) -> bool:
    # bool is a subclass of int, never of float
    return isinstance(value, float)
