"""Source text to value in one call: tokenize, parse, evaluate."""

from __future__ import annotations

from fns.core.errors import FnsError, Span
from fns.core.ir.values import Value, display_value
from fns.core.lang.environment import Environment
from fns.core.lang.evaluator import evaluate
from fns.core.lang.parser import parse
from fns.core.lang.tokenizer import tokenize


def run_source(source: str, environment: Environment | None = None) -> tuple[Value, Environment]:
    """Run ``source`` on top of ``environment``.

    Raises:
        FnsError: From whichever stage fails first.
    """
    tokens = tokenize(source)
    program = parse(tokens)
    return evaluate(program, environment)


def display_result(value: Value, source: str) -> str:
    """Display text for the value ``source`` produced.

    Raises:
        FnsError: If the value is nested too deeply to render; the span
            covers the whole of ``source``.
    """
    try:
        return display_value(value)
    except RecursionError:
        raise FnsError("Expression is nested too deeply", Span(start=0, end=len(source))) from None
