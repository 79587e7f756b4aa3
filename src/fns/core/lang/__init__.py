"""
fns language front-end and evaluator.

Usage:
    from fns.core.lang import evaluate, parse, tokenize

    program = parse(tokenize("5 + 5 * 2"))
    value, env = evaluate(program)
    # value == 15.0
"""

from fns.core.lang.environment import Environment
from fns.core.lang.evaluator import evaluate
from fns.core.lang.parser import parse, parse_source
from fns.core.lang.tokenizer import tokenize

__all__ = ["Environment", "evaluate", "parse", "parse_source", "tokenize"]
