"""
fns - a small expression-oriented scripting language.

Source text is tokenized, parsed into an AST and evaluated directly against
that tree.

Usage:
    from fns import run_source

    value, env = run_source("let a = 2")
    value, _ = run_source("a * math.pi", env)
"""

from __future__ import annotations

from fns._version import get_version
from fns.core.errors import FnsError, Span
from fns.core.lang.environment import Environment
from fns.core.lang.evaluator import evaluate
from fns.core.lang.parser import parse, parse_source
from fns.core.lang.tokenizer import tokenize
from fns.core.pipeline import run_source

__version__ = get_version()

__all__ = [
    "__version__",
    "Environment",
    "FnsError",
    "Span",
    "evaluate",
    "parse",
    "parse_source",
    "run_source",
    "tokenize",
]
