"""Read-only bindings seeded into every root environment."""

from __future__ import annotations

import math

from fns.core.ir.values import Value

LANGUAGE_NAME = "fns"
LANGUAGE_VERSION = "0.0.1"


def get_builtins() -> dict[str, Value]:
    """Return fresh copies of the built-in namespaces.

    - ``fns``: language metadata (``fns.version``)
    - ``math``: numeric constants (``math.pi``, ``math.e``)
    """
    return {
        LANGUAGE_NAME: {"version": LANGUAGE_VERSION},
        "math": {"pi": math.pi, "e": math.e},
    }
