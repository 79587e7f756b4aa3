"""
Lexical scope chain for the fns evaluator.

Each ``Environment`` is one frame holding ``name -> (value, is_constant)``
bindings plus a link to its parent frame. Lookups walk from the innermost
frame outward; definitions only ever touch the frame they are made on, so a
frame handed in as a parent is never modified by its children.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fns.core.ir.values import Value, copy_value
from fns.core.lang.builtins import get_builtins

logger = logging.getLogger(__name__)


@dataclass
class Binding:
    value: Value
    is_constant: bool


class Environment:
    """One scope frame, chained to an optional parent."""

    def __init__(self, parent: Environment | None = None) -> None:
        self.parent = parent
        self.bindings: dict[str, Binding] = {}
        if parent is None:
            for name, value in get_builtins().items():
                self.define(name, value, is_constant=True)

    def define(self, name: str, value: Value, is_constant: bool) -> None:
        """Insert or overwrite ``name`` in this frame."""
        self.bindings[name] = Binding(copy_value(value), is_constant)
        logger.debug("Defined %s %r in frame %#x", "const" if is_constant else "let", name, id(self))

    def _lookup(self, name: str) -> Binding | None:
        env: Environment | None = self
        while env is not None:
            binding = env.bindings.get(name)
            if binding is not None:
                return binding
            env = env.parent
        return None

    def access(self, name: str) -> Value | None:
        """Return a copy of the nearest binding's value.

        ``None`` is also a legitimate fns value, so use ``is_defined`` to tell
        an unbound name from a binding holding ``none``.
        """
        binding = self._lookup(name)
        if binding is None:
            return None
        return copy_value(binding.value)

    def is_constant(self, name: str) -> bool | None:
        """Constness of the nearest binding, or ``None`` if ``name`` is unbound."""
        binding = self._lookup(name)
        if binding is None:
            return None
        return binding.is_constant

    def is_defined(self, name: str) -> bool:
        return self._lookup(name) is not None

    @property
    def depth(self) -> int:
        """Number of frames in the chain, this one included."""
        depth = 0
        env: Environment | None = self
        while env is not None:
            depth += 1
            env = env.parent
        return depth

    def names(self) -> set[str]:
        """All names visible from this frame."""
        visible: set[str] = set()
        env: Environment | None = self
        while env is not None:
            visible.update(env.bindings)
            env = env.parent
        return visible

    def __contains__(self, name: str) -> bool:
        return self.is_defined(name)

    def __repr__(self) -> str:
        return f"Environment(bindings={sorted(self.bindings)}, depth={self.depth})"
