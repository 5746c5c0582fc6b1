"""Typed path steps and the immutable ParsedPath container.

A path such as ``servers[0].roles`` parses into three steps::

    KeyStep("servers") -> IndexStep(0) -> KeyStep("roles")

Steps never reference a document; the same ParsedPath can be resolved against
any tree, any number of times.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["IndexStep", "KeyStep", "ParsedPath", "Step", "WildcardStep"]


@dataclass(frozen=True, slots=True)
class KeyStep:
    """Descend into the mapping value stored under ``name``.

    Against a sequence, a ``name`` made of digits is used as an index.
    """

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class IndexStep:
    """Descend into the ``index``-th (0-based) element of a sequence."""

    index: int

    def __str__(self) -> str:
        return f"[{self.index}]"


@dataclass(frozen=True, slots=True)
class WildcardStep:
    """Fan out to every element of a sequence or every value of a mapping."""

    def __str__(self) -> str:
        return "[*]"


Step = KeyStep | IndexStep | WildcardStep


@dataclass(frozen=True, slots=True)
class ParsedPath:
    """An ordered, immutable sequence of steps.

    Attributes:
        source: The path string the steps were parsed from.
        steps:  The steps, in navigation order.  Empty for the document root.
    """

    source: str
    steps: tuple[Step, ...] = ()

    @property
    def is_root(self) -> bool:
        """True when the path addresses the document root itself."""
        return not self.steps

    @property
    def has_wildcard(self) -> bool:
        """True when any step fans out."""
        return any(isinstance(step, WildcardStep) for step in self.steps)
