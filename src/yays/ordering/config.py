"""SortMode, SortConfig and the human-mode priority table.

SortConfig is a frozen (immutable) dataclass holding the run's ordering
parameters.  SortMode selects how mapping keys are ranked before the
lexicographic tie-break: not at all (alphanumeric), or well-known keys first
(human).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["HUMAN_PRIORITY_KEYS", "SortConfig", "SortMode"]

# Keys that lead a mapping in human mode, in this order.  Everything else
# follows, alphanumerically.
HUMAN_PRIORITY_KEYS: tuple[str, ...] = (
    "apiVersion",
    "kind",
    "metadata",
    "name",
    "namespace",
    "labels",
    "annotations",
    "id",
    "version",
)


class SortMode(StrEnum):
    """How mapping keys are ordered.

    - ALPHANUMERIC: plain lexicographic order of the key text.
    - HUMAN:        HUMAN_PRIORITY_KEYS first (in table order), then the rest
                    lexicographically.
    """

    ALPHANUMERIC = auto()
    HUMAN = auto()


@dataclass(frozen=True, slots=True)
class SortConfig:
    """Immutable configuration for a sorting run.

    Attributes:
        mode: Key ordering mode.  A plain string such as ``"human"`` is
            accepted and converted to SortMode.
    """

    mode: SortMode = SortMode.ALPHANUMERIC

    def __post_init__(self) -> None:
        if isinstance(self.mode, SortMode):
            return
        try:
            mode = SortMode(self.mode)
        except ValueError:
            choices = ", ".join(m.value for m in SortMode)
            msg = f"mode must be one of {choices}, got {self.mode!r}"
            raise ValueError(msg) from None
        object.__setattr__(self, "mode", mode)
