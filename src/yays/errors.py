"""Exception hierarchy for yays.

Every failure raised by the library derives from ``YaysError`` so callers (and
the CLI) can catch one type:

- YamlDecodeError:  the input is not valid YAML, or holds no document.
- PathSyntaxError:  a path string is malformed (bad bracket selector).
- ResolveError:     a path does not fit the document's shape.  Concrete
                    subclasses name the mismatch (missing key, index out of
                    range, wrong node kind).
- SortTargetError:  a path resolved to a node that cannot be sorted.

All of them are terminal for a run: nothing in the library retries or
recovers, and the message always names the offending path.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from yays.path.steps import Step

__all__ = [
    "IndexOutOfRangeError",
    "KeyNotFoundError",
    "NotAMappingError",
    "NotASequenceError",
    "NotIterableError",
    "PathSyntaxError",
    "ResolveError",
    "SortTargetError",
    "YamlDecodeError",
    "YaysError",
]


class YaysError(Exception):
    """Base class for all yays errors."""


class YamlDecodeError(YaysError):
    """The input could not be decoded into a YAML document."""


class PathSyntaxError(YaysError):
    """A path string could not be parsed.

    Attributes:
        path:   The full path string as supplied by the caller.
        text:   The offending substring (bracket content or token).
        reason: Short description of what is wrong with ``text``.
    """

    def __init__(self, path: str, text: str, reason: str) -> None:
        self.path = path
        self.text = text
        self.reason = reason
        super().__init__(f"invalid path {path!r}: {reason} {text!r}")


class ResolveError(YaysError):
    """A path step could not be applied to the node it reached.

    Attributes:
        path:      The source string of the path being resolved.
        step:      The step that failed.
        node_kind: Kind of the node the step was applied to (a ``NodeKind``
                   value, or an empty string when unknown).
        line:      1-based source line of that node, or None when unknown.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str,
        step: Step,
        node_kind: str = "",
        line: int | None = None,
    ) -> None:
        self.message = message
        self.path = path
        self.step = step
        self.node_kind = node_kind
        self.line = line
        where = f" (line {line})" if line is not None else ""
        super().__init__(f"failed to navigate to path {path!r}: {message}{where}")


class NotAMappingError(ResolveError):
    """A key step reached a node that has no keys."""


class NotASequenceError(ResolveError):
    """An index step reached a node that is not a sequence."""


class KeyNotFoundError(ResolveError):
    """A key step named a key the mapping does not contain."""


class IndexOutOfRangeError(ResolveError):
    """An index step (or numeric key step) is outside the sequence bounds."""


class NotIterableError(ResolveError):
    """A wildcard step reached a scalar."""


class SortTargetError(YaysError):
    """A resolved target is neither a mapping nor a sequence.

    Attributes:
        path:      The source string of the path.
        node_kind: Kind of the offending target.
        line:      1-based source line of the target, or None when unknown.
    """

    def __init__(self, path: str, node_kind: str, line: int | None = None) -> None:
        self.path = path
        self.node_kind = node_kind
        self.line = line
        where = f" (line {line})" if line is not None else ""
        super().__init__(
            f"target at path {path!r} must be a mapping or sequence "
            f"(got {node_kind}){where}"
        )
