"""Parser for the dot-and-bracket path language.

Grammar (informal)::

    path      := "" | "." | token ("." token)*
    token     := name | name selector | selector
    selector  := "[" ( "*" | digits ) "]"

- Whitespace around the path, each token, and bracket content is ignored.
- Empty tokens (leading, trailing or doubled dots) are skipped.
- ``name[sel]`` emits a key step followed by the selector step; a bare
  ``[sel]`` applies the selector to the current node.
- Digits in a plain token are NOT an index here.  The resolver decides, by
  node kind, whether ``servers.0`` means a key or an index.
"""

from __future__ import annotations

import re

from yays.errors import PathSyntaxError
from yays.path.steps import IndexStep, KeyStep, ParsedPath, Step, WildcardStep

__all__ = ["parse_path"]

# Optional key name, then a single bracket selector closing the token.
_BRACKET_TOKEN = re.compile(r"^(?P<name>[^\[\]]*)\[(?P<selector>[^\[\]]*)\]$")

# A non-negative decimal index (ASCII digits only).
_INDEX = re.compile(r"^[0-9]+$")


def _parse_selector(path: str, selector: str) -> Step:
    """Convert bracket content into a WildcardStep or IndexStep."""
    inside = selector.strip()
    if inside == "*":
        return WildcardStep()
    if _INDEX.match(inside):
        return IndexStep(int(inside))
    raise PathSyntaxError(path, inside, "invalid bracket selection")


def _parse_token(path: str, token: str) -> list[Step]:
    if "[" not in token and "]" not in token:
        return [KeyStep(token)]

    match = _BRACKET_TOKEN.match(token)
    if match is None:
        raise PathSyntaxError(path, token, "malformed bracket selector in")

    steps: list[Step] = []
    name = match.group("name").strip()
    if name:
        steps.append(KeyStep(name))
    steps.append(_parse_selector(path, match.group("selector")))
    return steps


def parse_path(path: str) -> ParsedPath:
    """Parse a path string into an immutable ParsedPath.

    Args:
        path: Dot-separated path, e.g. ``"."``, ``"spec.containers[*]"``,
              ``"servers[0].roles"`` or ``".[2]"``.

    Returns:
        A ParsedPath whose ``source`` is ``path``.  ``""`` and ``"."`` yield
        an empty step tuple (the document root).

    Raises:
        PathSyntaxError: On unmatched brackets, more than one selector in a
            token, or bracket content other than ``*`` or a non-negative integer.
    """
    stripped = path.strip()
    if stripped in ("", "."):
        return ParsedPath(source=path)

    steps: list[Step] = []
    for raw in stripped.split("."):
        token = raw.strip()
        if not token:
            continue
        steps.extend(_parse_token(path, token))
    return ParsedPath(source=path, steps=tuple(steps))
