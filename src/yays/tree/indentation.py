"""Indentation detection for YAML source text.

Infers the indentation width (spaces per level) of a YAML file so the sorted
output can be written back in the same style.  The width is the greatest
common divisor of every leading-space run in the file, which is robust to
deeply nested lines (4, 6, 8 ... all reduce to 2).

Lines are ignored when they:
- are blank or contain only whitespace,
- start with a tab (the emitter cannot produce tab indentation),
- have no leading spaces (top-level lines),
- have a tab right after the leading spaces (mixed indentation).
"""

from __future__ import annotations

import math
import re

__all__ = ["DEFAULT_INDENT", "detect_indentation"]

DEFAULT_INDENT = 2

# Leading run of spaces, plus the character that follows it (if any).
_LEADING_SPACES = re.compile(r"^( +)(\S|\t)?")


def detect_indentation(text: str) -> int:
    """Return the inferred spaces-per-level of ``text``.

    Args:
        text: Raw YAML source.

    Returns:
        The GCD of all counted leading-space runs, or ``DEFAULT_INDENT`` when
        no indented line is found.
    """
    indent = 0
    for line in text.splitlines():
        match = _LEADING_SPACES.match(line)
        if match is None:
            continue
        following = match.group(2)
        if following is None or following == "\t":
            continue
        indent = math.gcd(indent, len(match.group(1)))
    return indent or DEFAULT_INDENT
