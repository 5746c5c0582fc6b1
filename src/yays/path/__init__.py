"""Path subpackage: the dot-and-bracket path language.

Re-exports the public API for the path module:
- parse_path: turns a path string into an immutable ParsedPath
- resolve_targets: walks a Document and returns the nodes a ParsedPath addresses
- KeyStep, IndexStep, WildcardStep: the three step kinds
"""

from yays.path.parser import parse_path
from yays.path.resolver import resolve_targets
from yays.path.steps import IndexStep, KeyStep, ParsedPath, Step, WildcardStep

__all__ = [
    "IndexStep",
    "KeyStep",
    "ParsedPath",
    "Step",
    "WildcardStep",
    "parse_path",
    "resolve_targets",
]
