"""yays - sort YAML mapping keys and sequences at addressed paths."""

from __future__ import annotations

from yays.api import sort_file, sort_yaml
from yays.errors import (
    IndexOutOfRangeError,
    KeyNotFoundError,
    NotAMappingError,
    NotASequenceError,
    NotIterableError,
    PathSyntaxError,
    ResolveError,
    SortTargetError,
    YamlDecodeError,
    YaysError,
)
from yays.ordering.config import SortConfig, SortMode
from yays.result import SortReport
from yays.sorter import YamlSorter

__version__: str = "0.1.0"
__all__: list[str] = [
    "IndexOutOfRangeError",
    "KeyNotFoundError",
    "NotAMappingError",
    "NotASequenceError",
    "NotIterableError",
    "PathSyntaxError",
    "ResolveError",
    "SortConfig",
    "SortMode",
    "SortReport",
    "SortTargetError",
    "YamlDecodeError",
    "YamlSorter",
    "YaysError",
    "sort_file",
    "sort_yaml",
]
