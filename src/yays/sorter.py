"""YamlSorter: orchestrator that wires parse_path + resolve_targets + the node sorters.

This is the central wiring layer between the path engine and the public API.
For every path, in the order supplied, it:

1. parses the path string into a ParsedPath,
2. resolves it against the *current* tree (so it sees earlier paths' effects),
3. sorts each target: mappings by key rank, sequences by first field.

A target that is neither a mapping nor a sequence is an error, unless the path
fans out through a wildcard, in which case scalar targets are skipped.  The
first error aborts the run; paths already applied stay applied.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from typing import TYPE_CHECKING

from yays.errors import SortTargetError
from yays.ordering.config import SortConfig
from yays.ordering.sort import sort_mapping, sort_sequence_by_first_field
from yays.path.parser import parse_path
from yays.path.resolver import resolve_targets
from yays.result import SortReport
from yays.tree.nodes import NodeKind, node_kind, node_line

if TYPE_CHECKING:
    from yays.tree.nodes import Document

__all__ = ["YamlSorter"]

logger = logging.getLogger(__name__)


class YamlSorter:
    """Applies path-addressed sorts to a YAML document tree.

    Example::

        from yays.sorter import YamlSorter
        from yays.tree.io import dump_document, load_document

        doc = load_document("b: 1\\na: 2\\n")
        YamlSorter().apply_all(doc, ["."])
        dump_document(doc)   # "a: 2\\nb: 1\\n"
    """

    def __init__(self, config: SortConfig | None = None) -> None:
        """Initialise the sorter.

        Args:
            config: Ordering parameters.  Defaults to ``SortConfig()``
                (alphanumeric keys).
        """
        self._config: SortConfig = config if config is not None else SortConfig()

    @property
    def config(self) -> SortConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def apply_all(self, document: Document, paths: Iterable[str]) -> SortReport:
        """Apply every path to ``document``, in order, mutating it in place.

        Args:
            document: The document to sort.
            paths:    Path strings, applied one after the other.

        Returns:
            A SortReport with per-run counters and timing.

        Raises:
            PathSyntaxError: A path is malformed.
            ResolveError:    A path does not fit the document.
            SortTargetError: A path without wildcards resolved to a scalar.
        """
        t0 = time.perf_counter()
        applied: list[str] = []
        sorted_total = 0
        skipped_total = 0

        for path in paths:
            sorted_count, skipped_count = self.apply(document, path)
            applied.append(path)
            sorted_total += sorted_count
            skipped_total += skipped_count

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        return SortReport(
            paths=tuple(applied),
            targets_sorted=sorted_total,
            targets_skipped=skipped_total,
            computation_time_ms=elapsed_ms,
        )

    def apply(self, document: Document, path: str) -> tuple[int, int]:
        """Apply a single path to ``document``.

        Returns:
            ``(targets_sorted, targets_skipped)`` for this path.
        """
        parsed = parse_path(path)
        targets = resolve_targets(document, parsed)
        logger.debug(
            "Path %r: steps=%s, targets=%d",
            path,
            [str(step) for step in parsed.steps],
            len(targets),
        )

        sorted_count = 0
        skipped_count = 0
        for target in targets:
            kind = node_kind(target)
            if kind is NodeKind.MAPPING:
                sort_mapping(target, self._config.mode)
            elif kind is NodeKind.SEQUENCE:
                sort_sequence_by_first_field(target)
            elif parsed.has_wildcard:
                skipped_count += 1
                continue
            else:
                raise SortTargetError(path, kind, node_line(target))
            sorted_count += 1

        logger.info(
            "Sorted %d target(s) at path %r (%d skipped)",
            sorted_count,
            path,
            skipped_count,
        )
        return sorted_count, skipped_count
