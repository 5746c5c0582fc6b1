"""In-place, stable sorting of mapping and sequence nodes.

- sort_mapping:                 pairs ordered by (rank, key text).
- sort_sequence_by_first_field: elements ordered by the rendered value of their
                                first field (or of the whole element when it is
                                not a non-empty mapping).

Both rewrite ``node.value`` in place and silently ignore nodes of the wrong
kind.  A sequence sort never touches the key order inside its elements.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ruamel.yaml.nodes import MappingNode, ScalarNode, SequenceNode

from yays.ordering.ranker import rank_key

if TYPE_CHECKING:
    from ruamel.yaml.nodes import Node

    from yays.ordering.config import SortMode

__all__ = [
    "comparable_string",
    "first_field_comparable_value",
    "sort_mapping",
    "sort_sequence_by_first_field",
]


def comparable_string(node: Node | None) -> str:
    """Render a node as a deterministic string for sorting.

    Scalars render as their literal text, mappings as ``{k:v,k:v}`` in their
    current key order, sequences as ``[v,v]``.  ``None`` renders as ``""``.

    Aliases share their anchor's node, so a recursive structure would never
    bottom out; a node already being rendered further up renders as ``""``.
    """
    return _render(node, set())


def _render(node: Node | None, active: set[int]) -> str:
    if node is None or id(node) in active:
        return ""
    if isinstance(node, ScalarNode):
        return node.value

    active.add(id(node))
    try:
        if isinstance(node, MappingNode):
            fields = (
                f"{_render(key, active)}:{_render(value, active)}"
                for key, value in node.value
            )
            return "{" + ",".join(fields) + "}"
        if isinstance(node, SequenceNode):
            return "[" + ",".join(_render(item, active) for item in node.value) + "]"
        return ""
    finally:
        active.discard(id(node))


def first_field_comparable_value(element: Node | None) -> str:
    """Return the sort key of one sequence element.

    For a non-empty mapping this is the rendered value of its first pair;
    for anything else, the rendering of the element itself.
    """
    if isinstance(element, MappingNode) and element.value:
        _, first_value = element.value[0]
        return comparable_string(first_value)
    return comparable_string(element)


def _key_text(key: Node) -> str:
    return key.value if isinstance(key, ScalarNode) else comparable_string(key)


def sort_mapping(node: Node, mode: SortMode) -> None:
    """Sort a mapping's pairs by (rank, key text), in place.

    No-op for anything that is not a mapping.
    """
    if not isinstance(node, MappingNode):
        return

    def sort_key(pair: tuple[Node, Node]) -> tuple[int, str]:
        text = _key_text(pair[0])
        return rank_key(text, mode), text

    node.value[:] = sorted(node.value, key=sort_key)


def sort_sequence_by_first_field(node: Node) -> None:
    """Sort a sequence's elements by their first-field value, in place.

    The sort is stable: elements whose keys render equal keep their relative
    input order.  No-op for anything that is not a sequence.
    """
    if not isinstance(node, SequenceNode):
        return
    node.value[:] = sorted(node.value, key=first_field_comparable_value)
