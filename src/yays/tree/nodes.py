"""NodeKind StrEnum and Document dataclass for the YAML representation tree.

The tree itself is ruamel.yaml's representation graph (``ruamel.yaml.nodes``),
composed in round-trip mode so comments and scalar styles stay attached to the
nodes they belong to.  This module gives the rest of the package a small,
library-neutral view of it:

- NodeKind:  the four node kinds the sorter cares about.
- node_kind: classify a ruamel node.
- node_line: 1-based source line of a node, for error messages.
- Document:  the root content node plus load-time metadata.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto

from ruamel.yaml.nodes import MappingNode, Node, ScalarNode, SequenceNode

__all__ = ["Document", "NodeKind", "node_kind", "node_line"]


class NodeKind(StrEnum):
    """Enumeration of the structural node kinds in a YAML document.

    - DOCUMENT -> "document" : the tree entry point (wraps one root node)
    - MAPPING  -> "mapping"  : ordered key/value pairs
    - SEQUENCE -> "sequence" : ordered list of elements
    - SCALAR   -> "scalar"   : a leaf value, held as its literal text
    """

    DOCUMENT = auto()
    MAPPING = auto()
    SEQUENCE = auto()
    SCALAR = auto()


def node_kind(node: Node | Document) -> NodeKind:
    """Return the NodeKind of a ruamel node or a Document.

    Raises:
        TypeError: If ``node`` is none of the known node classes.
    """
    if isinstance(node, MappingNode):
        return NodeKind.MAPPING
    if isinstance(node, SequenceNode):
        return NodeKind.SEQUENCE
    if isinstance(node, ScalarNode):
        return NodeKind.SCALAR
    if isinstance(node, Document):
        return NodeKind.DOCUMENT
    raise TypeError(f"Unsupported YAML node type: {type(node)!r}")


def node_line(node: Node | None) -> int | None:
    """Return the 1-based line a node starts on, or None for synthetic nodes."""
    mark = getattr(node, "start_mark", None)
    if mark is None:
        return None
    return mark.line + 1


@dataclass(slots=True)
class Document:
    """A parsed YAML document: the tree entry point.

    Attributes:
        root:     The single root content node.  Mutated in place by sorting.
        indent:   Spaces per indentation level detected in the source text.
        trailing: Further documents of a multi-document stream.  They are never
                  sorted, only written back unchanged after ``root``.
    """

    root: Node
    indent: int = 2
    trailing: list[Node] = field(default_factory=list)
