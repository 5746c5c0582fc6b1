"""Tree subpackage for YAML document primitives.

Re-exports the public API for the tree module:
- Document: dataclass wrapping the root node of a parsed YAML document
- NodeKind: StrEnum of the four node kinds (DOCUMENT, MAPPING, SEQUENCE, SCALAR)
- load_document / dump_document: round-trip YAML text through ruamel.yaml nodes
- detect_indentation: infers spaces-per-level from YAML source text
"""

from yays.tree.indentation import detect_indentation
from yays.tree.io import dump_document, load_document
from yays.tree.nodes import Document, NodeKind, node_kind, node_line

__all__ = [
    "Document",
    "NodeKind",
    "detect_indentation",
    "dump_document",
    "load_document",
    "node_kind",
    "node_line",
]
