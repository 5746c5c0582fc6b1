"""Load and dump YAML documents through ruamel.yaml's node-level API.

``load_document`` composes the source into a representation graph (no Python
objects are constructed), so key order, scalar text, quoting style, flow/block
style and attached comments all survive.  ``dump_document`` serializes the same
graph back with the requested indentation width.

Only the first document of a stream is exposed for sorting.  Any further
documents are carried along untouched in ``Document.trailing``.
"""

from __future__ import annotations

import io
import logging

from ruamel.yaml import YAML
from ruamel.yaml.emitter import RoundTripEmitter
from ruamel.yaml.error import YAMLError

from yays.errors import YamlDecodeError
from yays.tree.indentation import detect_indentation
from yays.tree.nodes import Document

__all__ = ["dump_document", "load_document"]

logger = logging.getLogger(__name__)

# Never fold long scalars: the sorter must not reflow content.
_UNLIMITED_WIDTH = 1 << 30

# Content of an item in a flush sequence starts right after "- ".
_DASH_WIDTH = 2


class _SequenceIndentEmitter(RoundTripEmitter):
    """Round-trip emitter that indents block sequences only under mapping keys.

    A sequence that is a mapping value gets its dash ``indent`` columns in,
    with item content two columns further.  A sequence at the document root,
    or directly inside another sequence, keeps its dash on the parent's
    content column, as in ``- - a``.
    """

    def expect_block_sequence_item(self, first: bool = False) -> None:
        if not (len(self.indents) == 1 or self.indents.seq_seq()):
            super().expect_block_sequence_item(first)
            return

        offset, indent = self.sequence_dash_offset, self.best_sequence_indent
        self.sequence_dash_offset, self.best_sequence_indent = 0, _DASH_WIDTH
        try:
            super().expect_block_sequence_item(first)
        finally:
            self.sequence_dash_offset, self.best_sequence_indent = offset, indent


def _round_trip_yaml(indent: int | None = None) -> YAML:
    """Build a fresh round-trip YAML instance, optionally with indentation."""
    yaml = YAML(typ="rt")
    yaml.width = _UNLIMITED_WIDTH
    if indent is not None:
        yaml.Emitter = _SequenceIndentEmitter
        yaml.indent(mapping=indent, sequence=indent + _DASH_WIDTH, offset=indent)
    return yaml


def load_document(text: str) -> Document:
    """Parse YAML text into a Document.

    Args:
        text: YAML source.  Only the first document is sortable.

    Returns:
        A Document whose ``indent`` is detected from ``text``.

    Raises:
        YamlDecodeError: If ``text`` is not valid YAML or holds no document.
    """
    yaml = _round_trip_yaml()
    try:
        nodes = list(yaml.compose_all(text))
    except YAMLError as exc:
        raise YamlDecodeError(f"failed to decode YAML: {exc}") from exc
    if not nodes:
        raise YamlDecodeError("failed to decode YAML: no document found")

    indent = detect_indentation(text)
    logger.debug(
        "Loaded YAML: indent=%d, trailing documents=%d", indent, len(nodes) - 1
    )
    return Document(root=nodes[0], indent=indent, trailing=nodes[1:])


def dump_document(document: Document, indent: int | None = None) -> str:
    """Serialize a Document back to YAML text.

    Args:
        document: The (possibly sorted) document.
        indent:   Spaces per level.  Defaults to ``document.indent``.

    Returns:
        The YAML text, including any trailing documents.

    Raises:
        ValueError: If ``indent`` is smaller than 1.
    """
    width = document.indent if indent is None else indent
    if width < 1:
        msg = f"indent must be >= 1, got {width}"
        raise ValueError(msg)

    yaml = _round_trip_yaml(width)
    stream = io.StringIO()
    yaml.serialize_all([document.root, *document.trailing], stream)
    return stream.getvalue()
