"""Resolve a ParsedPath against a Document into an ordered list of targets.

Resolution keeps a working set of nodes, starting with the document root, and
rewrites it once per step:

- KeyStep:      mapping -> value under the key (first match, insertion order).
                sequence -> element at ``int(name)`` when ``name`` is digits.
- IndexStep:    sequence -> element at the index.
- WildcardStep: sequence -> every element; mapping -> every value.

Each working-set node expands independently and the results are concatenated,
so the final order is (outer node order, inner expansion order).  A step that
does not fit the node it reaches raises a ResolveError subclass naming the
path, the step, and the node.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ruamel.yaml.nodes import ScalarNode

from yays.errors import (
    IndexOutOfRangeError,
    KeyNotFoundError,
    NotAMappingError,
    NotASequenceError,
    NotIterableError,
    ResolveError,
)
from yays.path.steps import IndexStep, KeyStep, ParsedPath, Step, WildcardStep
from yays.tree.nodes import NodeKind, node_kind, node_line

if TYPE_CHECKING:
    from ruamel.yaml.nodes import Node

    from yays.tree.nodes import Document

__all__ = ["resolve_targets"]

_DIGITS = re.compile(r"^[0-9]+$")


def _fail(
    error: type[ResolveError],
    message: str,
    parsed: ParsedPath,
    step: Step,
    node: Node,
) -> ResolveError:
    return error(
        message,
        path=parsed.source,
        step=step,
        node_kind=node_kind(node),
        line=node_line(node),
    )


def _element_at(node: Node, index: int, parsed: ParsedPath, step: Step) -> Node:
    size = len(node.value)
    if not 0 <= index < size:
        raise _fail(
            IndexOutOfRangeError,
            f"index {index} out of range [0,{size})",
            parsed,
            step,
            node,
        )
    return node.value[index]


def _descend_key(node: Node, step: KeyStep, parsed: ParsedPath) -> Node:
    kind = node_kind(node)
    if kind is NodeKind.SEQUENCE:
        if _DIGITS.match(step.name):
            return _element_at(node, int(step.name), parsed, step)
        raise _fail(
            NotAMappingError,
            f"cannot look up key {step.name!r} in a sequence",
            parsed,
            step,
            node,
        )
    if kind is not NodeKind.MAPPING:
        raise _fail(
            NotAMappingError,
            f"cannot descend into {kind} at token {step.name!r}",
            parsed,
            step,
            node,
        )
    for key, value in node.value:
        if isinstance(key, ScalarNode) and key.value == step.name:
            return value
    raise _fail(
        KeyNotFoundError,
        f"key {step.name!r} not found in mapping",
        parsed,
        step,
        node,
    )


def _descend_index(node: Node, step: IndexStep, parsed: ParsedPath) -> Node:
    kind = node_kind(node)
    if kind is not NodeKind.SEQUENCE:
        raise _fail(
            NotASequenceError,
            f"expected a sequence for index {step.index}, got {kind}",
            parsed,
            step,
            node,
        )
    return _element_at(node, step.index, parsed, step)


def _expand(node: Node, step: WildcardStep, parsed: ParsedPath) -> list[Node]:
    kind = node_kind(node)
    if kind is NodeKind.SEQUENCE:
        return list(node.value)
    if kind is NodeKind.MAPPING:
        return [value for _, value in node.value]
    raise _fail(
        NotIterableError,
        f"selection [*] requires a sequence or mapping target (got {kind})",
        parsed,
        step,
        node,
    )


def resolve_targets(document: Document, parsed: ParsedPath) -> list[Node]:
    """Resolve ``parsed`` against the current state of ``document``.

    Args:
        document: The document to navigate.  It is not modified.
        parsed:   Steps produced by ``parse_path``.

    Returns:
        The target nodes in deterministic order.  A root path returns
        ``[document.root]``.

    Raises:
        ResolveError: On the first step that does not fit the node it reaches.
    """
    current: list[Node] = [document.root]

    for step in parsed.steps:
        following: list[Node] = []
        for node in current:
            if isinstance(step, KeyStep):
                following.append(_descend_key(node, step, parsed))
            elif isinstance(step, IndexStep):
                following.append(_descend_index(node, step, parsed))
            else:
                following.extend(_expand(node, step, parsed))
        current = following

    return current
