"""Shared helpers and fixtures for the yays test suite.

YAML samples are written as indented triple-quoted strings and dedented, so
they read like the files the tool is pointed at.
"""

from __future__ import annotations

import textwrap
from collections.abc import Callable

import pytest

from yays.tree.io import load_document
from yays.tree.nodes import Document


def yaml_text(source: str) -> str:
    """Dedent a YAML sample and drop the leading newline."""
    return textwrap.dedent(source).lstrip("\n")


@pytest.fixture
def load() -> Callable[[str], Document]:
    """Dedent and load a YAML sample into a Document."""

    def _load(source: str) -> Document:
        return load_document(yaml_text(source))

    return _load


@pytest.fixture
def fruit_sequence() -> str:
    """Four mappings whose first field is ``name``, deliberately unsorted."""
    return yaml_text(
        """
        - name: Banana
          price: 30
          colour: Yellow
        - name: Strawberry
          price: 10
          colour: Red
        - name: Apple
          price: 20
          colour: Red
        - name: Orange
          price: 30
          colour: Orange
        """
    )


@pytest.fixture
def person_mapping() -> str:
    return yaml_text(
        """
        name: John Doe
        age: 30
        is_student: false
        gpa: 3.85
        """
    )
