"""Pytest fixtures."""

from __future__ import annotations

import pytest

from svgtree import Node


@pytest.fixture
def small_tree() -> Node:
    """A root element with two text children."""
    return (
        Node.root()
        .add(Node.leaf('abc', 'def'))
        .add(Node.leaf('hij', 'lmnop'))
    )
