"""Shared fixtures for lensgraph tests."""

import logging
from datetime import datetime, timezone

import pytest

from lensgraph.core.types import BaseGraph, GraphEdge, GraphNode


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Undo root-logger configuration done by CLI invocations (``configure_logging``)."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def cycle_graph() -> BaseGraph:
    """A -> B -> C -> D -> A, each node with display fields."""
    nodes = [
        GraphNode(id=node_id, label=f"Node {node_id}", path=f"/workspace/{node_id.lower()}.ts")
        for node_id in ("A", "B", "C", "D")
    ]
    edges = [
        GraphEdge(source="A", target="B"),
        GraphEdge(source="B", target="C"),
        GraphEdge(source="C", target="D"),
        GraphEdge(source="D", target="A"),
    ]
    return BaseGraph(nodes=nodes, edges=edges)


@pytest.fixture
def t1() -> datetime:
    return datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def t2() -> datetime:
    return datetime(2024, 1, 2, 12, 0, tzinfo=timezone.utc)
