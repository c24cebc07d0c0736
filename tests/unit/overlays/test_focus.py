"""
Unit tests for depth-limited focus traversal.
"""

import pytest

from lensgraph.core.types import BaseGraph, GraphEdge, GraphNode
from lensgraph.overlays.focus import FocusSubgraph, FocusTraversalFlags, compute_focus_subgraph

OUTGOING_ONLY = FocusTraversalFlags(include_incoming=False, include_outgoing=True)
INCOMING_ONLY = FocusTraversalFlags(include_incoming=True, include_outgoing=False)
BOTH = FocusTraversalFlags()


class TestFocusGuards:
    def test_missing_graph(self):
        assert compute_focus_subgraph(None, "B", 2) == FocusSubgraph()

    @pytest.mark.parametrize("target", ["", None])
    def test_empty_target(self, cycle_graph, target):
        result = compute_focus_subgraph(cycle_graph, target, 2)
        assert result.node_ids == frozenset()
        assert result.edge_ids == frozenset()

    def test_negative_depth(self, cycle_graph):
        assert compute_focus_subgraph(cycle_graph, "B", -1) == FocusSubgraph()


class TestFocusTraversal:
    def test_depth_zero_is_target_only(self, cycle_graph):
        result = compute_focus_subgraph(cycle_graph, "B", 0, BOTH)
        assert result.node_ids == {"B"}
        assert result.edge_ids == frozenset()

    def test_depth_one_outgoing(self, cycle_graph):
        result = compute_focus_subgraph(cycle_graph, "B", 1, OUTGOING_ONLY)
        assert result.node_ids == {"B", "C"}
        assert result.edge_ids == {"B->C"}

    def test_depth_two_outgoing(self, cycle_graph):
        result = compute_focus_subgraph(cycle_graph, "B", 2, OUTGOING_ONLY)
        assert result.node_ids == {"B", "C", "D"}
        assert result.edge_ids == {"B->C", "C->D"}

    def test_depth_one_incoming(self, cycle_graph):
        result = compute_focus_subgraph(cycle_graph, "B", 1, INCOMING_ONLY)
        assert result.node_ids == {"A", "B"}
        assert result.edge_ids == {"A->B"}

    def test_depth_one_both_directions(self, cycle_graph):
        result = compute_focus_subgraph(cycle_graph, "B", 1)
        assert result.node_ids == {"A", "B", "C"}
        assert result.edge_ids == {"A->B", "B->C"}

    def test_both_flags_false_is_target_only(self, cycle_graph):
        flags = FocusTraversalFlags(include_incoming=False, include_outgoing=False)
        result = compute_focus_subgraph(cycle_graph, "B", 10, flags)
        assert result.node_ids == {"B"}

    def test_cycle_terminates_and_covers_graph(self, cycle_graph):
        result = compute_focus_subgraph(cycle_graph, "A", 100, OUTGOING_ONLY)
        assert result.node_ids == {"A", "B", "C", "D"}
        assert len(result.edge_ids) == 4

    def test_unknown_target_still_returned(self, cycle_graph):
        result = compute_focus_subgraph(cycle_graph, "Z", 3)
        assert result.node_ids == {"Z"}
        assert result.edge_ids == frozenset()

    def test_self_loop_kept_at_depth_zero(self):
        graph = BaseGraph(
            nodes=[GraphNode(id="A"), GraphNode(id="B")],
            edges=[GraphEdge(source="A", target="A"), GraphEdge(source="A", target="B")],
        )
        result = compute_focus_subgraph(graph, "A", 0)
        assert result.node_ids == {"A"}
        assert result.edge_ids == {"A->A"}


class TestFocusEdgeSelection:
    def test_edges_between_visited_nodes_included_even_if_not_walked(self):
        """
        B -> C and B -> D are walked; C -> D is never traversed but both
        endpoints are visited, so it belongs to the subgraph.
        """
        graph = BaseGraph(
            nodes=[GraphNode(id=n) for n in "BCD"],
            edges=[
                GraphEdge(source="B", target="C"),
                GraphEdge(source="B", target="D"),
                GraphEdge(source="C", target="D"),
            ],
        )
        result = compute_focus_subgraph(graph, "B", 1, OUTGOING_ONLY)
        assert result.node_ids == {"B", "C", "D"}
        assert result.edge_ids == {"B->C", "B->D", "C->D"}

    def test_explicit_edge_ids_used(self):
        graph = BaseGraph(
            nodes=[GraphNode(id="A"), GraphNode(id="B")],
            edges=[GraphEdge(source="A", target="B", id="imports:1")],
        )
        assert compute_focus_subgraph(graph, "A", 1).edge_ids == {"imports:1"}

    def test_base_graph_not_mutated(self, cycle_graph):
        before = cycle_graph.model_dump()
        compute_focus_subgraph(cycle_graph, "B", 3)
        assert cycle_graph.model_dump() == before
