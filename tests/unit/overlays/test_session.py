"""
Unit tests for the OverlaySession façade.
"""

import logging
from unittest.mock import patch

import pytest

from lensgraph.core.types import BaseGraph, FocusOverlay, GraphNode, HeatmapOverlay, ImpactOverlay
from lensgraph.overlays.session import OverlaySession

LOGGER_NAME = "lensgraph.overlays.diagnostics"


@pytest.fixture(autouse=True)
def development_env(monkeypatch):
    monkeypatch.delenv("LENSGRAPH_ENV", raising=False)


class TestOverlaySession:
    def test_render_without_graph(self):
        session = OverlaySession()
        model = session.render()
        assert model.nodes == [] and model.edges == []

    def test_apply_and_render(self, cycle_graph):
        session = OverlaySession(cycle_graph)
        session.apply(FocusOverlay(id="focus", target_node_id="B", depth=1, include_incoming=False))
        assert {n.id for n in session.render().nodes} == {"B", "C"}

    def test_snapshots_stay_valid(self, cycle_graph):
        session = OverlaySession(cycle_graph)
        before = session.state
        after = session.apply(FocusOverlay(id="focus", target_node_id="B", depth=0))

        assert before is not after
        assert len(before) == 0
        assert session.state is after

    def test_clear_unknown_id_keeps_state_reference(self, cycle_graph):
        session = OverlaySession(cycle_graph)
        state = session.apply(HeatmapOverlay(id="heatmap"))
        assert session.clear("missing") is state

    def test_clear_all(self, cycle_graph):
        session = OverlaySession(cycle_graph)
        session.apply(FocusOverlay(id="focus", target_node_id="B", depth=0))
        session.apply(HeatmapOverlay(id="heatmap"))
        session.clear_all(reason="graphRefresh")
        assert len(session.state) == 0
        assert len(session.render().nodes) == 4

    def test_replace_graph_keeps_overlays(self, cycle_graph):
        session = OverlaySession(cycle_graph)
        session.apply(FocusOverlay(id="focus", target_node_id="B", depth=0))

        session.replace_graph(BaseGraph(nodes=[GraphNode(id="B"), GraphNode(id="E")]))

        assert session.base_graph.nodes[1].id == "E"
        assert [n.id for n in session.render().nodes] == ["B"]


class TestOverlaySessionLogging:
    def test_lifecycle_lines(self, cycle_graph, caplog):
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)
        session = OverlaySession(cycle_graph)

        session.apply(ImpactOverlay(
            id="impact",
            target_node_id="B",
            dependencies=["C"],
            dependents=["A"],
            correlation_id="req-7",
        ))
        session.render()
        session.clear("impact", reason="user")

        assert caplog.messages == [
            "[overlay] event=apply id=impact kind=impact corr=req-7 overlays=1 deps=1 dependents=1 visible=3",
            "[overlay] event=compose nodes=3 edges=2 overlays=1",
            "[overlay] event=clear id=impact kind=impact remaining=0 reason=user",
        ]

    def test_noop_clear_not_logged(self, cycle_graph):
        session = OverlaySession(cycle_graph)
        with patch("lensgraph.overlays.session.log_overlay") as mock_log:
            session.clear("missing")
        mock_log.assert_not_called()
