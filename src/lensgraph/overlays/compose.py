"""
Overlay Composition Pipeline.

Merges an immutable base graph with the active overlays into a render
model in two strict phases:

1. Filter: impact restricts membership, then focus narrows it further.
2. Decorate: heatmap annotates whatever survived filtering.

Only the first overlay of each kind (in state iteration order) takes
effect. Identical inputs always produce structurally equal output. No
logging happens here; see ``OverlaySession`` for lifecycle diagnostics.
"""

from typing import AbstractSet, List, Mapping, Optional, Set, Tuple

from ..core.types import (
    BaseGraph,
    BaseOverlay,
    ComposedRenderModel,
    GraphEdge,
    GraphNode,
    is_focus_overlay,
    is_heatmap_overlay,
    is_impact_overlay,
)
from .focus import FocusTraversalFlags, compute_focus_subgraph
from .heatmap import decorate_heatmap
from .impact import build_impact_visible_set


def compose_renderable(
    base_graph: Optional[BaseGraph],
    overlays: Mapping[str, BaseOverlay],
) -> ComposedRenderModel:
    """
    Compose ``base_graph`` with ``overlays`` into a ``ComposedRenderModel``.

    Neither argument is mutated; returned nodes and edges are copies.
    """
    if base_graph is None:
        return ComposedRenderModel()

    cloned_nodes = [node.model_copy() for node in base_graph.nodes]
    cloned_edges = [edge.model_copy() for edge in base_graph.edges]
    working_nodes, working_edges = cloned_nodes, cloned_edges

    # --- Filter phase ---
    impact_set: Optional[Set[str]] = None
    focus_overlay = None
    for overlay in overlays.values():
        if impact_set is None and is_impact_overlay(overlay):
            impact_set = build_impact_visible_set(overlay)
        elif focus_overlay is None and is_focus_overlay(overlay):
            focus_overlay = overlay
        if impact_set is not None and focus_overlay is not None:
            break

    if impact_set is not None:
        working_nodes, working_edges = _restrict(working_nodes, working_edges, impact_set)

    if focus_overlay is not None:
        # Traverse the unfiltered graph so impact does not truncate the walk
        focus_set = compute_focus_subgraph(
            base_graph,
            focus_overlay.target_node_id,
            focus_overlay.depth,
            FocusTraversalFlags(
                include_incoming=focus_overlay.include_incoming,
                include_outgoing=focus_overlay.include_outgoing,
            ),
        ).node_ids

        if impact_set is None:
            working_nodes, working_edges = _restrict(working_nodes, working_edges, focus_set)
        else:
            intersected = focus_set & impact_set
            if intersected:
                working_nodes, working_edges = _restrict(working_nodes, working_edges, intersected)
            else:
                # Disjoint sets: the focus wins. Restart from the full clone, since the
                # impact-filtered arrays hold no focus node and would leave the view empty
                working_nodes, working_edges = _restrict(cloned_nodes, cloned_edges, focus_set)

    # --- Decoration phase ---
    for overlay in overlays.values():
        if is_heatmap_overlay(overlay):
            working_nodes = decorate_heatmap(working_nodes, overlay)
            break

    return ComposedRenderModel(nodes=working_nodes, edges=working_edges, styles={})


def _restrict(
    nodes: List[GraphNode],
    edges: List[GraphEdge],
    visible: AbstractSet[str],
) -> Tuple[List[GraphNode], List[GraphEdge]]:
    """Keep visible nodes and the edges whose endpoints both survived."""
    kept_nodes = [node for node in nodes if node.id in visible]
    kept_ids = {node.id for node in kept_nodes}
    kept_edges = [edge for edge in edges if edge.source in kept_ids and edge.target in kept_ids]
    return kept_nodes, kept_edges
