"""
lensgraph - Overlay composition for interactive dependency graphs.

Composes analytical lenses (focus, impact, heatmap) over an immutable base
graph into a deterministic render model.

Key Components:
- core: Data types, overlay state store and graph index
- overlays: Focus traversal, impact sets, heatmap decoration, composition
- analysis: Composition benchmark

Usage:
    from lensgraph import (
        BaseGraph, FocusOverlay, apply_overlay, compose_renderable,
        create_overlay, create_overlay_state,
    )

    state = apply_overlay(
        create_overlay_state(),
        create_overlay(FocusOverlay, id="focus", target_node_id="src/a.ts", depth=1),
    )
    model = compose_renderable(graph, state)
"""

__version__ = "0.1.0"

from .core.state import (
    OverlayState,
    apply_overlay,
    clear_overlay,
    create_overlay_state,
    get_overlay,
)
from .core.types import (
    BaseGraph,
    ComposedRenderModel,
    FocusOverlay,
    GraphEdge,
    GraphNode,
    HeatmapOverlay,
    HeatmapValue,
    ImpactOverlay,
    OverlayKind,
    create_overlay,
)
from .overlays.compose import compose_renderable
from .overlays.session import OverlaySession

__all__ = [
    "__version__",
    "BaseGraph",
    "ComposedRenderModel",
    "FocusOverlay",
    "GraphEdge",
    "GraphNode",
    "HeatmapOverlay",
    "HeatmapValue",
    "ImpactOverlay",
    "OverlayKind",
    "OverlaySession",
    "OverlayState",
    "apply_overlay",
    "clear_overlay",
    "compose_renderable",
    "create_overlay",
    "create_overlay_state",
    "get_overlay",
]
