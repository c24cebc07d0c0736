"""Core data types, overlay state store and graph index."""

from .graph import GraphIndex
from .state import (
    OverlayState,
    apply_overlay,
    clear_overlay,
    create_overlay_state,
    get_overlay,
)
from .types import (
    BaseGraph,
    BaseOverlay,
    ComposedRenderModel,
    FocusOverlay,
    GraphEdge,
    GraphNode,
    HeatmapDecoration,
    HeatmapOverlay,
    HeatmapValue,
    ImpactOverlay,
    Overlay,
    OverlayAdapter,
    OverlayKind,
    create_overlay,
    is_focus_overlay,
    is_heatmap_overlay,
    is_impact_overlay,
)

__all__ = [
    "BaseGraph",
    "BaseOverlay",
    "ComposedRenderModel",
    "FocusOverlay",
    "GraphEdge",
    "GraphIndex",
    "GraphNode",
    "HeatmapDecoration",
    "HeatmapOverlay",
    "HeatmapValue",
    "ImpactOverlay",
    "Overlay",
    "OverlayAdapter",
    "OverlayKind",
    "OverlayState",
    "apply_overlay",
    "clear_overlay",
    "create_overlay",
    "create_overlay_state",
    "get_overlay",
    "is_focus_overlay",
    "is_heatmap_overlay",
    "is_impact_overlay",
]
