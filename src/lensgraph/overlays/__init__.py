"""Overlay adapters, composition pipeline and session façade."""

from .compose import compose_renderable
from .diagnostics import format_overlay_line, log_overlay
from .focus import FocusSubgraph, FocusTraversalFlags, compute_focus_subgraph
from .heatmap import decorate_heatmap
from .impact import ImpactSummary, build_impact_visible_set, summarize_impact
from .session import OverlaySession

__all__ = [
    "FocusSubgraph",
    "FocusTraversalFlags",
    "ImpactSummary",
    "OverlaySession",
    "build_impact_visible_set",
    "compose_renderable",
    "compute_focus_subgraph",
    "decorate_heatmap",
    "format_overlay_line",
    "log_overlay",
    "summarize_impact",
]
