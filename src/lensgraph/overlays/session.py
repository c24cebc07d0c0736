"""
Overlay Session.

Holds the current base graph and overlay state for one UI session, logs
lifecycle events and recomposes on demand. The session is a thin wrapper:
all state transitions go through the pure functions in ``core.state``, so
any ``state`` snapshot taken from it stays valid after later changes.
"""

from typing import Optional

from ..core.state import OverlayState, apply_overlay, clear_overlay, create_overlay_state
from ..core.types import BaseGraph, BaseOverlay, ComposedRenderModel, is_impact_overlay
from .compose import compose_renderable
from .diagnostics import log_overlay
from .impact import summarize_impact


class OverlaySession:
    """
    Stateful façade over the overlay store and composition pipeline.
    """

    def __init__(self, base_graph: Optional[BaseGraph] = None):
        self._base_graph = base_graph
        self._state: OverlayState = create_overlay_state()

    @property
    def base_graph(self) -> Optional[BaseGraph]:
        return self._base_graph

    @property
    def state(self) -> OverlayState:
        return self._state

    def apply(self, overlay: BaseOverlay) -> OverlayState:
        """Insert or update an overlay."""
        self._state = apply_overlay(self._state, overlay)

        counts = {}
        if is_impact_overlay(overlay):
            counts = summarize_impact(overlay)._asdict()

        log_overlay(
            "apply",
            id=overlay.id,
            kind=overlay.kind,
            correlation_id=overlay.correlation_id,
            overlays_size=len(self._state),
            **counts,
        )
        return self._state

    def clear(self, overlay_id: str, reason: str = "user") -> OverlayState:
        """Remove an overlay; clearing an unknown id changes nothing and logs nothing."""
        previous = self._state
        self._state = clear_overlay(previous, overlay_id)
        if self._state is not previous:
            log_overlay(
                "clear",
                id=overlay_id,
                kind=previous[overlay_id].kind,
                remaining=len(self._state),
                reason=reason,
            )
        return self._state

    def clear_all(self, reason: str = "user") -> OverlayState:
        for overlay_id in list(self._state):
            self.clear(overlay_id, reason=reason)
        return self._state

    def replace_graph(self, base_graph: Optional[BaseGraph]) -> None:
        """Swap in a freshly scanned graph. Overlays are kept."""
        self._base_graph = base_graph

    def render(self) -> ComposedRenderModel:
        model = compose_renderable(self._base_graph, self._state)
        log_overlay(
            "compose",
            nodes=len(model.nodes),
            edges=len(model.edges),
            overlays_size=len(self._state),
        )
        return model
