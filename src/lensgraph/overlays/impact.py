"""
Impact Overlay Adapter.

Derives the visible node set ("blast radius") and diagnostic counts from
an impact overlay. Neighbor lists come precomputed from the caller.
"""

from typing import NamedTuple, Optional, Set

from ..core.types import ImpactOverlay


class ImpactSummary(NamedTuple):
    deps: int
    dependents: int
    visible: int


def build_impact_visible_set(overlay: Optional[ImpactOverlay]) -> Set[str]:
    """
    Target node plus its direct dependencies and dependents.

    Empty ids and repeats of the target are dropped; set semantics remove
    any other duplicates.
    """
    visible: Set[str] = set()
    if overlay is None:
        return visible

    visible.add(overlay.target_node_id)
    for node_id in overlay.dependencies:
        if node_id and node_id != overlay.target_node_id:
            visible.add(node_id)
    for node_id in overlay.dependents:
        if node_id and node_id != overlay.target_node_id:
            visible.add(node_id)
    return visible


def summarize_impact(overlay: ImpactOverlay) -> ImpactSummary:
    """Counts for logging."""
    return ImpactSummary(
        deps=len(overlay.dependencies),
        dependents=len(overlay.dependents),
        visible=len(build_impact_visible_set(overlay)),
    )
