"""
Heatmap Overlay Decorator.

Attaches ``{color, score}`` to nodes that have a heatmap value. Membership
and every other node attribute are left alone.
"""

from typing import Dict, List, Optional

from ..config import default_heatmap_color
from ..core.types import GraphNode, HeatmapDecoration, HeatmapOverlay


def decorate_heatmap(
    nodes: List[GraphNode],
    overlay: Optional[HeatmapOverlay],
) -> List[GraphNode]:
    """
    Return ``nodes`` with heatmap metadata added where a value exists.

    The first value for a node id wins; later duplicates are ignored.
    Undecorated nodes are returned as the same objects, decorated nodes as
    shallow copies. With no overlay or no values the input list itself is
    returned.
    """
    if overlay is None or not overlay.values:
        return nodes

    fallback_color = default_heatmap_color()
    lookup: Dict[str, HeatmapDecoration] = {}
    for value in overlay.values:
        if value.node_id not in lookup:
            lookup[value.node_id] = HeatmapDecoration(
                color=value.color or fallback_color,
                score=value.score,
            )

    decorated: List[GraphNode] = []
    for node in nodes:
        meta = lookup.get(node.id)
        if meta is None:
            decorated.append(node)
        else:
            decorated.append(node.model_copy(update={"heatmap": meta}))
    return decorated
