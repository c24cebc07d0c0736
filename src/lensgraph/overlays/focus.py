"""
Focus Overlay Traversal.

Computes the depth-limited neighborhood of a target node with a
breadth-first walk over the base graph's adjacency.
"""

from collections import deque
from dataclasses import dataclass
from typing import FrozenSet, Optional

from ..core.graph import GraphIndex
from ..core.types import BaseGraph


@dataclass(frozen=True)
class FocusTraversalFlags:
    """Which edge directions the traversal may follow."""
    include_incoming: bool = True
    include_outgoing: bool = True


@dataclass(frozen=True)
class FocusSubgraph:
    """Node ids reached by the traversal and the edges between them."""
    node_ids: FrozenSet[str] = frozenset()
    edge_ids: FrozenSet[str] = frozenset()


def compute_focus_subgraph(
    base_graph: Optional[BaseGraph],
    target_id: str,
    depth: int,
    flags: Optional[FocusTraversalFlags] = None,
) -> FocusSubgraph:
    """
    Collect every node within ``depth`` hops of ``target_id``.

    Nodes at the depth limit are kept but not expanded. Edges are selected
    afterwards by membership: any base-graph edge whose source and target
    were both reached is included, whether or not the walk used it.

    Returns an empty subgraph for a missing graph, an empty target id or a
    negative depth.
    """
    if base_graph is None or not target_id or depth is None or depth < 0:
        return FocusSubgraph()

    flags = flags or FocusTraversalFlags()
    index = GraphIndex.from_graph(base_graph)

    visited = {target_id}
    queue = deque([(target_id, 0)])

    while queue:
        current_id, dist = queue.popleft()
        if dist >= depth:
            continue

        neighbors = []
        if flags.include_outgoing:
            neighbors.extend(index.successors(current_id))
        if flags.include_incoming:
            neighbors.extend(index.predecessors(current_id))

        for neighbor_id in neighbors:
            if neighbor_id not in visited:
                visited.add(neighbor_id)
                queue.append((neighbor_id, dist + 1))

    edge_ids = frozenset(
        edge.key
        for edge in base_graph.edges
        if edge.source in visited and edge.target in visited
    )
    return FocusSubgraph(node_ids=frozenset(visited), edge_ids=edge_ids)
