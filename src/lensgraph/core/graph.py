"""
Adjacency index backed by rustworkx.

Maps the string node ids of a ``BaseGraph`` onto rustworkx integer indices
so traversals can walk incoming and outgoing edges cheaply. An index is
built per call and discarded with it; it never writes back to the graph.
"""

from typing import Dict, List, Optional

import rustworkx as rx

from .types import BaseGraph


class GraphIndex:
    """
    Directed multigraph view over node ids.

    Edge endpoints that are missing from the node list still get an index,
    so edges pointing outside the snapshot remain traversable.
    """

    def __init__(self):
        self._graph = rx.PyDiGraph(multigraph=True)
        self._id_to_idx: Dict[str, int] = {}
        self._idx_to_id: Dict[int, str] = {}

    @classmethod
    def from_graph(cls, base_graph: BaseGraph) -> "GraphIndex":
        index = cls()
        for node in base_graph.nodes:
            index.add_node(node.id)
        for edge in base_graph.edges:
            index.add_edge(edge.source, edge.target)
        return index

    def add_node(self, node_id: str) -> int:
        """Register a node id, returning its index (existing ids are reused)."""
        idx = self._id_to_idx.get(node_id)
        if idx is None:
            idx = self._graph.add_node(node_id)
            self._id_to_idx[node_id] = idx
            self._idx_to_id[idx] = node_id
        return idx

    def add_edge(self, source_id: str, target_id: str) -> None:
        u_idx = self.add_node(source_id)
        v_idx = self.add_node(target_id)
        self._graph.add_edge(u_idx, v_idx, None)

    def has_node(self, node_id: str) -> bool:
        return node_id in self._id_to_idx

    def successors(self, node_id: str) -> List[str]:
        """Targets of edges leaving ``node_id`` (one entry per edge)."""
        idx = self._lookup(node_id)
        if idx is None:
            return []
        return [self._idx_to_id[target] for _, target, _ in self._graph.out_edges(idx)]

    def predecessors(self, node_id: str) -> List[str]:
        """Sources of edges entering ``node_id`` (one entry per edge)."""
        idx = self._lookup(node_id)
        if idx is None:
            return []
        return [self._idx_to_id[source] for source, _, _ in self._graph.in_edges(idx)]

    @property
    def node_count(self) -> int:
        return self._graph.num_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.num_edges()

    def _lookup(self, node_id: str) -> Optional[int]:
        return self._id_to_idx.get(node_id)
