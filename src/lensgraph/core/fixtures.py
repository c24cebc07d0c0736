"""
Synthetic graph generator.

Produces file-like dependency graphs of arbitrary size for benchmarks and
stability tests. Pass a seed to get the same graph on every call.
"""

import random
from datetime import datetime, timezone
from typing import List, Optional

from .types import BaseGraph, GraphEdge, GraphNode

FILE_TYPES = ["ts", "js", "tsx", "jsx", "css", "html", "md", "json", "test.ts"]
DIRECTORIES = ["src", "components", "utils", "services", "types", "tests", "docs"]


def generate_test_graph(node_count: int, seed: Optional[int] = None) -> BaseGraph:
    """
    Generate a graph of ``node_count`` file nodes with roughly two edges per node.

    Self loops are skipped, so the edge count can land slightly below 2 * N.
    """
    rng = random.Random(seed)
    nodes: List[GraphNode] = []
    edges: List[GraphEdge] = []

    for i in range(node_count):
        file_type = FILE_TYPES[i % len(FILE_TYPES)]
        directory = DIRECTORIES[i % len(DIRECTORIES)]
        file_name = f"{directory}/file{i}.{file_type}"
        nodes.append(GraphNode(
            id=file_name,
            label=f"File{i}",
            path=f"/workspace/{file_name}",
            package=directory,
        ))

    if node_count > 1:
        edge_attempts = min(node_count * 2, node_count * (node_count - 1) // 2)
        for _ in range(edge_attempts):
            source_idx = rng.randrange(node_count)
            target_idx = rng.randrange(node_count)
            if source_idx != target_idx:
                edges.append(GraphEdge(
                    source=nodes[source_idx].id,
                    target=nodes[target_idx].id,
                ))

    return BaseGraph(
        nodes=nodes,
        edges=edges,
        metadata={
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "workspace_root": "/workspace",
            "scan_path": "src",
        },
    )
