"""
Composition Benchmark.

Measures ``compose_renderable`` latency on a synthetic graph with a focus
and a heatmap overlay applied, the typical interactive workload.
"""

import logging
import math
import random
import time
from typing import List, Optional

from pydantic import BaseModel

from .. import config
from ..core.fixtures import generate_test_graph
from ..core.state import apply_overlay, clear_overlay, create_overlay_state
from ..core.types import FocusOverlay, HeatmapOverlay, HeatmapValue, create_overlay
from ..overlays.compose import compose_renderable

logger = logging.getLogger(__name__)


class BenchmarkResult(BaseModel):
    node_count: int
    edge_count: int
    focus_depth: int
    heatmap_values: int
    iterations: int
    avg_ms: float
    p95_ms: float
    max_ms: float


def run_composition_benchmark(
    node_count: int = config.BENCHMARK_NODE_COUNT,
    iterations: int = config.BENCHMARK_ITERATIONS,
    focus_depth: Optional[int] = None,
    seed: Optional[int] = None,
) -> BenchmarkResult:
    """
    Compose a focus + heatmap view ``iterations`` times and report timings.

    One untimed warm-up run precedes the samples. Overlays are cleared at
    the end so the large value arrays can be collected.
    """
    if node_count < 1:
        raise ValueError("node_count must be at least 1")
    if iterations < 1:
        raise ValueError("iterations must be at least 1")
    if focus_depth is None:
        focus_depth = config.default_focus_depth()

    rng = random.Random(seed)
    graph = generate_test_graph(node_count, seed=seed)
    center_node = graph.nodes[len(graph.nodes) // 2].id

    state = create_overlay_state()
    state = apply_overlay(state, create_overlay(
        FocusOverlay,
        id="focus",
        target_node_id=center_node,
        depth=focus_depth,
        include_incoming=True,
        include_outgoing=True,
    ))

    values = [
        HeatmapValue(node_id=node.id, score=rng.random(), color="#ff8800")
        for node in graph.nodes[:config.BENCHMARK_MAX_HEATMAP_VALUES]
    ]
    state = apply_overlay(state, create_overlay(
        HeatmapOverlay,
        id="heatmap",
        values=values,
        total_files=len(graph.nodes),
    ))

    compose_renderable(graph, state)

    samples: List[float] = []
    for _ in range(iterations):
        start = time.perf_counter()
        compose_renderable(graph, state)
        samples.append((time.perf_counter() - start) * 1000.0)

    samples.sort()
    avg = sum(samples) / len(samples)
    p95_index = min(math.floor(len(samples) * 0.95), len(samples) - 1)

    state = clear_overlay(state, "heatmap")
    state = clear_overlay(state, "focus")

    result = BenchmarkResult(
        node_count=len(graph.nodes),
        edge_count=len(graph.edges),
        focus_depth=focus_depth,
        heatmap_values=len(values),
        iterations=iterations,
        avg_ms=round(avg, 2),
        p95_ms=round(samples[p95_index], 2),
        max_ms=round(samples[-1], 2),
    )
    logger.debug(f"Composition benchmark: {result.model_dump()}")
    return result
