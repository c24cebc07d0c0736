"""
Bench Command - Time overlay composition on a synthetic graph.

Usage:
    lensgraph bench --nodes 2000 --iterations 30
    lensgraph bench --json
"""

import click
from rich.console import Console
from rich.table import Table

from ... import config
from ...analysis.benchmark import run_composition_benchmark

console = Console()


@click.command("bench")
@click.option("-n", "--nodes", "node_count", default=config.BENCHMARK_NODE_COUNT, type=click.IntRange(min=1),
              help="Number of nodes in the synthetic graph")
@click.option("-i", "--iterations", default=config.BENCHMARK_ITERATIONS, type=click.IntRange(min=1),
              help="Timed composition runs")
@click.option("-d", "--depth", "focus_depth", default=None, type=click.IntRange(min=0),
              help="Focus overlay depth (default: LENSGRAPH_DEFAULT_FOCUS_DEPTH or 2)")
@click.option("--seed", type=int, default=None, help="Seed for a reproducible graph")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def bench(node_count: int, iterations: int, focus_depth: int | None, seed: int | None, as_json: bool) -> None:
    """
    Benchmark focus + heatmap composition.
    """
    result = run_composition_benchmark(
        node_count=node_count,
        iterations=iterations,
        focus_depth=focus_depth,
        seed=seed,
    )

    if as_json:
        click.echo(result.model_dump_json(indent=2))
        return

    table = Table(title="Overlay composition benchmark")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Nodes", str(result.node_count))
    table.add_row("Edges", str(result.edge_count))
    table.add_row("Focus depth", str(result.focus_depth))
    table.add_row("Heatmap values", str(result.heatmap_values))
    table.add_row("Iterations", str(result.iterations))
    table.add_row("Average (ms)", f"{result.avg_ms:.2f}")
    table.add_row("p95 (ms)", f"{result.p95_ms:.2f}")
    table.add_row("Max (ms)", f"{result.max_ms:.2f}")
    console.print(table)
