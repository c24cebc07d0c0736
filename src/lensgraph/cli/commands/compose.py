"""
Compose Command - Apply overlays to a graph file and emit the render model.

Usage:
    lensgraph compose graph.json --overlays overlays.json
    lensgraph compose graph.json -v -o model.json
"""

import sys
from pathlib import Path

import click

from ...exceptions import LensgraphError
from ...overlays.session import OverlaySession
from ..utils import echo_error, echo_success, load_graph, load_overlays


@click.command("compose")
@click.argument("graph_file", type=click.Path())
@click.option("--overlays", "overlay_file", type=click.Path(), default=None,
              help="JSON list of overlay payloads, applied in order")
@click.option("-o", "--output", type=click.Path(), default=None,
              help="Write the render model here instead of stdout")
def compose(graph_file: str, overlay_file: str | None, output: str | None) -> None:
    """
    Compose GRAPH_FILE with overlays into a render model (JSON).
    """
    try:
        graph = load_graph(graph_file)
        overlays = load_overlays(overlay_file) if overlay_file else []
    except LensgraphError as e:
        echo_error(str(e))
        sys.exit(1)

    session = OverlaySession(graph)
    for overlay in overlays:
        session.apply(overlay)

    model = session.render()
    payload = model.model_dump_json(indent=2, by_alias=True, exclude_unset=True)

    if output:
        Path(output).write_text(payload, encoding="utf-8")
        echo_success(f"Wrote {len(model.nodes)} nodes and {len(model.edges)} edges to {output}")
    else:
        click.echo(payload)
