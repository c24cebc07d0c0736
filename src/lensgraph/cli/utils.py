"""
CLI Utilities - Shared helpers for command line operations.

Formatted printing, logging setup and loading of graph / overlay JSON files.
"""

import json
import logging
from pathlib import Path
from typing import List

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from ..core.types import BaseGraph, BaseOverlay, OverlayAdapter
from ..exceptions import GraphLoadError, OverlayPayloadError


def echo_success(message: str) -> None:
    """Print a success message with a green checkmark."""
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """Print an error message with a red cross to stderr."""
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def configure_logging(verbose: bool) -> None:
    """
    Route lensgraph logs through rich.

    Quiet by default; ``--verbose`` surfaces overlay diagnostics.
    """
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )


def load_graph(graph_file: str) -> BaseGraph:
    """
    Load a base graph from a ``{"nodes": [...], "edges": [...]}`` JSON file.

    Raises:
        GraphLoadError: If the file is missing, unreadable or malformed.
    """
    graph_path = Path(graph_file)
    if not graph_path.is_file():
        raise GraphLoadError(graph_file, "file not found")

    try:
        return BaseGraph.model_validate_json(graph_path.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as e:
        raise GraphLoadError(graph_file, str(e)) from e


def load_overlays(overlay_file: str) -> List[BaseOverlay]:
    """
    Load a JSON list of overlay payloads (camelCase or snake_case keys).

    Raises:
        GraphLoadError: If the file cannot be read or is not a JSON list.
        OverlayPayloadError: If an entry is not a valid overlay.
    """
    overlay_path = Path(overlay_file)
    try:
        payloads = json.loads(overlay_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise GraphLoadError(overlay_file, str(e)) from e

    if not isinstance(payloads, list):
        raise GraphLoadError(overlay_file, "expected a JSON list of overlays")

    overlays: List[BaseOverlay] = []
    for position, payload in enumerate(payloads):
        try:
            overlays.append(OverlayAdapter.validate_python(payload))
        except ValidationError as e:
            raise OverlayPayloadError(position, str(e)) from e
    return overlays
