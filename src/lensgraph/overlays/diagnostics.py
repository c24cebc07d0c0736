"""
Overlay lifecycle diagnostics.

Emits one ``key=value`` line per apply, clear or compose event. Lines are
meant for humans reading dev logs, not for machine parsing, and are
suppressed entirely when LENSGRAPH_ENV=production.
"""

import logging
from typing import Literal, Optional

from ..config import is_production

logger = logging.getLogger(__name__)

OverlayLogEvent = Literal["apply", "clear", "compose"]

# Output order of optional fields, mapped to their line keys
_FIELDS = (
    ("id", "id"),
    ("kind", "kind"),
    ("correlation_id", "corr"),
    ("remaining", "remaining"),
    ("nodes", "nodes"),
    ("edges", "edges"),
    ("overlays_size", "overlays"),
    ("deps", "deps"),
    ("dependents", "dependents"),
    ("visible", "visible"),
    ("reason", "reason"),
    ("note", "note"),
)


def format_overlay_line(event: OverlayLogEvent, **meta) -> str:
    """Build the diagnostic line; keys that are None or empty are omitted."""
    parts = ["[overlay]", f"event={event}"]
    for name, key in _FIELDS:
        value = meta.get(name)
        if value is None or value == "":
            continue
        parts.append(f"{key}={value}")
    return " ".join(parts)


def log_overlay(
    event: OverlayLogEvent,
    *,
    id: Optional[str] = None,
    kind: Optional[str] = None,
    correlation_id: Optional[str] = None,
    remaining: Optional[int] = None,
    nodes: Optional[int] = None,
    edges: Optional[int] = None,
    overlays_size: Optional[int] = None,
    deps: Optional[int] = None,
    dependents: Optional[int] = None,
    visible: Optional[int] = None,
    reason: Optional[str] = None,
    note: Optional[str] = None,
) -> None:
    if is_production():
        return
    logger.info(format_overlay_line(
        event,
        id=id,
        kind=kind,
        correlation_id=correlation_id,
        remaining=remaining,
        nodes=nodes,
        edges=edges,
        overlays_size=overlays_size,
        deps=deps,
        dependents=dependents,
        visible=visible,
        reason=reason,
        note=note,
    ))
