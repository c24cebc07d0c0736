"""
Core type definitions for lensgraph.

The base graph is an externally produced snapshot; nodes and edges are
opaque beyond their identity fields, so any extra display attributes
(label, path, package, ...) are carried through untouched.

Overlays share a common audit envelope and are discriminated by ``kind``.
They are frozen: the store replaces them wholesale instead of editing them.
"""

from datetime import datetime, timezone
from enum import StrEnum
from typing import Annotated, Any, Dict, List, Literal, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from ..config import default_focus_depth


class OverlayKind(StrEnum):
    """Discriminator for overlay variants."""
    FOCUS = "focus"
    HEATMAP = "heatmap"
    IMPACT = "impact"


class HeatmapDecoration(BaseModel):
    """Intensity metadata attached to a decorated node."""
    color: str
    score: float

    model_config = ConfigDict(frozen=True)


class GraphNode(BaseModel):
    """
    A node of the base graph.

    Only ``id`` is interpreted; every other attribute is kept as extra data.
    """
    id: str
    heatmap: Optional[HeatmapDecoration] = None

    model_config = ConfigDict(extra="allow")


class GraphEdge(BaseModel):
    """
    Directed edge between two node ids.
    """
    source: str
    target: str
    id: Optional[str] = None

    model_config = ConfigDict(extra="allow")

    @property
    def key(self) -> str:
        """Stable identity used in edge-id sets."""
        if self.id:
            return self.id
        return f"{self.source}->{self.target}"


class BaseGraph(BaseModel):
    """
    Immutable dependency graph snapshot produced by an external analyzer.
    """
    nodes: List[GraphNode] = Field(default_factory=list)
    edges: List[GraphEdge] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)


class BaseOverlay(BaseModel):
    """
    Audit envelope shared by every overlay kind.

    Accepts both snake_case field names and the camelCase keys used by
    UI payloads (``targetNodeId``, ``createdAt``, ...).
    """
    id: str
    kind: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    correlation_id: Optional[str] = None

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class FocusOverlay(BaseOverlay):
    """Restricts the view to a depth-limited neighborhood of a target node."""
    kind: Literal["focus"] = "focus"
    target_node_id: str
    depth: int = Field(default_factory=default_focus_depth)
    include_incoming: bool = True
    include_outgoing: bool = True


class ImpactOverlay(BaseOverlay):
    """Restricts the view to a target node plus its direct neighbors."""
    kind: Literal["impact"] = "impact"
    target_node_id: str
    # Direct outgoing neighbors, supplied by the caller
    dependencies: List[str] = Field(default_factory=list)
    # Direct incoming neighbors, supplied by the caller
    dependents: List[str] = Field(default_factory=list)


class HeatmapValue(BaseModel):
    """One risk score produced by the metrics engine."""
    node_id: str
    score: float
    color: Optional[str] = None
    metrics: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class HeatmapOverlay(BaseOverlay):
    """Decorates visible nodes with color and score, never filters."""
    kind: Literal["heatmap"] = "heatmap"
    # Input order preserved, not sorted
    values: List[HeatmapValue] = Field(default_factory=list)
    center_node: Optional[str] = None
    distribution: Optional[Any] = None
    total_files: Optional[int] = None


Overlay = Annotated[
    Union[FocusOverlay, ImpactOverlay, HeatmapOverlay],
    Field(discriminator="kind"),
]

OverlayAdapter: TypeAdapter[Overlay] = TypeAdapter(Overlay)


class ComposedRenderModel(BaseModel):
    """
    Render model handed to the drawing layer.

    Derived and ephemeral: recomputed on every composition.
    """
    nodes: List[GraphNode] = Field(default_factory=list)
    edges: List[GraphEdge] = Field(default_factory=list)
    # Reserved for overlay-provided style layers
    styles: Dict[str, Any] = Field(default_factory=dict)


OverlayT = TypeVar("OverlayT", bound=BaseOverlay)


def create_overlay(overlay_cls: Type[OverlayT], **fields: Any) -> OverlayT:
    """
    Build an overlay stamped with matching created/updated timestamps.

    Example:
        create_overlay(FocusOverlay, id="focus", target_node_id="src/a.ts", depth=1)
    """
    now = datetime.now(timezone.utc)
    fields.setdefault("created_at", now)
    fields.setdefault("updated_at", now)
    return overlay_cls(**fields)


def is_focus_overlay(overlay: Any) -> bool:
    return isinstance(overlay, FocusOverlay)


def is_impact_overlay(overlay: Any) -> bool:
    return isinstance(overlay, ImpactOverlay)


def is_heatmap_overlay(overlay: Any) -> bool:
    return isinstance(overlay, HeatmapOverlay)
