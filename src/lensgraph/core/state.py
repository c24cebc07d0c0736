"""
Overlay State Store.

A read-only, insertion-ordered mapping from overlay id to overlay. Every
mutator returns a new ``OverlayState``; the instance passed in is never
touched, so callers can compare snapshots by reference to detect change.
"""

from datetime import datetime, timezone
from typing import Dict, Iterator, Mapping, Optional

from .types import BaseOverlay


class OverlayState(Mapping[str, BaseOverlay]):
    """
    Immutable overlay collection keyed by overlay id.

    Iteration order is insertion order; re-applying an existing id keeps
    its original position.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Mapping[str, BaseOverlay]] = None):
        self._entries: Dict[str, BaseOverlay] = dict(entries or {})

    def __getitem__(self, overlay_id: str) -> BaseOverlay:
        return self._entries[overlay_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"OverlayState({list(self._entries)!r})"


def create_overlay_state() -> OverlayState:
    """Initialize an empty overlay state."""
    return OverlayState()


def apply_overlay(
    state: OverlayState,
    overlay: BaseOverlay,
    now: Optional[datetime] = None,
) -> OverlayState:
    """
    Insert or update an overlay, returning a new state.

    On update the existing entry's ``created_at`` is preserved. On insert the
    incoming ``created_at`` is kept when present. ``updated_at`` is always
    refreshed.

    Args:
        state: Current overlay state (left unchanged).
        overlay: Overlay to store under ``overlay.id``.
        now: Timestamp to stamp with; defaults to the current UTC time.
    """
    now = now or datetime.now(timezone.utc)
    existing = state.get(overlay.id)

    if existing is not None:
        created_at = existing.created_at
    else:
        created_at = overlay.created_at or now

    entries = dict(state.items())
    entries[overlay.id] = overlay.model_copy(
        update={"created_at": created_at, "updated_at": now}
    )
    return OverlayState(entries)


def clear_overlay(state: OverlayState, overlay_id: str) -> OverlayState:
    """Remove an overlay by id. Returns ``state`` itself when the id is absent."""
    if overlay_id not in state:
        return state
    entries = {key: value for key, value in state.items() if key != overlay_id}
    return OverlayState(entries)


def get_overlay(state: OverlayState, overlay_id: str) -> Optional[BaseOverlay]:
    """Retrieve an overlay without modifying state."""
    return state.get(overlay_id)
