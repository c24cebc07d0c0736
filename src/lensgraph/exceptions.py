"""
Exceptions raised at the loading boundary.

The composition core never raises for absent or malformed inputs; these
are only used when reading graphs and overlay payloads from files.
"""


class LensgraphError(Exception):
    """Base class for all lensgraph errors."""


class GraphLoadError(LensgraphError):
    """Raised when a base graph file cannot be read or parsed."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"Could not load graph from {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class OverlayPayloadError(LensgraphError):
    """Raised when an overlay payload does not describe a known overlay."""

    def __init__(self, payload_index: int, reason: str):
        self.payload_index = payload_index
        self.reason = reason
        super().__init__(f"Invalid overlay at position {payload_index}: {reason}")
