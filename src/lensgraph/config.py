"""
Global Configuration and Defaults.

Settings are read from the environment at call time so that tests and
host processes can change them without re-importing the package.
"""

import os

# --- Environment ---
ENV_VAR = "LENSGRAPH_ENV"
PRODUCTION = "production"

# --- Overlay defaults ---
# Muted grey used when a heatmap value carries no color
DEFAULT_HEATMAP_COLOR = "#999999"

# Neighborhood radius used when a focus overlay does not specify one
DEFAULT_FOCUS_DEPTH = 2

# --- Benchmark defaults ---
BENCHMARK_NODE_COUNT = 2000
BENCHMARK_ITERATIONS = 25
# Heatmap values generated per benchmark run are capped at this many nodes
BENCHMARK_MAX_HEATMAP_VALUES = 1000


def environment() -> str:
    """Return the current runtime environment name (lowercased)."""
    return os.getenv(ENV_VAR, "development").strip().lower()


def is_production() -> bool:
    """Check whether diagnostics should be suppressed."""
    return environment() == PRODUCTION


def default_focus_depth() -> int:
    """Focus depth from LENSGRAPH_DEFAULT_FOCUS_DEPTH, falling back to the built-in default."""
    raw = os.getenv("LENSGRAPH_DEFAULT_FOCUS_DEPTH")
    if raw is None:
        return DEFAULT_FOCUS_DEPTH
    try:
        return int(raw)
    except ValueError:
        return DEFAULT_FOCUS_DEPTH


def default_heatmap_color() -> str:
    """Fallback heatmap color, overridable via LENSGRAPH_HEATMAP_COLOR."""
    return os.getenv("LENSGRAPH_HEATMAP_COLOR") or DEFAULT_HEATMAP_COLOR
