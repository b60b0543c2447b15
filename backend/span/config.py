from __future__ import annotations

import os

from geo.projection import DEFAULT_WORLD_SIZE


DEFAULT_ZOOM_RANGE: tuple[float, float] = (0.0, 20.0)
# Zoom step size of the search, not a tolerance on the result.
DEFAULT_PRECISION = 0.01
# Zoom values the search accepts; keeps 2**zoom a normal, non-zero float.
ZOOM_LIMITS: tuple[float, float] = (-512.0, 512.0)


def world_size() -> float:
    """
    World size (pixels at zoom 0) for requests that don't carry one.
    """
    raw = (os.getenv("ZOOMSPAN_WORLD_SIZE") or "").strip()
    if not raw:
        return DEFAULT_WORLD_SIZE
    try:
        v = float(raw)
    except ValueError:
        return DEFAULT_WORLD_SIZE
    return v if v > 0 else DEFAULT_WORLD_SIZE


def debug_enabled() -> bool:
    v = (os.getenv("ZOOMSPAN_DEBUG") or "0").strip().lower()
    return v in {"1", "true", "yes", "on"}
