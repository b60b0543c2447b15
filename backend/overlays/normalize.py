from __future__ import annotations

from typing import Iterable

from geo.bounds import extend_lat_lng_bounds
from geo.types import CENTER_ANCHOR, LatLngBounds, Size
from overlays.types import (
    CircleOverlay,
    MarkerOverlay,
    Overlay,
    PolygonOverlay,
    PolylineOverlay,
    StandardOverlay,
)
from span.errors import InvalidOverlayShapeError


def normalize_overlay(overlay: Overlay) -> list[StandardOverlay]:
    """
    Reduce any overlay to one or more markers.

    - marker: returned as is
    - circle: one centered marker of 2r x 2r pixels
    - polyline/polygon: two centered width x width markers at the NE and SW corners of
      the geographic bounding box. This is an approximation of the stroke footprint, not
      a hull; it is enough to fit the shape on screen.
    """
    if isinstance(overlay, MarkerOverlay):
        return [overlay]
    if isinstance(overlay, CircleOverlay):
        diameter = 2.0 * overlay.radius
        return [
            MarkerOverlay(
                position=overlay.center,
                bounding_rect=Size(diameter, diameter),
                anchor=CENTER_ANCHOR,
            )
        ]
    if isinstance(overlay, (PolylineOverlay, PolygonOverlay)):
        return _normalize_path(overlay)
    raise InvalidOverlayShapeError(f"Invalid overlay: {overlay!r}")


def normalize_overlays(overlays: Iterable[Overlay]) -> list[StandardOverlay]:
    return [std for overlay in overlays for std in normalize_overlay(overlay)]


def _normalize_path(overlay: PolylineOverlay | PolygonOverlay) -> list[StandardOverlay]:
    if not overlay.points:
        kind = "polygon" if isinstance(overlay, PolygonOverlay) else "polyline"
        raise InvalidOverlayShapeError(f"Invalid overlay: {kind} has no points")

    first = overlay.points[0]
    bounds = LatLngBounds(ne=first, sw=first)
    for p in overlay.points:
        bounds = extend_lat_lng_bounds(bounds, p)

    rect = Size(overlay.width, overlay.width)
    return [
        MarkerOverlay(position=bounds.ne, bounding_rect=rect, anchor=CENTER_ANCHOR),
        MarkerOverlay(position=bounds.sw, bounding_rect=rect, anchor=CENTER_ANCHOR),
    ]
