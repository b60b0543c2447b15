from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias, Union

from geo.types import Anchor, LatLng, Size


@dataclass(frozen=True)
class MarkerOverlay:
    """
    A geographic position with an optional pixel footprint.

    This is also the normalized form every other overlay reduces to. Missing
    `bounding_rect` means a zero-size footprint, missing `anchor` means centered.
    """

    position: LatLng
    bounding_rect: Size | None = None
    anchor: Anchor | None = None


@dataclass(frozen=True)
class PolylineOverlay:
    points: tuple[LatLng, ...]
    # Stroke width in pixels.
    width: float


@dataclass(frozen=True)
class PolygonOverlay:
    # Closed ring; fitted exactly like a polyline.
    points: tuple[LatLng, ...]
    width: float


@dataclass(frozen=True)
class CircleOverlay:
    center: LatLng
    # Pixels, not meters: the footprint does not change with zoom.
    radius: float


Overlay: TypeAlias = Union[MarkerOverlay, PolylineOverlay, PolygonOverlay, CircleOverlay]
StandardOverlay: TypeAlias = MarkerOverlay
