from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LatLng:
    """
    Geographic coordinate in degrees.

    No range is enforced; use `geo.bounds.wrap_lat_lng` when a normalized value is needed.
    """

    lat: float
    lng: float


@dataclass(frozen=True)
class Point:
    # Pixel space at a given zoom, or 0..1 space when the zoom is omitted.
    x: float
    y: float


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Insets:
    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0


@dataclass(frozen=True)
class Anchor:
    """
    Where inside its bounding rect an overlay's position sits.

    (0, 0) is the top-left corner, (1, 1) the bottom-right one.
    """

    x: float = 0.5
    y: float = 0.5


CENTER_ANCHOR = Anchor(0.5, 0.5)
ZERO_SIZE = Size(0.0, 0.0)


@dataclass(frozen=True)
class LatLngBounds:
    ne: LatLng
    sw: LatLng


@dataclass(frozen=True)
class PointBounds:
    top_left: Point
    bottom_right: Point

    @property
    def width(self) -> float:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> float:
        return self.bottom_right.y - self.top_left.y

    @property
    def center(self) -> Point:
        return Point(
            (self.top_left.x + self.bottom_right.x) / 2.0,
            (self.top_left.y + self.bottom_right.y) / 2.0,
        )
