from __future__ import annotations

import math

from geo.projection import Projection
from geo.types import LatLng, LatLngBounds, Point, PointBounds
from geo.errors import InvalidBoundsArgumentError


# Identity element for `extend_point_bounds`.
EMPTY_POINT_BOUNDS = PointBounds(
    top_left=Point(math.inf, math.inf),
    bottom_right=Point(-math.inf, -math.inf),
)


def wrap_lng(lng: float) -> float:
    """
    Shift a longitude by one turn into [-180, 180].

    Single step only: 540 becomes 180, 900 becomes 540.
    """
    if lng > 180.0:
        return lng - 360.0
    if lng < -180.0:
        return lng + 360.0
    return lng


def wrap_lat(lat: float) -> float:
    return max(-90.0, min(90.0, lat))


def wrap_lat_lng(lat_lng: LatLng) -> LatLng:
    return LatLng(lat=wrap_lat(lat_lng.lat), lng=wrap_lng(lat_lng.lng))


def extend_lat_lng_bounds(bounds: LatLngBounds, other: LatLng | LatLngBounds) -> LatLngBounds:
    """
    Grow `bounds` to include a point or another bounds.

    No antimeridian handling: the box is a plain min/max over lat and lng.
    """
    if isinstance(other, LatLngBounds):
        ne, sw = other.ne, other.sw
    elif isinstance(other, LatLng):
        ne = sw = other
    else:
        raise InvalidBoundsArgumentError(
            f"Expected LatLng or LatLngBounds, got {type(other).__name__}"
        )
    return LatLngBounds(
        ne=LatLng(lat=max(bounds.ne.lat, ne.lat), lng=max(bounds.ne.lng, ne.lng)),
        sw=LatLng(lat=min(bounds.sw.lat, sw.lat), lng=min(bounds.sw.lng, sw.lng)),
    )


def extend_point_bounds(bounds: PointBounds, other: PointBounds) -> PointBounds:
    return PointBounds(
        top_left=Point(
            min(bounds.top_left.x, other.top_left.x),
            min(bounds.top_left.y, other.top_left.y),
        ),
        bottom_right=Point(
            max(bounds.bottom_right.x, other.bottom_right.x),
            max(bounds.bottom_right.y, other.bottom_right.y),
        ),
    )


def point_bounds_to_lat_lng_bounds(
    bounds: PointBounds, zoom: float | None, projection: Projection
) -> LatLngBounds:
    """
    Geographic box covered by a pixel box (y grows southwards, so top-right is NE).
    """
    ne = projection.unproject(Point(bounds.bottom_right.x, bounds.top_left.y), zoom)
    sw = projection.unproject(Point(bounds.top_left.x, bounds.bottom_right.y), zoom)
    return LatLngBounds(ne=ne, sw=sw)
