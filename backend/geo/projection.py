from __future__ import annotations

import math
from typing import Protocol

from geo.types import LatLng, Point


# Pixel width of the whole world at zoom 0.
DEFAULT_WORLD_SIZE = 512.0


class Projection(Protocol):
    """
    Geographic <-> pixel transform.

    `project` and `unproject` must be inverses for the same zoom. When `zoom` is None the
    pixel space is normalized to 0..1 (world size of 1).

    The zoom search assumes fit is monotonic in zoom: a larger zoom never makes the
    projected overlays smaller. Web Mercator satisfies this; a custom projection that
    doesn't may yield a fitting but not maximal zoom.
    """

    def project(self, lat_lng: LatLng, zoom: float | None = None) -> Point: ...

    def unproject(self, point: Point, zoom: float | None = None) -> LatLng: ...


class WebMercatorProjection:
    """
    Spherical Web Mercator (the slippy-map projection).

    No clamping or wraparound: longitudes beyond +-180 project linearly past the world
    edges. Latitudes outside the projectable range never raise: -90 projects to y=+inf,
    |lat| > 90 to NaN, and a scale too large for a float becomes +inf. Such points never
    fit a viewport.
    """

    def __init__(self, world_size: float = DEFAULT_WORLD_SIZE) -> None:
        if not world_size > 0:
            raise ValueError(f"world_size must be positive, got {world_size!r}")
        self.world_size = float(world_size)

    def __repr__(self) -> str:
        return f"WebMercatorProjection(world_size={self.world_size:g})"

    def _scale(self, zoom: float | None) -> float:
        if zoom is None:
            return 1.0
        try:
            return math.pow(2.0, zoom) * self.world_size
        except OverflowError:
            return math.inf

    def project(self, lat_lng: LatLng, zoom: float | None = None) -> Point:
        scale = self._scale(zoom)
        x = (lat_lng.lng / 360.0 + 0.5) * scale
        y = (0.5 - _mercator_log(lat_lng.lat) / math.pi / 2.0) * scale
        return Point(x, y)

    def unproject(self, point: Point, zoom: float | None = None) -> LatLng:
        scale = self._scale(zoom)
        lng = (point.x / scale - 0.5) * 360.0
        lat = math.degrees(2.0 * math.atan(_exp(math.pi * (1.0 - 2.0 * point.y / scale))) - math.pi / 2.0)
        return LatLng(lat=lat, lng=lng)


def _exp(v: float) -> float:
    try:
        return math.exp(v)
    except OverflowError:
        return math.inf


def _mercator_log(lat: float) -> float:
    if not math.isfinite(lat):
        return math.nan
    t = math.tan(math.pi * (0.25 + lat / 360.0))
    if t > 0:
        return math.log(t)
    if t == 0:
        # South pole.
        return -math.inf
    return math.nan


# Stateless, so a single shared instance is safe.
DEFAULT_PROJECTION = WebMercatorProjection(DEFAULT_WORLD_SIZE)
