from __future__ import annotations

import logging
import math
from typing import Iterable, Sequence

from geo.bounds import EMPTY_POINT_BOUNDS, extend_point_bounds, point_bounds_to_lat_lng_bounds
from geo.projection import DEFAULT_PROJECTION, Projection
from geo.types import CENTER_ANCHOR, ZERO_SIZE, LatLng, Point, PointBounds
from overlays.normalize import normalize_overlays
from overlays.types import Overlay, StandardOverlay
from span.config import DEFAULT_PRECISION, DEFAULT_ZOOM_RANGE, ZOOM_LIMITS
from span.errors import (
    EmptyOverlaysError,
    InvalidSearchParamsError,
    NoFeasibleZoomError,
    ZoomSpanError,
)
from span.types import SpanResult, Viewport


_LOGGER = logging.getLogger("zoomspan.search")

# Footprint of an overlay the projection cannot place (pole, NaN latitude); never fits.
_UNBOUNDED = PointBounds(
    top_left=Point(-math.inf, -math.inf),
    bottom_right=Point(math.inf, math.inf),
)


def content_bounds(viewport: Viewport) -> PointBounds:
    """
    Viewport rectangle minus insets. May be inverted when insets exceed the size.
    """
    size, insets = viewport.size, viewport.insets
    return PointBounds(
        top_left=Point(insets.left, insets.top),
        bottom_right=Point(size.width - insets.right, size.height - insets.bottom),
    )


def center_offset(viewport: Viewport) -> Point:
    """
    Pixel shift from the viewport middle to the content-area middle.
    """
    insets = viewport.insets
    return Point((insets.left - insets.right) / 2.0, (insets.top - insets.bottom) / 2.0)


def overlays_point_bounds(
    overlays: Iterable[StandardOverlay], zoom: float, projection: Projection
) -> PointBounds:
    bounds = EMPTY_POINT_BOUNDS
    for overlay in overlays:
        p = projection.project(overlay.position, zoom)
        if not (math.isfinite(p.x) and math.isfinite(p.y)):
            return _UNBOUNDED
        rect = overlay.bounding_rect or ZERO_SIZE
        anchor = overlay.anchor or CENTER_ANCHOR
        footprint = PointBounds(
            top_left=Point(p.x - anchor.x * rect.width, p.y - anchor.y * rect.height),
            bottom_right=Point(
                p.x + (1.0 - anchor.x) * rect.width,
                p.y + (1.0 - anchor.y) * rect.height,
            ),
        )
        bounds = extend_point_bounds(bounds, footprint)
    return bounds


def center_symmetric_bounds(bounds: PointBounds, center: Point) -> PointBounds:
    """
    Smallest box centered on `center` that contains `bounds`.
    """
    if not (math.isfinite(center.x) and math.isfinite(center.y)):
        return _UNBOUNDED
    half_w = max(abs(center.x - bounds.top_left.x), abs(bounds.bottom_right.x - center.x))
    half_h = max(abs(center.y - bounds.top_left.y), abs(bounds.bottom_right.y - center.y))
    return PointBounds(
        top_left=Point(center.x - half_w, center.y - half_h),
        bottom_right=Point(center.x + half_w, center.y + half_h),
    )


def fits_content_area(overlay_bounds: PointBounds, content: PointBounds) -> bool:
    w, h = abs(overlay_bounds.width), abs(overlay_bounds.height)
    if not (math.isfinite(w) and math.isfinite(h)):
        return False
    return w <= content.width and h <= content.height


def zoom_steps(zoom_range: Sequence[float], precision: float) -> int:
    """
    Highest step index of the search; zoom for step k is `zoom_range[0] + k * precision`.

    The top of the range is only reachable when the span is a multiple of `precision`.
    """
    lo, hi = float(zoom_range[0]), float(zoom_range[1])
    return math.floor((hi - lo) / precision)


def _validate_params(zoom_range: Sequence[float], precision: float) -> None:
    if len(zoom_range) != 2:
        raise InvalidSearchParamsError(f"zoom_range must have two values, got {len(zoom_range)}")
    if not all(math.isfinite(z) for z in zoom_range):
        raise InvalidSearchParamsError(f"zoom_range must be finite, got {tuple(zoom_range)}")
    lo_limit, hi_limit = ZOOM_LIMITS
    if not all(lo_limit <= z <= hi_limit for z in zoom_range):
        raise InvalidSearchParamsError(
            f"zoom_range must lie within [{lo_limit:g}, {hi_limit:g}], got {tuple(zoom_range)}"
        )
    if not (math.isfinite(precision) and precision > 0):
        raise InvalidSearchParamsError(f"precision must be a positive number, got {precision}")
    if not math.isfinite((zoom_range[1] - zoom_range[0]) / precision):
        raise InvalidSearchParamsError(f"precision {precision} is too small for zoom_range {tuple(zoom_range)}")


def _search(
    overlays: list[StandardOverlay],
    viewport: Viewport,
    projection: Projection,
    zoom_range: Sequence[float],
    precision: float,
    center: LatLng | None,
) -> tuple[float, PointBounds]:
    content = content_bounds(viewport)
    lo = float(zoom_range[0])

    left_step = 0
    right_step = zoom_steps(zoom_range, precision)
    best: tuple[float, PointBounds] | None = None

    # Binary search for the highest fitting step; assumes fit is monotonic in zoom.
    while left_step <= right_step:
        step = (left_step + right_step) // 2
        zoom = lo + step * precision
        bounds = overlays_point_bounds(overlays, zoom, projection)
        if center is not None:
            bounds = center_symmetric_bounds(bounds, projection.project(center, zoom))

        fits = fits_content_area(bounds, content)
        if _LOGGER.isEnabledFor(logging.DEBUG):
            extent = point_bounds_to_lat_lng_bounds(bounds, zoom, projection)
            _LOGGER.debug(
                "step=%d zoom=%.6f bounds=%s extent=%s fits=%s", step, zoom, bounds, extent, fits
            )

        if fits:
            best = (zoom, bounds)
            left_step = step + 1
        else:
            right_step = step - 1

    if best is None:
        raise NoFeasibleZoomError()
    return best


def map_zoom_to_span(
    *,
    viewport: Viewport,
    overlays: Sequence[Overlay],
    projection: Projection | None = None,
    zoom_range: Sequence[float] | None = None,
    precision: float | None = None,
    center: LatLng | None = None,
) -> SpanResult:
    """
    Highest zoom (on a `precision` grid inside `zoom_range`) at which all overlays fit the
    viewport's content area, and the center to use at that zoom.

    The center is shifted so overlays sit in the middle of the content area, not of the
    whole viewport. A forced `center` is returned as given; the fitted box is then grown
    symmetrically around it, which can lower the zoom.

    Never raises for bad input: failures come back as `SpanResult.failure`.
    """
    if not overlays:
        return SpanResult.failure(str(EmptyOverlaysError()))

    projection = projection or DEFAULT_PROJECTION
    zoom_range = DEFAULT_ZOOM_RANGE if zoom_range is None else zoom_range
    precision = DEFAULT_PRECISION if precision is None else precision

    try:
        _validate_params(zoom_range, precision)
        standard = normalize_overlays(overlays)
        zoom, bounds = _search(standard, viewport, projection, zoom_range, precision, center)
    except ZoomSpanError as exc:
        _LOGGER.debug("zoom search failed: %s", exc)
        return SpanResult.failure(str(exc))

    if center is not None:
        _LOGGER.debug("zoom=%.6f with forced center %s", zoom, center)
        return SpanResult.success(center=center, zoom=zoom)

    overlay_center = bounds.center
    offset = center_offset(viewport)
    viewport_center = Point(overlay_center.x - offset.x, overlay_center.y - offset.y)
    result_center = projection.unproject(viewport_center, zoom)
    _LOGGER.debug("zoom=%.6f center=%s", zoom, result_center)
    return SpanResult.success(center=result_center, zoom=zoom)
