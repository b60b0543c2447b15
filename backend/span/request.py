from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, Field, ValidationError

from geo.projection import Projection, WebMercatorProjection
from geo.types import Insets, Size
from overlays.parse import LatLngModel, SizeModel, parse_overlay
from span.errors import ZoomSpanError
from span.search import map_zoom_to_span
from span.types import SpanResult, Viewport


class InsetsModel(BaseModel):
    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0

    def to_insets(self) -> Insets:
        return Insets(top=self.top, left=self.left, bottom=self.bottom, right=self.right)


class ViewportModel(BaseModel):
    size: SizeModel
    insets: InsetsModel = Field(default_factory=InsetsModel)

    def to_viewport(self) -> Viewport:
        return Viewport(size=self.size.to_size(), insets=self.insets.to_insets())


class ZoomToSpanRequest(BaseModel):
    """
    Wire shape of a zoom-to-span request (camelCase keys, as map front-ends send them).

    Overlays stay raw here; they are typed by `parse_overlay` so a malformed overlay is
    reported as an overlay error rather than a schema error.
    """

    viewport: ViewportModel
    overlays: list[dict[str, Any]]
    zoomRange: tuple[float, float] | None = None
    precision: float | None = None
    center: LatLngModel | None = None
    # Pixels at zoom 0 for the built-in Web Mercator projection.
    worldSize: float | None = Field(default=None, gt=0.0)

    def projection(self, default_world_size: float | None = None) -> Projection | None:
        size = self.worldSize or default_world_size
        return WebMercatorProjection(size) if size else None

    def run(self, *, projection: Projection | None = None) -> SpanResult:
        try:
            overlays = [parse_overlay(o) for o in self.overlays]
        except ZoomSpanError as exc:
            return SpanResult.failure(str(exc))
        return map_zoom_to_span(
            viewport=self.viewport.to_viewport(),
            overlays=overlays,
            projection=projection or self.projection(),
            zoom_range=self.zoomRange,
            precision=self.precision,
            center=self.center.to_lat_lng() if self.center else None,
        )


def map_zoom_to_span_from_mapping(
    data: Mapping[str, Any],
    *,
    default_world_size: float | None = None,
) -> SpanResult:
    """
    Validate a raw request payload and run the search.

    Schema errors become a failed `SpanResult` too, so callers only ever see results.
    """
    try:
        request = ZoomToSpanRequest.model_validate(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        loc = ".".join(str(p) for p in first.get("loc", ()))
        return SpanResult.failure(f"Invalid request: {loc}: {first.get('msg')}")
    return request.run(projection=request.projection(default_world_size))
