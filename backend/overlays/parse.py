from __future__ import annotations

from typing import Any, Literal, Mapping

from pydantic import BaseModel, Field, ValidationError

from geo.types import Anchor, LatLng, Size
from overlays.types import (
    CircleOverlay,
    MarkerOverlay,
    Overlay,
    PolygonOverlay,
    PolylineOverlay,
)
from span.errors import InvalidOverlayShapeError


class LatLngModel(BaseModel):
    lat: float
    lng: float

    def to_lat_lng(self) -> LatLng:
        return LatLng(lat=self.lat, lng=self.lng)


class SizeModel(BaseModel):
    width: float = Field(ge=0.0)
    height: float = Field(ge=0.0)

    def to_size(self) -> Size:
        return Size(self.width, self.height)


class AnchorModel(BaseModel):
    x: float = 0.5
    y: float = 0.5

    def to_anchor(self) -> Anchor:
        return Anchor(self.x, self.y)


class MarkerModel(BaseModel):
    position: LatLngModel
    boundingRect: SizeModel | None = None
    anchor: AnchorModel | None = None

    def to_overlay(self) -> MarkerOverlay:
        return MarkerOverlay(
            position=self.position.to_lat_lng(),
            bounding_rect=self.boundingRect.to_size() if self.boundingRect else None,
            anchor=self.anchor.to_anchor() if self.anchor else None,
        )


class PathModel(BaseModel):
    """
    Polyline or polygon. Both arrive with the same shape; `kind` picks the variant.
    """

    points: list[LatLngModel] = Field(min_length=1)
    width: float = Field(ge=0.0)
    kind: Literal["polyline", "polygon"] = "polyline"

    def to_overlay(self) -> PolylineOverlay | PolygonOverlay:
        points = tuple(p.to_lat_lng() for p in self.points)
        if self.kind == "polygon":
            return PolygonOverlay(points=points, width=self.width)
        return PolylineOverlay(points=points, width=self.width)


class CircleModel(BaseModel):
    center: LatLngModel
    radius: float = Field(ge=0.0)

    def to_overlay(self) -> CircleOverlay:
        return CircleOverlay(center=self.center.to_lat_lng(), radius=self.radius)


_OVERLAY_TYPES = (MarkerOverlay, PolylineOverlay, PolygonOverlay, CircleOverlay)


def parse_overlay(raw: Overlay | Mapping[str, Any]) -> Overlay:
    """
    Build a typed overlay from a JSON/YAML-shaped mapping.

    The variant is picked from the keys present, in this order:
    `position` -> marker, `center` -> circle, `points` -> polyline (polygon with
    `"kind": "polygon"`). Typed overlays pass through untouched.
    """
    if isinstance(raw, _OVERLAY_TYPES):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidOverlayShapeError(f"Invalid overlay: expected a mapping, got {type(raw).__name__}")

    if "position" in raw:
        model: type[MarkerModel] | type[CircleModel] | type[PathModel] = MarkerModel
    elif "center" in raw:
        model = CircleModel
    elif "points" in raw:
        model = PathModel
    else:
        raise InvalidOverlayShapeError(
            f"Invalid overlay: none of position/center/points in {sorted(raw.keys())}"
        )

    try:
        return model.model_validate(raw).to_overlay()
    except ValidationError as exc:
        first = exc.errors()[0]
        loc = ".".join(str(p) for p in first.get("loc", ()))
        raise InvalidOverlayShapeError(f"Invalid overlay: {loc}: {first.get('msg')}") from exc
