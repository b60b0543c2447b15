from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from geo.types import Insets, LatLng, Size


@dataclass(frozen=True)
class Viewport:
    size: Size
    insets: Insets = Insets()


@dataclass(frozen=True)
class ZoomToSpan:
    center: LatLng
    zoom: float


@dataclass(frozen=True)
class SpanResult:
    """
    Outcome of a zoom search: either `result` (ok) or an `error` message.
    """

    ok: bool
    result: ZoomToSpan | None = None
    error: str | None = None

    @classmethod
    def success(cls, center: LatLng, zoom: float) -> "SpanResult":
        return cls(ok=True, result=ZoomToSpan(center=center, zoom=zoom))

    @classmethod
    def failure(cls, error: str) -> "SpanResult":
        return cls(ok=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        if not self.ok or self.result is None:
            return {"ok": False, "error": self.error}
        center = self.result.center
        return {
            "ok": True,
            "result": {
                "center": {"lat": center.lat, "lng": center.lng},
                "zoom": self.result.zoom,
            },
        }
