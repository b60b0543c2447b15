from __future__ import annotations

from geo.errors import InvalidBoundsArgumentError, ZoomSpanError


__all__ = [
    "ZoomSpanError",
    "EmptyOverlaysError",
    "InvalidOverlayShapeError",
    "NoFeasibleZoomError",
    "InvalidBoundsArgumentError",
    "InvalidSearchParamsError",
]


class EmptyOverlaysError(ZoomSpanError):
    def __init__(self, message: str = "No overlays provided") -> None:
        super().__init__(message)


class InvalidOverlayShapeError(ZoomSpanError):
    pass


class NoFeasibleZoomError(ZoomSpanError):
    def __init__(self, message: str = "No valid zoom was found") -> None:
        super().__init__(message)


class InvalidSearchParamsError(ZoomSpanError):
    pass
