from __future__ import annotations


class ZoomSpanError(ValueError):
    """
    Base class for input errors.

    Helpers raise these; `map_zoom_to_span` converts them into a failed `SpanResult`.
    """


class InvalidBoundsArgumentError(ZoomSpanError):
    pass
