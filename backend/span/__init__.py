"""
Zoom-to-span search.

Given overlays, a viewport and a zoom range, find the highest zoom at which every overlay
fits inside the inset-adjusted viewport, plus the center to use at that zoom.
Entry point: `span.search.map_zoom_to_span` (or `span.request.map_zoom_to_span_from_mapping`
for raw JSON/YAML payloads).
"""
