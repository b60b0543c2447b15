"""
Map overlays (markers, polylines, polygons, circles) and their reduction to anchored
pixel rectangles at geographic positions.
"""
