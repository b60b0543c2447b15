"""
Coordinate primitives shared by the overlay normalizer and the zoom search.

Everything here is pure: value records, the projection and bounds helpers.
"""
