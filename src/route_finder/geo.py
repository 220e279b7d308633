"""Great-circle distance on a spherical Earth."""

import math

from .models import Coordinate

EARTH_RADIUS_M = 6_371_000.0


def haversine_distance(a: Coordinate, b: Coordinate) -> float:
    """Return the haversine distance between two coordinates in meters."""
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    d_lat = lat2 - lat1
    d_lon = math.radians(b.lon - a.lon)

    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    # rounding can push h slightly outside [0, 1] near coincident or antipodal points
    root = min(1.0, math.sqrt(max(0.0, h)))
    return 2 * EARTH_RADIUS_M * math.asin(root)
