"""Great-circle projection and URL coordinate formatting.

Provides the geometric helpers the URL builder needs:
- Destination point from origin, heading and distance (spherical Earth)
- Circle approximation as a closed 37-vertex ring
- Coordinate formatting for URL embedding

All calculations use a spherical Earth with mean radius R = 6,371 km.
"""

import re
from math import asin, atan2, cos, degrees, radians, sin

import numpy as np

from mapsnapshot.constants import GeoConfig
from mapsnapshot.model.geo_point import GeoPoint

# Anything but digits, '.', ',' and '-' is dropped from URL coordinates
_NON_COORDINATE_CHARS = re.compile(r"[^0-9.,\-]")
_RAW_STRIP_CHARS = re.compile(r"[()\s]")


def format_degrees(value: float, precision: int | None = None) -> str:
    """Format a coordinate without exponent notation or trailing zeros.

    Args:
        value: Decimal degrees
        precision: Maximum number of decimals, None for the shortest exact repr

    Returns:
        e.g. "35.681", "-0.5", "139"
    """
    value = float(value) + 0.0  # normalizes -0.0
    if precision is not None:
        value = round(value, precision) + 0.0
    return np.format_float_positional(value, precision=precision, unique=True, fractional=True, trim="-")


def wrap_longitude(lng: float) -> float:
    """Wrap a longitude into [-180, 180). In-range values are returned unchanged."""
    if -180.0 <= lng < 180.0:
        return lng
    return ((lng + 180.0) % 360.0) - 180.0


class GeoProjector:
    """Static methods for projecting and formatting coordinates.

    Headings are in degrees clockwise from North.
    Distances passed to destination_point are in kilometers.
    """

    EARTH_RADIUS_KM = GeoConfig.EARTH_RADIUS_KM

    @staticmethod
    def destination_point(origin: GeoPoint, heading_deg: float, distance_km: float) -> GeoPoint:
        """Calculate the point reached from origin along a great circle.

        Args:
            origin: Start point
            heading_deg: Initial heading in degrees (clockwise from North)
            distance_km: Distance to travel in kilometers

        Returns:
            Destination point. Longitude is not wrapped into [-180, 180].
        """
        brng = radians(heading_deg)
        lat1 = radians(origin.lat)
        lng1 = radians(origin.lng)
        d_R = distance_km / GeoConfig.EARTH_RADIUS_KM

        lat2 = asin(sin(lat1) * cos(d_R) + cos(lat1) * sin(d_R) * cos(brng))
        lng2 = lng1 + atan2(
            sin(brng) * sin(d_R) * cos(lat1),
            cos(d_R) - sin(lat1) * sin(lat2),
        )
        return GeoPoint(lat=degrees(lat2), lng=degrees(lng2))

    @staticmethod
    def circle_vertices(center: GeoPoint, radius_m: float) -> list[GeoPoint]:
        """Approximate a circle as a ring of CIRCLE_STEPS + 1 vertices.

        Headings run 0°, 10°, ..., 360°. The last vertex is set to the first so
        the ring is closed exactly rather than up to floating point noise.
        Longitudes are wrapped into [-180, 180).
        """
        steps = GeoConfig.CIRCLE_STEPS
        radius_km = radius_m / 1000
        points = []
        for i in range(steps):
            point = GeoProjector.destination_point(origin=center, heading_deg=i * 360 / steps, distance_km=radius_km)
            points.append(GeoPoint(lat=point.lat, lng=wrap_longitude(point.lng)))
        points.append(points[0])
        return points

    @staticmethod
    def to_url_coordinate(point: GeoPoint) -> str:
        """Format a point as "lat,lng" for marker and center parameters.

        Values are rounded to 6 decimals with trailing zeros dropped.
        """
        precision = GeoConfig.URL_COORDINATE_PRECISION
        text = f"{format_degrees(point.lat, precision)},{format_degrees(point.lng, precision)}"
        return _NON_COORDINATE_CHARS.sub("", text)

    @staticmethod
    def to_raw_coordinate(point: GeoPoint) -> str:
        """Format a point as full-precision "lat,lng" for unencoded paths."""
        text = f"({format_degrees(point.lat)}, {format_degrees(point.lng)})"
        return _RAW_STRIP_CHARS.sub("", text)
