"""GeoPoint and GeoBounds - the geometry atoms of a snapshot.

A GeoPoint is a single WGS84 coordinate. A GeoBounds is the rectangular
viewport (or segment envelope) the clipper tests points and segments against.

Bounds whose southwest longitude is east of their northeast longitude cross
the antimeridian; containment and intersection tests wrap accordingly.
"""

import math
from dataclasses import dataclass

import numpy as np
from shapely.geometry import MultiPoint, box
from shapely.geometry.base import BaseGeometry


@dataclass(frozen=True)
class GeoPoint:
    """A geographic coordinate.

    Attributes:
        lat: Latitude in decimal degrees (WGS84)
        lng: Longitude in decimal degrees (WGS84)

    Example:
        point = GeoPoint(lat=35.681, lng=139.767)
    """

    lat: float
    lng: float

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if not (math.isfinite(self.lat) and math.isfinite(self.lng)):
            raise ValueError(f"GeoPoint needs finite coordinates, got ({self.lat}, {self.lng})")

    @property
    def lat_lng(self) -> tuple[float, float]:
        """Return (lat, lng) tuple - standard geographic order."""
        return (self.lat, self.lng)

    @classmethod
    def from_tuple(cls, lat_lng: tuple[float, float]) -> "GeoPoint":
        """Create GeoPoint from a (lat, lng) pair."""
        return cls(lat=float(lat_lng[0]), lng=float(lat_lng[1]))

    def __repr__(self) -> str:
        return f"GeoPoint(lat={self.lat:.6f}, lng={self.lng:.6f})"


@dataclass(frozen=True)
class GeoBounds:
    """A rectangle on the map defined by its southwest and northeast corners.

    Edges are inclusive. When southwest.lng > northeast.lng the rectangle
    crosses the antimeridian.

    Attributes:
        southwest: Lower-left corner
        northeast: Upper-right corner
    """

    southwest: GeoPoint
    northeast: GeoPoint

    @classmethod
    def from_points(cls, a: GeoPoint, b: GeoPoint) -> "GeoBounds":
        """Smallest non-wrapping bounds containing both points."""
        return cls(
            southwest=GeoPoint(lat=min(a.lat, b.lat), lng=min(a.lng, b.lng)),
            northeast=GeoPoint(lat=max(a.lat, b.lat), lng=max(a.lng, b.lng)),
        )

    @property
    def crosses_antimeridian(self) -> bool:
        return self.southwest.lng > self.northeast.lng

    @property
    def center(self) -> GeoPoint:
        """Midpoint of the bounds (wrap aware)."""
        lat = (self.southwest.lat + self.northeast.lat) / 2
        east = self.northeast.lng + (360.0 if self.crosses_antimeridian else 0.0)
        lng = (self.southwest.lng + east) / 2
        if lng > 180.0:
            lng -= 360.0
        return GeoPoint(lat=lat, lng=lng)

    def contains(self, point: GeoPoint) -> bool:
        """True if the point lies inside or on the edge of the bounds."""
        return bool(self.contains_many(lats=np.array([point.lat]), lngs=np.array([point.lng]))[0])

    def contains_many(self, lats: np.ndarray, lngs: np.ndarray) -> np.ndarray:
        """Vectorized containment test.

        Args:
            lats: Latitudes in decimal degrees
            lngs: Longitudes in decimal degrees (same length as lats)

        Returns:
            Boolean array, True where the point is inside the bounds.
        """
        in_lat = (lats >= self.southwest.lat) & (lats <= self.northeast.lat)
        if self.crosses_antimeridian:
            in_lng = (lngs >= self.southwest.lng) | (lngs <= self.northeast.lng)
        else:
            in_lng = (lngs >= self.southwest.lng) & (lngs <= self.northeast.lng)
        return in_lat & in_lng

    def to_geometries(self) -> list[BaseGeometry]:
        """Shapely boxes (x=lng, y=lat) covering the bounds.

        A bounds crossing the antimeridian is split into two boxes.
        """
        sw, ne = self.southwest, self.northeast
        if self.crosses_antimeridian:
            return [box(sw.lng, sw.lat, 180.0, ne.lat), box(-180.0, sw.lat, ne.lng, ne.lat)]
        return [box(sw.lng, sw.lat, ne.lng, ne.lat)]

    def intersects_segment(self, a: GeoPoint, b: GeoPoint) -> bool:
        """True if the bounding box of segment a-b overlaps these bounds.

        This is an envelope test, not an exact line/rectangle intersection.
        """
        envelope = MultiPoint([(a.lng, a.lat), (b.lng, b.lat)]).envelope
        return any(geom.intersects(envelope) for geom in self.to_geometries())

    def intersects(self, other: "GeoBounds") -> bool:
        """True if the two bounds overlap (touching edges count)."""
        return any(mine.intersects(theirs) for mine in self.to_geometries() for theirs in other.to_geometries())

    def __repr__(self) -> str:
        return f"GeoBounds(sw={self.southwest!r}, ne={self.northeast!r})"
