"""Vertex construction for path-kind overlays.

Turns each overlay kind into the vertex list that is clipped and encoded:
- Circle: 37-vertex ring from GeoProjector
- Polyline / Polygon: stored path
- Rectangle: four corners, starting at the southeast corner and running
  counter-clockwise (SE, NE, NW, SW)

Closed kinds get their first vertex repeated at the end unless the ring is
already closed.
"""

from typing import Sequence

from mapsnapshot.core.geo_projector import GeoProjector
from mapsnapshot.core.viewport_clipper import ViewportClipper
from mapsnapshot.model.geo_point import GeoBounds, GeoPoint
from mapsnapshot.model.overlay import Circle, Overlay, Polygon, Polyline, Rectangle


def rectangle_corners(bounds: GeoBounds) -> list[GeoPoint]:
    sw, ne = bounds.southwest, bounds.northeast
    return [
        GeoPoint(lat=sw.lat, lng=ne.lng),
        GeoPoint(lat=ne.lat, lng=ne.lng),
        GeoPoint(lat=ne.lat, lng=sw.lng),
        GeoPoint(lat=sw.lat, lng=sw.lng),
    ]


def close_ring(points: Sequence[GeoPoint]) -> list[GeoPoint]:
    """Append the first vertex when the ring does not already end on it."""
    ring = list(points)
    if ring and ring[0] != ring[-1]:
        ring.append(ring[0])
    return ring


def overlay_vertices(overlay: Overlay) -> list[GeoPoint]:
    """Full (unclipped) vertex list of a path-kind overlay.

    Raises:
        TypeError: If the overlay is not a path kind.
    """
    if isinstance(overlay, Circle):
        points = GeoProjector.circle_vertices(center=overlay.center, radius_m=overlay.radius_m)
    elif isinstance(overlay, (Polyline, Polygon)):
        points = list(overlay.path)
    elif isinstance(overlay, Rectangle):
        points = rectangle_corners(overlay.bounds)
    else:
        raise TypeError(f"{type(overlay).__name__} has no path geometry")

    if overlay.is_closed:
        points = close_ring(points)
    return points


def select_vertices(points: Sequence[GeoPoint], bounds: GeoBounds, adjust_zoom: bool) -> list[GeoPoint]:
    """Clip to the viewport, or keep everything when the service frames the map itself."""
    if adjust_zoom:
        return list(points)
    return ViewportClipper.pickup_visible_vertices(points, bounds)
