"""Data model classes for snapshot URL synthesis.

Everything the builder reads is an immutable dataclass supplied by the caller:
- GeoPoint / GeoBounds: Geometry atoms (lat, lng) and rectangles
- Overlay kinds: Marker, Polyline, Polygon, Circle, Rectangle, DirectionsResult
- PathStyle / MarkerStyle: Overlay styling
- StyleSheet / StyleRule / StyleOperation: Custom map styling
- ViewportState: Point-in-time capture of the interactive map
- SnapshotOptions: Rendering options with declared defaults
- BuildResult / BuildError: Typed build outcome
"""

from mapsnapshot.model.build_error import (
    BuildError,
    BuildResult,
    MissingViewportError,
    UrlTooLongError,
)
from mapsnapshot.model.geo_point import GeoBounds, GeoPoint
from mapsnapshot.model.options import SnapshotOptions
from mapsnapshot.model.overlay import (
    ROUTE_DEFAULT_STYLE,
    Circle,
    DirectionsResult,
    Marker,
    MarkerStyle,
    Overlay,
    PathStyle,
    Polygon,
    Polyline,
    Rectangle,
    Route,
    RouteLeg,
)
from mapsnapshot.model.style_rule import StyleOperation, StyleRule, StyleSheet
from mapsnapshot.model.viewport import MapTypeId, PixelSize, ViewportState

__all__ = [
    "GeoPoint",
    "GeoBounds",
    "Overlay",
    "Marker",
    "Polyline",
    "Polygon",
    "Circle",
    "Rectangle",
    "DirectionsResult",
    "Route",
    "RouteLeg",
    "PathStyle",
    "MarkerStyle",
    "ROUTE_DEFAULT_STYLE",
    "StyleOperation",
    "StyleRule",
    "StyleSheet",
    "MapTypeId",
    "PixelSize",
    "ViewportState",
    "SnapshotOptions",
    "BuildError",
    "UrlTooLongError",
    "MissingViewportError",
    "BuildResult",
]
