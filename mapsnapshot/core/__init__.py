"""Core algorithms for snapshot URL synthesis.

Pure, stateless building blocks:
- GeoProjector: Great-circle destination points, circle rings, URL coordinates
- PolylineCodec: Signed-delta polyline encoding
- ViewportClipper: Visible-vertex selection against the viewport
- StyleSerializer: Map styling rules to `style` query fragments
"""

from mapsnapshot.core.geo_projector import GeoProjector, format_degrees, wrap_longitude
from mapsnapshot.core.polyline_codec import PolylineCodec
from mapsnapshot.core.style_serializer import StyleSerializer
from mapsnapshot.core.viewport_clipper import ViewportClipper

__all__ = [
    "GeoProjector",
    "format_degrees",
    "wrap_longitude",
    "PolylineCodec",
    "StyleSerializer",
    "ViewportClipper",
]
