"""mapsnapshot - Render an interactive map view as one static map image URL.

Builds a single static map API request from a snapshot of the map:
- Viewport clipping so only visible geometry spends URL budget
- Encoded polylines for paths, polygons, circles, rectangles and routes
- Grouped marker parameters with labels, colors and custom icons
- Custom map styling serialized as `style` parameters
- Hard URL length check with a typed error instead of a broken URL

Modules:
    core: Pure algorithms (projection, polyline codec, clipping, style serialization)
    model: Data structures (GeoPoint, overlays, viewport, options, build result)
    generators: URL assembly (SnapshotUrlBuilder)
    control: SnapshotControl facade keeping options and the last URL

Example:
    from mapsnapshot import build_url
    from mapsnapshot.model import GeoBounds, GeoPoint, Marker, ViewportState
"""

from mapsnapshot.control import SnapshotControl
from mapsnapshot.generators.snapshot_url_builder import SnapshotUrlBuilder, build_url, serialize_style

__all__ = [
    "SnapshotControl",
    "SnapshotUrlBuilder",
    "build_url",
    "serialize_style",
]
