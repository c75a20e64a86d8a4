"""Static map URL assembly.

Provides the SnapshotUrlBuilder and the fragment writers it is built from:
- overlay_geometry: per-kind vertex lists (circle ring, rectangle corners, closing)
- path_fragment: `path` fragments with color/fill/weight and encoded points
- marker_groups: marker option strings, icon limit, grouping by options
- snapshot_url_builder: fixed-order assembly and length check
"""

from mapsnapshot.generators.marker_groups import MarkerGroups, route_marker_fragment
from mapsnapshot.generators.overlay_geometry import (
    close_ring,
    overlay_vertices,
    rectangle_corners,
    select_vertices,
)
from mapsnapshot.generators.path_fragment import (
    normalize_color,
    opacity_hex,
    path_fragment,
)
from mapsnapshot.generators.snapshot_url_builder import (
    SnapshotUrlBuilder,
    build_url,
    format_zoom,
    serialize_style,
)

__all__ = [
    "SnapshotUrlBuilder",
    "build_url",
    "serialize_style",
    "format_zoom",
    "MarkerGroups",
    "route_marker_fragment",
    "overlay_vertices",
    "rectangle_corners",
    "close_ring",
    "select_vertices",
    "path_fragment",
    "opacity_hex",
    "normalize_color",
]
