"""Configuration constants for mapsnapshot.

All tunable parameters of the snapshot URL builder are centralized here.

Classes:
    StaticMapConfig: Remote service endpoint and hard request limits
    ZoomConfig: Zoom range and the "21+" sentinel
    GeoConfig: Earth model and circle approximation
    PolylineConfig: Polyline codec parameters
    PathStyleConfig: Default stroke/fill styling for path overlays
    MarkerConfig: Marker option vocabulary and limits
    FormatConfig: Image format aliases accepted by the remote service
    MapTypeConfig: Built-in map type identifiers
    StyleConfig: Map styling serialization
"""


class StaticMapConfig:
    """Remote static map service endpoint and request limits."""

    DEFAULT_HOST = "maps.google.com"
    PATH = "/maps/api/staticmap?"
    SCHEME = "http://"
    DEFAULT_SENSOR = False

    # Requests above this length are rejected by the remote service
    MAX_URL_LENGTH = 2000

    # Image size limits per dimension (pixels)
    MIN_SIZE_PX = 1
    MAX_SIZE_PX = 640


class ZoomConfig:
    """Zoom level range."""

    MIN_ZOOM = 0
    # Highest zoom the service accepts as a number; anything above uses the sentinel
    MAX_NUMERIC_ZOOM = 20
    OVER_MAX_SENTINEL = "21+"


class GeoConfig:
    """Spherical Earth model used for circle approximation."""

    EARTH_RADIUS_KM = 6371.0

    # 36 steps of 10° plus the closing point at 360°
    CIRCLE_STEPS = 36

    # Decimal places kept when a coordinate is written into the URL
    URL_COORDINATE_PRECISION = 6


class PolylineConfig:
    """Polyline encoding parameters (compatible with the remote decoder)."""

    PRECISION = 1e5
    CHUNK_BITS = 5
    CHUNK_MASK = 0x1F
    CONTINUATION_BIT = 0x20
    ASCII_OFFSET = 63


class PathStyleConfig:
    """Default styling for path-kind overlays."""

    DEFAULT_STROKE_COLOR = "#000000"
    DEFAULT_STROKE_OPACITY = 1.0
    DEFAULT_FILL_COLOR = "#000000"
    DEFAULT_FILL_OPACITY = 0.3

    # The service's own stroke weight; only other weights are written out
    DEFAULT_WEIGHT = 5

    # Opacity [0, 1] is scaled by this before hex serialization
    OPACITY_SCALE = 256

    # Rendering for route results that carry no explicit style
    ROUTE_STROKE_COLOR = "#0000FF"
    ROUTE_STROKE_OPACITY = 0.5


class MarkerConfig:
    """Marker option vocabulary."""

    SIZE_CLASSES = ("tiny", "small", "mid")
    # Size class that cannot carry a label
    LABELLESS_SIZE = "tiny"

    # Distinct custom icons per request accepted by the service
    MAX_CUSTOM_ICONS = 6

    ROUTE_MARKER_COLOR = "green"
    ROUTE_FIRST_LABEL = "A"


class FormatConfig:
    """Image formats: option value -> query value."""

    # "gif" is accepted as an option but never written; the service default applies
    FORMAT_MAP = {
        "jpg": "jpg",
        "jpeg": "jpg",
        "png": "png32",
        "jpg-baseline": "jpg-baseline",
        "png8": "png8",
        "png32": "png32",
    }
    ACCEPTED_FORMATS = ("gif", *FORMAT_MAP)
    DEFAULT_FORMAT = "png"


class MapTypeConfig:
    """Map type identifiers understood by the remote service."""

    BUILT_IN = ("roadmap", "satellite", "hybrid", "terrain")
    DEFAULT = "roadmap"


class StyleConfig:
    """Map styling serialization."""

    # Operation names starting with this are private to the host map and never sent
    INTERNAL_PREFIX = "_"
    HUE_OPERATION = "hue"
    DEFAULT_FEATURE = "all"
    DEFAULT_ELEMENT = "all"
