"""SnapshotOptions - configuration for one snapshot request.

Options carry declared defaults and are validated when constructed. Unknown
formats and map types are tolerated (with a logged warning) because the remote
service ignores what it does not understand: an unknown format is simply not
sent, an explicit map type is sent as given.

from_dict() accepts both camelCase keys (buttonLabelHtml, usePolylineEncode,
...) and their snake_case equivalents.
"""

import logging
import re
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Optional

from mapsnapshot.constants import FormatConfig, MapTypeConfig
from mapsnapshot.model.geo_point import GeoPoint
from mapsnapshot.model.viewport import PixelSize

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _to_snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


@dataclass(frozen=True)
class SnapshotOptions:
    """Snapshot rendering options.

    Attributes:
        button_label_html: Label of the host's snapshot button (display only)
        popup_label_html: Title of the host's snapshot popup (display only)
        map_type: "roadmap", "satellite", "hybrid", "terrain", or "" to follow the map
        size: Requested image size, None or "" for the map size; each dimension is capped at 640
        hidden: Whether the host hides its snapshot button (display only)
        language: Language for labels and copyrights, "" for the service default
        format: Image format ("gif", "jpg", "jpg-baseline", "png8", "png32", "png")
        use_polyline_encode: Send paths as encoded polylines instead of raw coordinates
        adjust_center: Let the service pick the center from the overlays
        adjust_zoom: Let the service pick the zoom and skip viewport clipping
        position: Center used by SnapshotControl.snapshot() instead of the map center
    """

    button_label_html: str = "Say cheese!"
    popup_label_html: str = ""
    map_type: str = ""
    size: Optional[PixelSize] = None
    hidden: bool = False
    language: str = ""
    format: str = FormatConfig.DEFAULT_FORMAT
    use_polyline_encode: bool = True
    adjust_center: bool = False
    adjust_zoom: bool = False
    position: Optional[GeoPoint] = None

    def __post_init__(self) -> None:
        """Validate and normalize after initialization."""
        for name in ("hidden", "use_polyline_encode", "adjust_center", "adjust_zoom"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"Option {name} must be a bool, got {getattr(self, name)!r}")

        size = self.size
        if size == "":
            size = None
        elif isinstance(size, dict):
            size = PixelSize(width=int(size["width"]), height=int(size["height"]))
        elif isinstance(size, (tuple, list)):
            size = PixelSize(width=int(size[0]), height=int(size[1]))
        if size is not None and not isinstance(size, PixelSize):
            raise ValueError(f"Option size must be a PixelSize, got {self.size!r}")
        object.__setattr__(self, "size", size)

        position = self.position
        if isinstance(position, dict):
            position = GeoPoint(lat=float(position["lat"]), lng=float(position["lng"]))
        elif isinstance(position, (tuple, list)):
            position = GeoPoint.from_tuple(position)
        if position is not None and not isinstance(position, GeoPoint):
            raise ValueError(f"Option position must be a GeoPoint, got {self.position!r}")
        object.__setattr__(self, "position", position)

        map_type = (self.map_type or "").lower()
        if map_type and map_type not in MapTypeConfig.BUILT_IN:
            logger.warning(f"Unknown map type '{map_type}', passing it through unchanged")
        object.__setattr__(self, "map_type", map_type)

        image_format = (self.format or "").lower()
        if image_format and image_format not in FormatConfig.ACCEPTED_FORMATS:
            logger.warning(f"Unsupported image format '{image_format}', no format will be requested")
        object.__setattr__(self, "format", image_format)

        object.__setattr__(self, "language", self.language or "")

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "SnapshotOptions":
        """Create SnapshotOptions from a loosely keyed dictionary, filling in defaults.

        Raises:
            ValueError: If a key does not name a known option.
        """
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _to_snake_case(key)
            if name == "maptype":
                name = "map_type"
            if name not in known:
                raise ValueError(f"Unknown snapshot option '{key}'")
            kwargs[name] = value
        return cls(**kwargs)

    def merged(self, **changes: Any) -> "SnapshotOptions":
        """Return a copy with the given options replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
