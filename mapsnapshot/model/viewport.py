"""ViewportState - a point-in-time capture of the interactive map.

The host map binding fills this in from its live map object. The builder only
reads it; nothing here changes after construction.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from mapsnapshot.constants import StaticMapConfig, ZoomConfig
from mapsnapshot.model.geo_point import GeoBounds, GeoPoint
from mapsnapshot.model.style_rule import StyleSheet


class MapTypeId(Enum):
    """Built-in map types of the host map."""

    ROADMAP = "roadmap"
    SATELLITE = "satellite"
    HYBRID = "hybrid"
    TERRAIN = "terrain"

    @classmethod
    def parse(cls, value: Union["MapTypeId", str]) -> Optional["MapTypeId"]:
        """Return the built-in type for value, or None for a custom (styled) type id."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return None


def clamp_size(value: int) -> int:
    """Clamp an image dimension to what the service accepts."""
    return max(StaticMapConfig.MIN_SIZE_PX, min(StaticMapConfig.MAX_SIZE_PX, int(value)))


@dataclass(frozen=True)
class PixelSize:
    """Image or map container size in pixels."""

    width: int
    height: int

    def clamped(self) -> "PixelSize":
        return PixelSize(width=clamp_size(self.width), height=clamp_size(self.height))

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class ViewportState:
    """Visible area and display state of the interactive map.

    Attributes:
        bounds: Visible geographic rectangle
        center: Current map center
        zoom: Integer zoom level
        map_type_id: Built-in MapTypeId, or the id of a custom (styled) map type
        pixel_size: Size of the map container in pixels
        active_style_sheet: Styling of the active map type when it is a styled type
        map_id: Identifier overlays use to refer to this map
    """

    bounds: GeoBounds
    center: GeoPoint
    zoom: int
    map_type_id: Union[MapTypeId, str] = MapTypeId.ROADMAP
    pixel_size: PixelSize = PixelSize(width=StaticMapConfig.MAX_SIZE_PX, height=StaticMapConfig.MAX_SIZE_PX)
    active_style_sheet: Optional[StyleSheet] = None
    map_id: str = "map"

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if self.zoom < ZoomConfig.MIN_ZOOM:
            raise ValueError(f"Zoom cannot be negative, got {self.zoom}")
        if int(self.zoom) != self.zoom:
            raise ValueError(f"Zoom must be an integer level, got {self.zoom}")

    @property
    def built_in_map_type(self) -> Optional[MapTypeId]:
        return MapTypeId.parse(self.map_type_id)
