"""Overlay - geometric annotations drawn on the interactive map.

The host map binding translates its native overlay objects into these
dataclasses before asking for a snapshot. Every overlay records the map it is
attached to (map_id); only overlays attached to the viewport being captured
are rendered.

Kinds:
- Marker: a single position with marker styling
- Polyline: an open vertex path
- Polygon: a closed vertex ring
- Circle: center + radius, approximated as a 37-vertex ring
- Rectangle: a GeoBounds, rendered as its four corners
- DirectionsResult: one or more routes, each with an overview path and legs
"""

import math
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from mapsnapshot.constants import PathStyleConfig
from mapsnapshot.model.geo_point import GeoBounds, GeoPoint


def _check_opacity(name: str, value: float) -> None:
    if not (0.0 <= value <= 1.0):
        raise ValueError(f"{name} must be within [0, 1], got {value}")


@dataclass(frozen=True)
class PathStyle:
    """Stroke and fill styling for path-kind overlays.

    Attributes:
        stroke_color: "#RRGGBB" or a named color
        stroke_opacity: 0.0 (transparent) to 1.0 (opaque)
        stroke_weight: Line width in pixels, None for the service default
        fill_color: Fill color for closed shapes
        fill_opacity: Fill opacity for closed shapes
    """

    stroke_color: str = PathStyleConfig.DEFAULT_STROKE_COLOR
    stroke_opacity: float = PathStyleConfig.DEFAULT_STROKE_OPACITY
    stroke_weight: Optional[int] = None
    fill_color: str = PathStyleConfig.DEFAULT_FILL_COLOR
    fill_opacity: float = PathStyleConfig.DEFAULT_FILL_OPACITY

    def __post_init__(self) -> None:
        _check_opacity("stroke_opacity", self.stroke_opacity)
        _check_opacity("fill_opacity", self.fill_opacity)
        if self.stroke_weight is not None and self.stroke_weight < 0:
            raise ValueError(f"stroke_weight cannot be negative, got {self.stroke_weight}")


ROUTE_DEFAULT_STYLE = PathStyle(
    stroke_color=PathStyleConfig.ROUTE_STROKE_COLOR,
    stroke_opacity=PathStyleConfig.ROUTE_STROKE_OPACITY,
)


@dataclass(frozen=True)
class MarkerStyle:
    """Marker appearance.

    Attributes:
        icon: Custom icon URL
        shadow: Custom shadow URL; without one, custom icons are drawn shadowless
        size: Size class ("tiny", "small", "mid"); other values are ignored
        label: Label text; only its first alphanumeric character is used
        color: "#RRGGBB" or a named color
    """

    icon: Optional[str] = None
    shadow: Optional[str] = None
    size: Optional[str] = None
    label: Optional[str] = None
    color: Optional[str] = None


@dataclass(frozen=True)
class Overlay:
    """Base class for all overlays.

    Attributes:
        map_id: Identifier of the map the overlay is attached to, None if detached
    """

    kind: ClassVar[str] = "Overlay"
    is_closed: ClassVar[bool] = False

    def is_attached_to(self, map_id: str) -> bool:
        return self.map_id is not None and self.map_id == map_id


@dataclass(frozen=True)
class Marker(Overlay):
    """A point marker."""

    kind: ClassVar[str] = "Marker"

    position: GeoPoint
    style: MarkerStyle = field(default_factory=MarkerStyle)
    map_id: Optional[str] = None


@dataclass(frozen=True)
class Polyline(Overlay):
    """An open path."""

    kind: ClassVar[str] = "Polyline"

    path: tuple[GeoPoint, ...] = ()
    style: PathStyle = field(default_factory=PathStyle)
    map_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", tuple(self.path))


@dataclass(frozen=True)
class Polygon(Overlay):
    """A closed ring. The ring is closed automatically when rendered."""

    kind: ClassVar[str] = "Polygon"
    is_closed: ClassVar[bool] = True

    path: tuple[GeoPoint, ...] = ()
    style: PathStyle = field(default_factory=PathStyle)
    map_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", tuple(self.path))


@dataclass(frozen=True)
class Circle(Overlay):
    """A circle given by its center and radius in meters."""

    kind: ClassVar[str] = "Circle"
    is_closed: ClassVar[bool] = True

    center: GeoPoint
    radius_m: float
    style: PathStyle = field(default_factory=PathStyle)
    map_id: Optional[str] = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.radius_m) or self.radius_m < 0:
            raise ValueError(f"Circle radius must be a non-negative number, got {self.radius_m}")


@dataclass(frozen=True)
class Rectangle(Overlay):
    """An axis-aligned rectangle."""

    kind: ClassVar[str] = "Rectangle"
    is_closed: ClassVar[bool] = True

    bounds: GeoBounds
    style: PathStyle = field(default_factory=PathStyle)
    map_id: Optional[str] = None


@dataclass(frozen=True)
class RouteLeg:
    """One leg of a route, between two consecutive waypoints."""

    start: GeoPoint
    end: GeoPoint


@dataclass(frozen=True)
class Route:
    """A single route alternative.

    Attributes:
        overview_path: Simplified vertex path of the whole route
        legs: Waypoint-to-waypoint legs, in travel order
    """

    overview_path: tuple[GeoPoint, ...] = ()
    legs: tuple[RouteLeg, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "overview_path", tuple(self.overview_path))
        object.__setattr__(self, "legs", tuple(self.legs))


@dataclass(frozen=True)
class DirectionsResult(Overlay):
    """Rendered directions: routes drawn as paths with lettered waypoint markers.

    Attributes:
        routes: Route alternatives, each rendered separately
        style: Explicit path style, None for the blue half-transparent default
    """

    kind: ClassVar[str] = "DirectionsResult"

    routes: tuple[Route, ...] = ()
    style: Optional[PathStyle] = None
    map_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "routes", tuple(self.routes))

    @property
    def effective_style(self) -> PathStyle:
        return self.style if self.style is not None else ROUTE_DEFAULT_STYLE


PATH_KINDS = (Circle, Polyline, Polygon, Rectangle)
