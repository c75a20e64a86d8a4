"""SnapshotUrlBuilder - assembles the static map request URL.

One pass over a viewport snapshot and its overlays, appending query fragments
in a fixed order:

    size, maptype | style..., hl?, format?, path..., markers..., zoom?, center?, sensor

Path overlays (circles, polylines, polygons, rectangles) come first, then
route renderings with their lettered waypoint markers, then plain markers
grouped by identical options. The result is checked against the service's
URL length limit; an oversized URL is a failed build, never a truncated one.

Implicit positioning: with adjust_zoom set, paths are not clipped to the
viewport, all markers are included regardless of bounds, and zoom is left out
whenever at least one overlay was drawn.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from mapsnapshot.constants import FormatConfig, MapTypeConfig, StaticMapConfig, ZoomConfig
from mapsnapshot.core.geo_projector import GeoProjector
from mapsnapshot.core.style_serializer import StyleSerializer
from mapsnapshot.generators.marker_groups import MarkerGroups, route_marker_fragment
from mapsnapshot.generators.overlay_geometry import overlay_vertices, select_vertices
from mapsnapshot.generators.path_fragment import path_fragment
from mapsnapshot.model.build_error import BuildResult, MissingViewportError, UrlTooLongError
from mapsnapshot.model.geo_point import GeoPoint
from mapsnapshot.model.options import SnapshotOptions
from mapsnapshot.model.overlay import PATH_KINDS, DirectionsResult, Marker, Overlay
from mapsnapshot.model.style_rule import StyleSheet
from mapsnapshot.model.viewport import PixelSize, ViewportState

logger = logging.getLogger(__name__)

# None: use the viewport center; False: leave the center to the service; GeoPoint: use it
CenterOverride = Union[GeoPoint, bool, None]


def format_zoom(zoom: int) -> str:
    if zoom > ZoomConfig.MAX_NUMERIC_ZOOM:
        return ZoomConfig.OVER_MAX_SENTINEL
    return str(int(zoom))


def format_sensor(sensor: Union[bool, str]) -> str:
    if isinstance(sensor, bool):
        return "true" if sensor else "false"
    return str(sensor)


@dataclass(frozen=True)
class SnapshotUrlBuilder:
    """Builds static map URLs for one host/sensor configuration.

    Attributes:
        host: Static map service host, e.g. "maps.google.com"
        sensor: Value of the sensor parameter
        max_url_length: Longest URL the service accepts

    Example:
        builder = SnapshotUrlBuilder(host="maps.google.com", sensor=False)
        result = builder.build(viewport=viewport, overlays=overlays)
        if result.ok:
            fetch(result.url)
    """

    host: str = StaticMapConfig.DEFAULT_HOST
    sensor: Union[bool, str] = StaticMapConfig.DEFAULT_SENSOR
    max_url_length: int = StaticMapConfig.MAX_URL_LENGTH

    @property
    def base_url(self) -> str:
        return f"{StaticMapConfig.SCHEME}{self.host}{StaticMapConfig.PATH}"

    def build(
        self,
        viewport: Optional[ViewportState],
        overlays: Iterable[Overlay] = (),
        options: Optional[SnapshotOptions] = None,
        center: CenterOverride = None,
    ) -> BuildResult:
        """Build the snapshot URL for a viewport and its overlays.

        Args:
            viewport: Point-in-time capture of the map
            overlays: Overlays in insertion order; ones not attached to this viewport are skipped
            options: Rendering options, defaults if None
            center: None for the viewport center, False to omit center, or an explicit point

        Returns:
            BuildResult with the URL, or with MissingViewportError / UrlTooLongError.
        """
        if viewport is None:
            return BuildResult.failure(MissingViewportError())
        options = options or SnapshotOptions()
        overlays = [overlay for overlay in overlays if overlay.is_attached_to(viewport.map_id)]

        fragments = [
            self._size_fragment(viewport, options),
            self._map_type_fragment(viewport, options),
            self._language_fragment(options),
            self._format_fragment(options),
        ]

        overlay_fragments = self._path_fragments(viewport, overlays, options)
        overlay_fragments += self._route_fragments(viewport, overlays, options)
        overlay_fragments += self._marker_fragments(viewport, overlays, options)
        fragments.extend(overlay_fragments)

        if not (options.adjust_zoom and overlay_fragments):
            fragments.append(f"&zoom={format_zoom(viewport.zoom)}")

        if center is not False:
            position = center if isinstance(center, GeoPoint) else viewport.center
            fragments.append(f"&center={GeoProjector.to_url_coordinate(position)}")

        fragments.append(f"&sensor={format_sensor(self.sensor)}")

        url = self.base_url + "".join(fragments)
        if len(url) > self.max_url_length:
            logger.warning(f"Snapshot URL has {len(url)} characters, limit is {self.max_url_length}")
            return BuildResult.failure(UrlTooLongError(length=len(url), limit=self.max_url_length))

        logger.info(f"Built snapshot URL: {len(url)} characters, {len(overlay_fragments)} overlay fragments")
        return BuildResult.success(url)

    # -------------------------------------------------------------------------
    # Fixed parameters
    # -------------------------------------------------------------------------

    @staticmethod
    def _size_fragment(viewport: ViewportState, options: SnapshotOptions) -> str:
        size: PixelSize = options.size if options.size is not None else viewport.pixel_size
        return f"size={size.clamped()}"

    @staticmethod
    def _map_type_fragment(viewport: ViewportState, options: SnapshotOptions) -> str:
        if options.map_type:
            return f"&maptype={options.map_type}"

        built_in = viewport.built_in_map_type
        if built_in is not None:
            return f"&maptype={built_in.value}"

        if viewport.active_style_sheet is not None:
            logger.debug(f"Styled map type '{viewport.map_type_id}', serializing {len(viewport.active_style_sheet)} rules")
            return StyleSerializer.serialize(viewport.active_style_sheet)

        logger.debug(f"Unknown map type '{viewport.map_type_id}' without styles, using {MapTypeConfig.DEFAULT}")
        return f"&maptype={MapTypeConfig.DEFAULT}"

    @staticmethod
    def _language_fragment(options: SnapshotOptions) -> str:
        return f"&hl={options.language}" if options.language else ""

    @staticmethod
    def _format_fragment(options: SnapshotOptions) -> str:
        image_format = FormatConfig.FORMAT_MAP.get(options.format)
        return f"&format={image_format}" if image_format else ""

    # -------------------------------------------------------------------------
    # Overlays
    # -------------------------------------------------------------------------

    @staticmethod
    def _path_fragments(viewport: ViewportState, overlays: list[Overlay], options: SnapshotOptions) -> list[str]:
        fragments = []
        for overlay in overlays:
            if not isinstance(overlay, PATH_KINDS):
                continue
            points = select_vertices(overlay_vertices(overlay), viewport.bounds, options.adjust_zoom)
            if not points:
                logger.debug(f"{overlay.kind} has no visible vertices, skipping")
                continue
            fragments.append(
                path_fragment(
                    points=points,
                    style=overlay.style,
                    closed=overlay.is_closed,
                    use_polyline_encode=options.use_polyline_encode,
                )
            )
        return fragments

    @staticmethod
    def _route_fragments(viewport: ViewportState, overlays: list[Overlay], options: SnapshotOptions) -> list[str]:
        fragments = []
        for overlay in overlays:
            if not isinstance(overlay, DirectionsResult):
                continue
            for route in overlay.routes:
                points = select_vertices(route.overview_path, viewport.bounds, options.adjust_zoom)
                if not points:
                    logger.debug("Route has no visible vertices, skipping")
                    continue
                fragments.append(
                    path_fragment(
                        points=points,
                        style=overlay.effective_style,
                        closed=False,
                        use_polyline_encode=options.use_polyline_encode,
                    )
                )
                last = len(route.legs) - 1
                for index, leg in enumerate(route.legs):
                    if options.adjust_zoom or viewport.bounds.contains(leg.start):
                        fragments.append(route_marker_fragment(index, leg.start))
                    if index == last and (options.adjust_zoom or viewport.bounds.contains(leg.end)):
                        fragments.append(route_marker_fragment(index + 1, leg.end))
        return fragments

    @staticmethod
    def _marker_fragments(viewport: ViewportState, overlays: list[Overlay], options: SnapshotOptions) -> list[str]:
        groups = MarkerGroups()
        for overlay in overlays:
            if not isinstance(overlay, Marker):
                continue
            if options.adjust_zoom or viewport.bounds.contains(overlay.position):
                groups.add(position=overlay.position, style=overlay.style)
        return groups.fragments()


def build_url(
    viewport: Optional[ViewportState],
    overlays: Iterable[Overlay] = (),
    options: Optional[SnapshotOptions] = None,
    center: CenterOverride = None,
    host: str = StaticMapConfig.DEFAULT_HOST,
    sensor: Union[bool, str] = StaticMapConfig.DEFAULT_SENSOR,
) -> BuildResult:
    """Build a snapshot URL with a one-off builder. See SnapshotUrlBuilder.build()."""
    return SnapshotUrlBuilder(host=host, sensor=sensor).build(
        viewport=viewport,
        overlays=overlays,
        options=options,
        center=center,
    )


def serialize_style(sheet: StyleSheet) -> str:
    """Style query fragments for a sheet, usable on their own (e.g. for diagnostics)."""
    return StyleSerializer.serialize(sheet)
