"""Tests for mapsnapshot data model.

Tests: GeoPoint, GeoBounds, overlays, StyleSheet, ViewportState,
SnapshotOptions, BuildResult
Focus: validation at construction and geometry predicates.
"""

import logging

import pytest

from mapsnapshot.model.build_error import BuildResult, MissingViewportError, UrlTooLongError
from mapsnapshot.model.geo_point import GeoBounds, GeoPoint
from mapsnapshot.model.options import SnapshotOptions
from mapsnapshot.model.overlay import (
    ROUTE_DEFAULT_STYLE,
    Circle,
    DirectionsResult,
    Marker,
    PathStyle,
    Polygon,
    Polyline,
)
from mapsnapshot.model.style_rule import StyleSheet
from mapsnapshot.model.viewport import MapTypeId, PixelSize, ViewportState


# =============================================================================
# GEOMETRY
# =============================================================================


class TestGeoPoint:
    """GeoPoint - immutable coordinate."""

    def test_rejects_nan(self) -> None:
        with pytest.raises(ValueError):
            GeoPoint(lat=float("nan"), lng=0.0)

    def test_value_equality(self) -> None:
        assert GeoPoint(lat=1.0, lng=2.0) == GeoPoint(lat=1.0, lng=2.0)
        assert GeoPoint.from_tuple((1, 2)) == GeoPoint(lat=1.0, lng=2.0)

    def test_is_immutable(self) -> None:
        point = GeoPoint(lat=1.0, lng=2.0)
        with pytest.raises(AttributeError):
            point.lat = 3.0  # type: ignore[misc]


class TestGeoBounds:
    """GeoBounds - containment and envelope intersection."""

    def test_contains_is_inclusive(self, unit_bounds: GeoBounds) -> None:
        assert unit_bounds.contains(GeoPoint(lat=0.0, lng=0.0))
        assert unit_bounds.contains(GeoPoint(lat=1.0, lng=-1.0))
        assert not unit_bounds.contains(GeoPoint(lat=1.0001, lng=0.0))

    def test_contains_across_antimeridian(self) -> None:
        bounds = GeoBounds(southwest=GeoPoint(lat=-10.0, lng=170.0), northeast=GeoPoint(lat=10.0, lng=-170.0))
        assert bounds.crosses_antimeridian
        assert bounds.contains(GeoPoint(lat=0.0, lng=179.0))
        assert bounds.contains(GeoPoint(lat=0.0, lng=-179.0))
        assert not bounds.contains(GeoPoint(lat=0.0, lng=0.0))

    def test_center_across_antimeridian(self) -> None:
        bounds = GeoBounds(southwest=GeoPoint(lat=-10.0, lng=170.0), northeast=GeoPoint(lat=10.0, lng=-170.0))
        assert bounds.center == GeoPoint(lat=0.0, lng=180.0)

    def test_intersects_segment_horizontal_line(self, unit_bounds: GeoBounds) -> None:
        """Zero-height envelopes (east-west segments) still intersect."""
        assert unit_bounds.intersects_segment(GeoPoint(lat=0.5, lng=-5.0), GeoPoint(lat=0.5, lng=5.0))
        assert not unit_bounds.intersects_segment(GeoPoint(lat=5.0, lng=-5.0), GeoPoint(lat=5.0, lng=5.0))

    def test_intersects_bounds(self, unit_bounds: GeoBounds) -> None:
        touching = GeoBounds(southwest=GeoPoint(lat=1.0, lng=1.0), northeast=GeoPoint(lat=2.0, lng=2.0))
        apart = GeoBounds(southwest=GeoPoint(lat=3.0, lng=3.0), northeast=GeoPoint(lat=4.0, lng=4.0))
        assert unit_bounds.intersects(touching)
        assert not unit_bounds.intersects(apart)

    def test_from_points_orders_corners(self) -> None:
        bounds = GeoBounds.from_points(GeoPoint(lat=5.0, lng=-1.0), GeoPoint(lat=-2.0, lng=3.0))
        assert bounds.southwest == GeoPoint(lat=-2.0, lng=-1.0)
        assert bounds.northeast == GeoPoint(lat=5.0, lng=3.0)


# =============================================================================
# OVERLAYS
# =============================================================================


class TestOverlays:
    """Overlay dataclasses - validation and attachment."""

    def test_path_style_rejects_opacity_outside_unit_range(self) -> None:
        with pytest.raises(ValueError):
            PathStyle(stroke_opacity=1.5)
        with pytest.raises(ValueError):
            PathStyle(fill_opacity=-0.1)

    def test_circle_rejects_negative_radius(self) -> None:
        with pytest.raises(ValueError):
            Circle(center=GeoPoint(lat=0.0, lng=0.0), radius_m=-1.0)

    def test_paths_are_stored_as_tuples(self) -> None:
        polyline = Polyline(path=[GeoPoint(lat=0.0, lng=0.0)])
        assert isinstance(polyline.path, tuple)

    def test_closed_kinds(self) -> None:
        assert Polygon.is_closed
        assert Circle.is_closed
        assert not Polyline.is_closed

    def test_attachment(self) -> None:
        marker = Marker(position=GeoPoint(lat=0.0, lng=0.0), map_id="map")
        detached = Marker(position=GeoPoint(lat=0.0, lng=0.0))
        assert marker.is_attached_to("map")
        assert not marker.is_attached_to("other")
        assert not detached.is_attached_to("map")

    def test_directions_default_style(self) -> None:
        assert DirectionsResult().effective_style == ROUTE_DEFAULT_STYLE
        assert ROUTE_DEFAULT_STYLE.stroke_color == "#0000FF"
        assert ROUTE_DEFAULT_STYLE.stroke_opacity == 0.5


# =============================================================================
# VIEWPORT AND STYLES
# =============================================================================


class TestViewportState:
    """ViewportState - validation and map type detection."""

    def test_rejects_negative_zoom(self, unit_bounds: GeoBounds) -> None:
        with pytest.raises(ValueError):
            ViewportState(bounds=unit_bounds, center=GeoPoint(lat=0.0, lng=0.0), zoom=-1)

    def test_rejects_fractional_zoom(self, unit_bounds: GeoBounds) -> None:
        with pytest.raises(ValueError):
            ViewportState(bounds=unit_bounds, center=GeoPoint(lat=0.0, lng=0.0), zoom=3.5)

    def test_built_in_map_type_from_string(self, unit_bounds: GeoBounds) -> None:
        viewport = ViewportState(
            bounds=unit_bounds, center=GeoPoint(lat=0.0, lng=0.0), zoom=3, map_type_id="SATELLITE"
        )
        assert viewport.built_in_map_type is MapTypeId.SATELLITE

    def test_styled_map_type_is_not_built_in(self) -> None:
        assert MapTypeId.parse("night_mode") is None

    def test_pixel_size_clamps_both_ways(self) -> None:
        assert PixelSize(width=800, height=0).clamped() == PixelSize(width=640, height=1)
        assert str(PixelSize(width=640, height=300)) == "640x300"

    def test_style_sheet_defaults(self) -> None:
        sheet = StyleSheet.from_dicts([{"stylers": [{"visibility": "simplified"}]}])
        assert len(sheet) == 1
        rule = next(iter(sheet))
        assert (rule.feature_type, rule.element_type) == ("all", "all")


# =============================================================================
# OPTIONS
# =============================================================================


class TestSnapshotOptions:
    """SnapshotOptions - defaults, normalization and dict loading."""

    def test_defaults(self) -> None:
        options = SnapshotOptions()
        assert options.format == "png"
        assert options.use_polyline_encode is True
        assert options.adjust_zoom is False
        assert options.size is None

    def test_from_dict_accepts_camel_case(self) -> None:
        options = SnapshotOptions.from_dict(
            {"mapType": "Satellite", "usePolylineEncode": False, "size": {"width": 800, "height": 300}}
        )
        assert options.map_type == "satellite"
        assert options.use_polyline_encode is False
        assert options.size == PixelSize(width=800, height=300)

    def test_from_dict_accepts_lowercase_maptype_key(self) -> None:
        assert SnapshotOptions.from_dict({"maptype": "hybrid"}).map_type == "hybrid"

    def test_from_dict_rejects_unknown_keys(self) -> None:
        with pytest.raises(ValueError, match="controlPosition"):
            SnapshotOptions.from_dict({"controlPosition": "TOP_RIGHT"})

    def test_rejects_non_bool_flags(self) -> None:
        with pytest.raises(ValueError):
            SnapshotOptions(adjust_zoom="yes")  # type: ignore[arg-type]

    def test_position_from_tuple(self) -> None:
        assert SnapshotOptions(position=(1.0, 2.0)).position == GeoPoint(lat=1.0, lng=2.0)  # type: ignore[arg-type]

    def test_position_from_dict(self) -> None:
        options = SnapshotOptions.from_dict({"position": {"lat": 0.5, "lng": 0.75}})
        assert options.position == GeoPoint(lat=0.5, lng=0.75)

    @pytest.mark.parametrize(
        "position",
        ["nowhere", 42, GeoBounds(southwest=GeoPoint(lat=0.0, lng=0.0), northeast=GeoPoint(lat=1.0, lng=1.0))],
    )
    def test_rejects_invalid_position(self, position: object) -> None:
        with pytest.raises(ValueError, match="position"):
            SnapshotOptions(position=position)  # type: ignore[arg-type]

    def test_empty_size_means_map_size(self) -> None:
        assert SnapshotOptions.from_dict({"size": ""}).size is None

    def test_rejects_invalid_size(self) -> None:
        with pytest.raises(ValueError, match="size"):
            SnapshotOptions(size="large")  # type: ignore[arg-type]

    def test_unknown_format_is_tolerated_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="mapsnapshot.model.options"):
            options = SnapshotOptions(format="BMP")
        assert options.format == "bmp"
        assert "bmp" in caplog.text

    def test_merged_returns_copy(self) -> None:
        options = SnapshotOptions()
        changed = options.merged(language="ja")
        assert changed.language == "ja"
        assert options.language == ""


# =============================================================================
# BUILD RESULT
# =============================================================================


class TestBuildResult:
    """BuildResult - exactly one of url or error."""

    def test_success(self) -> None:
        result = BuildResult.success("http://example/")
        assert result.ok
        assert result.error is None

    def test_failure(self) -> None:
        result = BuildResult.failure(UrlTooLongError(length=2001, limit=2000))
        assert not result.ok
        assert result.url is None
        assert "2001" in result.error.message

    def test_needs_exactly_one(self) -> None:
        with pytest.raises(ValueError):
            BuildResult()
        with pytest.raises(ValueError):
            BuildResult(url="x", error=MissingViewportError())

    def test_error_str_is_message(self) -> None:
        error = MissingViewportError()
        assert str(error) == error.message
