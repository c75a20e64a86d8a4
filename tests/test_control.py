"""Tests for SnapshotControl - options handling, last URL and error reporting."""

import logging

import pytest

from mapsnapshot.control import SnapshotControl
from mapsnapshot.model.build_error import MissingViewportError, UrlTooLongError
from mapsnapshot.model.geo_point import GeoPoint
from mapsnapshot.model.options import SnapshotOptions
from mapsnapshot.model.overlay import Marker, MarkerStyle
from mapsnapshot.model.viewport import ViewportState

from conftest import MAP_ID


def many_markers(count: int) -> list[Marker]:
    """Markers with distinct six-decimal coordinates inside the unit viewport."""
    return [
        Marker(position=GeoPoint(lat=0.123456 + i * 1e-6, lng=-0.654321), style=MarkerStyle(), map_id=MAP_ID)
        for i in range(count)
    ]


class TestSnapshotControl:
    """SnapshotControl - stateful facade."""

    def test_get_image_returns_and_remembers_url(self, viewport: ViewportState) -> None:
        control = SnapshotControl()
        url = control.get_image(viewport)
        assert url.startswith("http://maps.google.com/maps/api/staticmap?size=400x300")
        assert control.last_url == url
        assert control.last_error is None

    def test_too_long_url_returns_empty_string(self, viewport: ViewportState, caplog: pytest.LogCaptureFixture) -> None:
        control = SnapshotControl()
        with caplog.at_level(logging.ERROR, logger="mapsnapshot.control"):
            url = control.get_image(viewport, many_markers(200))
        assert url == ""
        assert control.last_url == ""
        assert isinstance(control.last_error, UrlTooLongError)
        assert "too long" in caplog.text

    def test_failure_clears_previous_url(self, viewport: ViewportState) -> None:
        control = SnapshotControl()
        control.get_image(viewport)
        assert control.get_image(None) == ""
        assert isinstance(control.last_error, MissingViewportError)

    def test_options_from_dict(self, viewport: ViewportState) -> None:
        control = SnapshotControl(options={"format": "jpg", "language": "de"})
        url = control.get_image(viewport)
        assert "&hl=de&format=jpg&" in url

    def test_set_options_resets_to_defaults(self) -> None:
        control = SnapshotControl(options={"format": "jpg"})
        control.set_options({"language": "fr"})
        assert control.options.format == "png"
        assert control.options.language == "fr"

    def test_set_options_rejects_unknown_key(self) -> None:
        with pytest.raises(ValueError):
            SnapshotControl(options={"sizeX": 3})

    def test_snapshot_uses_position_as_center(self, viewport: ViewportState) -> None:
        control = SnapshotControl(host="maps.google.co.jp", sensor=True)
        url = control.snapshot(viewport, options=SnapshotOptions(position=GeoPoint(lat=0.5, lng=0.75)))
        assert url.endswith("&center=0.5,0.75&sensor=true")

    def test_snapshot_position_from_dict_options(self, viewport: ViewportState) -> None:
        url = SnapshotControl().snapshot(viewport, options={"position": {"lat": 0.5, "lng": 0.75}})
        assert url.endswith("&center=0.5,0.75&sensor=false")

    def test_snapshot_rejects_invalid_position(self, viewport: ViewportState) -> None:
        control = SnapshotControl()
        with pytest.raises(ValueError, match="position"):
            control.snapshot(viewport, options={"position": "nowhere"})

    def test_empty_size_uses_map_size(self, viewport: ViewportState) -> None:
        url = SnapshotControl(options={"size": ""}).get_image(viewport)
        assert "staticmap?size=400x300&" in url

    def test_snapshot_adjust_center_omits_center(self, viewport: ViewportState) -> None:
        control = SnapshotControl(options={"adjustCenter": True})
        url = control.snapshot(viewport)
        assert "center=" not in url

    def test_snapshot_defaults_to_map_center(self, viewport: ViewportState) -> None:
        assert SnapshotControl().snapshot(viewport).endswith("&center=0,0&sensor=false")
