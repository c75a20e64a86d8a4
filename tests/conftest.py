"""Shared pytest fixtures for mapsnapshot tests.

COORDINATE SYSTEM:
    Tests use a viewport around the equator/prime meridian intersection,
    bounds (-1, -1) to (1, 1), so expected URL coordinates stay short and
    exact ("0.5,0.25") and containment is easy to reason about.
"""

import pytest

from mapsnapshot.generators.snapshot_url_builder import SnapshotUrlBuilder
from mapsnapshot.model.geo_point import GeoBounds, GeoPoint
from mapsnapshot.model.viewport import MapTypeId, PixelSize, ViewportState

BASE_URL = "http://maps.google.com/maps/api/staticmap?"
MAP_ID = "map"


# =============================================================================
# REFERENCE POLYLINE DECODER
# =============================================================================


def reference_decode(encoded: str) -> list[tuple[float, float]]:
    """Independent polyline decoder returning (lat, lng) tuples.

    Written from the published algorithm, separately from PolylineCodec, so
    round-trip tests do not check the codec against itself.
    """
    coordinates = []
    index = 0
    lat = 0
    lng = 0
    while index < len(encoded):
        deltas = []
        for _ in range(2):
            result = 0
            shift = 0
            while True:
                b = ord(encoded[index]) - 63
                index += 1
                result |= (b & 0x1F) << shift
                shift += 5
                if b < 0x20:
                    break
            deltas.append(~(result >> 1) if result & 1 else result >> 1)
        lat += deltas[0]
        lng += deltas[1]
        coordinates.append((lat / 1e5, lng / 1e5))
    return coordinates


# =============================================================================
# VIEWPORT FIXTURES
# =============================================================================


@pytest.fixture
def unit_bounds() -> GeoBounds:
    """Bounds from (-1, -1) to (1, 1)."""
    return GeoBounds(southwest=GeoPoint(lat=-1.0, lng=-1.0), northeast=GeoPoint(lat=1.0, lng=1.0))


@pytest.fixture
def viewport(unit_bounds: GeoBounds) -> ViewportState:
    """Roadmap viewport, 400x300 pixels, zoom 10, centered on (0, 0)."""
    return ViewportState(
        bounds=unit_bounds,
        center=GeoPoint(lat=0.0, lng=0.0),
        zoom=10,
        map_type_id=MapTypeId.ROADMAP,
        pixel_size=PixelSize(width=400, height=300),
        map_id=MAP_ID,
    )


@pytest.fixture
def builder() -> SnapshotUrlBuilder:
    return SnapshotUrlBuilder(host="maps.google.com", sensor=False)
