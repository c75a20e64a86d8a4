"""Polyline codec - compact text encoding of coordinate sequences.

Each coordinate is scaled by 1e5 and floored (toward negative infinity, not
rounded), delta-encoded against the previous point, zig-zag folded so the sign
lands in the lowest bit, and emitted as 5-bit chunks offset by 63 with 0x20
as the continuation bit. The remote renderer decodes this bit-exactly, so the
flooring must not be "improved" into rounding.
"""

from math import floor
from typing import Iterable

from mapsnapshot.constants import PolylineConfig
from mapsnapshot.model.geo_point import GeoPoint


class PolylineCodec:
    """Static methods for polyline encoding."""

    @staticmethod
    def encode_unsigned(value: int) -> str:
        """Encode a non-negative integer as 5-bit chunks, least significant first."""
        chunks = []
        while value >= PolylineConfig.CONTINUATION_BIT:
            chunk = (PolylineConfig.CONTINUATION_BIT | (value & PolylineConfig.CHUNK_MASK)) + PolylineConfig.ASCII_OFFSET
            chunks.append(chr(chunk))
            value >>= PolylineConfig.CHUNK_BITS
        chunks.append(chr(value + PolylineConfig.ASCII_OFFSET))
        return "".join(chunks)

    @staticmethod
    def encode_signed(value: int) -> str:
        """Encode a signed integer: shift left by one, invert if negative."""
        folded = value << 1
        if value < 0:
            folded = ~folded
        return PolylineCodec.encode_unsigned(folded)

    @staticmethod
    def encode_path(points: Iterable[GeoPoint]) -> str:
        """Encode a vertex sequence.

        Args:
            points: Vertices in path order

        Returns:
            Encoded polyline string ("" for an empty path).
        """
        encoded = []
        prev_lat = 0
        prev_lng = 0
        for point in points:
            lat_e5 = floor(point.lat * PolylineConfig.PRECISION)
            lng_e5 = floor(point.lng * PolylineConfig.PRECISION)
            encoded.append(PolylineCodec.encode_signed(lat_e5 - prev_lat))
            encoded.append(PolylineCodec.encode_signed(lng_e5 - prev_lng))
            prev_lat = lat_e5
            prev_lng = lng_e5
        return "".join(encoded)

    @staticmethod
    def decode_path(encoded: str) -> list[GeoPoint]:
        """Decode a polyline string back into vertices (1e-5 degree resolution).

        Raises:
            ValueError: If the string ends in the middle of a value.
        """
        values = []
        result = 0
        shift = 0
        for char in encoded:
            chunk = ord(char) - PolylineConfig.ASCII_OFFSET
            result |= (chunk & PolylineConfig.CHUNK_MASK) << shift
            shift += PolylineConfig.CHUNK_BITS
            if chunk < PolylineConfig.CONTINUATION_BIT:
                values.append(~(result >> 1) if result & 1 else result >> 1)
                result = 0
                shift = 0
        if shift or len(values) % 2:
            raise ValueError(f"Truncated polyline: {encoded!r}")

        points = []
        lat = 0
        lng = 0
        for dlat, dlng in zip(values[0::2], values[1::2]):
            lat += dlat
            lng += dlng
            points.append(GeoPoint(lat=lat / PolylineConfig.PRECISION, lng=lng / PolylineConfig.PRECISION))
        return points
