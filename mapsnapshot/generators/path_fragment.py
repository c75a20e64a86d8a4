"""Writer for `path` query fragments.

    &path=color:<stroke><alpha>[|fillcolor:<fill><alpha>][|weight:<n>]|enc:<polyline>
    &path=color:<stroke><alpha>[...]|lat,lng|lat,lng|...

Alpha is floor(256 * opacity) in lower-case hex without padding, so full
opacity is written as "100"; the service tolerates it.
"""

from math import floor
from typing import Sequence

from mapsnapshot.constants import PathStyleConfig
from mapsnapshot.core.geo_projector import GeoProjector
from mapsnapshot.core.polyline_codec import PolylineCodec
from mapsnapshot.model.geo_point import GeoPoint
from mapsnapshot.model.overlay import PathStyle


def opacity_hex(opacity: float) -> str:
    return format(floor(PathStyleConfig.OPACITY_SCALE * opacity), "x")


def normalize_color(color: str) -> str:
    """Rewrite "#RRGGBB" as "0xRRGGBB"; named colors pass through."""
    return color.replace("#", "0x", 1)


def path_style_options(style: PathStyle, closed: bool) -> str:
    options = [f"color:{normalize_color(style.stroke_color)}{opacity_hex(style.stroke_opacity)}"]
    if closed:
        options.append(f"fillcolor:{normalize_color(style.fill_color)}{opacity_hex(style.fill_opacity)}")
    if style.stroke_weight is not None and style.stroke_weight != PathStyleConfig.DEFAULT_WEIGHT:
        options.append(f"weight:{style.stroke_weight}")
    return "|".join(options)


def path_points(points: Sequence[GeoPoint], use_polyline_encode: bool) -> str:
    if use_polyline_encode:
        return "enc:" + PolylineCodec.encode_path(points)
    return "|".join(GeoProjector.to_raw_coordinate(point) for point in points)


def path_fragment(
    points: Sequence[GeoPoint],
    style: PathStyle,
    closed: bool,
    use_polyline_encode: bool,
) -> str:
    """Build one `&path=` fragment.

    Args:
        points: Vertices already clipped to the viewport (must not be empty)
        style: Stroke/fill styling
        closed: Whether to write the fill color
        use_polyline_encode: Encoded polyline instead of raw coordinates

    Returns:
        Query fragment starting with "&path=".
    """
    return f"&path={path_style_options(style, closed)}|{path_points(points, use_polyline_encode)}"
