"""Marker option strings and grouping.

Markers are written as one `markers` fragment per distinct option string:
    &markers=size:mid|label:A|color:0xFF0000|<lat,lng>|<lat,lng>

The option string combines, in this order: size class, label, color, icon and
shadow flag. The service accepts a limited number of distinct custom icons per
request; once MAX_CUSTOM_ICONS distinct icons are in use, markers with any
other icon are written without one.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from mapsnapshot.constants import MarkerConfig
from mapsnapshot.core.geo_projector import GeoProjector
from mapsnapshot.generators.path_fragment import normalize_color
from mapsnapshot.model.geo_point import GeoPoint
from mapsnapshot.model.overlay import MarkerStyle

logger = logging.getLogger(__name__)

_LABEL_CHAR = re.compile(r"^[a-zA-Z0-9]")


def route_marker_fragment(leg_index: int, position: GeoPoint) -> str:
    """Lettered green waypoint marker: leg 0 -> "A", leg 1 -> "B", ..."""
    label = chr(ord(MarkerConfig.ROUTE_FIRST_LABEL) + leg_index)
    return f"&markers=label:{label}|color:{MarkerConfig.ROUTE_MARKER_COLOR}|{GeoProjector.to_url_coordinate(position)}"


@dataclass
class MarkerGroups:
    """Collects marker positions grouped by option string, in first-seen order.

    One instance is used per build; it tracks the custom icons seen so far.
    """

    groups: dict[str, list[str]] = field(default_factory=dict)
    icons: list[str] = field(default_factory=list)

    def _icon_allowed(self, icon: str) -> bool:
        if icon in self.icons:
            return True
        if len(self.icons) < MarkerConfig.MAX_CUSTOM_ICONS:
            self.icons.append(icon)
            return True
        logger.debug(f"Icon limit reached, dropping icon {icon}")
        return False

    def option_string(self, style: MarkerStyle) -> str:
        """Option string for a marker style."""
        options = []

        size: Optional[str] = style.size.lower() if style.size else None
        if size in MarkerConfig.SIZE_CLASSES:
            options.append(f"size:{size}")

        if style.label and size != MarkerConfig.LABELLESS_SIZE and _LABEL_CHAR.match(style.label):
            options.append(f"label:{style.label[0].upper()}")

        if style.color:
            options.append(f"color:{normalize_color(style.color)}")

        if style.icon and self._icon_allowed(style.icon):
            options.append(f"icon:{style.icon}")
            if not style.shadow:
                options.append("shadow:false")

        return "|".join(options)

    def add(self, position: GeoPoint, style: MarkerStyle) -> None:
        key = self.option_string(style)
        self.groups.setdefault(key, []).append(GeoProjector.to_url_coordinate(position))

    def __len__(self) -> int:
        return len(self.groups)

    def fragments(self) -> list[str]:
        """One `&markers=` fragment per distinct option string."""
        return [
            "&markers=" + "|".join([options, *positions] if options else positions)
            for options, positions in self.groups.items()
        ]
