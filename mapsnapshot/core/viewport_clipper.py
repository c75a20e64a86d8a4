"""Viewport clipping of vertex paths.

Off-screen detail wastes URL budget, so only vertices on or near the visible
viewport are sent to the remote renderer. The walk is pairwise over the path:

- Each index carries a "drawn" flag: the point lies inside the bounds, or the
  envelope of its incoming segment overlaps the bounds.
- A segment (j-1, j) is kept when the flag of j-1 is set, when j is inside,
  or when the segment's envelope overlaps the bounds. Keeping a segment emits
  j-1 (unless already emitted) and then j.

The envelope test is a coarse stand-in for exact segment/rectangle
intersection: it can keep segments that merely pass near a corner. Output is
a subsequence of the input: original order, each index at most once.
"""

import logging
from typing import Sequence

import numpy as np

from mapsnapshot.model.geo_point import GeoBounds, GeoPoint

logger = logging.getLogger(__name__)


class ViewportClipper:
    """Selects the vertices of a path needed to draw its visible part."""

    @staticmethod
    def inside_flags(path: Sequence[GeoPoint], bounds: GeoBounds) -> np.ndarray:
        """Containment flag for every vertex of path."""
        if not path:
            return np.zeros(0, dtype=bool)
        coords = np.array([point.lat_lng for point in path], dtype=float)
        return bounds.contains_many(lats=coords[:, 0], lngs=coords[:, 1])

    @staticmethod
    def pickup_visible_indices(path: Sequence[GeoPoint], bounds: GeoBounds) -> list[int]:
        """Indices of the vertices kept by the clipping walk, ascending."""
        if not path:
            return []

        inside = ViewportClipper.inside_flags(path, bounds)
        drawn = inside.copy()
        added = np.zeros(len(path), dtype=bool)
        picked: list[int] = []

        if drawn[0]:
            picked.append(0)
            added[0] = True

        for j in range(1, len(path)):
            if not (drawn[j - 1] or drawn[j]):
                drawn[j] = bounds.intersects_segment(path[j - 1], path[j])
                if not drawn[j]:
                    continue
            if not added[j - 1]:
                picked.append(j - 1)
                added[j - 1] = True
            picked.append(j)
            added[j] = True

        return picked

    @staticmethod
    def pickup_visible_vertices(path: Sequence[GeoPoint], bounds: GeoBounds) -> list[GeoPoint]:
        """Vertices of path needed to render the part visible within bounds.

        Args:
            path: Vertices in path order
            bounds: Visible viewport

        Returns:
            Subsequence of path in original order; empty if nothing is visible.
        """
        indices = ViewportClipper.pickup_visible_indices(path, bounds)
        logger.debug(f"Clipped path from {len(path)} to {len(indices)} vertices")
        return [path[i] for i in indices]
