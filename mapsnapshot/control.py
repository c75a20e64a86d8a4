"""SnapshotControl - stateful snapshot facade for a host map binding.

Holds the injected host and sensor values, the current options, and the last
generated URL. The host binding wires its snapshot button or popup to
get_image() / snapshot() and shows the URL (or the error) itself.

Failures do not raise: get_image() returns "" and logs the error, and the
error stays available in last_error.
"""

import logging
from typing import Any, Iterable, Optional, Union

from mapsnapshot.constants import StaticMapConfig
from mapsnapshot.generators.snapshot_url_builder import CenterOverride, SnapshotUrlBuilder
from mapsnapshot.model.build_error import BuildError
from mapsnapshot.model.options import SnapshotOptions
from mapsnapshot.model.overlay import Overlay
from mapsnapshot.model.viewport import ViewportState

logger = logging.getLogger(__name__)


class SnapshotControl:
    """Generates snapshot URLs for one interactive map.

    Example:
        control = SnapshotControl(host="maps.google.co.jp", options={"format": "jpg"})
        url = control.get_image(viewport, overlays)
        if not url:
            show_alert(control.last_error.message)
    """

    def __init__(
        self,
        host: str = StaticMapConfig.DEFAULT_HOST,
        sensor: Union[bool, str] = StaticMapConfig.DEFAULT_SENSOR,
        options: Union[SnapshotOptions, dict[str, Any], None] = None,
    ) -> None:
        self.builder = SnapshotUrlBuilder(host=host, sensor=sensor)
        self.options = SnapshotOptions()
        self.last_url = ""
        self.last_error: Optional[BuildError] = None
        self.set_options(options)

    def set_options(self, options: Union[SnapshotOptions, dict[str, Any], None]) -> None:
        """Replace the options; missing keys fall back to their defaults.

        Raises:
            ValueError: If a dictionary key does not name a known option.
        """
        if isinstance(options, SnapshotOptions):
            self.options = options
        else:
            self.options = SnapshotOptions.from_dict(options)

    def get_image(
        self,
        viewport: Optional[ViewportState],
        overlays: Iterable[Overlay] = (),
        center: CenterOverride = None,
    ) -> str:
        """Generate the snapshot URL.

        Args:
            viewport: Point-in-time capture of the map
            overlays: Overlays known to the host binding
            center: None for the map center, False to let the service place it, or a point

        Returns:
            The URL, or "" if the build failed.
        """
        result = self.builder.build(viewport=viewport, overlays=overlays, options=self.options, center=center)
        if result.ok:
            self.last_url = result.url
            self.last_error = None
        else:
            logger.error(f"Snapshot failed: {result.error.message}")
            self.last_url = ""
            self.last_error = result.error
        return self.last_url

    def snapshot(
        self,
        viewport: Optional[ViewportState],
        overlays: Iterable[Overlay] = (),
        options: Union[SnapshotOptions, dict[str, Any], None] = None,
    ) -> str:
        """Generate the URL for the host's snapshot popup.

        Applies options first when given. The center comes from the position
        option; without one, adjust_center leaves it to the service and
        otherwise the map center is used.
        """
        if options is not None:
            self.set_options(options)
        center: CenterOverride = None
        if self.options.position is not None:
            center = self.options.position
        elif self.options.adjust_center:
            center = False
        return self.get_image(viewport=viewport, overlays=overlays, center=center)
