"""StyleRule and StyleSheet - custom map styling.

A StyleSheet is an ordered list of rules, each targeting a feature type and
an element type with an ordered list of styling operations. Order matters:
later rules override earlier ones on the remote renderer.

StyleSheet.from_dicts() accepts the map-styling JSON form:
    [{"featureType": "water", "elementType": "geometry",
      "stylers": [{"hue": "#0000ff"}, {"saturation": -50}]}]
"""

from dataclasses import dataclass
from typing import Any, Iterable

from mapsnapshot.constants import StyleConfig


@dataclass(frozen=True)
class StyleOperation:
    """A single styling operation, e.g. ("saturation", -50)."""

    name: str
    value: Any


@dataclass(frozen=True)
class StyleRule:
    """Styling operations applied to one feature/element combination.

    Attributes:
        feature_type: Map feature selector (e.g. "road.highway", "water")
        element_type: Element selector (e.g. "geometry", "labels")
        operations: Operations in declared order
    """

    feature_type: str = StyleConfig.DEFAULT_FEATURE
    element_type: str = StyleConfig.DEFAULT_ELEMENT
    operations: tuple[StyleOperation, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "operations", tuple(self.operations))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StyleRule":
        """Create StyleRule from a styling JSON object.

        Each entry of "stylers" may hold several operations; their key order is kept.
        """
        operations = [
            StyleOperation(name=name, value=value) for styler in data.get("stylers", []) for name, value in styler.items()
        ]
        return cls(
            feature_type=data.get("featureType", StyleConfig.DEFAULT_FEATURE),
            element_type=data.get("elementType", StyleConfig.DEFAULT_ELEMENT),
            operations=tuple(operations),
        )


@dataclass(frozen=True)
class StyleSheet:
    """Ordered collection of StyleRules attached to a styled map type."""

    rules: tuple[StyleRule, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", tuple(self.rules))

    def __iter__(self):
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    @classmethod
    def from_dicts(cls, data: Iterable[dict[str, Any]]) -> "StyleSheet":
        """Create StyleSheet from a list of styling JSON objects."""
        return cls(rules=tuple(StyleRule.from_dict(rule) for rule in data))
