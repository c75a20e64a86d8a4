"""Style serializer - flattens a StyleSheet into `style` query fragments.

Each rule becomes one fragment:
    &style=feature:<featureType>|element:<elementType>|<op>:<value>|...

Rules and operations keep their declared order; the remote renderer applies
them in sequence. Operations whose name starts with "_" belong to the host map
and are skipped. Hue values are written as 0xRRGGBB.
"""

from typing import Any

from mapsnapshot.constants import StyleConfig
from mapsnapshot.model.style_rule import StyleOperation, StyleRule, StyleSheet


def format_style_value(value: Any) -> str:
    """Render an operation value the way the styling JSON stringifies it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class StyleSerializer:
    """Static methods for style sheet serialization."""

    @staticmethod
    def serialize_operation(operation: StyleOperation) -> str:
        value = format_style_value(operation.value)
        if operation.name == StyleConfig.HUE_OPERATION:
            value = value.replace("#", "0x", 1)
        return f"{operation.name}:{value}"

    @staticmethod
    def serialize_rule(rule: StyleRule) -> str:
        parts = [f"feature:{rule.feature_type}", f"element:{rule.element_type}"]
        parts.extend(
            StyleSerializer.serialize_operation(operation)
            for operation in rule.operations
            if not operation.name.startswith(StyleConfig.INTERNAL_PREFIX)
        )
        return "&style=" + "|".join(parts)

    @staticmethod
    def serialize(sheet: StyleSheet) -> str:
        """Serialize every rule of the sheet, in order.

        Returns:
            Concatenated query fragments ("" for an empty sheet).
        """
        return "".join(StyleSerializer.serialize_rule(rule) for rule in sheet.rules)
