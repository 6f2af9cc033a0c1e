"""Required-properties pass — every field node carries ``data_type``, ``key`` and ``label``.

Rules
-----
WS_MISSING_PROPS_001
    One or more required properties absent. Anchored on the token of the
    entry name in the parent container, not inside the node itself.
"""

from __future__ import annotations

from widget_schema.core.position import resolve_property_position
from widget_schema.model import PassType
from widget_schema.model.diagnostic import Diagnostic
from widget_schema.model.node import ContainerNode, walk_fields
from widget_schema.rules import WS_MISSING_PROPS_001


class RequiredPropertiesPass:
    """Finds field nodes missing one of the required properties."""

    id: str = PassType.REQUIRED_PROPERTIES.value
    version: str = "1.0.0"

    def run(self, root: ContainerNode, text: str, diagnostics: list[Diagnostic]) -> None:
        for parent_key, field in walk_fields(root):
            missing = field.missing_required()
            if not missing:
                continue
            diagnostics.append(
                Diagnostic(
                    range=resolve_property_position(text, parent_key),
                    message=f"Missing required properties: {', '.join(missing)}",
                    rule_id=WS_MISSING_PROPS_001,
                )
            )


def validate_required_properties(
    root: ContainerNode, text: str, diagnostics: list[Diagnostic]
) -> None:
    RequiredPropertiesPass().run(root, text, diagnostics)
