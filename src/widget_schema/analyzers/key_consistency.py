"""Key-consistency pass — a field's ``key`` must equal the name it is stored under.

Rules
-----
WS_KEY_MISMATCH_001
    ``key`` present and different from the parent entry name.
"""

from __future__ import annotations

from widget_schema.core.position import resolve_key_value_position
from widget_schema.model import PassType
from widget_schema.model.diagnostic import Diagnostic
from widget_schema.model.node import ContainerNode, walk_fields
from widget_schema.rules import WS_KEY_MISMATCH_001


class KeyConsistencyPass:
    """Finds field nodes whose ``key`` disagrees with their entry name."""

    id: str = PassType.KEY_CONSISTENCY.value
    version: str = "1.0.0"

    def run(self, root: ContainerNode, text: str, diagnostics: list[Diagnostic]) -> None:
        for parent_key, field in walk_fields(root):
            if not field.has_key or field.key == parent_key:
                continue
            diagnostics.append(
                Diagnostic(
                    range=resolve_key_value_position(text, field.key),
                    message=(
                        "Keys should equal object names! "
                        f'Expected: "{parent_key}", Found: "{field.key}"'
                    ),
                    rule_id=WS_KEY_MISMATCH_001,
                )
            )


def validate_keys(root: ContainerNode, text: str, diagnostics: list[Diagnostic]) -> None:
    KeyConsistencyPass().run(root, text, diagnostics)
