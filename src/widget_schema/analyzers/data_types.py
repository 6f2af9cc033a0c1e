"""Data-type pass — ``data_type`` must name one of the catalog types.

Rules
-----
WS_DATA_TYPE_001
    ``data_type`` present with a value outside the catalog.
"""

from __future__ import annotations

from widget_schema.catalog import data_type_ids, is_data_type
from widget_schema.core.position import resolve_property_position
from widget_schema.model import PassType
from widget_schema.model.diagnostic import Diagnostic
from widget_schema.model.node import ContainerNode, walk_fields
from widget_schema.rules import WS_DATA_TYPE_001


class DataTypePass:
    """Finds field nodes whose ``data_type`` is not a catalog identifier."""

    id: str = PassType.DATA_TYPE.value
    version: str = "1.0.0"

    def run(self, root: ContainerNode, text: str, diagnostics: list[Diagnostic]) -> None:
        message = f"Invalid data_type. Expected one of: {', '.join(data_type_ids())}"
        for _, field in walk_fields(root):
            if not field.has_data_type or is_data_type(field.data_type):
                continue
            diagnostics.append(
                Diagnostic(
                    range=resolve_property_position(text, "data_type", field.data_type),
                    message=message,
                    rule_id=WS_DATA_TYPE_001,
                )
            )


def validate_data_types(root: ContainerNode, text: str, diagnostics: list[Diagnostic]) -> None:
    DataTypePass().run(root, text, diagnostics)
