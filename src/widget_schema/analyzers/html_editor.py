"""HTML-editor pass — ``display: html-editor`` requires ``data_type: area``."""

from __future__ import annotations

from widget_schema.catalog import HTML_EDITOR_MARKER
from widget_schema.core.position import resolve_property_position
from widget_schema.model import PassType
from widget_schema.model.diagnostic import Diagnostic
from widget_schema.model.node import ContainerNode, walk_fields
from widget_schema.rules import WS_HTML_EDITOR_001

_AREA = "area"


class HtmlEditorPass:
    """Finds HTML-editor fields declared with a data type other than ``area``."""

    id: str = PassType.HTML_EDITOR.value
    version: str = "1.0.0"

    def run(self, root: ContainerNode, text: str, diagnostics: list[Diagnostic]) -> None:
        for _, field in walk_fields(root):
            if field.display != HTML_EDITOR_MARKER or field.data_type == _AREA:
                continue
            diagnostics.append(
                Diagnostic(
                    range=resolve_property_position(text, "display", HTML_EDITOR_MARKER),
                    message="data_type area is required for display html editor!",
                    rule_id=WS_HTML_EDITOR_001,
                )
            )


def validate_html_editor(root: ContainerNode, text: str, diagnostics: list[Diagnostic]) -> None:
    HtmlEditorPass().run(root, text, diagnostics)
