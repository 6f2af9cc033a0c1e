"""Tree-validation passes over a parsed schema document.

Two calling conventions:

1. **Class-based** (``ValidationPass`` protocol) — used by
   ``core.orchestrator.ValidationOrchestrator``. Each pass exposes ``id``,
   ``version`` and ``run(root, text, diagnostics) -> None``.

2. **Functional** — ``validate_*(root, text, diagnostics)`` wrappers with
   the same signature, for callers that want a single rule family.

Every pass walks all fields reachable through ``schema`` regardless of
earlier failures, appends to *diagnostics* in pre-order and never
mutates the tree.
"""

from __future__ import annotations

from typing import Protocol

from widget_schema.model.diagnostic import Diagnostic
from widget_schema.model.node import ContainerNode


class ValidationPass(Protocol):
    """Every pass must expose ``id``, ``version``, and ``run()``."""

    id: str
    version: str

    def run(self, root: ContainerNode, text: str, diagnostics: list[Diagnostic]) -> None:
        """Validate *root* and append findings to *diagnostics*."""
        ...


def default_passes() -> list[ValidationPass]:
    """Fresh instances of the four passes, in reporting order."""
    from .data_types import DataTypePass
    from .html_editor import HtmlEditorPass
    from .key_consistency import KeyConsistencyPass
    from .required_properties import RequiredPropertiesPass

    return [
        KeyConsistencyPass(),
        RequiredPropertiesPass(),
        DataTypePass(),
        HtmlEditorPass(),
    ]
