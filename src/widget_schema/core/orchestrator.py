"""Orchestrator — parse a document, run every pass, publish the diagnostics.

This is the **only** place that wires parser → passes → collection.
Each run is a full re-scan: the diagnostics for a document are always
recomputed and replaced as a whole, never merged.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from typing import Any, Iterable

from widget_schema.analyzers import ValidationPass, default_passes
from widget_schema.core.config import ValidationConfig
from widget_schema.model.diagnostic import Diagnostic, Range
from widget_schema.model.node import ContainerNode
from widget_schema.rules import WS_INVALID_JSON_001, WS_ROOT_OBJECT_001

_logger = logging.getLogger(__name__)

# Range used for document-level diagnostics: line 0, columns [0, 1).
_DOCUMENT_START = Range.from_coords(0, 0, 0, 1)


class ReentrantValidationError(RuntimeError):
    """Raised when ``validate`` is entered while a run is in progress."""


class OrchestratorState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"


@dataclass(frozen=True, slots=True)
class DocumentSnapshot:
    """Read-only view of a host document at one point in time."""

    uri: str
    text: str
    language_id: str = "json"
    version: int = 0


class DiagnosticCollection:
    """Per-document diagnostic sets, keyed by document URI.

    ``set`` replaces the whole list for a document (last write wins).
    """

    def __init__(self, name: str = "widget-schema") -> None:
        self.name = name
        self._entries: dict[str, tuple[Diagnostic, ...]] = {}

    def set(self, uri: str, diagnostics: Iterable[Diagnostic]) -> None:
        self._entries[uri] = tuple(diagnostics)

    def get(self, uri: str) -> tuple[Diagnostic, ...]:
        return self._entries.get(uri, ())

    def delete(self, uri: str) -> None:
        self._entries.pop(uri, None)

    def clear(self) -> None:
        self._entries.clear()

    def uris(self) -> list[str]:
        return sorted(self._entries)

    def __contains__(self, uri: object) -> bool:
        return uri in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def _reject_constant(name: str) -> Any:
    # JSON proper has no NaN / Infinity literals.
    raise ValueError(f"Unexpected token {name}")


def parse_document(text: str) -> Any:
    """Parse *text* as strict JSON; raises ``ValueError`` when malformed."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except RecursionError as exc:
        raise ValueError("maximum nesting depth exceeded") from exc


class ValidationOrchestrator:
    """Validates schema documents and owns their published diagnostics."""

    def __init__(
        self,
        config: ValidationConfig | None = None,
        collection: DiagnosticCollection | None = None,
        passes: list[ValidationPass] | None = None,
    ) -> None:
        self.config = config or ValidationConfig()
        self.collection = collection if collection is not None else DiagnosticCollection()
        self.passes = passes if passes is not None else default_passes()
        self.state = OrchestratorState.IDLE

    # ── validation ──────────────────────────────────────────────────

    def validate(self, snapshot: DocumentSnapshot) -> list[Diagnostic]:
        """Run a full validation of *snapshot* and return its diagnostics.

        Malformed JSON yields exactly one diagnostic and skips the passes.
        """
        if self.state is OrchestratorState.VALIDATING:
            raise ReentrantValidationError(
                f"validation already in progress (while validating {snapshot.uri})"
            )
        self.state = OrchestratorState.VALIDATING
        try:
            return self._validate_text(snapshot.text)
        finally:
            self.state = OrchestratorState.IDLE

    def _validate_text(self, text: str) -> list[Diagnostic]:
        try:
            parsed = parse_document(text)
        except ValueError as exc:
            return [
                Diagnostic(
                    range=_DOCUMENT_START,
                    message=f"Invalid JSON format: {exc}",
                    rule_id=WS_INVALID_JSON_001,
                )
            ]

        if not isinstance(parsed, dict):
            return [
                Diagnostic(
                    range=_DOCUMENT_START,
                    message=(
                        "Invalid schema format: top-level value must be an object, "
                        f"found {type(parsed).__name__}"
                    ),
                    rule_id=WS_ROOT_OBJECT_001,
                )
            ]

        root = ContainerNode(parsed)
        diagnostics: list[Diagnostic] = []
        for validation_pass in self.passes:
            pass_id = getattr(validation_pass, "id", type(validation_pass).__name__)
            produced: list[Diagnostic] = []
            try:
                validation_pass.run(root, text, produced)
            except Exception:
                _logger.exception("Validation pass '%s' raised an exception; skipped", pass_id)
                continue
            diagnostics.extend(produced)
        return diagnostics

    # ── publishing ──────────────────────────────────────────────────

    def publish(self, snapshot: DocumentSnapshot) -> list[Diagnostic]:
        """Validate *snapshot* and replace its entry in the collection."""
        diagnostics = self.validate(snapshot)
        self.collection.set(snapshot.uri, diagnostics)
        _logger.debug(
            "Published %d diagnostic(s) for %s (version %d)",
            len(diagnostics),
            snapshot.uri,
            snapshot.version,
        )
        return diagnostics

    def is_schema_document(self, snapshot: DocumentSnapshot) -> bool:
        if snapshot.language_id in self.config.language_ids:
            return True
        return self.config.matches_suffix(PurePosixPath(snapshot.uri).name)

    # ── host event handlers ─────────────────────────────────────────

    def on_document_changed(self, snapshot: DocumentSnapshot) -> list[Diagnostic] | None:
        if not self.is_schema_document(snapshot):
            return None
        return self.publish(snapshot)

    def on_document_activated(
        self, snapshot: DocumentSnapshot | None
    ) -> list[Diagnostic] | None:
        if snapshot is None or not self.is_schema_document(snapshot):
            return None
        return self.publish(snapshot)

    def on_document_closed(self, snapshot: DocumentSnapshot) -> None:
        self.collection.delete(snapshot.uri)

    def dispose(self) -> None:
        self.collection.clear()
