"""Diagnostic — a located validation finding for one schema document."""

from __future__ import annotations

from dataclasses import dataclass

from . import Severity

DIAGNOSTIC_SOURCE = "widget-schema"


@dataclass(frozen=True, slots=True)
class Position:
    """Zero-based line / character position inside a document."""

    line: int
    character: int

    def to_dict(self) -> dict:
        return {"line": self.line, "character": self.character}


@dataclass(frozen=True, slots=True)
class Range:
    """Half-open ``[start, end)`` span between two positions."""

    start: Position
    end: Position

    @classmethod
    def from_coords(
        cls, start_line: int, start_char: int, end_line: int, end_char: int
    ) -> Range:
        return cls(Position(start_line, start_char), Position(end_line, end_char))

    @classmethod
    def zero(cls) -> Range:
        """Return the caret range at the document start."""
        return cls.from_coords(0, 0, 0, 0)

    @property
    def is_degenerate(self) -> bool:
        return self.start == self.end

    def to_tuple(self) -> tuple[int, int, int, int]:
        return (
            self.start.line,
            self.start.character,
            self.end.line,
            self.end.character,
        )

    def to_dict(self) -> dict:
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Immutable validation finding.

    Corresponds to ``documents[].diagnostics[]`` in
    ``diagnostics.schema.json``.
    """

    range: Range
    message: str
    rule_id: str
    severity: Severity = Severity.ERROR
    source: str = DIAGNOSTIC_SOURCE

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "range": self.range.to_dict(),
            "message": self.message,
            "severity": self.severity.value,
            "rule_id": self.rule_id,
            "source": self.source,
        }
