"""Validation configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationConfig:
    """Immutable configuration deciding which documents are schema documents."""

    language_ids: tuple[str, ...] = ("json",)
    file_suffixes: tuple[str, ...] = (".json",)
    max_document_bytes: int = 2_000_000  # 2 MB safety limit

    def matches_suffix(self, name: str) -> bool:
        lowered = name.lower()
        return any(lowered.endswith(suffix) for suffix in self.file_suffixes)
