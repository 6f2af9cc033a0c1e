"""Enums shared across the validator, the assist layer and the API surfaces."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Diagnostic severity, aligned with the LSP severity levels."""

    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"
    HINT = "hint"

    @property
    def lsp_code(self) -> int:
        # LSP: 1=Error, 2=Warning, 3=Information, 4=Hint
        return _LSP_CODES[self]


_LSP_CODES = {
    Severity.ERROR: 1,
    Severity.WARNING: 2,
    Severity.INFORMATION: 3,
    Severity.HINT: 4,
}


class PassType(str, Enum):
    """Canonical identifiers of the tree-validation passes."""

    KEY_CONSISTENCY = "key_consistency"
    REQUIRED_PROPERTIES = "required_properties"
    DATA_TYPE = "data_type"
    HTML_EDITOR = "html_editor"
