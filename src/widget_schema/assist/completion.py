"""Completion provider for data types and widget templates."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum

from widget_schema.catalog import DATA_TYPES, TEMPLATES, to_plain

TRIGGER_CHARACTERS: tuple[str, ...] = (":",)

_DATA_TYPE_OPENER = '"data_type":'
_TEMPLATE_TRIGGER = "widget"


class CompletionKind(str, Enum):
    ENUM_MEMBER = "enum_member"
    SNIPPET = "snippet"


@dataclass(frozen=True, slots=True)
class CompletionItem:
    label: str
    kind: CompletionKind
    detail: str
    documentation: str
    insert_text: str
    documentation_format: str = "markdown"

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "kind": self.kind.value,
            "detail": self.detail,
            "documentation": self.documentation,
            "documentation_format": self.documentation_format,
            "insert_text": self.insert_text,
        }


def data_type_completions() -> list[CompletionItem]:
    return [
        CompletionItem(
            label=descriptor.identifier,
            kind=CompletionKind.ENUM_MEMBER,
            detail=descriptor.detail,
            documentation=descriptor.description,
            insert_text=f'"{descriptor.identifier}"',
        )
        for descriptor in DATA_TYPES.values()
    ]


def template_completions() -> list[CompletionItem]:
    return [
        CompletionItem(
            label=template.name,
            kind=CompletionKind.SNIPPET,
            detail=template.detail,
            documentation=template.description,
            insert_text=json.dumps(to_plain(template.body), indent=4),
            documentation_format="plaintext",
        )
        for template in TEMPLATES.values()
    ]


def provide_completions(line_prefix: str) -> list[CompletionItem]:
    """Completions for the text between the line start and the cursor.

    Data types follow a ``"data_type":`` opener; templates are offered
    whenever the prefix mentions ``widget``.
    """
    if line_prefix.strip().endswith(_DATA_TYPE_OPENER):
        return data_type_completions()
    if _TEMPLATE_TRIGGER in line_prefix:
        return template_completions()
    return []
