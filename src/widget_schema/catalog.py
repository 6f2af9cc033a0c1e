"""Schema catalog — the five widget data types and the insertion templates.

Static data, loaded once at import and never mutated. Declaration order
is significant: it drives the ``Invalid data_type`` message and the order
of data-type completions.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

HTML_EDITOR_MARKER = "html-editor"
REQUIRED_PROPERTIES: tuple[str, ...] = ("data_type", "key", "label")


@dataclass(frozen=True, slots=True)
class DataTypeDescriptor:
    """One catalog entry describing a field's rendering kind."""

    identifier: str
    detail: str
    description: str
    example: Mapping[str, Any] | None = None


_DATA_TYPES: tuple[DataTypeDescriptor, ...] = (
    DataTypeDescriptor(
        identifier="text",
        detail="Text Component",
        description="Creates standard text component",
    ),
    DataTypeDescriptor(
        identifier="image",
        detail="Image Upload Component",
        description="Creates image upload component",
    ),
    DataTypeDescriptor(
        identifier="dropdown",
        detail="Dropdown Component",
        description="Creates dropdown selection box. It should be used with a choices dict.",
        example=MappingProxyType({
            "choices": MappingProxyType({
                "option1": "Option 1",
                "option2": "Option 2",
            }),
        }),
    ),
    DataTypeDescriptor(
        identifier="area",
        detail="HTML Editor Component",
        description=(
            "Provides custom field view and is used to create HTML editor. "
            "It is mandatory to have a display field with it."
        ),
        example=MappingProxyType({"display": HTML_EDITOR_MARKER}),
    ),
    DataTypeDescriptor(
        identifier="nested",
        detail="Nested Structure Component",
        description=(
            "It is mandatory to use in nested structures and data_type value "
            "of the outermost (root) object must be nested."
        ),
    ),
)

DATA_TYPES: Mapping[str, DataTypeDescriptor] = MappingProxyType(
    {d.identifier: d for d in _DATA_TYPES}
)


def data_type_ids() -> tuple[str, ...]:
    """Return catalog identifiers in declaration order."""
    return tuple(DATA_TYPES)


def get_data_type(identifier: str) -> DataTypeDescriptor:
    """Look up a descriptor; raises ``KeyError`` for unknown identifiers."""
    return DATA_TYPES[identifier]


def is_data_type(value: Any) -> bool:
    return isinstance(value, str) and value in DATA_TYPES


# ── templates ───────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class TemplateFragment:
    """A named literal JSON fragment offered by template completion."""

    name: str
    detail: str
    description: str
    body: Mapping[str, Any]


def _field(key: str, label: str, data_type: str, **extra: Any) -> dict[str, Any]:
    field = {"data_type": data_type, "key": key, "label": label}
    field.update(extra)
    return field


_TEMPLATES: tuple[TemplateFragment, ...] = (
    TemplateFragment(
        name="widget-template",
        detail="Widget template",
        description="Adds standard widget template",
        body={
            "sliders": {
                "multi": True,
                "schema": {
                    "name": _field("name", "Name", "text"),
                    "slug": _field("slug", "Slug", "text"),
                },
                "data_type": "nested",
                "key": "sliders",
                "label": "Sliders",
            }
        },
    ),
    TemplateFragment(
        name="widget-text-field",
        detail="Text field",
        description="Adds a single text field",
        body={"title": _field("title", "Title", "text")},
    ),
    TemplateFragment(
        name="widget-image-field",
        detail="Image field",
        description="Adds a single image upload field",
        body={"image": _field("image", "Image", "image")},
    ),
    TemplateFragment(
        name="widget-dropdown-field",
        detail="Dropdown field",
        description="Adds a dropdown field with a choices dict",
        body={
            "choice": _field(
                "choice",
                "Choice",
                "dropdown",
                choices={"option1": "Option 1", "option2": "Option 2"},
            )
        },
    ),
    TemplateFragment(
        name="widget-html-editor-field",
        detail="HTML editor field",
        description="Adds an area field rendered with the HTML editor",
        body={
            "content": _field("content", "Content", "area", display=HTML_EDITOR_MARKER)
        },
    ),
)

TEMPLATES: Mapping[str, TemplateFragment] = MappingProxyType(
    {t.name: t for t in _TEMPLATES}
)


def to_plain(value: Any) -> Any:
    """Convert read-only catalog mappings into plain JSON-serialisable data."""
    if isinstance(value, Mapping):
        return {k: to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    return value
