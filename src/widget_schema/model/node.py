"""Tree model — field and container views over a parsed schema document.

A parsed document is a plain ``dict``. Rather than sniffing shapes in
every pass, the passes see it through two thin wrappers:

* :class:`ContainerNode` — the document root or the value under a field's
  ``schema`` key; its entries map names to field nodes.
* :class:`FieldNode` — a mapping stored under a name inside a container.

Wrapping is lazy, so arbitrarily deep documents never recurse in Python.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Mapping

from widget_schema.catalog import REQUIRED_PROPERTIES


@dataclass(frozen=True, slots=True)
class FieldNode:
    """A mapping stored under *name* in its parent container."""

    name: str
    props: Mapping[str, Any]

    @property
    def has_data_type(self) -> bool:
        return "data_type" in self.props

    @property
    def has_key(self) -> bool:
        return "key" in self.props

    @property
    def has_label(self) -> bool:
        return "label" in self.props

    @property
    def has_display(self) -> bool:
        return "display" in self.props

    @property
    def has_schema(self) -> bool:
        return "schema" in self.props

    @property
    def data_type(self) -> Any:
        return self.props.get("data_type")

    @property
    def key(self) -> Any:
        return self.props.get("key")

    @property
    def label(self) -> Any:
        return self.props.get("label")

    @property
    def display(self) -> Any:
        return self.props.get("display")

    @property
    def schema(self) -> ContainerNode | None:
        """Nested container, or ``None`` when absent or not a mapping."""
        value = self.props.get("schema")
        if isinstance(value, Mapping):
            return ContainerNode(value)
        return None

    def missing_required(self) -> list[str]:
        """Required properties absent from this node, in canonical order."""
        return [prop for prop in REQUIRED_PROPERTIES if prop not in self.props]


@dataclass(frozen=True, slots=True)
class ContainerNode:
    """A mapping whose entries are (potential) field nodes."""

    entries: Mapping[str, Any]

    def fields(self) -> Iterator[FieldNode]:
        """Yield the mapping-valued entries; scalars and lists are skipped."""
        for name, value in self.entries.items():
            if isinstance(value, Mapping):
                yield FieldNode(name, value)


def walk_fields(root: ContainerNode) -> Iterator[tuple[str, FieldNode]]:
    """Yield ``(parent_key, field)`` pairs in pre-order.

    A field is yielded before the fields under its ``schema``, and those
    before the field's next sibling. Uses an explicit stack of iterators.
    """
    stack: list[Iterator[FieldNode]] = [root.fields()]
    while stack:
        field = next(stack[-1], None)
        if field is None:
            stack.pop()
            continue
        yield field.name, field
        nested = field.schema
        if nested is not None:
            stack.append(nested.fields())
