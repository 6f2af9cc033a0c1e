"""Insertion generator — typed field fragments shaped for the cursor line.

The inserted text completes a ``"data_type": `` entry: the quoted type
identifier, then the catalog example for that type with its outer braces
dropped, re-indented to the cursor line. A trailing comma is added when
more properties follow before the enclosing object closes.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from enum import Enum

from widget_schema.catalog import get_data_type, to_plain

_INDENT_RE = re.compile(r"^[ \t]*")
_CLOSING_RE = re.compile(r"\},?")
_QUOTED_RE = re.compile(r'"[^"]*"')

# Indent used when rendering catalog examples before re-indentation.
_FRAGMENT_INDENT = 4


class InsertionError(ValueError):
    """Raised when insertion text cannot be shaped for the given context."""


class InsertionKind(str, Enum):
    DROPDOWN = "dropdown"
    HTML_EDITOR = "html-editor"

    @property
    def data_type(self) -> str:
        return "area" if self is InsertionKind.HTML_EDITOR else self.value


@dataclass(frozen=True, slots=True)
class Insertion:
    """Literal text to insert at ``(line, character)``."""

    text: str
    line: int
    character: int

    def to_dict(self) -> dict:
        return {"text": self.text, "line": self.line, "character": self.character}


def leading_indentation(line: str) -> str:
    return _INDENT_RE.match(line).group(0)


def scan_has_more_properties(lines: list[str], cursor_line: int) -> bool:
    """Return True when a quoted token follows before the closing brace line.

    Scanning starts on the line after *cursor_line* and stops at the first
    line holding only ``}`` or ``},``.
    """
    for line in lines[cursor_line + 1:]:
        if _CLOSING_RE.fullmatch(line.strip()):
            return False
        if _QUOTED_RE.search(line):
            return True
    return False


def render_fragment(kind: InsertionKind, indentation: str) -> list[str]:
    """Render the catalog example for *kind* without its outer braces."""
    descriptor = get_data_type(kind.data_type)
    if descriptor.example is None:
        raise InsertionError(f"data type {descriptor.identifier!r} has no example fragment")

    rendered = json.dumps(to_plain(descriptor.example), indent=_FRAGMENT_INDENT).split("\n")
    if len(rendered) < 3:
        raise InsertionError(f"example for {descriptor.identifier!r} is empty")
    return [indentation + line[_FRAGMENT_INDENT:] for line in rendered[1:-1]]


def build_insertion(kind: InsertionKind, indentation: str, has_more: bool) -> str:
    """Assemble the literal insertion text; byte-identical for identical inputs."""
    body = "\n".join(render_fragment(kind, indentation))
    suffix = "," if has_more else ""
    return f'"{kind.data_type}",\n{body}{suffix}'


def plan_insertion(
    text: str,
    line: int,
    character: int,
    kind: InsertionKind | str,
) -> Insertion:
    """Compute the insertion for a cursor at ``(line, character)`` in *text*."""
    try:
        kind = InsertionKind(kind)
    except ValueError as exc:
        raise InsertionError(f"unknown insertion kind: {kind!r}") from exc

    lines = text.split("\n")
    if not 0 <= line < len(lines):
        raise InsertionError(f"cursor line {line} is outside the document ({len(lines)} lines)")
    current = lines[line]
    if not 0 <= character <= len(current):
        raise InsertionError(f"cursor column {character} is outside line {line}")

    indentation = leading_indentation(current)
    has_more = scan_has_more_properties(lines, line)
    return Insertion(
        text=build_insertion(kind, indentation, has_more),
        line=line,
        character=character,
    )


def insert_dropdown_choices(text: str, line: int, character: int) -> Insertion:
    return plan_insertion(text, line, character, InsertionKind.DROPDOWN)


def insert_html_editor_marker(text: str, line: int, character: int) -> Insertion:
    return plan_insertion(text, line, character, InsertionKind.HTML_EDITOR)
