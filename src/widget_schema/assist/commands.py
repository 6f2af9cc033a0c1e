"""Editor commands — insert typed field fragments at the active cursor.

The host editor is reached only through :class:`EditorContext`. A command
either applies one complete edit or none: shaping failures and rejected
edits are reported through ``show_error`` and leave the document as is.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Protocol

from widget_schema.assist.insertion import InsertionKind, plan_insertion

_logger = logging.getLogger(__name__)


class EditorContext(Protocol):
    """The slice of the host editor a command needs."""

    def document_text(self) -> str:
        ...

    def cursor(self) -> tuple[int, int]:
        """Return the cursor as zero-based ``(line, character)``."""
        ...

    async def apply_edit(self, line: int, character: int, text: str) -> bool:
        """Insert *text* at the position; all-or-nothing."""
        ...

    def show_error(self, message: str) -> None:
        ...


@dataclass(frozen=True, slots=True)
class InsertionCommand:
    command_id: str
    title: str
    kind: InsertionKind

    async def execute(self, editor: EditorContext | None) -> bool:
        """Insert the fragment for ``self.kind``; returns True when applied."""
        if editor is None:
            _logger.debug("%s: no active editor", self.command_id)
            return False

        try:
            line, character = editor.cursor()
            insertion = plan_insertion(editor.document_text(), line, character, self.kind)
        except Exception as exc:
            _logger.warning("%s: could not shape insertion: %s", self.command_id, exc)
            editor.show_error(f"Error inserting {self.title}: {exc}")
            return False

        try:
            applied = await editor.apply_edit(insertion.line, insertion.character, insertion.text)
        except Exception as exc:
            _logger.exception("%s: edit failed", self.command_id)
            editor.show_error(f"Error inserting {self.title}: {exc}")
            return False

        if not applied:
            editor.show_error(f"Error inserting {self.title}: edit was rejected")
            return False
        return True


INSERT_DROPDOWN_CHOICES = InsertionCommand(
    command_id="widget-schema.insertDropdownChoices",
    title="dropdown choices",
    kind=InsertionKind.DROPDOWN,
)
INSERT_HTML_EDITOR_MARKER = InsertionCommand(
    command_id="widget-schema.insertHtmlEditorMarker",
    title="HTML editor marker",
    kind=InsertionKind.HTML_EDITOR,
)

COMMANDS: Mapping[str, InsertionCommand] = {
    cmd.command_id: cmd for cmd in (INSERT_DROPDOWN_CHOICES, INSERT_HTML_EDITOR_MARKER)
}


async def run_command(command_id: str, editor: EditorContext | None) -> bool:
    """Dispatch *command_id*; raises ``KeyError`` for unknown commands."""
    return await COMMANDS[command_id].execute(editor)
