"""Side effects for a selected entry: clipboard copy and paste."""

from __future__ import annotations

import sys
from typing import Literal, Protocol, TextIO

from asciimoji.domain.models import Entry
from asciimoji.logging import logger

SelectionAction = Literal["paste", "copy"]


class Clipboard(Protocol):
    def copy_to_clipboard(self, text: str) -> None: ...


class SelectionService:
    """Hands the rendered text of a selected entry to its destination.

    ``copy`` goes through the clipboard collaborator. ``paste`` writes the
    text to ``sink`` (stdout by default), which for a terminal tool is the
    shell or pipe that launched it.
    """

    def __init__(self, clipboard: Clipboard | None = None, *, sink: TextIO | None = None) -> None:
        self._clipboard = clipboard
        self._sink = sink

    def copy(self, entry: Entry) -> str:
        if self._clipboard is None:
            raise RuntimeError("No clipboard available for copy")
        self._clipboard.copy_to_clipboard(entry.rendered_text)
        logger.info("entry_selected", action="copy", keyword=entry.keyword)
        return entry.rendered_text

    def paste(self, entry: Entry) -> str:
        sink = self._sink or sys.stdout
        sink.write(entry.rendered_text)
        if not entry.rendered_text.endswith("\n"):
            sink.write("\n")
        sink.flush()
        logger.info("entry_selected", action="paste", keyword=entry.keyword)
        return entry.rendered_text

    def apply(self, action: SelectionAction, entry: Entry) -> str:
        if action == "copy":
            return self.copy(entry)
        return self.paste(entry)


__all__ = ["Clipboard", "SelectionAction", "SelectionService"]
