"""
This module defines the protocol between the navigator and the editor that
hosts it.

The navigator never touches editor state directly: it asks the host for the
active document and its workspace folder, asks it to open and focus files, to
move the cursor, and to show the one message that ends each command.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from rails_navigator.core.constants import MessageLevel
from rails_navigator.data_models.models import EditorState


@runtime_checkable
class EditorHostProtocol(Protocol):
    """
    A protocol for editors that can drive controller/view navigation.
    """

    def active_editor(self) -> EditorState | None:
        """
        Returns the focused document with its text and cursor, or None when no
        document is focused.
        """
        ...

    def workspace_root_for(self, path: str) -> Path | None:
        """
        Returns the workspace folder containing `path`.

        Args:
            path (str): An absolute document path.

        Returns:
            Path | None: The containing workspace folder, or None if the document
                belongs to no workspace.
        """
        ...

    async def open_document(self, path: Path) -> EditorState:
        """
        Opens `path`, gives it focus and returns its state with the cursor at
        the start of the document.

        Args:
            path (Path): The file to open.
        """
        ...

    def reveal(self, path: str, offset: int) -> None:
        """
        Moves the cursor of the open document `path` to `offset` and scrolls it
        into view.
        """
        ...

    def show_message(self, level: MessageLevel, message: str) -> None:
        """
        Shows `message` to the user as information or as an error.
        """
        ...
