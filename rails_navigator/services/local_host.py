"""
This module defines `LocalEditorHost`, a filesystem-backed implementation of the
editor host protocol.

It stands in for an editor on the command line and in tests: it knows the
workspace folders, holds one focused document with its cursor, reads files when
asked to open them (which moves focus to them, as an editor would), and prints
messages to a Rich console.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from loguru import logger
from rich.console import Console
from rich.markup import escape

from ..core import constants as cs
from ..core import logs as ls
from ..core.constants import Color, MessageLevel, StyleModifier
from ..data_models.models import EditorState
from ..utils.path_utils import deepest_containing_root, normalize_path
from ..utils.text_utils import clamp_offset


def style(
    text: str, color: Color, modifier: StyleModifier = StyleModifier.BOLD
) -> str:
    """Applies Rich styling to a text string.

    Args:
        text (str): The text to style.
        color (Color): The color to apply.
        modifier (StyleModifier): The style modifier (e.g., 'bold', 'dim').

    Returns:
        str: The Rich-formatted string.
    """
    text = escape(text)
    if modifier == StyleModifier.NONE:
        return f"[{color}]{text}[/{color}]"
    return f"[{modifier} {color}]{text}[/{modifier} {color}]"


def read_document(path: Path | str) -> str:
    return Path(path).read_text(encoding=cs.ENCODING_UTF8)


class LocalEditorHost:
    """
    An editor host backed by the local filesystem.

    Args:
        workspace_folders (list[Path | str]): The workspace roots; a document
            belongs to the deepest folder containing it.
        console (Console | None): Where messages are printed; None keeps them
            only in `messages`.
    """

    def __init__(
        self,
        workspace_folders: list[Path | str],
        console: Console | None = None,
    ):
        self.workspace_folders = [normalize_path(Path(folder).resolve()) for folder in workspace_folders]
        self.console = console
        self.active: EditorState | None = None
        self.messages: list[tuple[MessageLevel, str]] = []
        logger.debug(ls.HOST_INIT.format(folders=self.workspace_folders))

    def focus(self, path: Path | str, cursor_offset: int = 0, text: str | None = None) -> EditorState:
        """
        Makes `path` the focused document, reading it unless `text` is given.

        Args:
            path (Path | str): The document to focus.
            cursor_offset (int): The initial cursor offset; clamped into the text.
            text (str | None): The document text, when already known.

        Returns:
            EditorState: The focused document.
        """
        if text is None:
            text = read_document(path)
        self.active = EditorState(
            path=normalize_path(Path(path).resolve()),
            text=text,
            cursor_offset=clamp_offset(text, cursor_offset),
        )
        return self.active

    def active_editor(self) -> EditorState | None:
        return self.active

    def workspace_root_for(self, path: str) -> Path | None:
        root = deepest_containing_root(path, self.workspace_folders)
        return Path(root) if root is not None else None

    async def open_document(self, path: Path) -> EditorState:
        logger.info(ls.HOST_OPEN.format(path=path))
        try:
            text = await asyncio.to_thread(read_document, path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(ls.HOST_OPEN_FAILED.format(path=path, error=e))
            raise
        return self.focus(path, 0, text)

    def reveal(self, path: str, offset: int) -> None:
        if self.active is None or self.active.path != normalize_path(path):
            return
        self.active.cursor_offset = clamp_offset(self.active.text, offset)
        logger.debug(ls.HOST_REVEAL.format(offset=self.active.cursor_offset, path=path))

    def show_message(self, level: MessageLevel, message: str) -> None:
        self.messages.append((level, message))
        if self.console is None:
            return
        color = Color.RED if level == MessageLevel.ERROR else Color.GREEN
        self.console.print(style(message, color), soft_wrap=True)
