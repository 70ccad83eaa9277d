"""
This module defines the core data models used by the navigator.

The models include:
-   `NavigationConventions`: The naming conventions of a Rails layout, injected
    into the resolver and dispatcher instead of being read from module constants.
-   `ProbeResult`: The tri-state outcome of one filesystem existence probe.
-   `EditorState`: A snapshot of a document as seen by the editor host.
-   `AppContext`: Application-wide context for the command line.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from rails_navigator.core import constants as cs
from rails_navigator.core.constants import ProbeStatus


@dataclass(frozen=True)
class NavigationConventions:
    """
    Naming conventions used to build and parse controller and view paths.

    Attributes:
        view_extensions (tuple[str, ...]): Template extensions in tie-break order.
        content_types (tuple[str, ...]): Content-type tokens of view filenames.
        template_engines (tuple[str, ...]): Templating-engine tokens of view filenames.
        multi_root_prefixes (tuple[str, ...]): Directories hosting sub-applications,
            in precedence order.
        app_dir (str): The application directory under every root.
        views_dir (str): The views directory under `app_dir`.
        controllers_dir (str): The controllers directory under `app_dir`.
        controller_suffix (str): Suffix of a controller file's stem.
        source_extension (str): Extension of controller source files.
        method_keyword (str): Keyword opening a method definition.
        block_end_keyword (str): Keyword closing a block.
    """

    view_extensions: tuple[str, ...] = cs.VIEW_EXTENSIONS
    content_types: tuple[str, ...] = cs.CONTENT_TYPES
    template_engines: tuple[str, ...] = cs.TEMPLATE_ENGINES
    multi_root_prefixes: tuple[str, ...] = cs.MULTI_ROOT_PREFIXES
    app_dir: str = cs.APP_DIR
    views_dir: str = cs.VIEWS_DIR
    controllers_dir: str = cs.CONTROLLERS_DIR
    controller_suffix: str = cs.CONTROLLER_SUFFIX
    source_extension: str = cs.SOURCE_EXTENSION
    method_keyword: str = cs.METHOD_KEYWORD
    block_end_keyword: str = cs.BLOCK_END_KEYWORD

    @property
    def controller_file_suffix(self) -> str:
        return f"{self.controller_suffix}{self.source_extension}"


DEFAULT_CONVENTIONS = NavigationConventions()


@dataclass(frozen=True)
class ProbeResult:
    """
    The outcome of checking whether one candidate path exists.

    Attributes:
        path (Path): The probed candidate.
        status (ProbeStatus): Whether the path exists, is missing, or the probe failed.
        error (str | None): The probe error, when `status` is `ERROR`.
    """

    path: Path
    status: ProbeStatus
    error: str | None = None

    @property
    def exists(self) -> bool:
        return self.status == ProbeStatus.EXISTS


@dataclass
class EditorState:
    """
    A document open in the editor host.

    Attributes:
        path (str): The absolute path of the document, with forward slashes.
        text (str): The full text of the document.
        cursor_offset (int): The cursor position as a character offset into `text`.
    """

    path: str
    text: str
    cursor_offset: int = 0


def _default_console() -> Console:
    """Creates a default Rich Console instance."""
    return Console(width=None, highlight=False)


@dataclass
class AppContext:
    """
    Holds the global application context.

    Attributes:
        console (Console): The Rich console instance for styled output.
    """

    console: Console = field(default_factory=_default_console)
