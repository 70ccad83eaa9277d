"""
This module decides which way to navigate from the focused document and runs
the matching flow.

A controller (`*_controller.rb`) navigates to the view of the action enclosing
the cursor. A view navigates to its controller and places the cursor on the
action's definition. Each `Navigator.toggle` call ends with exactly one message
shown through the editor host and returns the same information as a
`NavigationOutcome`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from ..core import constants as cs
from ..core import logs as ls
from ..core.constants import FileKind, NavigationStatus
from ..data_models.models import DEFAULT_CONVENTIONS, EditorState, NavigationConventions
from ..data_models.schemas import CandidateReport, NavigationOutcome
from ..infrastructure import exceptions as ex
from ..infrastructure.decorators import navigation_try_except
from ..services.protocols import EditorHostProtocol
from ..utils.path_utils import normalize_path, relative_to_root
from ..utils.text_utils import offset_to_position
from .method_locator import find_enclosing_method, find_method_offset
from .path_resolver import PathResolver


def _alternation(tokens: tuple[str, ...]) -> str:
    return "|".join(re.escape(token) for token in tokens)


def classify(
    path: str, conventions: NavigationConventions = DEFAULT_CONVENTIONS
) -> FileKind:
    """
    Tells controllers and views apart by path shape alone.

    A view either ends with `.<content-type>.<engine>` (`index.html.erb`) or sits
    under a views directory with a bare content-type extension (`index.html`).
    """
    path = normalize_path(path)
    if path.endswith(conventions.controller_file_suffix):
        return FileKind.CONTROLLER

    content_types = _alternation(conventions.content_types)
    engines = _alternation(conventions.template_engines)
    views = re.escape(conventions.views_dir)
    if re.search(rf"\.(?:{content_types})\.(?:{engines})$", path) or re.search(
        rf"/{views}/.*\.(?:{content_types})$", path
    ):
        return FileKind.VIEW
    return FileKind.UNSUPPORTED


def _workspace_relative(path: str, workspace_root: Path | str) -> str:
    relative = relative_to_root(path, str(workspace_root))
    if relative is None:
        relative = normalize_path(path).lstrip(cs.PATH_SEPARATOR)
    return f"{cs.PATH_SEPARATOR}{relative}"


def extract_controller_identity(
    path: str,
    workspace_root: Path | str,
    conventions: NavigationConventions = DEFAULT_CONVENTIONS,
) -> str:
    """
    Returns the controller identity, e.g. `cms/emr/orders` for
    `<root>/app/controllers/cms/emr/orders_controller.rb`.

    Raises:
        PathParseError: If the path has no controllers segment before the
            controller file name.
    """
    controllers = re.escape(conventions.controllers_dir)
    suffix = re.escape(conventions.controller_file_suffix)
    match = re.search(
        rf"/{controllers}/(?P<identity>.+){suffix}$",
        _workspace_relative(path, workspace_root),
    )
    if match is None:
        raise ex.PathParseError(ex.CONTROLLER_PARSE.format(path=path))
    return match.group("identity")


def extract_view_target(
    path: str,
    workspace_root: Path | str,
    conventions: NavigationConventions = DEFAULT_CONVENTIONS,
) -> tuple[str, str]:
    """
    Returns `(identity, action)` for a view, e.g. `("cms/orders", "index")` for
    `<root>/app/views/cms/orders/index.html.erb`.

    The identity is everything between the views segment and the last separator;
    the action is the filename up to its first dot.

    Raises:
        PathParseError: If the path has no views segment, no directory under it,
            or a filename whose leading token is not a method name.
    """
    views = re.escape(conventions.views_dir)
    match = re.search(
        rf"/{views}/(?P<identity>.+)/(?P<action>\w+)\.[^/]*$",
        _workspace_relative(path, workspace_root),
    )
    if match is None:
        raise ex.PathParseError(ex.VIEW_PARSE.format(path=path))
    return match.group("identity"), match.group("action")


@dataclass(frozen=True)
class CounterpartLookup:
    """
    What to look for from the focused document.

    Attributes:
        kind (FileKind): The kind of the focused document.
        identity (str): The controller identity shared by both sides.
        action (str): The action at the cursor (controller) or in the filename (view).
        candidates (list[Path]): Counterpart candidates in precedence order.
    """

    kind: FileKind
    identity: str
    action: str
    candidates: list[Path]


class Navigator:
    """
    Toggles between a controller action and its view through an editor host.

    Args:
        host (EditorHostProtocol): The editor providing documents and messages.
        conventions (NavigationConventions): Naming conventions of the layout.
        resolver (PathResolver | None): Candidate resolver; built from
            `conventions` when omitted.
    """

    def __init__(
        self,
        host: EditorHostProtocol,
        conventions: NavigationConventions = DEFAULT_CONVENTIONS,
        resolver: PathResolver | None = None,
    ):
        self.host = host
        self.conventions = conventions
        self.resolver = resolver or PathResolver(conventions)

    async def toggle(self) -> NavigationOutcome:
        """
        Runs one navigation from the focused document and reports its outcome.

        Returns:
            NavigationOutcome: The result; its message has already been shown.
        """
        outcome = await self._navigate()
        self.host.show_message(outcome.level, outcome.message)
        logger.info(ls.NAVIGATION_DONE.format(status=outcome.status, message=outcome.message))
        return outcome

    def lookup(self, editor: EditorState, workspace_root: Path) -> CounterpartLookup:
        """
        Classifies the document and builds its counterpart candidates.

        Raises:
            UnsupportedFileError: If the document is neither a controller nor a view.
            PathParseError: If the identity cannot be extracted from the path.
            CursorNotInActionError: If a controller's cursor is outside every action.
        """
        file_path = normalize_path(editor.path)
        kind = classify(file_path, self.conventions)
        logger.debug(ls.CLASSIFIED.format(path=file_path, kind=kind))

        match kind:
            case FileKind.CONTROLLER:
                identity = extract_controller_identity(file_path, workspace_root, self.conventions)
                action = find_enclosing_method(editor.text, editor.cursor_offset, self.conventions)
                if action is None:
                    raise ex.CursorNotInActionError()
                roots = self.resolver.resolve_roots(workspace_root, identity)
                candidates = self.resolver.build_view_candidates(roots, identity, action)
            case FileKind.VIEW:
                identity, action = extract_view_target(file_path, workspace_root, self.conventions)
                roots = self.resolver.resolve_roots(workspace_root, identity)
                candidates = self.resolver.build_controller_candidates(roots, identity)
            case _:
                raise ex.UnsupportedFileError()

        return CounterpartLookup(kind=kind, identity=identity, action=action, candidates=candidates)

    async def report_candidates(self) -> list[CandidateReport]:
        """
        Probes every counterpart candidate of the focused document.

        Raises:
            NavigationError: For the same environment, classification, pattern
                and cursor conditions that stop `toggle`.
        """
        editor, workspace_root = self._focused()
        lookup = self.lookup(editor, workspace_root)
        results = await self.resolver.probe_all(lookup.candidates)
        return [
            CandidateReport(
                precedence=index, path=str(result.path), status=result.status, error=result.error
            )
            for index, result in enumerate(results)
        ]

    def _focused(self) -> tuple[EditorState, Path]:
        editor = self.host.active_editor()
        if editor is None:
            raise ex.NoActiveEditorError()
        workspace_root = self.host.workspace_root_for(normalize_path(editor.path))
        if workspace_root is None:
            raise ex.OutsideWorkspaceError()
        return editor, workspace_root

    @navigation_try_except(NavigationOutcome.failure)
    async def _navigate(self) -> NavigationOutcome:
        editor, workspace_root = self._focused()
        logger.info(ls.NAVIGATION_START.format(path=editor.path, offset=editor.cursor_offset))
        lookup = self.lookup(editor, workspace_root)

        target = await self.resolver.find_first_existing(lookup.candidates)
        if target is None:
            if lookup.kind == FileKind.CONTROLLER:
                message = ex.VIEW_NOT_FOUND.format(controller=lookup.identity, action=lookup.action)
            else:
                message = ex.CONTROLLER_NOT_FOUND.format(controller=lookup.identity)
            raise ex.CounterpartNotFoundError(message, lookup.identity)

        document = await self.host.open_document(target)
        if lookup.kind == FileKind.CONTROLLER:
            return self._outcome(
                NavigationStatus.OPENED,
                cs.MSG_OPENED_VIEW.format(action=lookup.action),
                document,
                lookup.action,
            )
        return self._jump_to_action(document, lookup.action)

    def _jump_to_action(self, document: EditorState, action: str) -> NavigationOutcome:
        offset = find_method_offset(document.text, action, self.conventions)
        if offset is None:
            return self._outcome(
                NavigationStatus.PARTIAL,
                cs.MSG_ACTION_NOT_LOCATED.format(action=action),
                document,
                action,
            )
        self.host.reveal(document.path, offset)
        document.cursor_offset = offset
        return self._outcome(
            NavigationStatus.OPENED,
            cs.MSG_JUMPED_TO_ACTION.format(action=action),
            document,
            action,
        )

    @staticmethod
    def _outcome(
        status: NavigationStatus, message: str, document: EditorState, action: str
    ) -> NavigationOutcome:
        line, column = offset_to_position(document.text, document.cursor_offset)
        return NavigationOutcome(
            status=status,
            message=message,
            target_path=document.path,
            action=action,
            cursor_offset=document.cursor_offset,
            line=line,
            column=column,
        )
