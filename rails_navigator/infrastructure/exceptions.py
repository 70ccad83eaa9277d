from __future__ import annotations

from ..core.constants import ErrorKind

# User-facing error messages
NO_ACTIVE_EDITOR = "No active editor"
OUTSIDE_WORKSPACE = "File is not in a workspace"
UNSUPPORTED_FILE = "Not in a Rails controller or view file"
CONTROLLER_PARSE = "Could not parse controller path: {path}"
VIEW_PARSE = "Could not parse view path: {path}"
CURSOR_NOT_IN_ACTION = (
    "Could not find action method. Place cursor inside an action method."
)
VIEW_NOT_FOUND = "No view found for {controller}#{action}"
CONTROLLER_NOT_FOUND = "No controller found for {controller}"
UNEXPECTED = "Unexpected error: {error}"


class NavigationError(Exception):
    """Base class for every condition that ends a navigation with an error.

    Each subclass fixes its ``kind`` so callers can report or test by category
    without matching on message text.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NoActiveEditorError(NavigationError):
    kind = ErrorKind.ENVIRONMENT

    def __init__(self) -> None:
        super().__init__(NO_ACTIVE_EDITOR)


class OutsideWorkspaceError(NavigationError):
    kind = ErrorKind.ENVIRONMENT

    def __init__(self) -> None:
        super().__init__(OUTSIDE_WORKSPACE)


class UnsupportedFileError(NavigationError):
    kind = ErrorKind.CLASSIFICATION

    def __init__(self) -> None:
        super().__init__(UNSUPPORTED_FILE)


class PathParseError(NavigationError):
    kind = ErrorKind.PATTERN


class CursorNotInActionError(NavigationError):
    kind = ErrorKind.HEURISTIC_MISS

    def __init__(self) -> None:
        super().__init__(CURSOR_NOT_IN_ACTION)


class CounterpartNotFoundError(NavigationError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str, identity: str) -> None:
        super().__init__(message)
        self.identity = identity
