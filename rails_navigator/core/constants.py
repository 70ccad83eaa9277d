from __future__ import annotations

from enum import StrEnum


class FileKind(StrEnum):
    CONTROLLER = "controller"
    VIEW = "view"
    UNSUPPORTED = "unsupported"


class ProbeStatus(StrEnum):
    EXISTS = "exists"
    MISSING = "missing"
    ERROR = "error"


class MessageLevel(StrEnum):
    INFO = "info"
    ERROR = "error"


class NavigationStatus(StrEnum):
    OPENED = "opened"
    PARTIAL = "partial"
    FAILED = "failed"


class ErrorKind(StrEnum):
    ENVIRONMENT = "environment"
    CLASSIFICATION = "classification"
    PATTERN = "pattern"
    HEURISTIC_MISS = "heuristic_miss"
    NOT_FOUND = "not_found"


class Color(StrEnum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class StyleModifier(StrEnum):
    BOLD = "bold"
    NONE = ""


# Rails naming conventions
VIEW_EXTENSIONS = (
    ".html.erb",
    ".html.haml",
    ".html.slim",
    ".json.jbuilder",
    ".json.erb",
    ".xml.builder",
    ".xml.erb",
    ".js.erb",
    ".text.erb",
)
CONTENT_TYPES = ("html", "json", "xml", "js", "text")
TEMPLATE_ENGINES = ("erb", "haml", "slim", "builder", "jbuilder")
MULTI_ROOT_PREFIXES = ("domains", "apps")

APP_DIR = "app"
VIEWS_DIR = "views"
CONTROLLERS_DIR = "controllers"
CONTROLLER_SUFFIX = "_controller"
SOURCE_EXTENSION = ".rb"
METHOD_KEYWORD = "def"
BLOCK_END_KEYWORD = "end"

PATH_SEPARATOR = "/"
WINDOWS_SEPARATOR = "\\"
ENCODING_UTF8 = "utf-8"

# User-facing messages
MSG_OPENED_VIEW = "Opened view: {action}"
MSG_JUMPED_TO_ACTION = "Jumped to action: {action}"
MSG_ACTION_NOT_LOCATED = "Opened controller (action {action} not found)"

# CLI
ENV_PREFIX = "RAILS_NAV_"
LOG_FORMAT = "<level>{level: <8}</level> | {name}:{function}:{line} - {message}"
CANDIDATES_TABLE_TITLE = "Counterpart candidates"
COL_PRECEDENCE = "#"
COL_PATH = "Path"
COL_STATUS = "Status"
CLI_ERR_POSITION_CONFLICT = "Use either --offset or --line/--column, not both."
CLI_ERR_FILE_UNREADABLE = "Cannot read {path}: {error}"
CLI_MSG_NO_CANDIDATES = "No candidates: {reason}"
