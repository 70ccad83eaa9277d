import asyncio
import sys
from pathlib import Path

import typer
from loguru import logger
from rich.table import Table

from rails_navigator.core import cli_help as ch
from rails_navigator.core import constants as cs
from rails_navigator.data_models.models import AppContext
from rails_navigator.infrastructure import exceptions as ex
from rails_navigator.navigation.dispatcher import Navigator
from rails_navigator.services.local_host import LocalEditorHost, style
from rails_navigator.utils.text_utils import position_to_offset

from .config import settings

app = typer.Typer(
    name="rails-nav",
    help=ch.APP_DESCRIPTION,
    no_args_is_help=True,
    add_completion=False,
)

app_context = AppContext()

FILE_ARGUMENT = typer.Argument(..., help=ch.HELP_FILE)
LINE_OPTION = typer.Option(None, "--line", "-l", min=1, help=ch.HELP_LINE)
COLUMN_OPTION = typer.Option(1, "--column", "-c", min=1, help=ch.HELP_COLUMN)
OFFSET_OPTION = typer.Option(None, "--offset", min=0, help=ch.HELP_OFFSET)
WORKSPACE_OPTION = typer.Option(None, "--workspace", "-w", help=ch.HELP_WORKSPACE)


def configure_logging(level: str) -> None:
    """Replaces loguru's default sink with stderr (and the optional log file).

    Args:
        level (str): The minimum level to log.
    """
    logger.remove()
    logger.add(sys.stderr, format=cs.LOG_FORMAT, level=level)
    if settings.LOG_FILE:
        logger.add(settings.LOG_FILE, format=cs.LOG_FORMAT, level=level, mode="a")


@app.callback()
def _global_options(
    quiet: bool = typer.Option(False, "--quiet", "-q", help=ch.HELP_QUIET, is_eager=True),
    verbose: bool = typer.Option(False, "--verbose", "-v", help=ch.HELP_VERBOSE),
) -> None:
    """
    Global CLI callback configuring log verbosity.

    Args:
        quiet (bool): If True, only errors are logged.
        verbose (bool): If True, debug messages are logged.
    """
    if quiet or settings.QUIET:
        level = "ERROR"
    elif verbose:
        level = "DEBUG"
    else:
        level = settings.LOG_LEVEL.upper()
    configure_logging(level)


def _fail(message: str) -> typer.Exit:
    app_context.console.print(style(message, cs.Color.RED), soft_wrap=True)
    return typer.Exit(1)


def _build_host(
    file: Path,
    line: int | None,
    column: int,
    offset: int | None,
    workspace: list[Path] | None,
    console_output: bool = True,
) -> LocalEditorHost:
    """Creates a local host focused on `file` with the cursor at the given position.

    Raises:
        typer.Exit: If the position options conflict or the file cannot be read.
    """
    if offset is not None and line is not None:
        raise _fail(cs.CLI_ERR_POSITION_CONFLICT)

    folders: list[Path | str] = list(workspace) if workspace else [Path.cwd()]
    host = LocalEditorHost(folders, app_context.console if console_output else None)
    try:
        document = host.focus(file)
    except (OSError, UnicodeDecodeError) as e:
        raise _fail(cs.CLI_ERR_FILE_UNREADABLE.format(path=file, error=e)) from e

    if line is not None:
        document.cursor_offset = position_to_offset(document.text, line, column)
    elif offset is not None:
        host.reveal(document.path, offset)
    return host


@app.command(help=ch.CMD_TOGGLE)
def toggle(
    file: Path = FILE_ARGUMENT,
    line: int | None = LINE_OPTION,
    column: int = COLUMN_OPTION,
    offset: int | None = OFFSET_OPTION,
    workspace: list[Path] | None = WORKSPACE_OPTION,
    json_output: bool = typer.Option(False, "--json", help=ch.HELP_JSON),
) -> None:
    """
    Navigates once from FILE and prints the single resulting message.

    Args:
        file (Path): The focused controller or view.
        line (int | None): 1-based cursor line.
        column (int): 1-based cursor column.
        offset (int | None): 0-based cursor offset, exclusive with `line`.
        workspace (list[Path] | None): Workspace folders.
        json_output (bool): Print the outcome as JSON instead of a styled message.
    """
    as_json = json_output or settings.JSON_OUTPUT
    host = _build_host(file, line, column, offset, workspace, console_output=not as_json)
    outcome = asyncio.run(Navigator(host).toggle())

    if as_json:
        typer.echo(outcome.model_dump_json(indent=2))
    if outcome.status == cs.NavigationStatus.FAILED:
        raise typer.Exit(1)


@app.command(help=ch.CMD_CANDIDATES)
def candidates(
    file: Path = FILE_ARGUMENT,
    line: int | None = LINE_OPTION,
    column: int = COLUMN_OPTION,
    offset: int | None = OFFSET_OPTION,
    workspace: list[Path] | None = WORKSPACE_OPTION,
) -> None:
    """
    Prints every counterpart candidate of FILE with its probe status.

    Args:
        file (Path): The focused controller or view.
        line (int | None): 1-based cursor line.
        column (int): 1-based cursor column.
        offset (int | None): 0-based cursor offset, exclusive with `line`.
        workspace (list[Path] | None): Workspace folders.
    """
    host = _build_host(file, line, column, offset, workspace)
    try:
        reports = asyncio.run(Navigator(host).report_candidates())
    except ex.NavigationError as e:
        raise _fail(cs.CLI_MSG_NO_CANDIDATES.format(reason=e.message)) from e

    table = Table(title=cs.CANDIDATES_TABLE_TITLE)
    table.add_column(cs.COL_PRECEDENCE, justify="right")
    table.add_column(cs.COL_PATH, overflow="fold")
    table.add_column(cs.COL_STATUS)
    for report in reports:
        color = cs.Color.GREEN if report.status == cs.ProbeStatus.EXISTS else cs.Color.YELLOW
        status = report.status if report.error is None else f"{report.status}: {report.error}"
        table.add_row(str(report.precedence), report.path, style(status, color, cs.StyleModifier.NONE))
    app_context.console.print(table)
