"""
This module defines Pydantic models for the results the navigator reports.

`NavigationOutcome` is the single user-facing result of one navigation command;
`CandidateReport` describes one counterpart candidate and its probe status. Both
serialize to JSON for the command line's machine-readable output.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from rails_navigator.core.constants import (
    ErrorKind,
    MessageLevel,
    NavigationStatus,
    ProbeStatus,
)


class NavigationOutcome(BaseModel):
    """
    The result of one navigation command.

    Attributes:
        status (NavigationStatus): Whether the counterpart was opened, opened
            without locating the action, or not opened at all.
        message (str): The one message shown to the user.
        error_kind (ErrorKind | None): The error category when `status` is `FAILED`.
        target_path (str | None): The opened document, if any.
        action (str | None): The action navigated from or to.
        cursor_offset (int | None): The cursor offset in the opened document.
        line (int | None): The 1-based cursor line in the opened document.
        column (int | None): The 1-based cursor column in the opened document.
    """

    status: NavigationStatus
    message: str
    error_kind: ErrorKind | None = None
    target_path: str | None = None
    action: str | None = None
    cursor_offset: int | None = None
    line: int | None = None
    column: int | None = None

    model_config = ConfigDict(extra="forbid")

    @property
    def level(self) -> MessageLevel:
        if self.status == NavigationStatus.FAILED:
            return MessageLevel.ERROR
        return MessageLevel.INFO

    @classmethod
    def failure(cls, message: str, kind: ErrorKind | None) -> NavigationOutcome:
        return cls(status=NavigationStatus.FAILED, message=message, error_kind=kind)


class CandidateReport(BaseModel):
    """
    One counterpart candidate in precedence order.

    Attributes:
        precedence (int): The candidate's 0-based position in enumeration order.
        path (str): The candidate path.
        status (ProbeStatus): The existence probe result.
        error (str | None): The probe error, if the probe failed.
    """

    precedence: int
    path: str
    status: ProbeStatus
    error: str | None = None
