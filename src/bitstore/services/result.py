"""CommandResult and CommandError: the outcome of one CLI invocation.

INVARIANT: every command produces exactly one CommandResult, and the
renderer derives the exit code from ``ok`` alone.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class CommandError(BaseModel):
    """Structured error payload within a CommandResult.

    Attributes:
        code: ``HTTP_<status>``, ``TRANSPORT`` or ``CLIENT``.
        message: Display text of the underlying exception.
        detail: Decoded response body when the service answered, else None.
        trace: Formatted traceback, printed only in verbose mode.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: Any = None
    trace: str | None = None


class CommandResult(BaseModel):
    """Success-or-failure outcome of a single remote call.

    Attributes:
        ok: Whether the call succeeded.
        op: Name of the command (e.g. ``"files:meta"``).
        data: Decoded response payload on success.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: Any = None
    error: CommandError | None = None

    @classmethod
    def success(cls, op: str, data: Any) -> CommandResult:
        return cls(ok=True, op=op, data=data)

    @classmethod
    def failure(cls, op: str, error: CommandError) -> CommandResult:
        return cls(ok=False, op=op, error=error)
