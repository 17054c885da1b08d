"""Run one client call and capture its outcome.

Each invocation opens a client, awaits exactly one operation on it and
closes it again.  Exceptions raised by the call become a failed
:class:`CommandResult`; nothing is retried.
"""

from __future__ import annotations

import asyncio
import traceback
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

import httpx
import structlog

from bitstore.client import decode_body
from bitstore.services.result import CommandError, CommandResult

if TYPE_CHECKING:
    from bitstore.client import BitstoreClient

logger = structlog.get_logger(__name__)

ClientCall = Callable[["BitstoreClient"], Awaitable[Any]]
ClientFactory = Callable[[], "BitstoreClient"]


def error_from_exception(exc: BaseException) -> CommandError:
    """Translate an exception raised by the client into a CommandError.

    Errors that carry an HTTP response keep its decoded body as ``detail``.
    The message falls back to the exception type when ``str(exc)`` is empty.
    """
    message = str(exc) or type(exc).__name__
    trace = "".join(traceback.format_exception(exc))

    response = getattr(exc, "response", None)
    if isinstance(response, httpx.Response):
        return CommandError(
            code=f"HTTP_{response.status_code}",
            message=message,
            detail=decode_body(response),
            trace=trace,
        )
    if isinstance(exc, httpx.RequestError):
        return CommandError(code="TRANSPORT", message=message, trace=trace)
    return CommandError(code="CLIENT", message=message, trace=trace)


async def dispatch(op: str, call: ClientCall, client_factory: ClientFactory) -> CommandResult:
    """Await *call* against a freshly built client and wrap the outcome."""
    async with client_factory() as client:
        try:
            data = await call(client)
        except Exception as exc:
            logger.debug("command failed", op=op, error=str(exc))
            return CommandResult.failure(op, error_from_exception(exc))
    return CommandResult.success(op, data)


def run_command(op: str, call: ClientCall, client_factory: ClientFactory) -> CommandResult:
    """Synchronous entry point used by the Click commands."""
    return asyncio.run(dispatch(op, call, client_factory))
