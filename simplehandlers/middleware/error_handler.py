"""
simplehandlers - Error Handler Adapter
======================================

What:  Adapts a fallible handler function into a plain ASGI application.
How:   Calls the function once with ``(scope, receive, send)``. If it returns
       an exception (or raises ``HandlerError``), the exception's message is
       sent as a 500 plain-text response. On success nothing is written: the
       function already sent its own response.

Usage:
    @error_handler
    async def download(scope, receive, send):
        try:
            blob = load(scope["path"])
        except OSError as exc:
            return exc
        await Response(blob)(scope, receive, send)

    app = ExtensionMiddleware(URLQueryFilterMiddleware(download))

Partial writes:
    The response is not buffered. A function that starts sending and then
    reports an error leaves the outcome to the host server.
"""

import inspect
import logging
from typing import Awaitable, Callable, Optional, Union

from starlette.responses import PlainTextResponse
from starlette.types import Receive, Scope, Send

from simplehandlers.exceptions import HandlerError

logger = logging.getLogger(__name__)

HandlerResult = Optional[BaseException]
HandlerFunc = Callable[
    [Scope, Receive, Send], Union[HandlerResult, Awaitable[HandlerResult]]
]


class ErrorHandler:
    """
    ASGI application wrapping a handler function that reports errors.

    Response on error:
        HTTP 500 Internal Server Error
        Content-Type: text/plain; charset=utf-8
        X-Content-Type-Options: nosniff
        Body: ``str(error)``
    """

    status_code = 500

    def __init__(self, func: HandlerFunc) -> None:
        self.func = func

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            result = self.func(scope, receive, send)
            if inspect.isawaitable(result):
                result = await result
        except HandlerError as exc:
            result = exc

        if result is None:
            return

        logger.error(
            "Handler for %s failed: %s",
            scope.get("path", ""),
            result,
            extra={"context": getattr(result, "context", {})},
        )
        response = PlainTextResponse(
            str(result),
            status_code=self.status_code,
            headers={"X-Content-Type-Options": "nosniff"},
        )
        await response(scope, receive, send)


def error_handler(func: HandlerFunc) -> ErrorHandler:
    """Decorator form of ``ErrorHandler``."""
    return ErrorHandler(func)
