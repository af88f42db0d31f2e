"""
simplehandlers - Exceptions
===========================

What:  Application-specific exceptions raised by wrapped handlers.
How:   Each exception carries a display message and an optional context dict.
       ``ErrorHandler`` turns a ``HandlerError`` into a 500 plain-text
       response whose body is the message.

Exception Hierarchy:
    SimpleHandlersError (base)
    └── HandlerError        → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class SimpleHandlersError(Exception):
    """
    Base exception for all simplehandlers errors.

    Attributes:
        message:  Human-readable description, safe to send to the client.
        context:  Additional debug info (logged, never sent to the client).
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class HandlerError(SimpleHandlersError):
    """
    Raised (or returned) by a handler function to report a failure.

    HTTP:    500 Internal Server Error, body is ``message`` as plain text.

    Example:
        @error_handler
        async def upload(scope, receive, send):
            if not await has_space():
                return HandlerError("disk full")
            ...
    """

    def __init__(
        self,
        message: str = "Internal Server Error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
