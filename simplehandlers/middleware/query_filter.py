"""
simplehandlers - URL Query Filter Middleware
============================================

What:  Drops the URL query string on every request that is not a GET.
Why:   Form parsing in many frameworks merges query parameters with posted
       form fields, so a crafted URL could inject values into a POST body.
How:   Clears ``scope["query_string"]`` before calling the wrapped application.

The method check is an exact, case-sensitive comparison with "GET": HEAD,
OPTIONS and a lower-case "get" are all stripped.
"""

import logging

from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)


class URLQueryFilterMiddleware:
    """Clears the raw query string on non-GET requests; other scopes pass through."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope.get("method") != "GET":
            if scope.get("query_string"):
                logger.debug(
                    "Dropping query string on %s %s", scope.get("method"), scope.get("path")
                )
            scope["query_string"] = b""

        await self.app(scope, receive, send)
