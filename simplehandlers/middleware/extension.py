"""
simplehandlers - Extension Middleware
=====================================

What:  Moves a trailing file extension from the URL path into a query parameter.
How:   Rewrites ``scope["path"]`` and ``scope["query_string"]`` in place, then
       hands the same scope to the next application.
When:  Outermost in the chain, so inner filters and routes see the stripped path.

Examples:
    GET /reports/q3.CSV?year=2024  →  /reports/q3       :extension=.csv&year=2024
    GET /reports/q3.json/          →  /reports/q3/      :extension=.json&
    GET /archive.tar.gz            →  /archive.tar      :extension=.gz&
    GET /.hidden                   →  unchanged (dot starts the final segment)
    GET /v1.2/items                →  unchanged (dot is not in the final segment)

Wire format:
    The extension parameter is always placed first and joined to the original
    raw query with a literal "&", even when the original query is empty. The
    resulting trailing "&" is part of the legacy format; set
    ``SIMPLEHANDLERS_EXTENSION_KEEP_SEPARATOR=false`` to drop it.
"""

import logging
from typing import Optional, Tuple
from urllib.parse import quote_plus

from starlette.types import ASGIApp, Receive, Scope, Send

from simplehandlers.config import settings

logger = logging.getLogger(__name__)


def split_extension(path: str) -> Tuple[str, Optional[str]]:
    """
    Split a trailing file extension off ``path``.

    Returns ``(new_path, extension)``. ``extension`` is lower-cased and keeps
    its leading dot; it is ``None`` (and ``new_path`` is ``path``) when the
    final segment has no extension. The last dot wins, and a trailing slash
    is preserved as exactly one "/".
    """
    trimmed = path.rstrip("/")
    dot = trimmed.rfind(".")
    segment_start = trimmed.rfind("/") + 1

    # No dot, a dot in an earlier segment, or a leading-dot name like ".hidden"
    if dot <= segment_start:
        return path, None

    new_path = trimmed[:dot]
    if len(trimmed) < len(path):
        new_path += "/"
    return new_path, trimmed[dot:].lower()


def extension_query(
    extension: str,
    query: bytes,
    *,
    param: str = ":extension",
    keep_separator: bool = True,
) -> bytes:
    """
    Prepend ``param=extension`` to the raw query string.

    Only the parameter name keeps ":" literal; the value is fully escaped.
    """
    encoded = f"{quote_plus(param, safe=':')}={quote_plus(extension)}".encode("ascii")
    if not query and not keep_separator:
        return encoded
    return encoded + b"&" + query


class ExtensionMiddleware:
    """
    Extracts the file extension from the path into the ``:extension`` query
    parameter, then calls the wrapped application.

    Downstream handlers read it like any other parameter:

        fmt = request.query_params.get(":extension", ".html")

    ``scope["raw_path"]`` is trimmed the same way when its final segment
    carries the extension literally; a percent-encoded dot leaves it as is.
    Non-HTTP scopes pass through untouched.

    Configuration (from settings, overridable per instance):
        extension_param:           Query parameter name (default ":extension")
        extension_keep_separator:  Keep "&" when the original query is empty
    """

    def __init__(
        self,
        app: ASGIApp,
        param: Optional[str] = None,
        keep_separator: Optional[bool] = None,
    ) -> None:
        self.app = app
        self.param = param if param is not None else settings.extension_param
        self.keep_separator = (
            keep_separator
            if keep_separator is not None
            else settings.extension_keep_separator
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            self.rewrite(scope)
        await self.app(scope, receive, send)

    def rewrite(self, scope: Scope) -> None:
        path, extension = split_extension(scope.get("path", ""))
        if extension is None:
            return

        scope["query_string"] = extension_query(
            extension,
            scope.get("query_string", b""),
            param=self.param,
            keep_separator=self.keep_separator,
        )
        logger.debug("Extracted extension %s: %s -> %s", extension, scope["path"], path)
        scope["path"] = path

        raw_path = scope.get("raw_path")
        if raw_path:
            raw, raw_extension = split_extension(raw_path.decode("latin-1"))
            if raw_extension is not None:
                scope["raw_path"] = raw.encode("latin-1")
