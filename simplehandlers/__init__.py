"""
simplehandlers - HTTP request filters
=====================================

What: Composable ASGI filters that adjust a request before the wrapped
      handler runs.

    ExtensionMiddleware       /report.CSV  →  /report  +  ?:extension=.csv&
    URLQueryFilterMiddleware  drops the query string on non-GET requests
    ErrorHandler              handler-reported error  →  500 text/plain

Each filter is itself an ASGI application, so they nest freely:

    app = ExtensionMiddleware(URLQueryFilterMiddleware(ErrorHandler(func)))
"""

from simplehandlers.exceptions import HandlerError, SimpleHandlersError
from simplehandlers.main import build_middleware, setup_logging, wrap
from simplehandlers.middleware import (
    ErrorHandler,
    ExtensionMiddleware,
    URLQueryFilterMiddleware,
    error_handler,
    extension_query,
    split_extension,
)

__version__ = "1.0.0"

__all__ = [
    "ErrorHandler",
    "ExtensionMiddleware",
    "HandlerError",
    "SimpleHandlersError",
    "URLQueryFilterMiddleware",
    "build_middleware",
    "error_handler",
    "extension_query",
    "setup_logging",
    "split_extension",
    "wrap",
]
