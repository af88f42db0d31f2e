# Middleware package init
"""
simplehandlers - Middleware Package
===================================

What:  Three stateless filters, each an ASGI application wrapping another.

Middleware Chain (order matters!):
    Request → [Extension] → [URL Query Filter] → Handler (optionally ErrorHandler)

    1. Extension first: the extension parameter is added before the query
       filter runs, so on non-GET requests it is dropped together with the
       rest of the query string.
    2. URL Query Filter: clears the query on non-GET requests.
    3. ErrorHandler: adapts the innermost handler function; turns a reported
       error into a 500 response.

    Responses pass back through the chain untouched.
"""

from simplehandlers.middleware.error_handler import ErrorHandler, error_handler
from simplehandlers.middleware.extension import (
    ExtensionMiddleware,
    extension_query,
    split_extension,
)
from simplehandlers.middleware.query_filter import URLQueryFilterMiddleware

__all__ = [
    "ErrorHandler",
    "ExtensionMiddleware",
    "URLQueryFilterMiddleware",
    "error_handler",
    "extension_query",
    "split_extension",
]
