"""
simplehandlers - Composition Helpers
====================================

What:  Assembles the filters around a host application and configures logging.
How:   ``wrap`` nests the middleware instances directly; ``build_middleware``
       returns the same stack as Starlette ``Middleware`` entries for
       ``Starlette(middleware=...)`` or ``FastAPI(middleware=...)``.

Filter order:
    ┌────────────────────────────────────────────┐
    │ ExtensionMiddleware                        │
    │  ┌──────────────────────────────────────┐  │
    │  │ URLQueryFilterMiddleware             │  │
    │  │  ┌────────────────────────────────┐  │  │
    │  │  │ host app / ErrorHandler(func)  │  │  │
    │  │  └────────────────────────────────┘  │  │
    │  └──────────────────────────────────────┘  │
    └────────────────────────────────────────────┘
"""

import logging
import sys
from typing import List, Optional

from starlette.middleware import Middleware
from starlette.types import ASGIApp

from simplehandlers.config import settings
from simplehandlers.middleware.extension import ExtensionMiddleware
from simplehandlers.middleware.query_filter import URLQueryFilterMiddleware

logger = logging.getLogger(__name__)


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for a host process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    level_name = (level or settings.log_level).upper()

    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def build_middleware(
    *, extract_extension: bool = True, filter_query: bool = True
) -> List[Middleware]:
    """
    Return the filter stack, outermost first.

    Starlette applies ``middleware=[...]`` lists outermost first, so the
    result can be passed to ``Starlette`` or ``FastAPI`` unchanged.
    """
    stack = []
    if extract_extension:
        stack.append(Middleware(ExtensionMiddleware))
    if filter_query:
        stack.append(Middleware(URLQueryFilterMiddleware))
    return stack


def wrap(
    app: ASGIApp, *, extract_extension: bool = True, filter_query: bool = True
) -> ASGIApp:
    """Nest the filters around ``app``: extension outermost, then query filter."""
    if filter_query:
        app = URLQueryFilterMiddleware(app)
    if extract_extension:
        app = ExtensionMiddleware(app)
    logger.debug(
        "Wrapped application (extension=%s, query_filter=%s)",
        extract_extension,
        filter_query,
    )
    return app
