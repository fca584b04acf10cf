"""WSGI adapter - Serve a Router as a WSGI application.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, List

from roadrouter_core.http.request import Request
from roadrouter_core.http.response import Response

logger = logging.getLogger(__name__)


class WSGIApplication:
    """WSGI callable dispatching through a Router.

    Usage:
        app = WSGIApplication(router)
        wsgiref.simple_server.make_server("", 8000, app).serve_forever()
    """

    def __init__(self, router: Any):
        self.router = router

    def __call__(
        self,
        environ: Dict[str, Any],
        start_response: Callable[..., Any],
    ) -> Iterable[bytes]:
        request = Request.from_environ(environ)
        response = Response(protocol=request.protocol)

        outcome = self.router.dispatch(request, response)
        logger.debug(
            f"{request.method} {outcome.path} -> {response.status} "
            f"({outcome.handled} handled)"
        )

        status = f"{response.status} {response.status_message}"
        headers: List[tuple] = list(response.headers.items())
        start_response(status, headers)
        return [response.body]


__all__ = [
    "WSGIApplication",
]
