"""HTTP module - Request source and response sink."""

from roadrouter_core.http.request import Request, RequestSource
from roadrouter_core.http.response import Response, ResponseSink
from roadrouter_core.http.wsgi import WSGIApplication

__all__ = [
    "Request",
    "RequestSource",
    "Response",
    "ResponseSink",
    "WSGIApplication",
]
