"""Router - Route registration and request dispatch.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import replace
from typing import Any, Callable, Iterable, List, Optional, Tuple, Union

from roadrouter_core.http.request import Request, RequestSource
from roadrouter_core.http.response import Response, ResponseSink
from roadrouter_core.routing.dispatcher import DispatchOutcome, Dispatcher
from roadrouter_core.routing.invoker import ControllerRegistry, Invoker, parse_handler
from roadrouter_core.routing.pattern import compile_pattern
from roadrouter_core.routing.scope import Scope
from roadrouter_core.routing.table import Phase, Route, RouteTable
from roadrouter_core.utils.config import RouterConfig, register_routes

logger = logging.getLogger(__name__)

ALL_METHODS = "GET|POST|PUT|DELETE|OPTIONS|PATCH|HEAD"

Methods = Union[str, Iterable[str]]


class Router:
    """Request Router.

    Features:
    - Path parameters (/users/{id})
    - Before-routes for middleware-style side effects
    - Groups, mounts and prefixes
    - Namespaced controller references ("UserController.show")
    - Domain-qualified routes
    - Custom not-found handlers

    Derived routers (prefix, ns, domain, group, mount) share the route
    table and controller registry of their parent; only the scope differs.

    Usage:
        router = Router()
        router.get("/users/{id}", lambda user_id: {"id": user_id})

        api = router.prefix("/api").ns("api")
        api.post("/users", "UserController.create")

        router.set404(lambda: "nothing here")
        router.run(Request("GET", "/users/42"), Response())
    """

    def __init__(
        self,
        config: Optional[RouterConfig] = None,
        registry: Optional[ControllerRegistry] = None,
    ):
        self.config = config or RouterConfig()
        self.registry = registry if registry is not None else ControllerRegistry()
        self._table = RouteTable()
        self._scope = Scope().with_namespace(self.config.namespace)
        self._dispatcher = Dispatcher(
            self._table,
            Invoker(self.registry),
            override_header=self.config.method_override_header,
            override_methods=self.config.override_methods,
        )

        if self.config.routes:
            register_routes(self, self.config.routes)

    @property
    def scope(self) -> Scope:
        return self._scope

    def match(
        self,
        methods: Methods,
        pattern: str,
        handler: Any,
        phase: Phase = Phase.AFTER,
    ) -> "Router":
        """Add a route for one or more methods.

        Args:
            methods: "GET|POST" style string or iterable of methods
            pattern: Route pattern, relative to the current prefix
            handler: Callable or controller reference
            phase: Phase.AFTER for handlers, Phase.BEFORE for middleware
        """
        compiled = compile_pattern(self._scope.qualify(pattern))
        route = Route(
            pattern=compiled,
            handler=parse_handler(self._scope.resolve(handler)),
            domain=self._scope.domain,
        )

        if isinstance(methods, str):
            methods = methods.split("|")
        methods = list(methods)

        for method in methods:
            self._table.add(phase, method, route)

        logger.debug(f"Registered {phase.value} route {methods} {compiled.template}")
        return self

    def before(self, methods: Methods, pattern: str, handler: Any) -> "Router":
        """Add a before-route, run for side effects ahead of dispatch."""
        return self.match(methods, pattern, handler, phase=Phase.BEFORE)

    def all(self, pattern: str, handler: Any) -> "Router":
        """Add route for all methods."""
        return self.match(ALL_METHODS, pattern, handler)

    def get(self, pattern: str, handler: Any) -> "Router":
        """Add GET route."""
        return self.match("GET", pattern, handler)

    def post(self, pattern: str, handler: Any) -> "Router":
        """Add POST route."""
        return self.match("POST", pattern, handler)

    def put(self, pattern: str, handler: Any) -> "Router":
        """Add PUT route."""
        return self.match("PUT", pattern, handler)

    def patch(self, pattern: str, handler: Any) -> "Router":
        """Add PATCH route."""
        return self.match("PATCH", pattern, handler)

    def delete(self, pattern: str, handler: Any) -> "Router":
        """Add DELETE route."""
        return self.match("DELETE", pattern, handler)

    def options(self, pattern: str, handler: Any) -> "Router":
        """Add OPTIONS route."""
        return self.match("OPTIONS", pattern, handler)

    def set404(self, handler: Any) -> "Router":
        """Set the not-found handler for the current domain."""
        route = Route(
            handler=parse_handler(self._scope.resolve(handler)),
            domain=self._scope.domain,
        )
        self._table.add(Phase.NOT_FOUND, None, route)
        return self

    def prefix(self, prefix: str) -> "Router":
        """Derive a router whose routes live under `prefix`."""
        return self._derive(self._scope.with_prefix(prefix))

    def ns(self, namespace: str) -> "Router":
        """Derive a router resolving controller references in `namespace`."""
        return self._derive(self._scope.with_namespace(namespace))

    def domain(self, domain: str, delimiter: Optional[str] = None) -> "Router":
        """Derive a router whose routes only match on `domain`.

        Nested calls build subdomains: domain("example.com").domain("api")
        qualifies routes with "api.example.com".
        """
        if delimiter is None:
            delimiter = self.config.domain_delimiter
        return self._derive(self._scope.with_domain(domain, delimiter))

    def group(self, callback: Callable[["Router"], Any]) -> "Router":
        """Call `callback` with a derived router and return it."""
        router = self._derive(self._scope)
        callback(router)
        return router

    def mount(self, prefix: str, callback: Callable[["Router"], Any]) -> "Router":
        """Call `callback` with a router mounted under `prefix`."""
        router = self.prefix(prefix)
        callback(router)
        return router

    def set_namespace(self, namespace: str) -> None:
        """Replace the namespace of this router."""
        self._scope = replace(self._scope, namespace=namespace)

    def set_base_path(self, base_path: Optional[str]) -> None:
        """Set the mount point stripped from request paths."""
        self.config = replace(self.config, base_path=base_path)

    def register_controller(
        self,
        name: str,
        factory: Optional[Callable[..., Any]] = None,
    ) -> Any:
        """Register a controller factory (usable as a decorator)."""
        return self.registry.register(name, factory)

    def dispatch(
        self,
        request: RequestSource,
        response: Optional[ResponseSink] = None,
        callback: Optional[Callable[[], Any]] = None,
        quit_after_run: Optional[bool] = None,
    ) -> DispatchOutcome:
        """Dispatch a request and return the full outcome."""
        if self.config.base_path is not None and isinstance(request, Request):
            request = replace(request, base_path=self.config.base_path)

        if response is None:
            response = Response(protocol=getattr(request, "protocol", "HTTP/1.1"))

        if quit_after_run is None:
            quit_after_run = self.config.quit_after_run

        return self._dispatcher.dispatch(
            request,
            response,
            finish=callback,
            quit_after_run=quit_after_run,
        )

    def run(
        self,
        request: RequestSource,
        response: Optional[ResponseSink] = None,
        callback: Optional[Callable[[], Any]] = None,
        quit_after_run: Optional[bool] = None,
    ) -> bool:
        """Dispatch a request.

        Args:
            request: Request source
            response: Response sink (a new Response when omitted)
            callback: Called after a route was handled
            quit_after_run: Stop after the first matching route

        Returns:
            True if at least one route handled the request
        """
        return self.dispatch(request, response, callback, quit_after_run).success

    def get_routes(self) -> List[Tuple[Phase, Optional[str], Route]]:
        """Get all registered routes."""
        return self._table.get_routes()

    def _derive(self, scope: Scope) -> "Router":
        router = copy.copy(self)
        router._scope = scope
        return router


__all__ = [
    "ALL_METHODS",
    "Router",
]
