"""Dispatcher - Request lifecycle over the route table.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Lifecycle:

    IDLE ──▶ BEFORE_DISPATCH ──▶ AFTER_DISPATCH ──▶ HANDLED ────┐
                                        │                       ├──▶ FINALIZED
                                        └─────────▶ NOT_FOUND ──┘

- BEFORE: every matching before-route runs for its side effects.
- AFTER: every matching after-route runs; the last result is kept
  unless `quit_after_run` stops the loop at the first match.
- NOT_FOUND: the first not-found handler eligible for the request
  domain runs, otherwise the sink emits a plain 404.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Iterable, Optional, Sequence, Tuple

from roadrouter_core.http.request import RequestSource
from roadrouter_core.http.response import ResponseSink
from roadrouter_core.routing.invoker import Invoker
from roadrouter_core.routing.table import Phase, Route, RouteTable

logger = logging.getLogger(__name__)

DEFAULT_OVERRIDE_HEADER = "X-HTTP-Method-Override"
DEFAULT_OVERRIDE_METHODS = ("PUT", "DELETE", "PATCH")


class DispatchState(Enum):
    """Dispatch lifecycle states."""

    IDLE = auto()
    BEFORE_DISPATCH = auto()
    AFTER_DISPATCH = auto()
    HANDLED = auto()
    NOT_FOUND = auto()
    FINALIZED = auto()


@dataclass
class DispatchOutcome:
    """Result of one dispatch cycle."""

    method: str
    path: str
    domain: Optional[str] = None
    handled: int = 0
    result: Any = None
    not_found: bool = False
    state: DispatchState = DispatchState.IDLE
    response: Optional[ResponseSink] = None

    @property
    def success(self) -> bool:
        return self.handled > 0


class Dispatcher:
    """Runs a request through the before, after and not-found phases."""

    def __init__(
        self,
        table: RouteTable,
        invoker: Invoker,
        override_header: str = DEFAULT_OVERRIDE_HEADER,
        override_methods: Iterable[str] = DEFAULT_OVERRIDE_METHODS,
    ):
        self.table = table
        self.invoker = invoker
        self.override_header = override_header
        self.override_methods = tuple(override_methods)

    def effective_method(self, request: RequestSource) -> str:
        """Method used for matching.

        HEAD is matched as GET. POST may be overridden by the override
        header when it names one of the allowed methods.
        """
        method = request.method.upper()

        if method == "HEAD":
            return "GET"

        if method == "POST":
            override = request.header(self.override_header)
            if override in self.override_methods:
                return override

        return method

    def dispatch(
        self,
        request: RequestSource,
        response: ResponseSink,
        finish: Optional[Callable[[], Any]] = None,
        quit_after_run: bool = False,
    ) -> DispatchOutcome:
        """Dispatch a request.

        Args:
            request: Request source
            response: Response sink receiving the result
            finish: Called without arguments when an after-route matched
            quit_after_run: Stop at the first matching after-route

        Returns:
            DispatchOutcome for the cycle
        """
        outcome = DispatchOutcome(
            method=self.effective_method(request),
            path=request.path,
            domain=request.host,
            response=response,
        )

        response.begin(suppress_body=request.method.upper() == "HEAD")
        try:
            outcome.state = DispatchState.BEFORE_DISPATCH
            self._handle(
                self.table.routes_for(Phase.BEFORE, outcome.method),
                outcome.path,
                outcome.domain,
            )

            outcome.state = DispatchState.AFTER_DISPATCH
            outcome.handled, outcome.result = self._handle(
                self.table.routes_for(Phase.AFTER, outcome.method),
                outcome.path,
                outcome.domain,
                quit_after_run=quit_after_run,
            )

            if outcome.handled == 0:
                outcome.state = DispatchState.NOT_FOUND
                outcome.not_found = True
                self._handle_not_found(outcome, response)
            else:
                outcome.state = DispatchState.HANDLED
                if finish is not None and callable(finish):
                    finish()
                response.send(outcome.result)
        finally:
            response.finish()
            outcome.state = DispatchState.FINALIZED

        return outcome

    def _handle(
        self,
        routes: Sequence[Route],
        path: str,
        domain: Optional[str],
        quit_after_run: bool = False,
    ) -> Tuple[int, Any]:
        """Invoke every route matching path and domain.

        Returns:
            (number of matched routes, result of the last invoked one)
        """
        handled = 0
        result = None

        for route in routes:
            if not route.matches_domain(domain):
                continue

            params = route.pattern.match(path)
            if params is None:
                continue

            logger.debug(f"Matched {route.pattern.template} with params {params}")
            result = self.invoker.invoke(route.handler, params)
            handled += 1

            if quit_after_run:
                break

        return handled, result

    def _handle_not_found(self, outcome: DispatchOutcome, response: ResponseSink) -> None:
        for route in self.table.routes_for(Phase.NOT_FOUND):
            if route.matches_domain(outcome.domain):
                outcome.result = self.invoker.invoke(route.handler)
                response.send(outcome.result)
                return

        logger.info(f"No route for {outcome.method} {outcome.path}")
        response.not_found()


__all__ = [
    "DEFAULT_OVERRIDE_HEADER",
    "DEFAULT_OVERRIDE_METHODS",
    "DispatchOutcome",
    "DispatchState",
    "Dispatcher",
]
