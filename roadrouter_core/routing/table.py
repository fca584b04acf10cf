"""Route Table - Registered routes grouped by dispatch phase.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from roadrouter_core.routing.invoker import HandlerRef
from roadrouter_core.routing.pattern import CompiledPattern


class Phase(Enum):
    """Dispatch phases."""

    BEFORE = "before"
    AFTER = "after"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Route:
    """Route definition."""

    handler: HandlerRef
    pattern: Optional[CompiledPattern] = None
    domain: Optional[str] = None

    @property
    def param_names(self) -> Tuple[str, ...]:
        if self.pattern is None:
            return ()
        return self.pattern.param_names

    def matches_domain(self, domain: Optional[str]) -> bool:
        """Domain-agnostic routes match any request domain."""
        return not self.domain or self.domain == domain


class RouteTable:
    """Ordered route storage.

    Routes are kept in registration order per (phase, method); the first
    registered route is the first tried. Not-found routes carry no method.
    """

    def __init__(self):
        self._routes: Dict[Phase, Dict[Optional[str], List[Route]]] = {
            phase: {} for phase in Phase
        }

    def add(self, phase: Phase, method: Optional[str], route: Route) -> None:
        """Append a route to the sequence for (phase, method)."""
        key = None if phase is Phase.NOT_FOUND else method.upper()
        self._routes[phase].setdefault(key, []).append(route)

    def routes_for(self, phase: Phase, method: Optional[str] = None) -> List[Route]:
        """Get routes for (phase, method) in registration order."""
        key = None if phase is Phase.NOT_FOUND or method is None else method.upper()
        return list(self._routes[phase].get(key, ()))

    def get_routes(self) -> List[Tuple[Phase, Optional[str], Route]]:
        """Get all routes as (phase, method, route) tuples."""
        return [
            (phase, method, route)
            for phase, by_method in self._routes.items()
            for method, routes in by_method.items()
            for route in routes
        ]

    def __len__(self) -> int:
        return sum(
            len(routes)
            for by_method in self._routes.values()
            for routes in by_method.values()
        )


__all__ = [
    "Phase",
    "Route",
    "RouteTable",
]
