"""RoadRouter - Request router with scoped route groups.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

RoadRouter selects a handler for an incoming request (method, path, host),
extracts positional parameters from the path and invokes the handler:
- Route patterns with {name} placeholders
- Before-routes for middleware-style side effects
- Nested groups with inherited prefix, namespace and domain
- Controller references resolved through an explicit registry
- Custom not-found handlers per domain
- HEAD and X-HTTP-Method-Override handling

Architecture Overview:
┌─────────────────────────────────────────────────────────────────────────┐
│                               RoadRouter                                │
├─────────────────────────────────────────────────────────────────────────┤
│                                                                         │
│  Registration                          Dispatch                         │
│  ┌──────────────────────┐              ┌─────────────────────────────┐  │
│  │ Router / Scope       │              │ Dispatcher                  │  │
│  │  - prefix / ns       │              │  - effective method         │  │
│  │  - domain / group    │              │  - before routes            │  │
│  │  - mount             │              │  - after routes             │  │
│  └──────────┬───────────┘              │  - not-found handlers       │  │
│             │                          └──────┬──────────────┬───────┘  │
│             ▼                                 │              │          │
│  ┌──────────────────────┐                     ▼              ▼          │
│  │ Pattern Compiler     │              ┌────────────┐  ┌────────────┐   │
│  │ Route Table          │─────────────▶│ Invoker    │  │ Response   │   │
│  └──────────────────────┘              └────────────┘  └────────────┘   │
│                                                                         │
└─────────────────────────────────────────────────────────────────────────┘

Usage:
    from roadrouter_core import Request, Response, Router

    router = Router()
    router.before("GET|POST", "/admin/{rest}", check_session)
    router.get("/users/{id}", lambda user_id: {"id": user_id})

    admin = router.prefix("/admin").ns("admin")
    admin.get("/", "DashboardController.index")

    router.set404(lambda: "Nothing here")

    response = Response()
    router.run(Request("GET", "/users/42"), response)
"""

__version__ = "0.1.0"
__author__ = "BlackRoad OS, Inc."

# HTTP
from roadrouter_core.http.request import Request, RequestSource
from roadrouter_core.http.response import Response, ResponseSink
from roadrouter_core.http.wsgi import WSGIApplication

# Routing
from roadrouter_core.routing.router import Router
from roadrouter_core.routing.scope import Scope
from roadrouter_core.routing.pattern import CompiledPattern, PatternError, compile_pattern
from roadrouter_core.routing.table import Phase, Route, RouteTable
from roadrouter_core.routing.invoker import ControllerRegistry, Invoker
from roadrouter_core.routing.dispatcher import DispatchOutcome, DispatchState, Dispatcher

# Utils
from roadrouter_core.utils.config import RouterConfig, load_config, register_routes

__all__ = [
    # Version
    "__version__",
    # HTTP
    "Request",
    "RequestSource",
    "Response",
    "ResponseSink",
    "WSGIApplication",
    # Routing
    "Router",
    "Scope",
    "CompiledPattern",
    "PatternError",
    "compile_pattern",
    "Phase",
    "Route",
    "RouteTable",
    "ControllerRegistry",
    "Invoker",
    "DispatchOutcome",
    "DispatchState",
    "Dispatcher",
    # Utils
    "RouterConfig",
    "load_config",
    "register_routes",
]
