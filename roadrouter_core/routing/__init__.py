"""Routing module - Route matching and dispatch."""

from roadrouter_core.routing.dispatcher import DispatchOutcome, DispatchState, Dispatcher
from roadrouter_core.routing.invoker import (
    ControllerMethod,
    ControllerRegistry,
    DirectCallable,
    Invoker,
    UnknownReference,
    parse_handler,
)
from roadrouter_core.routing.pattern import CompiledPattern, PatternError, compile_pattern
from roadrouter_core.routing.router import Router
from roadrouter_core.routing.scope import Scope
from roadrouter_core.routing.table import Phase, Route, RouteTable

__all__ = [
    "CompiledPattern",
    "ControllerMethod",
    "ControllerRegistry",
    "DirectCallable",
    "DispatchOutcome",
    "DispatchState",
    "Dispatcher",
    "Invoker",
    "PatternError",
    "Phase",
    "Route",
    "RouteTable",
    "Router",
    "Scope",
    "UnknownReference",
    "compile_pattern",
    "parse_handler",
]
