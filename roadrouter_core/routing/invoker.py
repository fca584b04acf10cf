"""Invoker - Handler references and controller resolution.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Handlers are registered either as callables or as symbolic references
naming a controller in a ControllerRegistry:

    "UserController.show"     instance method (controller built per call)
    "UserController@show"     instance method, alternate spelling
    "UserController::listing" static/class method, no instantiation
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectCallable:
    """Handler given as a callable."""

    fn: Callable[..., Any]


@dataclass(frozen=True)
class ControllerMethod:
    """Handler given as a controller name plus method name."""

    controller: str
    method: str
    static: bool = False


@dataclass(frozen=True)
class UnknownReference:
    """String handler of no recognised shape. Produces no output."""

    reference: str


HandlerRef = Union[DirectCallable, ControllerMethod, UnknownReference]


def parse_handler(handler: Any) -> HandlerRef:
    """Turn a registered handler value into a HandlerRef.

    Only the shape of symbolic references is checked here; the controller
    itself is looked up at invocation time.
    """
    if isinstance(handler, (DirectCallable, ControllerMethod, UnknownReference)):
        return handler

    if callable(handler):
        return DirectCallable(handler)

    if not isinstance(handler, str):
        raise TypeError(
            f"Handler must be callable or a string reference, got {type(handler).__name__}"
        )

    if "::" in handler:
        controller, method = handler.split("::", 1)
        static = True
    elif "@" in handler:
        controller, method = handler.split("@", 1)
        static = False
    elif "." in handler:
        controller, method = handler.rsplit(".", 1)
        static = False
    else:
        return UnknownReference(handler)

    if not controller or not method:
        return UnknownReference(handler)

    return ControllerMethod(controller=controller, method=method, static=static)


class ControllerRegistry:
    """Explicit name -> controller factory mapping.

    Usage:
        registry = ControllerRegistry()

        @registry.register("admin.UserController")
        class UserController:
            def show(self, user_id):
                ...

        registry.register("Health", HealthController)
    """

    def __init__(self):
        self._factories: Dict[str, Callable[..., Any]] = {}

    def register(
        self,
        name: str,
        factory: Optional[Callable[..., Any]] = None,
    ) -> Any:
        """Register a controller factory, or return a decorator doing so."""
        if factory is None:
            def decorator(obj: Callable[..., Any]) -> Callable[..., Any]:
                self._factories[name] = obj
                return obj

            return decorator

        self._factories[name] = factory
        return factory

    def get(self, name: str) -> Optional[Callable[..., Any]]:
        """Get a controller factory by name."""
        return self._factories.get(name)

    def names(self) -> List[str]:
        """Get registered controller names."""
        return list(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)


class Invoker:
    """Calls HandlerRefs with positional route parameters."""

    def __init__(self, registry: Optional[ControllerRegistry] = None):
        self.registry = registry if registry is not None else ControllerRegistry()

    def invoke(self, handler: HandlerRef, params: Sequence[str] = ()) -> Any:
        """Invoke a handler.

        Returns:
            The handler result, or None when the reference cannot be resolved
        """
        if isinstance(handler, DirectCallable):
            return handler.fn(*params)

        if isinstance(handler, ControllerMethod):
            return self._invoke_controller(handler, params)

        logger.warning(f"Unrecognised handler reference: {handler.reference!r}")
        return None

    def _invoke_controller(self, handler: ControllerMethod, params: Sequence[str]) -> Any:
        factory = self.registry.get(handler.controller)
        if factory is None:
            logger.warning(f"Controller not registered: {handler.controller}")
            return None

        target = factory if handler.static else factory()
        method = getattr(target, handler.method, None)
        if method is None or not callable(method):
            logger.warning(
                f"Controller {handler.controller} has no method {handler.method}"
            )
            return None

        return method(*params)


__all__ = [
    "ControllerMethod",
    "ControllerRegistry",
    "DirectCallable",
    "HandlerRef",
    "Invoker",
    "UnknownReference",
    "parse_handler",
]
