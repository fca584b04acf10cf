"""Route Scope - Prefix, namespace and domain inherited by route groups.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional

from roadrouter_core.routing.invoker import ControllerMethod, parse_handler

NAMESPACE_SEPARATOR = "."
ROOT_MARKER = "."


@dataclass(frozen=True)
class Scope:
    """Registration context for a router branch.

    Every derivation returns a new Scope; the receiver is left untouched,
    so sibling groups never see each other's prefix or namespace.
    """

    prefix: str = ""
    namespace: str = ""
    domain: Optional[str] = None

    def with_prefix(self, prefix: str) -> "Scope":
        """Extend the path prefix ("/a" then "/b" gives "/a/b")."""
        prefix = self.prefix.rstrip("/") + "/" + prefix.strip("/")
        return replace(self, prefix=prefix.rstrip("/"))

    def with_namespace(self, namespace: str) -> "Scope":
        """Extend the namespace; a leading root marker replaces it."""
        if namespace.startswith(ROOT_MARKER):
            return replace(self, namespace=namespace[len(ROOT_MARKER):])
        if self.namespace:
            namespace = (
                self.namespace.rstrip(NAMESPACE_SEPARATOR)
                + NAMESPACE_SEPARATOR
                + namespace.lstrip(NAMESPACE_SEPARATOR)
            )
        return replace(self, namespace=namespace)

    def with_domain(self, domain: str, delimiter: str = ".") -> "Scope":
        """Qualify with a (sub)domain, e.g. "api" under "example.com"."""
        if self.domain:
            domain = domain + delimiter + self.domain
        return replace(self, domain=domain)

    def qualify(self, pattern: str) -> str:
        """Apply the prefix to a route pattern."""
        qualified = self.prefix + "/" + pattern.strip("/")
        if self.prefix:
            qualified = qualified.rstrip("/")
        return qualified

    def resolve(self, handler: Any) -> Any:
        """Apply the namespace to a symbolic handler reference.

        Callables are returned unchanged. A reference starting with the
        root marker is absolute and only loses the marker. References of
        no controller shape are left alone so they stay unresolvable.
        """
        if callable(handler) or not isinstance(handler, str):
            return handler
        if handler.startswith(ROOT_MARKER):
            return handler[len(ROOT_MARKER):]
        if not isinstance(parse_handler(handler), ControllerMethod):
            return handler
        if self.namespace:
            return self.namespace + NAMESPACE_SEPARATOR + handler
        return handler


__all__ = [
    "NAMESPACE_SEPARATOR",
    "ROOT_MARKER",
    "Scope",
]
