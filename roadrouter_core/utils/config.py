"""Configuration utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type, TypeVar

import yaml

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="RouterConfig")


@dataclass
class RouterConfig:
    """Router configuration."""

    # Mount point stripped from request paths; None keeps the request's own
    base_path: Optional[str] = None

    # Root namespace for controller references
    namespace: str = ""

    # Method override
    method_override_header: str = "X-HTTP-Method-Override"
    override_methods: List[str] = field(default_factory=lambda: ["PUT", "DELETE", "PATCH"])

    # Dispatch
    quit_after_run: bool = False
    domain_delimiter: str = "."

    # Declarative routes, see register_routes()
    routes: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls: Type[T], data: Mapping[str, Any]) -> T:
        """Create config from dictionary."""
        # Filter to only valid fields
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_json(cls: Type[T], path: str) -> T:
        """Load config from JSON file."""
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_yaml(cls: Type[T], path: str) -> T:
        """Load config from YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_env(cls: Type[T], prefix: str = "ROUTER_") -> T:
        """Load config from environment variables."""
        return cls.from_dict(_env_values(prefix))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {}
        for field_name in self.__dataclass_fields__:
            result[field_name] = getattr(self, field_name)
        return result

    def merge(self, overrides: Mapping[str, Any]) -> "RouterConfig":
        """Merge with override values (overrides take precedence)."""
        data = self.to_dict()
        data.update(overrides)
        return type(self).from_dict(data)


def _env_values(prefix: str) -> Dict[str, Any]:
    data: Dict[str, Any] = {}

    for key, value in os.environ.items():
        if not key.startswith(prefix):
            continue
        config_key = key[len(prefix):].lower()

        # Type conversion
        if value.lower() in ("true", "false"):
            data[config_key] = value.lower() == "true"
        elif config_key == "override_methods":
            data[config_key] = [m.strip().upper() for m in value.split(",") if m.strip()]
        else:
            data[config_key] = value

    return data


def load_config(
    path: Optional[str] = None,
    env_prefix: str = "ROUTER_",
) -> RouterConfig:
    """Load configuration from multiple sources.

    Priority (highest to lowest):
    1. Environment variables
    2. Config file (if provided)
    3. Defaults
    """
    config = RouterConfig()

    # Load from file if provided
    if path:
        path_obj = Path(path)
        if path_obj.exists():
            if path.endswith(".json"):
                config = RouterConfig.from_json(path)
            elif path.endswith((".yaml", ".yml")):
                config = RouterConfig.from_yaml(path)
            else:
                logger.warning(f"Unknown config format: {path}")
        else:
            logger.warning(f"Config file not found: {path}")

    # Override with environment variables
    return config.merge(_env_values(env_prefix))


def register_routes(router: Any, entries: Iterable[Mapping[str, Any]]) -> int:
    """Register declarative route entries on a router.

    Each entry has a `handler` plus:
    - `method`: "GET" or "GET|POST" (default "GET"; ignored for not_found)
    - `pattern`: route pattern (default "/")
    - `phase`: "after" (default), "before" or "not_found"
    - optional `prefix`, `namespace` and `domain` scoping the entry

    Returns:
        Number of entries registered
    """
    count = 0

    for entry in entries:
        if "handler" not in entry:
            raise ValueError(f"Route entry without handler: {dict(entry)}")

        target = router
        if entry.get("domain"):
            target = target.domain(entry["domain"])
        if entry.get("prefix"):
            target = target.prefix(entry["prefix"])
        if entry.get("namespace"):
            target = target.ns(entry["namespace"])

        phase = entry.get("phase", "after")
        method = entry.get("method", "GET")
        pattern = entry.get("pattern", "/")

        if phase == "after":
            target.match(method, pattern, entry["handler"])
        elif phase == "before":
            target.before(method, pattern, entry["handler"])
        elif phase == "not_found":
            target.set404(entry["handler"])
        else:
            raise ValueError(f"Unknown route phase: {phase}")

        count += 1

    logger.debug(f"Registered {count} configured routes")
    return count


__all__ = [
    "RouterConfig",
    "load_config",
    "register_routes",
]
