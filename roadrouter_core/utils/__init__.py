"""Utils module - Utility functions."""

from roadrouter_core.utils.config import (
    RouterConfig,
    load_config,
    register_routes,
)
from roadrouter_core.utils.helpers import (
    environ_headers,
    find_header,
    normalize_path,
    strip_base_path,
)

__all__ = [
    "RouterConfig",
    "load_config",
    "register_routes",
    "environ_headers",
    "find_header",
    "normalize_path",
    "strip_base_path",
]
