"""Helper utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional
from urllib.parse import unquote


def normalize_path(path: str) -> str:
    """Normalize URL path: single leading slash, no trailing slash."""
    return "/" + path.strip("/")


def strip_base_path(uri: str, base_path: str) -> str:
    """Remove the mount point from a request URI.

    The query string is dropped and the remainder percent-decoded.
    """
    uri = uri.split("?", 1)[0]

    if base_path and uri.startswith(base_path):
        uri = uri[len(base_path):]
    elif base_path and uri == base_path.rstrip("/"):
        uri = ""

    return normalize_path(unquote(uri))


def find_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Get header value (case-insensitive)."""
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


def environ_headers(environ: Mapping[str, Any]) -> Dict[str, str]:
    """Rebuild HTTP headers from a WSGI/CGI environ.

    HTTP_X_HTTP_METHOD_OVERRIDE becomes X-Http-Method-Override.
    """
    headers = {}

    for name, value in environ.items():
        if name.startswith("HTTP_"):
            key = name[5:]
        elif name in ("CONTENT_TYPE", "CONTENT_LENGTH"):
            key = name
        else:
            continue

        header = "-".join(part.capitalize() for part in key.split("_"))
        headers[header] = value

    return headers


__all__ = [
    "environ_headers",
    "find_header",
    "normalize_path",
    "strip_base_path",
]
