"""Request - Request metadata consumed by the dispatcher.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Protocol
from urllib.parse import quote

from roadrouter_core.utils.helpers import environ_headers, find_header, strip_base_path


class RequestSource(Protocol):
    """What the dispatcher reads from a request."""

    @property
    def method(self) -> str: ...

    @property
    def path(self) -> str: ...

    @property
    def host(self) -> Optional[str]: ...

    @property
    def base_path(self) -> str: ...

    def header(self, name: str) -> Optional[str]: ...


@dataclass
class Request:
    """HTTP Request metadata.

    `uri` is the raw request target, query string included. `path` is the
    routable path: base path and query removed, percent-decoded, with a
    leading slash and no trailing slash.
    """

    method: str
    uri: str = "/"
    headers: Dict[str, str] = field(default_factory=dict)
    base_path: str = "/"
    protocol: str = "HTTP/1.1"

    @property
    def path(self) -> str:
        return strip_base_path(self.uri, self.base_path)

    @property
    def host(self) -> Optional[str]:
        """Host header, or None when missing or empty."""
        return self.header("Host") or None

    def header(self, name: str) -> Optional[str]:
        """Get header value (case-insensitive)."""
        return find_header(self.headers, name)

    @classmethod
    def from_raw(cls, data: bytes, base_path: str = "/") -> "Request":
        """Parse request from raw HTTP data (request line and headers)."""
        lines = data.split(b"\r\n")

        # Parse request line
        parts = lines[0].decode("latin-1").split(" ")
        method = parts[0]
        uri = parts[1] if len(parts) > 1 else "/"
        protocol = parts[2] if len(parts) > 2 else "HTTP/1.1"

        # Parse headers
        headers = {}
        for line in lines[1:]:
            if line == b"":
                break
            if b":" in line:
                key, value = line.decode("latin-1").split(":", 1)
                headers[key.strip()] = value.strip()

        return cls(
            method=method,
            uri=uri,
            headers=headers,
            base_path=base_path,
            protocol=protocol,
        )

    @classmethod
    def from_environ(cls, environ: Mapping[str, Any]) -> "Request":
        """Build a request from a WSGI environ.

        The mount point (SCRIPT_NAME) becomes the base path.
        """
        script_name = environ.get("SCRIPT_NAME", "")
        uri = environ.get("REQUEST_URI") or environ.get("RAW_URI")
        if not uri:
            uri = quote(script_name + environ.get("PATH_INFO", ""), encoding="latin-1")
            query = environ.get("QUERY_STRING")
            if query:
                uri += "?" + query

        return cls(
            method=environ.get("REQUEST_METHOD", "GET"),
            uri=uri,
            headers=environ_headers(environ),
            base_path=script_name.rstrip("/") + "/",
            protocol=environ.get("SERVER_PROTOCOL", "HTTP/1.1"),
        )


__all__ = [
    "Request",
    "RequestSource",
]
