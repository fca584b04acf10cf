"""Response - Sink for dispatch results.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Protocol

logger = logging.getLogger(__name__)


class ResponseSink(Protocol):
    """What the dispatcher writes to."""

    def begin(self, suppress_body: bool = False) -> None: ...

    def send(self, result: Any) -> None: ...

    def not_found(self) -> None: ...

    def finish(self) -> None: ...


@dataclass
class Response:
    """HTTP Response object.

    Handler results are converted on `send`:
    - None: nothing is emitted
    - str / bytes: body as is
    - dict / list: JSON body
    - (status, body[, headers]) tuples
    - Response instances: copied over
    """

    status: int = 200
    body: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)
    protocol: str = "HTTP/1.1"
    suppress_body: bool = False

    # Common status messages
    STATUS_MESSAGES = {
        200: "OK",
        201: "Created",
        204: "No Content",
        301: "Moved Permanently",
        302: "Found",
        304: "Not Modified",
        400: "Bad Request",
        401: "Unauthorized",
        403: "Forbidden",
        404: "Not Found",
        405: "Method Not Allowed",
        500: "Internal Server Error",
    }

    @property
    def status_message(self) -> str:
        """Get status message."""
        return self.STATUS_MESSAGES.get(self.status, "Unknown")

    @property
    def status_line(self) -> str:
        return f"{self.protocol} {self.status} {self.status_message}"

    def set_header(self, name: str, value: str) -> "Response":
        """Set header value."""
        self.headers[name] = value
        return self

    def begin(self, suppress_body: bool = False) -> None:
        """Start a dispatch cycle; HEAD requests suppress the body."""
        self.suppress_body = suppress_body

    def send(self, result: Any) -> None:
        """Emit a handler result."""
        if result is None:
            return

        if isinstance(result, Response):
            self.status = result.status
            self.headers.update(result.headers)
            self._write(result.body)
            return

        if isinstance(result, tuple):
            if not 1 <= len(result) <= 3 or not isinstance(result[0], int):
                raise ValueError(
                    f"Invalid result tuple: {result!r}: supported status[, body[, headers]]"
                )
            self.status = result[0]
            if len(result) > 2 and result[2]:
                self.headers.update(result[2])
            self.send(result[1] if len(result) > 1 else None)
            return

        if isinstance(result, (dict, list)):
            self.headers.setdefault("Content-Type", "application/json")
            self._write(json.dumps(result).encode())
        elif isinstance(result, bytes):
            self._write(result)
        else:
            self.headers.setdefault("Content-Type", "text/plain; charset=utf-8")
            self._write(str(result).encode())

    def not_found(self) -> None:
        """Emit the generic not-found response."""
        self.status = 404
        self.headers.setdefault("Content-Type", "text/plain; charset=utf-8")
        self._write(b"404 Not Found")

    def finish(self) -> None:
        """End the dispatch cycle, dropping the body if suppressed."""
        self.headers["Content-Length"] = str(len(self.body))
        if self.suppress_body:
            logger.debug(f"Discarding {len(self.body)} body bytes for HEAD request")
            self.body = b""

    def to_bytes(self) -> bytes:
        """Convert to raw HTTP response."""
        lines = [self.status_line]

        # Add Content-Length if not set
        if "Content-Length" not in self.headers:
            self.headers["Content-Length"] = str(len(self.body))

        for key, value in self.headers.items():
            lines.append(f"{key}: {value}")

        lines.append("")
        header_bytes = "\r\n".join(lines).encode()

        return header_bytes + b"\r\n" + self.body

    def _write(self, data: bytes) -> None:
        self.body += data


__all__ = [
    "Response",
    "ResponseSink",
]
