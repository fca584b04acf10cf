"""Route Pattern - Compile route templates into path matchers.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

_PLACEHOLDER = re.compile(r"/\{([A-Za-z_][A-Za-z0-9_]*)\}")

_cache: Dict[str, "CompiledPattern"] = {}


class PatternError(ValueError):
    """Raised for route templates that cannot be compiled."""


@dataclass(frozen=True)
class CompiledPattern:
    """A route template compiled to an anchored regex.

    Supports:
    - Literal segments: /users
    - Named placeholders: /users/{id}
    """

    template: str
    regex: re.Pattern = field(repr=False)
    param_names: Tuple[str, ...] = ()

    def match(self, path: str) -> Optional[List[str]]:
        """Match a concrete path.

        Returns:
            One value per placeholder in declaration order, or None
        """
        match = self.regex.fullmatch(path)
        if match is None:
            return None

        params = []
        count = len(self.param_names)
        for index in range(1, count + 1):
            value = match.group(index)
            # Bound each capture by where the next one starts
            if index < count:
                value = value[: match.start(index + 1) - match.start(index)]
            params.append(value.strip("/"))

        return params


def compile_pattern(template: str) -> CompiledPattern:
    """Compile a route template (cached).

    Raises:
        PatternError: If braces do not form /{identifier} placeholders
    """
    compiled = _cache.get(template)
    if compiled is not None:
        return compiled

    param_names: List[str] = []
    regex_parts: List[str] = []
    position = 0

    for placeholder in _PLACEHOLDER.finditer(template):
        regex_parts.append(_literal(template, position, placeholder.start()))
        regex_parts.append("/(.+?)")
        param_names.append(placeholder.group(1))
        position = placeholder.end()

    regex_parts.append(_literal(template, position, len(template)))

    compiled = CompiledPattern(
        template=template,
        regex=re.compile("".join(regex_parts)),
        param_names=tuple(param_names),
    )
    _cache[template] = compiled
    return compiled


def _literal(template: str, start: int, end: int) -> str:
    text = template[start:end]
    if "{" in text or "}" in text:
        raise PatternError(f"Malformed placeholder in route pattern: {template!r}")
    return re.escape(text)


__all__ = [
    "CompiledPattern",
    "PatternError",
    "compile_pattern",
]
