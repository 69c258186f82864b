"""Template evaluation for label values.

A label value such as ``"$category"`` or ``"Author: ${meta.author}"`` is filled
in from the task data when the task is loaded. Dotted names walk into nested
mappings, and numeric parts index into lists.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

# $name, $a.b.0, or ${a.b}; names start with a letter or underscore, so "$5" is text
PLACEHOLDER_PATTERN = re.compile(r"\$\{([A-Za-z_][\w.]*)\}|\$([A-Za-z_](?:[\w.]*\w)?)")


class TemplateError(Exception):
    """Exception raised when a placeholder can't be resolved from task data."""

    pass


def _lookup(data: Any, path: str) -> Any:
    """Resolve a dotted path against nested mappings and sequences.

    Args:
        data: Task data.
        path: Dotted variable name, e.g. ``meta.tags.0``.

    Returns:
        The value found at the path.

    Raises:
        TemplateError: If any part of the path is missing.
    """
    current = data
    for part in path.split("."):
        if isinstance(current, Mapping):
            if part not in current:
                raise TemplateError(f"Variable '{path}' not found in task data")
            current = current[part]
        elif isinstance(current, Sequence) and not isinstance(current, str) and part.isdigit():
            index = int(part)
            if index >= len(current):
                raise TemplateError(f"Index {index} out of range in variable '{path}'")
            current = current[index]
        else:
            raise TemplateError(f"Variable '{path}' not found in task data")
    return current


def run_template(template: str | None, data: Mapping[str, Any] | None) -> str:
    """Substitute task data into a template.

    Args:
        template: Template text. None or empty gives an empty string.
        data: Task data. None is treated as an empty mapping.

    Returns:
        The template with every placeholder replaced. Non-string values are
        rendered with str(), None as an empty string.

    Raises:
        TemplateError: If a placeholder refers to data that doesn't exist.

    Example:
        >>> run_template("$kind: ${meta.name}", {"kind": "Brand", "meta": {"name": "Acme"}})
        'Brand: Acme'
    """
    if not template:
        return ""
    data = data or {}

    def replace(match: re.Match[str]) -> str:
        value = _lookup(data, match.group(1) or match.group(2))
        return "" if value is None else str(value)

    return PLACEHOLDER_PATTERN.sub(replace, template)
