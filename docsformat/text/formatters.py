"""Formatting helpers for titles, identifiers, and display text.

Responsibilities:
- Capitalize the first character of free-form text.
- Convert titles and identifiers to kebab-case for slugs and anchors.
- Truncate text to a fixed display width with a trailing ellipsis.

All helpers are pure functions over `str` values and keep no state.
"""

from __future__ import annotations

import re

from ..errors import FormatterInputError

ELLIPSIS = "..."

_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_SEPARATOR_RUN = re.compile(r"[\s_]+")


def capitalize_first(value: str) -> str:
    """Return `value` with its first character uppercased.

    Characters whose uppercase form spans several code points (e.g. `ß`)
    are left unchanged so the result always has the input length.
    """

    if not value:
        return value
    first = value[0].upper()
    if len(first) != 1:
        return value
    return first + value[1:]


def to_kebab_case(value: str) -> str:
    """Convert camelCase, PascalCase, spaced, or snake_case text to kebab-case.

    Examples:
        >>> to_kebab_case("HelloWorld_FooBar")
        'hello-world-foo-bar'
    """

    # Case boundaries must be found before lowercasing.
    hyphenated = _CASE_BOUNDARY.sub(r"\1-\2", value)
    return _SEPARATOR_RUN.sub("-", hyphenated).lower()


def truncate(value: str, max_length: int) -> str:
    """Truncate `value` so the result, ellipsis included, fits `max_length`.

    Args:
        value: Text to shorten.
        max_length: Display budget in characters.

    Returns:
        `value` unchanged when it already fits. Otherwise the leading
        `max_length - 3` characters followed by `...`. Budgets below three
        leave room only for part of the ellipsis marker.

    Raises:
        FormatterInputError: If `max_length` is negative.
    """

    if max_length < 0:
        raise FormatterInputError(
            operation="truncate",
            detail=f"`max_length` must be a non-negative integer, got {max_length}.",
        )
    if len(value) <= max_length:
        return value
    if max_length < len(ELLIPSIS):
        return ELLIPSIS[:max_length]
    return value[: max_length - len(ELLIPSIS)] + ELLIPSIS
