"""Shared parsing helpers for option and environment value normalization."""

from __future__ import annotations

from typing import Iterable


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean flag token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_required_choice(value: str, field_name: str, choices: Iterable[str]) -> str:
    """Parse a required option value that must be one of a fixed set of tokens.

    Matching is case-insensitive; the lowercase token is returned.

    Raises:
        ValueError: If the token is not one of `choices`.
    """

    allowed = sorted(choices)
    token = (normalize_optional_string(value) or "").lower()
    if token in allowed:
        return token

    supported = ", ".join(f"`{choice}`" for choice in allowed)
    raise ValueError(f"`{field_name}` must be one of {supported}; got `{value}`.")
