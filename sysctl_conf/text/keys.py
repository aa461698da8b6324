"""Dotted key splitting into tree path segments."""

from __future__ import annotations

from ..errors import MalformedKeyError


def split_key(key: str) -> tuple[str, ...]:
    """Split a dotted key into trimmed, non-empty path segments.

    Raises:
        MalformedKeyError: If the key is empty or any segment is empty
            (leading, trailing, or consecutive dots).
    """

    if not key.strip():
        raise MalformedKeyError(key.strip())

    segments = tuple(segment.strip() for segment in key.split("."))
    if any(not segment for segment in segments):
        raise MalformedKeyError(key)
    return segments


def join_key(segments: tuple[str, ...] | list[str]) -> str:
    """Join path segments back into a dotted key."""

    return ".".join(segments)
