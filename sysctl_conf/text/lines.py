"""Line classification for sysctl.conf-style documents.

Responsibilities:
- Skip blank and comment (`#`, `;`) lines.
- Strip the leading `-` ignore-failure marker and flag it.
- Split candidate assignments on the first `=` only.
"""

from __future__ import annotations

from ..models.datatypes import Assignment, IgnoreLine, LineClass, MalformedLine


_COMMENT_PREFIXES = ("#", ";")
_IGNORE_FAILURE_MARKER = "-"
_SEPARATOR = "="


def classify_line(line: str, line_number: int) -> LineClass:
    """Classify one raw line as ignorable, an assignment, or malformed.

    Args:
        line: Raw line text without its trailing newline.
        line_number: 1-based line number used in the returned record.
    """

    stripped = line.strip()
    if not stripped or stripped.startswith(_COMMENT_PREFIXES):
        return IgnoreLine(line_number)

    ignore_failure = stripped.startswith(_IGNORE_FAILURE_MARKER)
    if ignore_failure:
        stripped = stripped[len(_IGNORE_FAILURE_MARKER) :].strip()
        if not stripped:
            return IgnoreLine(line_number)

    key, separator, raw_value = stripped.partition(_SEPARATOR)
    if not separator:
        return MalformedLine(line_number, ignore_failure=ignore_failure)

    return Assignment(
        line_number=line_number,
        key=key.strip(),
        raw_value=raw_value.strip(),
        ignore_failure=ignore_failure,
    )
