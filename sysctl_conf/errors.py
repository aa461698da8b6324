"""Domain exceptions for parsing, schema loading, and validation diagnostics.

Responsibilities:
- Report structural/syntax failures with the 1-based line number of the offending line.
- Report validation failures as an ordered collection of per-path violations.

Key types:
- `ParseError` and its subclasses: raised while turning text into a tree.
- `SchemaValidationError`: raised when a config tree does not conform to a schema.
- `OptionsError`: raised for invalid parser option values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .models.datatypes import Violation


class SysctlConfError(Exception):
    """Base class for every error raised by this package."""


class ParseError(SysctlConfError, ValueError):
    """Raised when a document cannot be parsed into a tree."""

    def __init__(self, *, detail: str, line_number: int | None = None) -> None:
        """Initialize a line-scoped parse error."""

        self.detail = detail
        self.line_number = line_number
        super().__init__(self._render())

    def _render(self) -> str:
        if self.line_number is None:
            return self.detail
        return f"line {self.line_number}: {self.detail}"

    def at_line(self, line_number: int) -> ParseError:
        """Return a copy of this error bound to `line_number`."""

        raise NotImplementedError


class MalformedLineError(ParseError):
    """Raised for a non-blank, non-comment line without a `=` separator."""

    def __init__(self, line_number: int) -> None:
        super().__init__(detail="missing `=` separator", line_number=line_number)

    def at_line(self, line_number: int) -> MalformedLineError:
        return MalformedLineError(line_number)


class MalformedKeyError(ParseError):
    """Raised for an empty key or a key with an empty dot-separated segment."""

    def __init__(self, key: str, line_number: int | None = None) -> None:
        self.key = key
        if not key:
            detail = "empty key"
        else:
            detail = f"malformed key `{key}`: empty path segment"
        super().__init__(detail=detail, line_number=line_number)

    def at_line(self, line_number: int) -> MalformedKeyError:
        return MalformedKeyError(self.key, line_number=line_number)


class ConflictingKeyError(ParseError):
    """Raised when one key is used both as a scalar and as a parent of nested keys."""

    def __init__(self, path: str, line_number: int | None = None) -> None:
        self.path = path
        super().__init__(
            detail=f"key `{path}` is used both as a value and as a namespace",
            line_number=line_number,
        )

    def at_line(self, line_number: int) -> ConflictingKeyError:
        return ConflictingKeyError(self.path, line_number=line_number)


class UnknownSchemaTypeError(ParseError):
    """Raised when a schema value is not a recognized type spelling."""

    def __init__(self, token: str, line_number: int | None = None) -> None:
        self.token = token
        super().__init__(
            detail=(
                f"unknown schema type `{token}`; expected one of "
                "`string`, `bool`, `boolean`, `integer`, `int`, `float`, `number`"
            ),
            line_number=line_number,
        )

    def at_line(self, line_number: int) -> UnknownSchemaTypeError:
        return UnknownSchemaTypeError(self.token, line_number=line_number)


class SchemaValidationError(SysctlConfError):
    """Raised when a parsed config tree violates its schema.

    Attributes:
        violations: Every violation found, ordered by dotted key path.
    """

    def __init__(self, violations: Sequence[Violation]) -> None:
        self.violations = tuple(violations)
        lines = [violation.describe() for violation in self.violations]
        count = len(lines)
        noun = "violation" if count == 1 else "violations"
        super().__init__(f"{count} schema {noun}: " + "; ".join(lines))


class OptionsError(SysctlConfError, ValueError):
    """Raised for invalid parser option values."""


class CommandStageError(SysctlConfError):
    """Raised by CLI commands when a specific stage (read, parse, validate) fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
