"""Core datatypes shared across sysctl_conf modules.

Responsibilities:
- Represent parsed documents as a two-variant tree (`Leaf` | `Node`).
- Represent schema documents as the same tree shape with `SchemaLeaf` tips.
- Provide typed records for classified lines and validation violations.

Key types:
- `Leaf`, `SchemaLeaf`, `Node`, `SchemaType`, `Assignment`, `IgnoreLine`,
  `MalformedLine`, `UndeclaredKey`, and `TypeMismatch`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Union


OBJECT_TYPE_NAME = "object"


class SchemaType(str, Enum):
    """Primitive value types a schema may declare for a key."""

    STRING = "string"
    BOOL = "bool"
    INTEGER = "integer"
    FLOAT = "float"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Leaf:
    """A scalar config value at the tip of a key path.

    Attributes:
        text: Untyped value text, trimmed of surrounding whitespace.
    """

    text: str


@dataclass(frozen=True, slots=True)
class SchemaLeaf:
    """A declared type at the tip of a schema key path."""

    type: SchemaType


@dataclass(slots=True)
class Node:
    """A mapping from key segment to child value.

    The same class is used for config trees (`Leaf` tips) and schema trees
    (`SchemaLeaf` tips). Equality compares children by key, independent of
    insertion order.
    """

    children: dict[str, Value] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Value:
        return self.children[key]

    def __contains__(self, key: object) -> bool:
        return key in self.children

    def __iter__(self) -> Iterator[str]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def get(self, key: str) -> Value | None:
        """Return the direct child under `key`, or `None` when missing."""

        return self.children.get(key)

    def lookup(self, dotted_key: str) -> Value | None:
        """Return the value at a dotted key path, or `None` when the path is absent."""

        current: Value = self
        for segment in dotted_key.split("."):
            if not isinstance(current, Node):
                return None
            child = current.children.get(segment.strip())
            if child is None:
                return None
            current = child
        return current

    def to_dict(self) -> dict[str, object]:
        """Return a plain nested dict with strings at the tips.

        Schema tips are rendered as their canonical type names.
        """

        payload: dict[str, object] = {}
        for key in sorted(self.children):
            child = self.children[key]
            if isinstance(child, Node):
                payload[key] = child.to_dict()
            elif isinstance(child, SchemaLeaf):
                payload[key] = child.type.value
            else:
                payload[key] = child.text
        return payload

    def flatten(self) -> dict[str, Leaf | SchemaLeaf]:
        """Return every tip keyed by its dotted path, sorted by path."""

        flat: dict[str, Leaf | SchemaLeaf] = {}
        self._flatten_into(prefix="", out=flat)
        return dict(sorted(flat.items()))

    def _flatten_into(self, prefix: str, out: dict[str, Leaf | SchemaLeaf]) -> None:
        for key, child in self.children.items():
            path = f"{prefix}.{key}" if prefix else key
            if isinstance(child, Node):
                child._flatten_into(prefix=path, out=out)
            else:
                out[path] = child


Value = Union[Leaf, SchemaLeaf, Node]


@dataclass(frozen=True, slots=True)
class IgnoreLine:
    """A blank or comment line that contributes nothing to the tree."""

    line_number: int


@dataclass(frozen=True, slots=True)
class MalformedLine:
    """A non-blank, non-comment line without a `=` separator.

    Attributes:
        line_number: 1-based line number in the source document.
        ignore_failure: Whether the line carried the leading `-` marker.
    """

    line_number: int
    ignore_failure: bool = False


@dataclass(frozen=True, slots=True)
class Assignment:
    """A classified `key = value` line.

    Attributes:
        line_number: 1-based line number in the source document.
        key: Raw dotted key, trimmed.
        raw_value: Value text after the first `=`, trimmed.
        ignore_failure: Whether the line carried the leading `-` marker.
    """

    line_number: int
    key: str
    raw_value: str
    ignore_failure: bool = False


LineClass = Union[IgnoreLine, MalformedLine, Assignment]


@dataclass(frozen=True, slots=True)
class UndeclaredKey:
    """A config key path with no corresponding schema entry."""

    path: str

    def describe(self) -> str:
        """Return a one-line human-readable description."""

        return f"key `{self.path}` is not declared in schema"


@dataclass(frozen=True, slots=True)
class TypeMismatch:
    """A config value that does not conform to its declared type.

    Attributes:
        path: Dotted key path of the offending entry.
        expected: Declared schema type, or `"object"` for nested schema entries.
        actual: Raw config value, or `"object"` when the config holds nested keys.
    """

    path: str
    expected: SchemaType | str
    actual: str

    def describe(self) -> str:
        """Return a one-line human-readable description."""

        return (
            f"key `{self.path}` expected type `{self.expected}`, "
            f"got value `{self.actual}`"
        )


Violation = Union[UndeclaredKey, TypeMismatch]
