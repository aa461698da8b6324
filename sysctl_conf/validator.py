"""Validation of parsed config trees against schema trees.

Responsibilities:
- Walk a config tree in lock-step with a schema tree, in sorted key order.
- Collect every undeclared key and type mismatch instead of stopping early.
- Raise one `SchemaValidationError` carrying all violations.

Keys declared in the schema but absent from the config are not violations.
"""

from __future__ import annotations

from loguru import logger

from .errors import SchemaValidationError
from .models.datatypes import (
    OBJECT_TYPE_NAME,
    Leaf,
    Node,
    SchemaLeaf,
    TypeMismatch,
    UndeclaredKey,
    Violation,
)
from .schema import check_value


def find_violations(config: Node, schema: Node) -> list[Violation]:
    """Return every schema violation in `config`, ordered by dotted key path."""

    violations: list[Violation] = []
    _walk(config, schema, prefix="", out=violations)
    return violations


def validate(config: Node, schema: Node) -> None:
    """Validate `config` against `schema`.

    Raises:
        SchemaValidationError: If any config key is undeclared or any value
            does not conform to its declared type.
    """

    violations = find_violations(config, schema)
    if violations:
        logger.debug("Schema validation failed: violations={}", len(violations))
        raise SchemaValidationError(violations)
    logger.debug("Schema validation passed: keys={}", len(config.flatten()))


def _walk(config: Node, schema: Node, prefix: str, out: list[Violation]) -> None:
    for key in sorted(config.children):
        path = f"{prefix}.{key}" if prefix else key
        value = config.children[key]
        declared = schema.children.get(key)

        if declared is None:
            out.append(UndeclaredKey(path))
        elif isinstance(declared, Node):
            if isinstance(value, Node):
                _walk(value, declared, prefix=path, out=out)
            else:
                out.append(
                    TypeMismatch(path, expected=OBJECT_TYPE_NAME, actual=_leaf_text(value))
                )
        elif isinstance(declared, SchemaLeaf):
            if isinstance(value, Node):
                out.append(TypeMismatch(path, expected=declared.type, actual=OBJECT_TYPE_NAME))
            elif not check_value(declared.type, _leaf_text(value)):
                out.append(TypeMismatch(path, expected=declared.type, actual=_leaf_text(value)))
        else:
            raise TypeError(f"Schema entry `{path}` is not a schema tree value: {declared!r}.")


def _leaf_text(value: object) -> str:
    if not isinstance(value, Leaf):
        raise TypeError(f"Config entry is not a config tree value: {value!r}.")
    return value.text
