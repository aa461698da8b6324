"""Schema type tokens and per-value type conformance checks.

Responsibilities:
- Map schema type spellings onto `SchemaType`.
- Decide whether one raw config value conforms to a declared type.
"""

from __future__ import annotations

import re

from .errors import UnknownSchemaTypeError
from .models.datatypes import SchemaType


_TYPE_TOKENS: dict[str, SchemaType] = {
    "string": SchemaType.STRING,
    "bool": SchemaType.BOOL,
    "boolean": SchemaType.BOOL,
    "integer": SchemaType.INTEGER,
    "int": SchemaType.INTEGER,
    "float": SchemaType.FLOAT,
    "number": SchemaType.FLOAT,
}
_BOOLEAN_TOKENS = frozenset({"true", "false"})
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_schema_type(token: str) -> SchemaType:
    """Return the `SchemaType` for a type spelling, case-insensitively.

    Raises:
        UnknownSchemaTypeError: If the token is not a recognized spelling.
    """

    schema_type = _TYPE_TOKENS.get(token.strip().lower())
    if schema_type is None:
        raise UnknownSchemaTypeError(token)
    return schema_type


def check_value(schema_type: SchemaType, raw: str) -> bool:
    """Return whether `raw` conforms to `schema_type`.

    Booleans accept only `true`/`false` in any letter case. Integers are
    base-10 with an optional sign. Floats accept integer forms, an optional
    fraction, and an optional exponent; `inf` and `nan` are rejected.
    """

    value = raw.strip()
    if schema_type is SchemaType.STRING:
        return True
    if schema_type is SchemaType.BOOL:
        return value.lower() in _BOOLEAN_TOKENS
    if schema_type is SchemaType.INTEGER:
        return _INTEGER_RE.fullmatch(value) is not None
    if schema_type is SchemaType.FLOAT:
        return _FLOAT_RE.fullmatch(value) is not None
    raise ValueError(f"Unsupported schema type `{schema_type}`.")
