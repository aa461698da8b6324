"""Top-level package for sysctl_conf.

This package parses sysctl.conf-style text into nested trees and validates
parsed trees against schemas written in the same grammar. The main entry
points are `parse_text`, `parse_schema_text`, and `validate`.

Library log records go through `loguru` and are disabled by default; call
`loguru.logger.enable("sysctl_conf")` to receive them.
"""

from loguru import logger

from .config import IgnoreFailurePolicy, OptionsLoader, ParserOptions
from .errors import (
    ConflictingKeyError,
    MalformedKeyError,
    MalformedLineError,
    OptionsError,
    ParseError,
    SchemaValidationError,
    SysctlConfError,
    UnknownSchemaTypeError,
)
from .models.datatypes import (
    Assignment,
    Leaf,
    Node,
    SchemaLeaf,
    SchemaType,
    TypeMismatch,
    UndeclaredKey,
)
from .parser import (
    iter_assignments,
    parse_file,
    parse_schema_file,
    parse_schema_text,
    parse_text,
)
from .schema import check_value
from .validator import find_violations, validate

logger.disable("sysctl_conf")

__all__ = [
    "Assignment",
    "ConflictingKeyError",
    "IgnoreFailurePolicy",
    "Leaf",
    "MalformedKeyError",
    "MalformedLineError",
    "Node",
    "OptionsError",
    "OptionsLoader",
    "ParseError",
    "ParserOptions",
    "SchemaLeaf",
    "SchemaType",
    "SchemaValidationError",
    "SysctlConfError",
    "TypeMismatch",
    "UndeclaredKey",
    "UnknownSchemaTypeError",
    "__version__",
    "check_value",
    "find_violations",
    "iter_assignments",
    "parse_file",
    "parse_schema_file",
    "parse_schema_text",
    "parse_text",
    "validate",
]

__version__ = "0.1.0"
