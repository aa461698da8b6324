"""Shared typed data models for sysctl_conf.

This package contains the tree and record dataclasses used across the parser,
schema, and validator modules to avoid circular imports.
"""

from .datatypes import (
    OBJECT_TYPE_NAME,
    Assignment,
    IgnoreLine,
    Leaf,
    MalformedLine,
    Node,
    SchemaLeaf,
    SchemaType,
    TypeMismatch,
    UndeclaredKey,
)

__all__ = [
    "OBJECT_TYPE_NAME",
    "Assignment",
    "IgnoreLine",
    "Leaf",
    "MalformedLine",
    "Node",
    "SchemaLeaf",
    "SchemaType",
    "TypeMismatch",
    "UndeclaredKey",
]
