"""Nested tree construction from key paths.

Responsibilities:
- Insert a tip value at a key path, creating intermediate nodes on demand.
- Apply last-write-wins for repeated scalar keys.
- Reject keys used both as a scalar and as a namespace.
"""

from __future__ import annotations

from typing import Sequence

from .errors import ConflictingKeyError
from .models.datatypes import Leaf, Node, SchemaLeaf
from .text.keys import join_key


def insert(root: Node, path: Sequence[str], value: Leaf | SchemaLeaf) -> None:
    """Insert `value` at `path` below `root`, mutating `root` in place.

    Raises:
        ConflictingKeyError: If a non-final segment already holds a tip value,
            or the final segment already holds nested keys.
    """

    current = root
    for depth, segment in enumerate(path[:-1]):
        child = current.children.get(segment)
        if child is None:
            child = Node()
            current.children[segment] = child
        elif not isinstance(child, Node):
            raise ConflictingKeyError(join_key(list(path[: depth + 1])))
        current = child

    final = path[-1]
    if isinstance(current.children.get(final), Node):
        raise ConflictingKeyError(join_key(list(path)))
    current.children[final] = value
