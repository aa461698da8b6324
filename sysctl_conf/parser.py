"""Config and schema document parsers.

Responsibilities:
- Drive line classification, key splitting, and tree insertion over a document.
- Attach 1-based line numbers to every structural error and fail fast.
- Apply the configured ignore-failure policy to `-`-marked lines.
- Read files for the `*_file` wrappers; `OSError` propagates unchanged.

Key public functions:
- `parse_text`, `parse_file`: build a config tree with `Leaf` tips.
- `parse_schema_text`, `parse_schema_file`: build a schema tree with `SchemaLeaf` tips.
- `iter_assignments`: yield the classified assignment lines of a document.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator

from loguru import logger

from .config import IgnoreFailurePolicy, ParserOptions
from .errors import MalformedLineError, ParseError
from .models.datatypes import Assignment, Leaf, MalformedLine, Node, SchemaLeaf
from .schema import parse_schema_type
from .text.keys import split_key
from .text.lines import classify_line
from .tree import insert


def iter_assignments(text: str, options: ParserOptions | None = None) -> Iterator[Assignment]:
    """Yield every assignment line of `text` in document order.

    Blank and comment lines are skipped. A malformed line raises
    `MalformedLineError` unless it is `-`-marked and the policy is `SKIP`.
    """

    resolved = _resolve_options(options)
    for line_number, line in enumerate(text.split("\n"), start=1):
        classified = classify_line(line, line_number)
        if isinstance(classified, Assignment):
            yield classified
        elif isinstance(classified, MalformedLine):
            error = MalformedLineError(line_number)
            if not _skips_failure(classified.ignore_failure, resolved):
                raise error
            logger.warning("Skipping ignore-failure line: {}", error)


def parse_text(text: str, options: ParserOptions | None = None) -> Node:
    """Parse a sysctl.conf-style document into a nested tree of `Leaf` values.

    Raises:
        MalformedLineError: A non-comment line has no `=` separator.
        MalformedKeyError: A key is empty or has an empty path segment.
        ConflictingKeyError: A key is used both as a value and as a namespace.
    """

    return _build_tree(text, _config_leaf, options, document="config")


def parse_file(path: str | Path, options: ParserOptions | None = None) -> Node:
    """Read and parse a config file. See `parse_text`."""

    resolved = _resolve_options(options)
    text = Path(path).read_text(encoding=resolved.encoding)
    return _build_tree(text, _config_leaf, resolved, document=str(path))


def parse_schema_text(text: str, options: ParserOptions | None = None) -> Node:
    """Parse a schema document into a nested tree of `SchemaLeaf` values.

    Raises the same errors as `parse_text`, plus `UnknownSchemaTypeError`
    for values that are not a recognized type spelling.
    """

    return _build_tree(text, _schema_leaf, options, document="schema")


def parse_schema_file(path: str | Path, options: ParserOptions | None = None) -> Node:
    """Read and parse a schema file. See `parse_schema_text`."""

    resolved = _resolve_options(options)
    text = Path(path).read_text(encoding=resolved.encoding)
    return _build_tree(text, _schema_leaf, resolved, document=str(path))


def _config_leaf(raw_value: str) -> Leaf:
    return Leaf(raw_value)


def _schema_leaf(raw_value: str) -> SchemaLeaf:
    return SchemaLeaf(parse_schema_type(raw_value))


def _build_tree(
    text: str,
    to_leaf: Callable[[str], Leaf | SchemaLeaf],
    options: ParserOptions | None,
    document: str,
) -> Node:
    """Build one tree from `text`, converting raw values with `to_leaf`."""

    resolved = _resolve_options(options)
    root = Node()
    assignment_count = 0
    for assignment in iter_assignments(text, resolved):
        try:
            path = split_key(assignment.key)
            leaf = to_leaf(assignment.raw_value)
            insert(root, path, leaf)
        except ParseError as exc:
            located = exc.at_line(assignment.line_number)
            if not _skips_failure(assignment.ignore_failure, resolved):
                raise located from exc
            logger.warning("Skipping ignore-failure line: {}", located)
            continue
        assignment_count += 1

    logger.debug(
        "Parsed {} document: assignments={} top_level_keys={}",
        document,
        assignment_count,
        len(root),
    )
    return root


def _skips_failure(ignore_failure: bool, options: ParserOptions) -> bool:
    return ignore_failure and options.ignore_failure_policy is IgnoreFailurePolicy.SKIP


def _resolve_options(options: ParserOptions | None) -> ParserOptions:
    if options is None:
        return ParserOptions()
    options.validate()
    return options
