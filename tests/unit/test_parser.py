"""Unit tests for config and schema document parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from sysctl_conf.config import IgnoreFailurePolicy, ParserOptions
from sysctl_conf.errors import (
    ConflictingKeyError,
    MalformedKeyError,
    MalformedLineError,
    UnknownSchemaTypeError,
)
from sysctl_conf.models.datatypes import Assignment, Leaf, Node, SchemaLeaf, SchemaType
from sysctl_conf.parser import (
    iter_assignments,
    parse_file,
    parse_schema_file,
    parse_schema_text,
    parse_text,
)


_SKIP = ParserOptions(ignore_failure_policy=IgnoreFailurePolicy.SKIP)


def test_parse_text_builds_nested_tree() -> None:
    """Dotted keys should nest while plain keys stay at the root."""

    tree = parse_text(
        """
endpoint = localhost:3000
debug = true
log.file = /var/log/console.log
"""
    )

    assert tree.to_dict() == {
        "endpoint": "localhost:3000",
        "debug": "true",
        "log": {"file": "/var/log/console.log"},
    }


def test_parse_text_skips_comments_and_blank_lines() -> None:
    """Comment and blank lines should not produce entries."""

    tree = parse_text("# comment\n\n;also comment\nkey = val")

    assert tree == Node({"key": Leaf("val")})


def test_parse_text_skips_commented_out_assignment() -> None:
    """A `#`-prefixed assignment should not appear in the tree."""

    tree = parse_text(
        """
endpoint = localhost:3000
# debug = true
log.file = /var/log/console.log
log.name = default.log
"""
    )

    assert "debug" not in tree
    assert tree.lookup("log.name") == Leaf("default.log")


def test_parse_text_keeps_last_assignment() -> None:
    """Repeated keys should resolve to the later value."""

    assert parse_text("a = 1\na = 2") == Node({"a": Leaf("2")})


def test_parse_text_is_deterministic() -> None:
    """Parsing the same text twice should produce equal, independent trees."""

    text = "b.c = 1\na = x\nb.d = 2\n"

    first = parse_text(text)
    second = parse_text(text)

    assert first == second
    assert first is not second
    assert first["b"] is not second["b"]


def test_parse_text_handles_windows_line_endings() -> None:
    """Carriage returns should be trimmed with the rest of the line."""

    assert parse_text("a = 1\r\nb = 2\r\n").to_dict() == {"a": "1", "b": "2"}


def test_parse_text_reports_malformed_line_number() -> None:
    """A line without `=` should fail with its 1-based line number."""

    with pytest.raises(MalformedLineError) as exc_info:
        parse_text("this has no equals")

    assert exc_info.value.line_number == 1
    assert str(exc_info.value) == "line 1: missing `=` separator"


def test_parse_text_counts_comment_and_blank_lines() -> None:
    """Line numbers should account for skipped lines."""

    with pytest.raises(MalformedLineError) as exc_info:
        parse_text("# header\n\na = 1\nbroken\n")

    assert exc_info.value.line_number == 4


@pytest.mark.parametrize("text", [" = value", ". = x", "a..b = x", "a. = x"])
def test_parse_text_rejects_malformed_keys(text: str) -> None:
    """Empty keys and empty segments should fail with the line number attached."""

    with pytest.raises(MalformedKeyError) as exc_info:
        parse_text(f"ok = 1\n{text}")

    assert exc_info.value.line_number == 2


def test_parse_text_rejects_conflicting_keys() -> None:
    """A key used as both a scalar and a namespace should fail the parse."""

    with pytest.raises(ConflictingKeyError) as exc_info:
        parse_text("a = 1\na.b = 2")

    assert exc_info.value.line_number == 2
    assert exc_info.value.path == "a"


def test_parse_text_rejects_scalar_over_namespace() -> None:
    """Assigning a scalar where nested keys exist should fail the parse."""

    with pytest.raises(ConflictingKeyError) as exc_info:
        parse_text("log.file = x\nlog = y")

    assert exc_info.value.line_number == 2


def test_parse_text_accepts_ignore_failure_marker() -> None:
    """A `-`-marked line should be stored exactly like an unmarked one."""

    assert parse_text("-kernel.foo = bar") == parse_text("kernel.foo = bar")


def test_parse_text_strict_policy_keeps_marked_structural_errors_fatal() -> None:
    """Under the default policy, malformed marked lines still fail the parse."""

    with pytest.raises(MalformedKeyError) as exc_info:
        parse_text("-bad.key.. = x")

    assert exc_info.value.line_number == 1

    with pytest.raises(MalformedLineError):
        parse_text("-no separator here")


def test_parse_text_skip_policy_drops_failing_marked_lines() -> None:
    """Under the `SKIP` policy, failing marked lines are dropped and parsing continues."""

    tree = parse_text(
        "-bad.key.. = x\n-no separator\na = 1\n-a.b = 2\nc = 3\n",
        _SKIP,
    )

    assert tree == Node({"a": Leaf("1"), "c": Leaf("3")})


def test_parse_text_skip_policy_keeps_unmarked_errors_fatal() -> None:
    """The `SKIP` policy only applies to lines carrying the marker."""

    with pytest.raises(MalformedKeyError):
        parse_text("bad.key.. = x", _SKIP)


def test_iter_assignments_yields_classified_lines() -> None:
    """Assignments should be yielded in order with line numbers and markers."""

    assignments = list(iter_assignments("# c\na = 1\n-b.c = x=y\n"))

    assert assignments == [
        Assignment(line_number=2, key="a", raw_value="1", ignore_failure=False),
        Assignment(line_number=3, key="b.c", raw_value="x=y", ignore_failure=True),
    ]


def test_parse_schema_text_maps_type_tokens() -> None:
    """Schema values should become `SchemaLeaf` tips of the matching type."""

    schema = parse_schema_text(
        """
endpoint = string
debug = bool
log.file = string
retry = integer
ratio = NUMBER
"""
    )

    assert schema == Node(
        {
            "endpoint": SchemaLeaf(SchemaType.STRING),
            "debug": SchemaLeaf(SchemaType.BOOL),
            "log": Node({"file": SchemaLeaf(SchemaType.STRING)}),
            "retry": SchemaLeaf(SchemaType.INTEGER),
            "ratio": SchemaLeaf(SchemaType.FLOAT),
        }
    )


def test_parse_schema_text_rejects_unknown_type_token() -> None:
    """Unknown type spellings should fail with the token and line number."""

    with pytest.raises(UnknownSchemaTypeError) as exc_info:
        parse_schema_text("endpoint = string\nretry = list")

    assert exc_info.value.line_number == 2
    assert exc_info.value.token == "list"


def test_parse_schema_text_skip_policy_drops_marked_unknown_type() -> None:
    """A marked schema line with an unknown type is dropped under `SKIP`."""

    schema = parse_schema_text("-retry = list\nendpoint = string", _SKIP)

    assert schema == Node({"endpoint": SchemaLeaf(SchemaType.STRING)})


def test_parse_file_reads_config_and_schema(
    sample_config_path: Path, sample_schema_path: Path
) -> None:
    """File wrappers should read text and delegate to the text parsers."""

    config = parse_file(sample_config_path)
    schema = parse_schema_file(str(sample_schema_path))

    assert config.lookup("kernel.threshold") == Leaf("0.75")
    assert schema.lookup("log.name") == SchemaLeaf(SchemaType.STRING)


def test_parse_file_surfaces_missing_file_unchanged(tmp_path: Path) -> None:
    """Missing files should raise the OS error from file reading."""

    with pytest.raises(FileNotFoundError):
        parse_file(tmp_path / "missing.conf")


def test_parse_file_uses_configured_encoding(tmp_path: Path) -> None:
    """File wrappers should decode with the configured encoding."""

    path = tmp_path / "latin.conf"
    path.write_bytes("name = caf\xe9\n".encode("latin-1"))

    tree = parse_file(path, ParserOptions(encoding="latin-1"))

    assert tree == Node({"name": Leaf("caf\xe9")})
