"""Unit tests for shared option parsing helpers."""

import pytest

from sysctl_conf.parsing import (
    normalize_optional_string,
    parse_permissive_boolean,
    parse_required_choice,
)


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None
    assert normalize_optional_string("  value  ") == "value"


@pytest.mark.parametrize(
    ("token", "expected"),
    [("TrUe", True), ("  ON ", True), ("1", True), ("FALSE", False), (" oFf ", False), ("0", False)],
)
def test_parse_permissive_boolean_accepts_mixed_case_tokens(token: str, expected: bool) -> None:
    """Permissive parsing should accept valid flag tokens case-insensitively."""

    assert parse_permissive_boolean(token) is expected


@pytest.mark.parametrize("value", [None, "", "maybe", "2"])
def test_parse_permissive_boolean_returns_none_for_invalid_tokens(value: object) -> None:
    """Permissive parsing should return `None` for invalid or blank inputs."""

    assert parse_permissive_boolean(value) is None


def test_parse_required_choice_normalizes_and_rejects() -> None:
    """Choice parsing should lowercase valid tokens and list choices on failure."""

    assert parse_required_choice(" Skip ", "policy", ["strict", "skip"]) == "skip"

    with pytest.raises(ValueError, match=r"`policy` must be one of `skip`, `strict`; got `x`\."):
        parse_required_choice("x", "policy", ["strict", "skip"])
