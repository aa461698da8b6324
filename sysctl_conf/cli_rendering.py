"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for parsed trees,
schema violations, and command diagnostics.
"""

from __future__ import annotations

import json
from typing import NoReturn, Sequence

import typer

from .errors import CommandStageError, SchemaValidationError
from .models.datatypes import Leaf, Node, SchemaLeaf, Violation


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def exit_with_violations(command_name: str, exc: SchemaValidationError) -> NoReturn:
    """Print one line per schema violation and exit with code 1."""

    count = len(exc.violations)
    noun = "violation" if count == 1 else "violations"
    typer.secho(f"{command_name} failed: {count} schema {noun}", fg=typer.colors.RED, err=True)
    echo_violations(exc.violations)
    raise typer.Exit(code=1) from exc


def echo_violations(violations: Sequence[Violation]) -> None:
    """Print schema violations in their given (path-sorted) order."""

    for violation in violations:
        typer.echo(f"- {violation.describe()}")


def echo_tree(tree: Node) -> None:
    """Print a tree as indented JSON with sorted keys."""

    typer.echo(json.dumps(tree.to_dict(), indent=2, sort_keys=True))


def echo_flat_tree(tree: Node) -> None:
    """Print one `dotted.key = value` row per tip, sorted by key path."""

    for path, tip in tree.flatten().items():
        typer.echo(f"{path} = {_tip_text(tip)}")


def _tip_text(tip: Leaf | SchemaLeaf) -> str:
    if isinstance(tip, SchemaLeaf):
        return tip.type.value
    return tip.text
