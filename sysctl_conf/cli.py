"""Command-line interface for sysctl_conf.

Responsibilities:
- Expose user-facing commands to print a parsed tree and to validate a config.
- Convert CLI arguments into `ParserOptions` and map failures to diagnostics.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_flat_tree,
    echo_tree,
    exit_with_command_error,
    exit_with_violations,
)
from .config import IgnoreFailurePolicy, OptionsLoader, ParserOptions
from .errors import CommandStageError, OptionsError, ParseError, SchemaValidationError
from .models.datatypes import Node
from .parser import parse_file, parse_schema_file
from .parsing import parse_permissive_boolean
from .telemetry.logger import RunLogger
from .validator import validate

app = typer.Typer(
    name="sysctl-conf",
    no_args_is_help=True,
    help="Parse and validate sysctl.conf-style files.",
)

_VERBOSE_ENV_KEY = "SYSCTL_CONF_VERBOSE"

IgnoreFailurePolicyOption = Annotated[
    str | None,
    typer.Option(
        "--ignore-failure-policy",
        help=(
            "Handling of failing `-`-marked lines: `strict` (fail the parse) "
            "or `skip` (drop the line). Defaults to $SYSCTL_CONF_IGNORE_FAILURE_POLICY or `strict`."
        ),
    ),
]
EncodingOption = Annotated[
    str | None,
    typer.Option("--encoding", help="Input file encoding (default `utf-8`)."),
]
VerboseOption = Annotated[
    bool | None,
    typer.Option(
        "--verbose/--quiet",
        help="Print phase logs and parser debug records to stderr.",
    ),
]


def _resolve_options(ignore_failure_policy: str | None, encoding: str | None) -> ParserOptions:
    """Resolve parser options from CLI values and environment, mapping failures to stage errors."""

    try:
        return OptionsLoader.resolve(
            ignore_failure_policy=ignore_failure_policy,
            encoding=encoding,
        )
    except OptionsError as exc:
        raise CommandStageError(
            stage="config",
            detail=str(exc),
            hint="Use `--ignore-failure-policy strict|skip` and a valid `--encoding`.",
        ) from exc


def _resolve_verbose(verbose: bool | None) -> bool:
    """Resolve verbosity with precedence: CLI flag > environment > off."""

    if verbose is not None:
        return verbose
    return parse_permissive_boolean(os.environ.get(_VERBOSE_ENV_KEY)) or False


def _load_tree(
    path: Path,
    options: ParserOptions,
    run_logger: RunLogger,
    *,
    as_schema: bool = False,
) -> Node:
    """Read and parse one config or schema file, mapping failures to stage errors."""

    stage = "parse-schema" if as_schema else "parse"
    loader = parse_schema_file if as_schema else parse_file
    run_logger.log_stage_start(stage, file=path)
    try:
        tree = loader(path, options)
    except FileNotFoundError as exc:
        run_logger.log_stage_failure(stage, type(exc).__name__)
        raise CommandStageError(
            stage="read",
            detail=f"File not found: `{path}`.",
            hint="Pass an existing file path.",
        ) from exc
    except OSError as exc:
        run_logger.log_stage_failure(stage, type(exc).__name__)
        raise CommandStageError(
            stage="read",
            detail=f"Failed to read `{path}`: {exc}",
            hint="Verify file permissions and `--encoding`.",
        ) from exc
    except UnicodeDecodeError as exc:
        run_logger.log_stage_failure(stage, type(exc).__name__)
        raise CommandStageError(
            stage="read",
            detail=f"Failed to decode `{path}` as `{options.encoding}`: {exc}",
            hint="Pass the file's encoding via `--encoding`.",
        ) from exc
    except ParseError as exc:
        run_logger.log_stage_failure(stage, type(exc).__name__)
        raise CommandStageError(
            stage=stage,
            detail=f"Invalid file `{path}`: {exc}",
            hint=(
                "Prefix the line with `-` and pass `--ignore-failure-policy skip` to drop it."
                if options.ignore_failure_policy is IgnoreFailurePolicy.STRICT
                else None
            ),
        ) from exc
    run_logger.log_stage_complete(stage, file=path, keys=len(tree.flatten()))
    return tree


@app.command("parse")
def parse_command(
    config_file: Annotated[Path, typer.Argument(help="Path to a sysctl.conf-style file.")],
    flat: Annotated[
        bool,
        typer.Option("--flat", help="Print `dotted.key = value` rows instead of a nested tree."),
    ] = False,
    as_schema: Annotated[
        bool,
        typer.Option("--schema", help="Parse the file as a schema (values are type names)."),
    ] = False,
    ignore_failure_policy: IgnoreFailurePolicyOption = None,
    encoding: EncodingOption = None,
    verbose: VerboseOption = None,
) -> None:
    """Parse a file and print the resulting tree."""

    try:
        run_logger = RunLogger(verbose=_resolve_verbose(verbose))
        options = _resolve_options(ignore_failure_policy, encoding)
        tree = _load_tree(config_file, options, run_logger, as_schema=as_schema)
    except Exception as exc:
        exit_with_command_error("parse", exc)

    if flat:
        echo_flat_tree(tree)
    else:
        echo_tree(tree)


@app.command("validate")
def validate_command(
    config_file: Annotated[Path, typer.Argument(help="Path to the config file to validate.")],
    schema_file: Annotated[
        Path,
        typer.Option("--schema", help="Path to the schema file (`key = type` per line)."),
    ],
    ignore_failure_policy: IgnoreFailurePolicyOption = None,
    encoding: EncodingOption = None,
    verbose: VerboseOption = None,
) -> None:
    """Validate a config file against a schema file."""

    try:
        run_logger = RunLogger(verbose=_resolve_verbose(verbose))
        options = _resolve_options(ignore_failure_policy, encoding)
        schema = _load_tree(schema_file, options, run_logger, as_schema=True)
        config = _load_tree(config_file, options, run_logger)
        run_logger.log_stage_start("validate", file=config_file)
        validate(config, schema)
    except SchemaValidationError as exc:
        run_logger.log_stage_failure("validate", type(exc).__name__)
        exit_with_violations("validate", exc)
    except Exception as exc:
        exit_with_command_error("validate", exc)

    run_logger.log_stage_complete("validate", file=config_file)
    typer.echo(f"OK: `{config_file}` conforms to `{schema_file}`")


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
