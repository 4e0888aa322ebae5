"""Validate command for checking cut list configuration files.

This module provides the `validate` command that checks a JSON configuration
file for errors and warnings without computing a cut plan.
"""

from numbers import Real
from pathlib import Path
from typing import Annotated

import typer

from lumber_cuts.application.config import (
    ConfigError,
    ValidationError,
    ValidationResult,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a cut list configuration file.

    Checks the configuration file for:
    - JSON syntax errors
    - Schema validation errors (missing fields, negative lengths, etc.)
    - A margin that leaves no usable board length
    - Cuts that are longer than the usable board length
    - Advisories (unusual blade width, parts that span several boards)

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings

    Example:
        lumber-cuts validate bookshelf.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        result = validate_config(load_config(config_file))
    except ConfigError as e:
        result = ValidationResult(errors=_load_errors(e))

    _report(result)
    raise typer.Exit(code=result.exit_code)


def _load_errors(error: ConfigError) -> list[ValidationError]:
    """Turn a loading failure into validation errors for display."""
    if error.error_type == "json_parse":
        return [
            ValidationError(
                path=f"Line {d['line']}, Column {d['column']}",
                message=f"Invalid JSON syntax: {d['message']}",
            )
            for d in error.details
        ]
    if error.error_type == "validation":
        return [
            ValidationError(
                path=d["path"], message=d["message"], value=d["value"], part=d["part"]
            )
            for d in error.details
        ]
    return [ValidationError(path="(file)", message=error.message)]


def _describe_value(error: ValidationError) -> str | None:
    value = error.value
    if value is None or isinstance(value, (dict, list)):
        return None
    is_cut = "cuts" in error.path or error.path.startswith("miscellaneous")
    if is_cut and isinstance(value, Real) and not isinstance(value, bool):
        return f'Cut length: {value:g}"'
    return f"Value: {value!r}"


def _report(result: ValidationResult) -> None:
    if result.usable_length is not None:
        typer.echo(f'Usable length per board: {result.usable_length:g}"')
        typer.echo()

    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            value = _describe_value(error)
            if value:
                typer.echo(f"    {value}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    counts = f"{len(result.errors)} error(s), {len(result.warnings)} warning(s)"
    if result.errors:
        typer.echo(f"Validation failed: {counts}", err=True)
    elif result.request is not None:
        request = result.request
        typer.echo(
            f"{request.cut_count} cut(s) in {len(request.groups)} part(s)"
            + (" plus miscellaneous cuts" if request.ungrouped.lengths else "")
        )
        if result.warnings:
            typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
        else:
            typer.echo("Validation passed. Configuration is valid.")
