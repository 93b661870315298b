"""Validate command for checking wall plan files."""

from pathlib import Path
from typing import Annotated

import typer

from smartwall.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON wall plan to validate"),
    ],
) -> None:
    """Validate a wall plan file.

    Checks the file for JSON syntax errors, schema errors, out-of-range
    dimensions, modules that do not fit when the plan is replayed, and
    missing accessory pairs.

    Exit codes:
        0 - Plan is valid with no warnings
        1 - Plan has errors
        2 - Plan is valid but has warnings

    Example:
        smartwall validate living-room.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def _display_load_error(error: ConfigError) -> None:
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            typer.echo(
                f"    Line {line}, Column {column}: {detail.get('message')}",
                err=True,
            )
    elif error.error_type == "validation":
        for detail in error.details:
            typer.echo(f"  {detail.get('path')}: {detail.get('message')}", err=True)
            if detail.get("value") is not None:
                typer.echo(f"    Value: {detail['value']!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Wall plan is valid.")
