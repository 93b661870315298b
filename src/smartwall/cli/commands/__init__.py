"""CLI command implementations for the smartwall application.

This package contains subcommands for the smartwall CLI, including:
- validate: Validate a wall plan file
"""

from smartwall.cli.commands.validate import validate_command

__all__ = ["validate_command"]
