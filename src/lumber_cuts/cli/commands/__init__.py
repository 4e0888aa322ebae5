"""CLI command implementations for the lumber-cuts application.

This package contains subcommands for the lumber-cuts CLI, including:
- validate: Validate a configuration file
"""

from lumber_cuts.cli.commands.validate import validate_command

__all__ = ["validate_command"]
