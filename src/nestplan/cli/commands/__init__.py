"""CLI subcommands for nestplan.

- validate: Validate a planning job file
"""

from nestplan.cli.commands.validate import (
    display_load_error,
    display_validation_result,
    validate_command,
)

__all__ = ["display_load_error", "display_validation_result", "validate_command"]
