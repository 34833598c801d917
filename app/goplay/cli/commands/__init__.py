"""CLI commands for goplay.

This package contains all subcommand implementations.
"""

from goplay.cli.commands import config, delete, listing, new

__all__ = ["config", "delete", "listing", "new"]
