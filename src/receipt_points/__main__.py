# SPDX-License-Identifier: MPL-2.0
"""
Receipt Points - Main entry point for the CLI.

This module provides the command-line interface for the Receipt Points package.
"""

from receipt_points.cli.main import cli

if __name__ == "__main__":
    cli()
