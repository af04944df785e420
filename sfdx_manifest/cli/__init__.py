"""Command line interface for sfdx-manifest"""

from .main import cli, main

__all__ = ["cli", "main"]
