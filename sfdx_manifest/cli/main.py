# sfdx_manifest/cli/main.py
"""Main CLI entry point for sfdx-manifest"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import click
from rich.logging import RichHandler

from .utils.output import err_console
from ..__version__ import __version__
from ..api.query import MetadataQuery
from ..constants import APP_NAME, ENV_LOG_LEVEL, ENV_PROJECT_ROOT, LOG_FORMAT

# Import all commands
from .commands import (
    scan,
    tree,
    manifest,
    doctor,
)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.getLevelName(os.environ.get(ENV_LOG_LEVEL, "WARNING").upper())
        if not isinstance(level, int):
            level = logging.WARNING

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=err_console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ]
    )
    logging.getLogger("sfdx_manifest").setLevel(level)


class Context:
    """CLI context object with lazy project initialization

    The query interface, and with it the project root lookup, is only
    created when a command asks for it.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """Initialize CLI context"""
        self.project_root_option = project_root
        self.verbose: bool = False
        self.debug: bool = False
        self._query: Optional[MetadataQuery] = None

    @property
    def query(self) -> MetadataQuery:
        """Get query interface (lazy loading)"""
        if self._query is None:
            self._query = MetadataQuery(self.project_root_option)
            if self.debug:
                err_console.print(f"[dim]Project root: {self._query.project_root}[/dim]")
        return self._query


@click.group(name=APP_NAME)
@click.version_option(__version__, prog_name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.option('--project-root', type=click.Path(exists=True, file_okay=False, path_type=Path),
              envvar=ENV_PROJECT_ROOT,
              help='SFDX project root (default: nearest directory with sfdx-project.json)')
@click.pass_context
def cli(ctx, verbose, debug, quiet, project_root):
    """SFDX Manifest - Discover project metadata and build package.xml

    Scans the package directories declared in sfdx-project.json, lists
    the metadata components found there and renders any selection of
    them as a package.xml for the Salesforce CLI.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    # Create context with lazy initialization
    ctx.obj = Context(project_root)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug


# Register commands
cli.add_command(scan.scan)
cli.add_command(tree.tree)
cli.add_command(manifest.manifest)
cli.add_command(doctor.doctor)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        err_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        err_console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            err_console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
