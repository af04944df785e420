# sfdx_manifest/cli/decorators/errors.py
"""Error handling decorator for CLI commands"""

from functools import wraps
from typing import Callable

import click

from ..utils.output import err_console, print_error
from ...api.exceptions import SfdxManifestError


def handle_errors(func: Callable) -> Callable:
    """Decorator that turns tool errors into a message and exit code 1

    Only SfdxManifestError is handled here; anything else propagates to
    ``main`` which reports it as unexpected.

    Args:
        func: Command function to decorate

    Returns:
        Decorated function
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()
        try:
            return func(*args, **kwargs)
        except SfdxManifestError as e:
            code = f" ({e.error_code})" if e.error_code else ""
            print_error(f"{e}{code}")
            if ctx.obj is not None and getattr(ctx.obj, "debug", False):
                err_console.print_exception()
            ctx.exit(1)

    return wrapper
