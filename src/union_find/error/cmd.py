"""Error handling shared by CLI commands."""

import functools
import logging
from typing import Callable

import click
from rich.console import Console

from union_find.error.exceptions import UnionFindError

console = Console()
logger = logging.getLogger(__name__)


def handle_command_errors(func: Callable) -> Callable:
    """Report expected failures as a red one-line message and abort.

    Click's own usage errors are re-raised untouched so click can format them.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            raise
        except (FileNotFoundError, ValueError, UnionFindError) as e:
            console.print(f"[red]Error:[/red] {e}", highlight=False)
            raise click.Abort()
        except Exception as e:
            logger.debug("Unhandled exception in %s", func.__name__, exc_info=True)
            console.print(f"[red]Unexpected error:[/red] {e}", highlight=False)
            raise click.Abort()

    return wrapper
