"""CLI entry point for the union-find tool."""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from union_find.commands import chain, components

console = Console()


@click.group()
@click.version_option(version="0.1.0", prog_name="union-find")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, verbose: bool):
    """Disjoint-Set Inspection Tool.

    Group connected elements and inspect union-find chain depths.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


# Register commands
main.add_command(components.components)
main.add_command(chain.chain)


if __name__ == "__main__":
    main()
