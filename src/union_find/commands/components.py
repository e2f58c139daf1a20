"""Components command for grouping connected pairs."""

import logging
from pathlib import Path

import click
import pandas as pd
from rich.console import Console
from rich.table import Table

from union_find.core.config import UnionStrategy, load_config
from union_find.core.forest import DisjointSetForest
from union_find.error.cmd import handle_command_errors

console = Console()
logger = logging.getLogger(__name__)


def _element_key(element: object) -> str | None:
    """Normalise a cell to an element key, or None for a blank cell."""
    if pd.isna(element):
        return None
    key = str(element).strip()
    return key or None


def build_forest(
    pairs: pd.DataFrame, forest: DisjointSetForest
) -> dict[str, int]:
    """
    Union every pair of elements into `forest`.

    Cells are compared as stripped strings, so read the file with
    ``dtype=str`` to keep numeric IDs from being coerced per column.

    Args:
        pairs: DataFrame of connected pairs (columns left/right, or the
               first two columns)
        forest: Forest to populate

    Returns:
        Dictionary mapping element -> handle
    """
    if len(pairs.columns) < 2:
        raise ValueError("Pairs file needs at least two columns")

    # Support both named and positional columns
    left_col = "left" if "left" in pairs.columns else pairs.columns[0]
    right_col = "right" if "right" in pairs.columns else pairs.columns[1]

    handles: dict[str, int] = {}
    for left, right in zip(pairs[left_col], pairs[right_col]):
        keys = [_element_key(left), _element_key(right)]
        for key in keys:
            if key is not None and key not in handles:
                handles[key] = forest.make_set(key)
        if None in keys:
            logger.warning("Skipping incomplete pair (%s, %s)", left, right)
            continue
        forest.union(handles[keys[0]], handles[keys[1]])

    return handles


def _print_components(forest: DisjointSetForest, output: str | None) -> None:
    groups = forest.groups()
    table = Table(title="Connected Components")
    table.add_column("Representative", style="cyan")
    table.add_column("Size", justify="right", style="green")
    table.add_column("Members")

    ordered = sorted(groups.items(), key=lambda item: (-len(item[1]), forest.value(item[0])))
    for root, members in ordered:
        table.add_row(
            forest.value(root),
            str(len(members)),
            ", ".join(forest.value(member) for member in members),
        )

    console.print(table)
    console.print(f"[dim]Elements: {len(forest)}, groups: {forest.num_groups()}[/dim]")

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        rows = [
            {"element": forest.value(handle), "group": forest.value(forest.find(handle))}
            for handle in forest
        ]
        pd.DataFrame(rows, columns=["element", "group"]).to_csv(output_path, index=False)
        console.print(f"[green]Saved groups to:[/green] {output_path}")


@click.command()
@click.argument("pairs_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON configuration file",
)
@click.option(
    "--union-by",
    type=click.Choice([strategy.value for strategy in UnionStrategy]),
    help="Root selection strategy (overrides config)",
)
@click.option(
    "--path-compression/--no-path-compression",
    default=None,
    help="Compress paths during find (overrides config)",
)
@click.option(
    "--no-header",
    is_flag=True,
    help="Treat the first row as a pair instead of a header",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    help="Output CSV file mapping each element to its group",
)
@handle_command_errors
def components(
    pairs_file: str,
    config_path: str | None,
    union_by: str | None,
    path_compression: bool | None,
    no_header: bool,
    output: str | None,
):
    """Group elements connected by the pairs in a CSV file.

    PAIRS_FILE: CSV with one connected pair per row. The first row is read
    as a header (left/right, or any two names) unless --no-header is given.
    """
    config = load_config(Path(config_path) if config_path else None)
    if union_by is not None:
        config.union_by = UnionStrategy(union_by)
    if path_compression is not None:
        config.path_compression = path_compression

    package_logger = logging.getLogger("union_find")
    previous_level = package_logger.level
    if config.verbose:
        package_logger.setLevel(logging.DEBUG)

    try:
        console.print(f"[bold blue]Grouping pairs from:[/bold blue] {pairs_file}")

        pairs = pd.read_csv(pairs_file, dtype=str, header=None if no_header else "infer")
        forest: DisjointSetForest[str] = DisjointSetForest(config)
        build_forest(pairs, forest)
        _print_components(forest, output)
    finally:
        package_logger.setLevel(previous_level)

    console.print("[bold green]✓[/bold green] Components computed!")
