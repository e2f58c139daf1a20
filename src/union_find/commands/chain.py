"""Chain command for measuring worst-case find depth."""

import click
from rich.console import Console
from rich.table import Table

from union_find.core.config import ForestConfig, UnionStrategy
from union_find.core.forest import DisjointSetForest
from union_find.core.node import Node
from union_find.error.cmd import handle_command_errors

console = Console()


def build_node_chain(length: int) -> list[Node[int]]:
    """Build `length` nodes where node i+1 is unioned under node i.

    The last node in the returned list is the deepest one.
    """
    nodes = [Node.make_set(i) for i in range(length)]
    for parent, child in zip(nodes, nodes[1:]):
        parent.union(child)
    return nodes


def build_forest_chain(length: int, config: ForestConfig) -> DisjointSetForest[int]:
    """Build a forest by unioning each new element's set into the previous one."""
    forest: DisjointSetForest[int] = DisjointSetForest(config)
    handles = [forest.make_set(i) for i in range(length)]
    for previous, current in zip(handles, handles[1:]):
        forest.union(current, previous)
    return forest


@click.command()
@click.argument("length", type=click.IntRange(1))
@click.option(
    "--union-by",
    type=click.Choice([strategy.value for strategy in UnionStrategy]),
    default=UnionStrategy.NONE.value,
    help="Root selection strategy for the forest (default: none)",
)
@click.option(
    "--path-compression",
    is_flag=True,
    help="Compress paths during forest finds",
)
@handle_command_errors
def chain(length: int, union_by: str, path_compression: bool):
    """Measure find cost on a chain built by one-directional unions.

    LENGTH: Number of elements in the chain
    """
    config = ForestConfig(union_by=UnionStrategy(union_by), path_compression=path_compression)

    nodes = build_node_chain(length)
    node_depth = nodes[-1].depth()

    forest = build_forest_chain(length, config)
    forest.dereferences = 0
    forest.find(0)
    forest_depth = forest.dereferences

    table = Table(title=f"Find Cost for Chain of {length}")
    table.add_column("Structure", style="cyan")
    table.add_column("Dereferences", justify="right", style="green")
    table.add_row("node", str(node_depth))
    table.add_row(f"forest ({config.union_by.value})", str(forest_depth))
    console.print(table)
