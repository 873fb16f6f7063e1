"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables, tree diagrams, and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from bsptree.core import BSPTree
from bsptree.domain import BSPNode, Point, Polygon
from bsptree.utils import TreeStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

SIDE_STYLES = {"root": "bold blue", "front": "green", "back": "red"}


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]bsptree[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_scene_info(source: str, polygon_count: int, viewpoint: Point) -> None:
    """Print where the scene came from and what it contains.

    Args:
        source: Scene file path or a label for the built-in scene
        polygon_count: Number of polygons in the scene
        viewpoint: Viewpoint used for ordering
    """
    line = Text("  ")
    line.append(source)
    console.print(line)
    console.print(
        f"  {polygon_count} polygons {SYM_DOT} viewpoint ({viewpoint.x:g}, {viewpoint.y:g})"
    )


def print_rejected(rejected: list[tuple[int, str]]) -> None:
    """Print polygons the tree refused to insert."""
    for polygon_id, reason in rejected:
        console.print(f"  [yellow]{SYM_ERR}[/yellow] polygon {polygon_id}: {reason}")


def _origin_label(polygon: Polygon) -> str:
    if polygon.source_id is None or polygon.source_id == polygon.id:
        return ""
    return str(polygon.source_id)


def print_order(order: list[Polygon]) -> None:
    """Print the painter's order as a table, first drawn first.

    Args:
        order: Polygons in render order
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("id", justify="right")
    table.add_column("from", justify="right")
    table.add_column("vertices", justify="right")
    table.add_column("color")

    for index, polygon in enumerate(order, start=1):
        color = polygon.color or ""
        swatch = Text(color, style=color) if color.startswith("#") else Text(color)
        table.add_row(
            str(index),
            str(polygon.id),
            _origin_label(polygon),
            str(len(polygon.points)),
            swatch,
        )

    console.print(table)


def print_stats(stats: TreeStats) -> None:
    """Print tree statistics."""
    console.print(f"  Height              {stats.height}")
    console.print(f"  Nodes               {stats.node_count}")
    console.print(f"  Polygons stored     {stats.polygon_count}")
    console.print(f"  Polygons inserted   {stats.inserted_count}")
    console.print(f"  Splits              {stats.split_count}")
    if stats.discarded_fragments:
        console.print(f"  Discarded fragments {stats.discarded_fragments}")


def _fmt(value: float) -> str:
    text = f"{value:.1f}"
    return "0.0" if text == "-0.0" else text


def node_label(node: BSPNode, side: str) -> Text:
    """Label a node with its polygon count and normal, as drawn in diagrams."""
    normal = node.partition.normal
    ids = ", ".join(str(p.id) for p in node.polygons)
    label = Text(f"{side} ", style=SIDE_STYLES.get(side, ""))
    label.append(f"P{len(node.polygons)} ", style="bold")
    label.append(f"({_fmt(normal.x)},{_fmt(normal.y)})", style="dim")
    label.append(f" [{ids}]")
    return label


def build_tree_diagram(tree: BSPTree) -> Tree:
    """Build a rich Tree mirroring the BSP tree, front child listed first."""
    diagram = Tree(Text("BSP tree", style="bold"))
    # Parent rich node for each depth of the pre-order walk
    parents: list[Tree] = [diagram]
    for node, depth, side in tree.walk():
        del parents[depth + 1 :]
        branch = parents[depth].add(node_label(node, side))
        parents.append(branch)
    return diagram


def print_tree_diagram(tree: BSPTree) -> None:
    """Print the tree structure."""
    if tree.is_empty:
        console.print("  (empty tree)")
        return
    console.print(build_tree_diagram(tree))


def print_success(message: str) -> None:
    """Print a success line."""
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
