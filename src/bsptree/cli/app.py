"""CLI application entry point for bsptree.

This module provides the main CLI interface using Typer.
"""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from bsptree import __version__
from bsptree.cli.output import (
    console,
    print_error,
    print_header,
    print_order,
    print_rejected,
    print_scene_info,
    print_stats,
    print_step,
    print_success,
    print_tree_diagram,
)
from bsptree.config import BSPSettings, LoggingConfig, TreeConfig
from bsptree.core import BSPTree, default_viewpoint, random_scene, sample_scene
from bsptree.domain import Point
from bsptree.exceptions import BSPTreeError
from bsptree.io import Scene, SceneReader, SceneWriter
from bsptree.utils import TreeLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="bsptree",
    help="Build 2D BSP trees over polygon scenes and print painter's-algorithm render orders.",
    add_completion=False,
    no_args_is_help=True,
)

SceneArgument = Annotated[
    Path | None,
    typer.Argument(
        help="Scene JSON file (default: built-in sample scene)",
        show_default=False,
    ),
]
EpsilonOption = Annotated[
    float,
    typer.Option(
        "--epsilon",
        "-e",
        help="Tolerance band around partition planes, in world units",
        min=0.0,
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]


@dataclass
class BuiltScene:
    """A tree built from a scene, with what it took to build it."""

    tree: BSPTree
    scene: Scene
    source: str
    logger: TreeLogger

    @property
    def rejected(self) -> list[tuple[int, str]]:
        return self.logger.rejected


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]bsptree[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Build 2D BSP trees and compute painter's-algorithm render orders."""


def _settings(
    epsilon: float, log_file: Path | None, log_level: str
) -> BSPSettings:
    try:
        return BSPSettings(
            tree=TreeConfig(epsilon=epsilon),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValidationError as e:
        raise typer.BadParameter(str(e)) from e


def _load_scene(scene_path: Path | None) -> tuple[Scene, str]:
    if scene_path is None:
        return Scene(polygons=sample_scene()), "built-in sample scene"

    if not scene_path.is_file():
        raise typer.BadParameter(
            f"Scene file not found: {scene_path}", param_hint="SCENE"
        )
    return SceneReader(scene_path).load(), str(scene_path)


def _build(scene_path: Path | None, settings: BSPSettings, quiet: bool) -> BuiltScene:
    """Load a scene and insert its polygons into a new tree.

    Polygons the tree refuses are logged and skipped; the rest of the scene
    is still built.
    """
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    tree_logger = TreeLogger(logger)

    scene, source = _load_scene(scene_path)
    tree = BSPTree(settings.tree)

    for polygon in scene.polygons:
        try:
            tree.insert(polygon)
        except BSPTreeError as e:
            tree_logger.log_rejected(polygon.id, e)
            continue
        tree_logger.log_insert(polygon.id, tree.count_nodes())

    tree_logger.log_stats(tree.stats())
    return BuiltScene(tree=tree, scene=scene, source=source, logger=tree_logger)


def _run(action: Callable[[], None]) -> None:
    """Run a command body, turning library errors into clean exits."""
    try:
        action()
    except BSPTreeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Could not write file: {e}")
        raise typer.Exit(code=1)


@app.command()
def order(
    scene_path: SceneArgument = None,
    view_x: Annotated[
        float | None,
        typer.Option("--view-x", "-x", help="Viewpoint X (default: scene or 250)"),
    ] = None,
    view_y: Annotated[
        float | None,
        typer.Option("--view-y", "-y", help="Viewpoint Y (default: scene or 450)"),
    ] = None,
    epsilon: EpsilonOption = 0.1,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Print the back-to-front render order of a scene for a viewpoint.

    Example:
        bsptree order scene.json --view-x 5 --view-y 50
    """
    settings = _settings(epsilon, log_file, log_level)

    def action() -> None:
        built = _build(scene_path, settings, quiet)
        viewpoint = built.scene.viewpoint or default_viewpoint(settings.scene)
        viewpoint = Point(
            view_x if view_x is not None else viewpoint.x,
            view_y if view_y is not None else viewpoint.y,
        )
        polygons = built.tree.painter_order(viewpoint)
        built.logger.log_order(viewpoint.to_tuple(), [p.id for p in polygons])

        if quiet:
            console.print(" ".join(str(p.id) for p in polygons))
            return

        print_header(__version__)
        print_scene_info(built.source, len(built.scene.polygons), viewpoint)
        print_rejected(built.rejected)
        print_step("Render order (first drawn first)")
        print_order(polygons)

    _run(action)


@app.command()
def stats(
    scene_path: SceneArgument = None,
    epsilon: EpsilonOption = 0.1,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Print height, node and polygon counts of the tree built from a scene."""
    settings = _settings(epsilon, log_file, log_level)

    def action() -> None:
        built = _build(scene_path, settings, quiet)
        tree_stats = built.tree.stats()

        if quiet:
            console.print(
                f"height={tree_stats.height} nodes={tree_stats.node_count} "
                f"polygons={tree_stats.polygon_count}"
            )
            return

        print_header(__version__)
        print_scene_info(
            built.source,
            len(built.scene.polygons),
            built.scene.viewpoint or default_viewpoint(settings.scene),
        )
        print_rejected(built.rejected)
        print_step("Tree")
        print_stats(tree_stats)

    _run(action)


@app.command()
def tree(
    scene_path: SceneArgument = None,
    epsilon: EpsilonOption = 0.1,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Print the structure of the tree built from a scene.

    Each node shows which side of its parent it sits on, how many polygons
    lie on its plane, its plane normal and the ids of those polygons.
    """
    settings = _settings(epsilon, log_file, log_level)

    def action() -> None:
        built = _build(scene_path, settings, quiet)
        if not quiet:
            print_header(__version__)
            print_rejected(built.rejected)
        print_tree_diagram(built.tree)

    _run(action)


@app.command()
def sample(
    output: Annotated[
        Path,
        typer.Argument(help="Where to write the scene JSON", show_default=False),
    ],
    random_count: Annotated[
        int,
        typer.Option(
            "--random",
            "-r",
            help="Write this many random squares instead of the sample scene",
            min=0,
        ),
    ] = 0,
    seed: Annotated[
        int | None,
        typer.Option("--seed", "-s", help="Random seed for reproducible scenes"),
    ] = None,
    quiet: QuietOption = False,
) -> None:
    """Write the sample scene, or a random one, to a JSON file."""
    settings = BSPSettings()

    def action() -> None:
        if random_count > 0:
            polygons = random_scene(random_count, seed=seed, config=settings.scene)
        else:
            polygons = sample_scene()
        scene = Scene(polygons=polygons, viewpoint=default_viewpoint(settings.scene))
        path = SceneWriter(output).save(scene)
        if not quiet:
            print_success(f"Wrote {len(polygons)} polygons to {path}")

    _run(action)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
