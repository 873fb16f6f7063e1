"""Scene generation helpers.

Provides the demonstration scene and random axis-aligned squares used to
populate a tree interactively.
"""

import random

from bsptree.config import SceneConfig
from bsptree.domain import Point, Polygon

PALETTE: tuple[str, ...] = ("#ef4444", "#3b82f6", "#10b981", "#f59e0b", "#8b5cf6")


def square(polygon_id: int, x: float, y: float, size: float, color: str | None = None) -> Polygon:
    """Build an axis-aligned square with its leading edge along the bottom side.

    Args:
        polygon_id: Identifier of the square
        x: Left edge
        y: Bottom edge
        size: Side length
        color: Display colour

    Returns:
        Square polygon with vertices in edge order
    """
    return Polygon(
        id=polygon_id,
        points=(
            Point(x, y),
            Point(x + size, y),
            Point(x + size, y + size),
            Point(x, y + size),
        ),
        color=color,
    )


def sample_scene() -> list[Polygon]:
    """Get the four-square demonstration scene."""
    return [
        square(1, 100.0, 200.0, 100.0, PALETTE[0]),
        square(2, 250.0, 150.0, 100.0, PALETTE[1]),
        square(3, 150.0, 300.0, 100.0, PALETTE[2]),
        square(4, 300.0, 250.0, 100.0, PALETTE[3]),
    ]


def default_viewpoint(config: SceneConfig | None = None) -> Point:
    """Get the viewpoint scenes are viewed from unless one is given."""
    config = config or SceneConfig()
    return Point(config.viewpoint_x, config.viewpoint_y)


def random_square(
    rng: random.Random,
    polygon_id: int,
    config: SceneConfig | None = None,
) -> Polygon:
    """Create a randomly placed, randomly coloured square.

    Args:
        rng: Random source, injected so scenes can be reproduced
        polygon_id: Identifier of the new square
        config: Placement bounds (defaults if None)

    Returns:
        New square polygon
    """
    config = config or SceneConfig()
    x = rng.random() * config.origin_span_x + config.origin_min_x
    y = rng.random() * config.origin_span_y + config.origin_min_y
    size = rng.random() * config.size_span + config.min_size
    return square(polygon_id, x, y, size, rng.choice(PALETTE))


def random_scene(
    count: int,
    seed: int | None = None,
    config: SceneConfig | None = None,
    first_id: int = 1,
) -> list[Polygon]:
    """Create ``count`` random squares with consecutive identifiers."""
    rng = random.Random(seed)
    return [random_square(rng, first_id + i, config) for i in range(count)]
