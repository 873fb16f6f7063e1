"""Scene file reading and writing.

A scene file is JSON holding the polygons to insert and, optionally, the
viewpoint to render from:

    {
        "viewpoint": {"x": 250, "y": 450},
        "polygons": [
            {"id": 1, "points": [{"x": 0, "y": 0}, ...], "color": "#ef4444"}
        ]
    }
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from bsptree.domain import Point, Polygon
from bsptree.exceptions import SceneFormatError, SceneLoadError


@dataclass
class Scene:
    """Polygons in insertion order plus an optional viewpoint."""

    polygons: list[Polygon] = field(default_factory=list)
    viewpoint: Point | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"polygons": [p.to_dict() for p in self.polygons]}
        if self.viewpoint is not None:
            data["viewpoint"] = self.viewpoint.to_dict()
        return data


class SceneReader:
    """Loads scenes from JSON files.

    Example:
        scene = SceneReader(Path("scene.json")).load()
        tree.insert_many(scene.polygons)
    """

    def __init__(self, scene_path: Path) -> None:
        self._scene_path = scene_path

    def load(self) -> Scene:
        """Read and parse the scene file.

        Returns:
            Parsed scene

        Raises:
            SceneLoadError: If the file cannot be read or is not valid JSON
            SceneFormatError: If the JSON does not describe a scene
        """
        path = str(self._scene_path)
        try:
            text = self._scene_path.read_text(encoding="utf-8")
            data = json.loads(text)
        except OSError as e:
            raise SceneLoadError(path, e.strerror or str(e)) from e
        except json.JSONDecodeError as e:
            raise SceneLoadError(path, f"invalid JSON: {e.msg} (line {e.lineno})") from e

        return self.parse(data, path)

    @staticmethod
    def parse(data: Any, source: str = "<memory>") -> Scene:
        """Build a scene from already decoded JSON data."""
        if not isinstance(data, dict):
            raise SceneFormatError(source, "top level must be an object")

        raw_polygons = data.get("polygons")
        if not isinstance(raw_polygons, list):
            raise SceneFormatError(source, "'polygons' must be a list")

        try:
            polygons = [Polygon.from_dict(item) for item in raw_polygons]
            viewpoint = (
                Point.from_dict(data["viewpoint"])
                if data.get("viewpoint") is not None
                else None
            )
        except (KeyError, TypeError, ValueError) as e:
            raise SceneFormatError(source, f"malformed entry: {e!r}") from e

        return Scene(polygons=polygons, viewpoint=viewpoint)


class SceneWriter:
    """Saves scenes as JSON files."""

    def __init__(self, scene_path: Path) -> None:
        self._scene_path = scene_path

    def save(self, scene: Scene) -> Path:
        """Write the scene, creating parent directories as needed.

        Returns:
            Path written to
        """
        self._scene_path.parent.mkdir(parents=True, exist_ok=True)
        self._scene_path.write_text(
            json.dumps(scene.to_dict(), indent=2) + "\n", encoding="utf-8"
        )
        return self._scene_path
