"""Scene I/O layer for bsptree.

This module handles reading and writing scene files. The tree itself is
never persisted; scenes are rebuilt into a tree by inserting their
polygons in order.

Key classes:
- Scene: Polygons plus an optional viewpoint
- SceneReader: Load scenes from JSON
- SceneWriter: Save scenes to JSON
"""

from bsptree.io.scene import Scene, SceneReader, SceneWriter

__all__ = [
    "Scene",
    "SceneReader",
    "SceneWriter",
]
