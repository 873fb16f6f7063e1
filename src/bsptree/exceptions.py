"""Exception hierarchy for bsptree."""


class BSPTreeError(Exception):
    """Base exception for all bsptree errors."""

    pass


class GeometryError(BSPTreeError):
    """Errors in geometric calculations or polygon data."""

    pass


class DegenerateEdgeError(GeometryError):
    """Leading edge of a polygon has zero length, so no plane can be derived."""

    def __init__(self, polygon_id: int, x: float, y: float) -> None:
        self.polygon_id = polygon_id
        self.x = x
        self.y = y
        super().__init__(
            f"Polygon {polygon_id} has a zero-length leading edge at ({x}, {y})"
        )


class InvalidPolygonError(GeometryError):
    """Polygon has fewer than three vertices."""

    def __init__(self, polygon_id: int, vertex_count: int) -> None:
        self.polygon_id = polygon_id
        self.vertex_count = vertex_count
        super().__init__(
            f"Polygon {polygon_id} has {vertex_count} vertices, at least 3 required"
        )


class InvalidPolygonIdError(GeometryError):
    """Polygon identifier falls in the range reserved for split fragments."""

    def __init__(self, polygon_id: int) -> None:
        self.polygon_id = polygon_id
        super().__init__(
            f"Polygon id {polygon_id} is negative; negative ids are reserved "
            "for split fragments"
        )


class DegenerateFragmentError(BSPTreeError):
    """Splitting a polygon did not produce usable fragments."""

    pass


class SplitDepthExceededError(DegenerateFragmentError):
    """A polygon kept spanning the same plane after repeated splits."""

    def __init__(self, polygon_id: int, depth: int) -> None:
        self.polygon_id = polygon_id
        self.depth = depth
        super().__init__(
            f"Polygon {polygon_id} exceeded split depth {depth} during insertion"
        )


class SceneError(BSPTreeError):
    """Errors related to scene files."""

    pass


class SceneLoadError(SceneError):
    """Error reading a scene file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load scene '{path}': {reason}")


class SceneFormatError(SceneError):
    """Scene file content does not match the expected layout."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid scene format '{path}': {details}")
