"""Engine error types."""


class GridSnakeError(Exception):
    pass


class ConfigurationError(GridSnakeError, ValueError):
    """Unknown map, food or speed id, or a map that cannot resolve a move."""


class FreeCellsExhausted(GridSnakeError, RuntimeError):
    """The grid has no cell left for food."""

    def __init__(self, map_id: str, occupied: int):
        super().__init__(f"no free cell for food on map {map_id!r} ({occupied} cells occupied)")
        self.map_id = map_id
        self.occupied = occupied
