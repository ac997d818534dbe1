"""Map definitions and obstacle layouts."""

import logging
from dataclasses import dataclass
from typing import Callable

from .constants import GRID_SIZE, INITIAL_LENGTH, START_INSET
from .errors import ConfigurationError
from .grid import Cell

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapConfig:
    name: str
    description: str
    walls: bool = True
    wrap: bool = False
    speed_increase: bool = False


MAPS: dict[str, MapConfig] = {
    "classic": MapConfig("Classic", "Walls on every side, nothing in the way"),
    "arena": MapConfig("Open Arena", "No walls, leave one edge to enter the other", walls=False, wrap=True),
    "speed": MapConfig("Speed Challenge", "Every bite makes the snake faster", speed_increase=True),
    "maze": MapConfig("Maze", "Short walls scattered like a labyrinth"),
    "spiral": MapConfig("Spiral", "Two nested rings with a single way in"),
    "tunnels": MapConfig("Tunnels", "Long bars with gaps, edges wrap around", walls=False, wrap=True),
    "cross": MapConfig("Cross", "A plus sign splits the board"),
    "fortress": MapConfig("Fortress", "A walled keep with four gates and corner towers"),
    "scatter": MapConfig("Scatter", "Rocks dotted across the field"),
    "corridor": MapConfig("Corridor", "Two long walls with a doorway each"),
    "pinwheel": MapConfig("Pinwheel", "Four hooked arms around the centre"),
    "slalom": MapConfig("Slalom", "Weave between alternating poles"),
    "box": MapConfig("Obstacle Box", "A fenced ring with gates, edges wrap", walls=False, wrap=True),
}


def _segments(segments) -> set[Cell]:
    cells = set()
    for (x1, y1), (x2, y2) in segments:
        if x1 == x2:
            for y in range(min(y1, y2), max(y1, y2) + 1):
                cells.add((x1, y))
        else:
            for x in range(min(x1, x2), max(x1, x2) + 1):
                cells.add((x, y1))
    return cells


def _block(x: int, y: int, w: int, h: int) -> set[Cell]:
    return {(x + dx, y + dy) for dx in range(w) for dy in range(h)}


def _open() -> set[Cell]:
    return set()


def _maze() -> set[Cell]:
    return _segments([
        ((4, 4), (9, 4)), ((12, 4), (15, 4)), ((4, 5), (4, 8)),
        ((15, 5), (15, 9)), ((7, 7), (12, 7)), ((9, 8), (9, 11)),
        ((4, 11), (6, 11)), ((12, 10), (15, 10)), ((6, 12), (6, 15)),
        ((9, 14), (13, 14)), ((13, 11), (13, 13)), ((3, 15), (5, 15)),
        ((16, 13), (16, 16)),
    ])


def _spiral() -> set[Cell]:
    return _segments([
        # outer ring, open at (5, 6) and (5, 7)
        ((5, 5), (14, 5)), ((14, 5), (14, 14)), ((5, 14), (14, 14)), ((5, 8), (5, 14)),
        # inner ring, open on the left
        ((8, 8), (11, 8)), ((11, 8), (11, 11)), ((8, 11), (11, 11)),
    ])


def _tunnels() -> set[Cell]:
    return _segments([
        ((0, 6), (7, 6)), ((12, 6), (19, 6)),
        ((0, 13), (7, 13)), ((12, 13), (19, 13)),
        ((6, 0), (6, 1)), ((13, 0), (13, 1)),
        ((6, 18), (6, 19)), ((13, 18), (13, 19)),
    ])


def _cross() -> set[Cell]:
    return _segments([((9, 4), (9, 15)), ((4, 9), (15, 9))])


def _fortress() -> set[Cell]:
    walls = _segments([
        ((6, 6), (8, 6)), ((11, 6), (13, 6)),
        ((6, 13), (8, 13)), ((11, 13), (13, 13)),
        ((6, 6), (6, 8)), ((6, 11), (6, 13)),
        ((13, 6), (13, 8)), ((13, 11), (13, 13)),
    ])
    for px, py in [(3, 3), (15, 3), (3, 15), (15, 15)]:
        walls |= _block(px, py, 2, 2)
    return walls


def _scatter() -> set[Cell]:
    rocks = {
        (5, 5), (14, 4), (8, 8), (11, 11), (4, 12), (15, 13),
        (9, 16), (12, 6), (6, 15), (16, 9), (3, 8), (10, 3),
    }
    return rocks | _block(7, 11, 2, 1) | _block(13, 15, 1, 2)


def _corridor() -> set[Cell]:
    return _segments([
        ((5, 3), (5, 8)), ((5, 11), (5, 16)),
        ((14, 3), (14, 8)), ((14, 11), (14, 16)),
    ])


def _pinwheel() -> set[Cell]:
    return _segments([
        ((9, 4), (9, 9)), ((10, 4), (12, 4)),
        ((10, 9), (15, 9)), ((15, 10), (15, 12)),
        ((10, 10), (10, 15)), ((7, 15), (9, 15)),
        ((4, 10), (9, 10)), ((4, 7), (4, 9)),
    ])


def _slalom() -> set[Cell]:
    return _segments([
        ((4, 0), (4, 13)), ((8, 6), (8, 19)),
        ((12, 0), (12, 13)), ((16, 6), (16, 19)),
    ])


def _box() -> set[Cell]:
    return _segments([
        ((1, 1), (8, 1)), ((11, 1), (18, 1)),
        ((1, 18), (8, 18)), ((11, 18), (18, 18)),
        ((1, 2), (1, 8)), ((1, 11), (1, 17)),
        ((18, 2), (18, 8)), ((18, 11), (18, 17)),
    ])


LAYOUTS: dict[str, Callable[[], set[Cell]]] = {
    "classic": _open,
    "arena": _open,
    "speed": _open,
    "maze": _maze,
    "spiral": _spiral,
    "tunnels": _tunnels,
    "cross": _cross,
    "fortress": _fortress,
    "scatter": _scatter,
    "corridor": _corridor,
    "pinwheel": _pinwheel,
    "slalom": _slalom,
    "box": _box,
}


def get_map(map_id: str) -> MapConfig:
    try:
        return MAPS[map_id]
    except KeyError:
        raise ConfigurationError(f"unknown map {map_id!r}") from None


def generate(map_id: str) -> frozenset[Cell]:
    """Return the blocked cells of ``map_id``.

    Layouts are fixed geometry, so two calls with the same id always give the
    same set. Open maps give an empty set.
    """
    if map_id not in LAYOUTS:
        raise ConfigurationError(f"unknown map {map_id!r}")
    return frozenset(LAYOUTS[map_id]())


def find_start(obstacles, length: int = INITIAL_LENGTH, size: int = GRID_SIZE) -> tuple[list[Cell], str]:
    """Place a fresh snake on the first free horizontal run, head on the right.

    Rows are scanned top to bottom, columns left to right, inside the region
    that skips the outer ``START_INSET`` rings. Falls back to the grid centre.
    """
    lo, hi = START_INSET, size - 1 - START_INSET
    for y in range(lo, hi + 1):
        for x in range(lo, hi - length + 2):
            run = [(x + i, y) for i in range(length)]
            if not any(cell in obstacles for cell in run):
                return run[::-1], "right"

    cx, cy = size // 2, size // 2
    logger.warning("no free start run found, falling back to grid centre")
    return [(cx - i, cy) for i in range(length)], "right"


def map_catalog() -> list[dict]:
    return [
        {
            "id": map_id,
            "name": cfg.name,
            "description": cfg.description,
            "walls": cfg.walls,
            "wrap": cfg.wrap,
            "speed_increase": cfg.speed_increase,
            "obstacles": [[x, y] for x, y in sorted(generate(map_id))],
        }
        for map_id, cfg in MAPS.items()
    ]
