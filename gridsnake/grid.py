"""Grid coordinate helpers."""

from .constants import GRID_SIZE, DIRECTIONS

Cell = tuple[int, int]


def in_bounds(cell: Cell, size: int = GRID_SIZE) -> bool:
    x, y = cell
    return 0 <= x < size and 0 <= y < size


def wrapped(cell: Cell, size: int = GRID_SIZE) -> Cell:
    x, y = cell
    return (x % size, y % size)


def same_cell(a: Cell, b: Cell) -> bool:
    return a[0] == b[0] and a[1] == b[1]


def step_cell(cell: Cell, direction: str) -> Cell:
    dx, dy = DIRECTIONS[direction]
    return (cell[0] + dx, cell[1] + dy)


def all_cells(size: int = GRID_SIZE):
    for y in range(size):
        for x in range(size):
            yield (x, y)
