"""
Board helpers: grid construction, cell reads, and a compact text codec.
"""
from __future__ import annotations

from typing import Callable, List, Sequence

from .model import EMPTY, GRID_DIMENSION, CellState, Grid, Player, Position, Row


def make_empty_grid(rows: int, cols: int) -> Grid:
    """Build a ``rows`` x ``cols`` grid with every cell set to ``EMPTY``.

    The constructor accepts any shape; only 3x3 grids are meaningful to the
    win checks in :mod:`tictactoe_engine.rules`.
    """
    if rows < 0 or cols < 0:
        raise ValueError(f"Grid dimensions must be non-negative, got {rows}x{cols}")
    return tuple(tuple(EMPTY for _ in range(cols)) for _ in range(rows))


def is_cell_empty(cell: CellState) -> bool:
    return cell == EMPTY


def read_board(grid: Grid) -> Callable[[Sequence[Position]], List[CellState]]:
    def read(line: Sequence[Position]) -> List[CellState]:
        return [grid[pos.y][pos.x] for pos in line]

    return read


def three_tokens_match(token: Player) -> Callable[[Sequence[CellState]], bool]:
    def match(cells: Sequence[CellState]) -> bool:
        return all(cell == token for cell in cells)

    return match


def replace_cell(grid: Grid, position: Position, value: CellState) -> Grid:
    """Return a copy of ``grid`` with one cell changed; untouched rows are shared."""
    row: Row = grid[position.y]
    new_row = row[:position.x] + (value,) + row[position.x + 1:]
    return grid[:position.y] + (new_row,) + grid[position.y + 1:]


def empty_positions(grid: Grid) -> List[Position]:
    return [
        Position(x, y)
        for y, row in enumerate(grid)
        for x, cell in enumerate(row)
        if is_cell_empty(cell)
    ]


_CELL_CHARS = {EMPTY: EMPTY, Player.X.value: Player.X, Player.O.value: Player.O}


def serialize_grid(grid: Grid) -> str:
    return ''.join(str(cell) for row in grid for cell in row)


def parse_grid(text: str) -> Grid:
    """Parse a 9-char row-major board such as ``"XO__X___O"``."""
    raw = text.strip()
    size = GRID_DIMENSION * GRID_DIMENSION
    if len(raw) != size or any(c not in _CELL_CHARS for c in raw):
        raise ValueError(f"Invalid board string {text!r}. Must be {size} chars of X/O/_.")
    cells = [_CELL_CHARS[c] for c in raw]
    return tuple(
        tuple(cells[y * GRID_DIMENSION:(y + 1) * GRID_DIMENSION])
        for y in range(GRID_DIMENSION)
    )
