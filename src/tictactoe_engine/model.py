"""
Board and game-state data model.

Teaching notes:
- A grid is a tuple of rows and is indexed ``grid[y][x]``; tuples keep
  every grid immutable once built.
- A cell holds ``Player.X``, ``Player.O`` or the ``EMPTY`` marker.
- Game states are a tagged union of three frozen dataclasses; ``status``
  tells them apart.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from .errors import InvalidPositionError

GRID_DIMENSION = 3
EMPTY = "_"


class Player(str, Enum):
    X = "X"
    O = "O"

    def __str__(self) -> str:
        return self.value


class GameStatus(str, Enum):
    PENDING = "PENDING"
    WON = "WON"
    DRAW = "DRAW"


CellState = Union[Player, str]
Row = Tuple[CellState, ...]
Grid = Tuple[Row, ...]


@dataclass(frozen=True)
class Position:
    """A cell address: ``x`` is the column, ``y`` the row, both in 0..2."""

    x: int
    y: int

    def __post_init__(self) -> None:
        for name in ("x", "y"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v < GRID_DIMENSION:
                raise InvalidPositionError(
                    f"Invalid position {name}={v!r}. Must be an int in 0-{GRID_DIMENSION - 1}."
                )


@dataclass(frozen=True)
class PendingState:
    grid: Grid
    current_player: Player

    @property
    def status(self) -> GameStatus:
        return GameStatus.PENDING


@dataclass(frozen=True)
class WonState:
    grid: Grid
    winner: Player

    @property
    def status(self) -> GameStatus:
        return GameStatus.WON


@dataclass(frozen=True)
class DrawState:
    grid: Grid

    @property
    def status(self) -> GameStatus:
        return GameStatus.DRAW


State = Union[PendingState, WonState, DrawState]
