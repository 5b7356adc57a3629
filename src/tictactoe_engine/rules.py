"""
Game rules: win/draw detection, move application, and state transitions.

Teaching notes:
- There are exactly 8 winning lines (3 rows, 3 columns, 2 diagonals).
- Status is decided draw-first: a full board is a DRAW even when the
  last move also completed a line. Callers relying on WON for a
  ninth-move win must check ``check_win`` themselves.
- Nothing here mutates its inputs; every accepted move yields a new
  grid and a new state.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from . import config
from .board import (
    is_cell_empty,
    make_empty_grid,
    read_board,
    replace_cell,
    three_tokens_match,
)
from .errors import OCCUPIED_CELL_MESSAGE
from .model import (
    GRID_DIMENSION,
    DrawState,
    GameStatus,
    Grid,
    PendingState,
    Player,
    Position,
    State,
    WonState,
)
from .outcome import Fail, Ok, Outcome

logger = logging.getLogger(__name__)

P = Position
WINNING_LINES: Tuple[Tuple[Position, Position, Position], ...] = (
    # rows
    (P(0, 0), P(1, 0), P(2, 0)),
    (P(0, 1), P(1, 1), P(2, 1)),
    (P(0, 2), P(1, 2), P(2, 2)),
    # columns
    (P(0, 0), P(0, 1), P(0, 2)),
    (P(1, 0), P(1, 1), P(1, 2)),
    (P(2, 0), P(2, 1), P(2, 2)),
    # diagonals
    (P(0, 0), P(1, 1), P(2, 2)),
    (P(0, 2), P(1, 1), P(2, 0)),
)
del P


def get_next_player(token: Player) -> Player:
    return Player.O if token == Player.X else Player.X


def check_win(grid: Grid, token: Player) -> bool:
    matches = three_tokens_match(token)
    return any(matches(cells) for cells in map(read_board(grid), WINNING_LINES))


def check_draw(grid: Grid) -> bool:
    return not any(is_cell_empty(cell) for row in grid for cell in row)


def compute_game_status(grid: Grid, token: Player) -> GameStatus:
    if check_draw(grid):
        return GameStatus.DRAW
    if check_win(grid, token):
        return GameStatus.WON
    return GameStatus.PENDING


def make_move(token: Player, position: Position, grid: Grid) -> Outcome[Grid]:
    """Place ``token`` at ``position``.

    Returns ``Ok(new_grid)`` when the cell is empty, otherwise
    ``Fail(OCCUPIED_CELL_MESSAGE)``. ``grid`` itself is never modified.
    """
    if not is_cell_empty(grid[position.y][position.x]):
        logger.debug("Rejected %s at (%d, %d): cell holds %s",
                     token, position.x, position.y, grid[position.y][position.x])
        return Fail(OCCUPIED_CELL_MESSAGE)
    return Ok(replace_cell(grid, position, token))


def _build_state(grid: Grid, status: GameStatus, token: Player) -> State:
    if status == GameStatus.DRAW:
        return DrawState(grid)
    if status == GameStatus.WON:
        return WonState(grid, winner=token)
    return PendingState(grid, current_player=get_next_player(token))


def compute_next_state(state: State, token: Player, position: Position) -> Outcome[State]:
    """Apply one move to a pending game.

    Terminal states come back unchanged as ``Ok(state)``. An occupied
    target propagates the ``Fail`` from :func:`make_move`.
    """
    if state.status != GameStatus.PENDING:
        return Ok(state)

    def advance(grid: Grid) -> Outcome[State]:
        status = compute_game_status(grid, token)
        logger.debug("%s played (%d, %d) -> %s", token, position.x, position.y, status.value)
        return Ok(_build_state(grid, status, token))

    return make_move(token, position, state.grid).chain(advance)


def new_game(first_player: Optional[Player] = None) -> PendingState:
    player = first_player if first_player is not None else config.first_player()
    return PendingState(make_empty_grid(GRID_DIMENSION, GRID_DIMENSION), current_player=player)
