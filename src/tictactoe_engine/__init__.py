"""tictactoe_engine package.

Pure rules for 3x3 tic-tac-toe: grid model, move validation, win/draw
detection and immutable state transitions.

Convenience imports are exposed for common workflows.
"""

from .board import (
    empty_positions,
    is_cell_empty,
    make_empty_grid,
    parse_grid,
    read_board,
    serialize_grid,
    three_tokens_match,
)
from .errors import OCCUPIED_CELL_MESSAGE, InvalidPositionError
from .explore import reachable_states, states_frame, terminal_counts
from .model import (
    EMPTY,
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
from .rules import (
    WINNING_LINES,
    check_draw,
    check_win,
    compute_game_status,
    compute_next_state,
    get_next_player,
    make_move,
    new_game,
)

__all__ = [
    "EMPTY",
    "GRID_DIMENSION",
    "OCCUPIED_CELL_MESSAGE",
    "WINNING_LINES",
    "DrawState",
    "Fail",
    "GameStatus",
    "Grid",
    "InvalidPositionError",
    "Ok",
    "Outcome",
    "PendingState",
    "Player",
    "Position",
    "State",
    "WonState",
    "check_draw",
    "check_win",
    "compute_game_status",
    "compute_next_state",
    "empty_positions",
    "get_next_player",
    "is_cell_empty",
    "make_empty_grid",
    "make_move",
    "new_game",
    "parse_grid",
    "read_board",
    "reachable_states",
    "serialize_grid",
    "states_frame",
    "terminal_counts",
]
