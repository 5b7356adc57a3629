import pytest

from tictactoe_engine.board import make_empty_grid
from tictactoe_engine.errors import OCCUPIED_CELL_MESSAGE
from tictactoe_engine.model import EMPTY, GameStatus, Player, Position
from tictactoe_engine.outcome import Fail, Ok
from tictactoe_engine.rules import (
    WINNING_LINES,
    check_draw,
    check_win,
    compute_game_status,
    get_next_player,
    make_move,
)

X, O, E = Player.X, Player.O, EMPTY


def test_make_move_on_empty_grid():
    grid = make_empty_grid(3, 3)
    res = make_move(X, Position(0, 0), grid)
    assert res == Ok((
        (X, E, E),
        (E, E, E),
        (E, E, E),
    ))
    # input untouched
    assert grid == make_empty_grid(3, 3)


def test_make_move_uses_x_as_column_and_y_as_row():
    res = make_move(O, Position(2, 1), make_empty_grid(3, 3))
    assert res.is_ok
    assert res.value[1][2] == O
    assert sum(c != E for r in res.value for c in r) == 1


def test_make_move_rejects_occupied_cell():
    grid = (
        (E, E, E),
        (X, E, E),
        (E, E, E),
    )
    res = make_move(O, Position(0, 1), grid)
    assert res == Fail(OCCUPIED_CELL_MESSAGE)
    assert res.message == "Error: cell is not empty !"
    assert grid[1][0] == X


def test_make_move_shares_untouched_rows():
    grid = make_empty_grid(3, 3)
    new = make_move(X, Position(1, 1), grid).value
    assert new[0] is grid[0]
    assert new[2] is grid[2]
    assert new[1] is not grid[1]


@pytest.mark.parametrize("p", [X, O])
def test_get_next_player_is_involution(p: Player):
    assert get_next_player(p) != p
    assert get_next_player(get_next_player(p)) == p


def test_winning_lines_table():
    assert len(WINNING_LINES) == 8
    assert len(set(WINNING_LINES)) == 8
    assert all(len(line) == 3 for line in WINNING_LINES)


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("token", [X, O])
def test_check_win_detects_every_line(line, token: Player):
    cells = [[E] * 3 for _ in range(3)]
    for pos in line:
        cells[pos.y][pos.x] = token
    grid = tuple(tuple(r) for r in cells)
    assert check_win(grid, token) is True
    assert check_win(grid, get_next_player(token)) is False


def test_check_win_horizontal_vertical_diagonal():
    horizontal = ((X, X, X), (O, E, E), (O, E, E))
    vertical = ((X, X, E), (O, X, E), (O, X, O))
    diagonal = ((X, O, E), (O, X, E), (O, X, X))
    assert check_win(horizontal, X)
    assert check_win(vertical, X)
    assert check_win(diagonal, X)


def test_check_win_no_line():
    grid = ((X, O, E), (O, X, E), (O, X, O))
    assert check_win(grid, X) is False
    assert check_win(grid, O) is False


def test_check_draw():
    assert check_draw(((X, O, X), (X, O, O), (O, X, X))) is True
    assert check_draw(((X, O, X), (X, O, O), (O, X, E))) is False
    assert check_draw(make_empty_grid(3, 3)) is False


def test_status_pending_when_no_line():
    grid = ((X, X, O), (E, O, E), (E, E, E))
    assert compute_game_status(grid, X) == GameStatus.PENDING


def test_status_won_when_line_and_not_full():
    grid = ((X, X, O), (X, O, O), (X, O, E))
    assert compute_game_status(grid, X) == GameStatus.WON


def test_status_draw_when_full_without_line():
    grid = ((O, X, O), (X, O, O), (X, O, X))
    assert compute_game_status(grid, X) == GameStatus.DRAW


def test_status_draw_takes_priority_over_win_on_full_board():
    # full board where X has the top row
    grid = ((X, X, X), (O, O, X), (X, O, O))
    assert check_win(grid, X) is True
    assert compute_game_status(grid, X) == GameStatus.DRAW


def test_status_only_checks_given_token():
    grid = ((O, O, O), (X, X, E), (X, E, E))
    assert compute_game_status(grid, X) == GameStatus.PENDING
    assert compute_game_status(grid, O) == GameStatus.WON
