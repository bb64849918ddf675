import numpy as np
import pytest

from tictactoe.game import (
    EMPTY,
    X,
    O,
    TIE,
    WIN_LINES,
    InvalidMove,
    apply_move,
    check_winner,
    is_full,
    legal_moves,
    new_game,
    render_board,
    winning_line,
)

_ = EMPTY


def play(*moves):
    state = new_game()
    for index in moves:
        state = apply_move(state, index, state.player)
    return state


def iter_reachable_boards():
    """All boards reachable by alternating play from the empty board (stops at terminal)."""
    seen = set()
    stack = [new_game()]
    while stack:
        state = stack.pop()
        if state.board in seen:
            continue
        seen.add(state.board)
        yield state
        if state.active:
            for i in legal_moves(state.board):
                stack.append(apply_move(state, i, state.player))


def test_new_game():
    state = new_game()
    assert state.board == (EMPTY,) * 9
    assert state.player == X
    assert state.active is True
    assert state.winner is None


def test_apply_move_returns_new_state_and_swaps_turn():
    state = new_game()
    nxt = apply_move(state, 4, X)
    assert nxt.board[4] == X
    assert nxt.player == O
    assert nxt.active
    assert state.board == (EMPTY,) * 9
    assert state.player == X


@pytest.mark.parametrize("index", [-1, 9, 100, 1.0, "4", None, True])
def test_out_of_range_index_rejected(index):
    state = new_game()
    with pytest.raises(InvalidMove) as exc:
        apply_move(state, index, X)
    assert exc.value.reason == "out_of_range"
    assert state == new_game()


def test_integer_like_index_accepted():
    state = apply_move(new_game(), np.int64(3), X)
    assert state.board[3] == X
    assert state.player == O

    with pytest.raises(InvalidMove) as exc:
        apply_move(state, np.int64(3), O)
    assert exc.value.reason == "occupied"
    with pytest.raises(InvalidMove) as exc:
        apply_move(state, np.int64(12), O)
    assert exc.value.reason == "out_of_range"


def test_occupied_cell_rejected():
    state = play(0)
    before = state.board
    with pytest.raises(InvalidMove) as exc:
        apply_move(state, 0, O)
    assert exc.value.reason == "occupied"
    assert state.board == before


def test_wrong_turn_rejected():
    state = new_game()
    with pytest.raises(InvalidMove) as exc:
        apply_move(state, 0, O)
    assert exc.value.reason == "wrong_turn"
    assert state.board == (EMPTY,) * 9


def test_inactive_game_rejected():
    state = play(0, 3, 1, 4, 2)
    assert not state.active
    before = state.board
    with pytest.raises(InvalidMove) as exc:
        apply_move(state, 8, state.player)
    assert exc.value.reason == "inactive"
    assert state.board == before


def test_invalid_move_is_value_error():
    with pytest.raises(ValueError):
        apply_move(new_game(), 9, X)


def test_row_win_ends_game():
    state = play(0, 3, 1, 4, 2)
    assert state.winner == X
    assert not state.active
    assert state.player == X
    assert winning_line(state.board) == (0, 1, 2)


def test_full_board_without_line_is_tie():
    # X O X / X O O / O X X
    state = play(0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert is_full(state.board)
    assert check_winner(state.board) is None
    assert state.winner == TIE
    assert state.is_tie
    assert not state.active


def test_win_on_last_cell_is_win_not_tie():
    # X O X / O X O / O X _  -> X takes 8 completing the diagonal
    state = play(0, 1, 2, 3, 4, 5, 7, 6)
    assert state.active
    state = apply_move(state, 8, X)
    assert is_full(state.board)
    assert state.winner == X
    assert not state.is_tie


@pytest.mark.parametrize("line", WIN_LINES)
def test_check_winner_each_line(line):
    for mark in (X, O):
        board = [_] * 9
        for i in line:
            board[i] = mark
        assert check_winner(board) == mark
        assert winning_line(board) == line


def test_check_winner_none_on_mixed_line():
    assert check_winner([X, X, O, _, _, _, _, _, _]) is None
    assert check_winner([_] * 9) is None


def test_multiple_lines_first_in_scan_order():
    # Not reachable in legal play: row 1 and column 0 both complete.
    assert winning_line([X, _, _, X, X, X, X, _, _]) == (3, 4, 5)
    # rows come before columns
    assert winning_line([X, X, X, X, _, _, X, _, _]) == (0, 1, 2)
    # columns come before diagonals
    assert winning_line([X, _, _, X, X, _, X, _, X]) == (0, 3, 6)
    # both marks winning: first line decides
    assert check_winner([O, O, O, X, X, X, _, _, _]) == O


def test_check_winner_iff_line_filled_over_reachable_boards():
    count = 0
    for state in iter_reachable_boards():
        board = state.board
        for mark in (X, O):
            fills_line = any(all(board[i] == mark for i in line) for line in WIN_LINES)
            assert (check_winner(board) == mark) == fills_line
        assert board.count(X) - board.count(O) in (0, 1)
        if not state.active and state.winner == TIE:
            assert is_full(board)
            assert check_winner(board) is None
        count += 1
    # 5478 distinct positions are reachable in tic-tac-toe
    assert count == 5478


def test_is_full():
    assert not is_full([_] * 9)
    assert is_full([X, O] * 4 + [X])


def test_legal_moves():
    board = (X, _, O, _, _, _, _, _, _)
    assert legal_moves(board) == [1, 3, 4, 5, 6, 7, 8]


def test_render_board_highlight():
    text = render_board((X, X, X, O, O, _, _, _, _), highlight=(0, 1, 2))
    lines = text.splitlines()
    assert lines[0] == "[X]|[X]|[X]"
    assert lines[2] == " O | O | 5 "
    assert lines[4] == " 6 | 7 | 8 "


def test_states_are_immutable():
    state = new_game()
    with pytest.raises(Exception):
        state.board = (X,) * 9
