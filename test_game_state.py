"""Tests for GameState: move application, the expiry rule, and game end."""

import numpy as np
import pytest

from board_engine import (
    GameState,
    HistoryInvariantError,
    InvalidMoveError,
    Player,
    get_available_cells,
)

X, O = Player.X, Player.O


def play(state, *indices):
    """Play the given cells in turn order; return the move results."""
    return [state.apply_move(index, state.current_player) for index in indices]


def counts(board):
    return board.count(X), board.count(O)


def test_new_game_defaults():
    state = GameState()
    assert state.board == [None] * 9
    assert state.histories == {X: [], O: []}
    assert state.expiry_active == {X: False, O: False}
    assert state.current_player == X
    assert state.game_active


def test_move_places_piece_and_passes_turn():
    state = GameState()
    result = state.apply_move(4, X)
    assert result.board[4] == X
    assert result.removed_index is None
    assert result.winning_line is None
    assert result.game_active
    assert state.histories[X] == [4]
    assert state.current_player == O


def test_result_board_is_a_copy():
    state = GameState()
    result = state.apply_move(0, X)
    result.board[0] = None
    assert state.board[0] == X


def test_third_piece_activates_expiry_without_removal():
    state = GameState()
    results = play(state, 0, 1, 4, 3, 7)
    assert all(r.removed_index is None for r in results)
    assert state.expiry_active == {X: True, O: False}
    assert counts(state.board) == (3, 2)


def test_opponent_move_removes_oldest_piece():
    state = GameState()
    play(state, 0, 1, 4, 3, 7)

    result = state.apply_move(8, O)

    assert result.removed_index == 0
    assert result.board[0] is None
    assert state.histories[X] == [4, 7]
    assert state.histories[O] == [1, 3, 8]
    assert state.expiry_active == {X: True, O: True}


def test_x_can_win_on_third_move_before_any_removal():
    state = GameState()
    results = play(state, 0, 1, 4, 3, 8)
    assert results[-1].winning_line == (0, 4, 8)
    assert results[-1].removed_index is None
    assert state.winner == X
    assert not state.game_active
    assert state.current_player == X


def test_removal_and_win_reported_together():
    state = GameState(
        board=[X, X, None, O, O, None, None, None, O],
        histories={X: [0, 1], O: [3, 4, 8]},
        expiry_active={X: True, O: True},
    )
    result = state.apply_move(2, X)
    assert result.removed_index == 3
    assert result.winning_line == (0, 1, 2)
    assert result.winner == X
    assert not result.game_active
    assert state.histories[O] == [4, 8]


def test_removed_cell_can_be_played_again():
    state = GameState()
    play(state, 0, 1, 4, 3, 7, 8)
    assert state.board[0] is None
    result = state.apply_move(0, X)
    assert result.board[0] == X
    assert result.removed_index == 1


def test_expiry_stays_active_after_removals():
    state = GameState()
    play(state, 0, 1, 4, 3, 7, 8, 0, 2)
    assert state.expiry_active == {X: True, O: True}
    assert len(state.histories[X]) <= 3
    assert len(state.histories[O]) <= 3


@pytest.mark.parametrize("seed", range(20))
def test_random_games_keep_invariants(seed):
    rng = np.random.default_rng(seed)
    state = GameState()
    move_number = 0

    while state.game_active and move_number < 60:
        available = get_available_cells(state.board)
        index = available[int(rng.integers(len(available)))]
        result = state.apply_move(index, state.current_player)
        move_number += 1

        x_count, o_count = counts(state.board)
        assert x_count - o_count in (-1, 0, 1)
        assert len(state.histories[X]) == x_count <= 3
        assert len(state.histories[O]) == o_count <= 3

        # Exactly one removal per move from the sixth move on
        if move_number < 6:
            assert result.removed_index is None
            assert x_count - o_count in (0, 1)
        else:
            assert result.removed_index is not None


@pytest.mark.parametrize("index", [-1, 9, 100])
def test_out_of_range_rejected(index):
    state = GameState()
    with pytest.raises(InvalidMoveError):
        state.apply_move(index, X)
    assert state == GameState()


def test_non_integer_index_rejected():
    state = GameState()
    with pytest.raises(InvalidMoveError):
        state.apply_move("4", X)
    with pytest.raises(InvalidMoveError):
        state.apply_move(True, X)


def test_unknown_player_rejected():
    state = GameState()
    with pytest.raises(InvalidMoveError, match="Unknown player"):
        state.apply_move(0, "X")
    assert state == GameState()


def test_occupied_cell_rejected_and_state_unchanged():
    state = GameState()
    play(state, 4)
    before = state.copy()
    with pytest.raises(InvalidMoveError, match="occupied"):
        state.apply_move(4, O)
    assert state == before


def test_out_of_turn_rejected():
    state = GameState()
    with pytest.raises(InvalidMoveError, match="turn"):
        state.apply_move(0, O)


def test_move_after_game_over_rejected():
    state = GameState()
    play(state, 0, 3, 1, 4, 2)
    assert not state.game_active
    with pytest.raises(InvalidMoveError, match="over"):
        state.apply_move(5, O)


def test_invalid_move_error_is_value_error():
    state = GameState()
    with pytest.raises(ValueError):
        state.apply_move(9, X)


def test_history_too_long_is_fatal():
    state = GameState(
        board=[X, X, X, X, None, None, None, None, None],
        histories={X: [0, 1, 2, 3], O: []},
    )
    with pytest.raises(HistoryInvariantError):
        state.check_invariants()


def test_history_disagreeing_with_board_is_fatal():
    state = GameState(board=[X, None, None, None, None, None, None, None, None])
    with pytest.raises(HistoryInvariantError):
        state.check_invariants()

    state = GameState(histories={X: [0], O: []})
    with pytest.raises(HistoryInvariantError):
        state.check_invariants()


def test_check_win_reports_first_line_in_order():
    state = GameState(board=[X, X, X, X, O, O, X, O, O])
    assert state.check_win() == (0, 1, 2)
    assert state.winner == X
    assert not state.game_active


def test_check_win_on_full_board_without_line():
    state = GameState(board=[X, O, X, X, O, O, O, X, X])
    assert state.check_win() is None
    assert state.winner is None
    assert state.is_draw
    assert not state.game_active
    assert get_available_cells(state.board) == []


def test_force_end():
    state = GameState()
    play(state, 0, 4)
    result = state.force_end("Time's up! O wins!", winner=O)
    assert not result.game_active
    assert result.winner == O
    assert state.end_reason == "Time's up! O wins!"
    with pytest.raises(InvalidMoveError):
        state.apply_move(8, X)


def test_force_end_keeps_first_outcome():
    state = GameState()
    play(state, 0, 3, 1, 4, 2)
    state.force_end("Time's up! O wins!", winner=O)
    assert state.winner == X
    assert state.end_reason is None


def test_restart_resets_everything():
    state = GameState()
    play(state, 0, 1, 4, 3, 7, 8)
    state.force_end("stop")

    assert state.restart() is state
    assert state == GameState()
    assert state.restart() == GameState()


def test_copy_is_independent():
    state = GameState()
    play(state, 0)
    clone = state.copy()
    clone.apply_move(1, O)
    assert state.board[1] is None
    assert state.histories[O] == []
