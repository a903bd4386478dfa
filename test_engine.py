"""
Tests for GameEngine: move application, reset, and the game scenarios.
"""

import numpy as np
import pytest

from engine import GameEngine, GameState, GameStatus, Mark, RejectReason


def play(engine, moves):
    """Apply each move in order and return the final state."""
    state = engine.get_state()
    for position in moves:
        state = engine.apply_move(position)
    return state


@pytest.fixture
def engine():
    return GameEngine()


def test_initial_state(engine):
    state = engine.get_state()
    
    assert state.board == (None,) * 9
    assert state.next_mark == Mark.X
    assert state.status == GameStatus.IN_PROGRESS
    assert state.to_dict() == {
        "board": [None] * 9,
        "nextMark": "X",
        "status": "in_progress",
    }


def test_get_state_has_no_side_effects(engine):
    engine.apply_move(4)
    
    first = engine.get_state()
    second = engine.get_state()
    
    assert first is second
    assert first.to_dict() == second.to_dict()


def test_apply_move_places_mark_and_flips_turn(engine):
    state = engine.apply_move(4)
    
    assert state.board[4] == Mark.X
    assert state.next_mark == Mark.O
    assert state.status == GameStatus.IN_PROGRESS
    assert engine.get_state() is state


def test_snapshots_are_not_changed_by_later_moves(engine):
    before = engine.apply_move(0)
    engine.apply_move(1)
    
    assert before.board[1] is None
    assert before.next_mark == Mark.O


def test_snapshots_are_frozen(engine):
    state = engine.get_state()
    
    with pytest.raises(AttributeError):
        state.next_mark = Mark.O
    with pytest.raises(TypeError):
        state.board[0] = Mark.X


@pytest.mark.parametrize("position", [-1, 9, 10, 100, -9, 2.0, "4", None, True])
def test_out_of_range_move_is_a_no_op(engine, position):
    engine.apply_move(0)
    before = engine.get_state()
    
    after = engine.apply_move(position)
    
    assert after is before
    assert engine.try_move(position).reason == RejectReason.OUT_OF_RANGE


def test_turns_alternate(engine):
    marks = []
    for position in [4, 0, 8, 2, 1, 7]:
        mark = engine.get_state().next_mark
        engine.apply_move(position)
        marks.append(engine.get_state().board[position])
        assert marks[-1] == mark
    
    assert marks == [Mark.X, Mark.O] * 3


def test_occupied_cell_stays_rejected(engine):
    engine.apply_move(4)
    before = engine.get_state()
    
    for _ in range(5):
        result = engine.try_move(4)
        assert not result.accepted
        assert result.reason == RejectReason.CELL_OCCUPIED
        assert engine.apply_move(4) is before
    
    # The rejected attempts didn't use up O's turn
    assert engine.get_state().next_mark == Mark.O


def test_scenario_a_diagonal_win(engine):
    state = play(engine, [0, 1, 4, 2, 8])
    
    assert state.status == GameStatus.X_WON
    assert state.winner == Mark.X
    assert state.winning_line == (0, 4, 8)
    assert state.to_dict()["status"] == "X"


def test_scenario_b_row_win(engine):
    state = play(engine, [0, 3, 1, 4, 2])
    
    assert state.status == GameStatus.X_WON
    assert state.winning_line == (0, 1, 2)


def test_o_can_win(engine):
    state = play(engine, [0, 3, 1, 4, 8, 5])
    
    assert state.status == GameStatus.O_WON
    assert state.winner == Mark.O
    assert state.to_dict()["status"] == "O"


def test_scenario_c_draw(engine):
    state = play(engine, [0, 1, 2, 4, 3, 5, 7, 6, 8])
    
    assert state.status == GameStatus.DRAW
    assert state.winner is None
    assert all(cell is not None for cell in state.board)
    assert state.to_dict()["status"] == "draw"


def test_win_on_last_cell_is_not_a_draw(engine):
    # X takes the ninth cell and completes the 0,4,8 diagonal with it
    state = play(engine, [2, 1, 7, 3, 0, 5, 4, 6, 8])
    
    assert state.move_count == 9
    assert state.status == GameStatus.X_WON
    assert state.winning_line == (0, 4, 8)


def test_scenario_d_no_moves_after_win(engine):
    won = play(engine, [0, 1, 4, 2, 8])
    
    for position in won.get_empty_cells():
        result = engine.try_move(position)
        assert not result.accepted
        assert result.reason == RejectReason.GAME_OVER
        assert engine.apply_move(position) is won
    
    assert engine.get_state().board == won.board


def test_no_moves_after_draw(engine):
    drawn = play(engine, [0, 1, 2, 4, 3, 5, 7, 6, 8])
    
    for position in range(9):
        assert engine.apply_move(position) is drawn


def test_next_mark_is_stable_once_terminal(engine):
    won = play(engine, [0, 1, 4, 2, 8])
    engine.apply_move(5)
    
    assert engine.get_state().next_mark == won.next_mark == Mark.O


@pytest.mark.parametrize("moves", [
    [],
    [4],
    [0, 1, 4, 2, 8],
    [0, 1, 2, 4, 3, 5, 7, 6, 8],
])
def test_scenario_e_reset(engine, moves):
    play(engine, moves)
    
    state = engine.reset()
    
    assert state.to_dict() == {
        "board": [None] * 9,
        "nextMark": "X",
        "status": "in_progress",
    }
    assert engine.get_state() is state


def test_play_again_after_reset(engine):
    play(engine, [0, 1, 4, 2, 8])
    engine.reset()
    
    state = engine.apply_move(8)
    
    assert state.board[8] == Mark.X
    assert state.move_count == 1


def test_try_move_accepted(engine):
    result = engine.try_move(0)
    
    assert result.accepted
    assert result.reason is None
    assert result.state is engine.get_state()


def test_game_state_rejects_bad_boards():
    with pytest.raises(ValueError):
        GameState(board=(None,) * 8)
    with pytest.raises(ValueError):
        GameState(board=["X"] + [None] * 8)
    with pytest.raises(ValueError):
        GameState(next_mark="X")


def test_rejections_are_logged(engine, caplog):
    caplog.set_level("DEBUG", logger="engine.game_engine")
    
    engine.apply_move(42)
    
    assert "Move rejected" in caplog.text


def test_game_over_is_logged(engine, caplog):
    caplog.set_level("INFO", logger="engine.game_engine")
    
    play(engine, [0, 1, 4, 2, 8])
    
    assert "Player X wins!" in caplog.text


@pytest.mark.parametrize("position", [np.int64(4), np.int32(4), np.uint8(4)])
def test_numpy_integer_move_is_accepted(engine, position):
    result = engine.try_move(position)
    
    assert result.accepted
    assert result.reason is None
    assert result.state.board[4] == Mark.X
    assert result.state.next_mark == Mark.O


def test_numpy_integer_out_of_range_is_rejected(engine):
    result = engine.try_move(np.int64(9))
    
    assert not result.accepted
    assert result.reason == RejectReason.OUT_OF_RANGE
