"""
Tests for the Othello board representation.
"""
import numpy as np
import pytest

from src.game import Board, CellState, OutOfRangeError, Player


def test_initial_board():
    """Test the initial board setup."""
    board = Board()
    state = board.get_board_state()

    assert state.shape == (8, 8), "Board should be 8x8"
    assert board.get((3, 3)) == CellState.WHITE
    assert board.get((4, 4)) == CellState.WHITE
    assert board.get((3, 4)) == CellState.BLACK
    assert board.get((4, 3)) == CellState.BLACK

    assert np.sum(state == 0) == 60, "Should have 60 empty squares initially"
    assert board.count(CellState.BLACK) == 2
    assert board.count(CellState.WHITE) == 2


def test_every_cell_is_a_cell_state():
    board = Board()
    cells = [board.get(pos) for pos in board.positions()]
    assert len(cells) == 64
    assert all(isinstance(cell, CellState) for cell in cells)


def test_positions_are_row_major():
    positions = list(Board().positions())
    assert positions[0] == (0, 0)
    assert positions[1] == (0, 1)
    assert positions[8] == (1, 0)
    assert positions[-1] == (7, 7)


def test_out_of_range():
    board = Board()
    for pos in [(-1, 0), (0, -1), (8, 0), (0, 8), (10, 10)]:
        with pytest.raises(OutOfRangeError):
            board.get(pos)
        with pytest.raises(IndexError):
            board.set(pos, CellState.BLACK)


def test_set_rejects_unknown_values():
    board = Board()
    with pytest.raises(ValueError):
        board.set((0, 0), 7)
    assert board.get((0, 0)) == CellState.EMPTY


def test_set_single_cell():
    board = Board()
    before = board.get_board_state()
    board.set((0, 0), CellState.BLACK)

    after = board.get_board_state()
    assert after[0, 0] == CellState.BLACK
    assert np.sum(before != after) == 1, "Only the written cell should change"


def test_copy_is_independent():
    board = Board()
    clone = board.copy()
    assert clone == board

    clone.set((0, 0), CellState.WHITE)
    assert board.get((0, 0)) == CellState.EMPTY
    assert clone != board


def test_board_state_is_a_copy():
    board = Board()
    state = board.get_board_state()
    state[0, 0] = CellState.BLACK
    assert board.get((0, 0)) == CellState.EMPTY


def test_empty_board():
    board = Board.empty()
    assert board.count(CellState.EMPTY) == 64


def test_player_colours():
    assert Player.BLACK.opponent() is Player.WHITE
    assert Player.WHITE.opponent() is Player.BLACK
    assert Player.BLACK.cell is CellState.BLACK
    assert Player.WHITE.cell is CellState.WHITE
    assert str(Player.WHITE) == "White"
    assert f"{Player.BLACK} to move" == "Black to move"


def test_str():
    lines = str(Board()).splitlines()
    assert len(lines) == 8
    assert lines[3] == ". . . W B . . ."
    assert lines[4] == ". . . B W . . ."


if __name__ == "__main__":
    print("Running board tests...\n")
    test_initial_board()
    test_positions_are_row_major()
    test_set_single_cell()
    test_copy_is_independent()
    test_player_colours()
    test_str()
    print("All board tests passed!")
