"""
Tests for the Othello board: legality, capture rays and placement.
"""
import numpy as np
import pytest

from othello.game import BLACK, DIRECTIONS, WHITE, Board, Disc, IllegalMove, OutOfBounds


def make_board(discs):
    """Create a board holding only the given {(row, col): color} discs."""
    board = Board()
    for row in range(Board.SIZE):
        for col in range(Board.SIZE):
            board.grid[row][col] = None
    for (row, col), color in discs.items():
        board.grid[row][col] = Disc(color)
    return board


def test_disc_flip():
    """Test that flipping toggles the colour in place."""
    disc = Disc(BLACK)
    assert disc.color == BLACK
    disc.flip()
    assert disc.color == WHITE
    disc.flip()
    assert disc.color == BLACK


def test_disc_rejects_invalid_color():
    with pytest.raises(ValueError):
        Disc(0)


def test_initial_board():
    """Test the initial board setup."""
    board = Board()
    state = board.get_board_state()

    assert state.shape == (8, 8), "Board should be 8x8"
    assert board.get((3, 3)).color == WHITE
    assert board.get((3, 4)).color == BLACK
    assert board.get((4, 3)).color == BLACK
    assert board.get((4, 4)).color == WHITE

    assert np.sum(state == 0) == 60, "Should have 60 empty squares initially"
    assert board.count_empties() == 60
    assert board.get_score() == (2, 2)

    centre = {(3, 3), (3, 4), (4, 3), (4, 4)}
    for row in range(8):
        for col in range(8):
            assert board.is_occupied((row, col)) == ((row, col) in centre)


def test_directions():
    assert len(DIRECTIONS) == 8
    assert set(DIRECTIONS) == {
        (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
    }


@pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (8, 0), (0, 8), (8, 8)])
def test_out_of_bounds(pos):
    """Test that off-board positions fail in get() and are false everywhere else."""
    board = Board()
    with pytest.raises(OutOfBounds):
        board.get(pos)

    assert not board.is_legal_position(pos)
    assert not board.is_occupied(pos)
    assert not board.belongs_to(pos, BLACK)
    assert not board.belongs_to(pos, WHITE)
    assert not board.is_legal_move(pos, BLACK)


def test_get_empty_cell():
    board = Board()
    assert board.get((0, 0)) is None
    assert board.is_legal_position((0, 0))
    assert board.is_legal_position((7, 7))


def test_belongs_to():
    board = Board()
    assert board.belongs_to((3, 4), BLACK)
    assert not board.belongs_to((3, 4), WHITE)
    assert not board.belongs_to((0, 0), BLACK)


def test_occupied_cells_are_never_legal():
    """Test that no colour may play on an occupied cell."""
    board = Board()
    for pos in [(3, 3), (3, 4), (4, 3), (4, 4)]:
        assert not board.is_legal_move(pos, BLACK)
        assert not board.is_legal_move(pos, WHITE)


def test_legal_moves():
    """Test legal move generation in row-major order."""
    board = Board()

    assert board.legal_moves(BLACK) == [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert board.legal_moves(WHITE) == [(2, 4), (3, 5), (4, 2), (5, 3)]


def test_legal_moves_recomputed_after_place():
    board = Board()
    before = board.legal_moves(WHITE)
    board.place((2, 3), BLACK)
    after = board.legal_moves(WHITE)

    assert before != after
    assert after == [(2, 2), (2, 4), (4, 2)]


def test_place_opening_move():
    """Test that black at (2, 3) captures the white disc at (3, 3)."""
    board = Board()
    captured = board.capture_ray((2, 3), BLACK, (1, 0))
    assert captured == [board.get((3, 3))]

    flipped = board.place((2, 3), BLACK)

    assert len(flipped) == 1
    for pos in [(2, 3), (3, 3), (3, 4), (4, 3)]:
        assert board.belongs_to(pos, BLACK), f"{pos} should be black"
    assert board.belongs_to((4, 4), WHITE)
    assert board.get_score() == (4, 1)


def test_illegal_move_on_initial_board():
    """Test that (2, 2) captures nothing on the initial board."""
    board = Board()
    assert not board.is_legal_move((2, 2), BLACK)
    for direction in DIRECTIONS:
        assert not board.capture_ray((2, 2), BLACK, direction)


@pytest.mark.parametrize("pos", [(2, 2), (3, 3), (0, 0), (-1, 4), (8, 3)])
def test_place_illegal_leaves_board_unchanged(pos):
    """Test that a rejected placement does not mutate the grid."""
    board = Board()
    state_before = board.get_board_state()
    discs_before = [list(row) for row in board.grid]

    with pytest.raises(IllegalMove):
        board.place(pos, BLACK)

    assert np.array_equal(board.get_board_state(), state_before)
    for row_before, row_after in zip(discs_before, board.grid):
        for disc_before, disc_after in zip(row_before, row_after):
            assert disc_before is disc_after


def test_capture_ray_same_color_neighbour_is_empty_capture():
    board = Board()
    # (3, 4) is black directly below (2, 4)
    assert board.capture_ray((2, 4), BLACK, (1, 0)) == []


def test_capture_ray_void_on_empty_cell():
    board = make_board({(0, 1): WHITE, (0, 2): WHITE})
    assert board.capture_ray((0, 0), BLACK, (0, 1)) is None


def test_capture_ray_void_off_board():
    """Test that a run of opponent discs reaching the edge captures nothing."""
    board = make_board({(0, col): WHITE for col in range(1, 8)})
    assert board.capture_ray((0, 0), BLACK, (0, 1)) is None
    assert board.capture_ray((0, 0), BLACK, (-1, 0)) is None
    assert not board.is_legal_move((0, 0), BLACK)


def test_capture_ray_collects_run():
    board = make_board({(0, 1): WHITE, (0, 2): WHITE, (0, 3): BLACK})
    ray = board.capture_ray((0, 0), BLACK, (0, 1))

    assert ray is not None
    assert len(ray) == 2
    assert ray[0] is board.get((0, 1))
    assert ray[1] is board.get((0, 2))


def test_place_flips_only_capture_rays():
    """Test flipping across several directions, with void and empty rays untouched."""
    board = make_board({
        (1, 1): WHITE, (0, 0): BLACK,                  # up-left: captured
        (2, 3): WHITE, (2, 4): WHITE, (2, 5): BLACK,   # right: captured
        (3, 2): WHITE,                                 # down: runs into empty cell
        (2, 1): BLACK,                                 # left: own disc, nothing
        (6, 6): WHITE,                                 # unrelated
    })
    state_before = board.get_board_state()

    flipped = board.place((2, 2), BLACK)

    assert len(flipped) == 3
    for pos in [(2, 2), (1, 1), (2, 3), (2, 4)]:
        assert board.belongs_to(pos, BLACK), f"{pos} should be black"
    assert board.belongs_to((3, 2), WHITE), "Void ray must not flip"
    assert board.belongs_to((6, 6), WHITE)

    changed = np.argwhere(board.get_board_state() != state_before)
    assert {tuple(int(x) for x in pos) for pos in changed} == {(2, 2), (1, 1), (2, 3), (2, 4)}


def test_game_over_with_empty_cells():
    """Test that the game ends when nobody can move even though cells are empty."""
    board = make_board({(0, 0): BLACK, (7, 7): BLACK})

    assert not board.has_any_move(BLACK)
    assert not board.has_any_move(WHITE)
    assert board.is_game_over()
    assert board.count_empties() == 62
    assert board.winner() == BLACK


def test_game_over_matches_has_any_move():
    board = Board()
    assert board.has_any_move(BLACK)
    assert board.has_any_move(WHITE)
    assert not board.is_game_over()


def test_winner_draw():
    board = make_board({(0, 0): BLACK, (7, 7): WHITE})
    assert board.winner() == 0


def test_copy_is_independent():
    board = Board()
    clone = board.copy()
    clone.place((2, 3), BLACK)

    assert board.get_score() == (2, 2)
    assert clone.get_score() == (4, 1)
    assert clone.get((4, 4)) is not board.get((4, 4))


def test_str_rendering():
    lines = str(Board()).splitlines()

    assert lines[0] == "  0  1  2  3  4  5  6  7"
    assert lines[4] == "3 -  -  -  W  B  -  -  -"
    assert lines[5] == "4 -  -  -  B  W  -  -  -"
    assert len(lines) == 9


if __name__ == "__main__":
    print("Running Othello board tests...\n")

    test_initial_board()
    test_legal_moves()
    test_place_opening_move()
    test_illegal_move_on_initial_board()
    test_place_flips_only_capture_rays()
    test_game_over_with_empty_cells()

    print("\nAll tests passed successfully!")
