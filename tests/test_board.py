"""Tests for board primitives."""

import pytest
from jungo.core import (
    Color,
    Position,
    StoneCount,
    capture_stones,
    count_liberties,
    count_stones,
    create_empty_board,
    find_group,
    get_neighbors,
    is_valid_position,
    parse_diagram,
    place_stone,
    remove_stones,
    would_be_suicide,
)

B = Color.BLACK
W = Color.WHITE


def test_create_empty_board():
    """Test empty board creation."""
    grid = create_empty_board(9)

    assert len(grid) == 9
    assert all(len(row) == 9 for row in grid)
    assert all(cell is None for row in grid for cell in row)


def test_create_empty_board_minimum_size():
    """Test the smallest allowed board."""
    grid = create_empty_board(2)
    assert grid == ((None, None), (None, None))


def test_create_empty_board_invalid_size():
    """Test size validation."""
    with pytest.raises(ValueError):
        create_empty_board(1)
    with pytest.raises(ValueError):
        create_empty_board(0)
    with pytest.raises(ValueError):
        create_empty_board(-5)

    # Non-integers are a different failure
    with pytest.raises(TypeError):
        create_empty_board(2.5)
    with pytest.raises(TypeError):
        create_empty_board("9")
    with pytest.raises(TypeError):
        create_empty_board(True)


def test_is_valid_position():
    """Test bounds checking."""
    assert is_valid_position(9, (0, 0))
    assert is_valid_position(9, (8, 8))
    assert is_valid_position(9, (4, 7))

    assert not is_valid_position(9, (-1, 0))
    assert not is_valid_position(9, (0, -1))
    assert not is_valid_position(9, (9, 0))
    assert not is_valid_position(9, (0, 9))


def test_place_stone():
    """Test placing a stone returns a new grid."""
    grid = create_empty_board(5)
    new_grid = place_stone(grid, Position(3, 1), B)

    assert new_grid[1][3] is B
    assert grid[1][3] is None  # Original untouched
    assert new_grid is not grid


def test_place_stone_shares_rows():
    """Test that rows other than the changed one are shared."""
    grid = place_stone(create_empty_board(5), Position(0, 0), W)
    new_grid = place_stone(grid, Position(2, 3), B)

    for y in range(5):
        if y == 3:
            assert new_grid[y] is not grid[y]
        else:
            assert new_grid[y] is grid[y]


def test_neighbors_interior():
    """Test interior point has 4 neighbors in up/right/down/left order."""
    assert get_neighbors(9, (4, 4)) == [(4, 3), (5, 4), (4, 5), (3, 4)]


def test_neighbors_corners():
    """Test corners have 2 neighbors."""
    assert get_neighbors(9, (0, 0)) == [(1, 0), (0, 1)]
    assert get_neighbors(9, (8, 8)) == [(8, 7), (7, 8)]
    assert get_neighbors(9, (8, 0)) == [(8, 1), (7, 0)]


def test_neighbors_edge():
    """Test edge points have 3 neighbors."""
    assert get_neighbors(9, (4, 0)) == [(5, 0), (4, 1), (3, 0)]
    assert get_neighbors(9, (0, 4)) == [(0, 3), (1, 4), (0, 5)]


def test_find_group_single_stone():
    grid = place_stone(create_empty_board(5), Position(2, 2), B)
    assert find_group(grid, (2, 2)) == {(2, 2)}


def test_find_group_empty_point():
    grid = create_empty_board(5)
    assert find_group(grid, (2, 2)) == set()


def test_find_group_l_shape():
    """Test L-shaped group detection."""
    grid = parse_diagram(
        """
        . B . . .
        . B . . .
        . B B B .
        . . . . .
        . . . B .
        """
    )

    group = find_group(grid, (1, 0))
    assert group == {(1, 0), (1, 1), (1, 2), (2, 2), (3, 2)}

    # Not connected to the L
    assert find_group(grid, (3, 4)) == {(3, 4)}


def test_find_group_ignores_other_color():
    grid = parse_diagram(
        """
        B W .
        B W .
        . . .
        """
    )

    assert find_group(grid, (0, 0)) == {(0, 0), (0, 1)}
    assert find_group(grid, (1, 1)) == {(1, 0), (1, 1)}


def test_liberties_single_stone():
    """Test liberties by location: interior 4, edge 3, corner 2."""
    grid = create_empty_board(9)

    assert count_liberties(place_stone(grid, Position(4, 4), B), (4, 4)) == 4
    assert count_liberties(place_stone(grid, Position(4, 0), B), (4, 0)) == 3
    assert count_liberties(place_stone(grid, Position(0, 0), B), (0, 0)) == 2


def test_liberties_two_stones():
    grid = parse_diagram(
        """
        . . . . .
        . . . . .
        . B B . .
        . . . . .
        . . . . .
        """
    )
    assert count_liberties(grid, (1, 2)) == 6


def test_liberties_surrounded():
    grid = parse_diagram(
        """
        . B .
        B W B
        . B .
        """
    )
    assert count_liberties(grid, (1, 1)) == 0


def test_liberties_shared_point_counted_once():
    """Test a liberty touching two stones of the group counts once."""
    grid = parse_diagram(
        """
        . . . . .
        . B . . .
        . B B . .
        . . . . .
        . . . . .
        """
    )
    # (2, 1) touches both (1, 1) and (2, 2)
    assert count_liberties(grid, (1, 1)) == 7


def test_liberties_partially_surrounded():
    grid = parse_diagram(
        """
        . . . . .
        . . W . .
        . W B W .
        . . . . .
        . . . . .
        """
    )
    assert count_liberties(grid, (2, 2)) == 1


def test_liberties_empty_point():
    assert count_liberties(create_empty_board(5), (2, 2)) == 0


def test_remove_stones():
    grid = parse_diagram(
        """
        B . .
        . W .
        . . B
        """
    )
    new_grid = remove_stones(grid, [Position(1, 1), Position(2, 2)])

    assert new_grid[1][1] is None
    assert new_grid[2][2] is None
    assert new_grid[0][0] is B
    assert grid[1][1] is W  # Original untouched


def test_remove_stones_empty_list_returns_same_grid():
    """Test removing nothing returns the identical grid object."""
    grid = place_stone(create_empty_board(5), Position(1, 1), B)
    assert remove_stones(grid, []) is grid


def test_remove_stones_shares_rows():
    grid = parse_diagram(
        """
        B . . .
        . W . .
        . . B .
        . W . .
        """
    )
    new_grid = remove_stones(grid, [Position(1, 1), Position(1, 3)])

    assert new_grid[0] is grid[0]
    assert new_grid[2] is grid[2]
    assert new_grid[1] is not grid[1]
    assert new_grid[3] is not grid[3]


def test_capture_single_stone():
    grid = parse_diagram(
        """
        . . . . .
        . . B . .
        . B W B .
        . . B . .
        . . . . .
        """
    )
    new_grid, captured = capture_stones(grid, Position(2, 3), B)

    assert captured == [(2, 2)]
    assert new_grid[2][2] is None


def test_no_capture_with_liberties():
    grid = parse_diagram(
        """
        . . . . .
        . . B . .
        . B W . .
        . . B . .
        . . . . .
        """
    )
    new_grid, captured = capture_stones(grid, Position(2, 3), B)

    assert captured == []
    assert new_grid is grid


def test_capture_group():
    grid = parse_diagram(
        """
        . B B . .
        B W W B .
        . B B . .
        . . . . .
        . . . . .
        """
    )
    new_grid, captured = capture_stones(grid, Position(0, 1), B)

    assert set(captured) == {(1, 1), (2, 1)}
    assert count_stones(new_grid) == StoneCount(black=6, white=0)


def test_capture_deduplicates_group_touching_move_twice():
    """Test a group adjacent to the move on two sides is captured once."""
    grid = parse_diagram(
        """
        . B B . .
        B W W B .
        B B W B .
        . B B . .
        . . . . .
        """
    )
    # Black just played (1, 2), touching (1, 1) and (2, 2)
    new_grid, captured = capture_stones(grid, Position(1, 2), B)

    assert len(captured) == 3
    assert set(captured) == {(1, 1), (2, 1), (2, 2)}
    assert count_stones(new_grid).white == 0


def test_capture_multiple_groups():
    grid = parse_diagram(
        """
        . . . . . . .
        . B . B . . .
        B W B W B . .
        . B . B . . .
        . . . . . . .
        . . . . . . .
        . . . . . . .
        """
    )
    new_grid, captured = capture_stones(grid, Position(2, 2), B)

    assert set(captured) == {(1, 2), (3, 2)}
    assert new_grid[2][1] is None
    assert new_grid[2][3] is None


def test_capture_never_takes_own_stones():
    """Test the mover's own liberty-less stones are not removed."""
    grid = parse_diagram(
        """
        B W .
        W . .
        . . .
        """
    )
    # White just played (0, 1); black (0, 0) has no liberties, white is the mover
    new_grid, captured = capture_stones(grid, Position(0, 1), W)
    assert captured == [(0, 0)]

    # Black as the mover captures nothing, its own stone stays
    new_grid, captured = capture_stones(grid, Position(0, 0), B)
    assert captured == []
    assert new_grid[0][0] is B


def test_suicide_surrounded_point():
    grid = parse_diagram(
        """
        . W .
        W . W
        . W .
        """
    )
    assert would_be_suicide(grid, Position(1, 1), B) is True


def test_suicide_corner():
    grid = parse_diagram(
        """
        . W .
        W . .
        . . .
        """
    )
    assert would_be_suicide(grid, Position(0, 0), B) is True


def test_not_suicide_when_capturing():
    grid = parse_diagram(
        """
        . . . . .
        . B W . .
        B W . W .
        . B W . .
        . . . . .
        """
    )
    assert would_be_suicide(grid, Position(2, 2), B) is False


def test_not_suicide_when_joining_group_with_liberties():
    grid = parse_diagram(
        """
        . B W
        B . W
        . W .
        """
    )
    assert would_be_suicide(grid, Position(1, 1), B) is False


def test_not_suicide_with_liberties():
    grid = create_empty_board(5)
    assert would_be_suicide(grid, Position(2, 2), B) is False


def test_suicide_check_does_not_modify_grid():
    grid = parse_diagram(
        """
        . W .
        W . W
        . W .
        """
    )
    would_be_suicide(grid, Position(1, 1), B)
    assert grid[1][1] is None


def test_count_stones():
    """Test full-scan stone counting."""
    assert count_stones(create_empty_board(9)) == StoneCount(0, 0)

    grid = place_stone(create_empty_board(9), Position(0, 0), B)
    assert count_stones(grid) == StoneCount(1, 0)

    grid = place_stone(grid, Position(1, 0), W)
    grid = place_stone(grid, Position(2, 0), W)
    assert count_stones(grid) == StoneCount(1, 2)


def test_count_stones_full_board():
    grid = parse_diagram(
        """
        B W B
        W B W
        B W B
        """
    )
    assert count_stones(grid) == StoneCount(black=5, white=4)
