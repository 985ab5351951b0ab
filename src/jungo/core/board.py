"""
Board primitives for Jungo.

Pure functions over a grid (tuple of row tuples, indexed grid[y][x]):
- Neighbor enumeration and bounds checks
- Group discovery and liberty counting
- Stone placement, removal and capture
- Suicide detection and stone tallying

Nothing here knows about turns, ko or game termination. Placement and
removal assume the caller already checked bounds and occupancy.
"""

from typing import Iterable, List, Set, Tuple

from .constants import MIN_BOARD_SIZE
from .game_state import Color, Grid, Position, StoneCount

# Up, right, down, left
_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


def validate_board_size(size: int) -> None:
    """
    Check that a board size is usable.

    Raises:
        TypeError: size is not an int (bools are rejected too)
        ValueError: size is below MIN_BOARD_SIZE
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"Invalid board size {size!r}: must be an integer >= {MIN_BOARD_SIZE}")
    if size < MIN_BOARD_SIZE:
        raise ValueError(f"Invalid board size {size}: must be an integer >= {MIN_BOARD_SIZE}")


def create_empty_board(size: int) -> Grid:
    """
    Create a size x size grid with every cell empty.

    Args:
        size: Board dimension, an integer >= MIN_BOARD_SIZE

    Returns:
        Empty grid
    """
    validate_board_size(size)
    row = (None,) * size
    # Rows are immutable, so every row can be the same object
    return (row,) * size


def is_valid_position(size: int, position: Tuple[int, int]) -> bool:
    """True if position lies on a size x size board."""
    x, y = position
    return 0 <= x < size and 0 <= y < size


def place_stone(grid: Grid, position: Position, color: Color) -> Grid:
    """
    Return a new grid with a stone of color at position.

    Only the affected row is rebuilt; every other row is shared with
    the input grid.
    """
    x, y = position
    row = grid[y]
    new_row = row[:x] + (color,) + row[x + 1 :]
    return grid[:y] + (new_row,) + grid[y + 1 :]


def get_neighbors(size: int, position: Tuple[int, int]) -> List[Position]:
    """
    Get the on-board orthogonal neighbors of position.

    Order is up, right, down, left. Corners have 2 neighbors, edges 3,
    interior points 4.
    """
    x, y = position
    neighbors = []
    for dx, dy in _DIRECTIONS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < size and 0 <= ny < size:
            neighbors.append(Position(nx, ny))
    return neighbors


def find_group(grid: Grid, position: Tuple[int, int]) -> Set[Position]:
    """
    Find the connected group containing position.

    Iterative depth-first search over same-colored orthogonal neighbors.

    Args:
        grid: Board to search
        position: Seed point

    Returns:
        Every position in the group, including the seed. Empty set if the
        seed point is empty.
    """
    x, y = position
    color = grid[y][x]
    if color is None:
        return set()

    size = len(grid)
    group: Set[Position] = set()
    stack = [Position(x, y)]

    while stack:
        current = stack.pop()
        if current in group:
            continue
        group.add(current)

        for neighbor in get_neighbors(size, current):
            if neighbor not in group and grid[neighbor.y][neighbor.x] == color:
                stack.append(neighbor)

    return group


def _group_liberties(grid: Grid, group: Iterable[Position]) -> Set[Position]:
    size = len(grid)
    liberties = set()
    for pos in group:
        for neighbor in get_neighbors(size, pos):
            if grid[neighbor.y][neighbor.x] is None:
                liberties.add(neighbor)
    return liberties


def count_liberties(grid: Grid, position: Tuple[int, int]) -> int:
    """
    Count distinct empty points adjacent to the group at position.

    Returns 0 for an empty seed point or a fully surrounded group.
    """
    return len(_group_liberties(grid, find_group(grid, position)))


def remove_stones(grid: Grid, positions: Iterable[Position]) -> Grid:
    """
    Return a new grid with every listed position emptied.

    An empty positions list returns the input grid object itself, so
    callers can test `result is grid` to see that nothing changed. Only
    rows holding a removed stone are rebuilt.
    """
    by_row = {}
    for x, y in positions:
        by_row.setdefault(y, set()).add(x)

    if not by_row:
        return grid

    rows = list(grid)
    for y, xs in by_row.items():
        rows[y] = tuple(None if x in xs else cell for x, cell in enumerate(grid[y]))
    return tuple(rows)


def capture_stones(grid: Grid, last_move: Position, color: Color) -> Tuple[Grid, List[Position]]:
    """
    Remove opponent groups left without liberties by a move.

    Only opponent groups touching last_move are examined, so the mover's
    own stones are never captured here.

    Args:
        grid: Board with the move already placed
        last_move: Position just played
        color: Color that played it

    Returns:
        (new grid, captured positions). Captured positions are
        deduplicated; the grid is returned unchanged if nothing was taken.
    """
    size = len(grid)
    opponent = color.opponent
    captured: List[Position] = []
    seen: Set[Position] = set()

    for neighbor in get_neighbors(size, last_move):
        if neighbor in seen or grid[neighbor.y][neighbor.x] != opponent:
            continue
        group = find_group(grid, neighbor)
        # Mark the whole group so a second neighbor in it is skipped
        seen |= group
        if not _group_liberties(grid, group):
            captured.extend(sorted(group, key=lambda p: (p.y, p.x)))

    return remove_stones(grid, captured), captured


def would_be_suicide(grid: Grid, position: Position, color: Color) -> bool:
    """
    Check whether playing color at position would be suicide.

    The stone is placed on a scratch grid. A move that captures anything
    is never suicide; otherwise it is suicide when the placed group has
    no liberties.
    """
    test_grid = place_stone(grid, position, color)

    _, captured = capture_stones(test_grid, position, color)
    if captured:
        return False

    return count_liberties(test_grid, position) == 0


def count_stones(grid: Grid) -> StoneCount:
    """Count black and white stones with a full board scan."""
    black = 0
    white = 0
    for row in grid:
        for cell in row:
            if cell == Color.BLACK:
                black += 1
            elif cell == Color.WHITE:
                white += 1
    return StoneCount(black, white)
