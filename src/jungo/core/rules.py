"""
Jungo game rules implementation.

Implements the Jungo (pure Go) rules:
- Surrounded groups are captured
- Suicide is forbidden unless the move captures
- Simple ko: a single-stone recapture is forbidden for one ply
- Two consecutive passes end the game; more stones on the board wins
- Resignation ends the game in the opponent's favor

Every function is pure. play_move never raises for an illegal move; it
returns a failed MoveResult and leaves the input state untouched.
"""

import logging
from dataclasses import replace
from typing import List, Optional

from .board import (
    capture_stones,
    count_stones,
    create_empty_board,
    find_group,
    is_valid_position,
    place_stone,
    validate_board_size,
    would_be_suicide,
)
from .constants import DRAW
from .game_state import (
    Color,
    GameState,
    Grid,
    Move,
    MoveError,
    MoveResult,
    MoveType,
    PlayedMove,
    Position,
    StoneCount,
    Winner,
)

logger = logging.getLogger(__name__)


def create_game(size: int) -> GameState:
    """
    Create the initial game state.

    Args:
        size: Board dimension, an integer >= MIN_BOARD_SIZE

    Returns:
        Empty board, black to move, move 0

    Raises:
        TypeError: size is not an integer
        ValueError: size is below MIN_BOARD_SIZE
    """
    state = GameState(grid=create_empty_board(size), size=size)
    logger.info("Created %dx%d game", size, size)
    return state


def _to_cell(cell) -> Optional[Color]:
    if cell is None:
        return None
    try:
        return Color(cell)
    except ValueError:
        raise ValueError(f"Invalid cell {cell!r}. Use None, 'black' or 'white'.") from None


def state_from_grid(
    grid: Grid,
    current_player: Color = Color.BLACK,
    ko_point: Optional[Position] = None,
) -> GameState:
    """
    Build an in-progress state at move 0 from an existing grid.

    Stone counts are seeded from a full scan of the grid.

    Args:
        grid: Square grid, e.g. from parse_diagram(). Cells are None,
            Color or the strings "black"/"white".
        current_player: Color to move
        ko_point: Point forbidden for the next move, if any

    Returns:
        GameState for the position

    Raises:
        ValueError: Unknown cell value, non-square grid or size below minimum
    """
    grid = tuple(tuple(_to_cell(cell) for cell in row) for row in grid)
    size = len(grid)
    validate_board_size(size)
    return GameState(
        grid=grid,
        size=size,
        current_player=current_player,
        ko_point=Position(*ko_point) if ko_point is not None else None,
        stone_count=count_stones(grid),
    )


def _score(stone_count: StoneCount) -> Winner:
    if stone_count.black > stone_count.white:
        return Color.BLACK
    if stone_count.white > stone_count.black:
        return Color.WHITE
    return DRAW


def _reject(state: GameState, move: Move, error: MoveError) -> MoveResult:
    logger.debug("Rejected %s at move %d: %s", move, state.move_count + 1, error.value)
    return MoveResult.fail(error)


def _apply_resign(state: GameState, move: Move) -> GameState:
    color = state.current_player
    # ko_point is left as-is; it has no effect once the game is over
    new_state = replace(
        state,
        last_move=PlayedMove.from_move(move, color),
        move_count=state.move_count + 1,
        is_over=True,
        winner=color.opponent,
    )
    logger.info("%s resigned at move %d", color.value, new_state.move_count)
    return new_state


def _apply_pass(state: GameState, move: Move) -> GameState:
    color = state.current_player
    is_over = state.last_move is not None and state.last_move.kind is MoveType.PASS
    winner = _score(state.stone_count) if is_over else None

    new_state = replace(
        state,
        current_player=color.opponent,
        ko_point=None,
        move_count=state.move_count + 1,
        last_move=PlayedMove.from_move(move, color),
        is_over=is_over,
        winner=winner,
    )
    if is_over:
        logger.info(
            "Game over after two passes: black %d, white %d, winner %s",
            state.stone_count.black,
            state.stone_count.white,
            winner,
        )
    return new_state


def _apply_play(state: GameState, move: Move) -> MoveResult:
    position = move.position
    color = state.current_player

    # 1. On the board
    if not is_valid_position(state.size, position):
        return _reject(state, move, MoveError.INVALID_POSITION)

    # 2. Point is empty
    if state.grid[position.y][position.x] is not None:
        return _reject(state, move, MoveError.OCCUPIED)

    # 3. Ko
    if state.ko_point is not None and position == state.ko_point:
        return _reject(state, move, MoveError.KO)

    # 4. Suicide
    if would_be_suicide(state.grid, position, color):
        return _reject(state, move, MoveError.SUICIDE)

    # 5. Place and capture
    grid = place_stone(state.grid, position, color)
    grid, captured = capture_stones(grid, position, color)

    # 6. Ko only for one stone taken by a lone stone
    ko_point = None
    if len(captured) == 1 and len(find_group(grid, position)) == 1:
        ko_point = captured[0]

    # 7. Incremental stone count; captured stones are always the opponent's
    black, white = state.stone_count
    if color is Color.BLACK:
        black += 1
        white -= len(captured)
    else:
        white += 1
        black -= len(captured)

    # 8. Hand the turn over
    return MoveResult.ok(
        replace(
            state,
            grid=grid,
            current_player=color.opponent,
            ko_point=ko_point,
            move_count=state.move_count + 1,
            last_move=PlayedMove.from_move(move, color),
            stone_count=StoneCount(black, white),
        )
    )


def play_move(state: GameState, move: Move) -> MoveResult:
    """
    Apply a move and return the result.

    Checks run in a fixed order and stop at the first failure:
    game_over, then for play moves invalid_position, occupied, ko and
    suicide. A successful play places the stone, removes captured
    groups, re-arms ko for a single-stone capture by a lone stone,
    updates stone counts and passes the turn.

    Args:
        state: Current game state
        move: Move to apply

    Returns:
        MoveResult holding the new state, or the MoveError that rejected
        the move. The input state is never modified.
    """
    if state.is_over:
        return _reject(state, move, MoveError.GAME_OVER)

    if move.kind is MoveType.RESIGN:
        return MoveResult.ok(_apply_resign(state, move))
    if move.kind is MoveType.PASS:
        return MoveResult.ok(_apply_pass(state, move))
    if move.kind is MoveType.PLAY:
        return _apply_play(state, move)

    raise ValueError(f"Unexpected move type: {move.kind!r}")


def is_legal_move(state: GameState, move: Move) -> bool:
    """True if play_move would accept move."""
    return play_move(state, move).success


def generate_legal_moves(state: GameState) -> List[Position]:
    """
    Generate all legal stone placements for the current player.

    Pass and resign are always legal while the game is in progress and
    are not listed.

    Args:
        state: Current game state

    Returns:
        Legal positions in row-major order; empty once the game is over
    """
    if state.is_over:
        return []

    legal_moves = []
    color = state.current_player
    for y, row in enumerate(state.grid):
        for x, cell in enumerate(row):
            position = Position(x, y)
            if cell is not None or position == state.ko_point:
                continue
            if not would_be_suicide(state.grid, position, color):
                legal_moves.append(position)

    return legal_moves


def is_terminal(state: GameState) -> bool:
    """Check if the game has ended."""
    return state.is_over


def get_game_result(state: GameState) -> Optional[str]:
    """
    Get human-readable game result.

    Args:
        state: Game state

    Returns:
        Result string or None if not terminal
    """
    if not state.is_over:
        return None

    black, white = state.stone_count
    if state.last_move is not None and state.last_move.kind is MoveType.RESIGN:
        return f"{state.winner.value.capitalize()} wins by resignation"
    if state.winner == DRAW:
        return f"Draw {black}-{white}"
    if state.winner is Color.BLACK:
        return f"Black wins {black}-{white}"
    return f"White wins {white}-{black}"
