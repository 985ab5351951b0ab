"""Core game state representation and rules."""

from .constants import DRAW, MIN_BOARD_SIZE
from .game_state import (
    Color,
    GameState,
    Move,
    MoveError,
    MoveResult,
    MoveType,
    PlayedMove,
    Position,
    StoneCount,
)
from .board import (
    capture_stones,
    count_liberties,
    count_stones,
    create_empty_board,
    find_group,
    get_neighbors,
    is_valid_position,
    place_stone,
    remove_stones,
    would_be_suicide,
)
from .diagram import format_grid, parse_diagram
from .hash import init_zobrist_table, zobrist_hash
from .rules import (
    create_game,
    generate_legal_moves,
    get_game_result,
    is_legal_move,
    is_terminal,
    play_move,
    state_from_grid,
)

__all__ = [
    "DRAW",
    "MIN_BOARD_SIZE",
    "Color",
    "GameState",
    "Move",
    "MoveError",
    "MoveResult",
    "MoveType",
    "PlayedMove",
    "Position",
    "StoneCount",
    "capture_stones",
    "count_liberties",
    "count_stones",
    "create_empty_board",
    "find_group",
    "get_neighbors",
    "is_valid_position",
    "place_stone",
    "remove_stones",
    "would_be_suicide",
    "format_grid",
    "parse_diagram",
    "init_zobrist_table",
    "zobrist_hash",
    "create_game",
    "generate_legal_moves",
    "get_game_result",
    "is_legal_move",
    "is_terminal",
    "play_move",
    "state_from_grid",
]
