"""
Zobrist hashing for fast position hashing and transposition table lookups.

Zobrist hashing uses pre-generated random numbers to create unique hashes
for board positions. Two states with the same stones and the same player
to move hash equally, whatever move sequence produced them.
"""

import random
from typing import Dict, Tuple

from .game_state import Color, GameState

# Zobrist tables, one per board size, built on first use
_zobrist_tables: Dict[int, Dict[Tuple[int, int, Color], int]] = {}
_zobrist_player: Dict[int, Dict[Color, int]] = {}


def init_zobrist_table(size: int, seed: int = 42) -> None:
    """
    Initialize the Zobrist table for a board size with random 64-bit numbers.

    Args:
        size: Board dimension
        seed: Random seed for reproducibility
    """
    rng = random.Random(seed + size)

    table = {}
    for y in range(size):
        for x in range(size):
            for color in (Color.BLACK, Color.WHITE):
                table[(x, y, color)] = rng.getrandbits(64)

    _zobrist_tables[size] = table
    _zobrist_player[size] = {Color.BLACK: rng.getrandbits(64), Color.WHITE: rng.getrandbits(64)}


def zobrist_hash(state: GameState) -> int:
    """
    Hash the stones on the board and the player to move.

    Each occupied point contributes the table key for its (x, y, color);
    empty points contribute nothing. The key for the player to move is
    XORed in last, so the same stones with the other side to move hash
    differently.

    Args:
        state: GameState to hash

    Returns:
        64-bit hash value
    """
    if state.size not in _zobrist_tables:
        init_zobrist_table(state.size)
    table = _zobrist_tables[state.size]

    h = 0
    for y, row in enumerate(state.grid):
        for x, cell in enumerate(row):
            if cell is not None:
                h ^= table[(x, y, cell)]

    h ^= _zobrist_player[state.size][state.current_player]

    return h
