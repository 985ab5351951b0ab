"""
Game state representation for Jungo (pure Go).

A Jungo game state consists of:
- The grid (tuple of row tuples, indexed grid[y][x])
- Whose turn it is, the ko point, move count and last move
- Terminal flag and winner
- Stone counts, maintained incrementally by the rules

States are immutable. The rules never modify a state; every accepted
move produces a new one, and rows the move did not touch are shared
between the old and new grid.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Tuple, Union

from .constants import DRAW


class Color(str, Enum):
    """Stone color. Values are the external string tags."""

    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> "Color":
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    def __str__(self) -> str:
        return self.value


Cell = Optional[Color]  # None = empty
Grid = Tuple[Tuple[Cell, ...], ...]
Winner = Union[Color, str, None]  # Color, DRAW or None while in progress


class Position(NamedTuple):
    """Board coordinate, 0-indexed from the top-left corner."""

    x: int
    y: int


class StoneCount(NamedTuple):
    """Stones of each color currently on the board."""

    black: int
    white: int

    def of(self, color: Color) -> int:
        """Count for a single color."""
        return self.black if color is Color.BLACK else self.white


class MoveType(str, Enum):
    PLAY = "play"
    PASS = "pass"
    RESIGN = "resign"


@dataclass(frozen=True)
class Move:
    """
    A candidate move.

    Build with Move.play(x, y), Move.play(position), Move.pass_turn()
    or Move.resign(). Only play moves carry a position.
    """

    kind: MoveType
    position: Optional[Position] = None

    def __post_init__(self) -> None:
        """Validate that the position matches the move kind."""
        # Accept the plain string tags ("play", "pass", "resign")
        object.__setattr__(self, "kind", MoveType(self.kind))
        if self.kind is MoveType.PLAY:
            if self.position is None:
                raise ValueError("Play move requires a position")
            if not isinstance(self.position, Position):
                # Accept plain (x, y) pairs
                object.__setattr__(self, "position", Position(*self.position))
            for coord in self.position:
                if isinstance(coord, bool) or not isinstance(coord, int):
                    raise ValueError(f"Coordinates must be integers, got {self.position}")
        elif self.position is not None:
            raise ValueError(f"{self.kind.value} move cannot carry a position")

    @classmethod
    def play(cls, x: Union[int, Position, Tuple[int, int]], y: Optional[int] = None) -> "Move":
        if y is None:
            return cls(MoveType.PLAY, Position(*x))
        return cls(MoveType.PLAY, Position(x, y))

    @classmethod
    def pass_turn(cls) -> "Move":
        return cls(MoveType.PASS)

    @classmethod
    def resign(cls) -> "Move":
        return cls(MoveType.RESIGN)


@dataclass(frozen=True)
class PlayedMove:
    """A move as recorded in GameState.last_move: the move plus who played it."""

    kind: MoveType
    color: Color
    position: Optional[Position] = None

    @classmethod
    def from_move(cls, move: Move, color: Color) -> "PlayedMove":
        return cls(kind=move.kind, color=color, position=move.position)


class MoveError(str, Enum):
    """Reasons a move is rejected. Values are the external string tags."""

    INVALID_POSITION = "invalid_position"
    OCCUPIED = "occupied"
    SUICIDE = "suicide"
    KO = "ko"
    GAME_OVER = "game_over"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GameState:
    """
    Immutable game state.

    Board layout for size=5 (grid[y][x]):
          x: 0 1 2 3 4
       y=0   . . . . .
       y=1   . B . . .
       y=2   . . W . .
       ...

    stone_count always equals count_stones(grid); the rules keep it
    up to date incrementally rather than rescanning the board.
    """

    grid: Grid
    size: int
    current_player: Color = Color.BLACK
    ko_point: Optional[Position] = None
    move_count: int = 0
    last_move: Optional[PlayedMove] = None
    is_over: bool = False
    winner: Winner = None
    stone_count: StoneCount = StoneCount(0, 0)

    def __post_init__(self) -> None:
        """Validate state invariants."""
        if len(self.grid) != self.size or any(len(row) != self.size for row in self.grid):
            raise ValueError(f"Grid doesn't match board size {self.size}x{self.size}")
        if not isinstance(self.current_player, Color):
            raise ValueError(f"Invalid player {self.current_player!r}")
        if self.move_count < 0:
            raise ValueError(f"Negative move count {self.move_count}")
        if (self.last_move is None) != (self.move_count == 0):
            raise ValueError("last_move must be set exactly when move_count > 0")
        if self.stone_count.black < 0 or self.stone_count.white < 0:
            raise ValueError(f"Negative stone count {self.stone_count}")
        if self.ko_point is not None:
            x, y = self.ko_point
            if not (0 <= x < self.size and 0 <= y < self.size):
                raise ValueError(f"Ko point {self.ko_point} is off the board")
            if self.grid[y][x] is not None:
                raise ValueError(f"Ko point {self.ko_point} is not empty")
        if not self.is_over and self.winner is not None:
            raise ValueError("Winner set on a game in progress")
        if self.winner is not None and self.winner not in (Color.BLACK, Color.WHITE, DRAW):
            raise ValueError(f"Invalid winner {self.winner!r}")

    def __getitem__(self, position: Tuple[int, int]) -> Cell:
        """Cell at (x, y)."""
        x, y = position
        return self.grid[y][x]

    def __str__(self) -> str:
        """Human-readable board representation."""
        # Local import: diagram imports Grid/Color from this module
        from .diagram import format_grid

        if not self.is_over:
            status = f"{self.current_player.value.capitalize()}'s turn (move {self.move_count + 1})"
        elif self.winner == DRAW:
            status = "Game over: draw"
        else:
            status = f"Game over: {self.winner} wins"
        counts = f"Stones: black {self.stone_count.black}, white {self.stone_count.white}"
        return f"\n{format_grid(self.grid)}\n\n{counts}\n{status}\n"


@dataclass(frozen=True)
class MoveResult:
    """Outcome of play_move: a new state on success, an error tag otherwise."""

    success: bool
    state: Optional[GameState] = None
    error: Optional[MoveError] = None

    @classmethod
    def ok(cls, state: GameState) -> "MoveResult":
        return cls(success=True, state=state)

    @classmethod
    def fail(cls, error: MoveError) -> "MoveResult":
        return cls(success=False, error=error)
