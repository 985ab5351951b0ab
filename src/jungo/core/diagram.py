"""
Text diagrams of Jungo boards.

Diagram format, one board row per line:

        0 1 2 3 4
      0 . B . W .
      1 . . B . .
      2 B . . . .
      3 . W . B .
      4 . . . . .

'.' is empty, 'B' black, 'W' white. The column header line and the row
numbers are optional, and cells may also be written without spaces
(".B.W.").
"""

import re
from typing import List

from .game_state import Cell, Color, Grid

_CELL_CHARS = {".": None, "B": Color.BLACK, "W": Color.WHITE}
_CHAR_FOR_CELL = {None: ".", Color.BLACK: "B", Color.WHITE: "W"}

_HEADER_RE = re.compile(r"^[\d\s]+$")
_ROW_NUMBER_RE = re.compile(r"^\d+$")


def parse_diagram(text: str) -> Grid:
    """
    Parse a board diagram into a grid.

    Args:
        text: Diagram in the format described in the module docstring

    Returns:
        Grid indexed grid[y][x]

    Raises:
        ValueError: Empty input, unknown characters, ragged or non-square rows
    """
    lines = [line.strip() for line in text.strip().splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        raise ValueError("Empty board diagram")

    # A first line made only of digits and spaces is the column header
    if _HEADER_RE.match(lines[0]):
        lines = lines[1:]

    rows: List[tuple] = []
    for line in lines:
        parts = line.split()
        if parts and _ROW_NUMBER_RE.match(parts[0]):
            parts = parts[1:]
        if not parts:
            continue

        row: List[Cell] = []
        for part in parts:
            for char in part:
                if char not in _CELL_CHARS:
                    raise ValueError(f"Invalid character {char!r}. Use '.', 'B' or 'W'.")
                row.append(_CELL_CHARS[char])
        rows.append(tuple(row))

    if not rows:
        raise ValueError("No board rows found in diagram")

    size = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != size:
            raise ValueError(f"All rows must have the same length. Expected {size}, got {len(row)} at row {i}")
    if len(rows) != size:
        raise ValueError(f"Board must be square. Expected {size} rows, got {len(rows)}")

    return tuple(rows)


def format_grid(grid: Grid) -> str:
    """Render a grid as a diagram with column header and row numbers."""
    size = len(grid)
    width = len(str(size - 1))

    header = " " * (width + 1) + " ".join(f"{x:>{width}}" for x in range(size))
    lines = [header]
    for y, row in enumerate(grid):
        cells = " ".join(f"{_CHAR_FOR_CELL[cell]:>{width}}" for cell in row)
        lines.append(f"{y:>{width}} {cells}")
    return "\n".join(lines)
