"""Rule constants shared by the board and rules modules."""

# Smallest board on which capture and ko can occur.
MIN_BOARD_SIZE = 2

# Winner value for a finished game with equal stone counts.
DRAW = "draw"
