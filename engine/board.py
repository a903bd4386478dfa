"""
Board primitives for the TicTacToe engine.
Marks, cell addressing, and the fixed winning lines.
"""

from enum import Enum
from numbers import Integral
from typing import Optional, Tuple

from .config import EngineConfig


class Mark(Enum):
    """The two marks a player can place."""
    X = "X"
    O = "O"
    
    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


# A cell is either empty (None) or holds a mark
Cell = Optional[Mark]

BOARD_SIZE = EngineConfig.BOARD_SIZE
CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9

# All possible winning lines as index triples (row-major)
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def empty_board() -> Tuple[Cell, ...]:
    """Create a board with every cell empty."""
    return (None,) * CELL_COUNT


def is_valid_position(position) -> bool:
    """
    Check that a position addresses a cell on the board.
    
    Any Integral is accepted (numpy ints too); bool is rejected
    even though it is an int subclass.
    """
    if isinstance(position, bool) or not isinstance(position, Integral):
        return False
    return 0 <= position < CELL_COUNT


def position_to_cell(position: int) -> Tuple[int, int]:
    """
    Convert a board index to (row, col).
    
    Args:
        position: Index 0-8.
        
    Returns:
        (row, col), both 0-2.
    """
    if not is_valid_position(position):
        raise ValueError(f"Invalid position {position!r}. Must be 0-{CELL_COUNT - 1}.")
    return divmod(int(position), BOARD_SIZE)


def cell_to_position(row: int, col: int) -> int:
    """Convert (row, col) to a board index."""
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise ValueError(f"Invalid cell ({row}, {col}). Must be 0-{BOARD_SIZE - 1}.")
    return row * BOARD_SIZE + col


def cell_label(position: int, cell: Cell = None) -> str:
    """
    Accessible label for a cell, 1-based like a screen reader expects.
    
    Example: "Cell (1, 2), X"
    """
    row, col = position_to_cell(position)
    label = f"Cell ({row + 1}, {col + 1})"
    if cell is not None:
        label += f", {cell.value}"
    return label
