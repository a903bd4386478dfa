"""
Win checker for the TicTacToe engine.
Checks if a mark has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Sequence, Tuple

import numpy as np

from .board import CELL_COUNT, WINNING_LINES, Cell, Mark
from .config import EngineConfig


class GameStatus(Enum):
    """Outcome of a board. Values are the serialized form."""
    IN_PROGRESS = EngineConfig.IN_PROGRESS
    DRAW = EngineConfig.DRAW
    X_WON = Mark.X.value
    O_WON = Mark.O.value
    
    @classmethod
    def won_by(cls, mark: Mark) -> "GameStatus":
        """Get the Won status for a mark."""
        return cls(mark.value)
    
    @property
    def winner(self) -> Optional[Mark]:
        """The winning mark, or None if nobody has won."""
        if self in (GameStatus.X_WON, GameStatus.O_WON):
            return Mark(self.value)
        return None
    
    @property
    def is_terminal(self) -> bool:
        """Won and Draw are terminal; only a reset leaves them."""
        return self != GameStatus.IN_PROGRESS


# Cells encoded as small ints so lines can be compared in one shot
_CELL_CODES = {None: 0, Mark.X: 1, Mark.O: 2}


class WinChecker:
    """
    Checks for win conditions in TicTacToe.
    
    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    
    Every method is a pure function of the board passed in.
    """
    
    # (8, 3) index table, one row per winning line
    LINE_INDEX = np.array(WINNING_LINES, dtype=np.intp)
    
    def check_winner(self, board: Sequence[Cell]) -> Optional[Mark]:
        """
        Check if there's a winner.
        
        Args:
            board: The 9 cells, row-major.
            
        Returns:
            The winning Mark, or None if no winner yet.
        """
        rows = self._winning_rows(board)
        if rows.size == 0:
            return None
        
        # A legal game can't complete lines for both marks,
        # so the first match is the winner
        first_line = WINNING_LINES[rows[0]]
        return board[first_line[0]]
    
    def check_draw(self, board: Sequence[Cell]) -> bool:
        """
        Check if the game is a draw.
        
        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.check_winner(board) is not None:
            return False
        
        return all(cell is not None for cell in board)
    
    def get_status(self, board: Sequence[Cell]) -> GameStatus:
        """
        Work out the status of a board.
        
        Args:
            board: The 9 cells, row-major.
            
        Returns:
            Won(mark), Draw, or InProgress.
        """
        winner = self.check_winner(board)
        
        if winner is not None:
            return GameStatus.won_by(winner)
        if all(cell is not None for cell in board):
            return GameStatus.DRAW
        
        return GameStatus.IN_PROGRESS
    
    def get_winning_line(self, board: Sequence[Cell]) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.
        
        Returns:
            The winning line as an index triple, or None.
        """
        rows = self._winning_rows(board)
        if rows.size == 0:
            return None
        return WINNING_LINES[rows[0]]
    
    def _winning_rows(self, board: Sequence[Cell]) -> np.ndarray:
        """Indices into WINNING_LINES of every completed line."""
        codes = self._encode(board)
        
        lines = codes[self.LINE_INDEX]
        filled = lines[:, 0] != 0
        same = np.all(lines == lines[:, :1], axis=1)
        
        return np.flatnonzero(filled & same)
    
    def _encode(self, board: Sequence[Cell]) -> np.ndarray:
        """Turn a board into an int8 array (0 empty, 1 X, 2 O)."""
        if len(board) != CELL_COUNT:
            raise ValueError(f"Board must have {CELL_COUNT} cells, got {len(board)}")
        
        try:
            return np.array([_CELL_CODES[cell] for cell in board], dtype=np.int8)
        except KeyError as e:
            raise ValueError(f"Invalid cell value {e.args[0]!r}") from e
