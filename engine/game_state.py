"""
Game state for the TicTacToe engine.
An immutable snapshot of the board and whose turn it is.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .board import (
    BOARD_SIZE, CELL_COUNT, Cell, Mark, cell_to_position, empty_board
)
from .config import EngineConfig
from .win_checker import GameStatus, WinChecker


_win_checker = WinChecker()


@dataclass(frozen=True)
class GameState:
    """
    The complete state of the TicTacToe game.
    
    Tracks:
    - The 9 cells (None means empty, otherwise a Mark)
    - Which mark moves next
    
    The status is never stored: it is worked out from the board
    every time it's asked for, so it can't drift from the board.
    Snapshots are frozen; a move produces a new one.
    """
    
    board: Tuple[Cell, ...] = field(default_factory=empty_board)
    
    # Stays stable once the game is over
    next_mark: Mark = Mark(EngineConfig.FIRST_MARK)
    
    def __post_init__(self):
        board = tuple(self.board)
        if len(board) != CELL_COUNT:
            raise ValueError(f"Board must have {CELL_COUNT} cells, got {len(board)}")
        for cell in board:
            if cell is not None and not isinstance(cell, Mark):
                raise ValueError(f"Invalid cell value {cell!r}")
        if not isinstance(self.next_mark, Mark):
            raise ValueError(f"Invalid next mark {self.next_mark!r}")
        
        # Accept lists from callers but always hold a tuple
        object.__setattr__(self, "board", board)
    
    @classmethod
    def initial(cls) -> "GameState":
        """Empty board, X to move."""
        return cls()
    
    @property
    def status(self) -> GameStatus:
        return _win_checker.get_status(self.board)
    
    @property
    def winner(self) -> Optional[Mark]:
        return self.status.winner
    
    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal
    
    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        """Index triple of the completed line, for highlighting."""
        return _win_checker.get_winning_line(self.board)
    
    @property
    def move_count(self) -> int:
        return sum(1 for cell in self.board if cell is not None)
    
    def get_cell(self, row: int, col: int) -> Cell:
        """Get the cell at (row, col)."""
        return self.board[cell_to_position(row, col)]
    
    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.
        
        Returns:
            List of board indices, ascending.
        """
        return [i for i, cell in enumerate(self.board) if cell is None]
    
    def place(self, position: int) -> "GameState":
        """
        Snapshot with next_mark placed at position and the turn flipped.
        
        No rule checks happen here; GameEngine validates first.
        """
        board = list(self.board)
        board[position] = self.next_mark
        return GameState(board=tuple(board), next_mark=self.next_mark.opposite())
    
    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize for a UI or test harness.
        
        Returns:
            {"board": [None|"X"|"O", ...], "nextMark": "X"|"O",
             "status": "in_progress"|"draw"|"X"|"O"}
        """
        return {
            "board": [cell.value if cell is not None else None for cell in self.board],
            "nextMark": self.next_mark.value,
            "status": self.status.value,
        }
    
    def status_message(self) -> str:
        """Human readable status line."""
        status = self.status
        if status == GameStatus.DRAW:
            return "It's a draw!"
        if status.winner is not None:
            return f"Player {status.winner.value} wins!"
        return f"Player {self.next_mark.value}'s turn"
    
    def render(self, show_positions: bool = False) -> str:
        """
        Draw the board as a text grid with the status underneath.
        
        Args:
            show_positions: Print each empty cell's index instead of a blank.
        """
        border = "+" + "---+" * BOARD_SIZE
        lines = [border]
        
        for row in range(BOARD_SIZE):
            glyphs = []
            for col in range(BOARD_SIZE):
                cell = self.get_cell(row, col)
                if cell is not None:
                    glyphs.append(cell.value)
                elif show_positions:
                    glyphs.append(str(cell_to_position(row, col)))
                else:
                    glyphs.append(EngineConfig.EMPTY_GLYPH)
            lines.append("|" + "|".join(f" {g} " for g in glyphs) + "|")
            lines.append(border)
        
        lines.append(self.status_message())
        return "\n".join(lines)
