"""
Move validator for the TicTacToe engine.
Validates that moves follow the rules.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .board import CELL_COUNT, is_valid_position
from .game_state import GameState


class RejectReason(Enum):
    """Why a move was turned down."""
    OUT_OF_RANGE = "out_of_range"
    CELL_OCCUPIED = "cell_occupied"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    reason: Optional[RejectReason] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.
    
    Rules:
    1. Position must be an index 0-8
    2. Can only place on empty cells
    3. Game must not be over
    """
    
    def validate_move(self, game_state: GameState, position) -> ValidationResult:
        """
        Validate a move.
        
        Args:
            game_state: Current game state.
            position: Board index to place the next mark (0-8).
            
        Returns:
            ValidationResult with is_valid, reason and error_message.
        """
        if not is_valid_position(position):
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.OUT_OF_RANGE,
                error_message=f"Invalid position {position!r}. Must be 0-{CELL_COUNT - 1}."
            )
        
        status = game_state.status
        if status.is_terminal:
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.GAME_OVER,
                error_message=f"Game is already over ({status.value})."
            )
        
        occupant = game_state.board[position]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.CELL_OCCUPIED,
                error_message=f"Cell {position} is already occupied by {occupant.value}."
            )
        
        return ValidationResult(is_valid=True)
    
    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current mark.
        
        Returns:
            List of board indices; empty once the game is over.
        """
        if game_state.is_game_over:
            return []
        
        return game_state.get_empty_cells()
