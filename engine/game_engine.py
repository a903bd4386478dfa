"""
Game engine for TicTacToe.
Owns the current game state and applies moves and resets to it.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .game_state import GameState
from .move_validator import MoveValidator, RejectReason


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    """Outcome of try_move: the resulting state, plus why if rejected."""
    accepted: bool
    state: GameState
    reason: Optional[RejectReason] = None


class GameEngine:
    """
    Single source of truth for a game of TicTacToe.
    
    Callers only ever get frozen GameState snapshots back; the engine
    swaps in a new snapshot on every accepted move or reset.
    
    Invalid moves never raise. apply_move() hands back the unchanged
    state, and try_move() says why in MoveResult.reason.
    
    Not thread safe: a multi-threaded host must serialize calls.
    """
    
    def __init__(self):
        self.validator = MoveValidator()
        self._state = GameState.initial()
    
    def get_state(self) -> GameState:
        """Current snapshot. No side effects."""
        return self._state
    
    def reset(self) -> GameState:
        """Start over: empty board, X to move."""
        self._state = GameState.initial()
        logger.debug("Game reset")
        return self._state
    
    def apply_move(self, position) -> GameState:
        """
        Place the current mark at position.
        
        Args:
            position: Board index 0-8.
            
        Returns:
            The new state, or the unchanged state if the move is rejected.
        """
        return self.try_move(position).state
    
    def try_move(self, position) -> MoveResult:
        """
        Like apply_move(), but reports whether the move was taken.
        
        Args:
            position: Board index 0-8.
            
        Returns:
            MoveResult with the resulting state and a reject reason if any.
        """
        result = self.validator.validate_move(self._state, position)
        
        if not result.is_valid:
            logger.debug("Move rejected: %s", result.error_message)
            return MoveResult(accepted=False, state=self._state, reason=result.reason)
        
        position = int(position)
        mark = self._state.next_mark
        self._state = self._state.place(position)
        logger.debug("%s played %d", mark.value, position)
        
        status = self._state.status
        if status.is_terminal:
            logger.info("Game over: %s", self._state.status_message())
        
        return MoveResult(accepted=True, state=self._state)
