"""
TicTacToe game engine.
Handles board state, turn order, and win/draw detection.
"""

from .board import Mark, WINNING_LINES, position_to_cell, cell_to_position, cell_label
from .config import EngineConfig
from .game_state import GameState
from .win_checker import GameStatus, WinChecker
from .move_validator import MoveValidator, RejectReason, ValidationResult
from .game_engine import GameEngine, MoveResult

__version__ = "1.0.0"
