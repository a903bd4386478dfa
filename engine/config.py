"""
Engine configuration for the TicTacToe engine.
Board constants, display glyphs, and console settings.
"""


class EngineConfig:
    """
    Configuration class for the game engine.
    
    The board size is fixed at 3x3; it lives here so derived
    values (cell count, render width) have one source.
    """
    
    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    
    # X always moves first after a reset
    FIRST_MARK = "X"
    
    # ==================== DISPLAY SETTINGS ====================
    # Glyph shown for an empty cell in render()
    EMPTY_GLYPH = " "
    
    # Serialized value of the status before the game ends
    IN_PROGRESS = "in_progress"
    DRAW = "draw"
    
    # ==================== CONSOLE SETTINGS ====================
    LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    PROMPT = "Enter a cell (0-8), 'r' to reset, 'q' to quit: "
