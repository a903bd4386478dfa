"""
Console front end for the TicTacToe engine.

Two people share the keyboard and take turns entering cell numbers.
The engine does all the rule checking; this script only reads input,
prints the board, and reports what happened.

Run this script to play TicTacToe in a terminal!
"""

import argparse
import json
import logging
import sys
from typing import Iterable, List, Optional

from engine import EngineConfig, GameEngine, GameState, cell_label


class ConsoleGame:
    """
    Terminal adapter around a GameEngine.
    
    Game flow:
    1. Show the board with the free cell numbers
    2. Read a cell number (or 'r' to reset, 'q' to quit)
    3. Hand it to the engine and report a rejected move
    4. Repeat until someone wins or it's a draw
    """
    
    def __init__(self, as_json: bool = False):
        """
        Args:
            as_json: Print the serialized state instead of the text board.
        """
        self.engine = GameEngine()
        self.as_json = as_json
    
    def show(self, state: Optional[GameState] = None):
        """Print the board (or its JSON form)."""
        state = state or self.engine.get_state()
        if self.as_json:
            print(json.dumps(state.to_dict()))
        else:
            print()
            print(state.render(show_positions=not state.is_game_over))
    
    def play_move(self, position: int) -> bool:
        """
        Send one move to the engine.
        
        Returns:
            True if the move was accepted.
        """
        result = self.engine.try_move(position)
        if not result.accepted:
            print(f"Move {position} rejected: {result.reason.value}")
            return False
        
        print(cell_label(position, result.state.board[position]))
        return True
    
    def replay(self, moves: Iterable[int]) -> GameState:
        """Apply a scripted list of moves and show the final board."""
        for position in moves:
            self.play_move(position)
        self.show()
        return self.engine.get_state()
    
    def start(self):
        """Interactive loop."""
        self.show()
        
        while True:
            try:
                raw = input(EngineConfig.PROMPT).strip().lower()
            except EOFError:
                print()
                return
            
            if raw == "q":
                return
            if raw == "r":
                self.engine.reset()
                print("Game reset!")
                self.show()
                continue
            
            try:
                position = int(raw)
            except ValueError:
                print(f"'{raw}' is not a cell number.")
                continue
            
            if self.play_move(position):
                self.show()


def parse_moves(text: str) -> List[int]:
    """Parse a comma separated move list like '0,4,8'."""
    try:
        return [int(part) for part in text.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid move list: {text!r}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--moves",
        type=parse_moves,
        help="Replay a comma separated move list (e.g. 0,1,4,2,8) and exit"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the game state as JSON instead of a board"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every move the engine sees"
    )
    
    args = parser.parse_args(argv)
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else EngineConfig.LOG_LEVEL,
        format=EngineConfig.LOG_FORMAT,
    )
    
    game = ConsoleGame(as_json=args.json)
    
    if args.moves is not None:
        game.replay(args.moves)
        return 0
    
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
