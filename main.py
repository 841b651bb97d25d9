"""
Main script for terminal TicTacToe.

This script ties together:
- Logic (game state, move validation, win checking, AI)
- Console (board drawing, move input)

Run this script to play TicTacToe on an NxN board, against a friend
or against the computer with --solo.
"""

import argparse
import sys
import time
from typing import Callable, Optional, Tuple

# Logic imports
from logic import __version__
from logic.config import GameConfig
from logic.game_state import GameState, Player
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker
from logic.ai_player import AIPlayer, Difficulty

# Console imports
from console.config import ConsoleConfig
from console.renderer import TerminalRenderer
from console.prompt import MovePrompt, QuitGame


class TicTacToeGame:
    """
    Main controller for a terminal TicTacToe game.

    Game flow:
    1. Print the board and whose turn it is
    2. Human players type a row and a column; the CPU picks its own move
    3. Check the lines through the new mark for a win, or the board for a draw
    4. Pass the turn and repeat until someone wins or it's a stalemate
    """

    def __init__(
        self,
        size: int = GameConfig.DEFAULT_BOARD_SIZE,
        solo: bool = False,
        difficulty: Difficulty = Difficulty.HARD,
        cpu_first: bool = False,
        seed: Optional[int] = None,
        delay: float = ConsoleConfig.TURN_DELAY,
        debug: bool = GameConfig.DEBUG_MODE,
        input_fn: Callable[[], str] = input
    ):
        """
        Initialize the game.

        Args:
            size: Board dimension N.
            solo: Play against the computer.
            difficulty: Computer strength (solo only).
            cpu_first: The computer opens the game and plays X (solo only).
            seed: Seed for the computer's random choices.
            delay: Pause before each turn, in seconds.
            debug: Print AI search statistics.
            input_fn: Where typed lines come from.
        """
        if cpu_first and not solo:
            raise ValueError("cpu_first needs single player mode")

        first_player = Player.CPU if cpu_first else Player.ONE

        self.game_state = GameState.new(size=size, solo=solo, first_player=first_player)
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(Player.CPU, difficulty=difficulty, seed=seed, debug=debug) if solo else None

        self.renderer = TerminalRenderer()
        self.prompt = MovePrompt(input_fn=input_fn)
        self.delay = delay

    def play(self) -> GameState:
        """
        Run the game until it's over or a player quits.

        Returns:
            The final game state. is_game_over is False if a player quit.
        """
        self.renderer.print_intro(self.game_state.size, self.game_state.solo)

        try:
            while not self.game_state.is_game_over:
                self._play_turn()
        except QuitGame:
            print()
            print("Game quit by user.")
            return self.game_state

        self.renderer.print_result(self.game_state)
        return self.game_state

    def _play_turn(self):
        """Run one turn. Returns without moving if the input was rejected."""
        if self.delay > 0:
            time.sleep(self.delay)

        state = self.game_state
        self.renderer.print_board(state)
        self.renderer.print_turn(state.current_player, state.get_current_piece())

        if state.current_player == Player.CPU:
            move = self._cpu_move()
        else:
            move = self._human_move()

        if move is None:
            return

        row, col = move
        state.make_move(row, col)
        self.win_checker.update_game_state(state, state.last_move)

    def _human_move(self) -> Optional[Tuple[int, int]]:
        """
        Ask the current player for a cell.

        Returns:
            (row, col), or None after printing why the input was rejected.
        """
        state = self.game_state

        row = self.prompt.read_index("row")
        if row is None:
            self.renderer.print_error("invalid row")
            return None

        result = self.validator.validate_row(state, row)
        if not result.is_valid:
            self.renderer.print_error(result.error_message)
            return None

        col = self.prompt.read_index("col")
        if col is None:
            self.renderer.print_error("invalid col")
            return None

        result = self.validator.validate_move(state, row, col)
        if not result.is_valid:
            self.renderer.print_error(result.error_message)
            return None

        return row, col

    def _cpu_move(self) -> Optional[Tuple[int, int]]:
        """Let the AI pick a cell."""
        print("CPU is thinking...")

        move = self.ai.get_best_move(self.game_state)

        if move is None:
            self.renderer.print_error("CPU could not find a move")
            return None

        print(f"CPU selects row {move[0]}, col {move[1]}")
        return move


def board_size(text: str) -> int:
    """argparse type for --size: an integer from MIN_BOARD_SIZE to MAX_BOARD_SIZE."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid board size: '{text}'") from None

    if value < GameConfig.MIN_BOARD_SIZE:
        raise argparse.ArgumentTypeError(
            f"board size must be at least {GameConfig.MIN_BOARD_SIZE}, got {value}"
        )
    if value > GameConfig.MAX_BOARD_SIZE:
        raise argparse.ArgumentTypeError(
            f"board size must be at most {GameConfig.MAX_BOARD_SIZE}, got {value}"
        )
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tictactoe",
        description="TicTacToe: interactive terminal version with a scalable board"
    )
    parser.add_argument(
        "-s", "--size",
        type=board_size,
        default=GameConfig.DEFAULT_BOARD_SIZE,
        help="number of rows/cols on the board (default: %(default)s)"
    )
    parser.add_argument(
        "--solo",
        action="store_true",
        help="single player mode against the computer"
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.name.lower() for d in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY,
        help="computer strength in single player mode (default: %(default)s)"
    )
    parser.add_argument(
        "--cpu-first",
        action="store_true",
        help="let the computer play first (as X)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed for the computer's random choices"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=ConsoleConfig.TURN_DELAY,
        help="pause before each turn in seconds (default: %(default)s)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=GameConfig.DEBUG_MODE,
        help="print AI search statistics"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv=None, input_fn: Callable[[], str] = input) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.cpu_first and not args.solo:
        parser.error("--cpu-first requires --solo")

    game = TicTacToeGame(
        size=args.size,
        solo=args.solo,
        difficulty=Difficulty.from_name(args.difficulty),
        cpu_first=args.cpu_first,
        seed=args.seed,
        delay=args.delay,
        debug=args.debug,
        input_fn=input_fn
    )

    try:
        game.play()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
