"""
Terminal renderer for TicTacToe.
Draws the board and the game messages as plain text.
"""

from typing import List, Optional

from logic.game_state import GameState, Player, Piece
from .config import ConsoleConfig


class TerminalRenderer:
    """
    Draws the game for terminal play.

    The board looks like this (labels widen for boards of 10 and up):

              0   1   2
            +---+---+---+
        0   | X |   |   |
            +---+---+---+
        1   |   | O |   |
            +---+---+---+
        2   |   |   |   |
            +---+---+---+
    """

    def __init__(self, config: Optional[ConsoleConfig] = None):
        self.config = config or ConsoleConfig()

    def format_board(self, game_state: GameState) -> str:
        """
        Render the board.

        Args:
            game_state: The game to draw.

        Returns:
            The board as a multi-line string.
        """
        n = game_state.size
        label_width = len(str(n - 1))
        margin = " " * (label_width + 3)
        separator = margin + "+" + "---+" * n

        lines: List[str] = []
        lines.append(margin + "".join(f" {col:^3}" for col in range(n)).rstrip())
        lines.append(separator)

        for row in range(n):
            cells = []
            for col in range(n):
                piece = game_state.piece_at(row, col)
                mark = self.config.EMPTY_CELL if piece is None else str(piece)
                cells.append(f" {mark} |")
            lines.append(f"{row:>{label_width}}   |" + "".join(cells))
            lines.append(separator)

        return "\n".join(lines)

    def print_board(self, game_state: GameState):
        """Print the board to console."""
        print(self.format_board(game_state))

    def print_intro(self, size: int, solo: bool):
        """Print the title and the game settings."""
        print()
        print(f"{self.config.TITLE:^{self.config.TITLE_WIDTH}}")
        print()
        print(f"BOARD SIZE: {size}x{size}")
        print(f"MODE: {'single player' if solo else 'two player'}")
        print()

    def print_turn(self, player: Player, piece: Piece):
        print()
        print(f'TURN: Player {player} ("{piece}")')
        print()

    def print_error(self, message: str):
        print()
        print(f"ERROR: {message}")
        print()

    def format_result(self, game_state: GameState) -> str:
        """
        Describe how the game ended.

        Returns:
            The game-over line, or an empty string if the game isn't over.
        """
        if not game_state.is_game_over:
            return ""

        if game_state.winner is not None:
            player = game_state.player_for(game_state.winner)
            return f"GAME OVER: Player {player} wins!"

        return "GAME OVER: stalemate"

    def print_result(self, game_state: GameState):
        """Print the final board and the result."""
        self.print_board(game_state)
        print()
        print(self.format_result(game_state))
        print()
