"""
Move input for TicTacToe.
Reads row and column selections from the terminal.
"""

from typing import Callable, Optional

from .config import ConsoleConfig


class QuitGame(Exception):
    """Raised when the player asks to leave, or input runs out."""


class MovePrompt:
    """
    Reads board coordinates typed by a player.

    Args:
        input_fn: Where lines come from (default: the builtin input).
        config: Console settings (quit commands).
    """

    def __init__(
        self,
        input_fn: Callable[[], str] = input,
        config: Optional[ConsoleConfig] = None
    ):
        self.input_fn = input_fn
        self.config = config or ConsoleConfig()

    def read_index(self, label: str) -> Optional[int]:
        """
        Prompt for one board index.

        Args:
            label: "row" or "col".

        Returns:
            The index, or None if the text isn't a non-negative integer.

        Raises:
            QuitGame: On a quit command or end of input.
        """
        print(f"select {label}:")

        try:
            text = self.input_fn()
        except EOFError:
            raise QuitGame("end of input") from None

        return self.parse_index(text)

    def parse_index(self, text: str) -> Optional[int]:
        """Parse a typed index. Raises QuitGame on a quit command."""
        text = text.strip()

        if text.lower() in self.config.QUIT_COMMANDS:
            raise QuitGame(text)

        # Only ASCII digits, with an optional leading "+"
        digits = text[1:] if text.startswith("+") else text
        if not (digits.isascii() and digits.isdigit()):
            return None

        return int(digits)
