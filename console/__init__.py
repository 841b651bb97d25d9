"""
Console module for TicTacToe.
Handles drawing the board and reading moves in the terminal.
"""

from .config import ConsoleConfig
from .renderer import TerminalRenderer
from .prompt import MovePrompt, QuitGame
