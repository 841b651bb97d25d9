"""
Console configuration for TicTacToe.
Settings for the interactive terminal game.
"""


class ConsoleConfig:
    """
    Configuration class for terminal settings.
    """

    # ==================== BANNER ====================
    TITLE = "TIC TAC TOE: INTERACTIVE TERMINAL VERSION"
    TITLE_WIDTH = 80  # Title is centered in this many columns

    # ==================== TURN LOOP ====================
    # Pause before each turn (seconds)
    TURN_DELAY = 0.5

    # Typed at a row/col prompt to leave the game
    QUIT_COMMANDS = ("q", "quit", "exit")

    # ==================== BOARD DRAWING ====================
    EMPTY_CELL = " "
