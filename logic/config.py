"""
Game configuration for TicTacToe.
Board and computer opponent settings.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Command-line flags override these for a single run.
    """

    # ==================== BOARD SETTINGS ====================
    # Board is NxN, N in a row wins
    DEFAULT_BOARD_SIZE = 3
    MIN_BOARD_SIZE = 1

    # Largest board a game can use. MAX_BOARD_SIZE ** 2 must stay within
    # AI_NODE_BUDGET so a one-ply search of an open board fits the budget.
    MAX_BOARD_SIZE = 30

    # ==================== AI SETTINGS ====================
    # One of "easy", "medium", "hard"
    DEFAULT_DIFFICULTY = "hard"

    # Boards up to this size are searched to the end of the game
    AI_FULL_SEARCH_MAX_SIZE = 3

    # Worst-case number of positions a depth-limited search may visit
    # on larger boards. Search depth is picked to stay under this.
    AI_NODE_BUDGET = 20000

    # Score for a won position (plus remaining depth, so faster wins score higher)
    AI_WIN_SCORE = 10

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
