"""
Game state management for TicTacToe.
Tracks the NxN board, whose turn it is, and the move history.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

import numpy as np

from .config import GameConfig


# Board cell value for an empty cell
EMPTY = 0


class Piece(Enum):
    """The two marks. Values are what gets stored on the board."""
    X = 1
    O = -1

    def opposite(self) -> "Piece":
        """Get the other mark."""
        return Piece.O if self == Piece.X else Piece.X

    def __str__(self) -> str:
        return self.name


class Player(Enum):
    """Who is taking a turn."""
    ONE = "One"
    TWO = "Two"
    CPU = "Cpu"

    def opponent(self, solo: bool) -> "Player":
        """
        Get the player who moves after this one.

        Args:
            solo: True in single player mode (ONE vs CPU).

        Returns:
            The next player.

        Raises:
            ValueError: If this player doesn't take part in the given mode.
        """
        if self == Player.ONE:
            return Player.CPU if solo else Player.TWO
        if self == Player.TWO and not solo:
            return Player.ONE
        if self == Player.CPU and solo:
            return Player.ONE

        mode = "single player" if solo else "two player"
        raise ValueError(f"Player {self.value} does not play in {mode} mode")

    def __str__(self) -> str:
        return self.value


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    piece: Piece            # Which mark was placed
    row: int
    col: int
    move_number: int        # 0-based index in the game


def _empty_board(size: int) -> np.ndarray:
    return np.zeros((size, size), dtype=np.int8)


@dataclass(eq=False)
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The NxN board (0 = empty, 1 = X, -1 = O)
    - Current player (the player who opens the game plays X)
    - Move history
    - Game status (ongoing, won, draw)
    """

    size: int = GameConfig.DEFAULT_BOARD_SIZE

    # Single player mode: ONE plays against CPU
    solo: bool = False

    # Who moves first, and so plays X
    first_player: Player = Player.ONE

    board: Optional[np.ndarray] = None
    current_player: Optional[Player] = None

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[Piece] = None
    is_draw: bool = False
    is_game_over: bool = False

    def __post_init__(self):
        if self.size < GameConfig.MIN_BOARD_SIZE:
            raise ValueError(
                f"Board size must be at least {GameConfig.MIN_BOARD_SIZE}, got {self.size}"
            )
        if self.size > GameConfig.MAX_BOARD_SIZE:
            raise ValueError(
                f"Board size must be at most {GameConfig.MAX_BOARD_SIZE}, got {self.size}"
            )

        # Fails early if first_player isn't part of this mode
        self.first_player.opponent(self.solo)

        if self.board is None:
            self.board = _empty_board(self.size)
        elif self.board.shape != (self.size, self.size):
            raise ValueError(
                f"Board shape {self.board.shape} does not match size {self.size}"
            )

        if self.current_player is None:
            self.current_player = self.first_player

    @classmethod
    def new(
        cls,
        size: int = GameConfig.DEFAULT_BOARD_SIZE,
        solo: bool = False,
        first_player: Player = Player.ONE
    ) -> "GameState":
        """
        Create a game with an empty board.

        Args:
            size: Board dimension N.
            solo: Single player mode.
            first_player: Who opens the game (plays X).
        """
        return cls(size=size, solo=solo, first_player=first_player)

    def piece_for(self, player: Player) -> Piece:
        """Get the mark a player places."""
        return Piece.X if player == self.first_player else Piece.O

    def player_for(self, piece: Piece) -> Player:
        """Get the player who places a mark."""
        if piece == Piece.X:
            return self.first_player
        return self.first_player.opponent(self.solo)

    def get_current_piece(self) -> Piece:
        """Get the mark for the current player's next move."""
        return self.piece_for(self.current_player)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def piece_at(self, row: int, col: int) -> Optional[Piece]:
        """
        Get the mark in a cell.

        Returns:
            The Piece, or None if the cell is empty.
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is off a {self.size}x{self.size} board")

        value = int(self.board[row, col])
        if value == EMPTY:
            return None
        return Piece(value)

    def make_move(self, row: int, col: int) -> bool:
        """
        Place the current player's mark and pass the turn.

        Args:
            row: Row index (0 to size-1).
            col: Column index (0 to size-1).

        Returns:
            True if the move was made, False if the game is over
            or the cell is occupied.

        Raises:
            IndexError: If the cell is off the board.
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is off a {self.size}x{self.size} board")

        if self.is_game_over:
            return False

        if self.board[row, col] != EMPTY:
            return False

        piece = self.get_current_piece()
        self.board[row, col] = piece.value

        self.moves.append(Move(
            player=self.current_player,
            piece=piece,
            row=row,
            col=col,
            move_number=len(self.moves)
        ))

        # Winner is set by WinChecker, just switch turns here
        self.current_player = self.current_player.opponent(self.solo)

        return True

    @property
    def last_move(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board, in row-major order.

        Returns:
            List of (row, col) tuples.
        """
        return [(int(r), int(c)) for r, c in np.argwhere(self.board == EMPTY)]

    def is_full(self) -> bool:
        """True if there are no more possible moves on the board."""
        return not np.any(self.board == EMPTY)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            size=self.size,
            solo=self.solo,
            first_player=self.first_player,
            board=self.board.copy(),
            current_player=self.current_player,
            moves=list(self.moves),
            winner=self.winner,
            is_draw=self.is_draw,
            is_game_over=self.is_game_over
        )
