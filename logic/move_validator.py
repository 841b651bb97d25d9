"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, Tuple, List
from dataclasses import dataclass

from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Row and column must be on the board
    3. Can only place on empty cells
    """

    def validate_row(self, game_state: GameState, row: int) -> ValidationResult:
        """Check a row index on its own, before a column has been picked."""
        if not 0 <= row < game_state.size:
            return ValidationResult(is_valid=False, error_message="row out of range")
        return ValidationResult(is_valid=True)

    def validate_col(self, game_state: GameState, col: int) -> ValidationResult:
        """Check a column index on its own."""
        if not 0 <= col < game_state.size:
            return ValidationResult(is_valid=False, error_message="col out of range")
        return ValidationResult(is_valid=True)

    def validate_move(
        self,
        game_state: GameState,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            row: Row to place the mark.
            col: Column to place the mark.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="game is already over"
            )

        for result in (self.validate_row(game_state, row), self.validate_col(game_state, col)):
            if not result.is_valid:
                return result

        if game_state.piece_at(row, col) is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"space at row {row}, col {col} already occupied"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of (row, col) valid move positions.
        """
        if game_state.is_game_over:
            return []

        return game_state.get_empty_cells()
