"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, List, Tuple

import numpy as np

from .game_state import GameState, Piece, Move, EMPTY


class WinChecker:
    """
    Checks for win conditions on an NxN board.

    Win condition: N pieces of the same mark in a row
    (a full row, a full column, or one of the two main diagonals)
    """

    def line_sums(self, board: np.ndarray) -> np.ndarray:
        """
        Sum every line on the board.

        X is stored as 1 and O as -1, so a line sums to N (or -N)
        exactly when one mark fills it.

        Returns:
            Array of 2N+2 sums: rows, then columns, then both diagonals.
        """
        return np.concatenate((
            board.sum(axis=1, dtype=np.int32),
            board.sum(axis=0, dtype=np.int32),
            [np.trace(board, dtype=np.int32), np.trace(np.fliplr(board), dtype=np.int32)],
        ))

    def check_winner(self, game_state: GameState) -> Optional[Piece]:
        """
        Check if there's a winner anywhere on the board.

        Args:
            game_state: The current game state.

        Returns:
            The winning Piece, or None if no winner yet.
        """
        n = game_state.size
        sums = self.line_sums(game_state.board)

        if np.any(sums == n):
            return Piece.X
        if np.any(sums == -n):
            return Piece.O
        return None

    def check_move(self, game_state: GameState, row: int, col: int) -> Optional[Piece]:
        """
        Check only the lines through one cell.

        A move can only complete the lines it lies on, so after each
        move this is enough to find a new winner.

        Args:
            game_state: The game state after the move.
            row: Row of the move.
            col: Column of the move.

        Returns:
            The mark in the cell if it completed a line, None otherwise.
        """
        board = game_state.board
        value = int(board[row, col])
        if value == 0:
            return None

        n = game_state.size
        target = value * n

        if int(board[row, :].sum()) == target or int(board[:, col].sum()) == target:
            return Piece(value)

        if row == col and int(np.trace(board)) == target:
            return Piece(value)

        if row + col == n - 1 and int(np.trace(np.fliplr(board))) == target:
            return Piece(value)

        return None

    def check_draw(self, game_state: GameState) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled and nobody has won.

        Args:
            game_state: The current game state.

        Returns:
            True if the game is a draw.
        """
        if not game_state.is_full():
            return False

        return self.check_winner(game_state) is None

    def update_game_state(
        self,
        game_state: GameState,
        last_move: Optional[Move] = None
    ) -> GameState:
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.
            last_move: If given, only the lines through this move are
                checked. Otherwise the whole board is scanned.

        Returns:
            Updated game state.
        """
        if last_move is not None:
            winner = self.check_move(game_state, last_move.row, last_move.col)
        else:
            winner = self.check_winner(game_state)

        if winner is not None:
            game_state.winner = winner
            game_state.is_game_over = True
        elif game_state.is_full():
            game_state.is_draw = True
            game_state.is_game_over = True

        return game_state

    def get_winning_line(self, game_state: GameState) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Args:
            game_state: The game state.

        Returns:
            The winning line as list of (row, col), or None.
        """
        n = game_state.size
        sums = self.line_sums(game_state.board)
        hits = np.flatnonzero(np.abs(sums) == n)

        if len(hits) == 0:
            return None

        return self._line_cells(n, int(hits[0]))

    def find_winning_cells(self, game_state: GameState, piece: Piece) -> List[Tuple[int, int]]:
        """
        Find every empty cell that would complete a line for a mark.

        A line summing to (N-1) * piece.value holds N-1 of that mark and
        one empty cell, so threats come straight from the line sums
        without trying each move.

        Args:
            game_state: The game state.
            piece: The mark to look for.

        Returns:
            The cells as (row, col), in row-major order.
        """
        n = game_state.size
        board = game_state.board
        sums = self.line_sums(board)

        cells = set()
        for index in np.flatnonzero(sums == (n - 1) * piece.value):
            for row, col in self._line_cells(n, int(index)):
                if board[row, col] == EMPTY:
                    cells.add((row, col))

        return sorted(cells)

    @staticmethod
    def _line_cells(n: int, index: int) -> List[Tuple[int, int]]:
        """Cells of a line, numbered as in line_sums."""
        if index < n:
            return [(index, c) for c in range(n)]
        if index < 2 * n:
            return [(r, index - n) for r in range(n)]
        if index == 2 * n:
            return [(i, i) for i in range(n)]
        return [(i, n - 1 - i) for i in range(n)]
