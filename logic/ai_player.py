"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import random
from enum import Enum
from typing import Optional, Tuple, List

import numpy as np

from .config import GameConfig
from .game_state import GameState, Player, Piece
from .win_checker import WinChecker


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = 1      # Random moves
    MEDIUM = 2    # Win, block, else best-looking cell
    HARD = 3      # Minimax

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        try:
            return cls[name.upper()]
        except KeyError:
            choices = ", ".join(d.name.lower() for d in cls)
            raise ValueError(f"Unknown difficulty '{name}' (choose from {choices})") from None


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    On boards up to GameConfig.AI_FULL_SEARCH_MAX_SIZE the search runs to
    the end of the game, so the AI will win if possible, block the opponent
    if needed, and never lose (at worst, draw). Larger boards are searched
    to a limited depth and the leaves are scored by a line heuristic.
    """

    def __init__(
        self,
        player: Player = Player.CPU,
        difficulty: Difficulty = Difficulty.HARD,
        seed: Optional[int] = None,
        debug: bool = GameConfig.DEBUG_MODE
    ):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: CPU)
            difficulty: How hard the AI tries.
            seed: Seed for random choices (EASY moves, MEDIUM tie-breaks).
            debug: Print search statistics after each move.
        """
        self.player = player
        self.difficulty = difficulty
        self.debug = debug
        self.rng = random.Random(seed)
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

        # Mark the AI is placing in the current search
        self._piece = Piece.O

    def get_best_move(self, game_state: GameState) -> Optional[Tuple[int, int]]:
        """
        Get the best move for the current position.

        Args:
            game_state: Current game state.

        Returns:
            (row, col) of best move, or None if no moves available.
        """
        self.moves_evaluated = 0

        if game_state.current_player != self.player:
            print(f"Warning: It's not Player {self.player}'s turn!")
            return None

        if game_state.is_game_over:
            return None

        valid_moves = game_state.get_empty_cells()

        if not valid_moves:
            return None

        # Only one move, just take it
        if len(valid_moves) == 1:
            return valid_moves[0]

        self._piece = game_state.piece_for(self.player)

        if self.difficulty == Difficulty.EASY:
            return self.rng.choice(valid_moves)

        if self.difficulty == Difficulty.MEDIUM:
            return self._greedy_move(game_state, valid_moves)

        return self._search_move(game_state, valid_moves)

    def _search_move(
        self,
        game_state: GameState,
        valid_moves: List[Tuple[int, int]]
    ) -> Tuple[int, int]:
        """Pick a move with minimax."""
        n = game_state.size

        # Empty board: the center is a good first move
        if len(valid_moves) == n * n:
            return (n // 2, n // 2)

        # Winning now or blocking a win now never loses anything
        forced = (
            self._find_winning_move(game_state, self._piece)
            or self._find_winning_move(game_state, self._piece.opposite())
        )
        if forced is not None:
            return forced

        depth = self.search_depth(n, len(valid_moves))

        best_score = float('-inf')
        best_move = valid_moves[0]

        for row, col in self._order_moves(n, valid_moves):
            new_state = self._play(game_state, row, col)

            score = self._minimax(new_state, depth - 1, False, alpha=best_score)

            if score > best_score:
                best_score = score
                best_move = (row, col)

        if self.debug:
            print(f"AI evaluated {self.moves_evaluated} positions (depth {depth}). "
                  f"Best move: {best_move} (score: {best_score:.3f})")

        return best_move

    def _minimax(
        self,
        game_state: GameState,
        depth: int,
        is_maximizing: bool,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            game_state: Current state to evaluate.
            depth: How deep to search.
            is_maximizing: True if maximizing player's turn.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            The score of the position.
        """
        self.moves_evaluated += 1

        if game_state.winner == self._piece:
            return GameConfig.AI_WIN_SCORE + depth  # Win (prefer faster wins)
        elif game_state.winner is not None:
            return -GameConfig.AI_WIN_SCORE - depth  # Loss (prefer slower losses)
        elif game_state.is_draw:
            return 0

        if depth <= 0:
            return self.evaluate(game_state, self._piece)

        valid_moves = self._order_moves(game_state.size, game_state.get_empty_cells())

        if is_maximizing:
            max_score = float('-inf')
            for row, col in valid_moves:
                new_state = self._play(game_state, row, col)
                score = self._minimax(new_state, depth - 1, False, alpha, beta)
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = float('inf')
            for row, col in valid_moves:
                new_state = self._play(game_state, row, col)
                score = self._minimax(new_state, depth - 1, True, alpha, beta)
                min_score = min(min_score, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune
            return min_score

    def _greedy_move(
        self,
        game_state: GameState,
        valid_moves: List[Tuple[int, int]]
    ) -> Tuple[int, int]:
        """Win if possible, else block, else the cell the heuristic likes best."""
        forced = (
            self._find_winning_move(game_state, self._piece)
            or self._find_winning_move(game_state, self._piece.opposite())
        )
        if forced is not None:
            return forced

        best_score = float('-inf')
        best_moves = []

        for row, col in valid_moves:
            new_state = self._play(game_state, row, col)
            score = self.evaluate(new_state, self._piece)
            self.moves_evaluated += 1

            if score > best_score:
                best_score = score
                best_moves = [(row, col)]
            elif score == best_score:
                best_moves.append((row, col))

        return self.rng.choice(best_moves)

    def _find_winning_move(
        self,
        game_state: GameState,
        piece: Piece
    ) -> Optional[Tuple[int, int]]:
        """Find a cell that completes a line for the given mark."""
        cells = self.win_checker.find_winning_cells(game_state, piece)
        return cells[0] if cells else None

    def _play(self, game_state: GameState, row: int, col: int) -> GameState:
        """Copy the state, make a move, and record any result."""
        new_state = game_state.copy()
        new_state.make_move(row, col)
        self.win_checker.update_game_state(new_state, new_state.last_move)
        return new_state

    @staticmethod
    def _order_moves(size: int, moves: List[Tuple[int, int]]) -> List[Tuple[int, int]]:
        """Sort moves center-first so alpha-beta prunes earlier."""
        center = (size - 1) / 2
        return sorted(moves, key=lambda m: abs(m[0] - center) + abs(m[1] - center))

    @staticmethod
    def search_depth(size: int, empty_cells: int) -> int:
        """
        Pick how many plies to search.

        Small boards are searched to the end. On larger boards, the depth
        is the deepest one whose worst-case node count stays inside
        GameConfig.AI_NODE_BUDGET (always at least 1).
        """
        if size <= GameConfig.AI_FULL_SEARCH_MAX_SIZE:
            return empty_cells

        depth = 0
        nodes = 1
        while depth < empty_cells:
            nodes *= empty_cells - depth
            if nodes > GameConfig.AI_NODE_BUDGET:
                break
            depth += 1

        return max(1, depth)

    @staticmethod
    def evaluate(game_state: GameState, piece: Piece) -> float:
        """
        Score a position from one mark's point of view.

        Every line still open to only one side is worth 10 ** (marks on it)
        to that side. The total is scaled into (-1, 1) so any real win
        outscores it.

        Args:
            game_state: Position to score.
            piece: The mark we're scoring for.

        Returns:
            Score in (-1, 1), positive when the position favors `piece`.
        """
        board = game_state.board
        n = game_state.size

        lines = np.vstack((
            board,
            board.T,
            np.diagonal(board)[np.newaxis, :],
            np.diagonal(np.fliplr(board))[np.newaxis, :],
        ))

        mine = (lines == piece.value).sum(axis=1)
        theirs = (lines == -piece.value).sum(axis=1)

        my_open = mine[(theirs == 0) & (mine > 0)]
        their_open = theirs[(mine == 0) & (theirs > 0)]

        score = np.sum(10.0 ** my_open) - np.sum(10.0 ** their_open)

        return float(score / (len(lines) * 10.0 ** n))


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    game = GameState.new(size=3, solo=True)
    cross = AIPlayer(Player.ONE)
    nought = AIPlayer(Player.CPU)
    checker = WinChecker()

    while not game.is_game_over:
        ai = cross if game.current_player == Player.ONE else nought
        row, col = ai.get_best_move(game)
        game.make_move(row, col)
        checker.update_game_state(game, game.last_move)
        print(f"{game.last_move.piece} -> ({row}, {col})")

    # Perfect play on both sides is always a draw
    assert game.is_draw, f"Expected a draw, got {game.winner}"
    print("✓ AI vs AI is a draw!")
