"""
Tests for the TicTacToe AI player.
"""

import numpy as np
import pytest

from logic.ai_player import AIPlayer, Difficulty
from logic.config import GameConfig
from logic.game_state import GameState, Player, Piece
from logic.win_checker import WinChecker


def cpu_to_move(*rows: str) -> GameState:
    """Build a solo game where the CPU (O) is to move. "." is empty."""
    values = {"X": 1, "O": -1, ".": 0}
    board = np.array([[values[c] for c in row] for row in rows], dtype=np.int8)
    return GameState(size=len(rows), solo=True, board=board, current_player=Player.CPU)


def play_out(game: GameState, cross: AIPlayer, nought: AIPlayer) -> GameState:
    """Let two AIs finish a solo game. ONE plays X."""
    checker = WinChecker()
    while not game.is_game_over:
        ai = cross if game.current_player == cross.player else nought
        move = ai.get_best_move(game)
        assert move is not None
        assert game.make_move(*move)
        checker.update_game_state(game, game.last_move)
    return game


@pytest.mark.parametrize("difficulty", [Difficulty.MEDIUM, Difficulty.HARD])
def test_takes_the_win(difficulty):
    game = cpu_to_move(
        "OO.",
        "XX.",
        "X..",
    )
    assert AIPlayer(Player.CPU, difficulty).get_best_move(game) == (0, 2)


@pytest.mark.parametrize("difficulty", [Difficulty.MEDIUM, Difficulty.HARD])
def test_blocks_the_opponent(difficulty):
    game = cpu_to_move(
        "XX.",
        ".O.",
        "...",
    )
    assert AIPlayer(Player.CPU, difficulty).get_best_move(game) == (0, 2)


def test_blocks_on_larger_board():
    game = cpu_to_move(
        "XXX.",
        ".O..",
        "..O.",
        "....",
    )
    assert AIPlayer(Player.CPU).get_best_move(game) == (0, 3)


@pytest.mark.parametrize("difficulty", [Difficulty.MEDIUM, Difficulty.HARD])
def test_blocks_on_ten_by_ten_board(difficulty):
    rows = ["." * 10 for _ in range(10)]
    rows[0] = "X" * 9 + "."
    rows[5] = "O" * 8 + ".."

    game = cpu_to_move(*rows)

    assert AIPlayer(Player.CPU, difficulty).get_best_move(game) == (0, 9)


def test_medium_falls_back_to_heuristic():
    game = GameState.new(size=3, solo=True)
    game.make_move(0, 0)

    # No win or block available, so the center scores best
    assert AIPlayer(Player.CPU, Difficulty.MEDIUM, seed=0).get_best_move(game) == (1, 1)


def test_largest_board_stays_inside_budget():
    size = GameConfig.MAX_BOARD_SIZE
    assert size * size <= GameConfig.AI_NODE_BUDGET

    game = GameState.new(size=size, solo=True)
    game.make_move(0, 0)

    ai = AIPlayer(Player.CPU)
    move = ai.get_best_move(game)

    assert move in game.get_empty_cells()
    assert ai.moves_evaluated <= GameConfig.AI_NODE_BUDGET


def test_takes_center_on_empty_board():
    for size in (3, 4, 5):
        game = GameState.new(size=size, solo=True, first_player=Player.CPU)
        assert AIPlayer(Player.CPU).get_best_move(game) == (size // 2, size // 2)


def test_answers_corner_with_center():
    game = GameState.new(size=3, solo=True)
    game.make_move(0, 0)

    # Every other reply loses against perfect play
    assert AIPlayer(Player.CPU).get_best_move(game) == (1, 1)


def test_last_cell_is_played():
    game = cpu_to_move(
        "XOX",
        "XOO",
        "OX.",
    )
    assert AIPlayer(Player.CPU).get_best_move(game) == (2, 2)


def test_no_move_when_not_its_turn():
    game = GameState.new(solo=True)

    assert AIPlayer(Player.CPU).get_best_move(game) is None


def test_no_move_when_game_is_over():
    game = cpu_to_move(
        "XXX",
        "OO.",
        "...",
    )
    WinChecker().update_game_state(game)

    assert AIPlayer(Player.CPU).get_best_move(game) is None


def test_perfect_play_is_a_draw():
    game = play_out(
        GameState.new(size=3, solo=True),
        AIPlayer(Player.ONE),
        AIPlayer(Player.CPU),
    )
    assert game.is_draw


@pytest.mark.parametrize("seed", range(4))
@pytest.mark.parametrize("cpu_first", [False, True])
def test_hard_never_loses_to_random_play(seed, cpu_first):
    first = Player.CPU if cpu_first else Player.ONE
    game = GameState.new(size=3, solo=True, first_player=first)

    human = AIPlayer(Player.ONE, Difficulty.EASY, seed=seed)
    cpu = AIPlayer(Player.CPU, Difficulty.HARD)

    play_out(game, human, cpu)

    assert game.winner != game.piece_for(Player.ONE)


def test_depth_limited_game_finishes_on_4x4():
    game = play_out(
        GameState.new(size=4, solo=True),
        AIPlayer(Player.ONE, Difficulty.EASY, seed=7),
        AIPlayer(Player.CPU, Difficulty.HARD),
    )
    assert game.is_game_over


def test_easy_is_reproducible_with_seed():
    game = GameState.new(size=5, solo=True, first_player=Player.CPU)

    first = AIPlayer(Player.CPU, Difficulty.EASY, seed=42).get_best_move(game)
    second = AIPlayer(Player.CPU, Difficulty.EASY, seed=42).get_best_move(game)

    assert first == second
    assert first in game.get_empty_cells()


def test_search_depth():
    assert AIPlayer.search_depth(3, 9) == 9
    assert AIPlayer.search_depth(2, 3) == 3
    # 16 * 15 * 14 fits the budget, one more ply doesn't
    assert AIPlayer.search_depth(4, 16) == 3
    assert AIPlayer.search_depth(10, 100) == 2
    # Never less than one ply
    assert AIPlayer.search_depth(50, 2500) == 1
    # Never more plies than empty cells
    assert AIPlayer.search_depth(5, 2) == 2


def test_search_depth_respects_budget(monkeypatch):
    monkeypatch.setattr(GameConfig, "AI_NODE_BUDGET", 16 * 15)
    assert AIPlayer.search_depth(4, 16) == 2


def test_evaluate_is_bounded_and_symmetric():
    game = cpu_to_move(
        "XXXX.",
        "O.O.O",
        ".X...",
        "OO...",
        "....X",
    )
    for_x = AIPlayer.evaluate(game, Piece.X)
    for_o = AIPlayer.evaluate(game, Piece.O)

    assert -1 < for_x < 1
    assert for_x == pytest.approx(-for_o)


def test_evaluate_prefers_open_lines():
    strong = cpu_to_move(
        "OO..",
        "....",
        "....",
        "...X",
    )
    weak = cpu_to_move(
        "OX..",
        "X...",
        "....",
        "....",
    )
    assert AIPlayer.evaluate(strong, Piece.O) > AIPlayer.evaluate(weak, Piece.O)


def test_difficulty_from_name():
    assert Difficulty.from_name("easy") == Difficulty.EASY
    assert Difficulty.from_name("Hard") == Difficulty.HARD

    with pytest.raises(ValueError):
        Difficulty.from_name("impossible")


def test_debug_prints_search_stats(capsys):
    game = GameState.new(size=3, solo=True)
    game.make_move(0, 0)

    AIPlayer(Player.CPU, debug=True).get_best_move(game)

    assert "AI evaluated" in capsys.readouterr().out
