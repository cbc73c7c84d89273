import numpy as np

from tile_merge.actions import GymAction
from tile_merge.components import Position
from tile_merge.config import GameConfig
from tile_merge.game import Game
from tile_merge.types import Phase
from tests.test_utils import make_board_state, make_distinct_full_board


def test_new_session_snapshot_is_emitted_once() -> None:
    game = Game(GameConfig(seed=3))
    first = game.take_snapshot()
    assert first is not None
    assert len(first) == 2
    assert all(value == 2 for _, value in first)
    assert game.take_snapshot() is None
    assert game.snapshot() == first


def test_unrecognised_input_is_ignored() -> None:
    game = Game(GameConfig(seed=3))
    game.take_snapshot()
    before = game.state
    assert game.handle_input("space") is False
    assert game.handle_input(None) is False
    assert game.state is before
    assert game.take_snapshot() is None


def test_moving_input_emits_snapshot() -> None:
    game = Game(GameConfig(seed=3))
    game.take_snapshot()
    game.state = make_board_state({(3, 0): 2, (2, 0): 2}, seed=3)
    assert game.handle_input("ArrowLeft") is True
    snapshot = game.take_snapshot()
    assert snapshot is not None
    assert (Position(0, 0), 4) in snapshot
    assert len(snapshot) == 2
    assert game.current_score() == 4
    assert game.best_score() == 4


def test_noop_input_emits_nothing() -> None:
    game = Game(GameConfig(seed=3))
    game.state = make_board_state({(0, 0): 2}, seed=3)
    game.take_snapshot()
    assert game.handle_input("left") is False
    assert game.take_snapshot() is None


def test_game_over_and_reset() -> None:
    game = Game(GameConfig(seed=3))
    game.state = make_board_state(
        {(0, 0): 4, (1, 0): 8, (1, 1): 16}, size=2, score=40, score_best=40
    )
    game.handle_input("left")
    assert game.phase() == Phase.GAME_OVER
    assert game.handle_input("right") is False

    game.reset()
    assert game.phase() == Phase.PLAYING
    assert game.current_score() == 0
    assert game.best_score() == 40
    snapshot = game.take_snapshot()
    assert snapshot is not None and len(snapshot) == 2


def test_full_distinct_board_reports_game_over_after_any_input() -> None:
    game = Game()
    game.state = make_distinct_full_board()
    assert game.phase() == Phase.PLAYING
    assert game.handle_input("up") is False
    assert game.phase() == Phase.GAME_OVER


def test_numpy_integer_input_is_accepted() -> None:
    game = Game(GameConfig(seed=3))
    game.state = make_board_state({(3, 1): 8}, seed=3)
    assert game.handle_input(np.int64(GymAction.LEFT)) is True
    assert (Position(0, 1), 8) in game.snapshot()
