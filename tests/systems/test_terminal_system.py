from dataclasses import replace

from tile_merge.state import State
from tile_merge.systems.terminal import terminal_system
from tile_merge.types import Phase
from tile_merge.utils.terminal import has_available_merge, is_game_over
from tests.test_utils import make_board_state, make_distinct_full_board


def make_checkerboard(size: int = 4) -> State:
    return make_board_state(
        {(x, y): 2 if (x + y) % 2 == 0 else 4 for x in range(size) for y in range(size)},
        size=size,
    )


def test_distinct_full_board_is_game_over() -> None:
    state = make_distinct_full_board()
    assert not has_available_merge(state)
    assert terminal_system(state).phase == Phase.GAME_OVER


def test_checkerboard_is_game_over() -> None:
    assert terminal_system(make_checkerboard()).phase == Phase.GAME_OVER


def test_full_board_with_horizontal_pair_keeps_playing() -> None:
    state = make_checkerboard()
    tiles = {
        (state.position[eid].x, state.position[eid].y): state.value[eid].amount
        for eid in state.entity
    }
    tiles[(1, 0)] = 2  # (0, 0) is also 2
    state = make_board_state(tiles)
    assert has_available_merge(state)
    assert terminal_system(state).phase == Phase.PLAYING


def test_full_board_with_vertical_pair_keeps_playing() -> None:
    tiles = {(x, y): 2 ** (y * 4 + x + 1) for x in range(4) for y in range(4)}
    tiles[(3, 3)] = tiles[(3, 2)]
    state = make_board_state(tiles)
    assert terminal_system(state).phase == Phase.PLAYING


def test_board_with_empty_cell_keeps_playing() -> None:
    tiles = {(x, y): 2 ** (y * 4 + x + 1) for x in range(4) for y in range(4)}
    del tiles[(2, 2)]
    state = make_board_state(tiles)
    assert not has_available_merge(state)
    assert not is_game_over(state)
    assert terminal_system(state).phase == Phase.PLAYING


def test_terminal_system_is_idempotent() -> None:
    state = replace(make_distinct_full_board(), phase=Phase.GAME_OVER)
    assert terminal_system(state) is state
