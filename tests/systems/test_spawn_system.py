from dataclasses import replace

import pytest

from tile_merge.state import State
from tile_merge.store import empty_cells, tile_count, total_value
from tile_merge.systems.spawn import (
    SPAWN_VALUE,
    spawn_initial_tiles,
    spawn_system,
    spawn_tile,
)
from tests.test_utils import board_values, make_board_state, make_distinct_full_board


def test_spawn_after_move_adds_one_tile_of_two() -> None:
    state = replace(make_board_state({(0, 0): 4}), moved=True)
    new_state = spawn_system(state)
    assert tile_count(new_state) == 2
    assert total_value(new_state) == 4 + SPAWN_VALUE
    new_cells = set(board_values(new_state)) - {(0, 0)}
    assert len(new_cells) == 1
    assert board_values(new_state)[new_cells.pop()] == 2


def test_no_spawn_without_move() -> None:
    state = make_board_state({(0, 0): 4})
    assert spawn_system(state) is state


def test_spawn_on_full_board_is_noop() -> None:
    state = replace(make_distinct_full_board(), moved=True)
    assert spawn_system(state) is state


def test_spawn_fills_last_empty_cell() -> None:
    tiles = {(x, y): 2 ** (x + 2 * y + 1) for x in range(2) for y in range(2)}
    del tiles[(1, 1)]
    state = replace(make_board_state(tiles, size=2), moved=True)
    new_state = spawn_system(state)
    assert board_values(new_state)[(1, 1)] == 2
    assert empty_cells(new_state) == []


def test_spawn_is_reproducible_for_seed_and_turn() -> None:
    state = make_board_state({(1, 1): 2}, seed=42)
    assert board_values(spawn_tile(state)) == board_values(spawn_tile(state))
    later = replace(state, turn=5)
    assert board_values(spawn_tile(later)) == board_values(spawn_tile(later))


def test_spawn_choice_covers_all_empty_cells() -> None:
    state = make_board_state({(0, 0): 2}, size=2)
    seen = set()
    for seed in range(200):
        spawned = spawn_tile(replace(state, seed=seed))
        seen |= set(board_values(spawned)) - {(0, 0)}
    assert seen == {(1, 0), (0, 1), (1, 1)}


def test_spawn_initial_tiles_distinct_cells() -> None:
    state = spawn_initial_tiles(State(size=4, seed=3), 2)
    values = board_values(state)
    assert len(values) == 2
    assert set(values.values()) == {2}


def test_spawn_initial_tiles_too_many_raises() -> None:
    with pytest.raises(ValueError):
        spawn_initial_tiles(State(size=2, seed=0), 5)
