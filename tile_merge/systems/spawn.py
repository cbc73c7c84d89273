"""Spawn system.

After a board-changing shift one new tile of value :data:`SPAWN_VALUE` is
placed on an empty cell chosen uniformly at random. The choice is drawn
from :func:`tile_merge.utils.rng.state_rng` so a fixed ``State.seed``
reproduces the whole sequence of spawns. A full board is not an error: the
state is returned unchanged.
"""

import logging

from tile_merge.state import State
from tile_merge.store import empty_cells, insert_tile
from tile_merge.utils.rng import state_rng

logger = logging.getLogger(__name__)

SPAWN_VALUE: int = 2

# Distinguishes opening spawns from per-turn spawns drawn at the same turn.
_INITIAL_SPAWN_SALT = 1


def spawn_system(state: State) -> State:
    """Add one tile on a random empty cell if the last shift changed the board."""
    if not state.moved:
        return state
    return spawn_tile(state)


def spawn_tile(state: State) -> State:
    """Add one tile on a random empty cell (no-op when the board is full)."""
    cells = empty_cells(state)
    if not cells:
        logger.debug("Board full, nothing spawned")
        return state
    pos = state_rng(state).choice(cells)
    state, eid = insert_tile(state, pos, SPAWN_VALUE)
    logger.debug("Spawned tile %d at (%d, %d)", eid, pos.x, pos.y)
    return state


def spawn_initial_tiles(state: State, count: int = 2) -> State:
    """Place ``count`` tiles on distinct random empty cells.

    Raises:
        ValueError: If fewer than ``count`` cells are empty.
    """
    cells = empty_cells(state)
    if count > len(cells):
        raise ValueError(f"Cannot spawn {count} tiles on {len(cells)} empty cells")
    for pos in state_rng(state, salt=_INITIAL_SPAWN_SALT).sample(cells, count):
        state, _ = insert_tile(state, pos, SPAWN_VALUE)
    return state
