"""Terminal condition helper predicates."""

from tile_merge.grid import neighbors
from tile_merge.state import State
from tile_merge.store import is_full
from tile_merge.types import Phase
from tile_merge.utils.ecs import position_index


def has_available_merge(state: State) -> bool:
    """Return True if any two grid-adjacent tiles share a value."""
    index = position_index(state)
    for eid, pos in state.position.items():
        amount = state.value[eid].amount
        for other in neighbors(state.size, pos):
            other_id = index.get(other)
            if other_id is not None and state.value[other_id].amount == amount:
                return True
    return False


def is_game_over(state: State) -> bool:
    """Return True if the board is full and no adjacent pair can merge.

    On a full board a shift changes something iff some adjacent pair is
    equal, so this local check is exact. Boards with an empty cell always
    have a move, and the adjacency scan is skipped for them.
    """
    return is_full(state) and not has_available_merge(state)


def is_terminal_state(state: State) -> bool:
    """Return True if the session has already ended."""
    return state.phase == Phase.GAME_OVER
