"""ECS convenience queries.

Helper functions for querying tile/position relationships without
introducing iteration logic into systems. All functions are pure and operate
on the immutable :class:`tile_merge.state.State` snapshot.

Performance: ``tile_at`` uses a cached reverse index of the immutable
``State.position`` PMap to provide O(1) lookups per state snapshot.
"""

from functools import lru_cache
from typing import Dict, Mapping, Optional

from tile_merge.components import Position
from tile_merge.state import State
from tile_merge.types import EntityID


@lru_cache(maxsize=4096)
def _position_index(
    position_store: Mapping[EntityID, Position],
) -> Mapping[Position, EntityID]:
    """Build a reverse index from position to tile id.

    The argument is a persistent/immutable PMap, which is hashable and thus
    safe to use with ``lru_cache``. Any new ``State`` (or updated position
    store) produces a distinct key, ensuring correctness across turns.
    """
    index: Dict[Position, EntityID] = {}
    for eid, pos in position_store.items():
        index[pos] = eid
    return index


def position_index(state: State) -> Mapping[Position, EntityID]:
    """Return the cached ``Position -> EntityID`` index of ``state``."""
    return _position_index(state.position)


def tile_at(state: State, pos: Position) -> Optional[EntityID]:
    """Return the id of the tile at ``pos``, or ``None`` if the cell is empty."""
    return position_index(state).get(pos)
