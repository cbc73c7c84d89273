"""Tile store: the authoritative collection of live tiles.

A tile is an ``EntityID`` with an ``Entity`` marker, a ``Position`` and a
``Value`` in the corresponding ``State`` maps. The functions here are the
only place those three maps are edited together, so the store invariants
hold after every call:

* no two tiles share a position,
* every position lies inside the board,
* at most ``size * size`` tiles exist.

Violations are programmer errors and raise immediately (``IndexError``,
``ValueError`` or ``KeyError``) instead of being silently repaired.
"""

from dataclasses import dataclass, replace
from typing import List, Tuple

from pyrsistent import pmap

from tile_merge.components import Position, Value
from tile_merge.entity import Entity, new_entity_id
from tile_merge.grid import all_cells, check_in_bounds
from tile_merge.state import State
from tile_merge.types import EntityID
from tile_merge.utils.ecs import position_index


@dataclass(frozen=True)
class TileView:
    """Read-only view of one tile.

    Attributes:
        id: Stable tile identity.
        position: Cell the tile occupies.
        value: Face value.
    """

    id: EntityID
    position: Position
    value: int


def insert_tile(
    state: State, position: Position, value: int = 2
) -> Tuple[State, EntityID]:
    """Create a tile at ``position``.

    Raises:
        IndexError: If ``position`` is off the board or the board is already full.
        ValueError: If ``position`` is occupied or ``value`` is not positive.
    """
    check_in_bounds(state.size, position)
    if value <= 0:
        raise ValueError(f"Tile value must be positive, got {value}")
    if tile_count(state) >= state.size * state.size:
        raise IndexError("Board is full")
    if position in position_index(state):
        raise ValueError(f"Cell {(position.x, position.y)} is already occupied")

    eid = new_entity_id()
    state = replace(
        state,
        entity=state.entity.set(eid, Entity()),
        position=state.position.set(eid, position),
        value=state.value.set(eid, Value(value)),
    )
    return state, eid


def remove_tile(state: State, tile_id: EntityID) -> State:
    """Delete a tile and all its components.

    Raises:
        KeyError: If ``tile_id`` is not a live tile.
    """
    if tile_id not in state.entity:
        raise KeyError(tile_id)
    return replace(
        state,
        entity=state.entity.remove(tile_id),
        position=state.position.remove(tile_id),
        value=state.value.remove(tile_id),
    )


def update_tile(
    state: State, tile_id: EntityID, position: Position, value: int
) -> State:
    """Move and/or revalue an existing tile.

    Raises:
        KeyError: If ``tile_id`` is not a live tile.
        IndexError: If ``position`` is off the board.
        ValueError: If another tile holds ``position`` or ``value`` is not positive.
    """
    if tile_id not in state.entity:
        raise KeyError(tile_id)
    check_in_bounds(state.size, position)
    if value <= 0:
        raise ValueError(f"Tile value must be positive, got {value}")
    occupant = position_index(state).get(position)
    if occupant is not None and occupant != tile_id:
        raise ValueError(
            f"Cell {(position.x, position.y)} is occupied by tile {occupant}"
        )
    return replace(
        state,
        position=state.position.set(tile_id, position),
        value=state.value.set(tile_id, Value(value)),
    )


def get_all(state: State) -> List[TileView]:
    """Snapshot of every live tile, ordered by id."""
    return [
        TileView(id=eid, position=state.position[eid], value=state.value[eid].amount)
        for eid in sorted(state.entity.keys())
    ]


def clear_tiles(state: State) -> State:
    """Remove every tile, keeping all non-tile fields."""
    return replace(state, entity=pmap(), position=pmap(), value=pmap())


def occupied_positions(state: State) -> List[Position]:
    return list(state.position.values())


def empty_cells(state: State) -> List[Position]:
    """Unoccupied cells in row-major order."""
    occupied = position_index(state)
    return [pos for pos in all_cells(state.size) if pos not in occupied]


def tile_count(state: State) -> int:
    return len(state.entity)


def is_full(state: State) -> bool:
    return tile_count(state) >= state.size * state.size


def total_value(state: State) -> int:
    """Sum of all face values on the board."""
    return sum(v.amount for v in state.value.values())
