"""Entity primitives & ID generation.

The engine models each tile as an ``EntityID`` (an integer) plus the
component dataclasses stored in persistent maps on :class:`State`.

This module provides:
* ``Entity``: Thin marker dataclass registered for every live tile.
* Deterministic, process-local monotonic ID generator utilities.

IDs are *not* recycled; a simple incrementing counter is sufficient because
a tile id only has to stay stable for the tile's lifetime within a session.
Compare boards by ``(position, value)`` rather than by id when checking
reproducibility across runs.
"""

from dataclasses import dataclass
from typing import Iterator

from tile_merge.types import EntityID


@dataclass(frozen=True)
class Entity:
    """Registry marker for a live tile."""

    pass


def entity_id_generator() -> Iterator[EntityID]:
    """Yield an infinite sequence of monotonically increasing entity IDs."""
    eid = 0
    while True:
        yield eid
        eid += 1


_entity_id_gen = entity_id_generator()


def new_entity_id() -> EntityID:
    """Return a newly allocated unique entity ID."""
    return next(_entity_id_gen)
