"""Row-grid authoring helpers.

Bridges between a plain ``rows[y][x]`` grid of ints (``0`` for an empty
cell) and the ECS :class:`~tile_merge.state.State`. Handy for authoring
fixed boards and for exporting observations.

Note that ``rows[0]`` is the *bottom* row (``y = 0``), matching
:class:`~tile_merge.components.Position`; printing the rows top to bottom
needs ``reversed(rows)``.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from tile_merge.components import Position
from tile_merge.state import State
from tile_merge.store import insert_tile

Rows = Sequence[Sequence[int]]


def state_from_rows(
    rows: Rows, seed: Optional[int] = None, score: int = 0, score_best: int = 0
) -> State:
    """Build a ``State`` whose tiles match ``rows``.

    Raises:
        ValueError: If ``rows`` is not square or holds a negative value.
    """
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError(f"Board must be square, got row lengths {[len(r) for r in rows]}")
    state = State(
        size=size, seed=seed, score=score, score_best=max(score, score_best)
    )
    for y, row in enumerate(rows):
        for x, amount in enumerate(row):
            if amount < 0:
                raise ValueError(f"Negative tile value {amount} at {(x, y)}")
            if amount:
                state, _ = insert_tile(state, Position(x, y), amount)
    return state


def state_to_rows(state: State) -> List[List[int]]:
    """Inverse of :func:`state_from_rows`."""
    rows = [[0] * state.size for _ in range(state.size)]
    for eid, pos in state.position.items():
        rows[pos.y][pos.x] = state.value[eid].amount
    return rows


def state_to_array(state: State) -> np.ndarray:
    """Board as an ``(size, size)`` int64 array indexed ``[y, x]``."""
    return np.array(state_to_rows(state), dtype=np.int64)
