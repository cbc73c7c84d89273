"""Shift system: slide every tile toward one edge and merge equal pairs.

The pass walks tiles in the order given by the direction's
:class:`~tile_merge.shifts.ShiftRule`, i.e. line by line, leading edge
first. A running ``slot`` counter holds the next free cell of the current
line:

1. The current tile is placed on ``slot``.
2. If the next tile in order is in the same line and has the same value,
   the current tile absorbs it: its value doubles, the next tile is removed
   and the doubled value is added to the score delta. The absorbed tile is
   skipped, so a tile takes part in at most one merge per pass.
3. ``slot`` resets to 0 when the following tile starts a new line and
   advances by one otherwise.

Chains such as ``2 2 2`` therefore merge pairwise from the leading edge
(``4 2``), and ``2 2 2 2`` becomes ``4 4``.
"""

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from pyrsistent import PSet, pset

from tile_merge.actions import Action
from tile_merge.components import Position, Value
from tile_merge.shifts import SHIFT_RULES
from tile_merge.state import State
from tile_merge.types import EntityID

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShiftOutcome:
    """Result of a single shift pass.

    Attributes:
        state: Board after sliding and merging (no spawn, score untouched).
        score_delta: Sum of the values produced by merges.
        moved: True if any tile changed position or any merge happened.
        merged: Ids of tiles that absorbed another tile.
    """

    state: State
    score_delta: int
    moved: bool
    merged: PSet[EntityID]


def shift_tiles(state: State, action: Action) -> ShiftOutcome:
    """Run the compaction/merge pass for ``action`` without touching the score.

    Args:
        state (State): Board to shift.
        action (Action): Direction of travel.

    Returns:
        ShiftOutcome: Updated board plus merge bookkeeping.
    """
    rule = SHIFT_RULES[action]
    tiles: List[Tuple[EntityID, Position, int]] = sorted(
        (
            (eid, state.position[eid], state.value[eid].amount)
            for eid in state.entity
        ),
        key=lambda tile: rule.sort_key(tile[1]),
    )

    def tile_group(index: int) -> Optional[int]:
        if index >= len(tiles):
            return None
        return rule.group_key(tiles[index][1])

    position = state.position.evolver()
    value = state.value.evolver()
    entity = state.entity.evolver()
    merged: List[EntityID] = []
    score_delta = 0
    moved = False

    slot = 0
    index = 0
    while index < len(tiles):
        eid, pos, amount = tiles[index]
        group = rule.group_key(pos)
        new_pos = rule.place(pos, slot, state.size)
        if new_pos != pos:
            position[eid] = new_pos
            moved = True

        if tile_group(index + 1) == group and tiles[index + 1][2] == amount:
            absorbed_id = tiles[index + 1][0]
            amount += tiles[index + 1][2]
            value[eid] = Value(amount)
            del position[absorbed_id]
            del value[absorbed_id]
            del entity[absorbed_id]
            merged.append(eid)
            score_delta += amount
            moved = True
            index += 2
        else:
            index += 1

        slot = slot + 1 if tile_group(index) == group else 0

    if not moved:
        return ShiftOutcome(state=state, score_delta=0, moved=False, merged=pset())

    new_state = replace(
        state,
        entity=entity.persistent(),
        position=position.persistent(),
        value=value.persistent(),
    )
    return ShiftOutcome(
        state=new_state, score_delta=score_delta, moved=True, merged=pset(merged)
    )


def shift_system(state: State, action: Action) -> State:
    """Apply a shift and its score effect.

    Records ``moved``, ``merged`` and ``reward`` for the step, adds the merge
    score to ``score`` and raises ``score_best`` when it is exceeded. A shift
    that changes nothing returns the board and score unchanged.
    """
    outcome = shift_tiles(state, action)
    if not outcome.moved:
        logger.debug("Shift %s changed nothing", action)
        return replace(state, moved=False, merged=pset(), reward=0)

    score = state.score + outcome.score_delta
    return replace(
        outcome.state,
        moved=True,
        merged=outcome.merged,
        reward=outcome.score_delta,
        score=score,
        score_best=max(state.score_best, score),
    )
