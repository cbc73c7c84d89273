"""Direction strategies for the shift pass.

A single compaction/merge algorithm (see :mod:`tile_merge.systems.shift`)
serves all four directions. Each direction is described by a
:class:`ShiftRule` made of three small functions:

* ``sort_key``: orders tiles so that, within a line, the tile nearest the
  leading edge comes first. The primary component is the line (row or
  column) so tiles of one line are consecutive.
* ``group_key``: the line a tile belongs to (``y`` for horizontal shifts,
  ``x`` for vertical ones).
* ``place``: maps a slot counter (0 at the leading edge) back to an absolute
  position, keeping the cross-axis coordinate.

| Direction | sort key   | group | slot ``c`` lands on   |
|-----------|------------|-------|-----------------------|
| LEFT      | ``(y, x)`` | ``y`` | ``x = c``             |
| RIGHT     | ``(y, -x)``| ``y`` | ``x = size - 1 - c``  |
| UP        | ``(x, -y)``| ``x`` | ``y = size - 1 - c``  |
| DOWN      | ``(x, y)`` | ``x`` | ``y = c``             |
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from tile_merge.actions import Action
from tile_merge.components import Position
from tile_merge.types import GroupKeyFn, PlaceFn, ShiftKeyFn


@dataclass(frozen=True)
class ShiftRule:
    """Direction-dependent pieces of the shift pass."""

    sort_key: ShiftKeyFn
    group_key: GroupKeyFn
    place: PlaceFn


def _row(pos: Position) -> int:
    return pos.y


def _column(pos: Position) -> int:
    return pos.x


def _left_key(pos: Position) -> Tuple[int, ...]:
    return (pos.y, pos.x)


def _right_key(pos: Position) -> Tuple[int, ...]:
    return (pos.y, -pos.x)


def _up_key(pos: Position) -> Tuple[int, ...]:
    return (pos.x, -pos.y)


def _down_key(pos: Position) -> Tuple[int, ...]:
    return (pos.x, pos.y)


def _place_left(pos: Position, slot: int, size: int) -> Position:
    return Position(slot, pos.y)


def _place_right(pos: Position, slot: int, size: int) -> Position:
    return Position(size - 1 - slot, pos.y)


def _place_up(pos: Position, slot: int, size: int) -> Position:
    return Position(pos.x, size - 1 - slot)


def _place_down(pos: Position, slot: int, size: int) -> Position:
    return Position(pos.x, slot)


SHIFT_RULES: Dict[Action, ShiftRule] = {
    Action.LEFT: ShiftRule(sort_key=_left_key, group_key=_row, place=_place_left),
    Action.RIGHT: ShiftRule(sort_key=_right_key, group_key=_row, place=_place_right),
    Action.UP: ShiftRule(sort_key=_up_key, group_key=_column, place=_place_up),
    Action.DOWN: ShiftRule(sort_key=_down_key, group_key=_column, place=_place_down),
}
"""Registry of shift directions to their rule."""
