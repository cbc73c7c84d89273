"""Common type aliases and enumerations.

``ShiftKeyFn`` / ``PlaceFn`` are the extension points used by
:mod:`tile_merge.shifts` to describe one direction of travel without
duplicating the merge pass for each direction.
"""

from enum import StrEnum, auto
from typing import Callable, Tuple, TYPE_CHECKING


# Forward declaration for typing to avoid circular imports:
if TYPE_CHECKING:
    from tile_merge.components import Position

EntityID = int

ShiftKeyFn = Callable[["Position"], Tuple[int, ...]]
GroupKeyFn = Callable[["Position"], int]
PlaceFn = Callable[["Position", int, int], "Position"]


class Phase(StrEnum):
    """Run phase of a session."""

    PLAYING = auto()
    GAME_OVER = auto()
