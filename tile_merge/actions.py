"""Action enumerations and raw input parsing.

Defines the human readable :class:`Action` (string enum) used internally and
a stable integer :class:`GymAction` mapping for Gymnasium compatibility.

Input arriving from a frontend (key names, strings, integers) goes through
:func:`parse_action`; anything that does not name a direction maps to
``None`` and is ignored by the session rather than treated as an error.
"""

import numbers
from enum import IntEnum, StrEnum, auto
from typing import Dict, Optional


class Action(StrEnum):
    """String enum of shift directions.

    Members:
        UP, DOWN, LEFT, RIGHT: Direction every tile slides toward.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


SHIFT_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    UP = 0  # start at 0 for explicitness
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


# Common key names emitted by keyboard frontends.
_KEY_ALIASES: Dict[str, Action] = {
    "arrowup": Action.UP,
    "arrowdown": Action.DOWN,
    "arrowleft": Action.LEFT,
    "arrowright": Action.RIGHT,
    "w": Action.UP,
    "s": Action.DOWN,
    "a": Action.LEFT,
    "d": Action.RIGHT,
}


def parse_action(raw: object) -> Optional[Action]:
    """Map a raw input event to an :class:`Action`.

    Accepts ``Action`` members, ``GymAction`` members or integers (numpy included) in
    ``GymAction`` range, and strings naming a direction (``"left"``,
    ``"LEFT"``, ``"ArrowLeft"``, ``"a"``).

    Returns:
        Optional[Action]: The direction, or ``None`` if ``raw`` is not one.
    """
    if isinstance(raw, Action):
        return raw
    if isinstance(raw, str):
        key = raw.strip().lower()
        try:
            return Action(key)
        except ValueError:
            return _KEY_ALIASES.get(key)
    if isinstance(raw, bool):
        return None
    if isinstance(raw, numbers.Integral):
        if 0 <= int(raw) < len(GymAction):
            return Action[GymAction(int(raw)).name]
    return None
