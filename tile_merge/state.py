"""Core immutable ECS `State` dataclass.

This module defines the frozen :class:`State` object that represents the
whole board plus session bookkeeping at a single turn. All systems are pure
functions that take a previous ``State`` plus inputs (e.g. an ``Action``) and
return a *new* ``State``; no mutation happens in-place. This makes the engine
deterministic, easy to test, and friendly to functional style reducers.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
    ``EntityID``. A tile is live iff it has an entry in ``entity``,
    ``position`` and ``value``.
* ``moved``, ``merged`` and ``reward`` describe the most recent step only;
    the reducer clears them at the start of every step.
* ``phase`` is the terminal marker. The reducer short-circuits once it is
    ``Phase.GAME_OVER``.

See :mod:`tile_merge.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import PMap, PSet, pmap, pset

from tile_merge.entity import Entity
from tile_merge.components import Position, Value
from tile_merge.types import EntityID, Phase


@dataclass(frozen=True)
class State:
    """Immutable ECS board state.

    Instances are *value objects*; every transition creates a new ``State``.

    Attributes:
        size (int): Tiles per side of the square board.
        entity (PMap[EntityID, Entity]): Registry of live tiles.
        position (PMap[EntityID, Position]): Grid position of each tile.
        value (PMap[EntityID, Value]): Face value of each tile.
        moved (bool): True if the last shift moved or merged any tile.
        merged (PSet[EntityID]): Tiles that absorbed another tile in the last shift.
        reward (int): Score gained by the last shift.
        turn (int): Number of board-changing shifts applied this session.
        score (int): Accumulated score of the session.
        score_best (int): Highest ``score`` observed across sessions.
        phase (Phase): ``PLAYING`` or ``GAME_OVER``.
        seed (int | None): Base RNG seed for spawn cell selection.
    """

    # Level
    size: int

    # Entity
    entity: PMap[EntityID, Entity] = pmap()

    # Components
    position: PMap[EntityID, Position] = pmap()
    value: PMap[EntityID, Value] = pmap()

    # Last step
    moved: bool = False
    merged: PSet[EntityID] = pset()
    reward: int = 0

    # Status
    turn: int = 0
    score: int = 0
    score_best: int = 0
    phase: Phase = Phase.PLAYING

    # RNG
    seed: Optional[int] = None

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-empty fields.

        Iterates dataclass fields and returns a persistent map including only
        those that are non-empty (for component maps) or set (for scalars).
        Useful for lightweight diagnostics without dumping empty maps.

        Returns:
            PMap[str, Any]: Persistent map of field name to value for all
            populated fields.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if isinstance(value, (type(pmap()), type(pset()))) and len(value) == 0:
                continue
            if value is None:
                continue
            description = description.set(field, value)
        return description
