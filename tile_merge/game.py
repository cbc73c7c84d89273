"""Session facade for frontends.

:class:`Game` owns the current immutable ``State`` and is the surface a
rendering / input collaborator talks to:

* ``handle_input(raw)`` feeds one raw input event through
  :func:`tile_merge.actions.parse_action` and :func:`tile_merge.step.step`.
  Unrecognised events are ignored.
* ``take_snapshot()`` returns the ``(Position, value)`` pairs of all tiles
  only when they changed since the previous call, so a renderer can redraw
  on change instead of every frame.
* ``reset()``, ``current_score()``, ``best_score()`` and ``phase()`` are the
  session controls.

Example::

    game = Game(GameConfig(seed=7))
    game.handle_input("left")
    tiles = game.take_snapshot()
"""

import logging
from typing import Optional, Tuple

from tile_merge.actions import parse_action
from tile_merge.components import Position
from tile_merge.config import GameConfig
from tile_merge.state import State
from tile_merge.step import new_game, reset, step
from tile_merge.store import get_all
from tile_merge.types import Phase

logger = logging.getLogger(__name__)

TileSnapshot = Tuple[Tuple[Position, int], ...]


def tile_snapshot(state: State) -> TileSnapshot:
    """``(Position, value)`` of every tile, ordered by tile id."""
    return tuple((tile.position, tile.value) for tile in get_all(state))


class Game:
    """A single-player session over a sequence of immutable states."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config: GameConfig = config or GameConfig()
        self.state: State = new_game(self.config)
        self._dirty: bool = True

    def handle_input(self, raw: object) -> bool:
        """Apply one input event.

        Returns:
            bool: True if the board changed.
        """
        action = parse_action(raw)
        if action is None:
            logger.debug("Ignoring input %r", raw)
            return False
        prev = self.state
        self.state = step(self.state, action)
        changed = self.state is not prev and self.state.moved
        if changed:
            self._dirty = True
        return changed

    def reset(self) -> None:
        """Start a new session, keeping the best score."""
        self.state = reset(self.state, self.config.initial_tiles)
        self._dirty = True

    def current_score(self) -> int:
        return self.state.score

    def best_score(self) -> int:
        return self.state.score_best

    def phase(self) -> Phase:
        return self.state.phase

    def snapshot(self) -> TileSnapshot:
        """Current tiles regardless of change tracking."""
        return tile_snapshot(self.state)

    def take_snapshot(self) -> Optional[TileSnapshot]:
        """Current tiles if they changed since the last call, else ``None``."""
        if not self._dirty:
            return None
        self._dirty = False
        return tile_snapshot(self.state)
