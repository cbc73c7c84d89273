"""State reducer and session transitions.

This module wires the systems together to implement a single *turn*
transition given an ``Action``. :func:`step` is the only gameplay mutation
entry point and is pure: it returns a *new* :class:`tile_merge.state.State`.

Ordering:

1. Clear the per-step auxiliaries (``moved``, ``merged``, ``reward``).
2. ``shift_system`` slides and merges tiles and updates the score.
3. ``spawn_system`` adds one tile, only if the shift changed the board.
4. ``terminal_system`` checks for a full board without adjacent pairs.
5. The turn counter advances for board-changing shifts.

:func:`new_game` and :func:`reset` are the only transitions that clear the
score or leave ``GAME_OVER``.
"""

import logging
import random
from dataclasses import replace
from typing import Optional

from pyrsistent import pset

from tile_merge.actions import Action, SHIFT_ACTIONS
from tile_merge.config import GameConfig
from tile_merge.state import State
from tile_merge.store import clear_tiles
from tile_merge.systems.shift import shift_system
from tile_merge.systems.spawn import spawn_initial_tiles, spawn_system
from tile_merge.systems.terminal import terminal_system
from tile_merge.types import Phase
from tile_merge.utils.terminal import is_terminal_state

logger = logging.getLogger(__name__)

_SEED_BOUND = 2**31


def step(state: State, action: Optional[Action]) -> State:
    """Advance the game by one shift.

    Args:
        state (State): Previous immutable state.
        action (Action | None): Direction to shift. ``None`` or any value that
            is not a shift direction is ignored.

    Returns:
        State: Next state. If the input state is terminal or the action is not
            a direction the same object is returned unchanged.
    """
    if action not in SHIFT_ACTIONS:
        logger.debug("Ignoring non-directional input %r", action)
        return state

    if is_terminal_state(state):
        return state

    state = replace(state, moved=False, merged=pset(), reward=0)
    state = shift_system(state, action)
    state = spawn_system(state)
    state = terminal_system(state)
    if state.moved:
        state = replace(state, turn=state.turn + 1)
    return state


def new_game(config: GameConfig, score_best: int = 0) -> State:
    """Create a fresh session with ``config.initial_tiles`` spawned tiles.

    When ``config.seed`` is ``None`` a seed is drawn here and stored on the
    state, so the session can still be replayed from ``state.seed``.
    """
    seed = config.seed if config.seed is not None else random.randrange(_SEED_BOUND)
    state = State(size=config.size, seed=seed, score_best=score_best)
    state = spawn_initial_tiles(state, config.initial_tiles)
    state = terminal_system(state)
    logger.info("New %dx%d game (seed %d)", config.size, config.size, seed)
    return state


def reset(state: State, initial_tiles: int = 2) -> State:
    """Start a new session on the same board size.

    Clears all tiles, sets ``score`` to 0 and ``phase`` to ``PLAYING`` while
    keeping ``score_best``. The seed advances by one so consecutive sessions
    differ but stay reproducible.
    """
    seed = ((state.seed if state.seed is not None else 0) + 1) % _SEED_BOUND
    state = replace(
        clear_tiles(state),
        moved=False,
        merged=pset(),
        reward=0,
        turn=0,
        score=0,
        phase=Phase.PLAYING,
        seed=seed,
    )
    state = spawn_initial_tiles(state, initial_tiles)
    logger.info("Game reset (seed %d, best %d)", seed, state.score_best)
    return terminal_system(state)
