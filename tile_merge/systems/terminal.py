"""Terminal condition system.

Sets ``state.phase`` to ``GAME_OVER`` exactly once, when the board is full
and no two adjacent tiles share a value. Other systems short-circuit once
the state is terminal; only a session reset returns it to ``PLAYING``.
"""

import logging
from dataclasses import replace

from tile_merge.state import State
from tile_merge.types import Phase
from tile_merge.utils.terminal import is_game_over, is_terminal_state

logger = logging.getLogger(__name__)


def terminal_system(state: State) -> State:
    """Set ``GAME_OVER`` if no move remains (idempotent)."""
    if is_terminal_state(state):
        return state
    if is_game_over(state):
        logger.info("Game over with score %d (best %d)", state.score, state.score_best)
        return replace(state, phase=Phase.GAME_OVER)
    return state
