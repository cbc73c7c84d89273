"""Deterministic RNG derivation.

Spawn choices must be reproducible for a fixed seed. Rather than carrying a
mutable generator inside the immutable ``State``, every random decision
builds a fresh ``random.Random`` from ``(seed, turn, salt)``; ``hash`` of a
tuple of ints is stable across processes.
"""

import random

from tile_merge.state import State


def state_rng(state: State, salt: int = 0) -> random.Random:
    """Return a generator determined by ``state.seed``, ``state.turn`` and ``salt``."""
    base_seed = hash((state.seed if state.seed is not None else 0, state.turn, salt))
    return random.Random(base_seed)
