"""Property component aggregates.

Re-exports the components every tile carries: :class:`Position` and
:class:`Value`. Both are immutable dataclasses; a change between steps is
expressed by storing a new instance in the corresponding ``State`` map.
"""

from .position import Position
from .value import Value

__all__ = [
    "Position",
    "Value",
]
