"""tile_merge.components
=================================

Aggregate import surface for the ECS component dataclasses used by the
engine, e.g.::

    from tile_merge.components import Position, Value

All component classes are simple ``@dataclass`` value objects; they carry no
behavior beyond their fields and are manipulated by systems during the step
pipeline.
"""

from .properties import Position
from .properties import Value

__all__ = [
    "Position",
    "Value",
]
