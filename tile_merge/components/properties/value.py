from dataclasses import dataclass


@dataclass(frozen=True)
class Value:
    """Face value of a tile.

    Attributes:
        amount:
            Positive integer shown on the tile. Spawned tiles start at 2 and
            the shift system doubles it whenever the tile absorbs an equal
            neighbour.
    """

    amount: int
