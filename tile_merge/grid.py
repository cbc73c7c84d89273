"""Grid geometry and coordinate helpers.

The board is a ``size`` x ``size`` square of cells indexed by
:class:`~tile_merge.components.Position`. Functions here are pure and only
depend on ``size`` so that both the engine and a rendering frontend can use
them without a ``State``.

Physical mapping
----------------
A frontend draws the board centred at the origin with square tiles of
``tile_size`` separated (and surrounded) by ``tile_spacer``::

    physical_size = size * tile_size + (size + 1) * tile_spacer

:func:`cell_to_physical` maps a cell index on either axis to the centre of
that cell in those units. The engine never consults physical coordinates;
they exist so the engine and its renderer agree on cell indexing.
"""

from dataclasses import dataclass, field
from typing import Iterator, List

from tile_merge.components import Position

TILE_SIZE: float = 40.0
TILE_SPACER: float = 10.0


def physical_board_size(
    size: int, tile_size: float = TILE_SIZE, tile_spacer: float = TILE_SPACER
) -> float:
    """Return the side length of the drawn board, spacers included."""
    return size * tile_size + (size + 1) * tile_spacer


def cell_to_physical(
    size: int,
    index: int,
    tile_size: float = TILE_SIZE,
    tile_spacer: float = TILE_SPACER,
) -> float:
    """Centre coordinate of cell ``index`` on a board centred at the origin.

    ``index`` must be in ``[0, size)``; this is a caller contract and is not
    checked.
    """
    offset = -physical_board_size(size, tile_size, tile_spacer) / 2 + tile_size / 2
    return offset + index * tile_size + (index + 1) * tile_spacer


@dataclass(frozen=True)
class Board:
    """Board geometry shared with a rendering collaborator.

    Attributes:
        size: Tiles per side.
        tile_size: Drawn tile edge length.
        tile_spacer: Gap between tiles and around the border.
        physical_size: Derived drawn edge length of the whole board.
    """

    size: int
    tile_size: float = TILE_SIZE
    tile_spacer: float = TILE_SPACER
    physical_size: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "physical_size",
            physical_board_size(self.size, self.tile_size, self.tile_spacer),
        )

    def cell_position_to_physical(self, index: int) -> float:
        return cell_to_physical(self.size, index, self.tile_size, self.tile_spacer)


def is_in_bounds(size: int, pos: Position) -> bool:
    """Return True if ``pos`` lies within the board."""
    return 0 <= pos.x < size and 0 <= pos.y < size


def check_in_bounds(size: int, pos: Position) -> None:
    """Raise ``IndexError`` if ``pos`` lies outside the board."""
    if not is_in_bounds(size, pos):
        raise IndexError(f"Out of bounds: {(pos.x, pos.y)} for grid {size}x{size}")


def all_cells(size: int) -> Iterator[Position]:
    """Yield every cell, row by row (``y`` outer, ``x`` inner)."""
    for y in range(size):
        for x in range(size):
            yield Position(x, y)


def neighbors(size: int, pos: Position) -> List[Position]:
    """Return the in-bounds 4-neighbourhood of ``pos``."""
    candidates = [
        Position(pos.x - 1, pos.y),
        Position(pos.x + 1, pos.y),
        Position(pos.x, pos.y - 1),
        Position(pos.x, pos.y + 1),
    ]
    return [p for p in candidates if is_in_bounds(size, p)]
