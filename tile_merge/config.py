"""Session configuration."""

from dataclasses import dataclass
from typing import Optional

from tile_merge.grid import TILE_SIZE, TILE_SPACER, Board

DEFAULT_SIZE: int = 4
DEFAULT_INITIAL_TILES: int = 2


@dataclass(frozen=True)
class GameConfig:
    """Parameters of a game session.

    Attributes:
        size: Tiles per side of the board (at least 2).
        initial_tiles: Tiles spawned when a session starts or resets.
        seed: Base seed for spawn selection. ``None`` draws one per session.
        tile_size: Drawn tile edge length, for the rendering collaborator.
        tile_spacer: Drawn gap between tiles, for the rendering collaborator.
    """

    size: int = DEFAULT_SIZE
    initial_tiles: int = DEFAULT_INITIAL_TILES
    seed: Optional[int] = None
    tile_size: float = TILE_SIZE
    tile_spacer: float = TILE_SPACER

    def __post_init__(self) -> None:
        if self.size < 2:
            raise ValueError(f"Board size must be at least 2, got {self.size}")
        if not 0 <= self.initial_tiles <= self.size * self.size:
            raise ValueError(
                f"initial_tiles must be in [0, {self.size * self.size}], "
                f"got {self.initial_tiles}"
            )
        if self.tile_size <= 0 or self.tile_spacer < 0:
            raise ValueError("tile_size must be positive and tile_spacer non-negative")

    def board(self) -> Board:
        """Geometry for a renderer drawing this session."""
        return Board(self.size, self.tile_size, self.tile_spacer)
