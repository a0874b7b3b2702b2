# -*- coding: utf-8 -*-
"""
Set of types shared by the engine.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from numpy import array, int64, ndarray

from tilemerge.addons.config import check_size
from tilemerge.addons.exceptions import InvalidConfiguration


class Direction(str, Enum):
    """
    Direction of a move.

    The declaration order (left, up, right, down) is the order used by every mask and list
    returned by the engine.
    """

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'


class RandomSource(Protocol):
    """
    Source of randomness used to spawn tiles.

    ``numpy.random.Generator`` satisfies this protocol. Tests can inject any object with the
    same two methods to script the spawned cells and values.
    """

    def random(self) -> float:
        """Return a float drawn uniformly from [0, 1)."""

    def integers(self, high: int) -> int:
        """Return an integer drawn uniformly from [0, high)."""


@dataclass(frozen=True, eq=False)
class GameState:
    """
    Snapshot of a game.

    Attributes
    ----------
    grid : ndarray
        Square board of tiles, 0 for an empty cell. Stored as a read-only copy.
    score : int
        Sum of every merged tile produced since the game started.
    game_over : bool
        True once no move can change the grid anymore.

    Raises
    ------
    InvalidConfiguration
        If the grid is not a square board of at least 2x2, or holds a tile that is not a power
        of two.
    """

    grid: ndarray
    score: int = 0
    game_over: bool = False

    def __post_init__(self):
        # ##>: Own a private read-only copy so the board only changes through moves.
        grid = array(self.grid, dtype=int64)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise InvalidConfiguration(f'grid must be a square 2D array, got shape {grid.shape}')
        check_size(grid.shape[0])

        tiles = grid[grid != 0]
        invalid = tiles[(tiles < 2) | ((tiles & (tiles - 1)) != 0)]
        if invalid.size:
            raise InvalidConfiguration(f'tiles must be powers of two, got {sorted(set(invalid.tolist()))}')

        grid.flags.writeable = False
        object.__setattr__(self, 'grid', grid)
        object.__setattr__(self, 'score', int(self.score))
        object.__setattr__(self, 'game_over', bool(self.game_over))

    @property
    def size(self) -> int:
        """Dimension of the square grid."""
        return self.grid.shape[0]
