# -*- coding: utf-8 -*-
"""
Configuration of the engine.
"""
from dataclasses import dataclass, field

from tilemerge.addons.exceptions import InvalidConfiguration

# ##>: Board dimension of the classic game.
BOARD_SIZE = 4

# ##>: Number of tiles placed on an empty board when a game starts.
START_TILES = 2

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


def check_size(size: int) -> int:
    """
    Validate a board dimension.

    Parameters
    ----------
    size : int
        Requested dimension of the square grid.

    Returns
    -------
    int
        The validated dimension.

    Raises
    ------
    InvalidConfiguration
        If the dimension is not an integer of at least 2.
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidConfiguration(f'size must be an integer, got {size!r}')
    if size < 2:
        raise InvalidConfiguration(f'size must be >= 2, got {size}')
    return size


def check_spawn_probs(spawn_probs: dict[int, float]) -> dict[int, float]:
    """
    Validate tile spawn probabilities.

    Every key must be a positive power of two and every probability positive, with a total of 1.
    """
    if not spawn_probs:
        raise InvalidConfiguration('spawn_probs must hold at least one tile value')
    for value, prob in spawn_probs.items():
        if value < 2 or value & (value - 1):
            raise InvalidConfiguration(f'spawned tiles must be powers of two, got {value}')
        if prob <= 0:
            raise InvalidConfiguration(f'probability of tile {value} must be > 0, got {prob}')
    total = sum(spawn_probs.values())
    if abs(total - 1.0) > 1e-9:
        raise InvalidConfiguration(f'spawn probabilities must sum to 1, got {total}')
    return spawn_probs


@dataclass(frozen=True)
class EngineConfig:
    """
    Engine configuration.
    """

    size: int = BOARD_SIZE
    start_tiles: int = START_TILES
    spawn_probs: dict[int, float] = field(default_factory=lambda: dict(TILE_SPAWN_PROBS))

    def __post_init__(self):
        check_size(self.size)
        if not 1 <= self.start_tiles <= self.size * self.size:
            raise InvalidConfiguration(
                f'start_tiles must be between 1 and {self.size * self.size}, got {self.start_tiles}'
            )
        check_spawn_probs(self.spawn_probs)
