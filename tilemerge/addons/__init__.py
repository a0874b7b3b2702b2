"""..."""
from .config import BOARD_SIZE, START_TILES, TILE_SPAWN_PROBS, EngineConfig
from .exceptions import InvalidConfiguration
from .types import Direction, GameState, RandomSource
