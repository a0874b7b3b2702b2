"""
State transitions of a game: starting a game and applying a move.

Both functions return a new ``GameState``; the state passed in is never modified.
"""

import logging

from tilemerge.addons.config import BOARD_SIZE, START_TILES, TILE_SPAWN_PROBS, EngineConfig
from tilemerge.addons.types import Direction, GameState, RandomSource
from tilemerge.core.gameboard import can_move, compute_move, new_grid, same_grid, spawn_tile

# ##>: Module logger.
_logger = logging.getLogger(__name__)


def new_game(
    size: int = BOARD_SIZE,
    rng: RandomSource | None = None,
    start_tiles: int = START_TILES,
    spawn_probs: dict[int, float] = TILE_SPAWN_PROBS,
) -> GameState:
    """
    Start a game: an empty board with ``start_tiles`` random tiles.

    Parameters
    ----------
    size : int, optional
        Dimension of the square grid (default is 4).
    rng : RandomSource, optional
        Source of randomness for the initial tiles.
    start_tiles : int, optional
        Number of tiles placed on the empty board (default is 2).
    spawn_probs : dict[int, float], optional
        Probability of each spawned value.

    Returns
    -------
    GameState
        A fresh game with a score of 0.

    Raises
    ------
    InvalidConfiguration
        If the settings cannot produce a playable board.
    """
    config = EngineConfig(size=size, start_tiles=start_tiles, spawn_probs=spawn_probs)

    grid = new_grid(config.size)
    for _ in range(config.start_tiles):
        grid = spawn_tile(grid, rng=rng, spawn_probs=config.spawn_probs)

    _logger.debug('New %dx%d game', config.size, config.size)
    return GameState(grid=grid, score=0, game_over=not can_move(grid))


def apply_move(
    state: GameState,
    direction: Direction,
    rng: RandomSource | None = None,
    spawn_probs: dict[int, float] = TILE_SPAWN_PROBS,
) -> GameState:
    """
    Apply a move to a game.

    Parameters
    ----------
    state : GameState
        The current game.
    direction : Direction
        Direction of the move. Its string value is accepted too.
    rng : RandomSource, optional
        Source of randomness for the spawned tile.
    spawn_probs : dict[int, float], optional
        Probability of each spawned value.

    Returns
    -------
    GameState
        The next game, or ``state`` itself if the move changes nothing.

    Notes
    -----
    - A finished game accepts no move.
    - A move that leaves the board unchanged spawns no tile and gains no score.
    - Otherwise one tile is spawned and the end of the game is checked.
    """
    direction = Direction(direction)
    if state.game_over:
        _logger.debug('Ignoring move %s, game is over', direction.value)
        return state

    grid, gained = compute_move(state.grid, direction)
    if same_grid(grid, state.grid):
        _logger.debug('Move %s leaves the board unchanged', direction.value)
        return state

    # ##: Fill randomly one cell.
    grid = spawn_tile(grid, rng=rng, spawn_probs=spawn_probs)
    score = state.score + gained
    game_over = not can_move(grid)
    if game_over:
        _logger.info('Game over with score %d', score)

    return GameState(grid=grid, score=score, game_over=game_over)
