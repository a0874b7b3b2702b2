"""
Board functions of the engine: compressing and merging rows, computing moves, spawning tiles and
detecting the end of a game.

Every function returns a new array and leaves its input untouched.
"""

import logging

from numpy import argwhere, array, array_equal, asarray, int64, ndarray, zeros, zeros_like
from numpy.random import PCG64DXSM, default_rng

from tilemerge.addons.config import TILE_SPAWN_PROBS, check_size
from tilemerge.addons.types import Direction, RandomSource
from tilemerge.core.gamemove import orient, restore

# ##>: Module logger.
_logger = logging.getLogger(__name__)

# ##>: Module-level generator used when no source of randomness is injected.
_GENERATOR = default_rng(PCG64DXSM())


def new_grid(size: int) -> ndarray:
    """
    Build an empty square grid.

    Raises
    ------
    InvalidConfiguration
        If ``size`` is lower than 2.
    """
    size = check_size(size)
    return zeros((size, size), dtype=int64)


def compress(row: ndarray) -> ndarray:
    """
    Slide every tile of a row towards index 0, keeping their order.

    Parameters
    ----------
    row : ndarray
        A 1D array representing one line of the board.

    Returns
    -------
    ndarray
        A row of the same length, tiles first and zeros after.
    """
    non_zero = row[row != 0]
    result = zeros_like(row)
    result[: len(non_zero)] = non_zero
    return result


def merge_row(row: ndarray) -> tuple[int, ndarray]:
    """
    Merge adjacent equal tiles of a compressed row and compute the gained score.

    Parameters
    ----------
    row : ndarray
        A compressed 1D row (see ``compress``).

    Returns
    -------
    score : int
        Sum of the merged tiles.
    merged_row : ndarray
        The row after merging. Merged pairs leave a gap that a second compress closes.

    Notes
    -----
    - Merging scans from index 0 towards the end.
    - Each tile merges at most once per move: ``[2, 2, 2]`` gives ``[4, 0, 2]``, never ``[8]``.
    """
    result = row.copy()
    score = 0

    # ##: Iterate over the row and merge pairs.
    i = 0
    while i < len(result) - 1:
        if result[i] != 0 and result[i] == result[i + 1]:
            result[i] *= 2
            result[i + 1] = 0
            score += int(result[i])
            i += 2
        else:
            i += 1

    return score, result


def slide_and_merge(board: ndarray) -> tuple[int, ndarray]:
    """
    Slide the board to the left, merge adjacent tiles and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        The updated game board after compress, merge and compress on each row.

    Notes
    -----
    - The function operates on rows, effectively sliding left.
    - For other directions, reorient the board before calling this function.
    """
    result = zeros_like(board)
    score = 0

    for i, row in enumerate(board):
        score_row, merged_row = merge_row(compress(row))
        score += score_row
        result[i] = compress(merged_row)

    return score, result


def compute_move(grid: ndarray, direction: Direction) -> tuple[ndarray, int]:
    """
    Compute the board after a move, without adding a new tile.

    Parameters
    ----------
    grid : ndarray
        The current state of the game board.
    direction : Direction
        Direction of the move. Its string value is accepted too.

    Returns
    -------
    new_grid : ndarray
        The board after the move.
    gained : int
        The sum of every tile produced by a merge.

    Raises
    ------
    ValueError
        If the grid is not a square 2D array, or the direction is unknown.
    """
    direction = Direction(direction)
    grid = array(grid, dtype=int64)
    if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
        raise ValueError(f'grid must be a square 2D array, got shape {grid.shape}')

    gained, moved = slide_and_merge(orient(grid, direction))
    return restore(moved, direction).copy(), gained


def _draw_value(rng: RandomSource, spawn_probs: dict[int, float]) -> int:
    draw = rng.random()
    cumulative = 0.0
    for value, prob in spawn_probs.items():
        cumulative += prob
        if draw < cumulative:
            return value
    # ##>: Rounding can leave the total a hair under 1.
    return value


def spawn_tile(
    grid: ndarray, rng: RandomSource | None = None, spawn_probs: dict[int, float] = TILE_SPAWN_PROBS
) -> ndarray:
    """
    Place a new tile on a random empty cell.

    Parameters
    ----------
    grid : ndarray
        The current state of the game board. Not modified.
    rng : RandomSource, optional
        Source of randomness. The module-level generator is used when omitted.
    spawn_probs : dict[int, float], optional
        Probability of each spawned value (default 2: 0.9, 4: 0.1).

    Returns
    -------
    ndarray
        A copy of the board with one more tile, or an unchanged copy if the board is full.

    Notes
    -----
    The empty cell is drawn uniformly, then the value is drawn from ``spawn_probs``.
    """
    rng = _GENERATOR if rng is None else rng
    result = array(grid, dtype=int64)

    # ##: Only if there are still available places.
    empty_cells = argwhere(result == 0)
    if len(empty_cells) == 0:
        return result

    row, col = empty_cells[int(rng.integers(len(empty_cells)))]
    value = _draw_value(rng, spawn_probs)
    result[row, col] = value
    _logger.debug('Spawned tile %d at (%d, %d)', value, row, col)
    return result


def can_move(grid: ndarray) -> bool:
    """
    Check if at least one move can still change the board.

    Parameters
    ----------
    grid : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if a cell is empty or two horizontally or vertically adjacent cells hold the same
        value, False otherwise.
    """
    grid = asarray(grid)
    if not grid.all():
        return True

    # ##>: The board is full, only a merge can change it.
    return bool((grid[:, :-1] == grid[:, 1:]).any() or (grid[:-1] == grid[1:]).any())


def is_done(grid: ndarray) -> bool:
    """Check if the game has ended."""
    return not can_move(grid)


def max_tile(grid: ndarray) -> int:
    """Return the largest tile on the board."""
    grid = asarray(grid)
    return int(grid.max())


def same_grid(first: ndarray, second: ndarray) -> bool:
    """Compare two boards cell by cell."""
    return bool(array_equal(first, second))
