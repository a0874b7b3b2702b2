"""
Move utilities for the engine: orientation transforms between a direction and a left move, and
detection of legal and illegal directions.
"""

from numpy import asarray, ndarray

from tilemerge.addons.types import Direction


def orient(board: ndarray, direction: Direction) -> ndarray:
    """
    Reorient the board so that a move in ``direction`` becomes a left move.

    Parameters
    ----------
    board : ndarray
        The game board.
    direction : Direction
        Direction of the move.

    Returns
    -------
    ndarray
        A view of the board where each row is a line to slide towards index 0.

    Notes
    -----
    - up: transpose.
    - down: transpose then reverse each row.
    - right: reverse each row.
    - left: unchanged.
    """
    if direction is Direction.UP:
        return board.T
    if direction is Direction.DOWN:
        return board.T[:, ::-1]
    if direction is Direction.RIGHT:
        return board[:, ::-1]
    return board


def restore(board: ndarray, direction: Direction) -> ndarray:
    """
    Undo ``orient`` and map a left-moved board back to the original axes.

    Parameters
    ----------
    board : ndarray
        Board produced in the orientation returned by ``orient``.
    direction : Direction
        Direction that was used to orient the board.

    Returns
    -------
    ndarray
        The board in its original orientation.
    """
    if direction is Direction.UP:
        return board.T
    if direction is Direction.DOWN:
        return board[:, ::-1].T
    if direction is Direction.RIGHT:
        return board[:, ::-1]
    return board


def legal_actions_mask(state: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move changes the board.

    Notes
    -----
    A move changes the board if a tile has an empty cell in front of it, or if two adjacent
    tiles hold the same value. Horizontal and vertical adjacencies are computed once and shared
    between opposite directions.
    """
    state = asarray(state)

    # ##>: Compute horizontal adjacency once for left/right.
    left_cols, right_cols = state[:, :-1], state[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    # ##>: Compute vertical adjacency once for up/down.
    top_rows, bottom_rows = state[:-1, :], state[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    # ##>: Check slide conditions per direction.
    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def legal_actions(state: ndarray) -> list[Direction]:
    """
    Determine the directions that change the board.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Legal directions, in declaration order.
    """
    mask = legal_actions_mask(state)
    return [direction for direction, legal in zip(Direction, mask) if legal]


def illegal_actions(state: ndarray) -> list[Direction]:
    """
    Determine the directions that leave the board unchanged.

    Parameters
    ----------
    state : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Illegal directions, in declaration order.
    """
    mask = legal_actions_mask(state)
    return [direction for direction, legal in zip(Direction, mask) if not legal]
