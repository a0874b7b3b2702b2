"""Plain-text rendering of a board."""

from numpy import ndarray


def render_board(board: ndarray, empty: str = '.') -> str:
    """
    Render a board as aligned text, one line per row.

    Parameters
    ----------
    board : ndarray
        The game board.
    empty : str, optional
        Symbol drawn for an empty cell (default is ".").

    Returns
    -------
    str
        The board, cells right-aligned on the width of the largest tile.
    """
    cells = [[str(value) if value else empty for value in row] for row in board.tolist()]
    width = max(len(cell) for row in cells for cell in row)
    return '\n'.join(' '.join(cell.rjust(width) for cell in row) for row in cells)
