"""Game session owning the state of a single game."""

from numpy import ndarray
from numpy.random import default_rng

from tilemerge.addons.config import BOARD_SIZE, EngineConfig
from tilemerge.addons.exceptions import InvalidConfiguration
from tilemerge.addons.types import Direction, GameState, RandomSource
from tilemerge.core.engine import apply_move, new_game
from tilemerge.core.gameboard import max_tile
from tilemerge.core.gamemove import legal_actions
from tilemerge.utils.render import render_board


class TileMerge:
    """
    Tile-merging game session.

    This class owns the state of one game and is the surface a presentation layer calls: it
    starts games, applies moves and exposes the board, the score and the end of game flag.
    Calls are not synchronised; a session expects a single input source.
    """

    # ##: All Actions.
    ACTIONS = {direction.value: direction for direction in Direction}

    def __init__(
        self,
        size: int | None = None,
        seed: int | None = None,
        rng: RandomSource | None = None,
        config: EngineConfig | None = None,
    ):
        """
        Initialize the session and start a game.

        Parameters
        ----------
        size : int, optional
            The size of the square grid (default is 4). May be given with ``config`` only if both
            agree.
        seed : int, optional
            Seed of the session generator, for reproducible games.
        rng : RandomSource, optional
            Source of randomness to use instead of a seeded generator. Exclusive with ``seed``.
        config : EngineConfig, optional
            Full engine configuration.

        Raises
        ------
        InvalidConfiguration
            If the configuration cannot produce a playable board, ``size`` disagrees with
            ``config``, or both ``seed`` and ``rng`` are given.
        """
        if config is None:
            config = EngineConfig(size=BOARD_SIZE if size is None else size)
        elif size is not None and size != config.size:
            raise InvalidConfiguration(f'size {size} conflicts with config size {config.size}')
        if seed is not None and rng is not None:
            raise InvalidConfiguration('seed and rng are exclusive, seed an injected rng yourself')

        self.config = config
        self._rng = rng if rng is not None else default_rng(seed)
        self._state: GameState | None = None

        self.reset()

    @property
    def size(self) -> int:
        """Dimension of the board."""
        return self.config.size

    @property
    def state(self) -> GameState:
        """Current game state."""
        return self._state

    @property
    def board(self) -> ndarray:
        """
        Get a copy of the current board.

        Returns
        -------
        ndarray
            The current board as a writable 2D numpy array.
        """
        return self._state.grid.copy()

    @property
    def score(self) -> int:
        """Score of the current game."""
        return self._state.score

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if the game is finished (no more moves possible), False otherwise.
        """
        return self._state.game_over

    @property
    def legal_actions(self) -> list[Direction]:
        """Directions that would change the board. Empty once the game is over."""
        if self._state.game_over:
            return []
        return legal_actions(self._state.grid)

    @property
    def max_tile(self) -> int:
        """Largest tile on the board."""
        return max_tile(self._state.grid)

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game.

        Parameters
        ----------
        seed : int, optional
            Reseed the session generator before placing the initial tiles.

        Returns
        -------
        ndarray
            The new game board.
        """
        if seed is not None:
            self._rng = default_rng(seed)
        self._state = new_game(
            size=self.config.size,
            rng=self._rng,
            start_tiles=self.config.start_tiles,
            spawn_probs=self.config.spawn_probs,
        )
        return self.board

    def step(self, direction: Direction | str) -> tuple[ndarray, int, bool]:
        """
        Apply a move to the current game.

        Parameters
        ----------
        direction : Direction or str
            Direction of the move ("left", "up", "right" or "down").

        Returns
        -------
        tuple[ndarray, int, bool]
            A tuple containing:
            - The updated game board (ndarray)
            - The score gained by this move (int)
            - Whether the game has finished after this move (bool)

        Raises
        ------
        ValueError
            If ``direction`` is not a known direction.
        """
        previous = self._state
        self._state = apply_move(previous, Direction(direction), rng=self._rng, spawn_probs=self.config.spawn_probs)
        return self.board, self._state.score - previous.score, self._state.game_over

    def render(self) -> str:
        """
        Render the game as text: the board followed by the score.
        """
        lines = [render_board(self._state.grid), f'Score: {self._state.score}']
        if self._state.game_over:
            lines.append('Game over!')
        return '\n'.join(lines)
