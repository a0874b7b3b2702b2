# -*- coding: utf-8 -*-
"""
Evaluate random play on the tile-merging engine.
"""
import logging
from collections import Counter
from statistics import mean

from numpy.random import default_rng
from tqdm import trange

from tilemerge.envs import TileMerge


def evaluate(length: int = 100, size: int = 4, seed: int | None = None) -> tuple[dict[int, int], float]:
    """
    Play games with uniformly random legal moves.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 100).
    size : int, optional
        The size of the board (default is 4).
    seed : int, optional
        Seed for reproducible runs.

    Returns
    -------
    tuple[dict[int, int], float]
        Frequency of the max tile reached and the mean final score.

    Raises
    ------
    ValueError
        If fewer than one game is requested.
    """
    if length < 1:
        raise ValueError(f"length must be >= 1, got {length}")

    rng = default_rng(seed)
    env = TileMerge(size=size, rng=rng)
    max_tiles, scores = [], []

    with trange(length) as period:
        for num in period:
            env.reset()

            # ##: Play a game.
            while not env.is_finished:
                actions = env.legal_actions
                env.step(actions[rng.integers(len(actions))])

                # ##: Log.
                period.set_description(f"Evaluation: {num + 1}")
                period.set_postfix(score=env.score, max=env.max_tile)

            # ##: Save max cells.
            max_tiles.append(env.max_tile)
            scores.append(env.score)

    return dict(sorted(Counter(max_tiles).items())), mean(scores)


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--games", type=int, default=100)
    parser.add_argument("--size", type=int, default=4)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()
    if args.games < 1:
        parser.error("--games must be >= 1")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    frequency, average = evaluate(length=args.games, size=args.size, seed=args.seed)
    print(f"Max tiles over {args.games} games: {frequency}, mean score: {average:.1f}")
