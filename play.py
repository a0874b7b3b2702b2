# -*- coding: utf-8 -*-
"""
Play the tile-merging game in a terminal.
"""
import logging

from tilemerge.envs import TileMerge

# ##: Keys accepted besides the direction names.
KEYS = {"w": "up", "a": "left", "s": "down", "d": "right"}


def step(envs: TileMerge, key: str) -> bool:
    """
    Apply a key to the game.

    Parameters
    ----------
    envs: TileMerge
        The game session

    key: str
        Key or direction name typed by the player

    Returns
    -------
    bool
        False when the key was not recognised.
    """
    key = KEYS.get(key, key)
    if key not in envs.ACTIONS:
        return False

    _, reward, terminated = envs.step(key)
    print(f"reward={reward}")
    print(envs.render())
    if terminated:
        print("terminated!")
    return True


def play(envs: TileMerge):
    """
    Read keys until the player quits or the game ends.

    Parameters
    ----------
    envs: TileMerge
        The game session
    """
    print(envs.render())
    while not envs.is_finished:
        try:
            key = input("move [w/a/s/d, r to restart, q to quit]: ").strip().lower()
        except EOFError:
            break

        if key == "q":
            break
        if key == "r":
            envs.reset()
            print(envs.render())
            continue
        if not step(envs, key):
            print(f"unknown key {key!r}")


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--size", type=int, default=4)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    play(TileMerge(size=args.size, seed=args.seed))
