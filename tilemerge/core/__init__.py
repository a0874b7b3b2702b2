# -*- coding: utf-8 -*-
"""
This module provides the engine of the tile-merging game.

It includes functions for compressing and merging rows, computing moves in every direction,
spawning tiles, detecting legal moves and the end of a game, and the
state transitions that start a game and apply a move.
"""

from .engine import apply_move, new_game
from .gameboard import (
    can_move,
    compress,
    compute_move,
    is_done,
    max_tile,
    merge_row,
    new_grid,
    slide_and_merge,
    spawn_tile,
)
from .gamemove import illegal_actions, legal_actions, legal_actions_mask

__all__ = [
    "new_game",
    "apply_move",
    "compute_move",
    "spawn_tile",
    "can_move",
    "is_done",
    "compress",
    "merge_row",
    "slide_and_merge",
    "new_grid",
    "max_tile",
    "legal_actions",
    "illegal_actions",
    "legal_actions_mask",
]
