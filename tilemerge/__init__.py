# -*- coding: utf-8 -*-
"""
Deterministic engine for the 2048 tile-merging puzzle.
"""

from .addons import BOARD_SIZE, Direction, EngineConfig, GameState, InvalidConfiguration
from .core import apply_move, can_move, compute_move, new_game, spawn_tile
from .envs import TileMerge

__all__ = [
    "BOARD_SIZE",
    "Direction",
    "EngineConfig",
    "GameState",
    "InvalidConfiguration",
    "TileMerge",
    "apply_move",
    "can_move",
    "compute_move",
    "new_game",
    "spawn_tile",
]
