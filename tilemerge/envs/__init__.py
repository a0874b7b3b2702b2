# -*- coding: utf-8 -*-
"""
Python implementation of the tile-merging game.

This module provides the `TileMerge` class, a game session built on the engine.
"""

from .tilemerge import TileMerge

__all__ = ["TileMerge"]
