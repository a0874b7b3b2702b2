# -*- coding: utf-8 -*-
"""
This module provides utilities for presenting game boards.
"""

from .render import render_board

__all__ = ["render_board"]
