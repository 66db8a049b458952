"""
Utility functions for game mechanics
"""

from __future__ import annotations
import random
from typing import Optional
import numpy as np

from .vector import Vector2


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def rand(lo: float, hi: float) -> float:
    """Uniform sample in [lo, hi)"""
    return random.random() * (hi - lo) + lo


def wrap_padded(pos: Vector2, width: float, height: float, margin: float) -> Vector2:
    """Teleport a position that left the padded viewport to the opposite extreme"""
    x, y = pos.x, pos.y
    if x < -margin:
        x = width + margin
    elif x > width + margin:
        x = -margin
    if y < -margin:
        y = height + margin
    elif y > height + margin:
        y = -margin
    return Vector2(x, y)


def wrap_tight(pos: Vector2, width: float, height: float) -> Vector2:
    """Screen wrap with no margin (used for the ship)"""
    return wrap_padded(pos, width, height, 0.0)


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
