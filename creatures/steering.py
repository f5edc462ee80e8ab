"""
aquarium_sim module: creatures/steering.py

2D vector helpers for force-based steering:
- magnitude capping (used for both steering forces and speed clamps)
- safe normalisation (zero-length vectors are left alone)
- the weighted blend that composes avoid / seek / wander into one force
"""

from __future__ import annotations
import math
from typing import Tuple

Vec = Tuple[float, float]

ZERO: Vec = (0.0, 0.0)


def length(v: Vec) -> float:
    return math.hypot(v[0], v[1])


def limit(v: Vec, max_mag: float) -> Vec:
    """
    Scale ``v`` down to ``max_mag`` if it is longer; shorter vectors pass through.
    """
    mag2 = v[0] * v[0] + v[1] * v[1]
    if mag2 > max_mag * max_mag:
        mag = math.sqrt(mag2)
        return (v[0] / mag * max_mag, v[1] / mag * max_mag)
    return v


def set_length(v: Vec, mag: float) -> Vec:
    n = length(v)
    if n <= 0.0:
        return v
    return (v[0] / n * mag, v[1] / n * mag)


def blend(avoid: Vec, avoid_w: float, seek: Vec, seek_w: float, wander: Vec) -> Vec:
    """
    Avoidance dominates, seeking takes what avoidance leaves, wandering fills the rest.
    """
    seek_share = seek_w * (1.0 - avoid_w)
    wander_share = (1.0 - seek_w) * (1.0 - avoid_w)
    return (
        avoid[0] * avoid_w + seek[0] * seek_share + wander[0] * wander_share,
        avoid[1] * avoid_w + seek[1] * seek_share + wander[1] * wander_share,
    )
