"""
aquarium_sim module: world/food.py

Food system:
- Particles are dropped by the user and sink with a damped terminal velocity
- Once they reach the seafloor they stay on it
- Fish eat them; eaten indices are removed in one batch per tick
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import config


@dataclass
class FoodParticle:
    x: float
    y: float
    vy: float = 0.0

    def update(self, floor_y: float) -> None:
        if self.y < floor_y:
            self.vy += config.FOOD_SINK_ACCEL
            self.vy *= config.FOOD_DRAG
            self.y += self.vy
        if self.y > floor_y:
            self.y = floor_y


def nearest_food(x: float, y: float, food: List[FoodParticle]) -> Optional[Tuple[float, int]]:
    """
    Returns (squared distance, index) for the nearest particle, or None if there is no food.
    """
    best = None
    best_d2 = float("inf")
    for i, p in enumerate(food):
        dx = p.x - x
        dy = p.y - y
        d2 = dx * dx + dy * dy
        if d2 < best_d2:
            best_d2 = d2
            best = i
    if best is None:
        return None
    return best_d2, best


def remove_eaten(food: List[FoodParticle], indices: Iterable[int]) -> int:
    """
    Remove particles by index in place: deduplicated, highest index first.
    Out-of-range indices are ignored. Returns how many were removed.
    """
    removed = 0
    for idx in sorted(set(indices), reverse=True):
        if 0 <= idx < len(food):
            del food[idx]
            removed += 1
    return removed
