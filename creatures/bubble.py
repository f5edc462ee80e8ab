"""
aquarium_sim module: creatures/bubble.py

Bubbles rise from the castle's vents, wobbling sideways, and are recycled at the top.
"""

from __future__ import annotations
from dataclasses import dataclass
import math
from typing import Optional

from world.castle import BUBBLE_SOURCES
from world.rng import RandomRangeSource, spawn_rng

WOBBLE_STEP = 0.05


@dataclass
class Bubble:
    x: float = 0.0
    y: float = 0.0
    anchor_x: float = 0.0
    size: float = 1.0
    speed_y: float = 1.0
    wobble: float = 0.0

    @staticmethod
    def spawn(
        anchor_x: float, anchor_y: float, scale: float, rng: Optional[RandomRangeSource] = None
    ) -> "Bubble":
        b = Bubble()
        b.reset(anchor_x, anchor_y, scale, rng)
        return b

    def reset(
        self, anchor_x: float, anchor_y: float, scale: float, rng: Optional[RandomRangeSource] = None
    ) -> None:
        rng = rng or spawn_rng
        dx, dy = rng.choice(BUBBLE_SOURCES)
        self.anchor_x = anchor_x + dx * scale + rng.uniform(-5.0, 5.0)
        self.x = self.anchor_x
        self.y = anchor_y + dy * scale
        self.size = rng.uniform(1.0, 5.0)
        self.speed_y = rng.uniform(0.5, 1.5)
        self.wobble = rng.uniform(0.0, math.pi * 2.0)

    def update(self) -> None:
        self.y -= self.speed_y
        self.wobble += WOBBLE_STEP
        self.x = self.anchor_x + math.sin(self.wobble) * self.size * 0.5

    @property
    def escaped(self) -> bool:
        return self.y < -self.size
