"""
aquarium_sim module: world/ambient.py

Ambient light shafts ("god rays") that fade in and out over their lifetime.
"""

from __future__ import annotations
from dataclasses import dataclass
import math
import logging
from typing import Optional

from world.rng import RandomRangeSource, spawn_rng

logger = logging.getLogger(__name__)

MAX_OPACITY = 0.15
TILT_DEGREES = -15.0
TOP_OFFSET = -50.0


@dataclass
class GodRay:
    x: float = 0.0
    top_width: float = 0.0
    bottom_width: float = 0.0
    length: float = 0.0
    blur: float = 0.0
    age: float = 0.0
    max_age: float = 0.0

    @staticmethod
    def spawn(w: float, h: float, rng: Optional[RandomRangeSource] = None) -> "GodRay":
        ray = GodRay()
        ray.reset(w, h, rng)
        return ray

    def reset(self, w: float, h: float, rng: Optional[RandomRangeSource] = None) -> None:
        rng = rng or spawn_rng
        # allowed to start partly off-screen on both sides
        self.x = rng.uniform(-w * 0.2, w * 1.2)
        self.top_width = rng.uniform(20.0, 150.0)
        self.bottom_width = rng.uniform(0.0, self.top_width * 0.3)
        self.length = rng.uniform(h * 0.5, h * 1.2)
        self.blur = rng.uniform(10.0, 25.0)
        self.max_age = rng.uniform(1200.0, 1800.0)
        self.age = 0.0
        logger.debug("god ray at x=%.0f lives %.0f ticks", self.x, self.max_age)

    def update(self) -> None:
        self.age += 1.0

    @property
    def expired(self) -> bool:
        return self.age >= self.max_age

    def opacity(self) -> float:
        """
        sin(age / max_age * pi) * 0.15, exactly zero at both ends of the lifetime.
        """
        if self.age <= 0.0 or self.age >= self.max_age:
            return 0.0
        return math.sin(self.age / self.max_age * math.pi) * MAX_OPACITY

    def outline(self) -> list[tuple[float, float]]:
        """Trapezoid corners relative to (x, 0), before the tilt is applied."""
        half_top = self.top_width / 2.0
        half_bottom = self.bottom_width / 2.0
        return [
            (-half_top, TOP_OFFSET),
            (half_top, TOP_OFFSET),
            (half_bottom, TOP_OFFSET + self.length),
            (-half_bottom, TOP_OFFSET + self.length),
        ]


def god_ray_count(w: float, spacing: float, lo: int, hi: int) -> int:
    # halves round up, not to even
    return int(math.floor(max(lo, min(hi, w / spacing)) + 0.5))
