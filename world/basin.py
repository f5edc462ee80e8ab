"""
aquarium_sim module: world/basin.py

Basin state container: bounds, frame clock, seafloor profile and castle anchor.
"""

from __future__ import annotations
from dataclasses import dataclass
import math
from typing import List, Tuple

import config


@dataclass
class Basin:
    w: float
    h: float
    layout_seed: int
    frame: int = 0

    @property
    def diagonal(self) -> float:
        return math.hypot(self.w, self.h)

    def seafloor_height_at(self, x: float) -> float:
        t = self.frame
        base = self.h * config.FLOOR_BASE
        wave1 = math.sin(x * 0.005 + t * 0.01) * 10.0
        wave2 = math.sin(x * 0.02 + t * 0.005) * 5.0
        return base + wave1 + wave2

    def seafloor_profile(self, step: float = config.FLOOR_SAMPLE_STEP) -> List[Tuple[float, float]]:
        """
        Closed silhouette of the seafloor: sampled surface plus the bottom corners.
        """
        pts = [(0.0, self.h * config.FLOOR_BASE)]
        x = 0.0
        while x < self.w + step:
            pts.append((x, self.seafloor_height_at(x)))
            x += step
        pts.append((self.w, self.h))
        pts.append((0.0, self.h))
        return pts

    @property
    def castle_center_x(self) -> float:
        return self.w * config.CASTLE_CENTER

    @property
    def castle_base_y(self) -> float:
        return self.h * config.CASTLE_BASE

    def castle_scale(self) -> float:
        return max(self.h / 1000.0, 0.5) * 1.5
