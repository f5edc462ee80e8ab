"""
aquarium_sim module: creatures/fish.py

Fish steering:
- seek: head for the nearest food, harder the closer it is
- avoid: push back from the basin walls and the seafloor
- wander: a slowly drifting heading when nothing else is going on

The three forces are blended by weight rather than summed, then integrated
into velocity with a speed cap that rises while the fish is chasing food.
"""

from __future__ import annotations
from dataclasses import dataclass
import colorsys
import math
from typing import List, Optional, Tuple

import config
from creatures.steering import ZERO, Vec, blend, limit, set_length
from world.food import FoodParticle, nearest_food
from world.rng import RandomRangeSource, spawn_rng

# (squared distance, x, y) of the nearest food particle
Target = Optional[Tuple[float, float, float]]


def hsl_color(hue: float, saturation: float = 0.8, lightness: float = 0.7) -> Tuple[int, int, int]:
    r, g, b = colorsys.hls_to_rgb((hue % 360.0) / 360.0, lightness, saturation)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))


@dataclass
class Fish:
    x: float
    y: float
    size: float
    hue: float
    max_speed: float
    max_force: float
    wander_angle: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    ax: float = 0.0
    ay: float = 0.0

    # seek weight from the last update; the speed cap that tick was speed_cap(last_seek_weight)
    last_seek_weight: float = 0.0

    @staticmethod
    def spawn(w: float, h: float, rng: Optional[RandomRangeSource] = None) -> "Fish":
        rng = rng or spawn_rng
        return Fish(
            x=rng.uniform(0.0, w),
            y=rng.uniform(0.0, h * 0.8),
            size=rng.uniform(10.0, 18.0),
            hue=float(rng.randint(0, 360)),
            wander_angle=rng.uniform(0.0, math.pi * 2.0),
            max_speed=rng.uniform(0.3, 0.6),
            max_force=rng.uniform(0.01, 0.03),
        )

    @property
    def color(self) -> Tuple[int, int, int]:
        return hsl_color(self.hue)

    @property
    def speed(self) -> float:
        return math.hypot(self.vx, self.vy)

    @property
    def heading(self) -> float:
        return math.atan2(self.vy, self.vx)

    def speed_cap(self, seek_weight: float) -> float:
        return self.max_speed + seek_weight * config.HUNGRY_SPEED_BONUS

    def apply_force(self, fx: float, fy: float) -> None:
        self.ax += fx
        self.ay += fy

    def closest_food(self, food: List[FoodParticle]) -> Target:
        hit = nearest_food(self.x, self.y, food)
        if hit is None:
            return None
        d2, idx = hit
        return d2, food[idx].x, food[idx].y

    def seek_force(self, target: Target, w: float, h: float) -> Tuple[Vec, float]:
        if target is None:
            return ZERO, 0.0
        d2, tx, ty = target
        diagonal = math.hypot(w, h)
        urgency = max(0.0, min(1.0, (1.0 - math.sqrt(d2) / diagonal) ** 2))

        desired = set_length((tx - self.x, ty - self.y), self.max_speed)
        steer = (desired[0] - self.vx, desired[1] - self.vy)
        return limit(steer, self.max_force), urgency

    def avoid_force(self, floor_y: float, w: float, target: Target) -> Tuple[Vec, float]:
        """
        Push away from any edge within the margin, unless the nearest food is
        beyond that same edge (the fish is allowed to go and get it).
        """
        margin = config.EDGE_MARGIN
        fx = target[1] if target is not None else None
        fy = target[2] if target is not None else None

        sx = sy = 0.0
        hit = False
        if self.x < margin and not (fx is not None and fx < self.x):
            sx += self.max_speed - self.vx
            hit = True
        if self.x > w - margin and not (fx is not None and fx > self.x):
            sx += -self.max_speed - self.vx
            hit = True
        if self.y < margin and not (fy is not None and fy < self.y):
            sy += self.max_speed - self.vy
            hit = True
        if self.y > floor_y - margin and not (fy is not None and fy > self.y):
            sy += -self.max_speed - self.vy
            hit = True

        if not hit:
            return ZERO, 0.0
        return limit((sx, sy), self.max_force), 1.0

    def wander_force(self, rng: RandomRangeSource) -> Vec:
        jitter = config.WANDER_JITTER
        self.wander_angle += rng.uniform(-jitter, jitter)

        dist = config.WANDER_CIRCLE_DIST
        radius = config.WANDER_CIRCLE_RADIUS
        if self.speed > 0.0:
            center = set_length((self.vx, self.vy), dist)
        else:
            center = (dist, 0.0)
        point = (
            center[0] + math.cos(self.wander_angle) * radius,
            center[1] + math.sin(self.wander_angle) * radius,
        )
        return set_length(point, self.max_force * config.WANDER_FORCE_SCALE)

    def update(
        self,
        food: List[FoodParticle],
        floor_y: float,
        w: float,
        h: float,
        rng: Optional[RandomRangeSource] = None,
    ) -> None:
        rng = rng or spawn_rng
        target = self.closest_food(food)

        seek, seek_w = self.seek_force(target, w, h)
        avoid, avoid_w = self.avoid_force(floor_y, w, target)
        wander = self.wander_force(rng)

        self.apply_force(*blend(avoid, avoid_w, seek, seek_w, wander))

        self.vx += self.ax
        self.vy += self.ay
        self.vx, self.vy = limit((self.vx, self.vy), self.speed_cap(seek_w))
        self.last_seek_weight = seek_w

        self.x += self.vx
        self.y += self.vy

        # force accumulator is per tick
        self.ax = 0.0
        self.ay = 0.0
