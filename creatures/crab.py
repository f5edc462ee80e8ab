"""
aquarium_sim module: creatures/crab.py

Crabs shuffle along the seafloor, alternating between walking and waiting.
Hitting either side of the basin turns them around and starts them walking again.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging
from typing import Optional

from world.rng import RandomRangeSource, spawn_rng

logger = logging.getLogger(__name__)

WALK_TICKS = (100, 300)
WAIT_TICKS = (60, 180)
WALK_SPEED = 0.5
FLOOR_OFFSET = 8.0


class CrabState(Enum):
    WALKING = 0
    WAITING = 1


@dataclass
class Crab:
    x: float
    y: float
    size: float
    direction: float = 1.0
    state: CrabState = CrabState.WALKING
    timer: int = 0

    @staticmethod
    def spawn(w: float, h: float, rng: Optional[RandomRangeSource] = None) -> "Crab":
        rng = rng or spawn_rng
        return Crab(
            x=rng.uniform(0.0, w),
            y=h * 0.9,
            size=rng.uniform(10.0, 15.0),
            direction=1.0 if rng.coin() else -1.0,
            state=CrabState.WALKING,
            timer=rng.randint(*WALK_TICKS),
        )

    def _enter(self, state: CrabState, rng: RandomRangeSource) -> None:
        self.state = state
        self.timer = rng.randint(*(WALK_TICKS if state == CrabState.WALKING else WAIT_TICKS))

    def update(self, floor_y: float, w: float, rng: Optional[RandomRangeSource] = None) -> None:
        rng = rng or spawn_rng

        self.timer -= 1
        if self.timer <= 0:
            nxt = CrabState.WAITING if self.state == CrabState.WALKING else CrabState.WALKING
            self._enter(nxt, rng)
            logger.debug("crab at x=%.1f now %s for %d ticks", self.x, nxt.name, self.timer)

        if self.state == CrabState.WALKING:
            self.x += self.direction * WALK_SPEED
        self.y = floor_y - FLOOR_OFFSET

        # bounce always resumes walking, even mid-wait
        if (self.x > w and self.direction > 0) or (self.x < 0 and self.direction < 0):
            self.direction *= -1.0
            self._enter(CrabState.WALKING, rng)
