"""
aquarium_sim module: world/simulation.py

BasinSimulation owns the basin and every agent collection and advances them one
frame per tick(), handing each element to the renderer as it goes.

Fish never hold references to food: the food list is passed into each fish
update and eaten particles are removed by index after all fish have moved.
"""

from __future__ import annotations
import logging
from typing import List, Optional

import config
from creatures.bubble import Bubble
from creatures.crab import Crab
from creatures.fish import Fish
from render.surface import NullRenderer
from world.ambient import GodRay, god_ray_count
from world.basin import Basin
from world.castle import build_castle_layout
from world.food import FoodParticle, nearest_food, remove_eaten
from world.rng import RandomRangeSource, spawn_rng

logger = logging.getLogger(__name__)


class BasinSimulation:
    def __init__(
        self,
        w: float,
        h: float,
        renderer: Optional[NullRenderer] = None,
        rng: Optional[RandomRangeSource] = None,
        layout_seed: Optional[int] = None,
    ):
        self.rng = rng or spawn_rng
        self.renderer = renderer or NullRenderer()

        if layout_seed is None:
            layout_seed = self.rng.bits(64)
        self.basin = Basin(w=float(w), h=float(h), layout_seed=layout_seed)

        n_rays = god_ray_count(w, config.GOD_RAY_SPACING, *config.GOD_RAY_COUNT_RANGE)
        self.god_rays: List[GodRay] = [GodRay.spawn(w, h, self.rng) for _ in range(n_rays)]
        self.fishes: List[Fish] = [Fish.spawn(w, h, self.rng) for _ in range(config.START_FISH)]
        self.crabs: List[Crab] = [Crab.spawn(w, h, self.rng) for _ in range(config.START_CRABS)]
        self.bubbles: List[Bubble] = [
            Bubble.spawn(self.basin.castle_center_x, self.basin.castle_base_y, self.structure_scale(), self.rng)
            for _ in range(config.START_BUBBLES)
        ]
        self.food: List[FoodParticle] = []
        self.eaten = 0

        logger.info(
            "Basin %dx%d: %d god rays, %d fish, %d crabs, %d bubbles (layout seed %d)",
            int(w), int(h), len(self.god_rays), len(self.fishes), len(self.crabs),
            len(self.bubbles), layout_seed,
        )

    @property
    def frame(self) -> int:
        return self.basin.frame

    def seafloor_height_at(self, x: float) -> float:
        return self.basin.seafloor_height_at(x)

    def structure_scale(self) -> float:
        return self.basin.castle_scale()

    def add_food(self, x: float, y: float) -> FoodParticle:
        particle = FoodParticle(x=x, y=y)
        self.food.append(particle)
        logger.debug("food dropped at (%.1f, %.1f), %d in basin", x, y, len(self.food))
        return particle

    def add_fish(self, x: float, y: float) -> Fish:
        fish = Fish.spawn(self.basin.w, self.basin.h, self.rng)
        fish.x = x
        fish.y = y
        self.fishes.append(fish)
        logger.debug("fish added at (%.1f, %.1f), %d in basin", x, y, len(self.fishes))
        return fish

    def tick(self) -> None:
        b = self.basin
        r = self.renderer
        b.frame += 1

        r.begin_frame(b.w, b.h)
        self._update_background()
        self._draw_castle()
        r.draw_seafloor(b.seafloor_profile())
        self._update_bubbles()
        self._update_crabs()
        self._update_fishes()
        self._update_food()
        r.end_frame()

    def _update_background(self) -> None:
        b = self.basin
        self.renderer.draw_background(b.w, b.h)
        for ray in self.god_rays:
            ray.update()
            if ray.expired:
                ray.reset(b.w, b.h, self.rng)
            alpha = ray.opacity()
            if alpha > 0.0:
                self.renderer.draw_god_ray(ray, alpha)

    def _draw_castle(self) -> None:
        b = self.basin
        layout = build_castle_layout(b.layout_seed)
        self.renderer.draw_castle(layout, b.castle_center_x, b.castle_base_y, self.structure_scale())

    def _update_bubbles(self) -> None:
        b = self.basin
        scale = self.structure_scale()
        for bubble in self.bubbles:
            bubble.update()
            if bubble.escaped:
                bubble.reset(b.castle_center_x, b.castle_base_y, scale, self.rng)
            self.renderer.draw_bubble(bubble)

    def _update_crabs(self) -> None:
        b = self.basin
        floor_ys = [b.seafloor_height_at(c.x) for c in self.crabs]
        for crab, floor_y in zip(self.crabs, floor_ys):
            crab.update(floor_y, b.w, self.rng)
            self.renderer.draw_crab(crab)

    def _update_fishes(self) -> None:
        b = self.basin
        floor_ys = [b.seafloor_height_at(f.x) for f in self.fishes]
        to_remove: List[int] = []
        for fish, floor_y in zip(self.fishes, floor_ys):
            fish.update(self.food, floor_y, b.w, b.h, self.rng)
            hit = nearest_food(fish.x, fish.y, self.food)
            if hit is not None:
                d2, idx = hit
                reach = fish.size + config.EAT_PADDING
                if d2 < reach * reach:
                    to_remove.append(idx)
            self.renderer.draw_fish(fish)

        if to_remove:
            removed = remove_eaten(self.food, to_remove)
            self.eaten += removed
            logger.debug("frame %d: %d food eaten, %d left", b.frame, removed, len(self.food))

    def _update_food(self) -> None:
        b = self.basin
        floor_ys = [b.seafloor_height_at(p.x) for p in self.food]
        for particle, floor_y in zip(self.food, floor_ys):
            particle.update(floor_y)
            self.renderer.draw_food(particle)
