"""
aquarium_sim module: render/surface.py

Draw hooks the simulation calls once per element per tick.

NullRenderer draws nothing; it is the default when the simulation runs headless
and the base class for real backends (see render/renderer.py).
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Tuple

if TYPE_CHECKING:
    from creatures.bubble import Bubble
    from creatures.crab import Crab
    from creatures.fish import Fish
    from world.ambient import GodRay
    from world.castle import CastleLayout
    from world.food import FoodParticle


class NullRenderer:
    def begin_frame(self, w: float, h: float) -> None:
        pass

    def draw_background(self, w: float, h: float) -> None:
        pass

    def draw_god_ray(self, ray: "GodRay", opacity: float) -> None:
        pass

    def draw_castle(self, layout: "CastleLayout", center_x: float, base_y: float, scale: float) -> None:
        pass

    def draw_seafloor(self, outline: List[Tuple[float, float]]) -> None:
        pass

    def draw_bubble(self, bubble: "Bubble") -> None:
        pass

    def draw_crab(self, crab: "Crab") -> None:
        pass

    def draw_fish(self, fish: "Fish") -> None:
        pass

    def draw_food(self, food: "FoodParticle") -> None:
        pass

    def end_frame(self) -> None:
        pass
