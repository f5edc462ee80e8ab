"""
aquarium_sim module: render/renderer.py

Pygame rendering of the basin (side view).

Canvas-style effects are emulated with per-element alpha surfaces:
- blur: downscale + smoothscale back up
- clip: multiply a layer by a polygon mask (BLEND_RGBA_MIN)
- rotate/scale: transform points before drawing, or pygame.transform for images
"""

from __future__ import annotations
import math
from typing import Dict, List, Tuple

import pygame

import config
from creatures.bubble import Bubble
from creatures.crab import Crab
from creatures.fish import Fish
from render import colors
from render.surface import NullRenderer
from world.ambient import GodRay, TILT_DEGREES
from world.castle import (
    CastleLayout,
    MERLON_COLOR,
    SHADOW_COLOR,
    STONE_COLS,
    STONE_ROWS,
)
from world.food import FoodParticle

Point = Tuple[float, float]


def create_display(w: int, h: int, caption: str = "aquarium_sim") -> pygame.Surface:
    """
    Open the window. Any pygame failure is reported as one RuntimeError.
    """
    try:
        pygame.init()
        screen = pygame.display.set_mode((w, h))
        pygame.display.set_caption(caption)
    except pygame.error as e:
        raise RuntimeError(f"Could not create a {w}x{h} display surface: {e}") from e
    return screen


def _rotate(p: Point, angle: float) -> Point:
    c = math.cos(angle)
    s = math.sin(angle)
    return (p[0] * c - p[1] * s, p[0] * s + p[1] * c)


def _arc_points(cx: float, cy: float, r: float, a0: float, a1: float, n: int = 16) -> List[Point]:
    return [
        (cx + math.cos(a0 + (a1 - a0) * i / n) * r, cy + math.sin(a0 + (a1 - a0) * i / n) * r)
        for i in range(n + 1)
    ]


def _blur(surf: pygame.Surface, radius: float) -> pygame.Surface:
    factor = max(1.0, radius / 3.0)
    w, h = surf.get_size()
    small = pygame.transform.smoothscale(surf, (max(1, int(w / factor)), max(1, int(h / factor))))
    return pygame.transform.smoothscale(small, (w, h))


class PygameRenderer(NullRenderer):
    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._gradient: pygame.Surface | None = None
        self._rays: Dict[int, Tuple[tuple, pygame.Surface]] = {}
        self._castle: Tuple[tuple, pygame.Surface, Point] | None = None

    def end_frame(self) -> None:
        pygame.display.flip()

    def draw_background(self, w: float, h: float) -> None:
        size = (int(w), int(h))
        if self._gradient is None or self._gradient.get_size() != size:
            grad = pygame.Surface(size)
            for y in range(size[1]):
                t = y / max(1, size[1] - 1)
                col = tuple(
                    int(a + (b - a) * t) for a, b in zip(colors.WATER_TOP, colors.WATER_BOTTOM)
                )
                pygame.draw.line(grad, col, (0, y), (size[0], y))
            self._gradient = grad
        self.screen.blit(self._gradient, (0, 0))

    def _ray_image(self, ray: GodRay) -> pygame.Surface:
        key = (ray.x, ray.top_width, ray.bottom_width, ray.length, ray.blur)
        cached = self._rays.get(id(ray))
        if cached is not None and cached[0] == key:
            return cached[1]

        # square canvas centred on the ray's pivot so rotation keeps the pivot fixed
        pts = ray.outline()
        reach = max(math.hypot(px, py) for px, py in pts) + ray.blur * 2.0
        side = int(reach * 2) + 2
        img = pygame.Surface((side, side), pygame.SRCALPHA)
        pygame.draw.polygon(img, colors.RAY + (255,), [(px + side / 2, py + side / 2) for px, py in pts])
        img = _blur(img, ray.blur)
        img = pygame.transform.rotate(img, -TILT_DEGREES)
        self._rays[id(ray)] = (key, img)
        return img

    def draw_god_ray(self, ray: GodRay, opacity: float) -> None:
        img = self._ray_image(ray)
        img.set_alpha(int(max(0.0, min(1.0, opacity)) * 255))
        self.screen.blit(img, img.get_rect(center=(int(ray.x), 0)))

    def _render_castle(self, layout: CastleLayout, scale: float) -> Tuple[pygame.Surface, Point]:
        x0, y0 = STONE_COLS[0], STONE_ROWS[0]
        size = (int((STONE_COLS[1] - x0) * scale) + 4, int((STONE_ROWS[1] - y0 + 10.0) * scale) + 4)

        def tp(p: Point) -> Point:
            return ((p[0] - x0) * scale, (p[1] - y0) * scale)

        def tr(r: Tuple[float, float, float, float]) -> pygame.Rect:
            x, y = tp((r[0], r[1]))
            return pygame.Rect(int(x), int(y), max(1, int(r[2] * scale)), max(1, int(r[3] * scale)))

        line_w = max(1, int(round(2 * scale)))
        castle = pygame.Surface(size, pygame.SRCALPHA)
        for section in layout.sections:
            outline = [tp(p) for p in section.outline]
            layer = pygame.Surface(size, pygame.SRCALPHA)
            for stone in section.stones:
                pygame.draw.rect(layer, colors.hex_to_rgb(stone.color), tr(stone.fill))
                pygame.draw.rect(layer, colors.STONE_OUTLINE, tr(stone.stroke), line_w)
            mask = pygame.Surface(size, pygame.SRCALPHA)
            mask.fill((255, 255, 255, 0))
            pygame.draw.polygon(mask, (255, 255, 255, 255), outline)
            layer.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MIN)
            castle.blit(layer, (0, 0))
            pygame.draw.polygon(castle, colors.STONE_OUTLINE, outline, line_w)

        for merlon in layout.merlons:
            pygame.draw.rect(castle, colors.hex_to_rgb(MERLON_COLOR), tr(merlon))
            pygame.draw.rect(castle, colors.STONE_OUTLINE, tr(merlon), line_w)

        shadow = colors.hex_to_rgb(SHADOW_COLOR)
        for o in layout.openings:
            pygame.draw.polygon(
                castle,
                shadow,
                [tp((o.x, o.y))]
                + [tp(p) for p in _arc_points(o.x + o.w / 2, o.y - o.h, o.w / 2, math.pi, 2 * math.pi)]
                + [tp((o.x + o.w, o.y))],
            )
        pygame.draw.rect(castle, shadow, tr(layout.gate_rect))
        gx, gy, gr = layout.gate_arch
        pygame.draw.polygon(castle, shadow, [tp(p) for p in _arc_points(gx, gy, gr, math.pi, 2 * math.pi)])
        return castle, (x0 * scale, y0 * scale)

    def draw_castle(self, layout: CastleLayout, center_x: float, base_y: float, scale: float) -> None:
        # the layout is identical every frame for a given seed, so rasterise once
        if self._castle is None or self._castle[0] != (scale, layout):
            img, offset = self._render_castle(layout, scale)
            self._castle = ((scale, layout), img, offset)
        _, img, (ox, oy) = self._castle
        self.screen.blit(img, (center_x + ox, base_y + oy))

    def draw_seafloor(self, outline: List[Point]) -> None:
        pygame.draw.polygon(self.screen, colors.SAND, outline)

    def draw_bubble(self, bubble: Bubble) -> None:
        r = max(1, int(round(bubble.size)))
        img = pygame.Surface((r * 2 + 2, r * 2 + 2), pygame.SRCALPHA)
        pygame.draw.circle(img, colors.BUBBLE_FILL, (r + 1, r + 1), r)
        pygame.draw.circle(img, colors.BUBBLE_RIM, (r + 1, r + 1), r, 1)
        self.screen.blit(img, (bubble.x - r - 1, bubble.y - r - 1))

    def draw_crab(self, crab: Crab) -> None:
        s = crab.size
        shell = [(crab.x + px, crab.y + py) for px, py in _arc_points(0.0, 0.0, s, math.pi, 2 * math.pi)]
        pygame.draw.polygon(self.screen, colors.CRAB, shell)
        for i in range(3):
            drop = (i * 0.5 + 0.2) * 10.0
            pygame.draw.line(self.screen, colors.CRAB, (crab.x - s, crab.y), (crab.x - s * 1.5, crab.y + drop), 2)
            pygame.draw.line(self.screen, colors.CRAB, (crab.x + s, crab.y), (crab.x + s * 1.5, crab.y + drop), 2)

    def draw_fish(self, fish: Fish) -> None:
        s = fish.size
        a = fish.heading

        def place(px: float, py: float) -> Point:
            rx, ry = _rotate((px, py), a)
            return (fish.x + rx, fish.y + ry)

        tail = [place(-s * 0.9, 0.0), place(-s * 1.5, -s * 0.6), place(-s * 1.4, 0.0), place(-s * 1.5, s * 0.6)]
        body = [place(math.cos(t) * s, math.sin(t) * s * 0.6) for t in (i * math.pi / 12 for i in range(24))]
        pygame.draw.polygon(self.screen, fish.color, tail)
        pygame.draw.polygon(self.screen, fish.color, body)
        pygame.draw.circle(self.screen, colors.EYE_WHITE, place(s * 0.6, 0.0), max(1, int(s * 0.15)))
        pygame.draw.circle(self.screen, colors.EYE_PUPIL, place(s * 0.65, 0.0), max(1, int(s * 0.08)))

    def draw_food(self, food: FoodParticle) -> None:
        pygame.draw.circle(self.screen, colors.FOOD, (int(food.x), int(food.y)), int(config.FOOD_RADIUS))
