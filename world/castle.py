"""
aquarium_sim module: world/castle.py

Castle geometry in castle-local units (origin at the base centre, up is -y).

Wall sections are filled with cobblestones laid out by the seeded layout
generator. The generator is re-seeded for every section, so the layout is a
pure function of the seed and can be rebuilt every frame without flicker.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import math
from typing import List, Tuple

from world.rng import SeededLayoutGenerator

Point = Tuple[float, float]

STONE_COLORS = ("#6c757d", "#60686f", "#788088")
MERLON_COLOR = "#6c757d"
SHADOW_COLOR = "#212529"

STONE_H = 10.0
STONE_W_RANGE = (15.0, 25.0)
STONE_ROWS = (-200.0, 10.0)
STONE_COLS = (-150.0, 150.0)

BUBBLE_SOURCES: Tuple[Point, ...] = ((-80.0, -30.0), (35.0, -135.0))


def _rect(x: float, y: float, w: float, h: float) -> List[Point]:
    return [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]


WALL_OUTLINES: Tuple[List[Point], ...] = (
    _rect(-140.0, -60.0, 40.0, 60.0),
    _rect(10.0, -130.0, 60.0, 130.0),
    _rect(70.0, -100.0, 50.0, 100.0),
    [(-100.0, 0.0), (-100.0, -80.0), (-50.0, -90.0), (10.0, -85.0), (10.0, 0.0)],
    [(-50.0, -90.0), (-50.0, -110.0), (-40.0, -125.0), (-30.0, -115.0), (-20.0, -120.0), (-20.0, -88.0)],
)

# (x, y, width, merlon count)
CRENELLATIONS = (
    (-140.0, -60.0, 40.0, 4),
    (-90.0, -85.0, 40.0, 4),
    (10.0, -130.0, 60.0, 5),
    (70.0, -100.0, 50.0, 4),
)

# (x, y, width, height) of the straight part; the arch sits on top
ARCHED_OPENINGS = (
    (-90.0, -20.0, 25.0, 30.0),
    (80.0, -10.0, 30.0, 40.0),
)

GATE_RECT = (-40.0, -50.0, 80.0, 50.0)
GATE_ARCH = (0.0, -50.0, 40.0)  # centre x, centre y, radius


@dataclass(frozen=True)
class Stone:
    fill: Tuple[float, float, float, float]
    stroke: Tuple[float, float, float, float]
    color: str


@dataclass(frozen=True)
class WallSection:
    outline: Tuple[Point, ...]
    stones: Tuple[Stone, ...]


@dataclass(frozen=True)
class ArchedOpening:
    x: float
    y: float
    w: float
    h: float


@dataclass
class CastleLayout:
    sections: List[WallSection] = field(default_factory=list)
    merlons: List[Tuple[float, float, float, float]] = field(default_factory=list)
    openings: List[ArchedOpening] = field(default_factory=list)
    gate_rect: Tuple[float, float, float, float] = GATE_RECT
    gate_arch: Tuple[float, float, float] = GATE_ARCH


def lay_stones(gen: SeededLayoutGenerator) -> Tuple[Stone, ...]:
    """
    Fill the castle's bounding area with staggered rows of stones.
    """
    gen.reseed()
    stones: List[Stone] = []
    y = STONE_ROWS[0]
    while y < STONE_ROWS[1]:
        # every other row starts 10 units further left
        x = STONE_COLS[0] + math.fmod(int(y), 20)
        while x < STONE_COLS[1]:
            stone_w = gen.uniform(*STONE_W_RANGE)
            color = gen.choice(STONE_COLORS)
            fill = (x + gen.uniform(-1.0, 1.0), y + gen.uniform(-1.0, 1.0), stone_w, STONE_H)
            stroke = (x + gen.uniform(-1.0, 1.0), y + gen.uniform(-1.0, 1.0), stone_w, STONE_H)
            stones.append(Stone(fill=fill, stroke=stroke, color=color))
            x += stone_w
        y += STONE_H
    return tuple(stones)


def crenellation_merlons(x: float, y: float, w: float, n: int) -> List[Tuple[float, float, float, float]]:
    merlon_w = w / n
    merlon_h = merlon_w * 0.8
    return [(x + i * merlon_w, y - merlon_h, merlon_w, merlon_h) for i in range(n) if i % 2 == 0]


def build_castle_layout(seed: int) -> CastleLayout:
    gen = SeededLayoutGenerator(seed)
    layout = CastleLayout()
    # each section restarts from the seed, so they all share one stone pattern
    stones = lay_stones(gen)
    for outline in WALL_OUTLINES:
        layout.sections.append(WallSection(outline=tuple(outline), stones=stones))
    for x, y, w, n in CRENELLATIONS:
        layout.merlons.extend(crenellation_merlons(x, y, w, n))
    layout.openings = [ArchedOpening(*o) for o in ARCHED_OPENINGS]
    return layout
