import pytest

from render.surface import NullRenderer
from world.rng import RandomRangeSource


class RecordingRenderer(NullRenderer):
    def __init__(self):
        self.calls = []
        self.castles = []

    def begin_frame(self, w, h):
        self.calls.append("begin_frame")

    def draw_background(self, w, h):
        self.calls.append("background")

    def draw_god_ray(self, ray, opacity):
        self.calls.append("god_ray")

    def draw_castle(self, layout, center_x, base_y, scale):
        self.calls.append("castle")
        self.castles.append(layout)

    def draw_seafloor(self, outline):
        self.calls.append("seafloor")

    def draw_bubble(self, bubble):
        self.calls.append("bubble")

    def draw_crab(self, crab):
        self.calls.append("crab")

    def draw_fish(self, fish):
        self.calls.append("fish")

    def draw_food(self, food):
        self.calls.append("food")

    def end_frame(self):
        self.calls.append("end_frame")


@pytest.fixture
def rng():
    return RandomRangeSource(seed=1234)


@pytest.fixture
def recorder():
    return RecordingRenderer()
