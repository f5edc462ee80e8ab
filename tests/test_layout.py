from world.castle import (
    BUBBLE_SOURCES,
    STONE_COLORS,
    STONE_W_RANGE,
    build_castle_layout,
    crenellation_merlons,
    lay_stones,
)
from world.rng import RandomRangeSource, SeededLayoutGenerator


def test_range_source_respects_half_open_bounds():
    rng = RandomRangeSource(seed=5)
    for _ in range(500):
        assert 100 <= rng.randint(100, 300) < 300
        assert -2.0 <= rng.uniform(-2.0, 3.0) < 3.0


def test_range_source_empty_range_collapses_to_low_end():
    rng = RandomRangeSource(seed=5)
    assert rng.uniform(4.0, 4.0) == 4.0
    assert rng.randint(7, 7) == 7


def test_weighted_choice_never_picks_zero_weight():
    rng = RandomRangeSource(seed=9)
    picks = {rng.weighted_choice(["a", "b"], [1.0, 0.0]) for _ in range(50)}
    assert picks == {"a"}


def test_reseed_replays_the_same_sequence():
    gen = SeededLayoutGenerator(77)
    first = [gen.uniform(0.0, 1.0) for _ in range(10)]
    gen.reseed()
    second = [gen.uniform(0.0, 1.0) for _ in range(10)]
    assert first == second


def test_same_seed_gives_identical_layout():
    assert build_castle_layout(42) == build_castle_layout(42)


def test_different_seeds_give_different_stones():
    a = build_castle_layout(1)
    b = build_castle_layout(2)
    assert a.sections[0].stones != b.sections[0].stones


def test_every_wall_section_restarts_the_stone_pattern():
    layout = build_castle_layout(99)
    first = layout.sections[0].stones
    assert all(s.stones == first for s in layout.sections)


def test_stones_use_palette_and_width_range():
    stones = lay_stones(SeededLayoutGenerator(3))
    assert stones
    for stone in stones:
        assert stone.color in STONE_COLORS
        assert STONE_W_RANGE[0] <= stone.fill[2] < STONE_W_RANGE[1]
        assert stone.fill[2] == stone.stroke[2]


def test_rows_alternate_start_offset():
    stones = lay_stones(SeededLayoutGenerator(3))
    row_starts = {}
    for stone in stones:
        row = round(stone.fill[1] / 10.0) * 10.0
        row_starts.setdefault(row, stone.fill[0])
    # -200 starts at -150, -190 starts 10 units further left
    assert abs(row_starts[-200.0] - -150.0) <= 1.0
    assert abs(row_starts[-190.0] - -160.0) <= 1.0


def test_crenellations_keep_even_merlons_only():
    merlons = crenellation_merlons(10.0, -130.0, 60.0, 5)
    assert len(merlons) == 3
    x, y, w, h = merlons[1]
    assert x == 10.0 + 2 * 12.0
    assert h == w * 0.8
    assert y == -130.0 - h


def test_bubble_sources_sit_on_the_castle():
    assert min(dy for _, dy in BUBBLE_SOURCES) == -135.0
