import math

from creatures.fish import Fish, hsl_color
from creatures.steering import blend, limit, set_length
from world.food import FoodParticle

W, H = 800.0, 600.0
FLOOR = 540.0


def make_fish(x, y, **kw):
    params = dict(size=12.0, hue=200.0, max_speed=0.5, max_force=0.02, wander_angle=0.0)
    params.update(kw)
    return Fish(x=x, y=y, **params)


def distance(fish, food):
    return math.hypot(fish.x - food.x, fish.y - food.y)


def test_limit_and_set_length_leave_zero_vector_alone():
    assert limit((0.0, 0.0), 1.0) == (0.0, 0.0)
    assert set_length((0.0, 0.0), 3.0) == (0.0, 0.0)
    assert math.isclose(math.hypot(*limit((3.0, 4.0), 1.0)), 1.0)
    assert limit((0.3, 0.4), 1.0) == (0.3, 0.4)


def test_blend_lets_avoidance_override_everything():
    force = blend((1.0, 0.0), 1.0, (0.0, 5.0), 1.0, (0.0, 9.0))
    assert force == (1.0, 0.0)


def test_blend_wanders_only_without_other_drives():
    force = blend((0.0, 0.0), 0.0, (0.0, 0.0), 0.0, (0.2, 0.1))
    assert force == (0.2, 0.1)


def test_spawn_ranges(rng):
    for _ in range(50):
        fish = Fish.spawn(W, H, rng)
        assert 0.0 <= fish.x < W
        assert 0.0 <= fish.y < H * 0.8
        assert 10.0 <= fish.size < 18.0
        assert 0.3 <= fish.max_speed < 0.6
        assert 0.01 <= fish.max_force < 0.03
        assert fish.speed == 0.0


def test_hsl_color_matches_pastel_palette():
    assert hsl_color(0.0) == (240, 117, 117)


def test_no_food_means_no_seek():
    fish = make_fish(400.0, 300.0)
    force, weight = fish.seek_force(None, W, H)
    assert force == (0.0, 0.0)
    assert weight == 0.0


def test_seek_urgency_grows_as_food_gets_closer():
    fish = make_fish(400.0, 300.0)
    _, near = fish.seek_force(fish.closest_food([FoodParticle(450.0, 300.0)]), W, H)
    _, far = fish.seek_force(fish.closest_food([FoodParticle(790.0, 590.0)]), W, H)
    assert 0.0 < far < near <= 1.0
    assert math.isclose(near, (1.0 - 50.0 / 1000.0) ** 2)


def test_seek_force_is_capped():
    fish = make_fish(400.0, 300.0, vx=-0.5)
    force, _ = fish.seek_force(fish.closest_food([FoodParticle(600.0, 300.0)]), W, H)
    assert math.hypot(*force) <= fish.max_force + 1e-12
    assert force[0] > 0.0


def test_avoid_pushes_off_the_left_wall():
    fish = make_fish(20.0, 300.0)
    force, weight = fish.avoid_force(FLOOR, W, None)
    assert weight == 1.0
    assert force[0] > 0.0
    assert math.hypot(*force) <= fish.max_force + 1e-12


def test_avoid_uses_floor_height_for_the_bottom_edge():
    fish = make_fish(400.0, 500.0)
    force, weight = fish.avoid_force(FLOOR, W, None)
    assert weight == 1.0
    assert force[1] < 0.0


def test_avoid_is_suppressed_when_food_lies_beyond_the_edge():
    fish = make_fish(20.0, 300.0)
    target = fish.closest_food([FoodParticle(5.0, 300.0)])
    force, weight = fish.avoid_force(FLOOR, W, target)
    assert weight == 0.0
    assert force == (0.0, 0.0)


def test_avoid_still_applies_when_food_is_inward():
    fish = make_fish(20.0, 300.0)
    target = fish.closest_food([FoodParticle(400.0, 300.0)])
    _, weight = fish.avoid_force(FLOOR, W, target)
    assert weight == 1.0


def test_wander_force_magnitude(rng):
    fish = make_fish(400.0, 300.0)
    force = fish.wander_force(rng)
    assert math.isclose(math.hypot(*force), fish.max_force * 0.2)
    # stationary fish wander roughly along +x
    assert force[0] > 0.0


def test_update_clears_the_force_accumulator(rng):
    fish = make_fish(400.0, 300.0)
    fish.apply_force(0.01, 0.01)
    fish.update([], FLOOR, W, H, rng)
    assert fish.ax == 0.0 and fish.ay == 0.0


def test_speed_never_exceeds_cap(rng):
    fishes = [Fish.spawn(W, H, rng) for _ in range(10)]
    food = [FoodParticle(400.0, 200.0), FoodParticle(100.0, 500.0)]
    for _ in range(1500):
        for fish in fishes:
            fish.update(food, FLOOR, W, H, rng)
            assert fish.speed <= fish.speed_cap(fish.last_seek_weight) + 1e-9


def test_resting_fish_closes_in_on_the_only_food(rng):
    fish = make_fish(300.0, 250.0)
    food = [FoodParticle(500.0, 250.0)]
    prev = distance(fish, food[0])
    for _ in range(150):
        fish.update(food, FLOOR, W, H, rng)
        d = distance(fish, food[0])
        assert d < prev
        prev = d
