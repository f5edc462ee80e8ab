import math

from creatures.crab import Crab, CrabState


def test_spawn_starts_walking_on_the_floor(rng):
    crab = Crab.spawn(800.0, 600.0, rng)
    assert crab.state == CrabState.WALKING
    assert 100 <= crab.timer < 300
    assert math.isclose(crab.y, 540.0)
    assert crab.direction in (1.0, -1.0)


def test_walking_moves_and_hugs_floor():
    crab = Crab(x=100.0, y=0.0, size=12.0, direction=-1.0, timer=50)
    crab.update(530.0, 800.0)
    assert crab.x == 99.5
    assert crab.y == 522.0


def test_waiting_stands_still():
    crab = Crab(x=100.0, y=0.0, size=12.0, state=CrabState.WAITING, timer=50)
    crab.update(530.0, 800.0)
    assert crab.x == 100.0


def test_timer_expiry_switches_state(rng):
    crab = Crab(x=100.0, y=0.0, size=12.0, timer=1)
    crab.update(530.0, 800.0, rng)
    assert crab.state == CrabState.WAITING
    assert 60 <= crab.timer < 180

    crab.timer = 1
    crab.update(530.0, 800.0, rng)
    assert crab.state == CrabState.WALKING
    assert 100 <= crab.timer < 300


def test_bounce_resumes_walking_even_when_waiting(rng):
    crab = Crab(x=800.2, y=0.0, size=12.0, direction=1.0, state=CrabState.WAITING, timer=50)
    crab.update(540.0, 800.0, rng)
    assert crab.direction == -1.0
    assert crab.state == CrabState.WALKING
    assert 100 <= crab.timer < 300


def test_timer_never_negative_and_flips_only_at_edges(rng):
    w = 200.0
    crab = Crab(x=150.0, y=0.0, size=12.0, direction=1.0, timer=120)
    for _ in range(5000):
        before = crab.direction
        crab.update(180.0, w, rng)
        assert crab.timer >= 0
        if crab.direction != before:
            assert crab.x > w or crab.x < 0.0
        assert -0.5 <= crab.x <= w + 0.5
