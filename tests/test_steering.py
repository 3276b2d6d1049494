"""Tests for emergence.flocking.steering and emergence.geometry.vector."""

import math

import pytest

from emergence.flocking.spatial_hash import build_spatial_hash, get_neighbours
from emergence.flocking.steering import (
    Boid,
    FlockingParams,
    align,
    cohere,
    flee,
    flock,
    seek,
    separate,
)
from emergence.geometry.vector import (
    ZERO,
    Vector2D,
    add,
    distance,
    divide,
    from_angle,
    heading,
    limit,
    magnitude,
    multiply,
    normalize,
    set_magnitude,
    subtract,
)


def make_boid(x: float, y: float, vx: float = 0.0, vy: float = 0.0) -> Boid:
    return Boid(pos=Vector2D(x, y), vel=Vector2D(vx, vy))


class TestVector:
    """Tests for the vector helpers."""

    def test_distance_and_magnitude(self) -> None:
        assert distance(Vector2D(0, 0), Vector2D(3, 4)) == 5.0
        assert magnitude(Vector2D(-3, 4)) == 5.0

    def test_normalize(self) -> None:
        n = normalize(Vector2D(3, 4))
        assert n.x == pytest.approx(0.6)
        assert n.y == pytest.approx(0.8)
        assert normalize(ZERO) == ZERO

    def test_set_magnitude_and_limit(self) -> None:
        assert magnitude(set_magnitude(Vector2D(1, 1), 10)) == pytest.approx(10)
        assert magnitude(limit(Vector2D(30, 40), 5)) == pytest.approx(5)
        assert limit(Vector2D(1, 1), 5) == Vector2D(1, 1)

    def test_arithmetic(self) -> None:
        a, b = Vector2D(1, 2), Vector2D(3, 5)
        assert add(a, b) == Vector2D(4, 7)
        assert subtract(b, a) == Vector2D(2, 3)
        assert multiply(a, 3) == Vector2D(3, 6)
        assert divide(b, 2) == Vector2D(1.5, 2.5)
        assert divide(b, 0) == ZERO

    def test_heading_round_trip(self) -> None:
        assert heading(Vector2D(0, 1)) == pytest.approx(math.pi / 2)
        v = from_angle(math.pi / 3)
        assert heading(v) == pytest.approx(math.pi / 3)
        assert magnitude(v) == pytest.approx(1.0)


class TestSeparation:
    """Tests for separation."""

    def test_pushes_away_from_close_neighbour(self) -> None:
        boid = make_boid(100, 100)
        force = separate(boid, [boid, make_boid(110, 100)], 25)
        assert force.x < 0
        assert force.y == pytest.approx(0)
        assert magnitude(force) == pytest.approx(boid.max_force)

    def test_ignores_self_and_far_neighbours(self) -> None:
        boid = make_boid(100, 100)
        assert separate(boid, [boid, make_boid(200, 100)], 25) == ZERO

    def test_boundary_distance_excluded(self) -> None:
        boid = make_boid(0, 0)
        assert separate(boid, [make_boid(25, 0)], 25) == ZERO

    def test_closer_neighbour_dominates(self) -> None:
        boid = make_boid(0, 0)
        force = separate(boid, [make_boid(5, 0), make_boid(0, -20)], 25)
        # 1/5 to the left beats 1/20 downward
        assert force.x < 0
        assert abs(force.x) > abs(force.y)


class TestAlignmentAndCohesion:
    """Tests for alignment and cohesion."""

    def test_align_matches_neighbour_heading(self) -> None:
        boid = make_boid(0, 0, 0, 0)
        force = align(boid, [make_boid(10, 0, 0, 2), make_boid(-10, 0, 0, 4)], 100)
        assert force.x == pytest.approx(0)
        assert force.y > 0
        assert magnitude(force) <= boid.max_force + 1e-12

    def test_align_without_neighbours(self) -> None:
        boid = make_boid(0, 0, 1, 0)
        assert align(boid, [boid], 100) == ZERO

    def test_cohere_steers_to_centre(self) -> None:
        boid = make_boid(0, 0)
        force = cohere(boid, [make_boid(50, 10), make_boid(50, -10)], 100)
        assert force.x > 0
        assert force.y == pytest.approx(0)

    def test_cohere_respects_perception(self) -> None:
        boid = make_boid(0, 0)
        assert cohere(boid, [make_boid(150, 0)], 100) == ZERO


class TestSeekAndFlee:
    """Tests for seek and flee."""

    def test_seek_limited_to_max_force(self) -> None:
        boid = make_boid(0, 0)
        force = seek(boid, Vector2D(100, 0))
        assert force.x == pytest.approx(boid.max_force)
        assert force.y == pytest.approx(0)

    def test_seek_accounts_for_velocity(self) -> None:
        boid = Boid(pos=Vector2D(0, 0), vel=Vector2D(4, 0), max_force=10)
        # Already moving at max speed toward the target
        assert magnitude(seek(boid, Vector2D(100, 0))) == pytest.approx(0)

    def test_flee_is_opposite_of_seek(self) -> None:
        boid = make_boid(0, 0, 1, 1)
        s = seek(boid, Vector2D(30, -40))
        f = flee(boid, Vector2D(30, -40))
        assert f.x == pytest.approx(-s.x)
        assert f.y == pytest.approx(-s.y)


class TestFlock:
    """Tests for the combined flocking force."""

    def test_weights_scale_rules(self) -> None:
        boid = make_boid(0, 0)
        neighbours = [make_boid(10, 0, 1, 0), make_boid(0, 60, 0, 1)]
        params = FlockingParams(separation=2.0, alignment=0.0, cohesion=0.0)
        expected = multiply(separate(boid, neighbours, params.desired_separation), 2.0)
        assert flock(boid, neighbours, params) == expected

    def test_zero_weights_give_zero_force(self) -> None:
        boid = make_boid(0, 0)
        params = FlockingParams(separation=0.0, alignment=0.0, cohesion=0.0)
        force = flock(boid, [make_boid(10, 0, 1, 0)], params)
        assert magnitude(force) == 0.0

    def test_accepts_spatial_hash_candidates(self) -> None:
        boids = [make_boid(10 * i, 5 * i, 1, 0) for i in range(6)]
        params = FlockingParams()
        grid = build_spatial_hash(boids, params.perception)
        for boid in boids:
            force = flock(boid, get_neighbours(boid, grid, params.perception), params)
            assert math.isfinite(force.x) and math.isfinite(force.y)
