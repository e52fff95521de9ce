"""Tests for the FoodSpawner module."""

import numpy as np
import pytest

from term_snake.food import FoodSpawner
from term_snake.snake import Location


class TestFoodSpawnerInit:
    def test_invalid_attempts(self):
        with pytest.raises(ValueError, match=">= 0"):
            FoodSpawner(5, 5, attempts=-1)


class TestFoodSpawning:
    def test_spawn_in_bounds(self):
        spawner = FoodSpawner(7, 5, rng=np.random.default_rng(42))
        for _ in range(50):
            x, y = spawner.spawn(set())
            assert 0 <= x < 7
            assert 0 <= y < 5

    def test_never_spawns_on_occupied_cells(self):
        spawner = FoodSpawner(10, 10, rng=np.random.default_rng(0))
        occupied = {(x, y) for x in range(10) for y in range(10) if (x + y) % 3}
        for _ in range(200):
            assert spawner.spawn(occupied) not in occupied

    def test_fallback_to_free_cells(self):
        spawner = FoodSpawner(6, 6, attempts=0, rng=np.random.default_rng(1))
        occupied = {(x, y) for x in range(6) for y in range(6)} - {(4, 2)}
        assert spawner.spawn(occupied) == Location(4, 2)

    def test_spawn_on_full_board(self):
        spawner = FoodSpawner(4, 4, rng=np.random.default_rng(1))
        occupied = {(x, y) for x in range(4) for y in range(4)}
        assert spawner.spawn(occupied) is None

    def test_spawn_deterministic(self):
        a = FoodSpawner(20, 20, rng=np.random.default_rng(42))
        b = FoodSpawner(20, 20, rng=np.random.default_rng(42))
        assert [a.spawn(set()) for _ in range(5)] == [b.spawn(set()) for _ in range(5)]

    def test_free_cells(self):
        spawner = FoodSpawner(4, 4)
        free = spawner.free_cells({(0, 0), (3, 3)})
        assert len(free) == 14
        assert Location(0, 0) not in free
        assert Location(1, 0) in free


class TestChance:
    def test_extremes(self):
        spawner = FoodSpawner(4, 4, rng=np.random.default_rng(3))
        assert all(spawner.chance(1.0) for _ in range(20))
        assert not any(spawner.chance(0.0) for _ in range(20))
