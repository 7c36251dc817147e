"""Tests for FoodSpawner."""

import random

from gridsnake.food import FoodSpawner


class TestFoodSpawner:

    def test_spawn_never_lands_on_snake(self):
        rng = random.Random(7)
        spawner = FoodSpawner(rng)
        for _ in range(200):
            n = rng.randint(2, 12)
            cells = [(x, y) for y in range(n) for x in range(n)]
            snake = rng.sample(cells, rng.randint(1, n * n - 1))
            food = spawner.spawn(n, snake)
            assert food is not None
            assert food not in snake
            assert 0 <= food[0] < n and 0 <= food[1] < n

    def test_falls_back_to_free_cell_scan(self):
        """One free cell and no random draws allowed: the scan must find it."""
        snake = [(x, y) for y in range(10) for x in range(10) if (x, y) != (7, 3)]
        spawner = FoodSpawner(random.Random(0), max_attempts=0)
        assert spawner.spawn(10, snake) == (7, 3)

    def test_scan_ignores_cells_off_the_grid(self):
        snake = [(x, y) for y in range(3) for x in range(3) if (x, y) != (0, 2)]
        snake.append((3, 1))
        spawner = FoodSpawner(random.Random(0), max_attempts=0)
        assert spawner.spawn(3, snake) == (0, 2)

    def test_full_board_has_no_food(self):
        snake = [(x, y) for y in range(3) for x in range(3)]
        assert FoodSpawner(random.Random(0), max_attempts=5).spawn(3, snake) is None
