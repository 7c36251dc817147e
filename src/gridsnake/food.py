# food.py
from __future__ import annotations

import logging
import random
from typing import Iterable, Optional

import numpy as np  # type: ignore

from .grid import Cell, GridModel

logger = logging.getLogger(__name__)


class FoodSpawner:
    """
    Picks a uniformly random free cell for the next food.

    Rejection sampling is fast while the board is mostly empty. Once
    ``max_attempts`` draws have all landed on the snake, the free cells are
    enumerated from an occupancy mask instead, so a nearly full board still
    terminates.
    """

    def __init__(self, rng: Optional[random.Random] = None, max_attempts: int = 100):
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = max_attempts

    def spawn(self, grid_size: int, snake: Iterable[Cell]) -> Optional[Cell]:
        occupied = set(snake)
        for _ in range(self.max_attempts):
            fx = self.rng.randrange(grid_size)
            fy = self.rng.randrange(grid_size)
            if (fx, fy) not in occupied:
                return (fx, fy)
        return self._spawn_from_free_cells(grid_size, occupied)

    def _spawn_from_free_cells(self, grid_size: int, occupied: set) -> Optional[Cell]:
        grid = GridModel(grid_size)
        mask = np.ones((grid_size, grid_size), dtype=bool)  # [y, x]
        for x, y in occupied:
            if grid.contains((x, y)):
                mask[y, x] = False
        free = np.flatnonzero(mask)
        if free.size == 0:
            logger.info("No free cell left for food")
            return None
        idx = int(free[self.rng.randrange(free.size)])
        y, x = divmod(idx, grid_size)
        return (x, y)
