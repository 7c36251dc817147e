# grid.py
from typing import Tuple

Cell = Tuple[int, int]


class GridModel:
    """Square grid of ``size`` x ``size`` cells, (0, 0) at the top left."""

    def __init__(self, size: int):
        if size <= 0:
            raise ValueError(f"grid size must be positive, got {size}")
        self.size = size

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.size and 0 <= y < self.size

    @property
    def center(self) -> Cell:
        # (10, 10) on the default 20x20 board
        return (self.size // 2, self.size // 2)

    def __repr__(self):
        return f"<GridModel size={self.size}>"
