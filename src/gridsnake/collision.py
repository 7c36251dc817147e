# collision.py
from typing import Sequence

from .config import Direction
from .grid import Cell


def is_opposite(a: Direction, b: Direction) -> bool:
    return a.dx == -b.dx and a.dy == -b.dy

def is_wall_collision(head: Cell, grid_size: int) -> bool:
    x, y = head
    return x < 0 or x >= grid_size or y < 0 or y >= grid_size

def is_self_collision(snake: Sequence[Cell]) -> bool:
    """True if the head shares a cell with any later segment."""
    head = snake[0]
    for segment in list(snake)[1:]:
        if segment == head:
            return True
    return False
