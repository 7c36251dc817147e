# snake.py
from collections import deque
from typing import Sequence, Tuple

from .config import Direction
from .grid import Cell


class SnakeBody:
    """
    Ordered cells of the snake, head at index 0 and tail at the end.

    Every move remembers the sequence as it was before the move so the
    renderer can blend between the two, and so a fatal move can be undone.
    """

    def __init__(self, cells: Sequence[Cell]):
        if not cells:
            raise ValueError("a snake needs at least one cell")
        self.positions = deque(tuple(c) for c in cells)
        self._previous: Tuple[Cell, ...] = tuple(self.positions)

    @property
    def head(self) -> Cell:
        return self.positions[0]

    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self.positions)

    def previous(self) -> Tuple[Cell, ...]:
        return self._previous

    def next_head(self, direction: Direction) -> Cell:
        hx, hy = self.head
        return (hx + direction.dx, hy + direction.dy)

    def move(self, direction: Direction, grow: bool = False) -> Cell:
        """Prepend the new head; the tail stays only when ``grow`` is set."""
        self._previous = tuple(self.positions)
        new_head = self.next_head(direction)
        self.positions.appendleft(new_head)
        if not grow:
            self.positions.pop()
        return new_head

    def restore(self) -> None:
        """Undo the last move and make it look like no move happened."""
        self.positions = deque(self._previous)

    def occupies(self, cell: Cell, exclude_head: bool = False) -> bool:
        start = 1 if exclude_head else 0
        for i, segment in enumerate(self.positions):
            if i >= start and segment == cell:
                return True
        return False

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self):
        return iter(self.positions)

    def __repr__(self):
        return f"<SnakeBody head={self.head} length={len(self)}>"
