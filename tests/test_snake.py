"""Tests for SnakeBody: moving, growing and rolling back."""

import pytest

from gridsnake.config import Direction
from gridsnake.snake import SnakeBody


class TestSnakeBody:

    def test_requires_at_least_one_cell(self):
        with pytest.raises(ValueError):
            SnakeBody([])

    def test_move_keeps_length(self):
        """A plain move adds a head and drops the tail."""
        snake = SnakeBody([(5, 5), (4, 5), (3, 5)])
        snake.move(Direction.RIGHT)
        assert snake.cells() == ((6, 5), (5, 5), (4, 5))
        assert len(snake) == 3

    def test_grow_keeps_tail(self):
        snake = SnakeBody([(5, 5), (4, 5), (3, 5)])
        snake.move(Direction.UP, grow=True)
        assert snake.cells() == ((5, 4), (5, 5), (4, 5), (3, 5))

    def test_move_records_previous_cells(self):
        snake = SnakeBody([(5, 5), (4, 5)])
        snake.move(Direction.DOWN)
        assert snake.previous() == ((5, 5), (4, 5))
        assert snake.head == (5, 6)

    def test_restore_undoes_last_move(self):
        snake = SnakeBody([(5, 5), (4, 5)])
        snake.move(Direction.RIGHT)
        snake.restore()
        assert snake.cells() == ((5, 5), (4, 5))
        assert snake.previous() == snake.cells()

    def test_occupies_optionally_skips_head(self):
        snake = SnakeBody([(5, 5), (4, 5)])
        assert snake.occupies((5, 5))
        assert not snake.occupies((5, 5), exclude_head=True)
        assert snake.occupies((4, 5), exclude_head=True)
        assert not snake.occupies((9, 9))
