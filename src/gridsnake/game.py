# game.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple
import logging
import random
import time

import numpy as np  # type: ignore

from .config import CFG, Config, Direction
from .collision import is_opposite, is_self_collision, is_wall_collision
from .food import FoodSpawner
from .grid import Cell, GridModel
from .interpolation import interpolate
from .snake import SnakeBody
from .storage import MemoryStore, load_high_score, save_high_score
from .timer import TickTimer

logger = logging.getLogger(__name__)


def monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


# ---------- State ----------
class GameState(Enum):
    READY = "ready"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameOver"


@dataclass(frozen=True)
class GameSnapshot:
    snake: Tuple[Cell, ...]           # head at index 0
    previous_snake: Tuple[Cell, ...]  # cells before the last tick
    food: Optional[Cell]
    score: int
    high_score: int
    state: GameState
    direction: Direction
    difficulty: str
    period_ms: int


# ---------- State machine ----------
class GameStateMachine:
    """
    Owns every piece of mutable game data and the tick timer.

    Callers drive it with ``start``, ``toggle_pause``, ``restart``,
    ``set_difficulty`` and ``request_direction``, call ``update`` once per
    frame, and read ``snapshot``/``interpolated`` to draw. Requests that do
    not make sense in the current state are ignored rather than raised.

    Args:
        cfg: tunables; grid size, reward and the difficulty table come from here
        store: key/value store holding the high score
        rng: random source for food placement
        clock: returns the current time in milliseconds
        difficulties: overrides ``cfg.difficulties`` (level -> tick period in ms)
    """

    def __init__(
        self,
        cfg: Config = CFG,
        store=None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], int] = monotonic_ms,
        difficulties: Optional[Dict[str, int]] = None,
    ):
        self.cfg = cfg
        self.grid = GridModel(cfg.grid_size)
        self.store = store if store is not None else MemoryStore()
        self.spawner = FoodSpawner(
            rng if rng is not None else random.Random(cfg.seed),
            max_attempts=cfg.max_spawn_attempts,
        )
        self.clock = clock
        self.timer = TickTimer()

        self.difficulties = dict(difficulties if difficulties is not None else cfg.difficulties)
        if not self.difficulties:
            raise ValueError("at least one difficulty level is required")
        if cfg.default_difficulty in self.difficulties:
            self.difficulty = cfg.default_difficulty
        else:
            self.difficulty = next(iter(self.difficulties))

        self.high_score = load_high_score(self.store, cfg.highscore_key)
        self.state = GameState.READY
        self._reset()

    # ---------- Read-only views ----------
    @property
    def period_ms(self) -> int:
        return self.difficulties[self.difficulty]

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            snake=self.snake.cells(),
            previous_snake=self.snake.previous(),
            food=self.food,
            score=self.score,
            high_score=self.high_score,
            state=self.state,
            direction=self.direction,
            difficulty=self.difficulty,
            period_ms=self.period_ms,
        )

    def interpolated(self) -> np.ndarray:
        """Sub-tick segment positions for drawing; never changes game data."""
        return interpolate(
            self.snake.previous(),
            self.snake.cells(),
            self.timer.elapsed(self.clock()),
            self.period_ms,
        )

    # ---------- Transitions ----------
    def start(self) -> bool:
        if self.state is GameState.GAME_OVER:
            self.restart()
        if self.state is not GameState.READY:
            logger.debug(f"Ignoring start while {self.state.value}")
            return False
        if self.direction is Direction.NONE:
            self.direction = Direction.RIGHT
            self.pending = Direction.RIGHT
        self.state = GameState.PLAYING
        self.timer.start(self.clock(), self.period_ms)
        logger.info(f"Game started ({self.difficulty}, {self.period_ms} ms/tick)")
        return True

    def toggle_pause(self) -> bool:
        if self.state is GameState.PLAYING:
            self.timer.pause(self.clock())
            self.state = GameState.PAUSED
            logger.info("Game paused")
            return True
        if self.state is GameState.PAUSED:
            self.timer.resume(self.clock())
            self.state = GameState.PLAYING
            logger.info("Game resumed")
            return True
        logger.debug(f"Ignoring pause toggle while {self.state.value}")
        return False

    def restart(self) -> None:
        # cancel the tick first so nothing fires against the fresh board
        self.timer.stop()
        self._reset()
        self.state = GameState.READY
        logger.info("Game reset")

    def set_difficulty(self, level: str) -> bool:
        if level not in self.difficulties:
            logger.warning(f"Unknown difficulty {level!r}; keeping {self.difficulty!r}")
            return False
        self.difficulty = level
        if self.state is GameState.PLAYING:
            # next move comes one full new period from now
            self.timer.start(self.clock(), self.period_ms)
        elif self.state is GameState.PAUSED:
            self.timer.set_period(self.period_ms)
        logger.info(f"Difficulty set to {level} ({self.period_ms} ms/tick)")
        return True

    def request_direction(self, direction: Direction) -> bool:
        """Buffer a turn for the next tick. No 180° turns, only while playing."""
        if self.state is not GameState.PLAYING:
            return False
        if direction is Direction.NONE or is_opposite(direction, self.direction):
            logger.debug(f"Rejected turn {direction.name} while heading {self.direction.name}")
            return False
        self.pending = direction
        return True

    # ---------- Simulation ----------
    def update(self) -> bool:
        """Run a tick if one is due. Returns True if the snake moved."""
        if self.state is not GameState.PLAYING:
            return False
        if not self.timer.poll(self.clock()):
            return False
        return self.tick()

    def tick(self) -> bool:
        """
        Advance the game by exactly one step.
        Returns True if the snake is still alive afterwards.
        """
        if self.state is not GameState.PLAYING:
            return False

        # Commit direction once per tick
        self.direction = self.pending

        ate = self.snake.next_head(self.direction) == self.food
        self.snake.move(self.direction, grow=ate)

        # Collision wins over eating: both can only happen on the new head cell
        if is_wall_collision(self.snake.head, self.grid.size) or is_self_collision(self.snake.cells()):
            self.snake.restore()
            self._game_over()
            return False

        if ate:
            self._eat()
        return True

    # ---------- Internals ----------
    def _reset(self) -> None:
        self.snake = SnakeBody([self.grid.center])
        self.direction = Direction.NONE
        self.pending = Direction.NONE
        self.score = 0
        self.food = self.spawner.spawn(self.grid.size, self.snake)

    def _eat(self) -> None:
        self.score += self.cfg.food_reward
        self.food = self.spawner.spawn(self.grid.size, self.snake)
        if self.score > self.high_score:
            self.high_score = self.score
            save_high_score(self.store, self.high_score, self.cfg.highscore_key)

    def _game_over(self) -> None:
        self.timer.stop()
        self.state = GameState.GAME_OVER
        logger.info(f"Game over: score={self.score} high_score={self.high_score}")

    def __repr__(self):
        return (
            f"<GameStateMachine state={self.state.value} score={self.score} "
            f"length={len(self.snake)} food={self.food}>"
        )
