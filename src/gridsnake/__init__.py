"""Grid snake: a pure game-state core plus a thin pygame front end."""

from .config import CFG, Config, Direction
from .game import GameSnapshot, GameState, GameStateMachine
from .grid import Cell, GridModel
from .snake import SnakeBody
from .food import FoodSpawner
from .collision import is_opposite, is_self_collision, is_wall_collision
from .interpolation import interpolate, tick_progress
from .timer import TickTimer
from .storage import JsonFileStore, MemoryStore, load_high_score, save_high_score

__all__ = [
    "CFG", "Config", "Direction",
    "GameSnapshot", "GameState", "GameStateMachine",
    "Cell", "GridModel",
    "SnakeBody",
    "FoodSpawner",
    "is_opposite", "is_self_collision", "is_wall_collision",
    "interpolate", "tick_progress",
    "TickTimer",
    "JsonFileStore", "MemoryStore", "load_high_score", "save_high_score",
]
