# config.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

# ----- Window & grid -----
GRID_SIZE = 20
CELL_SIZE = 20
HUD_HEIGHT = 32

# ----- Colors -----
BG         = (250, 250, 250)
GRID_LINE  = (224, 224, 224)
SNAKE_HEAD = (30, 63, 26)
SNAKE_BODY = (45, 90, 39)
FOOD       = (244, 67, 54)
FOOD_SHINE = (255, 107, 107)
TEXT       = (40, 40, 48)
HUD_BG     = (235, 235, 240)


# ----- Directions (dx, dy) -----
class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    NONE = (0, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))


# ----- Tunables (what you'd tweak for difficulty) -----
DIFFICULTIES: Dict[str, int] = {
    "easy": 200,
    "medium": 150,
    "hard": 100,
}

@dataclass
class Config:
    seed: int = 0
    grid_size: int = GRID_SIZE
    cell_size: int = CELL_SIZE
    food_reward: int = 10
    difficulties: Dict[str, int] = field(default_factory=lambda: dict(DIFFICULTIES))
    default_difficulty: str = "medium"
    fps: int = 60
    max_spawn_attempts: int = 100
    highscore_key: str = "snakeHighScore"

    def window_size(self) -> Tuple[int, int]:
        side = self.grid_size * self.cell_size
        return side, side + HUD_HEIGHT

CFG = Config()
