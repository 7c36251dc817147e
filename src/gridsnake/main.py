# main.py
import argparse
import logging
import random
from pathlib import Path
from typing import List, Optional

import pygame # type: ignore

from .config import CFG, Config, Direction
from .game import GameState, GameStateMachine
from .render import draw_game, draw_game_over, draw_overlay
from .storage import JsonFileStore

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

KEY_DIFFICULTIES = {
    pygame.K_1: "easy",
    pygame.K_2: "medium",
    pygame.K_3: "hard",
}

DEFAULT_HIGHSCORE_FILE = Path.home() / ".gridsnake" / "highscore.json"


# ---------- Input ----------
def handle_key(game: GameStateMachine, key: int) -> None:
    if key in KEY_DIRECTIONS:
        game.request_direction(KEY_DIRECTIONS[key])
    elif key == pygame.K_SPACE:
        if game.state in (GameState.READY, GameState.GAME_OVER):
            game.start()
        else:
            game.toggle_pause()
    elif key == pygame.K_r:
        game.restart()
    elif key in KEY_DIFFICULTIES:
        game.set_difficulty(KEY_DIFFICULTIES[key])

def handle_input(game: GameStateMachine) -> bool:
    """Process events and forward them to the game. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            handle_key(game, event.key)
    return True


# ---------- Frame ----------
def draw_frame(screen: pygame.Surface, font: pygame.font.Font, game: GameStateMachine) -> None:
    snap = game.snapshot()
    draw_game(screen, font, snap, game.interpolated(), cell_size=game.cfg.cell_size)
    if snap.state is GameState.READY:
        draw_overlay(screen, font, ["Press Space to start", "Arrows to steer, 1/2/3 for speed"])
    elif snap.state is GameState.PAUSED:
        draw_overlay(screen, font, ["Paused", "Press Space to resume"])
    elif snap.state is GameState.GAME_OVER:
        draw_game_over(screen, font, snap.score, snap.high_score)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid snake")
    parser.add_argument(
        "--difficulty",
        type=str,
        default=CFG.default_difficulty,
        choices=sorted(CFG.difficulties),
        help="starting speed (can be changed in game with 1/2/3)",
    )
    parser.add_argument("--grid-size", type=int, default=CFG.grid_size)
    parser.add_argument(
        "--highscore-file",
        type=str,
        default=str(DEFAULT_HIGHSCORE_FILE),
        help="JSON file the high score is kept in",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed food placement for a repeatable game")
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = Config(grid_size=args.grid_size, default_difficulty=args.difficulty)
    rng = random.Random(args.seed)  # None seeds from the OS

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(cfg.window_size())
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    game = GameStateMachine(
        cfg,
        store=JsonFileStore(args.highscore_file),
        rng=rng,
        clock=pygame.time.get_ticks,
    )
    logger.info(f"Loaded high score {game.high_score} from {args.highscore_file}")

    running = True
    while running:
        # 1) input
        running = handle_input(game)
        if not running:
            break

        # 2) update (movement gated inside the tick timer)
        game.update()

        # 3) render
        draw_frame(screen, font, game)
        pygame.display.flip()
        clock.tick(cfg.fps)

    pygame.quit()

if __name__ == "__main__":
    main()
