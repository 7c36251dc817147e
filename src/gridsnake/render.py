# render.py
from typing import Optional, Sequence, Tuple
import pygame # type: ignore

from .config import (
    HUD_HEIGHT,
    BG, GRID_LINE, SNAKE_HEAD, SNAKE_BODY, FOOD, FOOD_SHINE, TEXT, HUD_BG,
)
from .game import GameSnapshot


# ---------- Helpers ----------
def cell_rect(gx: float, gy: float, cell_size: int, inset: int = 0) -> pygame.Rect:
    return pygame.Rect(
        int(round(gx * cell_size)) + inset,
        int(round(gy * cell_size)) + inset + HUD_HEIGHT,
        cell_size - 2 * inset,
        cell_size - 2 * inset,
    )

def draw_grid(screen: pygame.Surface, grid_size: int, cell_size: int) -> None:
    side = grid_size * cell_size
    for i in range(grid_size + 1):
        p = i * cell_size
        pygame.draw.line(screen, GRID_LINE, (p, HUD_HEIGHT), (p, HUD_HEIGHT + side))
        pygame.draw.line(screen, GRID_LINE, (0, HUD_HEIGHT + p), (side, HUD_HEIGHT + p))

def draw_snake(screen: pygame.Surface, positions: Sequence[Tuple[float, float]], cell_size: int) -> None:
    # tail first so the head ends up on top when segments overlap mid-slide
    for i in range(len(positions) - 1, -1, -1):
        x, y = positions[i]
        rect = cell_rect(x, y, cell_size, inset=1)
        pygame.draw.rect(screen, SNAKE_HEAD if i == 0 else SNAKE_BODY, rect)
        pygame.draw.rect(screen, SNAKE_HEAD, rect, 1)

def draw_food(screen: pygame.Surface, food: Tuple[int, int], cell_size: int) -> None:
    pygame.draw.rect(screen, FOOD, cell_rect(food[0], food[1], cell_size, inset=2))
    pygame.draw.rect(screen, FOOD_SHINE, cell_rect(food[0], food[1], cell_size, inset=3))

def draw_hud(screen: pygame.Surface, font: pygame.font.Font, snap: GameSnapshot) -> None:
    pygame.draw.rect(screen, HUD_BG, pygame.Rect(0, 0, screen.get_width(), HUD_HEIGHT))
    txt = font.render(
        f"Score: {snap.score}   Best: {snap.high_score}   {snap.difficulty.capitalize()}",
        True, TEXT,
    )
    screen.blit(txt, (8, (HUD_HEIGHT - txt.get_height()) // 2))


# ---------- Frames ----------
def draw_game(
    screen: pygame.Surface,
    font: pygame.font.Font,
    snap: GameSnapshot,
    positions: Optional[Sequence[Tuple[float, float]]] = None,
    cell_size: int = 20,
) -> None:
    """Draw one frame. ``positions`` are interpolated segment positions; defaults to the cells."""
    grid_size = (screen.get_width()) // cell_size
    screen.fill(BG)
    draw_grid(screen, grid_size, cell_size)
    if snap.food is not None:
        draw_food(screen, snap.food, cell_size)
    draw_snake(screen, positions if positions is not None else snap.snake, cell_size)
    draw_hud(screen, font, snap)

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, lines: Sequence[str]) -> None:
    # Dim with translucent overlay
    w, h = screen.get_size()
    overlay = pygame.Surface((w, h), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    top = h // 2 - 16 * (len(lines) - 1)
    for i, line in enumerate(lines):
        surf = font.render(line, True, (240, 240, 250))
        screen.blit(surf, surf.get_rect(center=(w // 2, top + 32 * i)))

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int, high_score: int) -> None:
    draw_overlay(screen, font, [
        "GAME OVER",
        f"Score: {score}   Best: {high_score}",
        "Press R to restart or Space to play again",
    ])
