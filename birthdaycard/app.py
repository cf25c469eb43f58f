"""The birthday card window and its main loop."""

from __future__ import annotations

import argparse
from functools import lru_cache
from pathlib import Path

import pygame

from .letter import Letter, create_letter

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 450
TARGET_FPS = 60
TITLE = "happy birthday again!"

RAYWHITE = (245, 245, 245)
DARKGRAY = (80, 80, 80)
LIME = (0, 158, 47)


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _draw_text(surface: pygame.Surface, text: str, x: int, y: int, size: int,
               color: tuple[int, int, int]) -> None:
    surface.blit(_font(size).render(text, True, color), (x, y))


def update_draw_frame(letter: Letter, surface: pygame.Surface, dt: float,
                      space_pressed: bool) -> None:
    """Advance the letter by ``dt`` seconds and draw one frame onto ``surface``."""
    letter.update(dt, surface.get_width(), surface.get_height(), space_pressed)

    surface.fill(RAYWHITE)
    letter.draw(surface)
    _draw_text(surface, "Happy Birthday", 10, 40, 20, DARKGRAY)
    fps = round(1.0 / dt) if dt > 0 else 0
    _draw_text(surface, f"{fps} FPS", 10, 10, 20, LIME)


def _load_texture(path: Path) -> pygame.Surface | None:
    try:
        return pygame.image.load(str(path)).convert_alpha()
    except (pygame.error, OSError):
        return None


def main(argv: list[str] | None = None) -> int:
    """Open the card window and run until it is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(description="Show an animated birthday card.")
    parser.add_argument("--assets", default="assets", type=Path,
                        help="directory holding envelope.png and inner_card.png")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        letter = create_letter(
            _load_texture(args.assets / "envelope.png"),
            _load_texture(args.assets / "inner_card.png"),
        )
        clock = pygame.time.Clock()
        dt = 0.0
        running = True
        while running:
            space_pressed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        space_pressed = True
            if not running:
                break
            update_draw_frame(letter, surface, dt, space_pressed)
            pygame.display.flip()
            dt = clock.tick(TARGET_FPS) / 1000.0
    finally:
        pygame.quit()
    return 0