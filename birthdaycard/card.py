"""Cards shown one after another inside a letter."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING

import pygame
from pygame.math import Vector2

if TYPE_CHECKING:
    from .letter import Letter

BLACK = (0, 0, 0)
TEXT_OFFSET = Vector2(50, 50)
TEXT_SIZE = 15
EXIT_MARGIN = 200


class ShowState(enum.Enum):
    """Where an item is in its appear / show / leave cycle."""

    INVISIBLE = enum.auto()
    ENTER = enum.auto()
    VISIBLE = enum.auto()
    EXIT = enum.auto()
    DONE = enum.auto()


class CardType(enum.Enum):
    """What a card holds."""

    ENVELOPE = enum.auto()
    TEXT = enum.auto()
    IMAGE = enum.auto()


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _draw_text(surface: pygame.Surface, text: str, pos: Vector2, size: int,
               color: tuple[int, int, int]) -> None:
    rendered = _font(size).render(text, True, color)
    surface.blit(rendered, (int(pos.x), int(pos.y)))


@dataclass
class Card:
    """One card of a letter: an envelope, a text card or an image card."""

    card_type: CardType
    texture: pygame.Surface | None = None
    title: str = ""
    subtitle: str = ""
    text: str = ""
    pos: Vector2 = field(default_factory=lambda: Vector2(0, 0))
    show_state: ShowState = ShowState.INVISIBLE
    is_finished: bool = False

    def update(self, letter: Letter, dt: float, space_pressed: bool,
               screen_height: int) -> None:
        """Advance the card by ``dt`` seconds in reaction to the space key."""
        if self.show_state is ShowState.DONE:
            return

        cards = letter.cards
        has_next = letter.current_card_index < len(cards) - 1

        if self.card_type is CardType.ENVELOPE:
            if self.show_state is ShowState.VISIBLE:
                if has_next:
                    cards[letter.current_card_index + 1].show_state = ShowState.ENTER
                if space_pressed:
                    letter.animation.play()
                animation = letter.animation
                if animation.current_frame > 0 and not animation.is_playing:
                    self.is_finished = True
        elif self.card_type is CardType.TEXT:
            self.is_finished = True

        if self.show_state is ShowState.VISIBLE:
            if self.is_finished and space_pressed:
                self.show_state = ShowState.EXIT
                if has_next:
                    cards[letter.current_card_index + 1].show_state = ShowState.ENTER
        elif self.show_state is ShowState.EXIT:
            if self.pos.y < screen_height + EXIT_MARGIN:
                self.pos.y += letter.slide_speed * dt
            else:
                self.show_state = ShowState.DONE
                if has_next:
                    letter.current_card_index += 1
                    cards[letter.current_card_index].show_state = ShowState.VISIBLE

    def draw(self, letter: Letter, surface: pygame.Surface) -> None:
        """Draw the card at its place relative to the letter."""
        global_pos = letter.pos + self.pos
        if self.texture is not None:
            x, y, w, h = letter.animation.frame_rect
            surface.blit(
                self.texture,
                (int(global_pos.x), int(global_pos.y)),
                pygame.Rect(int(x), int(y), int(w), int(h)),
            )

        if self.card_type is CardType.ENVELOPE:
            _draw_text(surface, self.title, global_pos + TEXT_OFFSET, TEXT_SIZE, BLACK)
        elif self.card_type is CardType.TEXT:
            _draw_text(surface, self.text, global_pos + TEXT_OFFSET, TEXT_SIZE, BLACK)