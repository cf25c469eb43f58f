"""A letter: an envelope that slides in and a stack of cards inside it."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame
from pygame.math import Vector2

from .animation import Animation
from .card import Card, CardType, ShowState

LETTER_WIDTH = 200


@dataclass
class Letter:
    """The envelope and its cards, shown one card at a time."""

    animation: Animation
    cards: list[Card]
    pos: Vector2 = field(default_factory=lambda: Vector2(0, -200))
    slide_speed: float = 400.0
    show_state: ShowState = ShowState.INVISIBLE
    current_card_index: int = 0

    @property
    def number_of_cards(self) -> int:
        return len(self.cards)

    def update(self, dt: float, screen_width: int, screen_height: int,
               space_pressed: bool) -> None:
        """Advance the letter and its current card by ``dt`` seconds."""
        self.animation.update(dt)

        first_texture = self.cards[0].texture
        texture_height = first_texture.get_height() if first_texture else 0
        center_y = screen_height // 2 - texture_height // 2

        self.pos.x = screen_width // 2 - LETTER_WIDTH // 2

        if self.show_state is ShowState.INVISIBLE:
            self.show_state = ShowState.ENTER
        elif self.show_state is ShowState.ENTER:
            if self.pos.y < center_y:
                self.pos.y += self.slide_speed * dt
            else:
                self.show_state = ShowState.VISIBLE
                self.cards[0].show_state = ShowState.VISIBLE
        elif self.show_state is ShowState.VISIBLE:
            self.cards[self.current_card_index].update(
                self, dt, space_pressed, screen_height
            )

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the current card, with the next one beneath it while it enters."""
        index = self.current_card_index
        if index < len(self.cards) - 1:
            upcoming = self.cards[index + 1]
            if upcoming.show_state is ShowState.ENTER:
                upcoming.draw(self, surface)
        self.cards[index].draw(self, surface)


def create_letter(envelope_texture: pygame.Surface | None,
                  card_texture: pygame.Surface | None) -> Letter:
    """Build the birthday letter: an envelope followed by one text card."""
    animation = Animation(
        frame_width=200, frame_height=120, frame_count=26, frame_time=0.03, loop=False
    )
    envelope = Card(
        CardType.ENVELOPE,
        texture=envelope_texture,
        title="Happy Birthday",
        subtitle="This is a subtitle text",
    )
    first_card = Card(CardType.TEXT, texture=card_texture, text="First Card!")
    return Letter(animation=animation, cards=[envelope, first_card])