import pygame
import pytest

from birthdaycard.card import Card, CardType, ShowState
from birthdaycard.letter import create_letter

RED = (255, 0, 0)
WHITE = (255, 255, 255)


def test_text_card_finishes_on_update():
    letter = create_letter(None, None)
    card = letter.cards[1]
    card.update(letter, 0.01, False, 450)
    assert card.is_finished is True


def test_visible_envelope_lets_next_card_enter():
    letter = create_letter(None, None)
    envelope = letter.cards[0]
    envelope.show_state = ShowState.VISIBLE
    envelope.update(letter, 0.01, False, 450)
    assert letter.cards[1].show_state is ShowState.ENTER
    assert letter.animation.is_playing is False


def test_space_plays_envelope_animation():
    letter = create_letter(None, None)
    envelope = letter.cards[0]
    envelope.show_state = ShowState.VISIBLE
    envelope.update(letter, 0.01, True, 450)
    assert letter.animation.is_playing is True
    assert envelope.show_state is ShowState.VISIBLE


def test_finished_visible_card_exits_on_space():
    letter = create_letter(None, None)
    letter.current_card_index = 1
    card = letter.cards[1]
    card.show_state = ShowState.VISIBLE
    card.update(letter, 0.01, True, 450)
    assert card.show_state is ShowState.EXIT


def test_exiting_card_slides_down():
    letter = create_letter(None, None)
    card = letter.cards[0]
    card.show_state = ShowState.EXIT
    card.update(letter, 0.5, False, 450)
    assert card.pos.y == pytest.approx(letter.slide_speed * 0.5)


def test_card_past_screen_is_done_and_next_is_shown():
    letter = create_letter(None, None)
    card = letter.cards[0]
    card.show_state = ShowState.EXIT
    card.pos.y = 450 + 200
    card.update(letter, 0.1, False, 450)
    assert card.show_state is ShowState.DONE
    assert letter.current_card_index == 1
    assert letter.cards[1].show_state is ShowState.VISIBLE


def test_done_card_is_left_alone():
    letter = create_letter(None, None)
    card = letter.cards[1]
    card.show_state = ShowState.DONE
    card.update(letter, 0.1, True, 450)
    assert card.is_finished is False
    assert card.show_state is ShowState.DONE


def test_draw_blits_texture_at_letter_position():
    texture = pygame.Surface((200, 120))
    texture.fill(RED)
    card = Card(CardType.IMAGE, texture=texture)
    letter = create_letter(None, None)
    letter.pos.update(10, 20)
    surface = pygame.Surface((400, 300))
    surface.fill(WHITE)
    card.draw(letter, surface)
    assert surface.get_at((15, 25))[:3] == RED
    assert surface.get_at((5, 5))[:3] == WHITE