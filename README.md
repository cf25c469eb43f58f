# birthdaycard

A small animated greeting card drawn with pygame. An envelope slides down
from the top of the window and stops in the middle. Press **Space** to play
the animation that opens it, then press **Space** again to send the envelope
sliding off the bottom of the window and bring the card inside forward.

## Installing

```
pip install .
```

This installs `pygame`, which opens the window and draws the card.

## Running

```
birthdaycard
```

By default the images are read from `assets/envelope.png` and
`assets/inner_card.png` under the current directory. Point at another
directory with `--assets`:

```
birthdaycard --assets path/to/images
```

An image that cannot be loaded is simply left out; the card's text is still
drawn. The window is 800×450, titled "happy birthday again!", and runs at
60 frames per second with a frame counter in the top-left corner. Close it
with the window's close button or with Escape.

## Using it from Python

- `birthdaycard.letter.create_letter(envelope_texture, card_texture)` builds
  a `Letter` holding two cards, an envelope titled "Happy Birthday" and a text
  card reading "First Card!", plus the 26-frame animation that opens the
  envelope. Either texture may be `None`.
- `Letter.update(dt, screen_width, screen_height, space_pressed)` moves the
  letter and its current card forward by `dt` seconds.
  `Letter.draw(surface)` draws the current card onto a pygame surface, with
  the next card beneath it while that one is entering.
- `birthdaycard.app.update_draw_frame(letter, surface, dt, space_pressed)`
  updates the letter and draws one whole frame: background, letter, caption
  and frame counter.
- `birthdaycard.animation.Animation` steps through the frames of a horizontal
  sprite strip. Call `play()` to start it and `update(dt)` once per frame;
  `frame_rect` gives the source rectangle of the current frame. A
  non-looping animation stops on its last frame.
- `birthdaycard.card.Card` holds one card's type, texture, text and position.
  `ShowState` (`INVISIBLE`, `ENTER`, `VISIBLE`, `EXIT`, `DONE`) tracks where a
  card or letter is in its cycle, and `CardType` is `ENVELOPE`, `TEXT` or
  `IMAGE`.
- `birthdaycard.arena.Arena(size, debug=False)` is a fixed-size bump
  allocator over a `bytearray`. `alloc` and `alloc_aligned` return offsets
  into the region, `expand` grows it, `copy_from` copies another arena's used
  bytes, `clear` rewinds it and `destroy` releases it. In debug mode each
  allocation is recorded and can be looked up with `allocation_at(offset)`.
  Failures raise `ArenaError`. An arena can be used as a context manager and
  is destroyed on leaving it.

## What it does not do

The card's contents are fixed: one envelope and one text card. There is no
way to supply your own messages or more cards from the command line, the
envelope's subtitle is stored but not drawn, and image cards draw only their
texture, with no text.

## Tests

```
pip install ".[test]"
pytest
```