"""Sprite-sheet animation that steps through equally sized frames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Animation:
    """A horizontal strip of frames, advanced one frame per elapsed frame time.

    ``x`` is the left edge of the current frame within the strip and is kept
    in step with ``current_frame`` by :meth:`update`.
    """

    frame_width: float
    frame_height: float
    frame_count: int
    frame_time: float
    loop: bool = False
    x: float = 0.0
    y: float = 0.0
    current_frame: int = 0
    time: float = 0.0
    is_playing: bool = False

    @property
    def frame_rect(self) -> tuple[float, float, float, float]:
        """The source rectangle ``(x, y, width, height)`` of the current frame."""
        return (self.x, self.y, self.frame_width, self.frame_height)

    def play(self) -> None:
        """Start (or resume) playback."""
        self.is_playing = True

    def update(self, dt: float) -> None:
        """Advance the animation by ``dt`` seconds."""
        if self.is_playing:
            self.time += dt
        if self.time >= self.frame_time:
            self.time = 0.0
            self.current_frame += 1
            if self.current_frame >= self.frame_count:
                if self.loop:
                    self.current_frame = 0
                else:
                    self.current_frame = self.frame_count - 1
                    self.is_playing = False
        self.x = self.current_frame * self.frame_width