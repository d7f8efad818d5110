"""pygame presentation: draws a session, never changes it."""

from __future__ import annotations

import logging
import os

import pygame

from .config import (
    BIRD_FALLBACK_COLOR,
    COL_SKY_BOTTOM,
    COL_SKY_TOP,
    OVERLAY_COLOR,
    OVERLAY_TEXT_COLOR,
    PIPE_COLOR,
    TEXT_COLOR,
)
from .state import GameMode, Session
from .utils import vertical_gradient

logger = logging.getLogger(__name__)

Color = tuple[int, ...]


class Renderer:
    """Primitive drawing calls on top of a pygame surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self._fonts: dict[int, pygame.font.Font] = {}
        self.background = pygame.surfarray.make_surface(
            vertical_gradient(self.width, self.height, COL_SKY_TOP, COL_SKY_BOTTOM)
        )

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.SysFont(None, size)
        return self._fonts[size]

    def fill_background(self) -> None:
        self.surface.blit(self.background, (0, 0))

    def fill_rect(self, color: Color, rect: tuple[float, float, float, float]) -> None:
        x, y, w, h = rect
        if w <= 0 or h <= 0:
            return
        r = pygame.Rect(int(x), int(y), int(w), int(h))
        if len(color) == 4:
            # Translucent fills need their own alpha surface.
            s = pygame.Surface(r.size, pygame.SRCALPHA)
            s.fill(color)
            self.surface.blit(s, r.topleft)
        else:
            pygame.draw.rect(self.surface, color, r)

    def draw_text(
        self,
        text: str,
        pos: tuple[float, float],
        size: int = 20,
        color: Color = TEXT_COLOR,
        center: bool = False,
    ) -> None:
        img = self.font(size).render(text, True, color)
        if center:
            self.surface.blit(img, img.get_rect(center=(int(pos[0]), int(pos[1]))))
        else:
            self.surface.blit(img, (int(pos[0]), int(pos[1])))

    def draw_image(self, image: pygame.Surface, rect: tuple[float, float, float, float]) -> None:
        x, y, w, h = rect
        if image.get_size() != (int(w), int(h)):
            image = pygame.transform.smoothscale(image, (int(w), int(h)))
        self.surface.blit(image, (int(x), int(y)))


def load_bird_image(path: str) -> pygame.Surface | None:
    """Load the bird sprite, or None so the caller draws the fallback box.

    No sprite ships with the package; drop one at ``BIRD_IMAGE`` to use it.
    """
    if not os.path.exists(path):
        logger.info("No bird image at %s, drawing the fallback box", path)
        return None
    try:
        image = pygame.image.load(path)
    except (pygame.error, OSError) as exc:
        logger.warning("Bird image failed to load (%s). Using fallback.", exc)
        return None
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def draw_pipes(r: Renderer, session: Session) -> None:
    for pipe in session.obstacles:
        r.fill_rect(PIPE_COLOR, (pipe.x, 0, pipe.width, pipe.top))
        r.fill_rect(PIPE_COLOR, (pipe.x, pipe.gap_bottom, pipe.width, session.height - pipe.gap_bottom))


def draw_bird(r: Renderer, session: Session, image: pygame.Surface | None) -> None:
    bird = session.bird
    rect = (bird.x, bird.y, bird.width, bird.height)
    if image is not None:
        r.draw_image(image, rect)
    else:
        r.fill_rect(BIRD_FALLBACK_COLOR, rect)


def draw_score(r: Renderer, session: Session) -> None:
    r.draw_text(f"Score: {session.score}", (10, 6))
    r.draw_text(f"High Score: {session.best}", (10, 26))


def draw_start_screen(r: Renderer) -> None:
    cx, cy = r.width / 2, r.height / 2
    r.fill_rect(OVERLAY_COLOR, (0, 0, r.width, r.height))
    r.draw_text("Flappy Bird", (cx, cy - 50), 48, OVERLAY_TEXT_COLOR, center=True)
    r.draw_text("Press Space or Tap to Start", (cx, cy), 26, OVERLAY_TEXT_COLOR, center=True)
    r.draw_text("Avoid the pipes and score points!", (cx, cy + 30), 26, OVERLAY_TEXT_COLOR, center=True)


def draw_game_over(r: Renderer, session: Session) -> None:
    cx, cy = r.width / 2, r.height / 2
    r.fill_rect(OVERLAY_COLOR, (0, 0, r.width, r.height))
    r.draw_text("Game Over", (cx, cy - 20), 64, OVERLAY_TEXT_COLOR, center=True)
    r.draw_text(f"Score: {session.score}", (cx, cy + 30), 40, OVERLAY_TEXT_COLOR, center=True)
    r.draw_text(f"High Score: {session.best}", (cx, cy + 60), 40, OVERLAY_TEXT_COLOR, center=True)
    r.draw_text("Press Space to Restart", (cx, cy + 95), 30, OVERLAY_TEXT_COLOR, center=True)


def render_frame(r: Renderer, session: Session, bird_image: pygame.Surface | None = None) -> None:
    """Draw the current session state. Does not flip the display."""
    r.fill_background()
    if session.mode is GameMode.NOT_STARTED:
        draw_start_screen(r)
        return
    draw_pipes(r, session)
    draw_bird(r, session, bird_image)
    draw_score(r, session)
    if session.mode is GameMode.OVER:
        draw_game_over(r, session)
