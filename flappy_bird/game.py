"""Application wiring and the fixed-rate driver loop for Flappy Bird."""

from __future__ import annotations

import logging
import random

import pygame

from .config import BIRD_IMAGE, FPS, HIGHSCORE_FILE, LOG_LEVEL, TITLE, WINDOW_HEIGHT, WINDOW_WIDTH, pipe_seed
from .controls import commands_for_event, is_quit_event
from .render import Renderer, load_bird_image, render_frame
from .state import GameStateMachine, Session
from .storage import JsonScoreStore, ScoreStore

logger = logging.getLogger(__name__)


class Game:
    """Top-level controller: owns the window, the clock and one state machine."""

    def __init__(
        self,
        store: ScoreStore | None = None,
        rng: random.Random | None = None,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
    ) -> None:
        pygame.init()
        try:
            self.screen = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            raise RuntimeError("Could not create the display surface") from exc
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.renderer = Renderer(self.screen)
        self.bird_image = load_bird_image(BIRD_IMAGE)

        if store is None:
            store = JsonScoreStore(HIGHSCORE_FILE)
        if rng is None:
            rng = random.Random(pipe_seed())
        self.machine = GameStateMachine(store, Session(width, height, rng=rng))
        self.running = True

    @property
    def session(self) -> Session:
        return self.machine.session

    def handle_input(self, event: pygame.event.Event) -> None:
        if is_quit_event(event):
            self.running = False
            return
        for command in commands_for_event(event):
            self.machine.submit(command)

    def step(self) -> None:
        """One driver iteration: input, one simulation tick, then one render."""
        for event in pygame.event.get():
            self.handle_input(event)
        if not self.running:
            return
        self.machine.tick()
        render_frame(self.renderer, self.session, self.bird_image)
        pygame.display.flip()

    def run(self) -> None:
        while self.running:
            self.clock.tick(FPS)
            self.step()
        logger.info("Quitting with best score %d", self.session.best)
        pygame.quit()


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    Game().run()
