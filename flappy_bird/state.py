"""Session context and the game state machine that drives it."""

from __future__ import annotations

import logging
import random
from collections import deque
from enum import Enum, auto

from .config import WINDOW_HEIGHT, WINDOW_WIDTH
from .entities import Bird
from .obstacles import ObstacleManager
from .scoring import evaluate
from .storage import MemoryScoreStore, ScoreStore

logger = logging.getLogger(__name__)


class GameMode(Enum):
    NOT_STARTED = auto()
    RUNNING = auto()
    OVER = auto()


class Command(Enum):
    FLAP = auto()
    START = auto()
    RESTART = auto()
    PRIMARY = auto()  # single-button action, resolved against the mode when applied


def primary_command(mode: GameMode) -> Command:
    """The single-button action: start, flap or restart depending on the mode."""
    if mode is GameMode.NOT_STARTED:
        return Command.START
    if mode is GameMode.OVER:
        return Command.RESTART
    return Command.FLAP


class Session:
    """All mutable gameplay data for one game, written only by its state machine."""

    def __init__(
        self,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.bird = Bird(surface_height=height)
        self.obstacles = ObstacleManager(rng=rng)
        self.mode = GameMode.NOT_STARTED
        self.score = 0
        self.best = 0
        self.frame = 0

    def reset(self) -> None:
        self.score = 0
        self.frame = 0
        self.obstacles.clear()
        self.bird.reset(self.height)


class GameStateMachine:
    """Routes commands and ticks into the session.

    Commands from input callbacks go through ``submit`` and are applied at the
    start of the next ``tick``; ``handle_command`` applies one immediately.
    """

    def __init__(
        self,
        store: ScoreStore | None = None,
        session: Session | None = None,
    ) -> None:
        self.store: ScoreStore = store if store is not None else MemoryScoreStore()
        self.session = session if session is not None else Session()
        self.session.best = self._load_best()
        self._pending: deque[Command] = deque()

    @property
    def mode(self) -> GameMode:
        return self.session.mode

    def _load_best(self) -> int:
        try:
            best = int(self.store.load())
        except Exception:
            logger.warning("Could not load best score, starting from 0", exc_info=True)
            return 0
        return max(0, best)

    def submit(self, command: Command) -> None:
        self._pending.append(command)

    def handle_command(self, command: Command) -> bool:
        """Apply ``command`` if the current mode accepts it. Returns True if it did."""
        mode = self.session.mode
        if command is Command.PRIMARY:
            command = primary_command(mode)
        if command is Command.FLAP and mode is GameMode.RUNNING:
            self.session.bird.apply_impulse()
            return True
        if command is Command.START and mode is GameMode.NOT_STARTED:
            self._begin()
            logger.info("Game started (best %d)", self.session.best)
            return True
        if command is Command.RESTART and mode is GameMode.OVER:
            self._begin()
            logger.info("Game restarted (best %d)", self.session.best)
            return True
        logger.debug("Ignoring %s while %s", command.name, mode.name)
        return False

    def _begin(self) -> None:
        self.session.reset()
        self.session.mode = GameMode.RUNNING

    def _drain(self) -> None:
        while self._pending:
            self.handle_command(self._pending.popleft())

    def tick(self) -> None:
        self._drain()
        s = self.session
        if s.mode is not GameMode.RUNNING:
            return

        s.frame += 1
        s.bird.integrate()
        s.obstacles.tick(s.frame, s.width, s.height)
        if evaluate(s, self.store):
            s.mode = GameMode.OVER
            logger.info("Game over: score %d, best %d", s.score, s.best)
