"""Pipe spawning, scrolling and recycling."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator

from .config import (
    PIPE_FREQUENCY,
    PIPE_GAP,
    PIPE_RESERVED,
    PIPE_SPEED,
    PIPE_TOP_CLEARANCE,
    PIPE_WIDTH,
)
from .entities import Pipe

logger = logging.getLogger(__name__)


class ObstacleManager:
    """Owns the ordered pipe collection. Insertion order is spawn order."""

    def __init__(
        self,
        rng: random.Random | None = None,
        frequency: int = PIPE_FREQUENCY,
        speed: float = PIPE_SPEED,
        width: int = PIPE_WIDTH,
        gap: int = PIPE_GAP,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.frequency = frequency
        self.speed = speed
        self.width = width
        self.gap = gap
        self.pipes: list[Pipe] = []

    def __len__(self) -> int:
        return len(self.pipes)

    def __iter__(self) -> Iterator[Pipe]:
        return iter(self.pipes)

    def clear(self) -> None:
        self.pipes.clear()

    def spawn_top(self, surface_height: int) -> float:
        """Random gap top. Kept as the classic formula even on short surfaces."""
        span = surface_height - self.gap - PIPE_RESERVED
        return self.rng.random() * span + PIPE_TOP_CLEARANCE

    def spawn(self, surface_width: int, surface_height: int) -> Pipe:
        pipe = Pipe(surface_width, self.spawn_top(surface_height), width=self.width, gap=self.gap)
        self.pipes.append(pipe)
        logger.debug("Spawned %r", pipe)
        return pipe

    def tick(self, frame_index: int, surface_width: int, surface_height: int) -> None:
        if frame_index % self.frequency == 0:
            self.spawn(surface_width, surface_height)

        for pipe in self.pipes:
            pipe.update(self.speed)

        self.pipes = [p for p in self.pipes if not p.offscreen()]
