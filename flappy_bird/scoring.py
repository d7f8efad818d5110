"""Collision detection, scoring and best-score tracking for one running tick."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .entities import Bird, Pipe
from .utils import span_within, spans_overlap

if TYPE_CHECKING:
    from .state import Session
    from .storage import ScoreStore

logger = logging.getLogger(__name__)


def hits_pipe(bird: Bird, pipe: Pipe) -> bool:
    """True if the bird overlaps the pipe horizontally and is not fully inside the gap."""
    if not spans_overlap(bird.x, bird.right, pipe.x, pipe.right):
        return False
    return not span_within(bird.y, bird.bottom, pipe.top, pipe.gap_bottom)


def hits_ground(bird: Bird, surface_height: float) -> bool:
    return bird.bottom >= surface_height


def award_passes(bird: Bird, pipes: list[Pipe]) -> int:
    """Mark every pipe the bird has fully cleared. Returns the points earned."""
    earned = 0
    for pipe in pipes:
        if not pipe.passed and pipe.right < bird.x:
            pipe.passed = True
            earned += 1
    return earned


def persist_best(store: ScoreStore, value: int) -> None:
    # Custom stores may raise.
    try:
        store.save(value)
    except Exception:
        logger.warning("Could not persist best score %d", value, exc_info=True)


def evaluate(session: Session, store: ScoreStore) -> bool:
    """Score passed pipes, update the best score, and report whether the bird crashed."""
    session.score += award_passes(session.bird, session.obstacles.pipes)

    if session.score > session.best:
        session.best = session.score
        logger.debug("New best score: %d", session.best)
        persist_best(store, session.best)

    for pipe in session.obstacles:
        if hits_pipe(session.bird, pipe):
            return True
    return hits_ground(session.bird, session.height)
