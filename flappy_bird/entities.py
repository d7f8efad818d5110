"""Game entities: the player-controlled bird and the pipes it flies through.

Both are plain mutable objects owned by a single session. Nothing here draws;
presentation lives in ``render``.
"""

from __future__ import annotations

from .config import (
    BIRD_HEIGHT,
    BIRD_WIDTH,
    BIRD_X,
    GRAVITY,
    LIFT,
    PIPE_GAP,
    PIPE_WIDTH,
    WINDOW_HEIGHT,
)
from .utils import clamp


class Bird:
    """The falling actor. x is fixed, y and velocity change every tick."""

    def __init__(
        self,
        surface_height: int = WINDOW_HEIGHT,
        x: int = BIRD_X,
        width: int = BIRD_WIDTH,
        height: int = BIRD_HEIGHT,
        gravity: float = GRAVITY,
        lift: float = LIFT,
    ) -> None:
        self.x = float(x)
        self.width = width
        self.height = height
        self.gravity = gravity
        self.lift = lift
        self.surface_height = surface_height
        self.y = surface_height / 2
        self.velocity = 0.0

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def right(self) -> float:
        return self.x + self.width

    def reset(self, surface_height: int | None = None) -> None:
        if surface_height is not None:
            self.surface_height = surface_height
        self.y = self.surface_height / 2
        self.velocity = 0.0

    def integrate(self) -> None:
        """Advance one tick: gravity, then position, then clamp to the playfield."""
        self.velocity += self.gravity
        self.y += self.velocity

        floor = self.surface_height - self.height
        clamped = float(clamp(self.y, 0, floor))
        if clamped != self.y:
            self.y = clamped
            self.velocity = 0.0

    def apply_impulse(self) -> None:
        # Absolute, so repeated flaps never stack.
        self.velocity = self.lift


class Pipe:
    """A top/bottom pipe pair with a passable gap spanning [top, top + gap)."""

    def __init__(self, x: float, top: float, width: int = PIPE_WIDTH, gap: int = PIPE_GAP) -> None:
        self.x = float(x)
        self.top = top
        self.width = width
        self.gap = gap
        self.passed = False

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def gap_bottom(self) -> float:
        return self.top + self.gap

    def update(self, speed: float) -> None:
        self.x -= speed

    def offscreen(self) -> bool:
        return self.right <= 0

    def __repr__(self) -> str:
        return f"Pipe(x={self.x:.1f}, top={self.top:.1f}, passed={self.passed})"
