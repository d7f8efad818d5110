"""Translate pygame input events into game commands."""

from __future__ import annotations

import pygame

from .state import Command

PRIMARY_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_w)


def commands_for_event(event: pygame.event.Event) -> list[Command]:
    """Map one event to commands. The primary button is resolved when the command is applied."""
    if event.type == pygame.KEYDOWN:
        if event.key in PRIMARY_KEYS:
            return [Command.PRIMARY]
        if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            return [Command.START]
        if event.key == pygame.K_r:
            return [Command.RESTART]
    elif event.type == pygame.MOUSEBUTTONDOWN:
        # Touches also arrive as emulated clicks; FINGERDOWN handles those.
        if event.button == 1 and not getattr(event, "touch", False):
            return [Command.PRIMARY]
    elif event.type == pygame.FINGERDOWN:
        return [Command.PRIMARY]
    return []


def is_quit_event(event: pygame.event.Event) -> bool:
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
