"""
Mouse handling: turns pygame mouse events into spring targets.

mirror -- P1 follows the mouse, P2 follows its reflection
drag   -- press on P1 or P2 to grab it, move to pull it, release to let go
"""

import logging

import pygame

from bezierrope.config import GRAB_RADIUS, INPUT_MODES
from bezierrope.vector import length, sub, vec

logger = logging.getLogger(__name__)


class PointerController:

    def __init__(self, state, mode="mirror", grab_radius=GRAB_RADIUS):
        if mode not in INPUT_MODES:
            raise ValueError(f"unknown input mode {mode!r}, expected one of {INPUT_MODES}")

        self.state = state
        self.mode = mode
        self.grab_radius = grab_radius
        self.dragging = None

    def handle_event(self, event):
        """Returns True when the event moved a target."""
        if event.type == pygame.MOUSEMOTION:
            return self._on_motion(event.pos)

        if self.mode != "drag":
            return False

        if event.type == pygame.MOUSEBUTTONDOWN:
            self._grab(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP:
            self._release()

        return False

    def _on_motion(self, pos):
        x, y = pos

        if self.mode == "mirror":
            self.state.p1.set_target(x, y)
            self.state.p2.set_target(*self.state.mirror(x, y))
            return True

        if self.dragging is None:
            return False

        self.dragging.set_target(x, y)
        return True

    def _grab(self, pos):
        mouse = vec(pos)

        for index, point in enumerate(self.state.movable_points(), start=1):
            if length(sub(mouse, point.pos)) < self.grab_radius:
                self.dragging = point
                logger.debug("Grabbed P%d at (%.1f, %.1f)", index, point.pos.x, point.pos.y)
                return

    def _release(self):
        if self.dragging is not None:
            logger.debug("Released dragged point")
        self.dragging = None
