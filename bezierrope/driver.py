"""
Frame driver: physics step, render, present, wait for the next frame.

One frame runs to completion before the next is scheduled. Mouse events
are drained between frames and only ever touch targets.
"""

import enum
import logging

import pygame

from bezierrope.config import FPS

logger = logging.getLogger(__name__)


class DriverState(enum.Enum):
    RUNNING = "running"
    STOPPED = "stopped"


class FrameClock:
    """pygame.time.Clock pinned to one frame rate."""

    def __init__(self, fps=FPS):
        self.fps = fps
        self.clock = pygame.time.Clock()

    def wait(self):
        return self.clock.tick(self.fps)


class FrameDriver:

    def __init__(self, state, renderer, surface, pointer, clock=None,
                 events=pygame.event.get, present=pygame.display.flip,
                 on_resize=None):
        self.state = state
        self.renderer = renderer
        self.surface = surface
        self.pointer = pointer

        self.clock = clock
        self.events = events
        self.present = present
        self.on_resize = on_resize

        self.status = DriverState.STOPPED
        self.frame_count = 0

    @property
    def running(self):
        return self.status is DriverState.RUNNING

    # -------------------------
    # FRAME
    # -------------------------

    def tick(self):
        self.state.step()
        self.renderer.draw(self.surface, self.state)
        self.frame_count += 1

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.stop()
        elif event.type == pygame.VIDEORESIZE:
            self._resize(event.w, event.h)
        else:
            self.pointer.handle_event(event)

    def _resize(self, width, height):
        if self.on_resize is not None:
            self.surface = self.on_resize(width, height)
        self.state.resize(width, height)

    # -------------------------
    # LOOP
    # -------------------------

    def run(self, max_frames=None):
        if self.clock is None:
            self.clock = FrameClock()

        self.status = DriverState.RUNNING
        logger.info("Frame loop started")

        frames = 0
        while self.running:

            for event in self.events():
                self.handle_event(event)

            if not self.running:
                break

            self.tick()
            self.present()

            frames += 1
            if max_frames is not None and frames >= max_frames:
                self.stop()

            # cancellation is checked before asking for another frame
            if self.running:
                self.clock.wait()

        return self.frame_count

    def stop(self):
        if self.status is DriverState.STOPPED:
            return
        self.status = DriverState.STOPPED
        logger.info("Frame loop stopped after %d frames", self.frame_count)
