"""
Spring + damping update for the two movable control points.
"""

from dataclasses import dataclass, field

import pygame

from bezierrope.vector import add, scale, sub, vec


@dataclass
class MovablePoint:
    pos: pygame.Vector2
    vel: pygame.Vector2 = field(default_factory=lambda: pygame.Vector2(0, 0))
    target: pygame.Vector2 = None

    def __post_init__(self):
        if self.target is None:
            self.target = pygame.Vector2(self.pos)

    @classmethod
    def at(cls, x, y):
        """Point resting at (x, y): no velocity, target on top of it."""
        return cls(pos=vec(x, y))

    def set_target(self, x, y):
        # last write wins, read on the next step
        self.target = vec(x, y)


def update_spring(point, stiffness, damping):
    """
    Advance one frame of explicit Euler.

    Velocity picks up the spring force first, then gets damped, and only
    then moves the position. One call per frame, no dt scaling.
    """
    force = scale(sub(point.pos, point.target), -stiffness)

    point.vel = scale(add(point.vel, force), damping)
    point.pos = add(point.pos, point.vel)
