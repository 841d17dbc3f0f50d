"""
Simulation state owned by the frame driver.

Holds the four control points and the viewport they were laid out in.
P0 and P3 are fixed; P1 and P2 chase their targets through the spring.
"""

import logging

from bezierrope.config import ENDPOINT_MARGIN, SpringParams
from bezierrope.spring import MovablePoint, update_spring
from bezierrope.vector import vec

logger = logging.getLogger(__name__)


def endpoint_positions(width, height, margin=ENDPOINT_MARGIN):
    return vec(margin, height / 2), vec(width - margin, height / 2)


class SimulationState:

    def __init__(self, width, height, p0, p1, p2, p3, params=None,
                 margin=ENDPOINT_MARGIN, reflow_on_resize=False):
        self.width = width
        self.height = height

        self.p0 = p0
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3

        self.params = params or SpringParams()
        self.margin = margin
        self.reflow_on_resize = reflow_on_resize

    @classmethod
    def from_viewport(cls, width, height, params=None, margin=ENDPOINT_MARGIN,
                      reflow_on_resize=False):
        p0, p3 = endpoint_positions(width, height, margin)

        return cls(
            width,
            height,
            p0,
            MovablePoint.at(width * 0.3, height * 0.3),
            MovablePoint.at(width * 0.7, height * 0.7),
            p3,
            params=params,
            margin=margin,
            reflow_on_resize=reflow_on_resize,
        )

    # -------------------------
    # UPDATE PHYSICS
    # -------------------------

    def step(self):
        for point in self.movable_points():
            update_spring(point, self.params.stiffness, self.params.damping)

    # -------------------------
    # ACCESS
    # -------------------------

    def control_points(self):
        return self.p0, self.p1.pos, self.p2.pos, self.p3

    def movable_points(self):
        return self.p1, self.p2

    def mirror(self, x, y):
        """Point reflected through the viewport centre."""
        return self.width - x, self.height - y

    # -------------------------
    # RESIZE
    # -------------------------

    def resize(self, width, height):
        self.width = width
        self.height = height

        if self.reflow_on_resize:
            self.p0, self.p3 = endpoint_positions(width, height, self.margin)
            logger.info("Viewport resized to %dx%d, endpoints moved", width, height)
        else:
            logger.info("Viewport resized to %dx%d, endpoints kept", width, height)
