"""
Draws the rope: curve, tangent whiskers, then the four control points.

Only reads the state. Same state in, same pixels out.
"""

import pygame

from bezierrope.bezier import bezier_point, bezier_tangent, sample_curve, sample_parameters
from bezierrope.config import RenderStyle
from bezierrope.vector import add, normalize, scale


class Renderer:

    def __init__(self, style=None):
        self.style = style or RenderStyle()

    def draw(self, surface, state):
        style = self.style
        points = state.control_points()

        surface.fill(style.background)

        self.draw_curve(surface, points)
        self.draw_tangents(surface, points)

        p0, p1, p2, p3 = points
        self.draw_point(surface, p0, style.endpoint_color)
        self.draw_point(surface, p3, style.endpoint_color)
        self.draw_point(surface, p1, style.interior_color)
        self.draw_point(surface, p2, style.interior_color)

    # -------------------------
    # DRAW
    # -------------------------

    def draw_curve(self, surface, points):
        samples = sample_curve(points, self.style.curve_samples)

        pygame.draw.lines(
            surface,
            self.style.curve_color,
            False,
            [(p.x, p.y) for p in samples],
            self.style.curve_width
        )

    def draw_tangents(self, surface, points):
        style = self.style

        for t in sample_parameters(style.tangent_samples):
            p = bezier_point(*points, t)
            tan = scale(normalize(bezier_tangent(*points, t)), style.tangent_length)
            end = add(p, tan)

            pygame.draw.line(
                surface,
                style.tangent_color,
                (p.x, p.y),
                (end.x, end.y),
                style.tangent_width
            )

    def draw_point(self, surface, p, color):
        center = (int(p.x), int(p.y))
        radius = self.style.point_radius

        pygame.draw.circle(surface, color, center, radius)

        if self.style.outline_color is not None:
            pygame.draw.circle(surface, self.style.outline_color, center, radius, 1)
