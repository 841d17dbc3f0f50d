"""
Cubic Bezier evaluation.

    B(t)  = (1-t)^3 P0 + 3(1-t)^2 t P1 + 3(1-t) t^2 P2 + t^3 P3
    B'(t) = 3(1-t)^2 (P1-P0) + 6(1-t) t (P2-P1) + 3 t^2 (P3-P2)

t is not clamped; any real t is a valid polynomial input.
"""

from bezierrope.vector import add, scale, sub


def bezier_point(p0, p1, p2, p3, t):
    u = 1 - t
    uu = u * u
    tt = t * t

    return add(
        add(scale(p0, uu * u), scale(p1, 3 * uu * t)),
        add(scale(p2, 3 * u * tt), scale(p3, tt * t)),
    )


def bezier_tangent(p0, p1, p2, p3, t):
    """Unnormalized first derivative."""
    u = 1 - t

    return add(
        add(scale(sub(p1, p0), 3 * u * u), scale(sub(p2, p1), 6 * u * t)),
        scale(sub(p3, p2), 3 * t * t),
    )


def sample_parameters(count):
    """Evenly spaced t values from 0 to exactly 1."""
    if count < 2:
        raise ValueError(f"need at least 2 samples, got {count}")

    last = count - 1
    return [i / last for i in range(count)]


def sample_curve(points, count):
    p0, p1, p2, p3 = points
    return [bezier_point(p0, p1, p2, p3, t) for t in sample_parameters(count)]
