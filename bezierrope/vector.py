"""
2D vector helpers on top of pygame.Vector2.

Every function returns a new vector and leaves its arguments alone, so
callers can treat vectors as plain values.
"""

import pygame


def vec(x, y=None):
    """vec(3, 4) or vec((3, 4))"""
    if y is None:
        x, y = x
    return pygame.Vector2(float(x), float(y))


def add(a, b):
    return pygame.Vector2(a.x + b.x, a.y + b.y)


def sub(a, b):
    return pygame.Vector2(a.x - b.x, a.y - b.y)


def scale(v, s):
    return pygame.Vector2(v.x * s, v.y * s)


def length(v):
    return v.length()


def normalize(v):
    # Zero vector divides by 1 instead of raising like Vector2.normalize()
    l = v.length() or 1.0
    return pygame.Vector2(v.x / l, v.y / l)
