"""Tests for the vector helpers."""
import math

import pygame
import pytest

from bezierrope.vector import add, length, normalize, scale, sub, vec


def test_vec_accepts_pair_or_tuple():
    assert vec(3, 4) == pygame.Vector2(3, 4)
    assert vec((3, 4)) == pygame.Vector2(3, 4)


def test_componentwise_ops():
    a = vec(1, 2)
    b = vec(10, 20)
    assert add(a, b) == vec(11, 22)
    assert sub(b, a) == vec(9, 18)
    assert scale(a, -3) == vec(-3, -6)


def test_ops_do_not_mutate_inputs():
    a = vec(1, 2)
    b = vec(3, 4)
    out = add(a, b)
    out.x = 99
    assert a == vec(1, 2)
    assert b == vec(3, 4)
    assert scale(a, 2) is not a


def test_length():
    assert length(vec(3, 4)) == 5.0
    assert length(vec(0, 0)) == 0.0


@pytest.mark.parametrize("x, y", [(3, 4), (-1, 0), (0.001, -0.002), (1e6, 1e6)])
def test_normalize_unit_length(x, y):
    assert math.isclose(length(normalize(vec(x, y))), 1.0, rel_tol=1e-12)


def test_normalize_zero_vector_is_zero():
    zero = vec(0, 0)
    out = normalize(zero)
    assert out == zero
    assert out is not zero
