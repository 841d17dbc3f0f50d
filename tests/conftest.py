import os

# No real window during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from bezierrope.config import SpringParams
from bezierrope.state import SimulationState


@pytest.fixture
def state():
    return SimulationState.from_viewport(800, 600, params=SpringParams(0.02, 0.85))


@pytest.fixture
def surface():
    return pygame.Surface((800, 600))
