import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from wrapteroids.simulation import Simulation


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, item):
        self.calls.append(item)


@pytest.fixture
def cues():
    return Recorder()


@pytest.fixture
def frames():
    return Recorder()


@pytest.fixture
def sim(cues, frames):
    return Simulation(rng=random.Random(1234), render=frames, audio=cues)


@pytest.fixture
def fonts():
    pygame.font.init()
    yield
    pygame.font.quit()
