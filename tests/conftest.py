import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from spritecounter.engine.sprites import Scene, set_scene


@pytest.fixture(scope="session", autouse=True)
def _pygame():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture(autouse=True)
def scene():
    sc = Scene()
    set_scene(sc)
    yield sc
    set_scene(None)
