import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
import pytest


@pytest.fixture(scope="session", autouse=True)
def pygame_font():
    pygame.font.init()
    yield
    pygame.font.quit()


@pytest.fixture
def screen():
    surface = pygame.Surface((200, 200))
    surface.fill((255, 255, 255))
    return surface
