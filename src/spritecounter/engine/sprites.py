# src/spritecounter/engine/sprites.py
# Sprite host and scene metrics on top of pygame.sprite.

from __future__ import annotations

import enum
import logging
import math
from typing import List, Optional

import pygame

from ..render.palette import rgb

log = logging.getLogger(__name__)

SCREEN_W, SCREEN_H = 160, 120


class SpriteKind:
    """Process-wide sprite kind tags."""
    _next = 1000

    @classmethod
    def create(cls) -> int:
        kind = cls._next
        cls._next += 1
        return kind


class SpriteFlag(enum.IntFlag):
    NONE = 0
    GHOST = 1        # excluded from collisions/physics
    INVISIBLE = 2


class HostSprite(pygame.sprite.Sprite):
    """
    Positionable bitmap. (x, y) is the centre of the image; swapping the
    image keeps the centre where it was.
    """
    def __init__(self, image: pygame.Surface, kind: int):
        super().__init__()
        self.kind = kind
        self.flags = SpriteFlag.NONE
        self.image = image
        self.x: float = 0
        self.y: float = 0
        self.rect = image.get_rect(center=(0, 0))
        self._layer = 0

    def set_flag(self, flag: SpriteFlag, on: bool) -> None:
        if on:
            self.flags |= flag
        else:
            self.flags &= ~flag

    def has_flag(self, flag: SpriteFlag) -> bool:
        return bool(self.flags & flag)

    @property
    def z(self) -> int:
        return self._layer

    @z.setter
    def z(self, value: int) -> None:
        groups = [g for g in self.groups() if isinstance(g, pygame.sprite.LayeredUpdates)]
        for g in groups:
            g.change_layer(self, value)
        self._layer = value

    def set_image(self, image: pygame.Surface) -> None:
        self.image = image
        self._sync_rect()

    def set_position(self, x: float, y: float) -> None:
        self.x, self.y = x, y
        self._sync_rect()

    def _sync_rect(self) -> None:
        # Odd sizes put the extra pixel right/below, so rect.center == floor(x, y).
        self.rect = self.image.get_rect(center=(math.floor(self.x), math.floor(self.y)))


class Scene:
    def __init__(self, width: int = SCREEN_W, height: int = SCREEN_H, background: int = 0):
        self.width = width
        self.height = height
        self.background = background
        self.sprites = pygame.sprite.LayeredUpdates()

    def screen_width(self) -> int:
        return self.width

    def screen_height(self) -> int:
        return self.height

    def create_sprite(self, image: pygame.Surface, kind: int) -> HostSprite:
        spr = HostSprite(image, kind)
        self.sprites.add(spr)
        log.debug("sprite created kind=%d (%d in scene)", kind, len(self.sprites))
        return spr

    def remove_sprite(self, sprite: HostSprite) -> None:
        if sprite in self.sprites:
            self.sprites.remove(sprite)
            log.debug("sprite removed kind=%d", sprite.kind)

    def sprites_of_kind(self, kind: int) -> List[HostSprite]:
        return [s for s in self.sprites.sprites() if s.kind == kind]

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(rgb(self.background))
        # LayeredUpdates keeps sprites sorted by layer (z), lowest first.
        for spr in self.sprites.sprites():
            if spr.has_flag(SpriteFlag.INVISIBLE):
                continue
            surface.blit(spr.image, spr.rect)

    def render(self) -> pygame.Surface:
        surface = pygame.Surface((self.width, self.height))
        self.draw(surface)
        return surface


_current: Optional[Scene] = None


def current_scene() -> Scene:
    global _current
    if _current is None:
        _current = Scene()
    return _current


def set_scene(scene: Optional[Scene]) -> None:
    """Install the scene new sprites go to (None resets to a fresh default)."""
    global _current
    _current = scene
