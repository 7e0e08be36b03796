# src/spritecounter/render/font.py
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import FrozenSet, Tuple

import pygame

XY = Tuple[int, int]


@dataclass(frozen=True)
class BitmapFont:
    """
    Fixed-cell bitmap font. Every character occupies glyph_width x glyph_height;
    the rightmost column is left blank as letter spacing.
    """
    glyph_width: int
    glyph_height: int
    name: str = ""

    def text_width(self, text: str) -> int:
        return self.glyph_width * len(text)

    def glyph(self, ch: str) -> FrozenSet[XY]:
        return _glyph_pixels(self.glyph_width, self.glyph_height, ch)


FONT5 = BitmapFont(6, 5, "font5")
FONT8 = BitmapFont(6, 8, "font8")


def _ink(surf: pygame.Surface) -> list:
    mask = pygame.mask.from_surface(surf)
    w, h = mask.get_size()
    return [(x, y) for y in range(h) for x in range(w) if mask.get_at((x, y))]


@lru_cache(maxsize=None)
def _source_font(cap_height: int):
    """
    Largest default pygame font whose capital 'X' fits cap_height rows.
    Returns (font, row of the cap top in a rendered glyph).
    """
    if not pygame.font.get_init():
        pygame.font.init()
    best = None
    for size in range(4, cap_height * 4 + 8):
        font = pygame.font.Font(None, size)
        pts = _ink(font.render("X", False, (255, 255, 255)))
        if not pts:
            continue
        top = min(y for _, y in pts)
        bottom = max(y for _, y in pts)
        if bottom - top + 1 > cap_height:
            break
        best = (font, top)
    if best is None:
        font = pygame.font.Font(None, 4)
        best = (font, 0)
    return best


@lru_cache(maxsize=1024)
def _glyph_pixels(cell_w: int, cell_h: int, ch: str) -> FrozenSet[XY]:
    font, cap_top = _source_font(cell_h)
    pts = _ink(font.render(ch, False, (255, 255, 255)))
    if not pts:
        return frozenset()
    left = min(x for x, _ in pts)
    right = max(x for x, _ in pts)
    dx = max(0, (cell_w - 1 - (right - left + 1)) // 2) - left
    out = set()
    for x, y in pts:
        cx, cy = x + dx, y - cap_top
        if 0 <= cx < cell_w and 0 <= cy < cell_h:
            out.add((cx, cy))
    return frozenset(out)
