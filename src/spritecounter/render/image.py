# src/spritecounter/render/image.py
"""
Image surface operations on 8-bit palettized pygame surfaces.

Pixels hold palette indices; index 0 doubles as the colour key, so an image
drawn "transparent" skips those pixels while an "opaque" draw copies them.
"""

from __future__ import annotations

import pygame

from .font import BitmapFont
from .palette import PALETTE, TRANSPARENT, rgba_index

_HEX = "0123456789abcdef"


def create_bitmap(width: int, height: int) -> pygame.Surface:
    img = pygame.Surface((width, height), 0, 8)
    img.set_palette(PALETTE)
    img.fill(TRANSPARENT)
    img.set_colorkey(TRANSPARENT)
    return img


def fill(img: pygame.Surface, color: int) -> None:
    img.fill(color)


def from_surface(src: pygame.Surface) -> pygame.Surface:
    """
    Palettized version of src. 8-bit surfaces are returned as they are; any
    other surface is quantized pixel by pixel (its colour key, or alpha < 128,
    becomes index 0). Black stays black (index 15) instead of turning into the
    key colour.
    """
    if src.get_bitsize() == 8:
        return src
    w, h = src.get_size()
    key = src.get_colorkey()
    img = create_bitmap(w, h)
    for y in range(h):
        for x in range(w):
            c = src.get_at((x, y))
            if key is not None and tuple(c)[:3] == tuple(key)[:3]:
                continue
            idx = rgba_index(c.r, c.g, c.b, c.a)
            if idx != TRANSPARENT:
                img.set_at((x, y), idx)
    return img


def draw_opaque(dst: pygame.Surface, src: pygame.Surface, x: int, y: int) -> None:
    src = src.copy()
    src.set_colorkey(None)
    dst.blit(src, (x, y))


def draw_transparent(dst: pygame.Surface, src: pygame.Surface, x: int, y: int) -> None:
    if src.get_colorkey() is None:
        src = src.copy()
        src.set_colorkey(TRANSPARENT)
    dst.blit(src, (x, y))


def print_text(img: pygame.Surface, text: str, x: int, y: int,
               color: int, font: BitmapFont) -> None:
    """Stamp text glyph by glyph; pixels outside the image are dropped."""
    w, h = img.get_size()
    for i, ch in enumerate(text):
        ox = x + i * font.glyph_width
        for gx, gy in font.glyph(ch):
            px, py = ox + gx, y + gy
            if 0 <= px < w and 0 <= py < h:
                img.set_at((px, py), color)


def image_from_rows(text: str) -> pygame.Surface:
    """
    Build an image from rows of palette digits, e.g.
        . 2 2 .
        2 2 2 2
    '.' is transparent, 0-9/a-f are palette indices. Whitespace between
    pixels is optional.
    """
    rows = []
    for line in text.strip().splitlines():
        row = [c for c in line if not c.isspace()]
        if row:
            rows.append(row)
    width = max((len(r) for r in rows), default=0)
    img = create_bitmap(width, len(rows))
    for y, row in enumerate(rows):
        for x, c in enumerate(row):
            if c == ".":
                continue
            idx = _HEX.find(c.lower())
            if idx < 0:
                raise ValueError(f"bad pixel {c!r} at row {y}")
            img.set_at((x, y), idx)
    return img
