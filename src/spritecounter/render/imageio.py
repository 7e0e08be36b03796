# src/spritecounter/render/imageio.py
# PNG in/out for palettized images using Pillow.

from __future__ import annotations

import os

import pygame
from PIL import Image

from .image import create_bitmap
from .palette import TRANSPARENT, rgb, rgba_index


def load_image(path: str) -> pygame.Surface:
    """
    Load a PNG and quantize it to the palette. Pixels with alpha < 128 become
    the transparent index.
    """
    src = Image.open(path).convert("RGBA")
    w, h = src.size
    img = create_bitmap(w, h)
    px = src.load()
    for y in range(h):
        for x in range(w):
            idx = rgba_index(*px[x, y])
            if idx != TRANSPARENT:
                img.set_at((x, y), idx)
    return img


def to_pil(img: pygame.Surface, scale: int = 1) -> Image.Image:
    w, h = img.get_size()
    out = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    px = out.load()
    for y in range(h):
        for x in range(w):
            idx = img.get_at_mapped((x, y))
            if idx != TRANSPARENT:
                px[x, y] = rgb(idx) + (255,)
    if scale != 1:
        out = out.resize((w * scale, h * scale), Image.NEAREST)
    return out


def save_png(img: pygame.Surface, path: str, scale: int = 1) -> None:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    to_pil(img, scale).save(path)
