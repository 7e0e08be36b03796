# src/spritecounter/render/palette.py
from typing import List, Tuple

RGB = Tuple[int, int, int]

TRANSPARENT = 0
WHITE = 1
RED = 2
PINK = 3
ORANGE = 4
YELLOW = 5
TEAL = 6
GREEN = 7
BLUE = 8
LIGHT_BLUE = 9
PURPLE = 10
LIGHT_PURPLE = 11
DARK_PURPLE = 12
TAN = 13
BROWN = 14
BLACK = 15

# Arcade default palette. Index 0 is the key colour and never painted.
PALETTE: List[RGB] = [
    (0, 0, 0),
    (255, 255, 255),
    (255, 33, 33),
    (255, 147, 196),
    (255, 129, 53),
    (255, 246, 9),
    (36, 156, 163),
    (120, 220, 82),
    (0, 63, 173),
    (135, 242, 255),
    (142, 46, 196),
    (164, 131, 159),
    (92, 64, 108),
    (229, 205, 196),
    (145, 70, 61),
    (0, 0, 0),
]

def rgb(index: int) -> RGB:
    if not (0 <= index < len(PALETTE)):
        raise IndexError(f"palette index out of range: {index}")
    return PALETTE[index]

def nearest_index(color: RGB) -> int:
    """Closest non-transparent palette index (squared RGB distance)."""
    r, g, b = color[0], color[1], color[2]
    best, best_d = 1, None
    for i in range(1, len(PALETTE)):
        pr, pg, pb = PALETTE[i]
        d = (pr - r) ** 2 + (pg - g) ** 2 + (pb - b) ** 2
        if best_d is None or d < best_d:
            best, best_d = i, d
    return best

def rgba_index(r: int, g: int, b: int, a: int = 255) -> int:
    """Index for a true-colour pixel: mostly transparent -> 0, else nearest colour."""
    if a < 128:
        return TRANSPARENT
    return nearest_index((r, g, b))
