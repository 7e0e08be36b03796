from dataclasses import dataclass

from .render.font import BitmapFont, FONT5

@dataclass(frozen=True)
class CounterDefaults:
    z: int = 100           # draw order, above default-depth sprites
    y: int = 10            # offset from the top when no y is given
    text_color: int = 1    # palette index
    spacing: int = 2       # between label and value
    padding: int = 4       # added to content size when nothing fixes the size
    font: BitmapFont = FONT5

# Global defaults (can be swapped by launcher)
DEFAULTS = CounterDefaults()
