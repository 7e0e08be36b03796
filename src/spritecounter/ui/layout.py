# src/spritecounter/ui/layout.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

import pygame

from ..config import CounterDefaults
from ..render.font import BitmapFont
from ..render.image import draw_transparent, from_surface, print_text


@dataclass(frozen=True)
class TextLabel:
    text: str

    def measure(self, font: BitmapFont) -> Tuple[int, int]:
        return font.text_width(self.text), font.glyph_height

    def draw(self, canvas: pygame.Surface, x: int, y: int, color: int,
             outline: Optional[int], font: BitmapFont) -> None:
        print_with_outline(canvas, self.text, x, y, color, outline, font)


@dataclass(frozen=True)
class ImageLabel:
    image: pygame.Surface

    def measure(self, font: BitmapFont) -> Tuple[int, int]:
        return self.image.get_width(), self.image.get_height()

    def draw(self, canvas: pygame.Surface, x: int, y: int, color: int,
             outline: Optional[int], font: BitmapFont) -> None:
        draw_transparent(canvas, self.image, x, y)


Label = Union[TextLabel, ImageLabel]


def make_label(label) -> Label:
    if isinstance(label, (TextLabel, ImageLabel)):
        return label
    if isinstance(label, str):
        return TextLabel(label)
    if isinstance(label, pygame.Surface):
        return ImageLabel(from_surface(label))
    raise TypeError(f"label must be str or pygame.Surface, got {type(label).__name__}")


# Diagonal stamps under the main text.
OUTLINE_OFFSETS = ((-1, -1), (1, -1), (-1, 1), (1, 1))


def print_with_outline(canvas: pygame.Surface, text: str, x: int, y: int, color: int,
                       outline: Optional[int], font: BitmapFont) -> None:
    """
    Cheap outline: the text stamped four times diagonally in the outline
    colour, then once in place in the main colour so it always ends up on top.
    """
    if outline is not None:
        for dx, dy in OUTLINE_OFFSETS:
            print_text(canvas, text, x + dx, y + dy, outline, font)
    print_text(canvas, text, x, y, color, font)


@dataclass(frozen=True)
class LayoutOptions:
    x: Optional[float] = None
    y: Optional[float] = None
    width: Optional[int] = None
    height: Optional[int] = None
    text_color: Optional[int] = None
    outline_color: Optional[int] = None
    background_color: Optional[int] = None
    background_image: Optional[pygame.Surface] = None


@dataclass(frozen=True)
class ResolvedLayout:
    width: int
    height: int
    content_width: int
    content_height: int
    content_x: int
    content_y: int
    text_color: int
    outline_color: Optional[int]


def resolve_layout(label_size: Tuple[int, int], value_text: str, options: LayoutOptions,
                   font: BitmapFont, defaults: CounterDefaults) -> ResolvedLayout:
    """
    Size comes from exactly one source, in order: explicit width/height,
    the background image, content + padding. Content is centred with floor
    division; when it overflows the canvas the offset goes negative and the
    excess is clipped.
    """
    label_w, label_h = label_size
    value_w = font.text_width(value_text)
    content_w = label_w + defaults.spacing + value_w
    content_h = max(label_h, font.glyph_height)

    bg = options.background_image
    if options.width is not None:
        width = options.width
    elif bg is not None:
        width = bg.get_width()
    else:
        width = content_w + defaults.padding
    if options.height is not None:
        height = options.height
    elif bg is not None:
        height = bg.get_height()
    else:
        height = content_h + defaults.padding

    text_color = defaults.text_color if options.text_color is None else options.text_color
    return ResolvedLayout(
        width=width,
        height=height,
        content_width=content_w,
        content_height=content_h,
        content_x=(width - content_w) // 2,
        content_y=(height - content_h) // 2,
        text_color=text_color,
        outline_color=options.outline_color,
    )
