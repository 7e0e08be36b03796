# src/spritecounter/ui/blocks.py
"""
Flat entry points for block-editor style callers. Loose optional arguments
are packed into LayoutOptions; a missing counter makes the update calls
silent no-ops.
"""

from __future__ import annotations

import logging
from typing import Optional

import pygame

from ..engine.sprites import Scene
from .counter import Counter
from .layout import LayoutOptions

log = logging.getLogger(__name__)


def _options(x, y, width, height, text_color, outline_color, bg_color, bg_image) -> LayoutOptions:
    return LayoutOptions(
        x=x, y=y, width=width, height=height,
        text_color=text_color, outline_color=outline_color,
        background_color=bg_color, background_image=bg_image,
    )


def create_text_counter(text: str = "Score:", value: int = 0,
                        x: Optional[float] = None, y: Optional[float] = None,
                        width: Optional[int] = None, height: Optional[int] = None,
                        text_color: Optional[int] = None, outline_color: Optional[int] = None,
                        bg_color: Optional[int] = None, bg_image: Optional[pygame.Surface] = None,
                        scene: Optional[Scene] = None) -> Counter:
    """Create a counter with a text label."""
    opts = _options(x, y, width, height, text_color, outline_color, bg_color, bg_image)
    return Counter(text, value, opts, scene=scene)


def create_image_counter(icon: pygame.Surface, value: int = 0,
                         x: Optional[float] = None, y: Optional[float] = None,
                         width: Optional[int] = None, height: Optional[int] = None,
                         text_color: Optional[int] = None, outline_color: Optional[int] = None,
                         bg_color: Optional[int] = None, bg_image: Optional[pygame.Surface] = None,
                         scene: Optional[Scene] = None) -> Counter:
    """Create a counter with an image icon as its label."""
    opts = _options(x, y, width, height, text_color, outline_color, bg_color, bg_image)
    return Counter(icon, value, opts, scene=scene)


def set_counter_value(counter: Optional[Counter], value: int) -> None:
    if counter is None:
        log.debug("set_counter_value ignored: no counter")
        return
    counter.set_value(value)


def change_counter_value(counter: Optional[Counter], amount: int) -> None:
    if counter is None:
        log.debug("change_counter_value ignored: no counter")
        return
    counter.change_value_by(amount)


def destroy_counter(counter: Optional[Counter]) -> None:
    if counter is not None:
        counter.destroy()
