# src/spritecounter/ui/counter.py
# Labeled numeric counter drawn into a single ghost sprite.

from __future__ import annotations

import dataclasses
import logging
from typing import Optional, Union

import pygame

from .. import config
from ..engine.sprites import HostSprite, Scene, SpriteFlag, SpriteKind, current_scene
from ..render.image import create_bitmap, draw_opaque, fill, from_surface
from .layout import LayoutOptions, make_label, print_with_outline, resolve_layout

log = logging.getLogger(__name__)

# Shared by every counter.
UI_SPRITE_KIND = SpriteKind.create()


class Counter:
    """
    Owns one sprite whose image always shows (label, value, options) as of
    the last public call. Only value changes after construction.
    """
    def __init__(self, label: Union[str, pygame.Surface], value: int,
                 options: Optional[LayoutOptions] = None, scene: Optional[Scene] = None):
        self.label = make_label(label)
        self._value = value
        options = options or LayoutOptions()
        if options.background_image is not None:
            options = dataclasses.replace(options, background_image=from_surface(options.background_image))
        self.options = options
        self.defaults = config.DEFAULTS
        self.font = self.defaults.font
        self.scene = scene or current_scene()
        self.render_count = 0

        self.sprite: Optional[HostSprite] = self.scene.create_sprite(create_bitmap(1, 1), UI_SPRITE_KIND)
        self.sprite.set_flag(SpriteFlag.GHOST, True)
        self.sprite.z = self.defaults.z

        self._redraw()

        x = self.scene.screen_width() / 2 if self.options.x is None else self.options.x
        y = self.defaults.y if self.options.y is None else self.options.y
        self.sprite.set_position(x, y)

    @property
    def value(self) -> int:
        return self._value

    @property
    def destroyed(self) -> bool:
        return self.sprite is None

    def set_value(self, v: int) -> None:
        if self._value != v:
            self._value = v
            self._redraw()

    def change_value_by(self, delta: int) -> None:
        self.set_value(self._value + delta)

    def destroy(self) -> None:
        if self.sprite is None:
            return
        self.scene.remove_sprite(self.sprite)
        self.sprite = None

    def __enter__(self) -> "Counter":
        return self

    def __exit__(self, *exc) -> None:
        self.destroy()

    def _redraw(self) -> None:
        if self.sprite is None:
            return
        value_text = str(self._value)
        lay = resolve_layout(self.label.measure(self.font), value_text,
                             self.options, self.font, self.defaults)

        canvas = create_bitmap(lay.width, lay.height)
        if self.options.background_image is not None:
            draw_opaque(canvas, self.options.background_image, 0, 0)
        elif self.options.background_color is not None:
            fill(canvas, self.options.background_color)

        cur_x = lay.content_x
        self.label.draw(canvas, cur_x, lay.content_y, lay.text_color, lay.outline_color, self.font)
        cur_x += self.label.measure(self.font)[0]
        cur_x += self.defaults.spacing
        print_with_outline(canvas, value_text, cur_x, lay.content_y,
                           lay.text_color, lay.outline_color, self.font)

        self.sprite.set_image(canvas)
        self.render_count += 1
        log.debug("counter redraw value=%s size=%dx%d", value_text, lay.width, lay.height)
