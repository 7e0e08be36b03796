#!/usr/bin/env python3
# Render one counter to a PNG using Pillow (no window needed).

import argparse, logging, os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from spritecounter.engine.sprites import Scene
from spritecounter.render.imageio import load_image, save_png
from spritecounter.ui.blocks import create_image_counter, create_text_counter

def main():
    ap = argparse.ArgumentParser()
    label = ap.add_mutually_exclusive_group(required=True)
    label.add_argument("--text", type=str, help="text label, e.g. 'Score:'")
    label.add_argument("--icon", type=str, help="PNG used as the icon label")
    ap.add_argument("--value", type=int, default=0)
    ap.add_argument("--width", type=int, default=None)
    ap.add_argument("--height", type=int, default=None)
    ap.add_argument("--color", type=int, default=None, help="text palette index")
    ap.add_argument("--outline", type=int, default=None, help="outline palette index")
    ap.add_argument("--bg-color", type=int, default=None)
    ap.add_argument("--bg-image", type=str, default=None, help="PNG background")
    ap.add_argument("--scale", type=int, default=4)
    ap.add_argument("--out", type=str, required=True)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    pygame.init()
    scene = Scene()
    bg_image = load_image(args.bg_image) if args.bg_image else None
    style = dict(width=args.width, height=args.height, text_color=args.color,
                 outline_color=args.outline, bg_color=args.bg_color, bg_image=bg_image,
                 scene=scene)
    if args.text is not None:
        counter = create_text_counter(args.text, args.value, **style)
    else:
        counter = create_image_counter(load_image(args.icon), args.value, **style)

    w, h = counter.sprite.image.get_size()
    save_png(counter.sprite.image, args.out, scale=args.scale)
    print(f"Wrote {args.out} ({w}x{h} @ x{args.scale})")
    pygame.quit()

if __name__ == '__main__':
    main()
