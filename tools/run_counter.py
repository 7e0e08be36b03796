# tools/run_counter.py
# Interactive viewer: a few counters in a 160x120 scene, scaled up.
# Keys: UP/DOWN score +-1, RIGHT/LEFT score +-10, H hearts +-1 (shift = -1),
#       R reset, D destroy/recreate the coin counter, ESC quit.

from __future__ import annotations

import argparse
import logging
from typing import Optional

import pygame

try:
    from spritecounter.engine.sprites import Scene, set_scene
    from spritecounter.render.image import image_from_rows
    from spritecounter.render.palette import BLACK, BLUE, RED, WHITE, YELLOW
    from spritecounter.ui.blocks import (
        change_counter_value,
        create_image_counter,
        create_text_counter,
        destroy_counter,
        set_counter_value,
    )
except Exception as e:  # pragma: no cover
    print("[run_counter] Failed to import project modules:", e)
    print("Ensure you installed the package in editable mode: pip install -e .")
    raise

HEART = """
. 2 2 . 2 2 .
2 2 2 2 2 2 2
2 2 2 2 2 2 2
. 2 2 2 2 2 .
. . 2 2 2 . .
. . . 2 . . .
"""

COIN = """
. 5 5 5 .
5 5 4 5 5
5 4 5 5 5
5 5 5 5 5
. 5 5 5 .
"""


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Counter widget viewer")
    parser.add_argument("--scale", type=int, default=4, help="window pixels per scene pixel")
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    pygame.init()
    scene = Scene(background=BLUE)
    set_scene(scene)
    window = pygame.display.set_mode((scene.width * args.scale, scene.height * args.scale))
    clock = pygame.time.Clock()

    score = create_text_counter("Score:", 0, outline_color=BLACK)
    hearts = create_image_counter(image_from_rows(HEART), 3, x=24, y=110, text_color=WHITE, outline_color=RED)
    coin_icon = image_from_rows(COIN)
    coins = create_image_counter(coin_icon, 0, x=140, y=110, bg_color=BLACK, text_color=YELLOW)

    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                shift = bool(ev.mod & pygame.KMOD_SHIFT)
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_UP:
                    change_counter_value(score, 1)
                    change_counter_value(coins, 1)
                elif ev.key == pygame.K_DOWN:
                    change_counter_value(score, -1)
                elif ev.key == pygame.K_RIGHT:
                    change_counter_value(score, 10)
                elif ev.key == pygame.K_LEFT:
                    change_counter_value(score, -10)
                elif ev.key == pygame.K_h:
                    change_counter_value(hearts, -1 if shift else 1)
                elif ev.key == pygame.K_r:
                    set_counter_value(score, 0)
                    set_counter_value(hearts, 3)
                    set_counter_value(coins, 0)
                elif ev.key == pygame.K_d:
                    if coins is None:
                        coins = create_image_counter(coin_icon, 0, x=140, y=110, bg_color=BLACK, text_color=YELLOW)
                    else:
                        destroy_counter(coins)
                        coins = None

        frame = scene.render()
        pygame.transform.scale(frame, window.get_size(), window)
        pygame.display.set_caption(
            f"Counters — score {score.value}  hearts {hearts.value}  redraws {score.render_count}"
        )
        pygame.display.flip()
        clock.tick(args.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
