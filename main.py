"""
Live aquarium: fish chase dropped food, crabs patrol the sand, bubbles rise from the castle.

Left click drops food, right click adds a fish, Escape quits.
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

import pygame

import config
from world.simulation import BasinSimulation

logger = logging.getLogger("aquarium_sim")


def setup_logging(level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    logging.basicConfig(level=level, format=config.LOG_FORMAT)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Animated aquarium simulation")
    parser.add_argument("--width", type=int, default=config.SCREEN_W)
    parser.add_argument("--height", type=int, default=config.SCREEN_H)
    parser.add_argument("--fps", type=int, default=config.FPS)
    parser.add_argument("--seed", type=int, default=None, help="castle layout seed")
    parser.add_argument("--log-level", default=config.LOG_LEVEL)
    parser.add_argument(
        "--headless",
        type=int,
        default=0,
        metavar="TICKS",
        help="run this many ticks without a window and print a summary",
    )
    return parser.parse_args(argv)


def run_headless(args: argparse.Namespace) -> BasinSimulation:
    sim = BasinSimulation(args.width, args.height, layout_seed=args.seed)
    sim.add_food(args.width / 2, args.height / 6)
    for _ in range(args.headless):
        sim.tick()
    logger.info(
        "Ran %d ticks: %d fish, %d food left, %d eaten",
        sim.frame, len(sim.fishes), len(sim.food), sim.eaten,
    )
    return sim


def run_window(args: argparse.Namespace) -> None:
    # imported here so headless runs never touch the display
    from render.renderer import PygameRenderer, create_display

    screen = create_display(args.width, args.height)
    clock = pygame.time.Clock()
    sim = BasinSimulation(args.width, args.height, renderer=PygameRenderer(screen), layout_seed=args.seed)

    running = True
    try:
        while running:
            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    running = False
                elif e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
                    running = False
                elif e.type == pygame.MOUSEBUTTONDOWN:
                    if e.button == 1:
                        sim.add_food(*e.pos)
                    elif e.button == 3:
                        sim.add_fish(*e.pos)

            sim.tick()
            clock.tick(args.fps)
    finally:
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    if args.headless > 0:
        run_headless(args)
        return 0

    try:
        run_window(args)
    except RuntimeError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
