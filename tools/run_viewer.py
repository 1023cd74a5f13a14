#!/usr/bin/env python3
# Interactive maze viewer.
# - G: cycle algorithm    - R: regenerate with a fresh seed
# - Left/Right: previous/next seed    - S: save the current maze as PNG
# - 60 Hz fixed loop

import argparse, os, random
import pygame

from minotaur.cli import parse_seed
from minotaur.colors import parse_hex_color, to_hex
from minotaur.grid import Grid
from minotaur.mapgen.generator import ALGORITHMS, canonical_name, generate
from minotaur.render.image import image_size, render_image
from minotaur.render.surface import draw_grid


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--width", type=int, default=20, help="Maze width in cells")
    ap.add_argument("--height", type=int, default=12, help="Maze height in cells")
    ap.add_argument("--algorithm", type=str, default="recursive-backtracker")
    ap.add_argument("--seed", type=parse_seed, default=None, help="Starting seed (random if omitted)")
    ap.add_argument("--cell", type=int, default=24, help="Cell size in pixels")
    ap.add_argument("--wall", type=int, default=2, help="Wall size in pixels")
    ap.add_argument("--background-color", type=str, default="#FFFFFF")
    ap.add_argument("--wall-color", type=str, default="#000000")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where S saves PNGs")
    args = ap.parse_args()

    bg = parse_hex_color(args.background_color)
    fg = parse_hex_color(args.wall_color)
    names = list(ALGORITHMS)
    algorithm = canonical_name(args.algorithm)
    seed = args.seed if args.seed is not None else random.getrandbits(32)
    grid = Grid(args.width, args.height)

    pygame.init()
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode(image_size(grid, args.cell, args.wall))

    def regenerate():
        generate(grid, algorithm, seed)

    def save_png():
        os.makedirs(args.outdir, exist_ok=True)
        path = os.path.join(args.outdir, f"{algorithm}_{args.width}x{args.height}_{seed}.png")
        render_image(grid, args.cell, args.wall, bg, fg).save(path)
        print(f"[viewer] saved {path}")

    regenerate()
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_g:
                    algorithm = names[(names.index(algorithm) + 1) % len(names)]
                    regenerate()
                elif ev.key == pygame.K_r:
                    seed = random.getrandbits(32)
                    regenerate()
                elif ev.key == pygame.K_RIGHT:
                    seed += 1
                    regenerate()
                elif ev.key == pygame.K_LEFT:
                    seed = max(0, seed - 1)
                    regenerate()
                elif ev.key == pygame.K_s:
                    save_png()

        draw_grid(screen, grid, (0, 0), args.cell, args.wall, bg, fg)
        pygame.display.set_caption(
            f"minotaur: {algorithm}  {args.width}x{args.height}  seed {seed}  "
            f"walls {to_hex(fg)} on {to_hex(bg)}"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
