#!/usr/bin/env python3
# Time each carver at a couple of grid sizes.

import argparse, timeit

from minotaur.grid import Grid
from minotaur.mapgen.generator import ALGORITHMS, lookup


def bench(name, width, height, number):
    carve = lookup(name)
    grid = Grid(width, height)
    total = timeit.timeit(lambda: carve(grid, 0), number=number)
    return total / number

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--algorithm", action="append", help="Only these (repeatable)")
    ap.add_argument("--size", type=int, action="append", help="Square sizes (default 10 and 100)")
    ap.add_argument("--number", type=int, default=5, help="Runs per measurement")
    args = ap.parse_args()

    names = args.algorithm or list(ALGORITHMS)
    sizes = args.size or [10, 100]
    for name in names:
        for n in sizes:
            per = bench(name, n, n, args.number)
            print(f"{name:<24} {n:>4}x{n:<4} {per * 1000:10.3f} ms")

if __name__ == "__main__":
    main()
