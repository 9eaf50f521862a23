#!/usr/bin/env python
"""
Tile Puzzle Solver

Usage:
    python solve_puzzle.py <input_path> [--output <png_path>] [--seed <n>] [--show]

Examples:
    python solve_puzzle.py ./tests/data/example_tiles.txt
    python solve_puzzle.py ./input.txt --output ./debug/composite.png --quiet

Pipeline:
    Assembly: place tiles by exact edge-fingerprint equality (part A)
    Scan: search the stitched image for the sea monster (part B)
"""

import argparse
import os
import sys

from core.errors import PuzzleError
from pipeline import SolverConfig, solve_file
from solvers.assembler import AssemblerConfig


def build_parser():
    parser = argparse.ArgumentParser(
        description="Assemble square tiles and search the image for sea monsters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Output:
  Part A: product of the four corner tile ids
  Part B: 'on' pixels not covered by a sea monster
        """
    )
    parser.add_argument("input_path", help="Path to the tile description file")
    parser.add_argument("--output", "-o", help="Save the composite image as PNG")
    parser.add_argument("--seed", "-s", type=int,
                        help="Shuffle tile and frontier order with this seed")
    parser.add_argument("--scale", type=int, default=8,
                        help="Pixels per image cell in the saved PNG")
    parser.add_argument("--print-image", action="store_true",
                        help="Print the matched orientation of the image as text")
    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress progress output")
    parser.add_argument("--show", action="store_true", help="Display the result")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if not os.path.exists(args.input_path):
        print(f"Error: Input not found: {args.input_path}")
        return 1

    verbose = not args.quiet
    config = SolverConfig(
        assembler=AssemblerConfig(shuffle_seed=args.seed),
        verbose=verbose,
    )

    try:
        solution = solve_file(args.input_path, config)
    except (PuzzleError, OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}")
        return 1

    print(f"Part A: {solution.corner_product}")
    print(f"Part B: {solution.roughness}")

    if args.print_image:
        print()
        print(solution.scan.image.to_text())

    if args.output:
        from visualization import save_composite
        path = save_composite(solution.image, args.output, solution.scan, args.scale)
        if verbose:
            print(f"\nSaved: {path}")

    if args.show:
        from visualization import display_composite
        display_composite(solution.image, solution.scan)

    return 0


if __name__ == "__main__":
    sys.exit(main())
