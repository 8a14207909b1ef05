#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Sudoku generator/solver engine: randomized backtracking search, bounded
solution counting for uniqueness checks, full-grid filling and
difficulty-calibrated clue removal.

Author: You
License: MIT
"""

from __future__ import annotations
import sys
import random
import logging
import argparse
from typing import List, Tuple, Optional

import numpy as np

log = logging.getLogger(__name__)

# ----------------------------
# Config & Constants
# ----------------------------

GRID = 9
BOX = 3
EMPTY = 0

# Inclusive clue-count range per difficulty tier
DIFFICULTY_CLUES = {
    "easy": (45, 50),
    "medium": (34, 39),
    "hard": (24, 29),
}
DEFAULT_DIFFICULTY = "medium"

# count_solutions cap used to answer "exactly one solution?"
UNIQUENESS_LIMIT = 2

Grid = List[List[int]]
Pos = Tuple[int, int]

# ----------------------------
# Utility
# ----------------------------

def empty_grid() -> Grid:
    return [[EMPTY] * GRID for _ in range(GRID)]

def copy_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]

def box_origin(r: int, c: int) -> Pos:
    return (r - r % BOX, c - c % BOX)

def _resolve_rng(rng: Optional[random.Random]):
    # Fall back to the process-wide generator seeded by the caller
    return random if rng is None else rng

def _fisher_yates(items: list, rng) -> list:
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items

def shuffled_digits(rng: Optional[random.Random] = None) -> List[int]:
    """Return a uniformly random permutation of 1..9."""
    return _fisher_yates(list(range(1, 10)), _resolve_rng(rng))

def as_array(grid: Grid) -> np.ndarray:
    return np.array(grid, dtype=np.int32)

def validate_grid(grid: Grid) -> None:
    """
    Raise ValueError unless grid is 9 rows of 9 integers in 0..9.
    """
    if len(grid) != GRID or any(len(row) != GRID for row in grid):
        raise ValueError(f"Grid must be {GRID}x{GRID}")
    arr = np.asarray(grid)
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValueError("Grid cells must be integers")
    if ((arr < EMPTY) | (arr > GRID)).any():
        raise ValueError(f"Grid cells must be in {EMPTY}..{GRID}")

def count_clues(grid: Grid) -> int:
    return int(np.count_nonzero(as_array(grid)))

def is_consistent(grid: Grid) -> bool:
    """True if no row, column or box holds a duplicate non-empty digit."""
    arr = as_array(grid)
    boxes = arr.reshape(BOX, BOX, BOX, BOX).transpose(0, 2, 1, 3).reshape(GRID, GRID)
    for unit in np.concatenate([arr, arr.T, boxes]):
        filled = unit[unit != EMPTY]
        if filled.size != np.unique(filled).size:
            return False
    return True

def is_complete(grid: Grid) -> bool:
    return find_unassigned(grid) is None and is_consistent(grid)

# ----------------------------
# Constraint Checking
# ----------------------------

def is_safe(grid: Grid, r: int, c: int, v: int) -> bool:
    """
    True if the cell is empty and v is absent from its row, column and box.
    """
    if grid[r][c] != EMPTY:
        return False
    for cc in range(GRID):
        if grid[r][cc] == v:
            return False
    for rr in range(GRID):
        if grid[rr][c] == v:
            return False
    br, bc = box_origin(r, c)
    for rr in range(br, br + BOX):
        for cc in range(bc, bc + BOX):
            if grid[rr][cc] == v:
                return False
    return True

def find_unassigned(grid: Grid) -> Optional[Pos]:
    # Row-major scan order keeps search reproducible for a fixed digit order
    for r in range(GRID):
        for c in range(GRID):
            if grid[r][c] == EMPTY:
                return (r, c)
    return None

# ----------------------------
# Backtracking Solver / Counter for Uniqueness
# ----------------------------

def solve(grid: Grid, rng: Optional[random.Random] = None) -> bool:
    """
    Solve grid in place. On failure the grid is left exactly as given.
    """
    empty = find_unassigned(grid)
    if not empty:
        return True
    r, c = empty
    for v in shuffled_digits(rng):
        if is_safe(grid, r, c, v):
            grid[r][c] = v
            if solve(grid, rng):
                return True
            grid[r][c] = EMPTY
    return False

def count_solutions(grid: Grid, limit: int = UNIQUENESS_LIMIT,
                    rng: Optional[random.Random] = None) -> int:
    """Count solutions up to 'limit'."""
    # Copy grid to avoid mutating caller
    g = copy_grid(grid)
    count = 0

    def backtrack() -> None:
        nonlocal count
        if count >= limit:
            return
        empty = find_unassigned(g)
        if not empty:
            count += 1
            return
        r, c = empty
        for v in shuffled_digits(rng):
            if is_safe(g, r, c, v):
                g[r][c] = v
                backtrack()
                g[r][c] = EMPTY
                if count >= limit:
                    return

    backtrack()
    return count

def has_unique_solution(grid: Grid, rng: Optional[random.Random] = None) -> bool:
    return count_solutions(grid, UNIQUENESS_LIMIT, rng) == 1

# ----------------------------
# Puzzle Generator
# ----------------------------

def fill_grid(grid: Grid, rng: Optional[random.Random] = None) -> bool:
    """Fill an empty grid with a randomized complete solution."""
    empty = find_unassigned(grid)
    if not empty:
        return True
    r, c = empty
    for v in shuffled_digits(rng):
        if is_safe(grid, r, c, v):
            grid[r][c] = v
            if fill_grid(grid, rng):
                return True
            grid[r][c] = EMPTY
    return False

def carve(grid: Grid, to_remove: int, rng: Optional[random.Random] = None) -> int:
    """
    Clear up to 'to_remove' cells of a solved grid in place, keeping a
    unique solution after every removal. Returns how many were cleared.

    Running out of removable cells before the target is fine: the puzzle
    simply keeps more clues than asked for.
    """
    rng = _resolve_rng(rng)
    cells = _fisher_yates(list(range(GRID * GRID)), rng)

    removed = 0
    for pos in cells:
        if removed >= to_remove:
            break
        r, c = divmod(pos, GRID)
        if grid[r][c] == EMPTY:
            continue
        saved = grid[r][c]
        grid[r][c] = EMPTY
        if count_solutions(grid, UNIQUENESS_LIMIT, rng) == 1:
            removed += 1
        else:
            grid[r][c] = saved

    if removed < to_remove:
        log.debug("Carving stopped at %d of %d removals", removed, to_remove)
    return removed

def clue_range(difficulty: str) -> Tuple[int, int]:
    return DIFFICULTY_CLUES.get(difficulty, DIFFICULTY_CLUES[DEFAULT_DIFFICULTY])

def generate(difficulty: str = DEFAULT_DIFFICULTY,
             rng: Optional[random.Random] = None) -> Grid:
    """
    Create a puzzle with a unique solution for the given difficulty tier.
    Unknown tiers use the medium clue range. The solution is not kept;
    re-solve the puzzle to get it.
    """
    rng = _resolve_rng(rng)

    while True:
        grid = empty_grid()
        if fill_grid(grid, rng):
            break
        log.warning("Could not fill an empty grid, restarting generation")

    lo, hi = clue_range(difficulty)
    clues = rng.randint(lo, hi)
    to_remove = GRID * GRID - clues
    log.debug("Generating %s puzzle: target %d clues", difficulty, clues)

    carve(grid, to_remove, rng)
    return grid

generate_puzzle = generate

def solve_puzzle(grid: Grid, rng: Optional[random.Random] = None) -> Tuple[Grid, bool]:
    """
    Solve a copy of grid. Returns (solution, True), or (unchanged copy, False)
    when the givens conflict or no completion exists.
    """
    validate_grid(grid)
    work = copy_grid(grid)
    if not is_consistent(work):
        return work, False
    return work, solve(work, rng)

# ----------------------------
# Rendering
# ----------------------------

SEPARATOR = "+-------+-------+-------+"

def format_grid(grid: Grid) -> str:
    lines = [SEPARATOR]
    for r in range(GRID):
        line = "| "
        for c in range(GRID):
            v = grid[r][c]
            line += ". " if v == EMPTY else f"{v} "
            if (c + 1) % BOX == 0:
                line += "| "
        lines.append(line.rstrip())
        if (r + 1) % BOX == 0:
            lines.append(SEPARATOR)
    return "\n".join(lines)

def grid_to_string(grid: Grid) -> str:
    return "".join("." if v == EMPTY else str(v) for row in grid for v in row)

def parse_grid(text: str) -> Grid:
    """
    Read 81 cells in row-major order. '0' or '.' is an empty cell;
    whitespace and the '|', '+', '-' drawing characters are ignored, so
    format_grid output reads back.
    """
    cells: List[int] = []
    for ch in text:
        if ch.isspace() or ch in "|+-":
            continue
        if ch == ".":
            cells.append(EMPTY)
        elif ch in "0123456789":
            cells.append(int(ch))
        else:
            raise ValueError(f"Unexpected character {ch!r} in grid text")
    if len(cells) != GRID * GRID:
        raise ValueError(f"Expected {GRID * GRID} cells, got {len(cells)}")
    return [cells[r * GRID:(r + 1) * GRID] for r in range(GRID)]

# ----------------------------
# Entry Point
# ----------------------------

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate and solve 9x9 Sudoku puzzles.")
    parser.add_argument("difficulty", nargs="?", default=DEFAULT_DIFFICULTY,
                        help="easy, medium or hard; anything else means medium (default: medium)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed the random generator for a reproducible puzzle")
    parser.add_argument("--solve", action="store_true",
                        help="Also print the solution")
    parser.add_argument("--puzzle", type=str, default=None,
                        help="Solve this puzzle instead of generating one (81 cells, 0 or . for empty)")
    parser.add_argument("--verbose", action="store_true",
                        help="Show debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.seed is not None:
        random.seed(args.seed)

    if args.puzzle is not None:
        try:
            puzzle = parse_grid(args.puzzle)
        except ValueError as e:
            parser.error(str(e))
        print("Given puzzle:")
    else:
        difficulty = args.difficulty.lower()
        puzzle = generate_puzzle(difficulty)
        print(f"Generated {difficulty} puzzle ({count_clues(puzzle)} clues):")
    print(format_grid(puzzle))

    if args.solve or args.puzzle is not None:
        solution, ok = solve_puzzle(puzzle)
        if not ok:
            print("No solution found.")
            return 1
        print("\nSolution:")
        print(format_grid(solution))
    return 0

if __name__ == "__main__":
    sys.exit(main())
