#! /usr/bin/env python
"""
Text output for a finished tour: the board with the step number on every
square, and the trace of squares in chess notation.
"""

from typing import List, Optional, Sequence

from rich.table import Table

from chess_notation import format_square
from knight_tour import Cell

STEPS_PER_LINE = 5


def step_grid(rows: int, cols: int, path: Sequence[Cell]) -> List[List[Optional[int]]]:
    """grid[y][x] is the 1-based step at which the knight lands on (x, y)"""
    grid: List[List[Optional[int]]] = [[None] * cols for _ in range(rows)]
    for step, (x, y) in enumerate(path, start=1):
        grid[y][x] = step
    return grid


def file_letters(cols: int) -> List[str]:
    return [chr(ord("a") + x) for x in range(cols)]


def format_board(rows: int, cols: int, path: Sequence[Cell]) -> str:
    """Rank 1 at the bottom, file a on the left, '.' for squares not on the path"""
    grid = step_grid(rows, cols, path)
    lines = ["   " + "".join(f"  {letter} " for letter in file_letters(cols))]
    for y in reversed(range(rows)):
        cells = "".join("  . " if s is None else f"{s:3d} " for s in grid[y])
        lines.append(f"{y + 1:2d} {cells}")
    return "\n".join(line.rstrip() for line in lines)


def format_trace(path: Sequence[Cell]) -> str:
    steps = [f"Step {i:2d}: {format_square(cell)}" for i, cell in enumerate(path, start=1)]
    return "\n".join(
        " -> ".join(steps[i : i + STEPS_PER_LINE])
        for i in range(0, len(steps), STEPS_PER_LINE)
    )


def board_table(rows: int, cols: int, path: Sequence[Cell]) -> Table:
    grid = step_grid(rows, cols, path)
    table = Table(title=f"Knight's tour {rows}x{cols}", show_lines=True)
    table.add_column("", justify="right", style="bold")
    for letter in file_letters(cols):
        table.add_column(letter, justify="right")
    for y in reversed(range(rows)):
        table.add_row(str(y + 1), *("." if s is None else str(s) for s in grid[y]))
    return table
