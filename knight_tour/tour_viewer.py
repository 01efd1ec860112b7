#! /usr/bin/env python

from typing import Dict, Sequence

from textual.app import App, ComposeResult
from textual.containers import Grid
from textual.widgets import Static

from knight_tour import Cell
from tour_render import step_grid


class TourViewerApp(App[None]):
    CSS = """
    Grid {
        & .cell {
            width: 1fr;
            height: 1fr;
            content-align: center middle;
            text-style: bold;
        }
        & .white-bg { background: #f0d9b5; color: black; }
        & .black-bg { background: #b58863; color: white; }
    }
    """

    BINDINGS = [("q", "quit", "Quit")]

    def __init__(self, rows: int, cols: int, path: Sequence[Cell]):
        super().__init__()
        self.rows = rows
        self.cols = cols
        self.steps = step_grid(rows, cols, path)
        self.grid_widgets: Dict[Cell, Static] = {}

    def compose(self) -> ComposeResult:
        with Grid(id="board"):
            # rank 1 goes at the bottom, like a chess diagram
            for y in reversed(range(self.rows)):
                for x in range(self.cols):
                    color_class = "black-bg" if (x + y) % 2 == 0 else "white-bg"
                    step = self.steps[y][x]
                    widget = Static(
                        "." if step is None else str(step),
                        classes=f"cell {color_class}",
                    )
                    self.grid_widgets[(x, y)] = widget
                    yield widget

    def on_mount(self) -> None:
        board = self.query_one("#board", Grid)
        board.styles.grid_size_columns = self.cols
        board.styles.grid_size_rows = self.rows
