#! /usr/bin/env python
"""
Knight's tour on an N x M board.

Depth-first search with backtracking, trying the moves in Warnsdorff's order
(the reachable unvisited square with the fewest onward moves goes first).
The greedy heuristic on its own can strand the knight; backtracking makes the
search complete, just potentially slow.

Cells are (x, y): x is the file/column and is bounded by cols, y is the
rank/row and is bounded by rows.
"""

import logging
from dataclasses import dataclass, field
from itertools import pairwise
from typing import List, Optional, Sequence, Tuple

LOG_LEVEL = logging.ERROR
logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s:%(name)s:%(message)s")
logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

KNIGHT_MOVES: Tuple[Cell, ...] = (
    (2, 1),
    (1, 2),
    (-1, 2),
    (-2, 1),
    (-2, -1),
    (-1, -2),
    (1, -2),
    (2, -1),
)
# ranks moves that leave the board or land on a visited square after all real ones
SENTINEL_DEGREE = 9
# past this many squares the driver switches to the explicit-stack search
RECURSIVE_MAX_CELLS = 800


class InvalidBoardError(ValueError):
    pass


class SearchBudgetExceeded(RuntimeError):
    def __init__(self, nodes: int) -> None:
        super().__init__(f"Search gave up after placing {nodes} squares")
        self.nodes = nodes


def is_valid(x: int, y: int, rows: int, cols: int) -> bool:
    return 0 <= x < cols and 0 <= y < rows


def count_valid_moves(
    x: int, y: int, rows: int, cols: int, visited: Sequence[bool]
) -> int:
    """Onward moves from (x, y) that stay on the board and hit an unvisited square"""
    count = 0
    for dx, dy in KNIGHT_MOVES:
        nx, ny = x + dx, y + dy
        if is_valid(nx, ny, rows, cols) and not visited[ny * cols + nx]:
            count += 1
    return count


def rank_moves(
    x: int, y: int, rows: int, cols: int, visited: Sequence[bool]
) -> List[int]:
    """Indices into KNIGHT_MOVES, fewest onward moves first (Warnsdorff).

    Moves that are off the board or already visited get SENTINEL_DEGREE, so
    they end up last. Ties keep the KNIGHT_MOVES order, which is what makes
    the tour for a given start reproducible.
    """
    degrees = []
    for dx, dy in KNIGHT_MOVES:
        nx, ny = x + dx, y + dy
        if is_valid(nx, ny, rows, cols) and not visited[ny * cols + nx]:
            degrees.append(count_valid_moves(nx, ny, rows, cols, visited))
        else:
            degrees.append(SENTINEL_DEGREE)
    return sorted(range(len(KNIGHT_MOVES)), key=lambda i: (degrees[i], i))


@dataclass
class TourState:
    """Visited squares and the path buffer, shared by a whole search.

    Slots of `path` past the current step are leftovers from abandoned
    branches; they get overwritten by the next attempt.
    """

    rows: int
    cols: int
    max_nodes: Optional[int] = None
    nodes: int = 0
    visited: List[bool] = field(init=False)
    path: List[Optional[Cell]] = field(init=False)

    def __post_init__(self):
        self.visited = [False] * (self.rows * self.cols)
        self.path = [None] * (self.rows * self.cols)

    @property
    def total(self) -> int:
        return self.rows * self.cols

    def index(self, x: int, y: int) -> int:
        return y * self.cols + x

    def is_free(self, x: int, y: int) -> bool:
        return is_valid(x, y, self.rows, self.cols) and not self.visited[self.index(x, y)]

    def seed(self, x: int, y: int) -> None:
        self.visited = [False] * self.total
        self.visited[self.index(x, y)] = True
        self.path[0] = (x, y)

    def place(self, x: int, y: int, step: int) -> None:
        self.nodes += 1
        if self.max_nodes is not None and self.nodes > self.max_nodes:
            raise SearchBudgetExceeded(self.max_nodes)
        self.visited[self.index(x, y)] = True
        self.path[step] = (x, y)

    def unplace(self, x: int, y: int) -> None:
        self.visited[self.index(x, y)] = False


def search(state: TourState, x: int, y: int, step: int) -> bool:
    """Try to extend the path from (x, y), which sits at path[step - 1].

    On failure `state.visited` is exactly what it was on entry.
    """
    if step == state.total:
        return True

    for move in rank_moves(x, y, state.rows, state.cols, state.visited):
        dx, dy = KNIGHT_MOVES[move]
        nx, ny = x + dx, y + dy
        if not state.is_free(nx, ny):
            continue
        state.place(nx, ny, step)
        if search(state, nx, ny, step + 1):
            return True
        state.unplace(nx, ny)

    return False


@dataclass
class _Frame:
    x: int
    y: int
    step: int
    moves: List[int]
    cursor: int = 0


def search_iterative(state: TourState, x: int, y: int, step: int) -> bool:
    """Same search as `search`, with an explicit stack instead of recursion.

    Tries squares in the same order, so it returns the same path. Use it when
    rows * cols gets close to the interpreter's recursion limit.
    """
    if step == state.total:
        return True

    stack = [_Frame(x, y, step, rank_moves(x, y, state.rows, state.cols, state.visited))]
    while stack:
        frame = stack[-1]
        if frame.cursor == len(frame.moves):
            stack.pop()
            if stack:
                # the root square belongs to the caller
                state.unplace(frame.x, frame.y)
            continue

        dx, dy = KNIGHT_MOVES[frame.moves[frame.cursor]]
        frame.cursor += 1
        nx, ny = frame.x + dx, frame.y + dy
        if not state.is_free(nx, ny):
            continue
        state.place(nx, ny, frame.step)
        if frame.step + 1 == state.total:
            return True
        stack.append(
            _Frame(
                nx,
                ny,
                frame.step + 1,
                rank_moves(nx, ny, state.rows, state.cols, state.visited),
            )
        )

    return False


@dataclass
class TourResult:
    rows: int
    cols: int
    start: Cell
    path: Optional[List[Cell]]
    nodes: int = 0

    @property
    def found(self) -> bool:
        return self.path is not None


def solve_tour(
    rows: int,
    cols: int,
    start: Cell,
    *,
    iterative: bool = False,
    max_nodes: Optional[int] = None,
) -> TourResult:
    if rows <= 0 or cols <= 0:
        raise InvalidBoardError(f"Board dimensions must be positive, got {rows}x{cols}")
    x, y = start
    if not is_valid(x, y, rows, cols):
        raise InvalidBoardError(f"Start {start} is outside the {rows}x{cols} board")

    state = TourState(rows, cols, max_nodes=max_nodes)
    state.seed(x, y)
    if not iterative and state.total > RECURSIVE_MAX_CELLS:
        logger.debug(f"{rows}x{cols} is too deep to recurse, using the explicit stack")
        iterative = True
    runner = search_iterative if iterative else search

    logger.debug(f"Searching {rows}x{cols} from {start} ({runner.__name__})")
    try:
        found = runner(state, x, y, 1)
    except SearchBudgetExceeded:
        state.seed(x, y)
        logger.debug(f"Budget of {max_nodes} squares exhausted")
        raise

    logger.debug(f"{'Found' if found else 'No'} tour after placing {state.nodes} squares")
    path = list(state.path) if found else None
    return TourResult(rows, cols, (x, y), path, state.nodes)


def find_tour(
    rows: int,
    cols: int,
    start: Cell,
    *,
    iterative: bool = False,
    max_nodes: Optional[int] = None,
) -> Optional[List[Cell]]:
    """Full tour starting at `start`, or None when the search runs out of moves"""
    return solve_tour(rows, cols, start, iterative=iterative, max_nodes=max_nodes).path


def is_knight_move(a: Cell, b: Cell) -> bool:
    return (b[0] - a[0], b[1] - a[1]) in KNIGHT_MOVES


def is_valid_tour(path: Sequence[Cell], rows: int, cols: int) -> bool:
    if len(path) != rows * cols:
        return False
    if not all(is_valid(x, y, rows, cols) for x, y in path):
        return False
    if len(set(path)) != len(path):
        return False
    return all(is_knight_move(a, b) for a, b in pairwise(path))


def is_closed_tour(path: Sequence[Cell]) -> bool:
    """The last square is a knight's move away from the first"""
    return len(path) > 1 and is_knight_move(path[-1], path[0])
