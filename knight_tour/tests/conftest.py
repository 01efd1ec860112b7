import sys
from pathlib import Path

import pytest

# Ensure the project root is importable when pytest starts from any directory
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import knight_tour as kt  # noqa: E402


@pytest.fixture
def five_by_five_tour():
    path = kt.find_tour(5, 5, (0, 0))
    assert path is not None
    return path


@pytest.fixture
def empty_visited():
    def _make(rows, cols, *cells):
        visited = [False] * (rows * cols)
        for x, y in cells:
            visited[y * cols + x] = True
        return visited

    return _make
