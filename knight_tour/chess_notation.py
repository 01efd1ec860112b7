#! /usr/bin/env python
"""Algebraic squares ("a1", "c2", ...) to and from (x, y) cells."""

from knight_tour import Cell, is_valid


class InvalidSquareError(ValueError):
    pass


def parse_square(coord: str, rows: int, cols: int) -> Cell:
    """very minimal validation: one file letter, one rank digit, on the board"""
    if len(coord) != 2:
        raise InvalidSquareError(f"Input {coord} incorrect format")
    x = ord(coord[0].lower()) - ord("a")
    y = ord(coord[1]) - ord("1")
    if not is_valid(x, y, rows, cols):
        raise InvalidSquareError(f"Square {coord} is outside the {rows}x{cols} board")
    return x, y


def format_square(cell: Cell) -> str:
    x, y = cell
    return chr(x + ord("a")) + str(y + 1)
