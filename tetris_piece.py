"""Piece catalog: shapes, rotation counts, wall kicks"""
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

COLS, ROWS = 10, 20
FIGURE_SIZE = 4
FIGURE_POINTS = 4

PIECES = ("I", "L", "O", "T", "S", "Z", "J")

_EMPTY = [[0,0,0,0],[0,0,0,0],[0,0,0,0],[0,0,0,0]]

# 4x4 masks per rotation; unused rotation slots stay empty
SHAPES: Dict[str, List[List[List[int]]]] = {
    "I": [
        [[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]],
        [[0,0,1,0],[0,0,1,0],[0,0,1,0],[0,0,1,0]],
        _EMPTY,
        _EMPTY,
    ],
    "L": [
        [[0,1,0,0],[0,1,0,0],[0,1,1,0],[0,0,0,0]],
        [[0,0,0,0],[0,1,1,1],[0,1,0,0],[0,0,0,0]],
        [[0,0,0,0],[0,1,1,0],[0,0,1,0],[0,0,1,0]],
        [[0,0,0,0],[0,0,1,0],[1,1,1,0],[0,0,0,0]],
    ],
    "O": [
        [[0,1,1,0],[0,1,1,0],[0,0,0,0],[0,0,0,0]],
        _EMPTY,
        _EMPTY,
        _EMPTY,
    ],
    "T": [
        [[0,1,0,0],[1,1,1,0],[0,0,0,0],[0,0,0,0]],
        [[0,1,0,0],[0,1,1,0],[0,1,0,0],[0,0,0,0]],
        [[0,0,0,0],[1,1,1,0],[0,1,0,0],[0,0,0,0]],
        [[0,1,0,0],[1,1,0,0],[0,1,0,0],[0,0,0,0]],
    ],
    "S": [
        [[1,1,0,0],[0,1,1,0],[0,0,0,0],[0,0,0,0]],
        [[0,0,1,0],[0,1,1,0],[0,1,0,0],[0,0,0,0]],
        _EMPTY,
        _EMPTY,
    ],
    "Z": [
        [[0,1,1,0],[1,1,0,0],[0,0,0,0],[0,0,0,0]],
        [[0,1,0,0],[0,1,1,0],[0,0,1,0],[0,0,0,0]],
        _EMPTY,
        _EMPTY,
    ],
    "J": [
        [[0,0,1,0],[0,0,1,0],[0,1,1,0],[0,0,0,0]],
        [[0,0,0,0],[0,1,0,0],[0,1,1,1],[0,0,0,0]],
        [[0,0,0,0],[0,1,1,0],[0,1,0,0],[0,1,0,0]],
        [[0,0,0,0],[1,1,1,0],[0,0,1,0],[0,0,0,0]],
    ],
}

ROTATIONS: Dict[str, int] = {"I": 2, "L": 4, "O": 1, "T": 4, "S": 2, "Z": 2, "J": 4}

# Tried in order, first fit wins. I uses all seven, the rest the first five.
KICKS: List[Tuple[int,int]] = [(0,0), (1,0), (-1,0), (0,1), (0,-1), (2,0), (-2,0)]


def shape(kind: str, rotation: int) -> List[List[int]]:
    return SHAPES[kind][rotation]


def rotation_count(kind: str) -> int:
    return ROTATIONS[kind]


def kick_offsets(kind: str) -> List[Tuple[int,int]]:
    return KICKS if kind == "I" else KICKS[:5]


def mask_cells(kind: str, rotation: int, x: int, y: int) -> List[Tuple[int,int]]:
    """Absolute (x, y) cells of a mask anchored at its top-left corner."""
    return [(x + c, y + r)
            for r, row in enumerate(shape(kind, rotation))
            for c, v in enumerate(row) if v]


@dataclass
class ActivePiece:
    kind: str
    rotation: int
    x: int
    y: int
    cells: List[Tuple[int,int]] = field(default_factory=list)

    @staticmethod
    def at(kind: str, rotation: int, x: int, y: int) -> "ActivePiece":
        return ActivePiece(kind, rotation, x, y, mask_cells(kind, rotation, x, y))
