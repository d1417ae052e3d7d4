"""Field store: grid allocation, occupancy, row compaction"""
from typing import Iterable, List, Optional, Tuple
from tetris_piece import COLS, ROWS, FIGURE_SIZE

# Each cell holds the kind that filled it, None when empty
Board = List[List[Optional[str]]]


def new_grid(rows: int = ROWS, cols: int = COLS) -> Board:
    return [[None] * cols for _ in range(rows)]


def new_preview() -> Board:
    return new_grid(FIGURE_SIZE, FIGURE_SIZE)


def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < COLS and 0 <= y < ROWS


def set_cells(board: Board, cells: Iterable[Tuple[int,int]], kind: Optional[str]):
    """Mark (or clear, with kind=None) every in-bounds cell."""
    for x, y in cells:
        if in_bounds(x, y):
            board[y][x] = kind


def clear_cells(board: Board, cells: Iterable[Tuple[int,int]]):
    set_cells(board, cells, None)


def fits(board: Board, cells: Iterable[Tuple[int,int]]) -> bool:
    """True if every cell is on the grid and unoccupied."""
    for x, y in cells:
        if not in_bounds(x, y) or board[y][x]:
            return False
    return True


def row_full(board: Board, y: int) -> bool:
    return all(board[y][x] for x in range(COLS))


def clear_row(board: Board, y: int):
    board[y] = [None] * COLS


def shift_down(board: Board, y: int):
    """Drop every row above y by one, overwriting row y; row 0 becomes empty."""
    for yy in range(y, 0, -1):
        board[yy] = board[yy - 1][:]
    clear_row(board, 0)


def sweep(board: Board, limit: int = 4) -> int:
    """Clear full rows bottom-up and return how many were cleared (at most limit)."""
    cleared = 0
    y = ROWS - 1
    while y >= 0 and cleared < limit:
        if row_full(board, y):
            shift_down(board, y)
            cleared += 1
        else:
            y -= 1
    return cleared


def has_cells(board: Board) -> bool:
    return any(v for row in board for v in row)


def freeze(board: Optional[Board], rows: int, cols: int) -> Tuple[Tuple[Optional[str], ...], ...]:
    """Immutable copy for snapshots; an unallocated board reads as empty."""
    if board is None:
        return tuple((None,) * cols for _ in range(rows))
    return tuple(tuple(row) for row in board)
