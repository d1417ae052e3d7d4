# tetris_layout.py
from dataclasses import dataclass
from typing import Optional
from tetris_config import CONFIG
from tetris_piece import COLS, ROWS, FIGURE_SIZE


@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    preview_cell: int
    preview_x: int
    preview_y: int


def compute_dims(cell: Optional[int] = None) -> Dims:
    cell = int(cell or CONFIG["CELL_SIZE"])
    margin = 16
    panel_w = 200

    board_w = COLS * cell
    board_h = ROWS * cell
    preview_cell = max(12, cell * 3 // 4)
    panel_w = max(panel_w, FIGURE_SIZE * preview_cell + 24)

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=margin + board_w + margin + panel_w + margin,
        total_h=margin + board_h + margin,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y,
        preview_cell=preview_cell,
        preview_x=panel_x + 12,
        preview_y=panel_y + 40,
    )
