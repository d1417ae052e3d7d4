"""Piece randomizer"""
import time
from typing import Optional
from tetris_piece import PIECES

MASK32 = 0xFFFFFFFF


def clock_seed() -> int:
    """Seed taken from the wall clock, so each launch deals differently."""
    return time.time_ns() & MASK32


class PieceRandom:
    """
    Deals piece kinds straight from PIECES with a 32-bit LCG.

    With repeat_rejection a kind equal to the last one dealt gets a single
    coin flip to be redrawn; the redraw may repeat again.
    """
    def __init__(self, seed: Optional[int] = None, repeat_rejection: bool = True):
        self.state = (clock_seed() if seed is None else seed) & MASK32
        self.last: Optional[str] = None
        self.repeat_rejection = repeat_rejection

    def _draw(self) -> int:
        self.state = (self.state * 1103515245 + 12345) & MASK32
        return self.state >> 16

    def _pick(self) -> str:
        return PIECES[self._draw() % len(PIECES)]

    def next_kind(self) -> str:
        kind = self._pick()
        if self.repeat_rejection and kind == self.last and self._draw() & 1:
            kind = self._pick()
        self.last = kind
        return kind
